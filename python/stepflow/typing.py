"""Type aliases for the stepflow public API."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from .network import Edge

NodeId = int
Capacity = int
FlowValue = int

EdgeKey = Tuple[NodeId, NodeId]
Layers = List[List[NodeId]]
Path = Tuple[NodeId, ...]
DiscoveryMap = Dict[NodeId, "Edge"]

__all__ = [
    "Capacity",
    "DiscoveryMap",
    "EdgeKey",
    "FlowValue",
    "Layers",
    "NodeId",
    "Path",
]

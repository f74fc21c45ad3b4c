"""Augmenting path search over the residual network.

Vertex capacities are enforced during the search rather than by splitting
nodes: an edge is only crossed when the edge and both of its endpoints still
have spare capacity.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .network import Edge, FlowNetwork
from .typing import DiscoveryMap, NodeId

__all__ = ["SEARCH_ORDERS", "bottleneck", "find_augmenting_paths", "trace_path"]

SEARCH_ORDERS = ("fifo", "lifo")


def _is_residual(edge: Edge) -> bool:
    return (
        edge.remaining_capacity > 0
        and edge.source.remaining_capacity > 0
        and edge.destination.remaining_capacity > 0
    )


def find_augmenting_paths(
    network: FlowNetwork,
    source_id: NodeId,
    sink_id: NodeId,
    *,
    order: str = "fifo",
) -> DiscoveryMap:
    """Search the residual network from ``source_id`` toward ``sink_id``.

    Args:
        network: Network whose current flow defines the residual graph.
        source_id: Node the search starts from.
        sink_id: Node the search stops at once discovered.
        order: ``"fifo"`` explores breadth-first and finds a shortest residual
            path. ``"lifo"`` explores the most recently discovered node first,
            which finds some feasible path but not necessarily a short one.

    Returns:
        A map from every discovered node id to the edge used to reach it. The
        source has no entry; the sink has one exactly when a path exists.
    """
    if order not in SEARCH_ORDERS:
        raise ValueError(f"Unsupported search order: {order}")
    source = network.get_node(source_id)
    network.get_node(sink_id)

    discovered: DiscoveryMap = {}
    visited = {source_id}
    frontier = deque([source])
    take = frontier.popleft if order == "fifo" else frontier.pop
    while frontier:
        current = take()
        if current.remaining_capacity <= 0:
            continue
        for edge in current.outgoing_edges:
            neighbor = edge.destination
            if neighbor.id in visited or not _is_residual(edge):
                continue
            visited.add(neighbor.id)
            discovered[neighbor.id] = edge
            if neighbor.id == sink_id:
                return discovered
            frontier.append(neighbor)
    return discovered


def trace_path(discovery: DiscoveryMap, source_id: NodeId, sink_id: NodeId) -> list[Edge]:
    """Rebuild the source-to-sink edge list from a discovery map.

    Returns an empty list when the sink was not discovered.
    """
    if sink_id not in discovery:
        return []
    path: list[Edge] = []
    node_id = sink_id
    while node_id != source_id:
        edge = discovery[node_id]
        path.append(edge)
        node_id = edge.source.id
    path.reverse()
    return path


def bottleneck(path: Sequence[Edge]) -> int:
    """Return the largest amount that can be pushed along ``path``.

    Every edge contributes its own remaining capacity and that of both of its
    endpoints.
    """
    if not path:
        return 0
    return min(
        min(edge.remaining_capacity, edge.source.remaining_capacity, edge.destination.remaining_capacity)
        for edge in path
    )

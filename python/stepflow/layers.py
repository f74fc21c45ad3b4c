"""Breadth-first layering of a network, for layout by external renderers."""
from __future__ import annotations

from collections import deque
from typing import Union

from .errors import UnknownNode
from .network import FlowNetwork, NetworkView
from .typing import Layers, NodeId

__all__ = ["layer_distances", "partition_layers"]

NetworkLike = Union[FlowNetwork, NetworkView]


def layer_distances(network: NetworkLike, start_id: NodeId) -> dict[NodeId, int]:
    """Return the BFS distance of every node reachable from ``start_id``.

    Outgoing edges are followed regardless of capacity or flow.
    """
    if not network.has_node(start_id):
        raise UnknownNode(f"network has no node with id={start_id!r}")
    distances = {start_id: 0}
    queue = deque([start_id])
    while queue:
        current = queue.popleft()
        for neighbor in network.successors(current):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)
    return distances


def partition_layers(network: NetworkLike, start_id: NodeId) -> Layers:
    """Split the nodes reachable from ``start_id`` into layers by BFS distance.

    Layer ``k`` lists the ids at distance ``k`` in ascending order. Nodes that
    cannot be reached are left out and an empty network gives no layers.

    Example:
        >>> from stepflow import parse
        >>> partition_layers(parse("3 2\\n1 1 1\\n0 1 1\\n1 2 1\\n"), 0)
        [[0], [1], [2]]
    """
    if len(network) == 0:
        return []
    distances = layer_distances(network, start_id)
    layers: Layers = [[] for _ in range(max(distances.values()) + 1)]
    for node_id in sorted(distances):
        layers[distances[node_id]].append(node_id)
    return layers

"""Flow network with capacities on both nodes and edges.

The network owns every :class:`Node` and :class:`Edge`. Nodes keep references
to their incident edges, split by direction, and every flow value is checked
against its capacity on assignment. Topology is built once and never edited;
load a new description to get a new network.
"""
from __future__ import annotations

from dataclasses import dataclass

import networkx as nx
import numpy as np

from .errors import (
    CapacityExceeded,
    DanglingEdge,
    DuplicateNode,
    InvalidCapacity,
    InvalidNodeId,
    UnknownNode,
)
from .typing import Capacity, FlowValue, NodeId

__all__ = ["Edge", "EdgeState", "FlowNetwork", "Node", "NodeState", "NetworkView"]


def _is_integer(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, np.integer))


def _check_capacity(capacity, owner: str) -> int:
    if not _is_integer(capacity) or capacity < 0:
        raise InvalidCapacity(f"{owner} capacity must be a non-negative integer, got {capacity!r}")
    return int(capacity)


def _check_flow(value, capacity: int, owner: str) -> int:
    if not _is_integer(value) or value < 0 or value > capacity:
        raise CapacityExceeded(f"{owner} flow {value!r} is outside [0, {capacity}]")
    return int(value)


class Node:
    """A capacitated node; ``flow`` counts the units passing through it."""

    __slots__ = ("_id", "_capacity", "_flow", "_outgoing", "_incoming")

    def __init__(self, node_id: NodeId, capacity: Capacity) -> None:
        if not _is_integer(node_id) or node_id < 0:
            raise InvalidNodeId(f"node id must be a non-negative integer, got {node_id!r}")
        self._id = int(node_id)
        self._capacity = _check_capacity(capacity, f"node {node_id}")
        self._flow = 0
        self._outgoing: list[Edge] = []
        self._incoming: list[Edge] = []

    @property
    def id(self) -> NodeId:
        return self._id

    @property
    def capacity(self) -> Capacity:
        return self._capacity

    @property
    def flow(self) -> FlowValue:
        return self._flow

    @flow.setter
    def flow(self, value: FlowValue) -> None:
        self._flow = _check_flow(value, self._capacity, f"node {self._id}")

    @property
    def remaining_capacity(self) -> int:
        return self._capacity - self._flow

    @property
    def outgoing_edges(self) -> tuple[Edge, ...]:
        return tuple(self._outgoing)

    @property
    def incoming_edges(self) -> tuple[Edge, ...]:
        return tuple(self._incoming)

    def _attach(self, edge: Edge) -> None:
        # A self-loop lands in both lists.
        attached = False
        if edge.source is self:
            self._outgoing.append(edge)
            attached = True
        if edge.destination is self:
            self._incoming.append(edge)
            attached = True
        if not attached:
            raise ValueError(f"edge {edge.key} does not touch node {self._id}")

    def __repr__(self) -> str:
        return f"Node(id={self._id}, flow={self._flow}, capacity={self._capacity})"


class Edge:
    """A directed, capacitated edge between two nodes of one network."""

    __slots__ = ("_source", "_destination", "_capacity", "_flow")

    def __init__(self, source: Node, destination: Node, capacity: Capacity) -> None:
        self._source = source
        self._destination = destination
        self._capacity = _check_capacity(capacity, f"edge {source.id}->{destination.id}")
        self._flow = 0

    @property
    def source(self) -> Node:
        return self._source

    @property
    def destination(self) -> Node:
        return self._destination

    @property
    def key(self) -> tuple[NodeId, NodeId]:
        return self._source.id, self._destination.id

    @property
    def capacity(self) -> Capacity:
        return self._capacity

    @property
    def flow(self) -> FlowValue:
        return self._flow

    @flow.setter
    def flow(self, value: FlowValue) -> None:
        self._flow = _check_flow(value, self._capacity, f"edge {self._source.id}->{self._destination.id}")

    @property
    def remaining_capacity(self) -> int:
        return self._capacity - self._flow

    def __repr__(self) -> str:
        return (
            f"Edge({self._source.id}->{self._destination.id}, "
            f"flow={self._flow}, capacity={self._capacity})"
        )


@dataclass(frozen=True)
class NodeState:
    id: NodeId
    capacity: Capacity
    flow: FlowValue

    @property
    def remaining_capacity(self) -> int:
        return self.capacity - self.flow


@dataclass(frozen=True)
class EdgeState:
    source: NodeId
    destination: NodeId
    capacity: Capacity
    flow: FlowValue

    @property
    def remaining_capacity(self) -> int:
        return self.capacity - self.flow


class FlowNetwork:
    """Directed graph with node and edge capacities.

    Example:
        >>> network = FlowNetwork()
        >>> network.create_node(0, 5)
        Node(id=0, flow=0, capacity=5)
        >>> network.create_node(1, 5)
        Node(id=1, flow=0, capacity=5)
        >>> network.create_edge(0, 1, 3)
        Edge(0->1, flow=0, capacity=3)
        >>> [edge.key for edge in network.edges]
        [(0, 1)]
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._node_map: dict[NodeId, Node] = {}

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._node_map

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._node_map

    def node_ids(self) -> list[NodeId]:
        return [node.id for node in self._nodes]

    def get_node(self, node_id: NodeId) -> Node:
        try:
            return self._node_map[node_id]
        except (KeyError, TypeError):
            raise UnknownNode(f"network has no node with id={node_id!r}") from None

    def successors(self, node_id: NodeId) -> list[NodeId]:
        return [edge.destination.id for edge in self.get_node(node_id)._outgoing]

    def create_node(self, node_id: NodeId, capacity: Capacity) -> Node:
        """Add a node with the given id and capacity and return it."""
        if _is_integer(node_id) and node_id in self._node_map:
            raise DuplicateNode(f"network already has a node with id={node_id}")
        node = Node(node_id, capacity)
        self._nodes.append(node)
        self._node_map[node.id] = node
        return node

    def create_edge(self, source_id: NodeId, destination_id: NodeId, capacity: Capacity) -> Edge:
        """Add a directed edge; both endpoints must already exist."""
        source = self._node_map.get(source_id) if _is_integer(source_id) else None
        destination = self._node_map.get(destination_id) if _is_integer(destination_id) else None
        if source is None or destination is None:
            raise DanglingEdge(
                f"network does not contain both sides of edge {source_id!r}->{destination_id!r}"
            )
        edge = Edge(source, destination, capacity)
        source._attach(edge)
        if destination is not source:
            destination._attach(edge)
        self._edges.append(edge)
        return edge

    def total_flow_out(self, node_id: NodeId) -> FlowValue:
        return sum(edge.flow for edge in self.get_node(node_id)._outgoing)

    def total_flow_in(self, node_id: NodeId) -> FlowValue:
        return sum(edge.flow for edge in self.get_node(node_id)._incoming)

    def view(self) -> NetworkView:
        """Return a read-only view for consumers that must not touch flow."""
        return NetworkView(self)

    def node_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(ids, capacity, flow)`` as int64 arrays in creation order."""
        ids = np.asarray([node.id for node in self._nodes], dtype=np.int64)
        capacity = np.asarray([node.capacity for node in self._nodes], dtype=np.int64)
        flow = np.asarray([node.flow for node in self._nodes], dtype=np.int64)
        return ids, capacity, flow

    def edge_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(tail, head, capacity, flow)`` as int64 arrays in creation order."""
        tail = np.asarray([edge.source.id for edge in self._edges], dtype=np.int64)
        head = np.asarray([edge.destination.id for edge in self._edges], dtype=np.int64)
        capacity = np.asarray([edge.capacity for edge in self._edges], dtype=np.int64)
        flow = np.asarray([edge.flow for edge in self._edges], dtype=np.int64)
        return tail, head, capacity, flow

    def to_networkx(self) -> nx.DiGraph:
        """Export topology, capacities and current flow as a NetworkX DiGraph.

        Parallel edges are merged by summing their capacity and flow.
        """
        graph = nx.DiGraph()
        for node in self._nodes:
            graph.add_node(node.id, capacity=node.capacity, flow=node.flow)
        for edge in self._edges:
            u, v = edge.key
            if graph.has_edge(u, v):
                graph.edges[u, v]["capacity"] += edge.capacity
                graph.edges[u, v]["flow"] += edge.flow
            else:
                graph.add_edge(u, v, capacity=edge.capacity, flow=edge.flow)
        return graph

    def __repr__(self) -> str:
        return f"FlowNetwork(nodes={len(self._nodes)}, edges={len(self._edges)})"


class NetworkView:
    """Read-only window onto a :class:`FlowNetwork`.

    Snapshots are taken on every access, so they reflect the flow at the time
    of the call and cannot be used to modify the network.
    """

    __slots__ = ("_network",)

    def __init__(self, network: FlowNetwork) -> None:
        self._network = network

    @property
    def nodes(self) -> tuple[NodeState, ...]:
        return tuple(NodeState(node.id, node.capacity, node.flow) for node in self._network._nodes)

    @property
    def edges(self) -> tuple[EdgeState, ...]:
        return tuple(
            EdgeState(edge.source.id, edge.destination.id, edge.capacity, edge.flow)
            for edge in self._network._edges
        )

    def __len__(self) -> int:
        return len(self._network)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._network

    def has_node(self, node_id: NodeId) -> bool:
        return self._network.has_node(node_id)

    def node_ids(self) -> list[NodeId]:
        return self._network.node_ids()

    def node(self, node_id: NodeId) -> NodeState:
        node = self._network.get_node(node_id)
        return NodeState(node.id, node.capacity, node.flow)

    def successors(self, node_id: NodeId) -> list[NodeId]:
        return self._network.successors(node_id)

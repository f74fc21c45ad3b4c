"""Independent maximum flow and minimum cut via NetworkX.

Vertex capacities are modelled the classical way here: every node ``v`` is
split into ``(v, "in") -> (v, "out")`` carrying the node capacity, and every
edge ``u -> v`` becomes ``(u, "out") -> (v, "in")``. The result serves as an
oracle for :class:`~stepflow.stepper.MaxFlowStepper`, which folds vertex
capacities into its path search instead.
"""
from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from .network import FlowNetwork
from .typing import EdgeKey, FlowValue, NodeId

__all__ = ["MinCut", "reference_max_flow", "reference_min_cut", "split_node_graph"]

IN = "in"
OUT = "out"


@dataclass(frozen=True)
class MinCut:
    value: FlowValue
    nodes: tuple[NodeId, ...]
    edges: tuple[EdgeKey, ...]


def split_node_graph(network: FlowNetwork) -> nx.DiGraph:
    """Return the split-node DiGraph of ``network`` with ``capacity`` attributes.

    Parallel edges are merged by summing their capacities.
    """
    graph = nx.DiGraph()
    for node in network.nodes:
        graph.add_edge((node.id, IN), (node.id, OUT), capacity=node.capacity)
    for edge in network.edges:
        u, v = (edge.source.id, OUT), (edge.destination.id, IN)
        if graph.has_edge(u, v):
            graph.edges[u, v]["capacity"] += edge.capacity
        else:
            graph.add_edge(u, v, capacity=edge.capacity)
    return graph


def _terminals(network: FlowNetwork, source_id: NodeId, sink_id: NodeId):
    network.get_node(source_id)
    network.get_node(sink_id)
    if source_id == sink_id:
        raise ValueError("source and sink must differ.")
    return (source_id, IN), (sink_id, OUT)


def reference_max_flow(network: FlowNetwork, source_id: NodeId, sink_id: NodeId) -> FlowValue:
    """Compute the maximum flow value, ignoring the network's current flow.

    Source and sink capacities bound the result like any other node.
    """
    source, sink = _terminals(network, source_id, sink_id)
    value = nx.maximum_flow_value(split_node_graph(network), source, sink, capacity="capacity")
    return int(value)


def reference_min_cut(network: FlowNetwork, source_id: NodeId, sink_id: NodeId) -> MinCut:
    """Compute a minimum cut, reported as saturated nodes and edges."""
    source, sink = _terminals(network, source_id, sink_id)
    graph = split_node_graph(network)
    value, (reachable, _rest) = nx.minimum_cut(graph, source, sink, capacity="capacity")
    cut_nodes = []
    cut_edges = []
    for u, v in graph.edges():
        if u in reachable and v not in reachable:
            if u[0] == v[0] and u[1] == IN:
                cut_nodes.append(u[0])
            else:
                cut_edges.append((u[0], v[0]))
    return MinCut(int(value), tuple(sorted(cut_nodes)), tuple(sorted(cut_edges)))

import dataclasses

import numpy as np
import pytest

from stepflow import (
    CapacityExceeded,
    DanglingEdge,
    DuplicateNode,
    FlowNetwork,
    InvalidCapacity,
    InvalidNodeId,
    UnknownNode,
)


def _small_network() -> FlowNetwork:
    network = FlowNetwork()
    for node_id, capacity in enumerate([10, 5, 10]):
        network.create_node(node_id, capacity)
    network.create_edge(0, 1, 4)
    network.create_edge(1, 2, 6)
    network.create_edge(0, 2, 3)
    return network


def test_create_node_and_edge_registers_both_directions():
    network = _small_network()
    source = network.get_node(0)
    middle = network.get_node(1)
    assert [edge.key for edge in source.outgoing_edges] == [(0, 1), (0, 2)]
    assert source.incoming_edges == ()
    assert [edge.key for edge in middle.incoming_edges] == [(0, 1)]
    assert [edge.key for edge in middle.outgoing_edges] == [(1, 2)]
    assert network.successors(0) == [1, 2]
    assert network.node_ids() == [0, 1, 2]
    assert 1 in network and 3 not in network


def test_duplicate_node_rejected():
    network = FlowNetwork()
    network.create_node(0, 1)
    with pytest.raises(DuplicateNode):
        network.create_node(0, 2)
    assert len(network) == 1


@pytest.mark.parametrize("capacity", [-1, 1.5, "3", None, True])
def test_invalid_node_capacity(capacity):
    with pytest.raises(InvalidCapacity):
        FlowNetwork().create_node(0, capacity)


@pytest.mark.parametrize("node_id", [-1, 1.0, "0", None])
def test_invalid_node_id(node_id):
    with pytest.raises(InvalidNodeId):
        FlowNetwork().create_node(node_id, 1)


def test_numpy_integers_are_accepted():
    network = FlowNetwork()
    network.create_node(np.int64(0), np.int64(3))
    network.create_node(1, 3)
    network.create_edge(np.int64(0), 1, np.int32(2))
    assert network.edges[0].capacity == 2
    assert type(network.edges[0].capacity) is int


def test_dangling_edge_rejected():
    network = FlowNetwork()
    network.create_node(0, 1)
    with pytest.raises(DanglingEdge):
        network.create_edge(0, 1, 1)
    with pytest.raises(DanglingEdge):
        network.create_edge(1, 0, 1)
    assert network.edges == ()
    assert network.get_node(0).outgoing_edges == ()


def test_invalid_edge_capacity():
    network = _small_network()
    with pytest.raises(InvalidCapacity):
        network.create_edge(0, 1, -2)
    with pytest.raises(InvalidCapacity):
        network.create_edge(0, 1, 2.0)
    assert len(network.edges) == 3


def test_unknown_node_lookup():
    network = _small_network()
    with pytest.raises(UnknownNode):
        network.get_node(7)
    with pytest.raises(KeyError):
        network.get_node(7)
    with pytest.raises(UnknownNode):
        network.successors(7)


def test_remaining_capacity_tracks_flow():
    network = _small_network()
    node = network.get_node(1)
    edge = network.edges[0]
    node.flow = 2
    edge.flow = 4
    assert node.remaining_capacity == 3
    assert edge.remaining_capacity == 0


@pytest.mark.parametrize("value", [-1, 6, 2.5])
def test_node_flow_outside_capacity(value):
    node = _small_network().get_node(1)
    with pytest.raises(CapacityExceeded):
        node.flow = value
    assert node.flow == 0


@pytest.mark.parametrize("value", [-1, 5])
def test_edge_flow_outside_capacity(value):
    edge = _small_network().edges[0]
    with pytest.raises(CapacityExceeded):
        edge.flow = value
    assert edge.flow == 0


def test_flow_may_reach_capacity_exactly():
    network = _small_network()
    network.get_node(1).flow = 5
    network.edges[0].flow = 4
    assert network.get_node(1).remaining_capacity == 0


def test_accessors_return_snapshots():
    network = _small_network()
    nodes = network.nodes
    edges = network.edges
    assert isinstance(nodes, tuple) and isinstance(edges, tuple)
    network.create_node(3, 1)
    network.create_edge(2, 3, 1)
    assert len(nodes) == 3 and len(edges) == 3
    outgoing = network.get_node(2).outgoing_edges
    network.create_edge(2, 0, 1)
    assert len(outgoing) == 1
    assert len(network.get_node(2).outgoing_edges) == 2


def test_self_loop_is_both_outgoing_and_incoming():
    network = FlowNetwork()
    network.create_node(0, 1)
    edge = network.create_edge(0, 0, 1)
    node = network.get_node(0)
    assert node.outgoing_edges == (edge,)
    assert node.incoming_edges == (edge,)


def test_flow_totals():
    network = _small_network()
    network.edges[0].flow = 3
    network.edges[2].flow = 2
    assert network.total_flow_out(0) == 5
    assert network.total_flow_in(2) == 2
    assert network.total_flow_in(0) == 0


def test_view_is_read_only():
    network = _small_network()
    view = network.view()
    network.get_node(1).flow = 2
    state = view.node(1)
    assert (state.id, state.capacity, state.flow, state.remaining_capacity) == (1, 5, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.flow = 0
    assert [(edge.source, edge.destination) for edge in view.edges] == [(0, 1), (1, 2), (0, 2)]
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.edges[0].flow = 1
    assert [node.flow for node in view.nodes] == [0, 2, 0]
    assert not hasattr(view, "create_node")
    assert view.successors(0) == [1, 2]
    assert len(view) == 3 and 2 in view


def test_arrays_are_int64_columns():
    network = _small_network()
    network.edges[1].flow = 6
    tail, head, capacity, flow = network.edge_arrays()
    assert tail.dtype == np.int64
    assert tail.tolist() == [0, 1, 0]
    assert head.tolist() == [1, 2, 2]
    assert capacity.tolist() == [4, 6, 3]
    assert flow.tolist() == [0, 6, 0]
    ids, node_capacity, node_flow = network.node_arrays()
    assert ids.tolist() == [0, 1, 2]
    assert node_capacity.tolist() == [10, 5, 10]
    assert node_flow.tolist() == [0, 0, 0]


def test_empty_network_arrays():
    tail, head, capacity, flow = FlowNetwork().edge_arrays()
    assert tail.shape == (0,)
    assert tail.dtype == np.int64


def test_to_networkx_merges_parallel_edges():
    network = _small_network()
    network.create_edge(0, 1, 2)
    network.edges[0].flow = 1
    graph = network.to_networkx()
    assert graph.is_directed()
    assert graph.number_of_nodes() == 3
    assert graph.edges[0, 1]["capacity"] == 6
    assert graph.edges[0, 1]["flow"] == 1
    assert graph.nodes[1]["capacity"] == 5

"""Build a layered grid programmatically and compare with the NetworkX reference."""
from __future__ import annotations

import random

from stepflow import FlowNetwork, MaxFlowStepper, reference_max_flow


def build_layered_network(width: int = 4, depth: int = 5, seed: int = 3) -> FlowNetwork:
    rng = random.Random(seed)
    network = FlowNetwork()
    network.create_node(0, 10_000)
    node_id = 1
    previous = [0]
    for _ in range(depth):
        layer = list(range(node_id, node_id + width))
        for current in layer:
            network.create_node(current, rng.randint(5, 20))
        for u in previous:
            for v in layer:
                network.create_edge(u, v, rng.randint(1, 10))
        previous = layer
        node_id += width
    sink = node_id
    network.create_node(sink, 10_000)
    for u in previous:
        network.create_edge(u, sink, rng.randint(1, 10))
    return network


def main() -> None:
    network = build_layered_network()
    sink = len(network) - 1
    stepper = MaxFlowStepper(network, 0, sink)
    steps = list(stepper)
    print("augmentations:", len(steps))
    print("stepper flow:", stepper.cumulative_flow)
    print("reference flow:", reference_max_flow(network, 0, sink))


if __name__ == "__main__":
    main()

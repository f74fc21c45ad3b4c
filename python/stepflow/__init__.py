"""Step-by-step maximum flow on graphs with node and edge capacities.

Example:
    >>> from stepflow import MaxFlowStepper, parse, partition_layers
    >>> network = parse("3 2\\n10 4 10\\n0 1 5\\n1 2 5\\n")
    >>> partition_layers(network, 0)
    [[0], [1], [2]]
    >>> stepper = MaxFlowStepper(network, 0, 2)
    >>> stepper.step()
    AugmentationStep(cumulative_flow=4, bottleneck=4, path=(0, 1, 2))
    >>> stepper.is_finished()
    True

Path search order:
    `MaxFlowStepper` and `find_augmenting_paths` accept `order="fifo"`
    (breadth-first, the default) or `order="lifo"` (depth-first style).
"""

import logging

from ._version import __version__
from .errors import (
    CapacityExceeded,
    DanglingEdge,
    DuplicateNode,
    FlowNetworkError,
    InvalidCapacity,
    InvalidNodeId,
    InvalidTerminals,
    MalformedDescription,
    MalformedHeader,
    ParseError,
    UnknownNode,
)
from .layers import layer_distances, partition_layers
from .network import Edge, EdgeState, FlowNetwork, NetworkView, Node, NodeState
from .parser import SAMPLE_DESCRIPTION, format_description, load, parse
from .paths import bottleneck, find_augmenting_paths, trace_path
from .reference import MinCut, reference_max_flow, reference_min_cut
from .stepper import AugmentationStep, MaxFlowStepper, StepperState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AugmentationStep",
    "CapacityExceeded",
    "DanglingEdge",
    "DuplicateNode",
    "Edge",
    "EdgeState",
    "FlowNetwork",
    "FlowNetworkError",
    "InvalidCapacity",
    "InvalidNodeId",
    "InvalidTerminals",
    "MalformedDescription",
    "MalformedHeader",
    "MaxFlowStepper",
    "MinCut",
    "NetworkView",
    "Node",
    "NodeState",
    "ParseError",
    "SAMPLE_DESCRIPTION",
    "StepperState",
    "UnknownNode",
    "bottleneck",
    "find_augmenting_paths",
    "format_description",
    "layer_distances",
    "load",
    "parse",
    "partition_layers",
    "reference_max_flow",
    "reference_min_cut",
    "trace_path",
    "__version__",
]

"""Console driver: load a graph, show its layers and step through maximum flow."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from .errors import FlowNetworkError
from .layers import partition_layers
from .network import FlowNetwork
from .parser import SAMPLE_DESCRIPTION, load, parse
from .paths import SEARCH_ORDERS
from .reference import reference_max_flow
from .stepper import MaxFlowStepper

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stepflow",
        description="Step through maximum flow on a graph with node and edge capacities.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("path", nargs="?", help="graph description file")
    source.add_argument("--sample", action="store_true", help="use the built-in 8-node sample graph")
    parser.add_argument("--source", type=int, default=0, help="source node id (default: 0)")
    parser.add_argument("--sink", type=int, default=None, help="sink node id (default: last node)")
    parser.add_argument(
        "--layers-from", type=int, default=None, help="node to layer the graph from (default: source)"
    )
    parser.add_argument("--order", choices=SEARCH_ORDERS, default="fifo", help="path search order")
    parser.add_argument("--max-steps", type=int, default=None, help="stop after this many augmentations")
    parser.add_argument("--interactive", action="store_true", help="wait for Enter before each step")
    parser.add_argument(
        "--check", action="store_true", help="compare the result with an independent max-flow solver"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase log verbosity")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_network(args: argparse.Namespace) -> FlowNetwork:
    if args.sample:
        return parse(SAMPLE_DESCRIPTION)
    return load(args.path)


def run(
    args: argparse.Namespace,
    out: TextIO | None = None,
    stdin: TextIO | None = None,
) -> int:
    out = out if out is not None else sys.stdout
    stdin = stdin if stdin is not None else sys.stdin
    network = _load_network(args)
    sink_id = args.sink if args.sink is not None else max(network.node_ids())
    stepper = MaxFlowStepper(network, args.source, sink_id, order=args.order)

    layers_from = args.layers_from if args.layers_from is not None else args.source
    view = network.view()
    for index, layer in enumerate(partition_layers(view, layers_from)):
        print(f"layer {index}: {' '.join(str(node_id) for node_id in layer)}", file=out)

    while not stepper.is_finished():
        if args.max_steps is not None and stepper.steps_taken >= args.max_steps:
            logger.info("stopping after %d steps", stepper.steps_taken)
            break
        if args.interactive:
            print("press Enter for the next step", file=out)
            if not stdin.readline():
                break
        result = stepper.step()
        print(
            f"step {stepper.steps_taken}: path {' - '.join(str(node_id) for node_id in result.path)}, "
            f"bottleneck {result.bottleneck}, flow {result.cumulative_flow}",
            file=out,
        )

    state = "maximum flow" if stepper.is_finished() else "flow so far"
    print(f"{state}: {stepper.cumulative_flow}", file=out)

    if args.check:
        expected = reference_max_flow(network, args.source, sink_id)
        print(f"reference maximum flow: {expected}", file=out)
        if stepper.is_finished() and expected != stepper.cumulative_flow:
            return EXIT_MISMATCH
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return run(args)
    except (FlowNetworkError, OSError) as exc:
        print(f"stepflow: error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    raise SystemExit(main())

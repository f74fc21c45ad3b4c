"""Text format for capacitated graphs.

Description format::

    N M
    c_0 c_1 ... c_(N-1)
    v_0 u_0 w_0
    ...
    v_(M-1) u_(M-1) w_(M-1)

The first line holds the node and edge counts, the second line the capacity
of every node, then one ``source destination capacity`` line per edge. Nodes
are numbered from 0 and blank lines are ignored.
"""
from __future__ import annotations

import logging
import os

from .errors import DanglingEdge, InvalidCapacity, MalformedDescription, MalformedHeader
from .network import FlowNetwork

__all__ = ["SAMPLE_DESCRIPTION", "format_description", "load", "parse"]

logger = logging.getLogger(__name__)

SAMPLE_DESCRIPTION = """\
8 11
1000 100 100 200 200 200 200 2000
0 1 800
0 2 200
1 3 100
1 5 100
2 4 100
2 5 100
2 6 500
3 7 200
4 7 200
5 7 200
6 7 200
"""


def _to_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _parse_header(line: str | None) -> tuple[int, int]:
    if line is None:
        raise MalformedHeader("description is empty")
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedHeader(f"header must hold two numbers 'N M', got {line.strip()!r}")
    n, m = (_to_int(token) for token in tokens)
    if n is None or m is None or n <= 0 or m <= 0:
        raise MalformedHeader(f"description has invalid graph dimensions {line.strip()!r}")
    return n, m


def _capacity_token(token: str, owner: str) -> int:
    value = _to_int(token)
    if value is None:
        raise InvalidCapacity(f"{owner} capacity must be a non-negative integer, got {token!r}")
    return value


def parse(text: str) -> FlowNetwork:
    """Build a :class:`FlowNetwork` from a graph description.

    Raises:
        MalformedHeader: the ``N M`` line is missing or holds non-positive values.
        MalformedDescription: a line has the wrong number of tokens, or the
            number of edge lines differs from ``M``.
        InvalidCapacity: a node or edge capacity is negative or not an integer.
        DanglingEdge: an edge names a node outside ``0..N-1``.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    n, m = _parse_header(lines[0] if lines else None)
    logger.debug("parsing description with %d nodes and %d edges", n, m)

    if len(lines) < 2:
        raise MalformedDescription("description has no node capacity line")
    capacities = lines[1].split()
    if len(capacities) != n:
        raise MalformedDescription(f"expected {n} node capacities, got {len(capacities)}")

    edge_lines = lines[2:]
    if len(edge_lines) != m:
        raise MalformedDescription(f"expected {m} edge lines, got {len(edge_lines)}")

    network = FlowNetwork()
    for node_id, token in enumerate(capacities):
        network.create_node(node_id, _capacity_token(token, f"node {node_id}"))

    for line_no, line in enumerate(edge_lines, start=3):
        tokens = line.split()
        if len(tokens) != 3:
            raise MalformedDescription(
                f"edge line {line_no} must hold 'V U W', got {line.strip()!r}"
            )
        source_id, destination_id = _to_int(tokens[0]), _to_int(tokens[1])
        if source_id is None or destination_id is None:
            raise DanglingEdge(f"edge line {line_no} names unknown nodes {tokens[0]!r}->{tokens[1]!r}")
        capacity = _capacity_token(tokens[2], f"edge {source_id}->{destination_id}")
        network.create_edge(source_id, destination_id, capacity)

    return network


def load(path: str | os.PathLike[str]) -> FlowNetwork:
    """Read a description file and parse it."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    logger.debug("loaded description from %s", path)
    return parse(text)


def format_description(network: FlowNetwork) -> str:
    """Serialise ``network`` in the format accepted by :func:`parse`.

    Node ids must be dense from 0, as produced by :func:`parse`.
    """
    nodes = sorted(network.nodes, key=lambda node: node.id)
    if [node.id for node in nodes] != list(range(len(nodes))):
        raise ValueError("node ids must be dense from 0 to be written as a description.")
    lines = [f"{len(nodes)} {len(network.edges)}"]
    lines.append(" ".join(str(node.capacity) for node in nodes))
    for edge in network.edges:
        lines.append(f"{edge.source.id} {edge.destination.id} {edge.capacity}")
    return "\n".join(lines) + "\n"

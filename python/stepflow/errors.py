"""Exceptions raised by stepflow.

Every error derives from :class:`FlowNetworkError`, itself a ``ValueError``,
so callers that only care about bad input can catch one type.
"""
from __future__ import annotations

__all__ = [
    "CapacityExceeded",
    "DanglingEdge",
    "DuplicateNode",
    "FlowNetworkError",
    "InvalidCapacity",
    "InvalidNodeId",
    "InvalidTerminals",
    "MalformedDescription",
    "MalformedHeader",
    "ParseError",
    "UnknownNode",
]


class FlowNetworkError(ValueError):
    """Base class for all stepflow errors."""


class ParseError(FlowNetworkError):
    """A graph description could not be parsed."""


class MalformedHeader(ParseError):
    """The ``N M`` header line is missing, unparsable or non-positive."""


class MalformedDescription(ParseError):
    """A body line has the wrong shape or the line count does not match the header."""


class DuplicateNode(FlowNetworkError):
    """A node with the same id already exists in the network."""


class DanglingEdge(FlowNetworkError):
    """An edge names an endpoint that is not in the network."""


class InvalidCapacity(FlowNetworkError):
    """A capacity is negative or not an integer."""


class InvalidNodeId(FlowNetworkError):
    """A node id is negative or not an integer."""


class UnknownNode(FlowNetworkError, KeyError):
    """A lookup named a node id that is not in the network."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return ValueError.__str__(self)


class InvalidTerminals(FlowNetworkError):
    """Source and sink do not form a usable pair."""


class CapacityExceeded(FlowNetworkError):
    """A flow value would fall below zero or exceed the capacity."""

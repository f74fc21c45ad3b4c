"""Step-by-step maximum flow.

:class:`MaxFlowStepper` applies one augmenting path per :meth:`~MaxFlowStepper.step`
call and leaves the pacing to the caller. Flow only ever grows: there is no
cancellation along reverse edges, so each step is a forward augmentation in the
residual network.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .errors import InvalidTerminals
from .network import FlowNetwork
from .paths import SEARCH_ORDERS, bottleneck, find_augmenting_paths, trace_path
from .typing import DiscoveryMap, FlowValue, NodeId, Path

__all__ = ["AugmentationStep", "MaxFlowStepper", "StepperState"]

logger = logging.getLogger(__name__)


class StepperState(enum.Enum):
    READY = "ready"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class AugmentationStep:
    """Outcome of one :meth:`MaxFlowStepper.step` call."""

    cumulative_flow: FlowValue
    bottleneck: FlowValue
    path: Path


class MaxFlowStepper:
    """Drive a network toward maximum flow one augmenting path at a time.

    Example:
        >>> from stepflow import parse, SAMPLE_DESCRIPTION
        >>> stepper = MaxFlowStepper(parse(SAMPLE_DESCRIPTION), 0, 7)
        >>> stepper.step()
        AugmentationStep(cumulative_flow=100, bottleneck=100, path=(0, 1, 3, 7))
        >>> [step.cumulative_flow for step in stepper]
        [200]
        >>> stepper.is_finished()
        True
    """

    def __init__(
        self,
        network: FlowNetwork,
        source_id: NodeId,
        sink_id: NodeId,
        *,
        order: str = "fifo",
    ) -> None:
        if order not in SEARCH_ORDERS:
            raise ValueError(f"Unsupported search order: {order}")
        network.get_node(source_id)
        network.get_node(sink_id)
        if source_id == sink_id:
            raise InvalidTerminals(f"source and sink must differ, both are {source_id}")

        self._network = network
        self._source_id = source_id
        self._sink_id = sink_id
        self._order = order
        self._state = StepperState.READY
        self._cumulative_flow = 0
        self._steps_taken = 0
        self._last_step: AugmentationStep | None = None
        self._pending: DiscoveryMap | None = None

    @property
    def source_id(self) -> NodeId:
        return self._source_id

    @property
    def sink_id(self) -> NodeId:
        return self._sink_id

    @property
    def state(self) -> StepperState:
        return self._state

    @property
    def cumulative_flow(self) -> FlowValue:
        return self._cumulative_flow

    @property
    def steps_taken(self) -> int:
        return self._steps_taken

    @property
    def last_step(self) -> AugmentationStep | None:
        return self._last_step

    def _search(self) -> DiscoveryMap:
        # Flow only changes in step(), which drops the cached map.
        if self._pending is None:
            self._pending = find_augmenting_paths(
                self._network, self._source_id, self._sink_id, order=self._order
            )
            if self._sink_id not in self._pending:
                self._state = StepperState.TERMINAL
                logger.info(
                    "no augmenting path from %d to %d, maximum flow is %d",
                    self._source_id,
                    self._sink_id,
                    self._cumulative_flow,
                )
        return self._pending

    def is_finished(self) -> bool:
        """Return True once the sink is unreachable in the residual network."""
        if self._state is StepperState.TERMINAL:
            return True
        self._search()
        return self._state is StepperState.TERMINAL

    def step(self) -> AugmentationStep:
        """Apply one augmenting path and return the result.

        After termination this returns the final flow with a zero bottleneck
        and an empty path, without searching again.
        """
        if self.is_finished():
            return AugmentationStep(self._cumulative_flow, 0, ())

        edges = trace_path(self._pending, self._source_id, self._sink_id)
        self._pending = None
        delta = bottleneck(edges)

        for edge in edges:
            edge.flow += delta
            edge.destination.flow += delta
        self._network.get_node(self._source_id).flow += delta
        self._cumulative_flow += delta
        self._steps_taken += 1

        path = (self._source_id,) + tuple(edge.destination.id for edge in edges)
        self._last_step = AugmentationStep(self._cumulative_flow, delta, path)
        logger.debug("augmented %s by %d, flow is now %d", path, delta, self._cumulative_flow)
        return self._last_step

    def __iter__(self) -> MaxFlowStepper:
        return self

    def __next__(self) -> AugmentationStep:
        if self.is_finished():
            raise StopIteration
        return self.step()

    def __repr__(self) -> str:
        return (
            f"MaxFlowStepper(source={self._source_id}, sink={self._sink_id}, "
            f"flow={self._cumulative_flow}, state={self._state.value})"
        )

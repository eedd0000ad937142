# model/trace.py

"""
Trace
=====

A symbolic trace: the initial state followed by steps. Step ``k`` holds the
transition taken and the state it produced.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from .state import SymbolicState
from .transition import Transition


@dataclass(frozen=True, slots=True)
class Step:
    transition: Transition
    state: SymbolicState


@dataclass(frozen=True, slots=True)
class Trace:
    initial: SymbolicState
    steps: Tuple[Step, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def states(self) -> Iterator[SymbolicState]:
        """Yield every state of the trace, the initial one first."""
        yield self.initial
        for step in self.steps:
            yield step.state

    @property
    def final(self) -> SymbolicState:
        return self.steps[-1].state if self.steps else self.initial

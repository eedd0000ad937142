# model/transition.py

"""
Transitions of a trace.

A transition is one or more edge instances fired together; more than one
means the processes synchronised. Edges are addressed by process-local index,
exactly as in the trace file.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True, slots=True)
class EdgeInstance:
    process: int
    edge: int
    select: Tuple[int, ...] = ()

    def __str__(self) -> str:
        values = "".join(f" {v}" for v in self.select)
        return f"{self.process} {self.edge}{values}"


@dataclass(frozen=True, slots=True)
class Transition:
    edges: Tuple[EdgeInstance, ...]

    def __iter__(self) -> Iterator[EdgeInstance]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    @property
    def synchronised(self) -> bool:
        """True if more than one process takes part."""
        return len(self.edges) > 1

# model/state.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Symbolic state: location vector, variable valuation and clock-bound matrix

"""
SymbolicState
=============

One symbolic state of a trace. Locations are process-local indices (one per
process, in declaration order), variables are aligned with
``Model.variables`` and the zone is a square matrix of :class:`Bound` over
``Model.clocks``, stored row-major.

Clock 0 is the reference clock. Before any explicit bound is applied, the
diagonal and row/column 0 hold ``(0, <=)`` and every other entry is infinity.
No closure is ever computed; bounds are kept exactly as given.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .bound import Bound, INFINITY, ZERO


def seed_dbm(clock_count: int) -> List[Bound]:
    """Default bound matrix for `clock_count` clocks."""
    dbm = [INFINITY] * (clock_count * clock_count)
    for i in range(clock_count):
        dbm[i * clock_count + i] = ZERO
        dbm[i] = ZERO
        dbm[i * clock_count] = ZERO
    return dbm


@dataclass(frozen=True, slots=True)
class SymbolicState:
    locations: Tuple[int, ...]
    variables: Tuple[int, ...]
    dbm: Tuple[Bound, ...]
    clock_count: int

    def bound(self, i: int, j: int) -> Bound:
        """Bound on ``clock_i - clock_j``."""
        if not (0 <= i < self.clock_count and 0 <= j < self.clock_count):
            raise IndexError(f"clock pair ({i}, {j}) outside {self.clock_count} clocks")
        return self.dbm[i * self.clock_count + j]

    def constraints(self) -> Iterator[Tuple[int, int, Bound]]:
        """Yield every finite off-diagonal bound in row-major order."""
        n = self.clock_count
        for i in range(n):
            for j in range(n):
                if i != j:
                    bound = self.dbm[i * n + j]
                    if not bound.is_infinity:
                        yield i, j, bound

    def overrides(self) -> Iterator[Tuple[int, int, Bound]]:
        """Yield every bound that differs from the seeded default matrix."""
        n = self.clock_count
        for index, (bound, default) in enumerate(zip(self.dbm, seed_dbm(n))):
            if bound != default:
                yield index // n, index % n, bound

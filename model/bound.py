# model/bound.py

"""
Upper bound on a clock difference ``x_i - x_j``.

A bound is a value plus a strictness bit. On disk both are packed into one
integer, ``value * 2 + strict``; decoding uses an arithmetic shift so negative
values survive the round trip.
"""

from __future__ import annotations
from dataclasses import dataclass

# largest value representable in the 31 value bits of a packed bound
INFINITY_VALUE = (2**31 - 1) >> 1


@dataclass(frozen=True, slots=True)
class Bound:
    value: int
    strict: bool = False

    @classmethod
    def decode(cls, raw: int) -> Bound:
        """Unpack an on-disk bound."""
        return cls(raw >> 1, (raw & 1) != 0)

    def encode(self) -> int:
        """Pack this bound into its on-disk integer."""
        return self.value * 2 + (1 if self.strict else 0)

    @property
    def is_infinity(self) -> bool:
        return self.value == INFINITY_VALUE

    @property
    def operator(self) -> str:
        return "<" if self.strict else "<="

    def __str__(self) -> str:
        return f"{self.operator}{self.value}"


INFINITY = Bound(INFINITY_VALUE, True)
ZERO = Bound(0, False)

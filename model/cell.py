# model/cell.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Memory cells declared in the layout section of the intermediate format

"""
Cells
=====

Every record of the ``layout`` section declares one memory cell. The position
of a cell in the layout is its *global* index, which all later sections of the
intermediate format refer to.

Each kind of cell is its own frozen dataclass holding only the fields that
kind carries. Kind-specific behaviour is resolved with ``isinstance`` checks.
Location cells are the only kind completed in two phases: they are declared
in ``layout`` without an owner and patched once the ``locations`` section
names the owning process and invariant.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum


class LocationFlag(Enum):
    """Urgency flag of a location."""

    NONE = "none"
    COMMITTED = "committed"
    URGENT = "urgent"


class Cell:
    """Base of all cell kinds."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class ConstCell(Cell):
    value: int

    @property
    def name(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class ClockCell(Cell):
    name: str
    nr: int


@dataclass(frozen=True, slots=True)
class IntegerCell(Cell):
    name: str
    min: int
    max: int
    init: int
    nr: int


@dataclass(frozen=True, slots=True)
class MetaCell(Cell):
    """Meta variable. Same shape as an integer, numbered with the integers."""

    name: str
    min: int
    max: int
    init: int
    nr: int


@dataclass(frozen=True, slots=True)
class SysMetaCell(Cell):
    name: str
    min: int
    max: int


@dataclass(frozen=True, slots=True)
class LocationCell(Cell):
    name: str
    flag: LocationFlag = LocationFlag.NONE
    process: int = -1
    invariant: int = -1

    @property
    def attached(self) -> bool:
        """True once the owning process has been assigned."""
        return self.process >= 0

    def attach(self, process: int, invariant: int) -> LocationCell:
        """Return a copy of this location owned by `process`."""
        return replace(self, process=process, invariant=invariant)


@dataclass(frozen=True, slots=True)
class StaticCell(Cell):
    name: str
    min: int
    max: int


@dataclass(frozen=True, slots=True)
class CostCell(Cell):
    @property
    def name(self) -> str:
        return ""

# model/system.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Processes, edges and the loaded model of a network of timed automata

"""Read-only model of a network of timed automata.

The intermediate format numbers everything globally: cells by their position
in the layout, edges by their position in the edges section. Traces instead
use process-local numbers, i.e. the position of a location or edge within the
lists of its owning process. The :class:`Process` lists bridge the two.

A :class:`Model` is produced once by the loader and never changes afterwards;
states, transitions and the renderer all borrow it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from .cell import Cell, LocationCell


@dataclass(frozen=True, slots=True)
class Process:
    """A process (automaton instance) of the network.

    Attributes:
        name: Process name
        initial: Local index of the initial location
        locations: Global cell indices of the process locations, in local order
        edges: Global edge indices of the process edges, in local order
    """

    name: str
    initial: int
    locations: Tuple[int, ...] = ()
    edges: Tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class Edge:
    """A syntactic edge. Source and target are global cell indices."""

    process: int
    source: int
    target: int
    guard: int
    sync: int
    update: int


@dataclass(frozen=True)
class Model:
    """Tables decoded from one intermediate-format file.

    Attributes:
        cells: All layout cells; the position is the global cell index
        instructions: Flat list of instruction words
        processes: Processes in declaration order
        edges: All edges in declaration order
        expressions: Sparse expression table, keyed by expression index
        clocks: Clock names, position equals the clock number used by traces
        variables: Integer and meta variable names, position equals the
            variable number used by traces
    """

    cells: Tuple[Cell, ...] = ()
    instructions: Tuple[int, ...] = ()
    processes: Tuple[Process, ...] = ()
    edges: Tuple[Edge, ...] = ()
    expressions: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))
    clocks: Tuple[str, ...] = ()
    variables: Tuple[str, ...] = ()

    @property
    def process_count(self) -> int:
        return len(self.processes)

    @property
    def clock_count(self) -> int:
        return len(self.clocks)

    @property
    def variable_count(self) -> int:
        return len(self.variables)

    def expression(self, key: int) -> str:
        """Expression text for `key`; unknown keys yield an empty string."""
        return self.expressions.get(key, "")

    def location(self, process: int, local: int) -> LocationCell:
        """Resolve a process-local location index to its cell."""
        return self.cells[self.processes[process].locations[local]]

    def edge(self, process: int, local: int) -> Edge:
        """Resolve a process-local edge index to its edge."""
        return self.edges[self.processes[process].edges[local]]

    def __str__(self) -> str:
        return (
            f"Model(cells={len(self.cells)}, processes={self.process_count}, "
            f"edges={len(self.edges)}, clocks={self.clock_count}, "
            f"variables={self.variable_count}, expressions={len(self.expressions)})"
        )

# parser/builder.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Mutable two-phase construction of the read-only Model

"""Incremental construction of a :class:`model.system.Model`.

The intermediate format declares location cells in ``layout`` before the
processes that own them exist, so a model is built in two phases: cells are
appended first and location cells are attached to their owner later. The
builder keeps the growing lists, checks every cross reference as it is added
and finally freezes everything into a :class:`Model`.

Append order is significant everywhere: the position of a cell is its global
index, and the position of a location or edge within its process is the local
index that traces use.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple

from model.cell import Cell, ClockCell, IntegerCell, LocationCell, MetaCell
from model.system import Edge, Model, Process

from .exceptions import InvalidReference


class ModelBuilder:
    """Collects cells, processes, edges and expressions of one model."""

    def __init__(self) -> None:
        self.cells: List[Cell] = []
        self.instructions: List[int] = []
        self.expressions: Dict[int, str] = {}
        self.edges: List[Edge] = []
        self.clocks: List[str] = []
        self.variables: List[str] = []
        self._processes: List[Tuple[str, int]] = []
        self._process_locations: List[List[int]] = []
        self._process_edges: List[List[int]] = []

    @property
    def process_count(self) -> int:
        return len(self._processes)

    def add_cell(self, cell: Cell) -> int:
        """Append a layout cell and return its global index.

        Clocks and integer/meta variables are also appended to the derived
        name lists, so their position there is their local number.
        """
        if isinstance(cell, ClockCell):
            self.clocks.append(cell.name)
        elif isinstance(cell, (IntegerCell, MetaCell)):
            self.variables.append(cell.name)
        self.cells.append(cell)
        return len(self.cells) - 1

    def add_instruction(self, words: Iterable[int]) -> None:
        self.instructions.extend(words)

    def add_process(self, name: str, initial: int) -> int:
        """Append a process and return its index."""
        self._processes.append((name, initial))
        self._process_locations.append([])
        self._process_edges.append([])
        return len(self._processes) - 1

    def attach_location(self, cell_index: int, process: int, invariant: int) -> int:
        """Assign a declared location cell to its owning process.

        Args:
            cell_index: Global index of a location cell
            process: Index of the owning process
            invariant: Expression key of the location invariant

        Returns:
            The local index of the location within its process

        Raises:
            InvalidReference: The cell is missing, is not a location or is
                already owned, or the process does not exist
        """
        cell = self._location_cell(cell_index)
        if cell.attached:
            raise InvalidReference(
                f"location cell {cell_index} already belongs to process {cell.process}"
            )
        self._check_process(process)
        self.cells[cell_index] = cell.attach(process, invariant)
        self._process_locations[process].append(cell_index)
        return len(self._process_locations[process]) - 1

    def add_edge(
        self, process: int, source: int, target: int, guard: int, sync: int, update: int
    ) -> int:
        """Append an edge to the model and to its process; return the local index.

        Raises:
            InvalidReference: The process does not exist, or source or target
                is not a location cell
        """
        self._check_process(process)
        self._location_cell(source)
        self._location_cell(target)
        self._process_edges[process].append(len(self.edges))
        self.edges.append(Edge(process, source, target, guard, sync, update))
        return len(self._process_edges[process]) - 1

    def add_expression(self, key: int, text: str) -> None:
        self.expressions[key] = text

    def build(self) -> Model:
        """Freeze the collected tables into a read-only model."""
        processes = tuple(
            Process(name, initial, tuple(locations), tuple(edges))
            for (name, initial), locations, edges in zip(
                self._processes, self._process_locations, self._process_edges
            )
        )
        return Model(
            cells=tuple(self.cells),
            instructions=tuple(self.instructions),
            processes=processes,
            edges=tuple(self.edges),
            expressions=MappingProxyType(dict(self.expressions)),
            clocks=tuple(self.clocks),
            variables=tuple(self.variables),
        )

    def _location_cell(self, index: int) -> LocationCell:
        if not 0 <= index < len(self.cells):
            raise InvalidReference(f"cell {index} is not declared in the layout")
        cell = self.cells[index]
        if not isinstance(cell, LocationCell):
            raise InvalidReference(
                f"cell {index} is a {type(cell).__name__}, not a location"
            )
        return cell

    def _check_process(self, process: int) -> None:
        if not 0 <= process < len(self._processes):
            raise InvalidReference(
                f"process {process} does not exist ({len(self._processes)} declared)"
            )

# parser/model_loader.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Loader for models in the intermediate format

"""Decoding of the section-based intermediate format into a Model.

The file is a sequence of sections, each introduced by a bare header line
(``layout``, ``instructions``, ``processes``, ``locations``, ``edges``,
``expressions``) and ended by an empty line, a line starting with whitespace
or the end of input. Comment lines starting with ``#`` may appear wherever a
record is expected. In ``instructions``, TAB-indented lines are a
pretty-printed disassembly of the preceding words and are skipped.

The intermediate format numbers everything globally; the local numbering
used by traces falls out of the order in which ``locations`` and ``edges``
records are appended to their processes.
"""

import io
import sys
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, TextIO, Tuple, Union

from model.system import Model
from utils.logger import get_logger

from . import grammar
from .builder import ModelBuilder
from .exceptions import InvalidReference, MalformedModel, UnknownSection

STDIN_PATH = "-"


class _LineReader:
    """Line source with line numbers, end-of-line characters stripped."""

    def __init__(self, stream: TextIO):
        self._lines = iter(stream)
        self.lineno = 0

    def readline(self) -> Optional[str]:
        line = next(self._lines, None)
        if line is None:
            return None
        self.lineno += 1
        return line.rstrip("\r\n")

    def records(self, continuation: str = "") -> Iterator[Tuple[int, str]]:
        """Yield ``(lineno, line)`` for the records of the current section.

        The line that ends the section is consumed. Comment lines and lines
        starting with a character from `continuation` are skipped.
        """
        while True:
            line = self.readline()
            if line is None or not line:
                return
            if line.startswith("#"):
                continue
            if line[0] in continuation:
                continue
            if line[0].isspace():
                return
            yield self.lineno, line


def _check_local_number(what: str, nr: int, names: List[str], lineno: int) -> None:
    # traces number clocks and variables by their position in the name list
    if nr != len(names) - 1:
        get_logger().numbering_mismatch(what, nr, len(names) - 1, lineno)


def _read_layout(reader: _LineReader, builder: ModelBuilder) -> int:
    logger = get_logger()
    count = 0
    for lineno, line in reader.records():
        classified = grammar.classify_layout(line)
        if classified is None:
            raise MalformedModel("no layout grammar matches", lineno, line)
        kind, declared, cell = classified
        index = builder.add_cell(cell)
        if declared != index:
            logger.numbering_mismatch(f"{kind} cell", declared, index, lineno)
        if kind == "clock":
            _check_local_number(f"clock '{cell.name}'", cell.nr, builder.clocks, lineno)
        elif kind in ("var", "meta"):
            _check_local_number(f"variable '{cell.name}'", cell.nr, builder.variables, lineno)
        count += 1
    return count


def _read_instructions(reader: _LineReader, builder: ModelBuilder) -> int:
    count = 0
    for lineno, line in reader.records(continuation="\t"):
        parsed = grammar.parse_instruction(line)
        if parsed is None:
            raise MalformedModel(
                "instruction needs an address and 1-4 words", lineno, line
            )
        _, words = parsed
        builder.add_instruction(words)
        count += 1
    return count


def _read_processes(reader: _LineReader, builder: ModelBuilder) -> int:
    logger = get_logger()
    count = 0
    for lineno, line in reader.records():
        parsed = grammar.parse_process(line)
        if parsed is None:
            raise MalformedModel("expected INDEX:INITIAL:NAME", lineno, line)
        declared, initial, name = parsed
        index = builder.add_process(name, initial)
        if declared != index:
            logger.numbering_mismatch(f"process '{name}'", declared, index, lineno)
        count += 1
    return count


def _read_locations(reader: _LineReader, builder: ModelBuilder) -> int:
    count = 0
    for lineno, line in reader.records():
        parsed = grammar.parse_ints(grammar.LOCATION, line)
        if parsed is None:
            raise MalformedModel("expected CELL:PROCESS:INVARIANT", lineno, line)
        cell, process, invariant = parsed
        try:
            builder.attach_location(cell, process, invariant)
        except InvalidReference as exc:
            raise InvalidReference(exc.message, lineno, line) from None
        count += 1
    return count


def _read_edges(reader: _LineReader, builder: ModelBuilder) -> int:
    count = 0
    for lineno, line in reader.records():
        parsed = grammar.parse_ints(grammar.EDGE, line)
        if parsed is None:
            raise MalformedModel(
                "expected PROCESS:SOURCE:TARGET:GUARD:SYNC:UPDATE", lineno, line
            )
        try:
            builder.add_edge(*parsed)
        except InvalidReference as exc:
            raise InvalidReference(exc.message, lineno, line) from None
        count += 1
    return count


def _read_expressions(reader: _LineReader, builder: ModelBuilder) -> int:
    count = 0
    for lineno, line in reader.records():
        parsed = grammar.parse_expression(line)
        if parsed is None:
            raise MalformedModel("expected KEY:FIELD:FIELD:TEXT", lineno, line)
        key, text = parsed
        builder.add_expression(key, text)
        count += 1
    return count


SECTIONS: Dict[str, Callable[[_LineReader, ModelBuilder], int]] = {
    "layout": _read_layout,
    "instructions": _read_instructions,
    "processes": _read_processes,
    "locations": _read_locations,
    "edges": _read_edges,
    "expressions": _read_expressions,
}


def load(stream: Union[TextIO, str]) -> Model:
    """Decode an intermediate-format model.

    Args:
        stream: Open text stream, or the model text itself

    Returns:
        The read-only model

    Raises:
        UnknownSection: A header names no known section
        MalformedModel: A record matches no grammar of its section
        InvalidReference: A ``locations`` or ``edges`` record refers to a
            missing process or to a cell that is not a location
    """
    logger = get_logger()
    if isinstance(stream, str):
        stream = io.StringIO(stream)

    reader = _LineReader(stream)
    builder = ModelBuilder()

    while True:
        header = reader.readline()
        if header is None:
            break
        section = header.strip()
        if not section:
            continue
        read_section = SECTIONS.get(section)
        if read_section is None:
            raise UnknownSection("unknown section", reader.lineno, header)
        first_line = reader.lineno
        records = read_section(reader, builder)
        logger.section_loaded(section, records, first_line)

    model = builder.build()
    logger.model_summary(str(model))
    return model


def load_model_file(filepath: Union[str, Path]) -> Model:
    """Load a model from a file path; ``-`` reads standard input.

    Raises:
        OSError: The file cannot be opened
        ModelFormatError: The content cannot be decoded
    """
    if str(filepath) == STDIN_PATH:
        get_logger().debug("Reading model from standard input")
        return load(sys.stdin)

    get_logger().debug(f"Reading model file: {filepath}")
    with open(filepath, "r", encoding="utf-8") as file:
        return load(file)

# parser/grammar.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Record grammars of the intermediate format sections

"""Record grammars for the line-oriented intermediate format.

Records are colon-separated and several ``layout`` kinds share a prefix, so
each line is classified by trying a fixed, priority-ordered family of
grammars; the first match wins. Like the scanf patterns the format was
designed around, a grammar only has to match a prefix of the line; a name is
the run of non-whitespace characters after its colon.

Layout grammars (in priority order):
- clock:     N:clock:NR:name
- const:     N:const:VALUE
- var:       N:var:MIN:MAX:INIT:NR:name
- meta:      N:meta:MIN:MAX:INIT:NR:name
- sys_meta:  N:sys_meta:MIN:MAX:name
- committed: N:location:committed:name
- urgent:    N:location:urgent:name
- location:  N:location::name
- static:    N:static:MIN:MAX:name
- cost:      N:cost

Other sections:
- instructions: ADDR:W1 [W2 [W3 [W4]]]
- processes:    N:INITIAL:name
- locations:    CELL:PROCESS:INVARIANT
- edges:        PROCESS:SOURCE:TARGET:GUARD:SYNC:UPDATE
- expressions:  KEY:FIELD:FIELD:text
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from model.cell import (
    Cell,
    ClockCell,
    ConstCell,
    CostCell,
    IntegerCell,
    LocationCell,
    LocationFlag,
    MetaCell,
    StaticCell,
    SysMetaCell,
)

INT = r"([-+]?\d+)"
NAME = r"(\S+)"


@dataclass(frozen=True)
class LayoutGrammar:
    """One layout record kind: its pattern and the cell it builds.

    Attributes:
        kind: Record kind, used in diagnostics
        pattern: Regular expression matched at the start of the line; group 1
            is always the declared cell index
        build: Builds the cell from the remaining groups
    """

    kind: str
    pattern: Pattern[str]
    build: Callable[[Sequence[str]], Cell]

    def parse(self, line: str) -> Optional[Tuple[int, Cell]]:
        """Return ``(declared_index, cell)`` or None if the line does not match."""
        match = self.pattern.match(line)
        if match is None:
            return None
        declared, *fields = match.groups()
        return int(declared), self.build(fields)


def _grammar(kind: str, body: str, build: Callable[[Sequence[str]], Cell]) -> LayoutGrammar:
    return LayoutGrammar(kind, re.compile(rf"{INT}:{body}"), build)


def _location(flag: LocationFlag) -> Callable[[Sequence[str]], Cell]:
    return lambda f: LocationCell(f[0], flag)


# Flagged locations precede the plain one: "location:" prefixes both.
LAYOUT_GRAMMARS: Tuple[LayoutGrammar, ...] = (
    _grammar("clock", rf"clock:{INT}:{NAME}", lambda f: ClockCell(f[1], int(f[0]))),
    _grammar("const", rf"const:{INT}", lambda f: ConstCell(int(f[0]))),
    _grammar(
        "var",
        rf"var:{INT}:{INT}:{INT}:{INT}:{NAME}",
        lambda f: IntegerCell(f[4], int(f[0]), int(f[1]), int(f[2]), int(f[3])),
    ),
    _grammar(
        "meta",
        rf"meta:{INT}:{INT}:{INT}:{INT}:{NAME}",
        lambda f: MetaCell(f[4], int(f[0]), int(f[1]), int(f[2]), int(f[3])),
    ),
    _grammar(
        "sys_meta",
        rf"sys_meta:{INT}:{INT}:{NAME}",
        lambda f: SysMetaCell(f[2], int(f[0]), int(f[1])),
    ),
    _grammar("committed", rf"location:committed:{NAME}", _location(LocationFlag.COMMITTED)),
    _grammar("urgent", rf"location:urgent:{NAME}", _location(LocationFlag.URGENT)),
    _grammar("location", rf"location::{NAME}", _location(LocationFlag.NONE)),
    _grammar(
        "static",
        rf"static:{INT}:{INT}:{NAME}",
        lambda f: StaticCell(f[2], int(f[0]), int(f[1])),
    ),
    _grammar("cost", r"cost(?:\s|$)", lambda f: CostCell()),
)

INSTRUCTION = re.compile(rf"{INT}:\s*{INT}(?:\s+{INT})?(?:\s+{INT})?(?:\s+{INT})?")
PROCESS = re.compile(rf"{INT}:{INT}:{NAME}")
LOCATION = re.compile(rf"{INT}:{INT}:{INT}")
EDGE = re.compile(rf"{INT}:{INT}:{INT}:{INT}:{INT}:{INT}")
EXPRESSION_KEY = re.compile(INT)


def classify_layout(line: str) -> Optional[Tuple[str, int, Cell]]:
    """Classify a layout line against the grammar family.

    Args:
        line: One record line of the layout section

    Returns:
        ``(kind, declared_index, cell)`` for the first matching grammar, or
        None if no grammar matches
    """
    for grammar in LAYOUT_GRAMMARS:
        parsed = grammar.parse(line)
        if parsed is not None:
            declared, cell = parsed
            return grammar.kind, declared, cell
    return None


def parse_instruction(line: str) -> Optional[Tuple[int, List[int]]]:
    """Return ``(address, words)`` of an instruction line, or None."""
    match = INSTRUCTION.match(line)
    if match is None:
        return None
    address, *words = match.groups()
    return int(address), [int(w) for w in words if w is not None]


def parse_ints(pattern: Pattern[str], line: str) -> Optional[Tuple[int, ...]]:
    """Match an all-integer record and return its fields, or None."""
    match = pattern.match(line)
    if match is None:
        return None
    return tuple(int(g) for g in match.groups())


def parse_process(line: str) -> Optional[Tuple[int, int, str]]:
    """Return ``(declared_index, initial, name)`` of a process line, or None."""
    match = PROCESS.match(line)
    if match is None:
        return None
    declared, initial, name = match.groups()
    return int(declared), int(initial), name


def parse_expression(line: str) -> Optional[Tuple[int, str]]:
    """Return ``(key, text)`` of an expression line, or None.

    The text is everything after the third colon with surrounding whitespace
    removed; it may itself contain colons.
    """
    match = EXPRESSION_KEY.match(line)
    if match is None:
        return None
    fields = line.split(":", 3)
    if len(fields) < 4:
        return None
    return int(match.group(1)), fields[3].strip()

# tests/parser_tests/test_layout_grammar.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Test suite for intermediate-format record grammars

"""Test suite for the record grammars of the intermediate format.

Covers classification of every layout record kind, the priority order of the
grammar family and the non-layout record parsers.
"""

import pytest
from model.cell import (
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
from parser import grammar


class TestLayoutClassification:
    """Every layout line maps to exactly one cell kind."""

    LAYOUT_CASES = [
        ("0:clock:0:t(0)", "clock", 0, ClockCell("t(0)", 0)),
        ("1:clock:1:x", "clock", 1, ClockCell("x", 1)),
        ("2:const:-7", "const", 2, ConstCell(-7)),
        ("3:var:-5:10:2:0:n", "var", 3, IntegerCell("n", -5, 10, 2, 0)),
        ("4:meta:0:1:0:1:m", "meta", 4, MetaCell("m", 0, 1, 0, 1)),
        ("5:sys_meta:0:3:sm", "sys_meta", 5, SysMetaCell("sm", 0, 3)),
        ("6:location::Idle", "location", 6, LocationCell("Idle")),
        (
            "7:location:committed:Busy",
            "committed",
            7,
            LocationCell("Busy", LocationFlag.COMMITTED),
        ),
        (
            "8:location:urgent:Done",
            "urgent",
            8,
            LocationCell("Done", LocationFlag.URGENT),
        ),
        ("9:static:0:5:s", "static", 9, StaticCell("s", 0, 5)),
        ("10:cost", "cost", 10, CostCell()),
    ]

    @pytest.mark.parametrize("line, kind, declared, cell", LAYOUT_CASES)
    def test_layout_record_kinds(self, line, kind, declared, cell):
        assert grammar.classify_layout(line) == (kind, declared, cell)

    def test_name_stops_at_whitespace(self):
        _, _, cell = grammar.classify_layout("1:clock:1:x trailing words")
        assert cell.name == "x"

    def test_meta_is_not_mistaken_for_sys_meta(self):
        kind, _, _ = grammar.classify_layout("5:sys_meta:0:3:meta")
        assert kind == "sys_meta"

    def test_flagged_locations_tried_before_plain(self):
        kinds = [g.kind for g in grammar.LAYOUT_GRAMMARS]
        assert kinds.index("committed") < kinds.index("location")
        assert kinds.index("urgent") < kinds.index("location")

    def test_nameless_cells_report_empty_name(self):
        assert ConstCell(1).name == ""
        assert CostCell().name == ""

    INVALID_LAYOUT = [
        "",
        "clock:0:x",
        "0:clock:x",
        "0:location:x",
        "0:location:hot:x",
        "0:var:0:10:0:n",
        "0:costly",
        "0:cost:1",
        "0:const:",
        "0:widget:1",
    ]

    @pytest.mark.parametrize("line", INVALID_LAYOUT)
    def test_unmatched_layout_lines(self, line):
        assert grammar.classify_layout(line) is None


class TestSectionRecords:
    """Records of the sections after the layout."""

    def test_instruction_words(self):
        assert grammar.parse_instruction("0:65 3") == (0, [65, 3])
        assert grammar.parse_instruction("4:1 -2 3 4") == (4, [1, -2, 3, 4])
        assert grammar.parse_instruction("5:9") == (5, [9])

    def test_instruction_without_words(self):
        assert grammar.parse_instruction("5:") is None
        assert grammar.parse_instruction("push 3") is None

    def test_process_record(self):
        assert grammar.parse_process("1:2:Mouse") == (1, 2, "Mouse")
        assert grammar.parse_process("1:Mouse") is None

    def test_location_and_edge_records(self):
        assert grammar.parse_ints(grammar.LOCATION, "5:0:-1") == (5, 0, -1)
        assert grammar.parse_ints(grammar.EDGE, "0:5:6:10:-1:13") == (0, 5, 6, 10, -1, 13)
        assert grammar.parse_ints(grammar.EDGE, "0:5:6") is None

    EXPRESSION_CASES = [
        ("3:0:guard:x>1", (3, "x>1")),
        ("11:2:sync:   go!  ", (11, "go!")),
        ("14:0:assign:m := b ? 0 : 1", (14, "m := b ? 0 : 1")),
        ("7:1:2:", (7, "")),
    ]

    @pytest.mark.parametrize("line, expected", EXPRESSION_CASES)
    def test_expression_text_after_third_colon(self, line, expected):
        assert grammar.parse_expression(line) == expected

    def test_expression_missing_third_colon(self):
        assert grammar.parse_expression("3:0:x>1") is None
        assert grammar.parse_expression("guard:0:1:x") is None

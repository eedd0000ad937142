# tests/parser_tests/test_lexer_tokens.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Test suite for XTR lexer tokenization and token lookahead

"""Test suite for the XTR lexer and the token stream built on it."""

import pytest
from parser.lexer import XtrLexer
from parser.tokens import TokenStream, as_token_stream
from utils.logger import get_logger


class TestXtrLexer:
    """Test cases for XTR lexer tokenization and error handling."""

    def setup_method(self):
        self.lexer = XtrLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        self.logger.debug(f"Tokenizing: {text!r}")
        return [token.type for token in self.lexer.tokenize(text)]

    VALID_TOKENIZATION_CASES = [
        ("0 0\n.\n", ["INT", "INT", "NEWLINE", "DOT", "NEWLINE"]),
        ("0 1 ;\n", ["INT", "INT", "SEMI", "NEWLINE"]),
        ("0 1\n", ["INT", "INT", "NEWLINE"]),
        ("1 0 -2", ["INT", "INT", "INT"]),
        (".", ["DOT"]),
        ("", []),
        # carriage returns and tabs are ignored, line feeds are not
        ("0\t1 \r\n.\r\n", ["INT", "INT", "NEWLINE", "DOT", "NEWLINE"]),
        ("3;", ["INT", "SEMI"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        assert self._tokenize_to_types(input_text) == expected_types

    def test_integer_values_are_converted(self):
        values = [t.value for t in self.lexer.tokenize("-2 +3 2147483647")]
        assert values == [-2, 3, 2147483647]

    def test_line_numbers_advance_on_newlines(self):
        tokens = list(self.lexer.tokenize("0\n.\n1"))
        assert [t.lineno for t in tokens] == [1, 1, 2, 2, 3]

    @pytest.mark.parametrize("illegal_char", ["a", "x", "#", ":", ",", "[", "(", "="])
    def test_illegal_character_handling(self, illegal_char):
        with pytest.raises(ValueError) as exc_info:
            self._tokenize_to_types(f"0 {illegal_char}")

        error_message = str(exc_info.value)
        assert "Illegal character" in error_message
        assert illegal_char in error_message


class TestTokenStream:
    """Lookahead behaviour used by the codecs."""

    def test_peek_does_not_consume(self):
        tokens = TokenStream.from_text("7 .")
        assert tokens.peek().value == 7
        assert tokens.peek().value == 7
        assert tokens.next().value == 7
        assert tokens.peek_type() == "DOT"

    def test_end_of_input_is_none(self):
        tokens = TokenStream.from_text("")
        assert tokens.peek() is None
        assert tokens.next() is None
        assert tokens.peek_type() is None

    def test_skip_newlines_tracks_line_start(self):
        tokens = TokenStream.from_text("1\n\n\n.")
        assert tokens.at_line_start
        tokens.next()
        assert not tokens.at_line_start
        tokens.skip_newlines()
        assert tokens.at_line_start
        assert tokens.peek_type() == "DOT"
        assert tokens.lineno == 4

    def test_as_token_stream_accepts_streams_and_text(self):
        import io

        stream = TokenStream.from_text("1")
        assert as_token_stream(stream) is stream
        assert as_token_stream("5").next().value == 5
        assert as_token_stream(io.StringIO("6")).next().value == 6

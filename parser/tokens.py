# parser/tokens.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Single-token lookahead over the XTR token stream

"""Peekable token stream shared by the state and transition codecs.

The trace grammar is decided one token ahead: the sparse bound list ends when
the next token is a dot instead of an integer, a transition ends when the
next line does not start with an integer, and the trace ends when a dot
appears where a state would start. :class:`TokenStream` provides that
lookahead so no decoder ever has to fail and recover.

``None`` stands for the end of input.
"""

from typing import Iterable, Iterator, Optional, TextIO, Type, Union

from sly.lex import Token

from .exceptions import TraceFormatError
from .lexer import XtrLexer


class TokenStream:
    """Token iterator with one token of lookahead and line tracking."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = iter(tokens)
        self._lookahead: Optional[Token] = None
        self._peeked = False
        self._at_line_start = True
        self.lineno = 1

    @classmethod
    def from_text(cls, text: str) -> "TokenStream":
        return cls(XtrLexer().tokenize(text))

    @classmethod
    def from_stream(cls, stream: TextIO) -> "TokenStream":
        """Tokenize `stream` one line at a time, reading no further than needed."""
        return cls(_tokenize_lines(stream))

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it."""
        if not self._peeked:
            self._lookahead = next(self._tokens, None)
            self._peeked = True
        return self._lookahead

    def next(self) -> Optional[Token]:
        """Consume and return the next token."""
        token = self.peek()
        self._peeked = False
        self._lookahead = None
        if token is not None:
            self.lineno = token.lineno
            self._at_line_start = token.type == "NEWLINE"
            if self._at_line_start:
                self.lineno += 1
        return token

    def peek_type(self) -> Optional[str]:
        token = self.peek()
        return None if token is None else token.type

    def skip_newlines(self) -> None:
        while self.peek_type() == "NEWLINE":
            self.next()

    @property
    def at_line_start(self) -> bool:
        """True if the last consumed token ended a line."""
        return self._at_line_start


def _tokenize_lines(stream: TextIO) -> Iterator[Token]:
    lexer = XtrLexer()
    for lineno, line in enumerate(iter(stream.readline, ""), start=1):
        yield from lexer.tokenize(line, lineno=lineno)


def as_token_stream(source: Union[TokenStream, TextIO, str]) -> TokenStream:
    """Wrap a stream or text for decoding; token streams pass through."""
    if isinstance(source, TokenStream):
        return source
    if isinstance(source, str):
        return TokenStream.from_text(source)
    return TokenStream.from_stream(source)


def describe(token: Optional[Token]) -> str:
    if token is None:
        return "end of input"
    if token.type == "NEWLINE":
        return "end of line"
    return f"'{token.value}'"


def read_int(tokens: TokenStream, error: Type[TraceFormatError], what: str) -> int:
    """Consume one integer, skipping line breaks before it.

    Raises:
        error: The next token is not an integer
    """
    tokens.skip_newlines()
    token = tokens.peek()
    if token is None or token.type != "INT":
        raise error(f"expected {what} but got {describe(token)}", tokens.lineno)
    tokens.next()
    return token.value


def expect_terminator(
    tokens: TokenStream, error: Type[TraceFormatError], what: str
) -> None:
    """Consume a terminator line: a lone dot, optionally after blank lines.

    Raises:
        error: Anything but a lone dot follows, including end of input
    """
    tokens.skip_newlines()
    token = tokens.peek()
    if token is None or token.type != "DOT" or not tokens.at_line_start:
        raise error(f"expecting a dot ('.') {what} but got {describe(token)}", tokens.lineno)
    tokens.next()
    after = tokens.peek()
    if after is not None and after.type != "NEWLINE":
        raise error(f"unexpected {describe(after)} after the dot {what}", tokens.lineno)
    tokens.next()

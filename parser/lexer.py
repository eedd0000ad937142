# parser/lexer.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Lexical analyzer for XTR trace files using SLY

"""Lexical analyzer for XTR trace files.

The trace format is a stream of signed integers structured by terminator
lines holding a single dot. Line breaks are significant inside transitions
(an entry ended by a line break instead of ``;`` is in the legacy encoding),
so they are emitted as tokens rather than ignored.

Supported Tokens:
- INT: signed decimal integer
- DOT: terminator
- SEMI: end of a transition entry in the current encoding
- NEWLINE: line break
- Spaces, tabs and carriage returns: ignored
"""

from sly import Lexer
from utils.logger import get_logger


class XtrLexer(Lexer):
    """SLY-based lexer for XTR trace tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {"INT", "DOT", "SEMI", "NEWLINE"}

    ignore = " \t\r"

    DOT = r"\."
    SEMI = r";"

    @_(r"[-+]?\d+")
    def INT(self, t):
        t.value = int(t.value)
        return t

    @_(r"\n")
    def NEWLINE(self, t):
        self.lineno += 1
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and line information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        logger.debug(f"Illegal character '{illegal_char}' at line {self.lineno}")

        # Skip the illegal character
        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at line {self.lineno}"
        )

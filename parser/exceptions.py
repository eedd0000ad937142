# parser/exceptions.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Exceptions raised while decoding model and trace files

"""Domain-specific exceptions for model and trace decoding.

Every failure is fatal for the stream being decoded: there is no
resynchronisation, and the caller decides how to report it. Errors carry the
offending line number and, where available, the line text.

Hierarchy:
    TracerError
    ├── ModelFormatError: UnknownSection, MalformedModel, InvalidReference
    └── TraceFormatError: MalformedState, MalformedTransition
"""

from typing import Optional


class TracerError(RuntimeError):
    """Base class of all decoding failures.

    Attributes:
        message: Description of the failure
        lineno: 1-based line number of the offending input, if known
        line: Offending input line, if known
    """

    def __init__(
        self, message: str, lineno: Optional[int] = None, line: Optional[str] = None
    ):
        self.message = message
        self.lineno = lineno
        self.line = line
        super().__init__(self._describe())

    def _describe(self) -> str:
        text = self.message
        if self.lineno is not None:
            text = f"line {self.lineno}: {text}"
        if self.line is not None:
            text = f"{text}: '{self.line}'"
        return text


class ModelFormatError(TracerError):
    """The intermediate-format model could not be decoded."""

    pass


class UnknownSection(ModelFormatError):
    """A section header names no known section."""

    pass


class MalformedModel(ModelFormatError):
    """A record matches no grammar of its section."""

    pass


class InvalidReference(ModelFormatError):
    """A record refers to a missing process or to a cell of the wrong kind."""

    pass


class TraceFormatError(TracerError):
    """The trace could not be decoded against the model."""

    pass


class MalformedState(TraceFormatError):
    """A symbolic state deviates from the trace grammar."""

    pass


class MalformedTransition(TraceFormatError):
    """A transition deviates from the trace grammar."""

    pass

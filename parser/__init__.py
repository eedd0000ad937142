# parser/__init__.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Model and trace decoding components

"""Decoding of intermediate-format models and XTR traces.

The two inputs use different numbering schemes. The intermediate format
numbers cells, locations and edges globally, while XTR traces use the
process-local position of a location or edge and separate numberings for
clocks and integer variables. The model loader records both so the trace
decoders and the renderer can translate between them.

Core Functions:
    load: Decodes an intermediate-format model into a read-only Model
    decode_state: Decodes one symbolic state
    decode_transition: Decodes one transition (current or legacy encoding)
    decode_trace: Decodes the initial state and all steps of a trace
    encode_state / encode_transition: Write the current on-disk encoding

Example:
    >>> from parser import load, decode_trace
    >>> with open("model.if") as m, open("run.xtr") as t:
    ...     model = load(m)
    ...     trace = decode_trace(model, t)
"""

from .exceptions import (
    TracerError,
    ModelFormatError,
    UnknownSection,
    MalformedModel,
    InvalidReference,
    TraceFormatError,
    MalformedState,
    MalformedTransition,
)
from .model_loader import load, load_model_file
from .state_codec import decode_state, encode_state
from .transition_codec import decode_transition, encode_transition
from .trace_reader import decode_trace, read_trace_file

__all__ = [
    "load",
    "load_model_file",
    "decode_state",
    "encode_state",
    "decode_transition",
    "encode_transition",
    "decode_trace",
    "read_trace_file",
    "TracerError",
    "ModelFormatError",
    "UnknownSection",
    "MalformedModel",
    "InvalidReference",
    "TraceFormatError",
    "MalformedState",
    "MalformedTransition",
]

__version__ = "1.0.0"
__description__ = "Intermediate-format model and XTR trace decoding"

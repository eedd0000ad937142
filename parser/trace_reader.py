# parser/trace_reader.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# XTR trace reader assembling states and transitions into a trace

"""Assembly of a complete XTR trace.

A trace file holds the initial state followed by (state, transition) pairs
and ends with a lone dot::

    <initial state>
    <state 1>
    <transition 1>
    <state 2>
    <transition 2>
    ...
    .

The transition stored after a state is the one that produced it, so each
pair read in one loop iteration becomes one :class:`Step`. Any failure
aborts the whole trace; no partial result is returned.
"""

from pathlib import Path
from typing import List, TextIO, Union

from model.system import Model
from model.trace import Step, Trace
from utils.logger import get_logger

from .exceptions import MalformedState
from .state_codec import decode_state
from .tokens import TokenStream, as_token_stream
from .transition_codec import decode_transition


def decode_trace(model: Model, source: Union[TokenStream, TextIO, str]) -> Trace:
    """Decode a complete trace.

    Args:
        model: Model the trace was produced from
        source: Open text stream, trace text or token stream

    Returns:
        The decoded trace

    Raises:
        MalformedState: A state cannot be decoded
        MalformedTransition: A transition cannot be decoded
    """
    logger = get_logger()
    tokens = as_token_stream(source)

    initial = decode_state(model, tokens)
    steps: List[Step] = []
    while not _trace_ends(tokens):
        state = decode_state(model, tokens)
        transition = decode_transition(model, tokens)
        steps.append(Step(transition, state))
        logger.debug(f"Decoded step {len(steps)}")

    logger.trace_summary(len(steps))
    return Trace(initial, tuple(steps))


def _trace_ends(tokens: TokenStream) -> bool:
    """Consume the final dot if it comes next."""
    try:
        tokens.skip_newlines()
        if tokens.peek_type() == "DOT" and tokens.at_line_start:
            tokens.next()
            return True
    except ValueError as exc:
        raise MalformedState(str(exc), tokens.lineno) from exc
    return False


def read_trace_file(model: Model, filepath: Union[str, Path]) -> Trace:
    """Decode the trace stored at `filepath`.

    Raises:
        OSError: The file cannot be opened
        TraceFormatError: The content cannot be decoded
    """
    get_logger().debug(f"Reading trace file: {filepath}")
    with open(filepath, "r", encoding="utf-8") as file:
        return decode_trace(model, file)

# parser/transition_codec.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Decoding and encoding of transitions in XTR traces

"""Transition codec.

A transition lists one entry per participating process, one entry per line,
followed by a terminator::

    P E [S_0 S_1 ...] ;
    .

``P`` is the process index, ``E`` the process-local edge index and ``S_k``
the values chosen for the select statements of the edge. Older traces end an
entry with the line break alone and count edges from 1. There is no version
marker in the file, so the encoding is recognised per entry: an entry ended
by a line break without ``;`` has its edge index shifted down by one.
"""

from typing import List, TextIO, Union

from model.system import Model
from model.transition import EdgeInstance, Transition
from utils.logger import get_logger

from .exceptions import MalformedTransition
from .tokens import TokenStream, as_token_stream, describe, expect_terminator, read_int


def decode_transition(model: Model, source: Union[TokenStream, TextIO, str]) -> Transition:
    """Decode one transition.

    Args:
        model: Model the trace was produced from
        source: Token stream positioned at the transition, or stream/text

    Returns:
        The decoded transition, edge indices in the current (0-based) numbering

    Raises:
        MalformedTransition: A select value is not a number, an entry refers
            to a missing process or edge, or the terminator is missing
    """
    tokens = as_token_stream(source)
    try:
        return _read_transition(model, tokens)
    except ValueError as exc:
        raise MalformedTransition(str(exc), tokens.lineno) from exc


def _read_transition(model: Model, tokens: TokenStream) -> Transition:
    logger = get_logger()

    edges: List[EdgeInstance] = []
    legacy = False
    while _entry_follows(tokens):
        process = read_int(tokens, MalformedTransition, "a process index")
        edge = read_int(tokens, MalformedTransition, "an edge index")

        select: List[int] = []
        while tokens.peek_type() == "INT":
            select.append(tokens.next().value)

        ending = tokens.peek_type()
        if ending == "SEMI":
            tokens.next()
        elif ending == "NEWLINE":
            tokens.next()
            # legacy entry: edges counted from 1
            edge -= 1
            legacy = True
        elif ending is not None:
            raise MalformedTransition(
                f"unexpected {describe(tokens.peek())} in the select values", tokens.lineno
            )

        edges.append(_resolve(model, process, edge, select, tokens.lineno))

    if not edges:
        raise MalformedTransition(
            f"transition lists no edges, got {describe(tokens.peek())}", tokens.lineno
        )
    expect_terminator(tokens, MalformedTransition, "closing the transition")

    transition = Transition(tuple(edges))
    logger.transition_decoded(", ".join(str(e) for e in transition), legacy)
    return transition


def _entry_follows(tokens: TokenStream) -> bool:
    """An integer opens another entry; anything else ends the list."""
    tokens.skip_newlines()
    return tokens.peek_type() == "INT"


def _resolve(
    model: Model, process: int, edge: int, select: List[int], lineno: int
) -> EdgeInstance:
    if not 0 <= process < model.process_count:
        raise MalformedTransition(
            f"process {process} does not exist ({model.process_count} declared)", lineno
        )
    owner = model.processes[process]
    if not 0 <= edge < len(owner.edges):
        raise MalformedTransition(
            f"process '{owner.name}' has no edge {edge} ({len(owner.edges)} declared)", lineno
        )
    return EdgeInstance(process, edge, tuple(select))


def encode_transition(transition: Transition) -> str:
    """Encode a transition in the current format (entries closed by ``;``)."""
    lines = [f"{instance} ;" for instance in transition]
    lines.append(".")
    return "\n".join(lines) + "\n"

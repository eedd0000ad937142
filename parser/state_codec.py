# parser/state_codec.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Decoding and encoding of symbolic states in XTR traces

"""Symbolic state codec.

On disk a state is::

    L_0 L_1 ... L_{n-1}         one local location index per process
    .
    i j B                       zero or more explicit bounds, each followed
    .                           by its own terminator
    .                           closes the bound list
    V_0 V_1 ... V_{m-1}         one value per integer/meta variable
    .

``B`` packs a bound as ``value * 2 + strict``. Bounds not listed keep the
seeded defaults: ``(0, <=)`` on the diagonal and in row and column 0, and
infinity elsewhere.
"""

from typing import List, TextIO, Union

from model.bound import Bound, ZERO
from model.state import SymbolicState, seed_dbm
from model.system import Model
from utils.logger import get_logger

from .exceptions import MalformedState
from .tokens import TokenStream, as_token_stream, expect_terminator, read_int


def decode_state(model: Model, source: Union[TokenStream, TextIO, str]) -> SymbolicState:
    """Decode one symbolic state.

    Args:
        model: Model the trace was produced from
        source: Token stream positioned at the state, or stream/text

    Returns:
        The decoded state

    Raises:
        MalformedState: The input deviates from the state grammar or refers
            to locations or clocks the model does not have
    """
    tokens = as_token_stream(source)
    try:
        return _read_state(model, tokens)
    except ValueError as exc:
        raise MalformedState(str(exc), tokens.lineno) from exc


def _read_state(model: Model, tokens: TokenStream) -> SymbolicState:
    logger = get_logger()

    locations: List[int] = []
    for process in model.processes:
        local = read_int(tokens, MalformedState, f"a location of process '{process.name}'")
        if not 0 <= local < len(process.locations):
            raise MalformedState(
                f"process '{process.name}' has no location {local}", tokens.lineno
            )
        locations.append(local)
    expect_terminator(tokens, MalformedState, "after the location vector")

    n = model.clock_count
    dbm = seed_dbm(n)
    overrides = 0
    while _bound_follows(tokens):
        i = read_int(tokens, MalformedState, "a bound row")
        j = read_int(tokens, MalformedState, "a bound column")
        bound = Bound.decode(read_int(tokens, MalformedState, "an encoded bound"))
        expect_terminator(tokens, MalformedState, "after a clock bound")
        if not (0 <= i < n and 0 <= j < n):
            raise MalformedState(
                f"bound on clocks ({i}, {j}) but the model has {n} clock(s)", tokens.lineno
            )
        if i == 0 and j == 0 and bound != ZERO:
            raise MalformedState(f"reference clock bound must be <=0, got {bound}", tokens.lineno)
        dbm[i * n + j] = bound
        overrides += 1
    expect_terminator(tokens, MalformedState, "closing the clock bounds")

    variables = [
        read_int(tokens, MalformedState, f"a value of variable '{name}'")
        for name in model.variables
    ]
    expect_terminator(tokens, MalformedState, "after the variable vector")

    logger.state_decoded(locations, variables, overrides)
    return SymbolicState(tuple(locations), tuple(variables), tuple(dbm), n)


def _bound_follows(tokens: TokenStream) -> bool:
    """An integer starts another bound; anything else ends the list."""
    tokens.skip_newlines()
    return tokens.peek_type() == "INT"


def encode_state(model: Model, state: SymbolicState) -> str:
    """Encode a state in the on-disk form read by :func:`decode_state`.

    Only bounds differing from the seeded defaults are written.
    """
    if state.clock_count != model.clock_count:
        raise ValueError(
            f"state has {state.clock_count} clock(s), model has {model.clock_count}"
        )
    lines = [" ".join(str(loc) for loc in state.locations), "."]
    for i, j, bound in state.overrides():
        lines += [f"{i} {j} {bound.encode()}", "."]
    lines.append(".")
    lines += [" ".join(str(value) for value in state.variables), "."]
    return "\n".join(lines) + "\n"

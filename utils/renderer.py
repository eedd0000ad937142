# utils/renderer.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Human-readable rendering of symbolic traces

"""Rendering of symbolic traces as text.

Traces refer to locations and edges by process-local index; the renderer
resolves them through the process lists of the model to the global cells and
edges whose names and expressions are printed. Rendering never modifies the
model or the trace.

Output layout::

    State: P.L0 Q.L2 v=1 x-y<=3
    <blank line>
    Transition: P.L0 -> P.L1 [2] {x>1; go!; v=2;}
    <blank line>
    State: ...

Every item in a state or transition line is followed by one space.

Column 0 of the bound matrix is seeded with ``(0, <=)`` like row 0, so unless
a state overrides it every clock also prints ``x-t(0)<=0``. Older versions of
the tool left column 0 at infinity and omitted that constraint.
"""

from typing import List

from model.state import SymbolicState
from model.system import Model
from model.trace import Trace
from model.transition import Transition


def render_state(model: Model, state: SymbolicState) -> str:
    """Render location vector, variable values and finite clock bounds."""
    parts: List[str] = []

    for p, process in enumerate(model.processes):
        cell = model.location(p, state.locations[p])
        parts.append(f"{process.name}.{cell.name} ")

    for name, value in zip(model.variables, state.variables):
        parts.append(f"{name}={value} ")

    for i, j, bound in state.constraints():
        parts.append(f"{model.clocks[i]}-{model.clocks[j]}{bound} ")

    return "".join(parts)


def render_transition(model: Model, transition: Transition) -> str:
    """Render every edge of a transition with its select values and labels.

    Expression keys missing from the model render as empty text.
    """
    parts: List[str] = []
    for instance in transition:
        process = model.processes[instance.process]
        edge = model.edge(instance.process, instance.edge)
        source = model.cells[edge.source].name
        target = model.cells[edge.target].name

        text = f"{process.name}.{source} -> {process.name}.{target}"
        if instance.select:
            text += " [" + ",".join(str(v) for v in instance.select) + "]"
        text += (
            f" {{{model.expression(edge.guard)}; {model.expression(edge.sync)}; "
            f"{model.expression(edge.update)};}} "
        )
        parts.append(text)
    return "".join(parts)


def render(model: Model, trace: Trace) -> str:
    """Render a complete trace: the initial state, then every step."""
    out = ["State: ", render_state(model, trace.initial), "\n"]
    for step in trace.steps:
        out += ["\nTransition: ", render_transition(model, step.transition), "\n"]
        out += ["\nState: ", render_state(model, step.state), "\n"]
    return "".join(out)

# model/__init__.py

"""
Domain objects for a timed-automata model and its symbolic traces:
layout cells, processes and edges of the intermediate format, clock bounds,
symbolic states, transitions and traces. These types carry no parsing or
printing logic.
"""

from .cell import (
    Cell,
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
from .bound import Bound, INFINITY, ZERO
from .system import Edge, Model, Process
from .state import SymbolicState, seed_dbm
from .transition import EdgeInstance, Transition
from .trace import Step, Trace

__all__ = [
    "Cell",
    "ClockCell",
    "ConstCell",
    "CostCell",
    "IntegerCell",
    "LocationCell",
    "LocationFlag",
    "MetaCell",
    "StaticCell",
    "SysMetaCell",
    "Bound",
    "INFINITY",
    "ZERO",
    "Edge",
    "Model",
    "Process",
    "SymbolicState",
    "seed_dbm",
    "EdgeInstance",
    "Transition",
    "Step",
    "Trace",
]

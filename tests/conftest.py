# tests/conftest.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the tracer tests.

The configuration handles:
- Python path setup for module imports
- A two-process sample model in the intermediate format with a matching
  trace (current encoding, select values, synchronisation, explicit bounds)
- The one-process, one-clock model used by the basic rendering scenario
"""

import sys
import textwrap
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before running tests."""
    try:
        import model
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


SAMPLE_MODEL = textwrap.dedent(
    """\
    layout
    0:clock:0:t(0)
    1:clock:1:x
    2:const:1
    3:var:0:10:0:0:n
    4:meta:0:1:0:1:m
    5:location::Idle
    6:location:committed:Busy
    7:location:urgent:Done
    8:location::Wait
    9:static:0:5:s
    10:sys_meta:0:3:sm
    11:cost

    instructions
    0:65 3
    \tpush 3
    1:27
    2:66 1 2 3

    processes
    0:0:P
    1:0:Q

    locations
    5:0:-1
    6:0:12
    7:0:-1
    8:1:-1

    edges
    0:5:6:10:11:13
    0:6:7:-1:-1:-1
    1:8:8:10:-1:14

    expressions
    10:0:guard:x > 1
    11:0:sync: go!
    12:0:invariant:x <= 5
    13:0:assign:  n = n + 1
    14:0:assign:m := 1 ? 0 : 1
    """
)

SAMPLE_TRACE = textwrap.dedent(
    """\
    0 0
    .
    .
    0 0
    .
    1 0
    .
    1 0 11
    .
    0 1 -2
    .
    .
    1 0
    .
    0 0 ;
    .
    2 0
    .
    1 0 2147483647
    .
    .
    1 1
    .
    0 1 ;
    1 0 3 ;
    .
    .
    """
)

SCENARIO_A_MODEL = textwrap.dedent(
    """\
    layout
    0:clock:0:x
    1:location::L0
    2:location::L1

    processes
    0:0:P

    locations
    1:0:-1
    2:0:-1

    edges
    0:1:2:3:-1:-1

    expressions
    3:0:guard:x>1
    """
)

SCENARIO_A_TRACE = "0\n.\n.\n.\n1\n.\n.\n.\n0 0 ;\n.\n.\n"


@pytest.fixture
def sample_model_text():
    """Intermediate-format text of the two-process sample model."""
    return SAMPLE_MODEL


@pytest.fixture
def sample_trace_text():
    """XTR trace over the sample model: two steps, the second synchronising."""
    return SAMPLE_TRACE


@pytest.fixture
def sample_model(sample_model_text):
    """The sample model, loaded."""
    from parser import load

    return load(sample_model_text)


@pytest.fixture
def scenario_a_model_text():
    return SCENARIO_A_MODEL


@pytest.fixture
def scenario_a_trace_text():
    return SCENARIO_A_TRACE


@pytest.fixture
def scenario_a_model(scenario_a_model_text):
    from parser import load

    return load(scenario_a_model_text)

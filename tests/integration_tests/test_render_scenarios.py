# tests/integration_tests/test_render_scenarios.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# End-to-end scenarios: model text and trace text to rendered output

"""
End-to-end rendering scenarios.

Each scenario loads a model, decodes a trace against it and compares the
rendered text exactly, including the trailing space after every item.
"""

import pytest
from model.transition import EdgeInstance, Transition
from parser import decode_trace, load
from utils.renderer import render, render_state, render_transition


SAMPLE_RENDERING = (
    "State: P.Idle Q.Wait n=0 m=0 t(0)-x<=0 x-t(0)<=0 \n"
    "\n"
    "Transition: P.Idle -> P.Busy {x > 1; go!; n = n + 1;} \n"
    "\n"
    "State: P.Busy Q.Wait n=1 m=0 t(0)-x<=-1 x-t(0)<5 \n"
    "\n"
    "Transition: P.Busy -> P.Done {; ; ;} Q.Wait -> Q.Wait [3] {x > 1; ; m := 1 ? 0 : 1;} \n"
    "\n"
    "State: P.Done Q.Wait n=1 m=1 t(0)-x<=0 \n"
)


def run_scenario(model_text: str, trace_text: str) -> str:
    model = load(model_text)
    return render(model, decode_trace(model, trace_text))


class TestBasicScenarios:
    """Single-process traces."""

    def test_one_step_trace(self, scenario_a_model_text, scenario_a_trace_text):
        assert run_scenario(scenario_a_model_text, scenario_a_trace_text) == (
            "State: P.L0 \n\nTransition: P.L0 -> P.L1 {x>1; ; ;} \n\nState: P.L1 \n"
        )

    def test_legacy_trace_renders_like_current(self, scenario_a_model_text):
        legacy = "0\n.\n.\n.\n1\n.\n.\n.\n0 1\n.\n.\n"
        current = "0\n.\n.\n.\n1\n.\n.\n.\n0 0 ;\n.\n.\n"
        assert run_scenario(scenario_a_model_text, legacy) == run_scenario(
            scenario_a_model_text, current
        )

    def test_missing_expression_renders_empty(self, scenario_a_model_text, scenario_a_trace_text):
        model_text = scenario_a_model_text.replace("3:0:guard:x>1\n", "")
        output = run_scenario(model_text, scenario_a_trace_text)
        assert "Transition: P.L0 -> P.L1 {; ; ;} \n" in output

    def test_initial_state_only(self, scenario_a_model_text):
        assert run_scenario(scenario_a_model_text, "0\n.\n.\n.\n.\n") == "State: P.L0 \n"


class TestSampleScenario:
    """Two processes with variables, bounds, select values and synchronisation."""

    def test_full_rendering(self, sample_model_text, sample_trace_text):
        assert run_scenario(sample_model_text, sample_trace_text) == SAMPLE_RENDERING

    def test_state_line(self, sample_model, sample_trace_text):
        trace = decode_trace(sample_model, sample_trace_text)
        assert render_state(sample_model, trace.steps[0].state) == (
            "P.Busy Q.Wait n=1 m=0 t(0)-x<=-1 x-t(0)<5 "
        )

    @pytest.mark.parametrize(
        "select, expected",
        [
            ((), "Q.Wait -> Q.Wait {x > 1; ; m := 1 ? 0 : 1;} "),
            ((3,), "Q.Wait -> Q.Wait [3] {x > 1; ; m := 1 ? 0 : 1;} "),
            ((1, -2), "Q.Wait -> Q.Wait [1,-2] {x > 1; ; m := 1 ? 0 : 1;} "),
        ],
    )
    def test_select_values(self, sample_model, select, expected):
        transition = Transition((EdgeInstance(1, 0, select),))
        assert render_transition(sample_model, transition) == expected

    def test_rendering_leaves_inputs_unchanged(
        self, sample_model_text, sample_model, sample_trace_text
    ):
        trace = decode_trace(sample_model, sample_trace_text)
        model_before = load(sample_model_text)
        trace_before = decode_trace(model_before, sample_trace_text)

        first = render(sample_model, trace)
        second = render(sample_model, trace)

        assert first == second
        assert sample_model == model_before
        assert trace == trace_before

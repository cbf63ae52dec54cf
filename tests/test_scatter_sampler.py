from __future__ import annotations

import math

import pytest

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.image_drawer.recording_drawer import RecordingImageDrawer
from adapters.plot_sampler.scatter_sampler import ScatterPlotSampler
from adapters.simplifier.constant_folder import ConstantFolder
from contracts import ErrorKind, EvaluationError, NumberNode, number, operation, variable
from environment import Environment


def _sampler() -> ScatterPlotSampler:
    return ScatterPlotSampler(ASTEvaluator(), ConstantFolder())


def _plot(expr, var, lo, hi, step):
    return operation("plot", expr, var, lo, hi, step)


def _three_x():
    return operation("*", number(3), variable("x"))


def test_plot_samples_inclusive_of_max():
    drawer = RecordingImageDrawer()
    env = Environment(drawer)

    result = _sampler().plot(env, _plot(_three_x(), variable("x"), number(2), number(5), number(0.5)))

    assert isinstance(result, NumberNode)
    plot = drawer.last
    assert plot.xs == [2, 2.5, 3, 3.5, 4, 4.5, 5]
    assert plot.ys == [6, 7.5, 9, 10.5, 12, 13.5, 15]
    assert plot.title == "Scatter Plot"
    assert plot.x_label == "x"
    assert plot.y_label == "y"


def test_plot_resolves_bounds_and_expression_from_bindings():
    drawer = RecordingImageDrawer()
    env = Environment(drawer, {
        "c": number(4),
        "step": number(1),
        "hi": operation("+", number(1), number(1)),
    })
    expr = operation("+", operation("^", variable("a"), number(2)), operation("*", variable("c"), variable("a")))

    _sampler().plot(env, _plot(expr, variable("a"), number(-2), variable("hi"), variable("step")))

    assert drawer.last.x_label == "a"
    assert drawer.last.xs == [-2, -1, 0, 1, 2]
    assert drawer.last.ys == [-4, -3, 0, 5, 12]


def test_plot_reproduces_float_accumulation_past_max():
    drawer = RecordingImageDrawer()

    _sampler().plot(Environment(drawer), _plot(variable("x"), variable("x"), number(0), number(1), number(0.1)))

    xs = drawer.last.xs
    assert len(xs) == 12
    assert xs[0] == 0
    assert xs[-1] > 1.0
    assert xs[-1] == pytest.approx(1.1)


def test_plot_single_point_when_min_equals_max():
    drawer = RecordingImageDrawer()

    _sampler().plot(Environment(drawer), _plot(_three_x(), variable("x"), number(2), number(2), number(1)))

    assert drawer.last.points == [(2.0, 6.0)]


def test_plot_keeps_ieee_values_in_samples():
    drawer = RecordingImageDrawer()
    expr = operation("/", number(1), variable("x"))

    _sampler().plot(Environment(drawer), _plot(expr, variable("x"), number(-1), number(1), number(1)))

    assert drawer.last.ys[0] == -1.0
    assert drawer.last.ys[1] == math.inf
    assert drawer.last.ys[2] == 1.0


def test_plot_invalid_range_fails():
    drawer = RecordingImageDrawer()

    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(Environment(drawer), _plot(_three_x(), variable("x"), number(5), number(2), number(0.5)))

    assert exc_info.value.kind == ErrorKind.INVALID_RANGE
    assert drawer.plots == []


@pytest.mark.parametrize("step", [0, -0.5])
def test_plot_non_positive_step_fails(step):
    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(_three_x(), variable("x"), number(2), number(5), number(step)),
        )

    assert exc_info.value.kind == ErrorKind.NON_POSITIVE_STEP


def test_plot_range_checked_before_step():
    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(_three_x(), variable("x"), number(5), number(2), number(-1)),
        )

    assert exc_info.value.kind == ErrorKind.INVALID_RANGE


def test_plot_variable_already_bound_fails():
    env = Environment(RecordingImageDrawer(), {"x": number(1)})

    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(env, _plot(_three_x(), variable("x"), number(2), number(5), number(0.5)))

    assert exc_info.value.kind == ErrorKind.VARIABLE_ALREADY_BOUND


def test_plot_constant_in_variable_slot_reported_as_already_bound():
    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(number(3), operation("+", number(1), number(1)), number(0), number(1), number(0.5)),
        )

    assert exc_info.value.kind == ErrorKind.VARIABLE_ALREADY_BOUND


def test_plot_other_undefined_variable_fails_in_dry_run():
    expr = operation("*", variable("x"), variable("y"))

    with pytest.raises(EvaluationError) as exc_info:
        # min > max as well; the dry run fires first
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(expr, variable("x"), number(5), number(2), number(0.5)),
        )

    assert exc_info.value.kind == ErrorKind.UNDEFINED_VARIABLE
    assert "y" in exc_info.value.message


def test_plot_symbolic_bound_fails():
    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(variable("x"), variable("x"), number(0), variable("hi"), number(0.5)),
        )

    assert exc_info.value.kind == ErrorKind.NON_NUMERIC_BOUND


def test_plot_step_that_cannot_advance_fails():
    # 0.5 is below float spacing at 1e16
    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(variable("x"), variable("x"), number(1e16), number(2e16), number(0.5)),
        )

    assert exc_info.value.kind == ErrorKind.NON_POSITIVE_STEP


def test_plot_infinite_min_fails():
    drawer = RecordingImageDrawer()

    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(drawer),
            _plot(variable("x"), variable("x"), number(-math.inf), number(0), number(1)),
        )

    assert exc_info.value.kind == ErrorKind.NON_NUMERIC_BOUND
    assert drawer.plots == []


def test_plot_overflowing_max_fails():
    overflow = operation("^", number(10), number(400))

    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(variable("x"), variable("x"), number(0), overflow, number(1)),
        )

    assert exc_info.value.kind == ErrorKind.NON_NUMERIC_BOUND


def test_plot_max_plus_step_overflow_fails():
    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(
            Environment(RecordingImageDrawer()),
            _plot(variable("x"), variable("x"), number(0), number(1.7e308), number(1e308)),
        )

    assert exc_info.value.kind == ErrorKind.NON_NUMERIC_BOUND


def test_plot_rejects_non_plot_node():
    with pytest.raises(EvaluationError) as exc_info:
        _sampler().plot(Environment(RecordingImageDrawer()), _three_x())

    assert exc_info.value.kind == ErrorKind.UNKNOWN_OPERATION


def test_plot_leaves_environment_untouched():
    env = Environment(RecordingImageDrawer(), {"c": number(2)})

    _sampler().plot(env, _plot(variable("c"), variable("x"), number(0), number(1), number(1)))

    assert env.variables == {"c": number(2)}
    assert not env.contains("x")

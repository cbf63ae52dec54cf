from __future__ import annotations

import pytest

from adapters.simplifier.constant_folder import ConstantFolder
from contracts import NumberNode, number, operation, variable


def test_simplify_folds_constant_addition():
    assert ConstantFolder().simplify({}, operation("+", number(2), number(3))) == number(5.0)


def test_simplify_folds_arithmetic_subset():
    folder = ConstantFolder()

    assert folder.simplify({}, operation("-", number(2), number(5))) == number(-3)
    assert folder.simplify({}, operation("*", number(4), number(2.5))) == number(10)
    assert folder.simplify({}, operation("^", number(2), number(10))) == number(1024)
    assert folder.simplify({}, operation("negate", number(7))) == number(-7)


def test_simplify_leaves_non_folding_operators_unfolded():
    folder = ConstantFolder()

    assert folder.simplify({}, operation("sin", number(0))) == operation("sin", number(0))
    assert folder.simplify({}, operation("/", number(6), number(2))) == operation(
        "/", number(6), number(2)
    )
    assert folder.simplify({}, operation("sqrt", number(16))) == operation("sqrt", number(16))


def test_simplify_folds_inside_non_folding_operator():
    node = operation("toDouble", operation("+", number(2), number(3)))

    assert ConstantFolder().simplify({}, node) == operation("toDouble", number(5))


def test_simplify_keeps_unbound_variable():
    folder = ConstantFolder()

    assert folder.simplify({}, variable("x")) == variable("x")
    assert folder.simplify({}, operation("*", operation("+", number(2), number(3)), variable("x"))) == (
        operation("*", number(5), variable("x"))
    )


def test_simplify_substitutes_and_folds_bound_variables():
    bindings = {
        "x": operation("+", number(2), number(1)),
        "y": variable("x"),
    }

    result = ConstantFolder().simplify(bindings, operation("*", variable("y"), number(4)))

    assert result == number(12)


def test_simplify_substitutes_symbolic_binding():
    bindings = {"x": operation("sin", variable("t"))}

    result = ConstantFolder().simplify(bindings, operation("+", variable("x"), number(1)))

    assert result == operation("+", operation("sin", variable("t")), number(1))


def test_simplify_meta_operator_collapses_itself():
    folder = ConstantFolder()

    assert folder.simplify({}, operation("simplify", operation("+", number(2), number(3)))) == number(5)
    assert folder.simplify(
        {}, operation("+", operation("simplify", variable("x")), number(1))
    ) == operation("+", variable("x"), number(1))


def test_simplify_abs_folds_numbers_and_keeps_symbols():
    folder = ConstantFolder()

    assert folder.simplify({}, operation("abs", number(-3))) == number(3)
    assert folder.simplify({}, operation("abs", operation("negate", number(3)))) == number(3)
    assert folder.simplify({}, operation("abs", variable("x"))) == operation("abs", variable("x"))


def test_simplify_negate_of_symbol_is_kept():
    node = operation("negate", variable("x"))

    assert ConstantFolder().simplify({}, node) == node


def test_simplify_does_not_touch_input_tree():
    node = operation("+", variable("x"), operation("*", number(2), number(3)))
    before = node.model_copy(deep=True)

    result = ConstantFolder().simplify({"x": number(1)}, node)

    assert node == before
    assert result == number(7)


def test_simplify_is_idempotent():
    folder = ConstantFolder()
    bindings = {
        "a": operation("+", number(1), number(2)),
        "b": operation("*", variable("a"), variable("t")),
    }
    nodes = [
        number(4),
        variable("t"),
        variable("b"),
        operation("+", variable("a"), variable("b")),
        operation("sin", operation("^", variable("a"), number(2))),
        operation("simplify", operation("negate", variable("a"))),
        operation("abs", operation("-", variable("t"), variable("a"))),
        operation("/", operation("+", number(1), number(1)), variable("q")),
        operation("frobnicate", operation("+", number(1), number(1))),
    ]

    for node in nodes:
        once = folder.simplify(bindings, node)
        assert folder.simplify(bindings, once) == once


def test_simplify_returns_number_nodes_for_folds():
    result = ConstantFolder().simplify({}, operation("^", number(2), number(0.5)))

    assert isinstance(result, NumberNode)
    assert result.value == pytest.approx(2 ** 0.5)

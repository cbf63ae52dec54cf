"""
Adapter: ASTEvaluator
Implementuje port Evaluator — rekurencyjne przejście drzewa Node na float64.

Arytmetyka idzie przez ufunc-i numpy w trybie np.errstate(all="ignore"):
dzielenie przez zero, log(0), sqrt(-1) czy przepełnienie dają ±inf / nan
zamiast wyjątków (semantyka IEEE-754). Jedyne jawne błędy to niezwiązana
zmienna i nieznany operator.
"""
from __future__ import annotations

from typing import Callable, Mapping

import numpy as np

from contracts import (
    ErrorKind,
    EvaluationError,
    Node,
    NumberNode,
    OperationNode,
    VariableNode,
)


def _abs(a: float) -> float:
    return a if a >= 0 else -a


# Mapowanie nazw operatorów na czyste funkcje operandów (arność: OPERATOR_ARITY)
OPERATIONS: dict[str, Callable[..., float]] = {
    "toDouble":  lambda a: a,
    "+":         np.add,
    "-":         np.subtract,
    "*":         np.multiply,
    "/":         np.divide,
    "^":         np.power,
    "negate":    np.negative,
    "sin":       np.sin,
    "cos":       np.cos,
    "tan":       np.tan,
    "csc":       lambda a: np.divide(1.0, np.sin(a)),
    "sec":       lambda a: np.divide(1.0, np.cos(a)),
    "cot":       lambda a: np.divide(1.0, np.tan(a)),
    "asin":      np.arcsin,
    "acos":      np.arccos,
    "atan":      np.arctan,
    "sqrt":      np.sqrt,
    "cbrt":      np.cbrt,
    "toRadians": np.deg2rad,
    "toDegrees": np.rad2deg,
    "log":       np.log,
    "log10":     np.log10,
    "exp":       np.exp,
    "abs":       _abs,
}


def apply_operation(name: str, operands: list[float]) -> float:
    """Stosuje operator do już policzonych operandów (wspólne z ConstantFolder)."""
    fn = OPERATIONS.get(name)
    if fn is None:
        raise EvaluationError(ErrorKind.UNKNOWN_OPERATION, f"Unknown operation: {name}")
    with np.errstate(all="ignore"):
        return float(fn(*operands))


class ASTEvaluator:
    """Ewaluator drzewa wyrażeń na liczbach zmiennoprzecinkowych."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, bindings: Mapping[str, Node], node: Node) -> float:
        """
        Rekurencyjnie oblicza wartość drzewa.
        bindings: podstawienia zmiennych; związane wyrażenia są liczone
        rekurencyjnie (łańcuchy x → y → 3 działają, cykle nie są wykrywane).
        """
        return self._eval(bindings, node)

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, bindings: Mapping[str, Node], node: Node) -> float:
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, VariableNode):
            if node.name not in bindings:
                raise EvaluationError(
                    ErrorKind.UNDEFINED_VARIABLE, f"Undefined variable: {node.name}"
                )
            return self._eval(bindings, bindings[node.name])

        if isinstance(node, OperationNode):
            # funkcje mają jeden argument, operatory dwa
            operands = [self._eval(bindings, node.children[0])]
            if len(node.children) == 2:
                operands.append(self._eval(bindings, node.children[1]))
            return apply_operation(node.name, operands)

        raise TypeError(f"Nieznany typ węzła: {type(node)}")

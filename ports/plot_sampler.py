"""
Port: PlotSampler
Odpowiedzialność: walidacja węzła plot(expr, var, min, max, step) i próbkowanie wyrażenia.
"""
from typing import Protocol, runtime_checkable

from contracts import Node
from environment import Environment


@runtime_checkable
class PlotSampler(Protocol):
    def plot(self, env: Environment, node: Node) -> Node:
        """
        Samples expr over [min, max] with the given step and hands the (x, y)
        sequences to env.image_drawer.
        Returns a sentinel NumberNode; the value carries no meaning.
        Raises EvaluationError (UNDEFINED_VARIABLE, NON_NUMERIC_BOUND,
        INVALID_RANGE, VARIABLE_ALREADY_BOUND, NON_POSITIVE_STEP) — checked
        in exactly that order.
        """
        ...

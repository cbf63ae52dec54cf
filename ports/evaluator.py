"""
Port: Evaluator
Odpowiedzialność: redukcja drzewa wyrażeń do pojedynczej liczby double.
"""
from typing import Mapping, Protocol, runtime_checkable

from contracts import Node


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, bindings: Mapping[str, Node], node: Node) -> float:
        """
        Reduces an expression tree to a float.
        bindings: variable name -> bound Node (may itself be an expression;
        resolved recursively, cycles are not detected).
        Division by zero, log of non-positive values etc. follow IEEE-754
        semantics (inf / nan) and do not raise.
        Raises EvaluationError(UNDEFINED_VARIABLE) for unbound variables.
        Raises EvaluationError(UNKNOWN_OPERATION) for unknown operator names.
        """
        ...

"""
Port: Simplifier
Odpowiedzialność: częściowe przepisanie drzewa (constant folding) bez pełnej ewaluacji.
"""
from typing import Mapping, Protocol, runtime_checkable

from contracts import Node


@runtime_checkable
class Simplifier(Protocol):
    def simplify(self, bindings: Mapping[str, Node], node: Node) -> Node:
        """
        Returns an equivalent, partially folded tree.
        Bound variables are substituted (and simplified); unbound variables
        are kept as-is, so open expressions are fine.
        Only + - * ^ negate abs are folded, and only when all operands are numbers.
        Never mutates the input; simplify(b, simplify(b, n)) == simplify(b, n).
        """
        ...

"""
Adapter: ConstantFolder
Implementuje port Simplifier — constant folding drzewa Node.

Zwijane są wyłącznie: + - * ^ (gdy OBA operandy są liczbami), negate i abs
(gdy operand jest liczbą). Pozostałe operatory (trygonometria, log, /, sqrt,
toDouble, nieznane nazwy) są tylko przebudowywane z uproszczonymi dziećmi —
nawet jeśli wszystkie dzieci są stałymi.

Węzeł wejściowy nigdy nie jest modyfikowany; wynik to zawsze nowy węzeł
(albo ten sam, niezmieniony liść).
"""
from __future__ import annotations

from typing import Mapping

from adapters.evaluator.ast_evaluator import apply_operation
from contracts import Node, NumberNode, OperationNode, VariableNode

_FOLD_BINARY = frozenset({"+", "-", "*", "^"})
_FOLD_UNARY = frozenset({"negate", "abs"})
FOLDED_OPERATORS = _FOLD_BINARY | _FOLD_UNARY


class ConstantFolder:
    """Best-effort upraszczanie: podstawienie zmiennych + zwijanie stałych."""

    # -- Simplifier protocol -----------------------------------------------

    def simplify(self, bindings: Mapping[str, Node], node: Node) -> Node:
        if isinstance(node, NumberNode):
            return node

        if isinstance(node, VariableNode):
            if node.name not in bindings:
                return node  # otwarte wyrażenie
            return self.simplify(bindings, bindings[node.name])

        if isinstance(node, OperationNode):
            return self._simplify_operation(bindings, node)

        raise TypeError(f"Nieznany typ węzła: {type(node)}")

    # -- Prywatne ----------------------------------------------------------

    def _simplify_operation(
        self,
        bindings: Mapping[str, Node],
        node: OperationNode,
    ) -> Node:
        first = self.simplify(bindings, node.children[0])
        second = None
        if len(node.children) == 2:
            second = self.simplify(bindings, node.children[1])

        if node.name == "simplify":
            return first

        if node.name in _FOLD_BINARY and second is not None:
            if isinstance(first, NumberNode) and isinstance(second, NumberNode):
                return NumberNode(
                    value=apply_operation(node.name, [first.value, second.value])
                )
        elif node.name in _FOLD_UNARY and isinstance(first, NumberNode):
            return NumberNode(value=apply_operation(node.name, [first.value]))

        simplified = (first,) if second is None else (first, second)
        return OperationNode(
            name=node.name,
            children=simplified + node.children[len(simplified):],
        )

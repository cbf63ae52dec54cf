"""
Adapter: CommandDispatcher
Kieruje komendę (węzeł najwyższego poziomu) do właściwego komponentu
na podstawie nazwy operatora:

  toDouble(e)             → NumberNode(Evaluator.evaluate(e))
  simplify(e)             → Simplifier.simplify(e)
  plot(e, x, lo, hi, dx)  → PlotSampler.plot(...)
  x := e                  → przypisanie (e zapisane BEZ ewaluacji)
  cokolwiek innego        → Simplifier.simplify(węzeł)

Metody evaluate / simplify / plot to trzy publiczne punkty wejścia rdzenia.
"""
from __future__ import annotations

import logging

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.plot_sampler.scatter_sampler import ScatterPlotSampler
from adapters.simplifier.constant_folder import ConstantFolder
from contracts import (
    ErrorKind,
    EvaluationError,
    Node,
    NumberNode,
    OperationNode,
    VariableNode,
    render,
)
from environment import Environment
from ports.evaluator import Evaluator
from ports.plot_sampler import PlotSampler
from ports.simplifier import Simplifier

logger = logging.getLogger("astcalc.dispatcher")


class CommandDispatcher:
    def __init__(
        self,
        evaluator: Evaluator,
        simplifier: Simplifier,
        sampler: PlotSampler,
    ) -> None:
        self.evaluator = evaluator
        self.simplifier = simplifier
        self.sampler = sampler

    @classmethod
    def default(cls) -> "CommandDispatcher":
        evaluator = ASTEvaluator()
        simplifier = ConstantFolder()
        return cls(evaluator, simplifier, ScatterPlotSampler(evaluator, simplifier))

    # -- punkty wejścia ----------------------------------------------------

    def evaluate(self, env: Environment, node: Node) -> float:
        return self.evaluator.evaluate(env.variables, node)

    def simplify(self, env: Environment, node: Node) -> Node:
        return self.simplifier.simplify(env.variables, node)

    def plot(self, env: Environment, node: Node) -> Node:
        return self.sampler.plot(env, node)

    def to_double(self, env: Environment, node: Node) -> NumberNode:
        return NumberNode(value=self.evaluate(env, node))

    # -- dispatch ------------------------------------------------------

    def handle(self, env: Environment, node: Node) -> Node:
        """Wykonuje jedną komendę; EvaluationError propaguje do wywołującego."""
        if not isinstance(node, OperationNode):
            return self.simplify(env, node)

        if node.name == "toDouble":
            return self.to_double(env, node.children[0])
        if node.name == "simplify":
            return self.simplify(env, node.children[0])
        if node.name == "plot":
            return self.plot(env, node)
        if node.name == ":=":
            return self._assign(env, node)
        return self.simplify(env, node)

    # -- Prywatne ----------------------------------------------------------

    def _assign(self, env: Environment, node: OperationNode) -> Node:
        target, expr = node.children
        if not isinstance(target, VariableNode):
            raise EvaluationError(
                ErrorKind.INVALID_ASSIGNMENT,
                f"Cannot assign to {render(target)}: not a variable",
            )
        previous = env.lookup(target.name)
        env.assign(target.name, expr)
        try:
            result = self.simplify(env, expr)
        except RecursionError:
            # x := x + 1: przywracamy poprzedni stan
            if previous is None:
                env.unassign(target.name)
            else:
                env.assign(target.name, previous)
            raise
        logger.info("Bound %s := %s", target.name, render(expr))
        return result

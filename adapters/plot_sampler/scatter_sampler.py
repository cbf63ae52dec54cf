"""
Adapter: ScatterPlotSampler
Implementuje port PlotSampler — plot(expr, var, min, max, step).

Kolejność kroków jest istotna (decyduje, który błąd zostanie zgłoszony):
  1. uproszczenie argumentów: step, max, min, var, expr
  2. próba na sucho: expr z jedynym podstawieniem {var: 1.0}
     (wykrywa inne niezwiązane zmienne → UNDEFINED_VARIABLE)
  3. step/max/min muszą być liczbami      → NON_NUMERIC_BOUND
  4. min <= max                           → INVALID_RANGE
  5. var nadal jest zmienną (niezwiązaną) → VARIABLE_ALREADY_BOUND
  6. step > 0                             → NON_POSITIVE_STEP
     min, max + step, step skończone      → NON_NUMERIC_BOUND
  7. próbkowanie x od min, dopóki x < max + step
  8. y = expr(x) dla każdego x
  9. przekazanie danych do env.image_drawer
"""
from __future__ import annotations

import logging
import math

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
from ports.simplifier import Simplifier

logger = logging.getLogger("astcalc.plot_sampler")

PLOT_TITLE = "Scatter Plot"
Y_LABEL = "y"
PROBE_VALUE = 1.0


class ScatterPlotSampler:
    """Próbkuje wyrażenie jednej zmiennej i rysuje wykres punktowy."""

    def __init__(self, evaluator: Evaluator, simplifier: Simplifier) -> None:
        self._evaluator = evaluator
        self._simplifier = simplifier

    # -- PlotSampler protocol ----------------------------------------------

    def plot(self, env: Environment, node: Node) -> Node:
        if not isinstance(node, OperationNode) or node.name != "plot" or len(node.children) != 5:
            raise EvaluationError(
                ErrorKind.UNKNOWN_OPERATION,
                "Expected plot(expr, var, min, max, step)",
            )

        bindings = env.variables
        expr_node, var_node, min_node, max_node, step_node = node.children
        step = self._simplifier.simplify(bindings, step_node)
        var_max = self._simplifier.simplify(bindings, max_node)
        var_min = self._simplifier.simplify(bindings, min_node)
        var = self._simplifier.simplify(bindings, var_node)
        expr = self._simplifier.simplify(bindings, expr_node)

        # próba na sucho, wartość jest odrzucana
        probe: dict[str, Node] = {}
        if isinstance(var, VariableNode):
            probe[var.name] = NumberNode(value=PROBE_VALUE)
        self._evaluator.evaluate(probe, expr)

        if not (
            isinstance(step, NumberNode)
            and isinstance(var_max, NumberNode)
            and isinstance(var_min, NumberNode)
        ):
            raise EvaluationError(
                ErrorKind.NON_NUMERIC_BOUND,
                "plot bounds and step must evaluate to numbers",
            )
        if var_min.value > var_max.value:
            raise EvaluationError(
                ErrorKind.INVALID_RANGE,
                f"plot range is empty: min {var_min.value} > max {var_max.value}",
            )
        if not isinstance(var, VariableNode):
            raise EvaluationError(
                ErrorKind.VARIABLE_ALREADY_BOUND,
                "plot variable is already defined (or is not a variable)",
            )
        if step.value <= 0:
            raise EvaluationError(
                ErrorKind.NON_POSITIVE_STEP,
                f"plot step must be positive, got {step.value}",
            )
        if not all(math.isfinite(v) for v in (var_min.value, var_max.value + step.value, step.value)):
            raise EvaluationError(
                ErrorKind.NON_NUMERIC_BOUND,
                "plot bounds and step must be finite",
            )

        xs = self._sample_range(var_min.value, var_max.value, step.value)
        ys = [
            self._evaluator.evaluate({var.name: NumberNode(value=x)}, expr)
            for x in xs
        ]
        logger.debug("Sampled %d points of %s over %s.", len(xs), render(expr), var.name)

        env.image_drawer.draw_scatter_plot(PLOT_TITLE, var.name, Y_LABEL, xs, ys)
        return NumberNode(value=1.0)

    # -- Prywatne ----------------------------------------------------------

    @staticmethod
    def _sample_range(start: float, stop: float, step: float) -> list[float]:
        # granica < stop + step, a nie <= stop: przy kumulacji błędu float
        # ostatnia próbka może wypaść minimalnie za stop
        xs: list[float] = []
        x = start
        while x < stop + step:
            xs.append(x)
            if x + step == x:
                # krok poniżej rozdzielczości float przy x
                raise EvaluationError(
                    ErrorKind.NON_POSITIVE_STEP,
                    f"plot step {step} does not advance past {x}",
                )
            x += step
        return xs

"""
contracts.py — Jedyne źródło prawdy dla typów danych AstCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

Węzły drzewa wyrażeń są niemutowalne (frozen) — każde przepisanie drzewa
buduje nowe węzły, więc poddrzewa można swobodnie współdzielić między
wyrażeniem użytkownika a podstawieniami zmiennych w Environment.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Operatory ───────────────────────────────────

# Zadeklarowana arność znanych operatorów. Nieznane nazwy są dozwolone
# w drzewie; błąd zgłasza dopiero Evaluator (UNKNOWN_OPERATION).
OPERATOR_ARITY: dict[str, int] = {
    "toDouble": 1,
    "simplify": 1,
    "+": 2, "-": 2, "*": 2, "/": 2, "^": 2,
    "negate": 1,
    "sin": 1, "cos": 1, "tan": 1,
    "csc": 1, "sec": 1, "cot": 1,
    "asin": 1, "acos": 1, "atan": 1,
    "sqrt": 1, "cbrt": 1,
    "toRadians": 1, "toDegrees": 1,
    "log": 1, "log10": 1, "exp": 1,
    "abs": 1,
    "plot": 5,
    ":=": 2,
}


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorKind(str, Enum):
    UNDEFINED_VARIABLE = "undefined_variable"
    UNKNOWN_OPERATION = "unknown_operation"
    NON_NUMERIC_BOUND = "non_numeric_bound"
    INVALID_RANGE = "invalid_range"
    VARIABLE_ALREADY_BOUND = "variable_already_bound"
    NON_POSITIVE_STEP = "non_positive_step"
    INVALID_ASSIGNMENT = "invalid_assignment"


class EvaluationError(Exception):
    """Jedyny typ błędu rdzenia — nieodwracalny w miejscu powstania."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"EvaluationError({self.kind.value}, {self.message!r})"


# ─────────────────────────── Drzewo wyrażeń ──────────────────────────────

# inf / nan w JSON jako "Infinity" / "-Infinity" / "NaN", żeby węzeł dało się odesłać
class NumberNode(BaseModel):
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    node_type: Literal["number"] = "number"
    value: float


class VariableNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["variable"] = "variable"
    name: str


class OperationNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["operation"] = "operation"
    name: str
    children: tuple["Node", ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_arity(self) -> "OperationNode":
        expected = OPERATOR_ARITY.get(self.name)
        if expected is not None and len(self.children) != expected:
            raise ValueError(
                f"operator {self.name!r} expects {expected} children, "
                f"got {len(self.children)}"
            )
        return self


Node = Annotated[
    Union[NumberNode, VariableNode, OperationNode],
    Field(discriminator="node_type"),
]
OperationNode.model_rebuild()


def number(value: float) -> NumberNode:
    return NumberNode(value=value)


def variable(name: str) -> VariableNode:
    return VariableNode(name=name)


def operation(name: str, *children: Node) -> OperationNode:
    return OperationNode(name=name, children=children)


def render(node: Node) -> str:
    """Czytelna, infiksowa reprezentacja drzewa (tylko do wyświetlania)."""
    if isinstance(node, NumberNode):
        v = node.value
        return str(int(v)) if v.is_integer() else repr(v)
    if isinstance(node, VariableNode):
        return node.name
    args = [render(c) for c in node.children]
    if len(args) == 2 and OPERATOR_ARITY.get(node.name) == 2:
        return f"({args[0]} {node.name} {args[1]})"
    return f"{node.name}({', '.join(args)})"


# ─────────────────────────── Plot ────────────────────────────────────────

class PlotData(BaseModel):
    title: str
    x_label: str
    y_label: str
    xs: list[float] = Field(default_factory=list)
    ys: list[float] = Field(default_factory=list)

    @property
    def points(self) -> list[tuple[float, float]]:
        return list(zip(self.xs, self.ys))

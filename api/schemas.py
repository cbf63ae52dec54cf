"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import Node, PlotData


# ─────────────────────────── request ─────────────────────────────

class CommandRequest(BaseModel):
    node: Node
    bindings: dict[str, Node] = Field(default_factory=dict)


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateResponse(BaseModel):
    value: Optional[float]   # None dla inf / nan (JSON ich nie zna)
    display: str             # repr wartości, np. "inf", "nan", "5.0"


# ─────────────────────────── /simplify, /run ─────────────────────

class SimplifyResponse(BaseModel):
    node: Node
    display: str


class RunResponse(BaseModel):
    result: Node
    display: str
    bindings: dict[str, Node]       # stan zmiennych PO wykonaniu komendy
    plots: list[PlotData] = Field(default_factory=list)


# ─────────────────────────── /plot ───────────────────────────────

class PlotResponse(BaseModel):
    plot: PlotData
    point_count: int


# ─────────────────────────── /operators ──────────────────────────

class OperatorInfo(BaseModel):
    name: str
    arity: int
    evaluated: bool   # obsługiwany przez Evaluator
    folded: bool      # zwijany przez Simplifier


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str

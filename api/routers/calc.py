"""
Router: POST /evaluate, /simplify, /plot, /run
Handlery są synchroniczne (CPU, rekurencja), więc FastAPI uruchamia je w threadpoolu.
Każde żądanie dostaje świeże Environment z podstawieniami z body
i RecordingImageDrawer — dane wykresu wracają w odpowiedzi.
"""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends

from adapters.image_drawer.recording_drawer import RecordingImageDrawer
from api.dependencies import get_dispatcher
from api.schemas import (
    CommandRequest,
    EvaluateResponse,
    PlotResponse,
    RunResponse,
    SimplifyResponse,
)
from contracts import render
from environment import Environment

router = APIRouter(tags=["calc"])


def _env(body: CommandRequest) -> tuple[Environment, RecordingImageDrawer]:
    drawer = RecordingImageDrawer()
    return Environment(drawer, body.bindings), drawer


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(body: CommandRequest, dispatcher=Depends(get_dispatcher)) -> EvaluateResponse:
    env, _ = _env(body)
    value = dispatcher.evaluate(env, body.node)
    return EvaluateResponse(
        value=value if math.isfinite(value) else None,
        display=repr(value),
    )


@router.post("/simplify", response_model=SimplifyResponse)
def simplify(body: CommandRequest, dispatcher=Depends(get_dispatcher)) -> SimplifyResponse:
    env, _ = _env(body)
    node = dispatcher.simplify(env, body.node)
    return SimplifyResponse(node=node, display=render(node))


@router.post("/plot", response_model=PlotResponse)
def plot(body: CommandRequest, dispatcher=Depends(get_dispatcher)) -> PlotResponse:
    env, drawer = _env(body)
    dispatcher.plot(env, body.node)
    return PlotResponse(plot=drawer.last, point_count=len(drawer.last.xs))


@router.post("/run", response_model=RunResponse)
def run(body: CommandRequest, dispatcher=Depends(get_dispatcher)) -> RunResponse:
    env, drawer = _env(body)
    result = dispatcher.handle(env, body.node)
    return RunResponse(
        result=result,
        display=render(result),
        bindings=env.variables,
        plots=drawer.plots,
    )

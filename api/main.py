"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Inicjalizuje bezstanowe adaptery (Evaluator, Simplifier, PlotSampler)
    i składa z nich CommandDispatcher
  - Environment NIE jest współdzielone — każde żądanie niesie własne
    podstawienia zmiennych

Błędy:
  - EvaluationError → 400 {"detail", "kind"}
  - RecursionError  → 422 (cykl w podstawieniach albo zbyt głębokie drzewo)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.dispatcher.command_dispatcher import CommandDispatcher
from api.routers import calc, operators
from api.schemas import HealthResponse
from config import Settings
from contracts import EvaluationError

logger = logging.getLogger("astcalc.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Adaptery bezstanowe, tworzone raz
    app.state.dispatcher = CommandDispatcher.default()

    logger.info("AstCalc API ready.")
    yield

    logger.info("Shutting down.")


def create_app() -> FastAPI:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(calc.router)
    app.include_router(operators.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalne handlery błędów
    @app.exception_handler(EvaluationError)
    async def evaluation_error_handler(request: Request, exc: EvaluationError):
        logger.warning("Rejected %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "kind": exc.kind.value},
        )

    @app.exception_handler(RecursionError)
    async def recursion_error_handler(request: Request, exc: RecursionError):
        logger.warning("Recursion limit hit on %s", request.url.path)
        return JSONResponse(
            status_code=422,
            content={"detail": "binding cycle or expression too deep"},
        )

    return app


app = create_app()

"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.dispatcher.command_dispatcher import CommandDispatcher


def get_dispatcher(request: Request) -> CommandDispatcher:
    return request.app.state.dispatcher

#!/usr/bin/env python3
"""
astcalc.py — CLI narzędzie AstCalc.

Działa całkowicie lokalnie. Nie ma parsera tekstu — wyrażenia podaje się
jako JSON, w pełnej postaci Node albo w skrócie:
    liczba            → NumberNode           3.5
    napis             → VariableNode         "x"
    lista             → OperationNode        ["+", 2, ["*", 3, "x"]]

Podkomendy:
    eval      — policz wartość wyrażenia (toDouble)
    simplify  — uprość wyrażenie (constant folding)
    plot      — próbkuj plot(expr, var, min, max, step) i pokaż tabelę punktów
    run       — wykonaj dowolną komendę (toDouble / simplify / plot / :=)
    ops       — lista obsługiwanych operatorów

Użycie:
    python astcalc.py eval --json '["+", 2, 3]'
    python astcalc.py simplify --json '["sin", ["*", 2, "x"]]' --bind x=0.5
    python astcalc.py plot --json '["plot", ["*", 3, "x"], "x", 2, 5, 0.5]'
    python astcalc.py run --json '[":=", "y", ["^", 2, 10]]' --bindings env.json
    python astcalc.py ops
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.dispatcher.command_dispatcher import CommandDispatcher
from adapters.evaluator.ast_evaluator import OPERATIONS
from adapters.image_drawer.rich_drawer import RichTableDrawer
from adapters.simplifier.constant_folder import FOLDED_OPERATORS
from config import Settings
from contracts import (
    OPERATOR_ARITY,
    EvaluationError,
    Node,
    render,
)
from environment import Environment

_NODE_ADAPTER: TypeAdapter = TypeAdapter(Node)



# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _coerce_node(obj: Any) -> Node:
    """Skrócony zapis JSON → Node (patrz docstring modułu)."""
    if isinstance(obj, bool):
        raise ValueError(f"Nieobsługiwana wartość: {obj!r}")
    if isinstance(obj, (int, float)):
        return _NODE_ADAPTER.validate_python({"node_type": "number", "value": obj})
    if isinstance(obj, str):
        return _NODE_ADAPTER.validate_python({"node_type": "variable", "name": obj})
    if isinstance(obj, list):
        if not obj or not isinstance(obj[0], str):
            raise ValueError(f"Operacja musi zaczynać się od nazwy: {obj!r}")
        return _NODE_ADAPTER.validate_python({
            "node_type": "operation",
            "name": obj[0],
            "children": [_coerce_node(c) for c in obj[1:]],
        })
    return _NODE_ADAPTER.validate_python(obj)


def _parse_binding(text: str) -> tuple[str, Node]:
    """'x=3' / 'y=["+", "x", 1]' → (nazwa, Node)."""
    name, sep, raw = text.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Oczekiwano NAZWA=JSON, otrzymano {text!r}")
    return name.strip(), _coerce_node(json.loads(raw))


def _read_node(args: argparse.Namespace) -> Node:
    if args.json:
        raw = args.json
    elif args.file:
        raw = Path(args.file).read_text(encoding="utf-8")
    else:
        raw = sys.stdin.read()
    return _coerce_node(json.loads(raw))


def _load_bindings(args: argparse.Namespace, settings: Settings) -> dict[str, Node]:
    bindings: dict[str, Node] = {}
    path = args.bindings or settings.bindings_file
    if path:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        bindings.update({name: _coerce_node(v) for name, v in data.items()})
    for item in args.bind:
        name, node = _parse_binding(item)
        bindings[name] = node
    return bindings


def _build_env(args: argparse.Namespace, settings: Settings) -> Environment:
    drawer = RichTableDrawer(console=_console(), max_rows=settings.plot_preview_rows)
    return Environment(drawer, _load_bindings(args, settings))


def _print_node(node: Node, as_json: bool) -> None:
    if as_json:
        _console().print_json(_NODE_ADAPTER.dump_json(node).decode())
    else:
        _console().print(render(node))


# -- commands --------------------------------------------------------------

def _eval(args: argparse.Namespace, settings: Settings) -> None:
    env = _build_env(args, settings)
    value = CommandDispatcher.default().evaluate(env, _read_node(args))
    _console().print(repr(value))


def _simplify(args: argparse.Namespace, settings: Settings) -> None:
    env = _build_env(args, settings)
    result = CommandDispatcher.default().simplify(env, _read_node(args))
    _print_node(result, args.json_out)


def _plot(args: argparse.Namespace, settings: Settings) -> None:
    env = _build_env(args, settings)
    CommandDispatcher.default().plot(env, _read_node(args))


def _run(args: argparse.Namespace, settings: Settings) -> None:
    env = _build_env(args, settings)
    result = CommandDispatcher.default().handle(env, _read_node(args))
    _print_node(result, args.json_out)


def _ops(args: argparse.Namespace, settings: Settings) -> None:
    table = Table(title=f"Operators [{len(OPERATOR_ARITY)}]", box=box.ASCII)
    table.add_column("Name", no_wrap=True, style="bold cyan")
    table.add_column("Arity", justify="right")
    table.add_column("Evaluated", justify="center")
    table.add_column("Folded", justify="center")
    for name, arity in OPERATOR_ARITY.items():
        table.add_row(
            name,
            str(arity),
            "yes" if name in OPERATIONS else "-",
            "yes" if name in FOLDED_OPERATORS else "-",
        )
    _console().print(table)


# -- main ------------------------------------------------------------------

def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", "-j", help="Wyrażenie jako JSON (lub --file / stdin)")
    p.add_argument("--file", "-f", help="Plik z wyrażeniem JSON")
    p.add_argument("--bind", "-b", action="append", default=[], metavar="NAME=JSON",
                   help="Podstawienie zmiennej (można powtarzać)")
    p.add_argument("--bindings", metavar="FILE",
                   help="Plik JSON z podstawieniami {nazwa: wyrażenie}")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="astcalc",
        description="AstCalc — ewaluacja, upraszczanie i wykresy drzew wyrażeń",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("eval", help="Policz wartość wyrażenia")
    _add_input_args(p)

    p = sub.add_parser("simplify", help="Uprość wyrażenie")
    _add_input_args(p)
    p.add_argument("--json-out", action="store_true", help="Wynik jako JSON Node")

    p = sub.add_parser("plot", help="Próbkuj plot(expr, var, min, max, step)")
    _add_input_args(p)

    p = sub.add_parser("run", help="Wykonaj komendę (toDouble / simplify / plot / :=)")
    _add_input_args(p)
    p.add_argument("--json-out", action="store_true", help="Wynik jako JSON Node")

    sub.add_parser("ops", help="Lista obsługiwanych operatorów")

    args = parser.parse_args()
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    cmds = {
        "eval":     _eval,
        "simplify": _simplify,
        "plot":     _plot,
        "run":      _run,
        "ops":      _ops,
    }

    try:
        cmds[args.command](args, settings)
    except EvaluationError as exc:
        _console().print(f"[red]Error ({exc.kind.value}):[/red] {escape(exc.message)}")
        sys.exit(1)
    except RecursionError:
        _console().print("[red]Error:[/red] binding cycle or expression too deep")
        sys.exit(1)
    except (ValidationError, ValueError) as exc:
        _console().print(f"[red]Invalid input:[/red] {escape(str(exc))}")
        sys.exit(2)


if __name__ == "__main__":
    main()

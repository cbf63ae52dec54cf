"""
environment.py — Stan sesji kalkulatora.

Przechowuje podstawienia zmiennych (nazwa → węzeł, niekoniecznie liczba —
zmienna może być zdefiniowana przez inną zmienną) oraz uchwyt do backendu
rysującego wykresy. Cykle w podstawieniach NIE są wykrywane.
"""
from __future__ import annotations

from typing import Optional

from contracts import Node
from ports.image_drawer import ImageDrawer


class Environment:
    """Podstawienia zmiennych + sink dla wykresów."""

    def __init__(
        self,
        image_drawer: ImageDrawer,
        variables: Optional[dict[str, Node]] = None,
    ) -> None:
        self.image_drawer = image_drawer
        self.variables: dict[str, Node] = dict(variables or {})

    # -- odczyt --------------------------------------------------------

    def lookup(self, name: str) -> Optional[Node]:
        return self.variables.get(name)

    def contains(self, name: str) -> bool:
        return name in self.variables

    # -- zapis (komendy przypisania) -------------------------------------

    def assign(self, name: str, node: Node) -> None:
        self.variables[name] = node

    def unassign(self, name: str) -> bool:
        """Usuwa podstawienie; zwraca False jeśli zmienna nie była związana."""
        return self.variables.pop(name, None) is not None

    def __repr__(self) -> str:
        return f"Environment(variables={sorted(self.variables)!r})"

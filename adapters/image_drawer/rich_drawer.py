"""
Adapter: RichTableDrawer
Implementuje port ImageDrawer — wypisuje punkty wykresu jako tabelę rich
w terminalu (CLI). Pokazuje co najwyżej `max_rows` pierwszych punktów.
"""
from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table


def _fmt(v: float) -> str:
    return f"{v:.6g}"


class RichTableDrawer:
    def __init__(self, console: Optional[Console] = None, max_rows: int = 20) -> None:
        self._console = console or Console(highlight=False)
        self._max_rows = max_rows

    def draw_scatter_plot(
        self,
        title: str,
        x_label: str,
        y_label: str,
        xs: Sequence[float],
        ys: Sequence[float],
    ) -> None:
        shown = min(len(xs), self._max_rows)
        table = Table(
            title=f"{title} [{len(xs)}]",
            box=box.ASCII,
            show_lines=False,
        )
        table.add_column("#", justify="right", no_wrap=True)
        table.add_column(x_label, justify="right", style="cyan")
        table.add_column(y_label, justify="right")
        for i in range(shown):
            table.add_row(str(i), _fmt(xs[i]), _fmt(ys[i]))
        if shown < len(xs):
            table.caption = f"... {len(xs) - shown} more point(s)"
        self._console.print(table)

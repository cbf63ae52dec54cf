"""
Adapter: RecordingImageDrawer
Implementuje port ImageDrawer — zapamiętuje dane wykresów zamiast je rysować.
Używany przez API (dane wracają w odpowiedzi) i w testach.
"""
from __future__ import annotations

from typing import Optional, Sequence

from contracts import PlotData


class RecordingImageDrawer:
    def __init__(self) -> None:
        self.plots: list[PlotData] = []

    def draw_scatter_plot(
        self,
        title: str,
        x_label: str,
        y_label: str,
        xs: Sequence[float],
        ys: Sequence[float],
    ) -> None:
        self.plots.append(
            PlotData(title=title, x_label=x_label, y_label=y_label, xs=list(xs), ys=list(ys))
        )

    @property
    def last(self) -> Optional[PlotData]:
        return self.plots[-1] if self.plots else None

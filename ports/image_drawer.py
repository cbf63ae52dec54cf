"""
Port: ImageDrawer
Odpowiedzialność: renderowanie gotowych danych wykresu (backend poza rdzeniem).
"""
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ImageDrawer(Protocol):
    def draw_scatter_plot(
        self,
        title: str,
        x_label: str,
        y_label: str,
        xs: Sequence[float],
        ys: Sequence[float],
    ) -> None:
        """
        Renders a scatter plot. xs and ys have equal length and are ordered
        by increasing x. Called synchronously from PlotSampler.plot().
        """
        ...

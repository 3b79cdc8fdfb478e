from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal

from luvatrix_chart.series import (
    ChartDataset,
    GradientStops,
    LinearGradient,
    Solid,
    StrokeStyle,
    StyleVariant,
)


LOGGER = logging.getLogger(__name__)
LEGEND_PRIORITY = 1


@dataclass(frozen=True)
class LegendDescriptor:
    series_id: str
    label: str
    style_snapshot: StyleVariant
    stroke_style: StrokeStyle
    priority: int = LEGEND_PRIORITY
    chart_type: Literal["line"] = "line"


def build_legends(dataset: ChartDataset) -> list[LegendDescriptor]:
    """Build one legend entry per series, in series order.

    Gradient swatches are always sampled left to right, whatever direction the
    line itself is drawn with. Series whose style is not a known variant are
    left out of the legend.
    """
    legends: list[LegendDescriptor] = []
    for series in dataset:
        fill = series.style.fill
        if isinstance(fill, Solid):
            snapshot: StyleVariant = Solid(color=fill.color)
        elif isinstance(fill, LinearGradient):
            snapshot = LinearGradient(colors=fill.colors, start="leading", end="trailing")
        elif isinstance(fill, GradientStops):
            snapshot = GradientStops(stops=fill.stops, start="leading", end="trailing")
        else:
            LOGGER.debug("no legend for series %s: unrecognized style %r", series.id, fill)
            continue
        legends.append(
            LegendDescriptor(
                series_id=series.id,
                label=series.legend_title,
                style_snapshot=snapshot,
                stroke_style=series.style.stroke_style,
            )
        )
    return legends

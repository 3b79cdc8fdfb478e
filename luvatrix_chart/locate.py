from __future__ import annotations

from dataclasses import dataclass
import math

from luvatrix_chart.errors import ZeroRangeError
from luvatrix_chart.scales import BaselinePolicy, compute_scale
from luvatrix_chart.series import ChartDataset, DataPoint, Series


@dataclass(frozen=True)
class PixelLocation:
    x: float
    y: float


def nearest_points(pointer_x: float, canvas_width: float, dataset: ChartDataset) -> list[DataPoint]:
    """Return the data point under `pointer_x` for each series, in series order.

    Each series is indexed on its own x grid, so a series that cannot form a
    section (fewer than two points) or whose index falls outside its points
    contributes nothing.
    """
    _check_extent(canvas_width, "canvas width")
    out: list[DataPoint] = []
    for series in dataset:
        index = _nearest_index(pointer_x, canvas_width, series)
        if index is not None:
            out.append(series.points[index])
    return out


def pixel_locations(
    pointer_x: float,
    canvas_size: tuple[float, float],
    dataset: ChartDataset,
    baseline: BaselinePolicy,
) -> list[PixelLocation]:
    """Map `pointer_x` to the rendered position of the nearest point in each series.

    The y scale is computed once for the whole dataset so values from
    different series are comparable. Pixel y grows downward.
    """
    width, height = canvas_size
    _check_extent(width, "canvas width")
    _check_extent(height, "canvas height")
    scale = compute_scale(dataset, baseline)
    if not scale.value_range > 0:
        raise ZeroRangeError(scale.value_range)
    y_section = height / scale.value_range

    out: list[PixelLocation] = []
    for series in dataset:
        index = _nearest_index(pointer_x, width, series)
        if index is None:
            continue
        x_section = width / (len(series) - 1)
        value = series.points[index].value
        out.append(
            PixelLocation(
                x=index * x_section,
                y=(value - scale.min_value) * -y_section + height,
            )
        )
    return out


def _nearest_index(pointer_x: float, width: float, series: Series) -> int | None:
    n = len(series)
    if n <= 1:
        return None
    x_section = width / (n - 1)
    index = math.floor((pointer_x + x_section / 2) / x_section)
    if 0 <= index < n:
        return index
    return None


def _check_extent(value: float, label: str) -> None:
    if not value > 0:
        raise ValueError(f"{label} must be > 0")

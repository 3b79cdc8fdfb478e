from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

import numpy as np

from luvatrix_chart.errors import EmptyDatasetError
from luvatrix_chart.series import ChartDataset


@dataclass(frozen=True)
class Zero:
    """Y axis starts at 0."""


@dataclass(frozen=True)
class MinimumValue:
    """Y axis starts at the lowest value across all series."""


@dataclass(frozen=True)
class MinimumWithCeiling:
    """Y axis starts at the lowest value, but never higher than `value`."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


BaselinePolicy: TypeAlias = Zero | MinimumValue | MinimumWithCeiling


@dataclass(frozen=True)
class ValueScale:
    min_value: float
    value_range: float

    @property
    def max_value(self) -> float:
        return self.min_value + self.value_range


def value_bounds(dataset: ChartDataset) -> tuple[float, float]:
    if len(dataset) == 0:
        raise EmptyDatasetError("dataset has no series")
    arrays: list[np.ndarray] = []
    for i, series in enumerate(dataset):
        if len(series) == 0:
            raise EmptyDatasetError(f"series {i} ({series.legend_title!r}) has no points")
        arrays.append(np.fromiter(series.values(), dtype=np.float64, count=len(series)))
    values = np.concatenate(arrays)
    return float(np.min(values)), float(np.max(values))


def min_value(dataset: ChartDataset, baseline: BaselinePolicy) -> float:
    return compute_scale(dataset, baseline).min_value


def value_range(dataset: ChartDataset, baseline: BaselinePolicy) -> float:
    return compute_scale(dataset, baseline).value_range


def compute_scale(dataset: ChartDataset, baseline: BaselinePolicy) -> ValueScale:
    gmin, gmax = value_bounds(dataset)
    if isinstance(baseline, Zero):
        return ValueScale(min_value=0.0, value_range=gmax)
    if isinstance(baseline, MinimumValue):
        return ValueScale(min_value=gmin, value_range=gmax - gmin)
    if isinstance(baseline, MinimumWithCeiling):
        floor = min(gmin, baseline.value)
        return ValueScale(min_value=floor, value_range=gmax - floor)
    raise TypeError(f"unsupported baseline policy: {baseline!r}")


def y_axis_label_values(dataset: ChartDataset, baseline: BaselinePolicy, number_of_labels: int) -> np.ndarray:
    if number_of_labels <= 0:
        raise ValueError("number_of_labels must be > 0")
    scale = compute_scale(dataset, baseline)
    step = scale.value_range / number_of_labels
    return scale.min_value + step * np.arange(number_of_labels + 1, dtype=np.float64)


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    step = float(abs(ticks[1] - ticks[0])) if ticks.size > 1 else 0.0
    decimals = _decimals_from_step(step) if step > 0 else 6
    return [_format_label(float(v), decimals) for v in ticks]


def _format_label(value: float, decimals: int) -> str:
    if not np.isfinite(value):
        return str(value)
    try:
        text = format(Decimal(repr(value)).quantize(Decimal(1).scaleb(-decimals)), "f")
    except InvalidOperation:
        return repr(value)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Float noise around zero quantizes to "-0".
    return "0" if text == "-0" else text


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    # Round first so float noise like 14.285714285714286 doesn't force 12 decimals.
    d = Decimal(repr(round(step, 6))).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(2, decimals) if step >= 1 else min(6, decimals)

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any

import numpy as np

from luvatrix_chart.errors import ChartDataError
from luvatrix_chart.series import DataPoint, LineStyle, PointStyle, Series


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def series_from_values(
    values: Any,
    *,
    x_axis_labels: Sequence[str | None] | None = None,
    point_labels: Sequence[str | None] | None = None,
    dates: Sequence[datetime | None] | None = None,
    legend_title: str = "",
    style: LineStyle | None = None,
    point_style: PointStyle | None = None,
) -> Series:
    """Build a `Series` from a 1-D list, numpy array, pandas Series or torch tensor.

    A pandas Series with a string or datetime index supplies x axis labels or
    dates when they are not given explicitly.
    """
    arr = _coerce_1d_numeric(values, label="values")
    if arr.size == 0:
        raise ChartDataError("empty series")
    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        raise ChartDataError(f"values contains non-finite value at index {int(bad[0])}: {arr[bad[0]]!r}")

    if pd is not None and isinstance(values, pd.Series):
        index = values.index
        if x_axis_labels is None and pd.api.types.is_string_dtype(index):
            x_axis_labels = [str(v) for v in index]
        elif dates is None and isinstance(index, pd.DatetimeIndex):
            dates = [ts.to_pydatetime() for ts in index]

    n = int(arr.size)
    x_labels = _check_length(x_axis_labels, n, "x_axis_labels")
    p_labels = _check_length(point_labels, n, "point_labels")
    point_dates = _check_length(dates, n, "dates")

    points = tuple(
        DataPoint(
            value=float(v),
            x_axis_label=x_labels[i],
            point_label=p_labels[i],
            date=point_dates[i],
        )
        for i, v in enumerate(arr.tolist())
    )
    return Series(
        points=points,
        legend_title=legend_title,
        style=style or LineStyle(),
        point_style=point_style or PointStyle(),
    )


def _check_length(values: Sequence[Any] | None, n: int, label: str) -> list[Any]:
    if values is None:
        return [None] * n
    out = list(values)
    if len(out) != n:
        raise ChartDataError(f"{label} length mismatch: {len(out)} != {n}")
    return out


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise ChartDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if raw is None or isinstance(raw, (str, bytes)):
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out

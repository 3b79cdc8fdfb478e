from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any, Mapping

from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.model import (
    ChartMetadata,
    ChartModel,
    LabelsFromChartData,
    LabelsFromDataPoint,
    LineChartStyle,
    XAxisLabelSource,
)
from luvatrix_chart.scales import BaselinePolicy, MinimumValue, MinimumWithCeiling, Zero
from luvatrix_chart.series import ChartDataset


_KNOWN_KEYS = {
    "title",
    "subtitle",
    "no_data_text",
    "baseline",
    "baseline_ceiling",
    "x_axis_labels_from",
    "x_axis_labels",
    "y_axis_number_of_labels",
}


@dataclass(frozen=True)
class ChartConfig:
    style: LineChartStyle = field(default_factory=LineChartStyle)
    metadata: ChartMetadata = field(default_factory=ChartMetadata)
    no_data_text: str = "No Data"


def load_chart_config(path: str | Path) -> ChartConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ChartConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    return chart_config_from_mapping(raw)


def chart_config_from_mapping(raw: Mapping[str, Any]) -> ChartConfig:
    """Build a `ChartConfig` from the `[chart]` table of a parsed config.

    The table may also be passed directly. Unknown keys are rejected so typos
    do not silently fall back to defaults.
    """
    table = raw.get("chart", raw)
    if not isinstance(table, Mapping):
        raise ChartConfigError("`chart` must be a table")
    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ChartConfigError(f"unknown chart config keys: {', '.join(unknown)}")

    number_of_labels = table.get("y_axis_number_of_labels", 7)
    if isinstance(number_of_labels, bool) or not isinstance(number_of_labels, int) or number_of_labels <= 0:
        raise ChartConfigError("`y_axis_number_of_labels` must be a positive integer")

    style = LineChartStyle(
        baseline=_parse_baseline(table),
        x_axis_labels_from=_parse_x_axis_labels(table),
        y_axis_number_of_labels=number_of_labels,
    )
    metadata = ChartMetadata(
        title=_coerce_optional_str(table.get("title"), "title"),
        subtitle=_coerce_optional_str(table.get("subtitle"), "subtitle"),
    )
    no_data_text = _coerce_optional_str(table.get("no_data_text"), "no_data_text")
    return ChartConfig(
        style=style,
        metadata=metadata,
        no_data_text="No Data" if no_data_text is None else no_data_text,
    )


def _parse_baseline(table: Mapping[str, Any]) -> BaselinePolicy:
    name = table.get("baseline", "zero")
    ceiling = table.get("baseline_ceiling")
    if name == "zero":
        baseline: BaselinePolicy = Zero()
    elif name == "minimum_value":
        baseline = MinimumValue()
    elif name == "minimum_with_ceiling":
        if isinstance(ceiling, bool) or not isinstance(ceiling, (int, float)):
            raise ChartConfigError("`baseline_ceiling` must be a number when baseline is `minimum_with_ceiling`")
        return MinimumWithCeiling(value=float(ceiling))
    else:
        raise ChartConfigError(f"unsupported baseline: {name!r}")
    if ceiling is not None:
        raise ChartConfigError("`baseline_ceiling` is only valid with baseline `minimum_with_ceiling`")
    return baseline


def _parse_x_axis_labels(table: Mapping[str, Any]) -> XAxisLabelSource:
    source = table.get("x_axis_labels_from", "data_point")
    labels = table.get("x_axis_labels")
    if source == "data_point":
        if labels is not None:
            raise ChartConfigError("`x_axis_labels` requires `x_axis_labels_from = \"chart_data\"`")
        return LabelsFromDataPoint()
    if source == "chart_data":
        return LabelsFromChartData(labels=tuple(_coerce_string_list(labels, "x_axis_labels")))
    raise ChartConfigError(f"unsupported x_axis_labels_from: {source!r}")


def _coerce_string_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ChartConfigError(f"`{field_name}` must be a list of strings")
    return list(value)


def _coerce_optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ChartConfigError(f"`{field_name}` must be a string")
    return value


def build_chart_model(dataset: ChartDataset, config: ChartConfig) -> ChartModel:
    return ChartModel(
        dataset,
        style=config.style,
        metadata=config.metadata,
        no_data_text=config.no_data_text,
    )

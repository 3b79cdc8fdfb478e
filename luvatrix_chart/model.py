from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Callable, Literal, TypeAlias

from luvatrix_chart.errors import EmptyDatasetError, ZeroRangeError
from luvatrix_chart.legend import LegendDescriptor, build_legends
from luvatrix_chart.locate import PixelLocation, nearest_points, pixel_locations
from luvatrix_chart.scales import (
    BaselinePolicy,
    Zero,
    compute_scale,
    format_ticks_for_axis,
    y_axis_label_values,
)
from luvatrix_chart.series import ChartDataset, DataPoint, LineStyle


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelsFromDataPoint:
    """X axis labels come from the first series' `x_axis_label` fields."""


@dataclass(frozen=True)
class LabelsFromChartData:
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(str(v) for v in self.labels))


XAxisLabelSource: TypeAlias = LabelsFromDataPoint | LabelsFromChartData


@dataclass(frozen=True)
class ChartMetadata:
    title: str | None = None
    subtitle: str | None = None


@dataclass(frozen=True)
class LineChartStyle:
    baseline: BaselinePolicy = field(default_factory=Zero)
    x_axis_labels_from: XAxisLabelSource = field(default_factory=LabelsFromDataPoint)
    y_axis_number_of_labels: int = 7

    def __post_init__(self) -> None:
        if self.y_axis_number_of_labels <= 0:
            raise ValueError("y_axis_number_of_labels must be > 0")


@dataclass(frozen=True)
class InfoViewData:
    is_touch_current: bool = False
    touch_location: tuple[float, float] | None = None
    canvas_size: tuple[float, float] | None = None
    touch_overlay_info: tuple[DataPoint, ...] = ()
    pixel_locations: tuple[PixelLocation, ...] = ()


TouchStatus = Literal["ok", "no_data", "zero_range"]


@dataclass(frozen=True)
class TouchResult:
    status: TouchStatus
    points: tuple[DataPoint, ...] = ()
    locations: tuple[PixelLocation, ...] = ()


ChangedField = Literal["dataset", "baseline", "style", "x_axis_labels", "info_view"]


@dataclass(frozen=True)
class ChartChange:
    field: ChangedField
    revision: int


ChartListener: TypeAlias = Callable[[ChartChange], None]


class ChartModel:
    """Multi-series line chart state shared with the rendering layer.

    All mutation goes through the methods below so `legends` always matches
    `dataset`. Nothing here is thread-safe; callers serialize updates.
    """

    def __init__(
        self,
        dataset: ChartDataset,
        *,
        style: LineChartStyle | None = None,
        metadata: ChartMetadata | None = None,
        no_data_text: str = "No Data",
    ) -> None:
        self._dataset = dataset
        self._style = style or LineChartStyle()
        self.metadata = metadata or ChartMetadata()
        self.no_data_text = no_data_text
        self._legends: tuple[LegendDescriptor, ...] = ()
        self._info_view = InfoViewData()
        self._listeners: list[ChartListener] = []
        self._revision = 0
        self._rebuild_legends()

    @property
    def dataset(self) -> ChartDataset:
        return self._dataset

    @property
    def style(self) -> LineChartStyle:
        return self._style

    @property
    def baseline_policy(self) -> BaselinePolicy:
        return self._style.baseline

    @property
    def x_axis_labels_from(self) -> XAxisLabelSource:
        return self._style.x_axis_labels_from

    @property
    def legends(self) -> tuple[LegendDescriptor, ...]:
        return self._legends

    @property
    def info_view(self) -> InfoViewData:
        return self._info_view

    @property
    def revision(self) -> int:
        return self._revision

    def subscribe(self, listener: ChartListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def replace_dataset(self, dataset: ChartDataset) -> None:
        self._dataset = dataset
        self._rebuild_legends()
        self._notify("dataset")

    def set_baseline_policy(self, baseline: BaselinePolicy) -> None:
        self._style = replace(self._style, baseline=baseline)
        self._notify("baseline")

    def set_x_axis_labels(self, source: XAxisLabelSource) -> None:
        self._style = replace(self._style, x_axis_labels_from=source)
        self._notify("x_axis_labels")

    def set_series_style(self, series_id: str, style: LineStyle) -> None:
        target = self._dataset.series_by_id(series_id)
        updated = tuple(replace(s, style=style) if s is target else s for s in self._dataset.series)
        self._dataset = ChartDataset(series=updated)
        self._rebuild_legends()
        self._notify("style")

    def current_min_value(self) -> float:
        return compute_scale(self._dataset, self._style.baseline).min_value

    def current_range(self) -> float:
        return compute_scale(self._dataset, self._style.baseline).value_range

    def locate_points(self, pointer_x: float, canvas_size: tuple[float, float]) -> list[DataPoint]:
        return nearest_points(pointer_x, canvas_size[0], self._dataset)

    def locate_pixels(self, pointer_x: float, canvas_size: tuple[float, float]) -> list[PixelLocation]:
        return pixel_locations(pointer_x, canvas_size, self._dataset, self._style.baseline)

    def y_axis_labels(self) -> list[str]:
        values = y_axis_label_values(self._dataset, self._style.baseline, self._style.y_axis_number_of_labels)
        return format_ticks_for_axis(values)

    def has_enough_data(self) -> bool:
        """True when every series has points and at least one can form a line."""
        series = self._dataset.series
        return bool(series) and all(len(s) > 0 for s in series) and any(len(s) >= 2 for s in series)

    def touch(self, location: tuple[float, float], canvas_size: tuple[float, float]) -> TouchResult:
        """Resolve a pointer position into overlay data for the info view.

        Data problems come back as a status instead of an exception so the
        renderer can fall back to its no-data or flat-line drawing.
        """
        pointer_x = float(location[0])
        try:
            points = tuple(self.locate_points(pointer_x, canvas_size))
            locations = tuple(self.locate_pixels(pointer_x, canvas_size))
        except EmptyDatasetError:
            result = TouchResult(status="no_data", points=points)
        except ZeroRangeError as exc:
            LOGGER.warning("touch at x=%s has no vertical scale: %s", pointer_x, exc)
            result = TouchResult(status="zero_range", points=points)
        else:
            result = TouchResult(status="ok", points=points, locations=locations)

        self._info_view = InfoViewData(
            is_touch_current=True,
            touch_location=(pointer_x, float(location[1])),
            canvas_size=(float(canvas_size[0]), float(canvas_size[1])),
            touch_overlay_info=result.points,
            pixel_locations=result.locations,
        )
        self._notify("info_view")
        return result

    def end_touch(self) -> None:
        self._info_view = InfoViewData()
        self._notify("info_view")

    def _rebuild_legends(self) -> None:
        self._legends = tuple(build_legends(self._dataset))
        if not self._dataset.has_uniform_length():
            LOGGER.warning(
                "series lengths differ (%s); touch positions will not line up across series",
                [len(s) for s in self._dataset],
            )
        LOGGER.debug("rebuilt %d legends for %d series", len(self._legends), len(self._dataset))

    def _notify(self, changed: ChangedField) -> None:
        self._revision += 1
        event = ChartChange(field=changed, revision=self._revision)
        for listener in list(self._listeners):
            listener(event)

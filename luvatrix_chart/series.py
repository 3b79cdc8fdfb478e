from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Literal, TypeAlias
import uuid

from luvatrix_chart.errors import ChartDataError


Color: TypeAlias = tuple[int, int, int, int] | str
NamedUnitPoint = Literal[
    "leading",
    "trailing",
    "top",
    "bottom",
    "center",
    "top_leading",
    "top_trailing",
    "bottom_leading",
    "bottom_trailing",
]
UnitPoint: TypeAlias = NamedUnitPoint | tuple[float, float]
LineType = Literal["curved", "line"]
LineCap = Literal["butt", "round", "square"]
LineJoin = Literal["miter", "round", "bevel"]
PointType = Literal["filled", "outline", "filled_outline"]
PointShape = Literal["circle", "square", "rounded_square"]


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class DataPoint:
    value: float
    x_axis_label: str | None = None
    point_label: str | None = None
    date: datetime | None = None
    id: str = field(default_factory=_new_id, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class GradientStop:
    color: Color
    location: float


@dataclass(frozen=True)
class Solid:
    color: Color


@dataclass(frozen=True)
class LinearGradient:
    colors: tuple[Color, ...]
    start: UnitPoint = "leading"
    end: UnitPoint = "trailing"

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        if not colors:
            raise ChartDataError("linear gradient needs at least one color")
        object.__setattr__(self, "colors", colors)


@dataclass(frozen=True)
class GradientStops:
    stops: tuple[GradientStop, ...]
    start: UnitPoint = "leading"
    end: UnitPoint = "trailing"

    def __post_init__(self) -> None:
        stops = tuple(self.stops)
        if not stops:
            raise ChartDataError("gradient needs at least one stop")
        object.__setattr__(self, "stops", stops)


StyleVariant: TypeAlias = Solid | LinearGradient | GradientStops


@dataclass(frozen=True)
class StrokeStyle:
    line_width: float = 3.0
    line_cap: LineCap = "round"
    line_join: LineJoin = "round"
    miter_limit: float = 10.0
    dash: tuple[float, ...] = ()
    dash_phase: float = 0.0

    def __post_init__(self) -> None:
        if self.line_width <= 0:
            raise ChartDataError("stroke line_width must be > 0")
        object.__setattr__(self, "dash", tuple(float(v) for v in self.dash))


@dataclass(frozen=True)
class LineStyle:
    fill: StyleVariant = field(default_factory=lambda: Solid(color=(0, 0, 0, 255)))
    line_type: LineType = "curved"
    stroke_style: StrokeStyle = field(default_factory=StrokeStyle)
    ignore_zero: bool = False


@dataclass(frozen=True)
class PointStyle:
    point_size: float = 9.0
    border_color: Color = (0, 122, 255, 255)
    fill_color: Color = (128, 128, 128, 255)
    line_width: float = 3.0
    point_type: PointType = "filled_outline"
    point_shape: PointShape = "circle"


@dataclass(frozen=True)
class Series:
    """One line: ordered data points plus the style used to draw it.

    Points are immutable; replace the series to change them.
    """

    points: tuple[DataPoint, ...]
    legend_title: str = ""
    style: LineStyle = field(default_factory=LineStyle)
    point_style: PointStyle = field(default_factory=PointStyle)
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def values(self) -> list[float]:
        return [p.value for p in self.points]


@dataclass(frozen=True)
class ChartDataset:
    """Ordered series sharing one coordinate space.

    Touch mapping indexes every series independently, so series of
    differing length are tolerated; the x positions only line up when
    all series have the same point count.
    """

    series: tuple[Series, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self.series)

    def has_uniform_length(self) -> bool:
        return len({len(s) for s in self.series}) <= 1

    def series_by_id(self, series_id: str) -> Series:
        for s in self.series:
            if s.id == series_id:
                return s
        raise KeyError(f"unknown series id: {series_id}")

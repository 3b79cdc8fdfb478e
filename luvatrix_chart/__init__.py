from luvatrix_chart.adapters import series_from_values
from luvatrix_chart.config import ChartConfig, build_chart_model, chart_config_from_mapping, load_chart_config
from luvatrix_chart.errors import ChartConfigError, ChartDataError, EmptyDatasetError, ZeroRangeError
from luvatrix_chart.legend import LegendDescriptor, build_legends
from luvatrix_chart.locate import PixelLocation, nearest_points, pixel_locations
from luvatrix_chart.model import (
    ChartChange,
    ChartMetadata,
    ChartModel,
    InfoViewData,
    LabelsFromChartData,
    LabelsFromDataPoint,
    LineChartStyle,
    TouchResult,
)
from luvatrix_chart.scales import MinimumValue, MinimumWithCeiling, Zero, compute_scale, min_value, value_range
from luvatrix_chart.series import (
    ChartDataset,
    DataPoint,
    GradientStop,
    GradientStops,
    LinearGradient,
    LineStyle,
    PointStyle,
    Series,
    Solid,
    StrokeStyle,
)

__all__ = [
    "ChartChange",
    "ChartConfig",
    "ChartConfigError",
    "ChartDataError",
    "ChartDataset",
    "ChartMetadata",
    "ChartModel",
    "DataPoint",
    "EmptyDatasetError",
    "GradientStop",
    "GradientStops",
    "InfoViewData",
    "LabelsFromChartData",
    "LabelsFromDataPoint",
    "LegendDescriptor",
    "LineChartStyle",
    "LineStyle",
    "LinearGradient",
    "MinimumValue",
    "MinimumWithCeiling",
    "PixelLocation",
    "PointStyle",
    "Series",
    "Solid",
    "StrokeStyle",
    "TouchResult",
    "Zero",
    "ZeroRangeError",
    "build_chart_model",
    "build_legends",
    "chart_config_from_mapping",
    "compute_scale",
    "load_chart_config",
    "min_value",
    "nearest_points",
    "pixel_locations",
    "series_from_values",
    "value_range",
]

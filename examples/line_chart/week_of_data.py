from __future__ import annotations

import logging
from pathlib import Path

from luvatrix_chart import (
    ChartDataset,
    ChartModel,
    LineStyle,
    Solid,
    build_chart_model,
    load_chart_config,
    series_from_values,
)


DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
CONFIG_PATH = Path(__file__).resolve().parent / "chart.toml"


def week_of_data() -> ChartDataset:
    short = [d[0] for d in DAYS]
    return ChartDataset(
        series=(
            series_from_values(
                [20, 90, 100, 75, 160, 110, 90],
                x_axis_labels=short,
                point_labels=DAYS,
                legend_title="Test One",
                style=LineStyle(fill=Solid(color=(255, 59, 48, 255))),
            ),
            series_from_values(
                [90, 20, 120, 85, 140, 10, 20],
                x_axis_labels=short,
                point_labels=DAYS,
                legend_title="Test Two",
                style=LineStyle(fill=Solid(color=(0, 122, 255, 255))),
            ),
        )
    )


def create() -> ChartModel:
    return build_chart_model(week_of_data(), load_chart_config(CONFIG_PATH))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    chart = create()
    canvas = (600.0, 300.0)
    print(f"{chart.metadata.title} / {chart.metadata.subtitle}")
    print("legends:", ", ".join(legend.label for legend in chart.legends))
    print("y labels:", chart.y_axis_labels())
    for x in (0.0, 150.0, 420.0, 600.0):
        result = chart.touch((x, canvas[1] / 2), canvas)
        labels = [p.point_label for p in result.points]
        coords = [(round(loc.x, 1), round(loc.y, 1)) for loc in result.locations]
        print(f"x={x:>5}: {result.status} {labels} {coords}")
    chart.end_touch()


if __name__ == "__main__":
    main()

from __future__ import annotations

import importlib.util
from io import StringIO
from pathlib import Path
import sys
import unittest
from unittest import mock

from luvatrix_chart.locate import PixelLocation
from luvatrix_chart.model import LabelsFromChartData
from luvatrix_chart.scales import Zero

EXAMPLE_DIR = Path(__file__).resolve().parents[1] / "examples" / "line_chart"
MODULE_PATH = EXAMPLE_DIR / "week_of_data.py"
SPEC = importlib.util.spec_from_file_location("line_chart_week_of_data", MODULE_PATH)
if SPEC is None or SPEC.loader is None:
    raise RuntimeError(f"failed to load module spec for {MODULE_PATH}")
MODULE = importlib.util.module_from_spec(SPEC)
sys.modules[SPEC.name] = MODULE
SPEC.loader.exec_module(MODULE)


class WeekOfDataExampleTests(unittest.TestCase):
    def test_example_chart_is_configured_from_toml(self) -> None:
        chart = MODULE.create()
        self.assertEqual(chart.metadata.title, "Some Data")
        self.assertEqual(chart.metadata.subtitle, "A Week")
        self.assertEqual(chart.baseline_policy, Zero())
        self.assertEqual(chart.x_axis_labels_from, LabelsFromChartData(labels=("Monday", "Thursday", "Sunday")))
        self.assertEqual([legend.label for legend in chart.legends], ["Test One", "Test Two"])
        self.assertEqual(chart.y_axis_labels(), ["0", "20", "40", "60", "80", "100", "120", "140", "160"])

    def test_touch_at_right_edge_hits_sunday(self) -> None:
        chart = MODULE.create()
        result = chart.touch((600.0, 150.0), (600.0, 300.0))
        self.assertEqual(result.status, "ok")
        self.assertEqual([p.point_label for p in result.points], ["Sunday", "Sunday"])
        self.assertEqual(result.locations, (PixelLocation(x=600.0, y=131.25), PixelLocation(x=600.0, y=262.5)))

    def test_main_prints_summary(self) -> None:
        with mock.patch("sys.stdout", new_callable=StringIO) as out:
            MODULE.main()
        text = out.getvalue()
        self.assertIn("Some Data / A Week", text)
        self.assertIn("legends: Test One, Test Two", text)


if __name__ == "__main__":
    unittest.main()

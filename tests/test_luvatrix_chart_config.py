from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from luvatrix_chart.config import ChartConfig, build_chart_model, chart_config_from_mapping, load_chart_config
from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.model import LabelsFromChartData, LabelsFromDataPoint
from luvatrix_chart.scales import MinimumValue, MinimumWithCeiling, Zero
from luvatrix_chart.series import ChartDataset, DataPoint, Series


class ChartConfigTests(unittest.TestCase):
    def test_empty_mapping_gives_defaults(self) -> None:
        config = chart_config_from_mapping({})
        self.assertEqual(config, ChartConfig())
        self.assertEqual(config.style.baseline, Zero())
        self.assertEqual(config.style.x_axis_labels_from, LabelsFromDataPoint())
        self.assertEqual(config.style.y_axis_number_of_labels, 7)

    def test_full_chart_table(self) -> None:
        config = chart_config_from_mapping(
            {
                "chart": {
                    "title": "Some Data",
                    "subtitle": "A Week",
                    "no_data_text": "Nothing yet",
                    "baseline": "minimum_with_ceiling",
                    "baseline_ceiling": 50,
                    "x_axis_labels_from": "chart_data",
                    "x_axis_labels": ["Monday", "Thursday", "Sunday"],
                    "y_axis_number_of_labels": 5,
                }
            }
        )
        self.assertEqual(config.metadata.title, "Some Data")
        self.assertEqual(config.metadata.subtitle, "A Week")
        self.assertEqual(config.no_data_text, "Nothing yet")
        self.assertEqual(config.style.baseline, MinimumWithCeiling(50.0))
        self.assertEqual(config.style.x_axis_labels_from, LabelsFromChartData(labels=("Monday", "Thursday", "Sunday")))
        self.assertEqual(config.style.y_axis_number_of_labels, 5)

    def test_minimum_value_baseline(self) -> None:
        config = chart_config_from_mapping({"baseline": "minimum_value"})
        self.assertEqual(config.style.baseline, MinimumValue())

    def test_invalid_values_are_rejected(self) -> None:
        bad_tables = [
            {"baseline": "lowest"},
            {"baseline": "minimum_with_ceiling"},
            {"baseline": "minimum_with_ceiling", "baseline_ceiling": "10"},
            {"baseline": "zero", "baseline_ceiling": 10},
            {"x_axis_labels_from": "somewhere"},
            {"x_axis_labels_from": "chart_data"},
            {"x_axis_labels_from": "chart_data", "x_axis_labels": ["a", 1]},
            {"x_axis_labels": ["a"]},
            {"y_axis_number_of_labels": 0},
            {"y_axis_number_of_labels": True},
            {"title": 3},
            {"colour": "red"},
        ]
        for table in bad_tables:
            with self.subTest(table=table):
                with self.assertRaises(ChartConfigError):
                    chart_config_from_mapping({"chart": table})

    def test_chart_must_be_a_table(self) -> None:
        with self.assertRaises(ChartConfigError):
            chart_config_from_mapping({"chart": "zero"})

    def test_load_from_toml_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "chart.toml"
            path.write_text('[chart]\ntitle = "Sales"\nbaseline = "minimum_value"\n', encoding="utf-8")
            config = load_chart_config(path)
        self.assertEqual(config.metadata.title, "Sales")
        self.assertEqual(config.style.baseline, MinimumValue())

    def test_missing_file_and_bad_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_chart_config(Path(tmp) / "missing.toml")
            path = Path(tmp) / "broken.toml"
            path.write_text("[chart\n", encoding="utf-8")
            with self.assertRaises(ChartConfigError):
                load_chart_config(path)

    def test_build_chart_model_applies_config(self) -> None:
        dataset = ChartDataset(series=[Series(points=[DataPoint(value=3), DataPoint(value=9)], legend_title="x")])
        config = chart_config_from_mapping({"chart": {"title": "T", "baseline": "minimum_value"}})
        model = build_chart_model(dataset, config)
        self.assertEqual(model.metadata.title, "T")
        self.assertEqual(model.current_min_value(), 3.0)
        self.assertEqual(model.current_range(), 6.0)
        self.assertEqual(len(model.legends), 1)


if __name__ == "__main__":
    unittest.main()

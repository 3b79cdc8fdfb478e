from luvatrix_chart.adapters.normalize import series_from_values

__all__ = ["series_from_values"]

"""Statistics series, chart boxes, tree models and helpers for DDS monitoring."""

__version__ = "0.1.0"

__all__ = ["chartbox", "data_model", "dynamic", "historic", "statistics_data", "tree", "utils"]
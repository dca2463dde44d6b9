"""Chart boxes holding series whose data is known in full when created."""

from __future__ import annotations

from typing import Iterable

from ddsmonitor.chartbox import DataChartBox
from ddsmonitor.data_model import DataModel, Point
from ddsmonitor.statistics_data import StatisticsData


class HistoricDataChartBox(DataChartBox):
    """A chart box whose series are filled once from stored data."""

    def add_series(self, new_series: Iterable[Point]) -> int:
        """Create a series holding ``new_series`` and return its unique id."""
        with self._lock:
            new_id = self._add_series(DataModel())
            self.update({new_id: list(new_series)})
            return new_id


class HistoricStatisticsData(StatisticsData):
    """Registry of historic chart boxes."""

    def add_series(self, chartbox_id: int, new_series: Iterable[Point]) -> int:
        chartbox = self._chartbox(chartbox_id)
        if not isinstance(chartbox, HistoricDataChartBox):
            raise TypeError(f"chartbox {chartbox_id} is not a historic chartbox")
        return chartbox.add_series(new_series)

    def add_chartbox(self, data_kind: str) -> int:
        return self._add_chartbox(HistoricDataChartBox(data_kind))
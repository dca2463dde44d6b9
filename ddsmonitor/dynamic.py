"""Chart boxes fed periodically with live data points."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from ddsmonitor.chartbox import DataChartBox
from ddsmonitor.data_model import DataModel, Point
from ddsmonitor.statistics_data import StatisticsData

_UINT64_MODULUS = 2**64


@dataclass
class UpdateParameters:
    """What is needed to query the next points of every series in a chart box.

    The per-series lists are kept in the creation order of the series.
    A ``cumulative`` series computes each point over the interval
    ``[now - cumulative_interval, now]`` instead of since the last update.
    """

    data_kind: str
    time_from: int
    source_ids: list[str] = field(default_factory=list)
    target_ids: list[str] = field(default_factory=list)
    statistics_kinds: list[str] = field(default_factory=list)
    series_ids: list[int] = field(default_factory=list)
    cumulative: list[bool] = field(default_factory=list)
    cumulative_interval: list[int] = field(default_factory=list)

    def _per_series_lists(self) -> tuple[list, ...]:
        return (
            self.series_ids,
            self.source_ids,
            self.target_ids,
            self.statistics_kinds,
            self.cumulative,
            self.cumulative_interval,
        )


class DynamicDataChartBox(DataChartBox):
    """A chart box whose series receive new points on every refresh."""

    def __init__(
        self,
        data_kind: str,
        time_to: int,
        window_size: int,
        max_points: int = 0,
    ) -> None:
        super().__init__(data_kind, max_points)
        self.time_to = time_to
        self.window_size = window_size
        self._parameters = UpdateParameters(data_kind=data_kind, time_from=time_to)

    def add_series(
        self,
        statistic_kind: str,
        cumulative: bool,
        cumulative_interval: int,
        source_id: str,
        target_id: str,
        max_points: int = 0,
    ) -> int:
        """Create a new empty series and return its unique id."""
        with self._lock:
            new_id = self._add_series(DataModel(max_points=max_points))
            params = self._parameters
            params.series_ids.append(new_id)
            params.source_ids.append(source_id)
            params.target_ids.append(target_id)
            params.statistics_kinds.append(statistic_kind)
            params.cumulative.append(cumulative)
            params.cumulative_interval.append(cumulative_interval)
            return new_id

    def delete_series_by_order_index(self, series_order_index: int) -> None:
        with self._lock:
            super().delete_series_by_order_index(series_order_index)
            for values in self._parameters._per_series_lists():
                del values[series_order_index]

    def update(self, new_data: Mapping[int, Iterable[Point]], time_to: int) -> None:
        """Append new points and remember ``time_to`` as the start of the next query."""
        with self._lock:
            self.time_to = time_to
            super().update(new_data)

    def get_update_parameters(self) -> UpdateParameters:
        """Return a snapshot of the query parameters, starting at the last update time."""
        with self._lock:
            self._parameters.time_from = self.time_to
            return copy.deepcopy(self._parameters)

    def clear_charts(self) -> None:
        with self._lock:
            super().clear_charts()
            for values in self._parameters._per_series_lists():
                values.clear()

    def recalculate_y_axis(self) -> None:
        """Fit the Y axis to the points inside the visible time window."""
        with self._lock:
            self.reset_axis(x_axis=False, y_axis=True)
            # Times are unsigned 64-bit values, so the subtraction wraps around.
            time_from = (self.time_to - self.window_size) % _UINT64_MODULUS
            for model in self._series.values():
                if model.get_size():
                    low, high = model.limit_y_value(time_from)
                    self.new_y_value(low)
                    self.new_y_value(high)


class DynamicStatisticsData(StatisticsData):
    """Registry of dynamic chart boxes."""

    def _dynamic(self, chartbox_id: int) -> DynamicDataChartBox:
        chartbox = self._chartbox(chartbox_id)
        if not isinstance(chartbox, DynamicDataChartBox):
            raise TypeError(f"chartbox {chartbox_id} is not a dynamic chartbox")
        return chartbox

    def update(
        self,
        chartbox_id: int,
        new_data: Mapping[int, Iterable[Point]],
        time_to: int,
    ) -> None:
        self._dynamic(chartbox_id).update(new_data, time_to)

    def get_update_parameters(self, chartbox_id: int) -> UpdateParameters:
        return self._dynamic(chartbox_id).get_update_parameters()

    def add_series(
        self,
        chartbox_id: int,
        statistic_kind: str,
        cumulative: bool,
        cumulative_interval: int,
        source_id: str,
        target_id: str,
        max_points: int = 0,
    ) -> int:
        return self._dynamic(chartbox_id).add_series(
            statistic_kind, cumulative, cumulative_interval, source_id, target_id, max_points
        )

    def add_chartbox(
        self,
        data_kind: str,
        time_to: int,
        window_size: int,
        max_points: int = 0,
    ) -> int:
        return self._add_chartbox(
            DynamicDataChartBox(data_kind, time_to, window_size, max_points)
        )
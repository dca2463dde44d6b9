# ddsmonitor

Data structures for monitoring a DDS network. They hold statistics series
and the name/value trees shown next to them. No user interface is attached.

## Modules

- `ddsmonitor.data_model`
  - `Point` is a frozen `(x, y)` pair.
  - `DataModel` is an ordered series of points.
  - `handle_new_point()` appends a point. When `max_points` is non-zero, it then drops the oldest points beyond that cap.
  - `limit_y_value(start, end)` returns `(min_y, max_y)` over the points with `start <= x < end`.
- `ddsmonitor.chartbox`
  - `DataChartBox` groups several series under one data kind.
  - It keeps the axis limits `axis_x_min`, `axis_x_max`, `axis_y_min` and `axis_y_max`.
  - `update()` takes a mapping from series id to points. It appends the points and widens the Y axis. The X axis is widened only through `new_x_value()`.
  - `recalculate_y_axis()` fits the Y axis to every non-empty series.
  - `reset_axis()` restores the default limits.
- `ddsmonitor.statistics_data`
  - `StatisticsData` is a registry of chart boxes keyed by unique integer ids.
  - It forwards axis, data and series operations to the chart box with a given id.
- `ddsmonitor.dynamic`
  - `DynamicDataChartBox` and `DynamicStatisticsData` handle real-time series.
  - Each `update(new_data, time_to)` records `time_to`.
  - `get_update_parameters()` returns a copy of an `UpdateParameters`. Its `time_from` is the last update time, and it holds the per-series ids, source and target ids, statistic kinds and cumulative settings.
  - `recalculate_y_axis()` looks only at points inside the last `window_size` time units.
- `ddsmonitor.historic`
  - `HistoricDataChartBox` and `HistoricStatisticsData` handle series loaded all at once.
- `ddsmonitor.tree`
  - `TreeModel` builds a `TreeItem` tree from a nested mapping:
    - Strings are kept as they are.
    - Numbers are truncated to integers.
    - Booleans become `"true"`/`"false"`.
    - `None` becomes `"-"`.
    - Nested mappings become child rows.
  - The top level always ends with an empty row.
  - `TreeRole.NAME` and `TreeRole.VALUE` select a column through `TreeModel.data()`.
- `ddsmonitor.utils`
  - `now(milliseconds=True)` gives the local time as `YYYY-MM-DD HH:MM:SS[.mmm]`.
  - `double_to_string()` gives fixed notation without trailing zeros. For NaN it returns `""`.
  - `erase_file_substr()` strips a leading `file://`.

Series ids and chart box ids come from process-wide counters. They are unique across all instances.

## Errors

| Situation | Exception |
| --- | --- |
| Unknown chart box id or series id | `KeyError` |
| Series position out of range | `IndexError` |
| A dynamic operation on a historic chart box, or the reverse | `TypeError` |
| `TreeModel` given data that is not a mapping | `TypeError` |

## Installation

```
pip install .
```

## Examples

```python
from ddsmonitor.data_model import Point
from ddsmonitor.historic import HistoricStatisticsData

data = HistoricStatisticsData()
box = data.add_chartbox("LATENCY")
data.add_series(box, [Point(0, 1.5), Point(10, 3.0)])

print(data.axis_y_min(box), data.axis_y_max(box))  # 1.5 3.0
print(data.get_data(box, 0))
```

```python
from ddsmonitor.data_model import Point
from ddsmonitor.dynamic import DynamicStatisticsData

data = DynamicStatisticsData()
box = data.add_chartbox("LATENCY", time_to=1000, window_size=500)
series = data.add_series(box, "MEAN", False, 0, "source-id", "target-id")
data.update(box, {series: [Point(1100, 2.0)]}, time_to=1100)
print(data.get_update_parameters(box).time_from)  # 1100
```

```python
from ddsmonitor.tree import TreeModel

model = TreeModel()
model.update({"Host": "alpha", "Processes": {"pid": 42}})
print(model.row_count())  # 3: two entries and the trailing empty row
```

## What it does not do

The package does not connect to a DDS network or to a statistics database. It does not fetch data points by itself, so callers supply them. It does not draw charts or trees, and it has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```
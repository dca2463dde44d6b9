import pytest

from ddsmonitor.chartbox import X_MAX_DEFAULT, Y_MAX_DEFAULT, Y_MIN_DEFAULT, DataChartBox
from ddsmonitor.data_model import DataModel, Point
from ddsmonitor.statistics_data import StatisticsData


@pytest.fixture
def stats():
    return StatisticsData()


def _new_box(stats):
    box = DataChartBox("FASTDDS_LATENCY")
    return stats._add_chartbox(box), box


def test_chartbox_ids_are_unique_and_contained(stats):
    first, _ = _new_box(stats)
    second, _ = _new_box(stats)
    other = StatisticsData()
    third, _ = _new_box(other)
    assert len({first, second, third}) == 3
    assert stats.contains_chartbox(first)
    assert stats.contains_chartbox(second)
    assert not stats.contains_chartbox(third)


def test_delete_chartbox(stats):
    cid, box = _new_box(stats)
    box._add_series(DataModel())
    stats.delete_chartbox(cid)
    assert not stats.contains_chartbox(cid)
    assert box.series_ids == []


def test_unknown_chartbox_raises(stats):
    with pytest.raises(KeyError):
        stats.axis_y_max(987654321)
    with pytest.raises(KeyError):
        stats.delete_chartbox(987654321)


def test_axis_setters_and_getters(stats):
    cid, _ = _new_box(stats)
    stats.set_axis_y_max(cid, 12.5)
    stats.set_axis_y_min(cid, -3.5)
    stats.set_axis_x_max(cid, 2000)
    stats.set_axis_x_min(cid, 1000)
    assert stats.axis_y_max(cid) == 12.5
    assert stats.axis_y_min(cid) == -3.5
    assert stats.axis_x_max(cid) == 2000
    assert stats.axis_x_min(cid) == 1000


def test_new_x_value(stats):
    cid, _ = _new_box(stats)
    stats.new_x_value(cid, 500)
    stats.new_x_value(cid, 300)
    assert stats.axis_x_max(cid) == 500
    assert stats.axis_x_min(cid) == 300


def test_get_data_and_delete_series(stats):
    cid, box = _new_box(stats)
    a = box._add_series(DataModel())
    b = box._add_series(DataModel())
    box.update({a: [Point(1, 1.0)], b: [Point(2, 2.0)]})
    assert stats.get_data(cid, 0) == [Point(1, 1.0)]
    stats.delete_series(cid, 0)
    assert stats.get_data(cid, 0) == [Point(2, 2.0)]
    with pytest.raises(IndexError):
        stats.get_data(cid, 1)


def test_clear_charts(stats):
    cid, box = _new_box(stats)
    sid = box._add_series(DataModel())
    box.update({sid: [Point(1, 4.0)]})
    stats.clear_charts(cid)
    assert box.series_ids == []
    assert stats.axis_y_max(cid) == Y_MAX_DEFAULT
    assert stats.axis_x_max(cid) == X_MAX_DEFAULT


def test_recalculate_y_axis(stats):
    cid, box = _new_box(stats)
    sid = box._add_series(DataModel())
    box.update({sid: [Point(1, 6.0), Point(2, 2.0)]})
    stats.set_axis_y_max(cid, 1000.0)
    stats.set_axis_y_min(cid, -1000.0)
    stats.recalculate_y_axis(cid)
    assert stats.axis_y_max(cid) == 6.0
    assert stats.axis_y_min(cid) == 2.0


def test_recalculate_y_axis_empty_box(stats):
    cid, _ = _new_box(stats)
    stats.set_axis_y_max(cid, 8.0)
    stats.recalculate_y_axis(cid)
    assert stats.axis_y_max(cid) == Y_MAX_DEFAULT
    assert stats.axis_y_min(cid) == Y_MIN_DEFAULT


def test_set_max_points(stats):
    cid, box = _new_box(stats)
    sid = box._add_series(DataModel())
    stats.set_max_points(cid, 0, 1)
    box.update({sid: [Point(1, 1.0), Point(2, 2.0)]})
    assert stats.get_data(cid, 0) == [Point(2, 2.0)]
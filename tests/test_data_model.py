import sys

import pytest

from ddsmonitor.data_model import DataModel, Point


def test_headers_and_columns():
    model = DataModel()
    assert model.column_count() == 2
    assert model.header_data(0) == "x"
    assert model.header_data(1) == "y"


def test_add_points_and_read_back():
    model = DataModel()
    model.handle_new_point(Point(1, 10))
    model.handle_new_point(Point(2, 20))
    assert model.row_count() == 2
    assert model.get_size() == 2
    assert model.data(1, 0) == 2
    assert model.data(1, 1) == 20
    assert model.get_data() == [Point(1, 10), Point(2, 20)]


def test_data_out_of_range():
    model = DataModel([Point(0, 0)])
    with pytest.raises(IndexError):
        model.data(1, 0)
    with pytest.raises(IndexError):
        model.data(-1, 0)


def test_max_points_drops_oldest():
    model = DataModel(max_points=2)
    for i in range(5):
        model.handle_new_point(Point(i, i * 2))
    assert model.get_data() == [Point(3, 6), Point(4, 8)]


def test_set_max_points_applies_on_next_point():
    model = DataModel([Point(i, i) for i in range(4)])
    model.set_max_points(2)
    assert model.get_size() == 4
    model.handle_new_point(Point(4, 4))
    assert model.get_data() == [Point(3, 3), Point(4, 4)]


def test_zero_max_points_is_unbounded():
    model = DataModel()
    for i in range(50):
        model.handle_new_point(Point(i, i))
    assert model.get_size() == 50


def test_limit_y_value_whole_range():
    model = DataModel([Point(0, 5), Point(1, -2), Point(2, 7)])
    assert model.limit_y_value() == (-2, 7)


def test_limit_y_value_window_excludes_end():
    model = DataModel([Point(0, 5), Point(1, -2), Point(2, 7)])
    assert model.limit_y_value(1, 2) == (-2, -2)


def test_limit_y_value_empty():
    assert DataModel().limit_y_value() == (sys.float_info.max, -sys.float_info.max)
# test/test_dataset.py
from datetime import datetime

import pytest

from particlechart.core import Dataset, DatasetMeta
from particlechart.core import InvalidDataset, SeriesNotFound


def _ds(rows, columns=("t", "A", "B")):
    return Dataset(columns=columns, rows=rows, meta=DatasetMeta(title="x"))


ROWS = [
    {"t": "2021-01-01 00:00", "A": "10", "B": "1,000"},
    {"t": "2021-01-01 00:05", "A": "bad", "B": ""},
    {"t": "2021-01-01 00:10", "A": "30", "B": "3"},
]


def test_dataset_column_contract():
    ds = _ds(ROWS)

    assert ds.time_column == "t"
    assert ds.series_columns == ("A", "B")
    assert ds.n == 3
    assert len(ds) == 2
    assert list(ds) == ["A", "B"]
    assert "A" in ds
    assert "t" not in ds


def test_dataset_first_column_is_time_whatever_its_name():
    ds = _ds([{"PM2.5": "2021-01-01", "Date": "5"}], columns=("PM2.5", "Date"))
    assert ds.time_column == "PM2.5"
    assert ds.series_columns == ("Date",)


def test_dataset_numeric_access_keeps_gaps():
    ds = _ds(ROWS)

    assert ds["A"] == (10.0, None, 30.0)
    assert ds.numeric("B") == (1000.0, None, 3.0)


def test_dataset_getitem_missing_raises():
    ds = _ds(ROWS)
    with pytest.raises(SeriesNotFound):
        _ = ds["missing"]
    with pytest.raises(SeriesNotFound):
        _ = ds["t"]


def test_dataset_time_points_and_bounds():
    rows = [
        {"t": "junk", "A": "1", "B": "1"},
        {"t": "2021-01-01 00:00", "A": "1", "B": "1"},
        {"t": "2021-01-02 00:00", "A": "1", "B": "1"},
        {"t": "also junk", "A": "1", "B": "1"},
    ]
    ds = _ds(rows)

    times = ds.time_points()
    assert times[0] == "junk"
    assert times[1] == datetime(2021, 1, 1)
    assert ds.t_start == datetime(2021, 1, 1)
    assert ds.t_end == datetime(2021, 1, 2)


def test_dataset_bounds_none_without_instants():
    ds = _ds([{"t": "x", "A": "1", "B": "2"}])
    assert ds.t_start is None
    assert ds.t_end is None


def test_dataset_rejects_row_column_mismatch():
    with pytest.raises(InvalidDataset):
        _ds([{"t": "x", "A": "1"}])


def test_dataset_rejects_bad_columns():
    with pytest.raises(InvalidDataset):
        Dataset(columns=())
    with pytest.raises(InvalidDataset):
        Dataset(columns=("t", "A", "A"))
    with pytest.raises(InvalidDataset):
        Dataset(columns=("t", " "))
    with pytest.raises(InvalidDataset):
        Dataset(columns="tAB")  # type: ignore[arg-type]


def test_dataset_rejects_non_meta():
    with pytest.raises(InvalidDataset):
        Dataset(columns=("t",), meta={"title": "x"})  # type: ignore[arg-type]


def test_dataset_is_immutable():
    ds = _ds(ROWS)
    with pytest.raises(AttributeError):
        ds.columns = ("x",)  # type: ignore[misc]
    assert isinstance(ds.rows, tuple)

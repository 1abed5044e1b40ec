# test/test_view.py
from datetime import datetime, timedelta, timezone

import pytest

from particlechart.core import ViewConfig, InvalidViewConfig, parse_instant


def test_defaults():
    v = ViewConfig()
    assert v.scale == "linear"
    assert v.decimate_step == 1
    assert v.smooth_window == 1
    assert not v.has_range


@pytest.mark.parametrize(
    "kwargs",
    [
        {"scale": "sqrt"},
        {"decimate_step": 0},
        {"smooth_window": -2},
        {"decimate_step": 1.5},
        {"smooth_window": True},
        {"range_start": "2021-01-01"},
        {"range_start": datetime(2021, 1, 2), "range_end": datetime(2021, 1, 1)},
        {"range_end": datetime(2021, 1, 1, tzinfo=timezone.utc)},
    ],
)
def test_rejects_invalid(kwargs):
    with pytest.raises(InvalidViewConfig):
        ViewConfig(**kwargs)


def test_with_methods_return_new_config():
    v = ViewConfig()
    v2 = v.with_scale("log").with_decimate_step(3).with_smooth_window(5)

    assert v.scale == "linear"
    assert (v2.scale, v2.decimate_step, v2.smooth_window) == ("log", 3, 5)


def test_with_range_parses_strings():
    v = ViewConfig().with_range("2021-01-01 00:00", "2021-01-02T12:00")
    assert v.range_start == datetime(2021, 1, 1)
    assert v.range_end == datetime(2021, 1, 2, 12)
    assert v.has_range

    cleared = v.with_range("", None)
    assert not cleared.has_range


def test_with_range_rejects_garbage():
    with pytest.raises(InvalidViewConfig):
        ViewConfig().with_range("yesterday")


def test_with_last_days():
    end = datetime(2021, 1, 10)
    v = ViewConfig().with_last_days(end, 3)
    assert v.range_start == end - timedelta(days=3)
    assert v.range_end == end

    assert not v.with_last_days(None, 3).has_range


def test_parse_instant_converts_aware_datetimes():
    t = parse_instant(datetime(2021, 1, 1, 2, tzinfo=timezone(timedelta(hours=2))))
    assert t == datetime(2021, 1, 1, 0)
    assert parse_instant(None) is None

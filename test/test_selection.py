# test/test_selection.py
import pytest

from particlechart.core import SelectionState, SeriesNotFound

SERIES = ("0.3um", "0.5um", "1.0um", "2.5um", "5.0um")


def test_initial_activates_first_n():
    s = SelectionState.initial(SERIES, default_active=3)
    assert s.active == {"0.3um", "0.5um", "1.0um"}
    assert s.available == SERIES


def test_initial_none_activates_all():
    s = SelectionState.initial(SERIES, default_active=None)
    assert s.active == set(SERIES)


def test_initial_count_larger_than_series():
    s = SelectionState.initial(SERIES[:2], default_active=3)
    assert s.active == {"0.3um", "0.5um"}


def test_set_active_and_toggle_return_new_state():
    s = SelectionState.initial(SERIES, default_active=0)
    s2 = s.set_active("2.5um", True)

    assert s.active == frozenset()
    assert s2.is_active("2.5um")

    s3 = s2.toggle("2.5um").toggle("0.3um")
    assert s3.active == {"0.3um"}


def test_active_in_order_follows_series_order():
    s = SelectionState(available=SERIES).set_active("5.0um").set_active("0.3um")
    assert s.active_in_order() == ("0.3um", "5.0um")


def test_select_all_none():
    s = SelectionState(available=SERIES)
    assert s.select_all().active == set(SERIES)
    assert s.select_all().select_none().active == frozenset()


def test_unknown_series_rejected():
    s = SelectionState(available=SERIES)
    with pytest.raises(SeriesNotFound):
        s.set_active("10um")
    with pytest.raises(SeriesNotFound):
        SelectionState(available=SERIES, active=frozenset({"10um"}))


def test_filter_by_search_only_affects_labels():
    s = SelectionState.initial(SERIES, default_active=2)

    assert s.filter_by_search("0.") == ("0.3um", "0.5um")
    assert s.filter_by_search("2.5") == ("2.5um",)
    assert s.filter_by_search("UM") == SERIES
    assert s.filter_by_search("") == SERIES
    assert s.filter_by_search(None) == SERIES
    assert s.filter_by_search("zzz") == ()
    assert s.active == {"0.3um", "0.5um"}

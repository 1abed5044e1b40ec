# test/test_session.py
import pytest

from particlechart.core import LoadError, ParseError, ViewConfig
from particlechart.render import FigureSurface
from particlechart.session import ChartSession


CSV = """t,A,B,C,D
2021-01-01 00:00,10,1,5,7
2021-01-02 00:00,bad,2,6,8
2021-01-05 00:00,30,3,7,9
"""


@pytest.fixture
def csv_path(tmp_path):
    p = tmp_path / "room.csv"
    p.write_text(CSV, encoding="utf-8")
    return p


@pytest.fixture
def session():
    return ChartSession(FigureSurface())


def test_load_draws_default_selection(session, csv_path):
    assert session.load(csv_path, title="Room") is True

    assert session.title == "Room"
    assert session.message is None
    assert session.selection.active_in_order() == ("A", "B", "C")
    assert [t.name for t in session.traces] == ["A", "B", "C"]
    assert session.surface.draws == 1
    assert session.surface.figure.layout.title.text == "Room"


def test_default_active_all(csv_path):
    s = ChartSession(FigureSurface(), default_active=None)
    s.load(csv_path)
    assert len(s.traces) == 4


def test_every_change_redraws(session, csv_path):
    session.load(csv_path)

    session.set_scale("log")
    session.set_decimate_step(2)
    session.set_smooth_window(2)
    session.toggle("C")
    session.set_active("D", True)

    assert session.surface.draws == 6
    assert session.surface.figure.layout.yaxis.type == "log"
    assert [t.name for t in session.traces] == ["A", "B", "D"]
    assert session.traces[0].y == (10.0, 20.0)


def test_zero_active_still_submits_empty_chart(session, csv_path):
    session.load(csv_path)
    session.select_none()

    assert session.traces == []
    assert session.surface.draws == 2
    assert len(session.surface.figure.data) == 0


def test_set_range_and_quick_range(session, csv_path):
    session.load(csv_path)

    session.set_range("2021-01-02", None)
    assert [len(t.x) for t in session.traces] == [2, 2, 2]

    session.quick_range(1)
    assert session.view.range_start.day == 4
    assert [len(t.x) for t in session.traces] == [1, 1, 1]

    session.quick_range("full")
    assert [len(t.x) for t in session.traces] == [3, 3, 3]


def test_search_does_not_change_chart(session, csv_path):
    session.load(csv_path)
    before = session.surface.draws

    assert session.visible_labels("b") == ("B",)
    assert session.surface.draws == before
    assert session.selection.active_in_order() == ("A", "B", "C")


def test_failed_load_keeps_previous_chart(session, csv_path, tmp_path):
    session.load(csv_path, title="Room")
    draws = session.surface.draws

    assert session.load(tmp_path / "missing.csv") is False
    assert session.message
    assert session.dataset.meta.title == "Room"
    assert session.surface.draws == draws


def test_failed_load_can_raise(session, tmp_path):
    with pytest.raises(LoadError):
        session.load(tmp_path / "missing.csv", raise_errors=True)

    empty = tmp_path / "empty.csv"
    empty.write_text("t,A\n", encoding="utf-8")
    with pytest.raises(ParseError):
        session.load(empty, raise_errors=True)
    assert session.dataset is None


def test_changes_before_load_do_not_draw():
    s = ChartSession(FigureSurface(), view=ViewConfig(scale="log"))
    s.quick_range(3)
    assert s.on_parameters_changed() == []
    assert s.surface.draws == 0

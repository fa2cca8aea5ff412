import datetime as dt

import pytest

from BackEnd.core.errors import PersistenceError
from BackEnd.services.session_store import SessionStore
from BackEnd.services.tracker_service import TrackerService

TODAY = dt.date(2024, 1, 3)


class FailingSlot:
    def read(self):
        return None

    def write(self, value):
        raise PersistenceError("disk full")


@pytest.fixture
def service(qapp, store):
    svc = TrackerService(store, today=lambda: TODAY)
    svc.events = []
    svc.messages = []
    svc.changed.connect(lambda: svc.events.append("changed"))
    svc.notify.connect(lambda message, kind: svc.messages.append((kind, message)))
    return svc


def test_add_session_refreshes_and_notifies(service):
    session = service.add_session("Math", "30", "minutes", TODAY, "")
    assert session is not None
    assert service.events == ["changed"]
    assert service.messages == [("success", "Study session added successfully!")]
    assert service.summary() == {"today_total": 30, "week_total": 30, "count": 1}


def test_invalid_add_notifies_error_without_change(service):
    assert service.add_session("", 30) is None
    assert service.add_session("Math", 0) is None
    assert service.events == []
    assert [kind for kind, _ in service.messages] == ["error", "error"]
    assert service.messages[0][1] == "Please fill in all required fields correctly."
    assert len(service.store) == 0


def test_delete_session(service):
    session = service.add_session("Math", 30, date=TODAY)
    service.events.clear()
    assert service.delete_session("nope") is False
    assert service.events == []
    assert service.delete_session(session.id) is True
    assert service.events == ["changed"]
    assert service.summary()["count"] == 0


def test_filters_recompute_from_store(service):
    service.add_session("Math", 30, date=TODAY)
    service.add_session("Physics", 45, date=dt.date(2024, 1, 2))

    service.set_filters("ma")
    assert [s.subject for s in service.filtered_sessions()] == ["Math"]

    service.set_filters("", dt.date(2024, 1, 2))
    assert [s.subject for s in service.filtered_sessions()] == ["Physics"]

    # a new session matching the active filter shows up without re-filtering
    service.add_session("Biology", 10, date=dt.date(2024, 1, 2))
    assert [s.subject for s in service.filtered_sessions()] == ["Biology", "Physics"]

    service.clear_filters()
    assert len(service.filtered_sessions()) == 3
    assert service.subjects() == ["Biology", "Math", "Physics"]


def test_chart_series(service):
    service.add_session("Math", 1, "hours", date=TODAY)
    service.add_session("Math", 30, date=dt.date(2024, 1, 1))
    assert service.per_subject_totals() == {"Math": 90}
    series = service.daily_series()
    assert len(series) == 7
    assert series[-1] == (TODAY, 60)


def test_clear_all(service):
    service.add_session("Math", 30, date=TODAY)
    assert service.clear_all() is True
    assert len(service.store) == 0
    assert service.messages[-1] == ("success", "All study sessions cleared!")


def test_clear_all_reports_failed_write(qapp):
    svc = TrackerService(SessionStore(FailingSlot()), today=lambda: TODAY)
    messages = []
    svc.notify.connect(lambda message, kind: messages.append((kind, message)))
    assert svc.clear_all() is False
    assert len(svc.store) == 0
    assert messages[-1][0] == "error"


def test_export_csv(service, tmp_path):
    assert service.export_csv(tmp_path / "empty.csv") is None
    assert service.messages[-1] == ("error", "No data to export.")
    assert not (tmp_path / "empty.csv").exists()

    service.add_session("Math", 30, date=TODAY)
    path = service.export_csv(tmp_path / service.suggested_export_name())
    assert path.name == "study-tracker-2024-01-03.csv"
    assert '"Math",30,minutes,2024-01-03,"",' in path.read_text(encoding="utf-8")
    assert service.messages[-1] == ("success", "Data exported successfully!")


def test_export_write_failure_is_reported(service, tmp_path):
    service.add_session("Math", 30, date=TODAY)
    assert service.export_csv(tmp_path / "missing" / "out.csv") is None
    assert service.messages[-1][0] == "error"

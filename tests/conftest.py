import datetime as dt
import itertools

import pytest

from BackEnd.models.study_session import StudySession
from BackEnd.repos.storage_repo import StorageSlot
from BackEnd.services.session_store import SessionStore

FIXED_TS = "2024-01-01T00:00:00Z"


@pytest.fixture
def make_session():
    def _make(id_, subject="Math", duration=30, time_unit="minutes", date=dt.date(2024, 1, 3), notes=""):
        return StudySession(
            id=str(id_),
            subject=subject,
            duration=duration,
            time_unit=time_unit,
            date=date,
            notes=notes,
            timestamp=FIXED_TS,
        )
    return _make


@pytest.fixture
def slot(tmp_path):
    return StorageSlot(dbfile=tmp_path / "study.db")


@pytest.fixture
def store(slot):
    counter = itertools.count(1)
    return SessionStore(slot, id_factory=lambda: str(next(counter)), now_iso=lambda: FIXED_TS)


@pytest.fixture
def qapp():
    from PySide6.QtCore import QCoreApplication
    return QCoreApplication.instance() or QCoreApplication([])

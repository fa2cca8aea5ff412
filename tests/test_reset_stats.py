import pytest

import reset_stats
from BackEnd.repos.storage_repo import StorageSlot
from BackEnd.services.session_store import SessionStore


@pytest.fixture
def data_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
    return tmp_path


def test_reset_without_database(data_home):
    assert reset_stats.reset_all_stats(confirm=lambda _: "yes") is False


def test_reset_cancelled_keeps_sessions(data_home):
    SessionStore().add("Math", 30)
    assert reset_stats.reset_all_stats(confirm=lambda _: "no") is False
    assert len(SessionStore()) == 1


def test_reset_confirmed_clears_sessions(data_home):
    SessionStore().add("Math", 30)
    assert reset_stats.reset_all_stats(confirm=lambda _: "y") is True
    assert SessionStore(StorageSlot()).all() == ()

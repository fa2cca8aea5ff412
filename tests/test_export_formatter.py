import datetime as dt

import pytest

from BackEnd.core.errors import PersistenceError
from BackEnd.services import export_formatter

HEADER = "Subject,Duration,Time Unit,Date,Notes,Timestamp"


def test_single_session(make_session):
    session = make_session("1", subject="Math", duration=30, date=dt.date(2024, 1, 1))
    text = export_formatter.to_tabular([session])
    assert text.split("\n") == [
        HEADER,
        '"Math",30,minutes,2024-01-01,"",2024-01-01T00:00:00Z',
    ]


def test_rows_follow_collection_order(make_session):
    sessions = [
        make_session("2", subject="Physics", duration=2, time_unit="hours", notes="lab, part 1"),
        make_session("1", subject="Math"),
    ]
    lines = export_formatter.to_tabular(sessions).split("\n")
    assert len(lines) == 3
    assert lines[1].startswith('"Physics",2,hours,2024-01-03,"lab, part 1",')
    assert lines[2].startswith('"Math",30,minutes,')


def test_empty_collection_is_header_only():
    assert export_formatter.to_tabular([]) == HEADER


def test_embedded_quotes_legacy_and_escaped(make_session):
    session = make_session("1", subject='The "Big" Test')
    assert '"The "Big" Test"' in export_formatter.to_tabular([session])
    assert '"The ""Big"" Test"' in export_formatter.to_tabular([session], escape_quotes=True)


def test_export_filename():
    assert export_formatter.export_filename(dt.date(2024, 1, 3)) == "study-tracker-2024-01-03.csv"


def test_write_export(tmp_path, make_session):
    path = export_formatter.write_export(tmp_path / "out.csv", [make_session("1")])
    assert path.read_text(encoding="utf-8").startswith(HEADER + "\n")


def test_write_export_failure_is_persistence_error(tmp_path, make_session):
    with pytest.raises(PersistenceError):
        export_formatter.write_export(tmp_path / "missing" / "out.csv", [make_session("1")])

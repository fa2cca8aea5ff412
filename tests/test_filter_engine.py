import datetime as dt

from BackEnd.services import filter_engine
from BackEnd.services.filter_engine import FilterCriteria

D1 = dt.date(2024, 1, 1)
D2 = dt.date(2024, 1, 2)


def test_subject_substring_is_case_insensitive(make_session):
    math = make_session("1", subject="Math", date=D1)
    physics = make_session("2", subject="Physics", date=D2)
    assert filter_engine.apply([math, physics], FilterCriteria(subject_substring="ma")) == [math]
    assert filter_engine.apply([math, physics], FilterCriteria(subject_substring="PHYS")) == [physics]


def test_exact_date(make_session):
    math = make_session("1", subject="Math", date=D1)
    physics = make_session("2", subject="Physics", date=D2)
    assert filter_engine.apply([math, physics], FilterCriteria(exact_date=D2)) == [physics]


def test_criteria_are_combined_and_order_is_kept(make_session):
    sessions = [
        make_session("3", subject="Mathematics", date=D2),
        make_session("2", subject="Math", date=D1),
        make_session("1", subject="Applied Math", date=D2),
    ]
    result = filter_engine.apply(sessions, FilterCriteria("math", D2))
    assert [s.id for s in result] == ["3", "1"]


def test_empty_criteria_return_everything(make_session):
    sessions = [make_session("2"), make_session("1")]
    assert filter_engine.apply(sessions) == sessions
    assert filter_engine.apply(sessions, FilterCriteria()) == sessions
    assert FilterCriteria().is_empty()
    assert not FilterCriteria(exact_date=D1).is_empty()


def test_no_match_gives_empty_list(make_session):
    assert filter_engine.apply([make_session("1")], FilterCriteria("chem")) == []


def test_distinct_subjects_sorted_and_case_sensitive(make_session):
    sessions = [
        make_session("1", subject="physics"),
        make_session("2", subject="Math"),
        make_session("3", subject="Physics"),
        make_session("4", subject="Math"),
    ]
    assert filter_engine.distinct_subjects(sessions) == ["Math", "Physics", "physics"]
    assert filter_engine.distinct_subjects([]) == []

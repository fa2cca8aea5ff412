"""
Derived statistics over a collection of study sessions.

Every function takes the reference date explicitly so results never depend
on the wall clock.
"""
from datetime import date, timedelta
from typing import Dict, Iterable, List, Tuple

from BackEnd.core.duration import to_minutes

DEFAULT_DAYS = 7


def total_minutes(sessions: Iterable) -> int:
	return sum(to_minutes(s.duration, s.time_unit) for s in sessions)


def today_total(sessions: Iterable, today: date) -> int:
	return total_minutes(s for s in sessions if s.date == today)


def week_start(today: date) -> date:
	"""Most recent Sunday on or before today."""
	# date.weekday() counts from Monday=0; shift so Sunday is 0
	return today - timedelta(days=(today.weekday() + 1) % 7)


def week_total(sessions: Iterable, today: date) -> int:
	"""Minutes dated on or after this week's Sunday."""
	start = week_start(today)
	return total_minutes(s for s in sessions if s.date >= start)


def per_subject_totals(sessions: Iterable) -> Dict[str, int]:
	"""Minutes per subject, in order of first appearance."""
	totals: Dict[str, int] = {}
	for s in sessions:
		totals[s.subject] = totals.get(s.subject, 0) + to_minutes(s.duration, s.time_unit)
	return totals


def daily_series(sessions: Iterable, today: date, days: int = DEFAULT_DAYS) -> List[Tuple[date, int]]:
	"""
	Exactly `days` (date, minutes) pairs ending at today, oldest first.
	Days with no sessions get 0.
	"""
	if days <= 0:
		return []
	first = today - timedelta(days=days - 1)
	buckets = {first + timedelta(days=i): 0 for i in range(days)}
	for s in sessions:
		if s.date in buckets:
			buckets[s.date] += to_minutes(s.duration, s.time_unit)
	return list(buckets.items())


def summary(sessions: Iterable, today: date) -> Dict[str, int]:
	"""The dashboard numbers: today, this week and session count."""
	sessions = list(sessions)
	return {
		"today_total": today_total(sessions, today),
		"week_total": week_total(sessions, today),
		"count": len(sessions),
	}

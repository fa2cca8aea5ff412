from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class FilterCriteria:
	subject_substring: str = ""
	exact_date: Optional[date] = None

	def is_empty(self):
		return not self.subject_substring and self.exact_date is None


def apply(sessions, criteria=None):
	"""Sessions matching the subject substring (case-insensitive) and exact date, order kept."""
	if criteria is None or criteria.is_empty():
		return list(sessions)
	needle = (criteria.subject_substring or "").lower()
	result = []
	for s in sessions:
		if needle and needle not in s.subject.lower():
			continue
		if criteria.exact_date is not None and s.date != criteria.exact_date:
			continue
		result.append(s)
	return result


def distinct_subjects(sessions):
	return sorted({s.subject for s in sessions})

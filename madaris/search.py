"""Client-side filtering of the school list."""

from madaris.errors import EmptyCriteriaError
from madaris.schema import School, SearchCriteria

# Fields matched case-sensitively (phone numbers are digits and symbols)
EXACT_FIELDS = frozenset({"phone_number"})


def _matches(school: School, field: str, needle: str) -> bool:
    haystack = getattr(school, field) or ""
    if field in EXACT_FIELDS:
        return needle in haystack
    return needle.lower() in haystack.lower()


def filter_schools(records: list[School], criteria: SearchCriteria) -> list[School]:
    """Return the records matching every non-blank criterion, in input order."""
    active = {
        field: value
        for field, value in criteria.values().items()
        if value and value.strip()
    }
    return [
        school
        for school in records
        if all(_matches(school, field, value) for field, value in active.items())
    ]


def search(records: list[School], criteria: SearchCriteria) -> list[School]:
    """Guarded search entry point.

    Raises:
        EmptyCriteriaError: if every criterion is blank. The filter is not run.
    """
    if criteria.is_blank():
        raise EmptyCriteriaError()
    return filter_schools(records, criteria)

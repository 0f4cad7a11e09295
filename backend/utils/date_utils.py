"""
Query date parsing for salary endpoints.
"""
from datetime import date, datetime, timezone
from typing import Optional


def parse_query_date(value: Optional[str], default: Optional[date] = None) -> date:
    """
    Parse a `date` query parameter.

    Accepts YYYY-MM-DD or a full ISO-8601 datetime. A datetime with an
    offset is converted to UTC before its date is taken, so
    2025-01-01T23:00:00-05:00 means 2025-01-02; a naive datetime keeps its
    own calendar date.
    Missing or blank values give `default`, or today.
    Raises ValueError for anything else.
    """
    if value is None or not value.strip():
        return default or date.today()

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()

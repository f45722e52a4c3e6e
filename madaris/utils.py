"""Shared utilities: HTTP helpers and the ingestion-side value decoders."""

from datetime import datetime

import requests

from madaris.config import REQUEST_TIMEOUT

PLACEHOLDER_URL = "#"

_AR_MONTHS = (
    "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
    "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
)
_AR_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def get(url: str, *, timeout: int = REQUEST_TIMEOUT, check: bool = True, **kwargs) -> requests.Response:
    """GET a URL once. Raises requests.HTTPError on a non-2xx status when check is set."""
    response = requests.get(url, timeout=timeout, **kwargs)
    if check:
        response.raise_for_status()
    return response


def post(url: str, *, timeout: int = REQUEST_TIMEOUT, check: bool = True, **kwargs) -> requests.Response:
    """POST to a URL once. Raises requests.HTTPError on a non-2xx status when check is set."""
    response = requests.post(url, timeout=timeout, **kwargs)
    if check:
        response.raise_for_status()
    return response


def parse_bool(value) -> bool:
    """Decode the API's string booleans: only a case-insensitive "true" is True."""
    if value is True:
        return True
    if value is None or value is False:
        return False
    return str(value).strip().lower() == "true"


def document_url(value) -> str:
    """Return the url of an attachment object, or the placeholder."""
    if isinstance(value, dict):
        url = value.get("url")
        if isinstance(url, str) and url.strip():
            return url
    return PLACEHOLDER_URL


def to_count(value) -> int:
    """Coerce an enrollment count to a non-negative int (0 when unusable)."""
    if isinstance(value, bool):
        return 0
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return count if count > 0 else 0


def to_text(value) -> str:
    """Free-text field as a string; None becomes ""."""
    if value is None:
        return ""
    return str(value)


def format_date_ar(value: str | None) -> str:
    """Render an ISO-8601 timestamp as an Arabic short date, e.g. "١٥ يناير ٢٠٢٥".

    Timestamps carrying an offset are shown in local time; naive ones as given.
    Unparseable input is returned unchanged.
    """
    if not value:
        return ""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    day = str(parsed.day).translate(_AR_DIGITS)
    year = str(parsed.year).translate(_AR_DIGITS)
    return f"{day} {_AR_MONTHS[parsed.month - 1]} {year}"

"""HTTP-date rendering and lenient parsing for the ``Expires`` attribute."""

from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime

INVALID_DATE_TEXT = "Invalid Date"


@dataclass(frozen=True, slots=True)
class InvalidDate:
    """An ``Expires`` value that is present but does not name a point in time.

    Kept instead of raising so one bad attribute does not sink the whole
    cookie. Renders as ``Invalid Date`` when serialized.
    """

    raw: str = ""

    def __str__(self) -> str:
        return INVALID_DATE_TEXT


def from_epoch_ms(epoch_ms: float) -> datetime | InvalidDate:
    """Convert a millisecond epoch to an aware UTC datetime."""
    try:
        return datetime.fromtimestamp(epoch_ms / 1000, UTC)
    except (OverflowError, OSError, ValueError):
        return InvalidDate(str(epoch_ms))


def format_http_date(value: datetime | InvalidDate) -> str:
    """Render *value* as an IMF-fixdate, e.g. ``Wed, 21 Oct 2015 07:28:00 GMT``.

    Naive datetimes are taken to be UTC.
    """
    if isinstance(value, InvalidDate):
        return INVALID_DATE_TEXT
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    else:
        value = value.astimezone(UTC)
    return format_datetime(value.replace(microsecond=0), usegmt=True)


def parse_http_date(raw: str) -> datetime | InvalidDate:
    """Parse an HTTP/RFC 2822 date, falling back to ISO 8601.

    Returns an aware UTC datetime, or ``InvalidDate`` when neither format
    matches.
    """
    text = raw.strip()
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, OverflowError):
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return InvalidDate(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        return InvalidDate(raw)

from __future__ import annotations

from datetime import datetime, timezone

WIRE_DATE_FORMAT = "%Y-%m-%d %H:%M"
DATE_FIELDS = ("start_date", "end_date")


def format_wire_date(value: datetime) -> str:
    return value.strftime(WIRE_DATE_FORMAT)


def parse_wire_date(value: str) -> datetime:
    """Parse a scheduler date string into a naive datetime.

    The widget sends ``YYYY-MM-DD HH:mm``; ISO 8601 strings are accepted too.
    Aware values are normalised to naive UTC, since that is what Mongo hands back.
    """
    text = value.strip()
    try:
        return datetime.strptime(text, WIRE_DATE_FORMAT)
    except ValueError:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def dates_to_wire(record: dict) -> dict:
    out = dict(record)
    for field in DATE_FIELDS:
        value = out.get(field)
        if isinstance(value, datetime):
            out[field] = format_wire_date(value)
    return out


def dates_from_wire(record: dict) -> dict:
    out = dict(record)
    for field in DATE_FIELDS:
        value = out.get(field)
        if isinstance(value, str):
            out[field] = parse_wire_date(value)
    return out

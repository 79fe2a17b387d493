"""Tag utility helpers.

Where: features/check/adapters/audio/_tag_utils.py
What: Pure helpers for parsing and rendering tag values shared by the format handlers.
Why: Keep number, date and text conversions identical across FLAC, MP3 and M4A.
"""

from __future__ import annotations

from datetime import date

__all__ = [
    "first_text",
    "format_date",
    "format_position",
    "parse_date",
    "parse_int",
    "parse_position",
]


def first_text(values: object) -> str | None:
    """Return the first non-empty string of a tag value list."""

    if isinstance(values, str):
        return values or None
    if isinstance(values, (list, tuple)):
        for value in values:
            text = str(value)
            if text:
                return text
    return None


def parse_int(value: str | None) -> int | None:
    """Parse a positive integer tag; blank, zero or non-numeric values read as absent."""

    if value is None:
        return None
    stripped = value.strip()
    if not stripped.isdigit():
        return None
    return int(stripped) or None


def parse_position(value: str | None) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format."""

    if not value:
        return None, None
    number, _, total = value.partition("/")
    return parse_int(number), parse_int(total)


def format_position(number: int | None, total: int | None) -> str | None:
    """Render an 'n/m' position; ``None`` when neither part is known.

    A missing number next to a known total is written as the ``0`` placeholder,
    which ``parse_position`` reads back as absent.
    """

    if not number and not total:
        return None
    if not total:
        return str(number)
    return f"{number or 0}/{total}"


def parse_date(value: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` release date.

    Raises:
        ValueError: The value is present but not a full calendar date.
    """

    if value is None or not value.strip():
        return None
    return date.fromisoformat(value.strip()[:10])


def format_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None

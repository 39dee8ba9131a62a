"""Text helpers shared by the importer and the API."""

from datetime import date, datetime
from typing import Union

from slugify import slugify

from app.core.config import settings

# Anything outside lowercase ASCII letters and digits collapses to a hyphen.
SLUG_DISALLOWED_PATTERN = r"[^a-z0-9]+"


def slugify_text(text: str, max_length: int = None) -> str:
    """
    Derive a URL-safe slug from a title or name.

    Lowercases, transliterates to ASCII, collapses every run of characters
    outside ``[a-z0-9]`` into a single hyphen and strips hyphens from both
    ends. The result is capped at ``SLUG_MAX_LENGTH`` characters. Returns an
    empty string for input with no letters or digits.

    HTML entities are kept as literal text (``&amp;`` gives ``amp``) and
    commas between digits separate them like any other punctuation.
    """
    if max_length is None:
        max_length = settings.SLUG_MAX_LENGTH
    return slugify(
        str(text or ""),
        entities=False,
        decimal=False,
        hexadecimal=False,
        lowercase=True,
        regex_pattern=SLUG_DISALLOWED_PATTERN,
        max_length=max_length,
        word_boundary=False,
        # applied before slugify drops commas between digits
        replacements=[(",", "-")],
    )


def truncate(text: str, length: int = 100) -> str:
    if len(text) <= length:
        return text
    return f"{text[:length]}..."


def format_date(value: Union[datetime, date, str]) -> str:
    """Render a date as e.g. ``Jan 5, 2024``."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value.strftime('%b')} {value.day}, {value.year}"

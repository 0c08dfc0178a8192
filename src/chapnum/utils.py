"""Shared utility functions."""

from __future__ import annotations

from chapnum.recognition import UNPARSEABLE, parse_chapter_number


def sanitize_filename(name: str) -> str:
    """Sanitize a string for use as a filename.

    Args:
        name: The string to sanitize.

    Returns:
        A filename-safe string.
    """
    invalid_chars = '<>:"/\\|?*'
    result = name
    for char in invalid_chars:
        result = result.replace(char, "_")
    return result.strip()


def is_parsed(number: float) -> bool:
    """Check whether a chapter number was recognized."""
    return number != UNPARSEABLE


def format_chapter_number(number: float) -> str:
    """Format a chapter number without trailing zeros.

    Args:
        number: The chapter number (e.g., 4.0 or 24.005).

    Returns:
        The number as text (e.g., '4' or '24.005').
    """
    text = repr(number)
    return text[:-2] if text.endswith(".0") else text


def chapter_filename(
    series_name: str,
    chapter_title: str,
    volume: int | None = None,
    extension: str = ".cbz",
) -> str:
    """Build an archive filename for a chapter.

    Args:
        series_name: The series name, also used to clean the chapter title.
        chapter_title: The chapter title to read the chapter number from.
        volume: Optional volume number.
        extension: File extension including the dot.

    Returns:
        '<series> [v<volume>] ch<number><extension>', or the sanitized
        chapter title when no chapter number is found.
    """
    number = parse_chapter_number(series_name, chapter_title)
    if not is_parsed(number):
        return f"{sanitize_filename(chapter_title)}{extension}"

    parts = []
    if series_name:
        parts.append(sanitize_filename(series_name))
    if volume is not None:
        parts.append(f"v{volume}")
    parts.append(f"ch{format_chapter_number(number)}")
    return " ".join(parts) + extension

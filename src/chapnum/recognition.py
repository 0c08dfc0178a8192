"""Chapter number recognition from free-form chapter titles."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Returned when no chapter number can be found
UNPARSEABLE = -1.0

# Position not preceded by a letter (start of text counts)
_FRONTIER = r"(?<![^\W\d_])"

# One optional non-letter character followed by digits
_NUMBER_TAIL = r"[\W\d_]?\d+"

# Regex fragments for version, volume and season markers
NOISE_WORDS = ("[vs]", "ver", "vol", "version", "volume", "season")

NOISE_PATTERNS = tuple(
    re.compile(_FRONTIER + word + _NUMBER_TAIL, re.IGNORECASE) for word in NOISE_WORDS
)

SUFFIX_REWRITES = (
    (" special", ".special"),
    (" omake", ".omake"),
    (" extra", ".extra"),
)

# Tried in order, first pattern with a match wins
CH_PREFIX_PATTERN = re.compile(r"ch\.\s*(\d+)\.?([^\W_]*)", re.IGNORECASE)
BARE_NUMBER_PATTERN = re.compile(r"(\d+)\.?([^\W_]*)")
CHAPTER_PATTERNS = (CH_PREFIX_PATTERN, BARE_NUMBER_PATTERN)

SPECIAL_SUFFIXES = (
    ("extra", 0.99),
    ("omake", 0.98),
    ("special", 0.97),
)


@dataclass(frozen=True)
class ChapterQuery:
    """A series title and the chapter text to recognize."""

    series_title: str
    chapter_text: str


@dataclass(frozen=True)
class MatchResult:
    """Groups captured from a chapter text."""

    integer_part: str
    subchapter: str = ""


def _strip_noise(text: str, patterns: Iterable[re.Pattern[str]]) -> str:
    for pattern in patterns:
        text = pattern.sub("", text).strip()
    return text


def _rewrite_suffixes(text: str) -> str:
    for spaced, dotted in SUFFIX_REWRITES:
        text = text.replace(spaced, dotted)
    return text


def normalize(series_title: str, chapter_text: str) -> str:
    """Normalize a chapter text for number extraction.

    Args:
        series_title: The series title, removed from the chapter text.
        chapter_text: The raw chapter text.

    Returns:
        Lowercased text without the series title, with commas and hyphens
        turned into dots, noise tokens removed and suffix keywords dot-joined.
    """
    return _normalize(series_title, chapter_text, NOISE_PATTERNS)


def _normalize(
    series_title: str, chapter_text: str, noise_patterns: Iterable[re.Pattern[str]]
) -> str:
    text = chapter_text.lower()
    text = text.replace(series_title.lower(), "", 1).strip()
    text = text.replace(",", ".").replace("-", ".")
    text = _strip_noise(text, noise_patterns)
    return _rewrite_suffixes(text)


def extract(normalized: str) -> MatchResult | None:
    """Find the chapter number groups in normalized text.

    Returns:
        The first match of the "ch." pattern, else of the bare number
        pattern, or None if neither matches.
    """
    for pattern in CHAPTER_PATTERNS:
        match = pattern.search(normalized)
        if match:
            return MatchResult(match.group(1), match.group(2))
    return None


def subchapter_fraction(token: str) -> float:
    """Get the fractional part contributed by a sub-chapter token."""
    if not token:
        return 0.0

    for keyword, fraction in SPECIAL_SUFFIXES:
        if keyword in token:
            return fraction

    if token.isdecimal():
        # Digits after the decimal point: "005" -> 0.005
        return int(token) / 10 ** len(token)

    first = token[0]
    if "a" <= first <= "h":
        return (ord(first) - 96) / 10
    if "A" <= first <= "H":
        return (ord(first) - 64) / 10
    return 0.0


def resolve(match: MatchResult) -> float:
    """Convert captured groups into a chapter number.

    Raises:
        ValueError: If the integer part is not a number.
        OverflowError: If the integer part is too large for a float.
    """
    chapter = float(int(match.integer_part))
    return chapter + subchapter_fraction(match.subchapter)


class ChapterNumberParser:
    """Chapter number parser with optional extra noise words.

    Extra words are stripped the same way as the built-in version and
    volume markers: when not preceded by a letter and followed by digits.
    """

    def __init__(self, extra_noise_words: Iterable[str] = ()) -> None:
        self.extra_noise_words = tuple(word.lower() for word in extra_noise_words if word)
        self._noise_patterns = NOISE_PATTERNS + tuple(
            re.compile(_FRONTIER + re.escape(word) + _NUMBER_TAIL, re.IGNORECASE)
            for word in self.extra_noise_words
        )

    def normalize(self, series_title: str, chapter_text: str) -> str:
        """Normalize a chapter text using this parser's noise patterns."""
        return _normalize(series_title, chapter_text, self._noise_patterns)

    def parse(self, series_title: str, chapter_text: str) -> float:
        """Parse the chapter number from a chapter text.

        Args:
            series_title: The series title.
            chapter_text: The chapter text (e.g., 'Bleach 567.a Down With Snowwhite').

        Returns:
            The chapter number, or UNPARSEABLE if none was found.
        """
        normalized = self.normalize(series_title, chapter_text)
        logger.debug("Normalized %r to %r", chapter_text, normalized)

        match = extract(normalized)
        if match is None:
            logger.debug("No chapter number in %r", chapter_text)
            return UNPARSEABLE

        try:
            return resolve(match)
        except (ValueError, OverflowError):
            logger.debug("Invalid chapter number %r in %r", match.integer_part, chapter_text)
            return UNPARSEABLE

    def parse_query(self, query: ChapterQuery) -> float:
        """Parse the chapter number for a query."""
        return self.parse(query.series_title, query.chapter_text)


_default_parser = ChapterNumberParser()


def parse_chapter_number(series_title: str, chapter_text: str) -> float:
    """Parse the chapter number from a chapter text.

    Returns:
        The chapter number, or -1.0 if none was found.
    """
    return _default_parser.parse(series_title, chapter_text)

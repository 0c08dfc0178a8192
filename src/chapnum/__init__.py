"""Chapter number recognition for manga chapter titles."""

from chapnum.recognition import (
    UNPARSEABLE,
    ChapterNumberParser,
    ChapterQuery,
    MatchResult,
    parse_chapter_number,
)

__version__ = "0.1.0"

__all__ = [
    "UNPARSEABLE",
    "ChapterNumberParser",
    "ChapterQuery",
    "MatchResult",
    "parse_chapter_number",
]

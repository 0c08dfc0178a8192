"""Parser for chapter lists on series pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup

from chapnum.recognition import ChapterNumberParser
from chapnum.utils import is_parsed

logger = logging.getLogger(__name__)


@dataclass
class NumberedChapter:
    """A chapter link with its recognized chapter number."""

    url: str
    title: str
    number: float

    @property
    def parsed(self) -> bool:
        """Whether a chapter number was recognized."""
        return is_parsed(self.number)


class SeriesPageParser:
    """Parser for a series page to extract its chapter list.

    Extracts:
    - Series name
    - Chapter links and titles
    - Chapter numbers, recognized from the titles
    """

    def __init__(self, html: str, parser: ChapterNumberParser | None = None) -> None:
        self.soup = BeautifulSoup(html, "lxml")
        self.parser = parser or ChapterNumberParser()

    def validate_structure(self) -> list[str]:
        """Check that expected page landmarks exist.

        Returns:
            List of warning messages for missing elements.
        """
        warnings = []
        if not self.soup.select_one("h2.tag-title, h2#tag-title, h2"):
            warnings.append("No series title element (h2) found")
        if not self.soup.select_one('a[href*="/chapters/"]'):
            warnings.append("No chapter links found on series page")
        return warnings

    def get_series_name(self) -> str | None:
        """Get the series name from the page.

        Returns:
            The series name or None if not found.
        """
        name_elem = self.soup.select_one("h2.tag-title, h2#tag-title, h2")
        if name_elem:
            # Exclude child "b" tags that might contain a "Series" label
            for b_tag in name_elem.find_all("b"):
                b_tag.decompose()
            return name_elem.get_text(strip=True)
        return None

    def get_chapters(self) -> list[tuple[str, str]]:
        """Get the chapters listed on the page.

        Returns:
            List of (url, title) tuples in page order.
        """
        chapters_list = self.soup.select_one(".chapter-list, #chapters, dl.chapter-list")
        if not chapters_list:
            # Fallback: the first dl element that contains chapter links
            for dl in self.soup.find_all("dl"):
                if dl.select_one('a[href*="/chapters/"]'):
                    chapters_list = dl
                    break

        if not chapters_list:
            return []

        chapters: list[tuple[str, str]] = []
        seen: set[str] = set()
        for chapter_link in chapters_list.select('a[href*="/chapters/"]'):
            href = chapter_link.get("href", "")
            title = chapter_link.get_text(strip=True)
            if href and title and href not in seen:
                seen.add(href)
                chapters.append((href, title))

        return chapters

    def get_numbered_chapters(self, series_name: str | None = None) -> list[NumberedChapter]:
        """Get the chapters with their chapter numbers.

        Args:
            series_name: Series title to strip from chapter titles.
                Defaults to the name found on the page.

        Returns:
            Chapters sorted by number; unrecognized chapters come last
            in page order.
        """
        if series_name is None:
            series_name = self.get_series_name() or ""

        numbered = [
            NumberedChapter(url=url, title=title, number=self.parser.parse(series_name, title))
            for url, title in self.get_chapters()
        ]

        unparsed = [chapter for chapter in numbered if not chapter.parsed]
        if unparsed:
            logger.info(
                "%d of %d chapters in %r have no chapter number",
                len(unparsed),
                len(numbered),
                series_name,
            )

        parsed = sorted((chapter for chapter in numbered if chapter.parsed), key=lambda c: c.number)
        return parsed + unparsed


def get_numbered_chapters(html: str, series_name: str | None = None) -> list[NumberedChapter]:
    """Convenience function to get numbered chapters from series HTML.

    Args:
        html: The series page HTML.
        series_name: Optional series title override.

    Returns:
        Chapters sorted by chapter number.
    """
    parser = SeriesPageParser(html)
    return parser.get_numbered_chapters(series_name)

"""HTML parsing for chapter lists."""

from chapnum.scraper.series_parser import NumberedChapter, SeriesPageParser

__all__ = [
    "NumberedChapter",
    "SeriesPageParser",
]

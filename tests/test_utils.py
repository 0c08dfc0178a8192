"""Tests for utility functions."""

from chapnum.recognition import UNPARSEABLE
from chapnum.utils import chapter_filename, format_chapter_number, is_parsed, sanitize_filename


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    def test_replaces_invalid_characters(self):
        assert sanitize_filename('a<b>c:d"e/f\\g|h?i*j') == "a_b_c_d_e_f_g_h_i_j"

    def test_strips_whitespace(self):
        assert sanitize_filename("  Solo Leveling ") == "Solo Leveling"


class TestFormatChapterNumber:
    """Tests for format_chapter_number."""

    def test_whole_number(self):
        assert format_chapter_number(4.0) == "4"
        assert format_chapter_number(10.0) == "10"

    def test_fraction(self):
        assert format_chapter_number(567.1) == "567.1"
        assert format_chapter_number(24.005) == "24.005"
        assert format_chapter_number(191.2) == "191.2"
        assert format_chapter_number(404.99) == "404.99"

    def test_keeps_all_decimals(self):
        assert format_chapter_number(1.1234567) == "1.1234567"

    def test_zero(self):
        assert format_chapter_number(0.0) == "0"

    def test_unparseable(self):
        assert format_chapter_number(UNPARSEABLE) == "-1"


def test_is_parsed():
    assert is_parsed(0.0)
    assert is_parsed(12.5)
    assert not is_parsed(UNPARSEABLE)


class TestChapterFilename:
    """Tests for chapter_filename."""

    def test_series_and_number(self):
        assert chapter_filename("Bleach", "Bleach 567.a Down With Snowwhite") == "Bleach ch567.1.cbz"

    def test_with_volume(self):
        assert (
            chapter_filename("Mokushiroku Alice", "Mokushiroku Alice Vol.1 Ch. 4: Misrepresentation", volume=1)
            == "Mokushiroku Alice v1 ch4.cbz"
        )

    def test_sanitizes_series_name(self):
        assert chapter_filename("Re:Zero", "Re:Zero 12") == "Re_Zero ch12.cbz"

    def test_without_series_name(self):
        assert chapter_filename("", "Chapter 7", extension=".zip") == "ch7.zip"

    def test_no_number_uses_title(self):
        assert chapter_filename("random", "Afterword: Thanks?") == "Afterword_ Thanks_.cbz"

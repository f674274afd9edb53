"""Tests for display width measurement."""

from boxtable.width import clip_end, clip_start, display_width


class TestDisplayWidth:
    """Test display_width function."""

    def test_empty_and_none(self) -> None:
        """Empty and missing text measure zero."""
        assert display_width("") == 0
        assert display_width(None) == 0

    def test_ascii(self) -> None:
        """ASCII characters are one column each."""
        assert display_width("John") == 4

    def test_wide_characters_count_double(self) -> None:
        """CJK characters occupy two columns."""
        assert display_width("张远航") == 6
        assert display_width("超级长的名字用于测试") == 20

    def test_mixed_text(self) -> None:
        """Narrow and wide characters add up."""
        assert display_width("ab王武") == 6

    def test_ellipsis_is_narrow(self) -> None:
        """The ellipsis glyph is a single column."""
        assert display_width("…") == 1

    def test_combining_mark_has_no_width(self) -> None:
        """Combining marks do not advance the cursor."""
        assert display_width("e\u0301") == 1

    def test_control_character_has_no_width(self) -> None:
        """Control characters count as zero instead of failing."""
        assert display_width("a\x07b") == 2


class TestClipping:
    """Test clip_end and clip_start helpers."""

    def test_clip_end_fits(self) -> None:
        """Text that fits is returned unchanged."""
        assert clip_end("abc", 3) == "abc"

    def test_clip_end_ascii(self) -> None:
        """Prefix is cut at the width limit."""
        assert clip_end("This is a comment", 9) == "This is a"

    def test_clip_start_ascii(self) -> None:
        """Suffix is cut at the width limit."""
        assert clip_start("This is a comment", 9) == "a comment"

    def test_clip_end_wide_boundary(self) -> None:
        """A wide character straddling the limit is dropped."""
        assert clip_end("张远航", 3) == "张"

    def test_clip_start_wide_boundary(self) -> None:
        """A wide character straddling the limit is dropped from the front."""
        assert clip_start("张远航", 5) == "远航"
        assert clip_start("张远航", 3) == "航"

    def test_zero_width(self) -> None:
        """Nothing fits in zero columns."""
        assert clip_end("abc", 0) == ""
        assert clip_start("abc", 0) == ""

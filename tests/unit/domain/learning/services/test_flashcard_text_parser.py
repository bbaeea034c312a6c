"""Tests for FlashcardTextParser domain service."""

from flashdeck.domain.learning.services.flashcard_text_parser import (
    FlashcardTextParser,
    ParsedPair,
)


class TestFlashcardTextParser:
    def test_hyphen_and_colon_separators(self) -> None:
        result = FlashcardTextParser().parse("apple - pomme\ndog: chien")
        assert result.pairs == [ParsedPair("apple", "pomme"), ParsedPair("dog", "chien")]
        assert result.failed_lines == []

    def test_sides_are_trimmed(self) -> None:
        result = FlashcardTextParser().parse("   cat   -   chat   ")
        assert result.pairs == [ParsedPair("cat", "chat")]

    def test_splits_on_first_separator_only(self) -> None:
        result = FlashcardTextParser().parse("time: 10:30\nrange - 1-5")
        assert result.pairs == [ParsedPair("time", "10:30"), ParsedPair("range", "1-5")]

    def test_blank_lines_are_ignored(self) -> None:
        result = FlashcardTextParser().parse("\n\n  \ncat - chat\n\n")
        assert len(result.pairs) == 1
        assert result.failed_count == 0

    def test_malformed_lines_are_reported(self) -> None:
        result = FlashcardTextParser().parse("cat - chat\n  no separator here \napple -\n: orphan")
        assert result.pairs == [ParsedPair("cat", "chat")]
        assert result.failed_lines == ["no separator here", "apple -", ": orphan"]
        assert result.failed_count == 3

    def test_windows_line_endings(self) -> None:
        result = FlashcardTextParser().parse("cat - chat\r\ndog - chien\r\n")
        assert result.pairs == [ParsedPair("cat", "chat"), ParsedPair("dog", "chien")]

    def test_empty_text(self) -> None:
        result = FlashcardTextParser().parse("")
        assert result.pairs == []
        assert result.failed_lines == []

    def test_parse_line(self) -> None:
        parser = FlashcardTextParser()
        assert parser.parse_line("sun - soleil") == ParsedPair("sun", "soleil")
        assert parser.parse_line("sunshine") is None

"""
Parser for bulk flashcard entry.

Turns pasted or OCR-extracted text into front/back pairs, one per line:

    apple - pomme
    dog: chien

This is a pure domain service with no infrastructure dependencies.
"""

import re
from dataclasses import dataclass, field

_SEPARATOR = re.compile(r"[-:]")


@dataclass(frozen=True)
class ParsedPair:
    front: str
    back: str


@dataclass(frozen=True)
class ParsedFlashcardText:
    """Pairs that parsed, and the raw lines that did not."""

    pairs: list[ParsedPair] = field(default_factory=list)
    failed_lines: list[str] = field(default_factory=list)

    @property
    def failed_count(self) -> int:
        return len(self.failed_lines)


class FlashcardTextParser:
    """
    Splits text into flashcard pairs.

    Each non-empty line is split on its first hyphen or colon and both sides
    are trimmed. A line without a separator, or with an empty side, is
    reported as failed instead of aborting the parse. Blank lines are ignored.
    """

    def parse_line(self, line: str) -> ParsedPair | None:
        match = _SEPARATOR.search(line)
        if match is None:
            return None
        front = line[: match.start()].strip()
        back = line[match.end() :].strip()
        if not front or not back:
            return None
        return ParsedPair(front=front, back=back)

    def parse(self, text: str) -> ParsedFlashcardText:
        pairs: list[ParsedPair] = []
        failed: list[str] = []
        for line in text.splitlines():
            if not line.strip():
                continue
            pair = self.parse_line(line)
            if pair is None:
                failed.append(line.strip())
            else:
                pairs.append(pair)
        return ParsedFlashcardText(pairs=pairs, failed_lines=failed)

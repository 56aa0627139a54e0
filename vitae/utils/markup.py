"""
Lightweight description markup.

Entry descriptions are free text with a small formatting subset:
- Lines starting with "- " or "• " are bullet items
- **text** is bold
- *text* is italic

Blank lines are dropped. Parsing never fails: anything that is not markup is
kept as literal text.
"""

import re
from dataclasses import dataclass, field
from typing import List

BULLET_PREFIXES = ("- ", "• ")

# Bold must be tried before italic so "**x**" is not read as two italics
INLINE_PATTERN = re.compile(r"\*\*(.+?)\*\*|\*(.+?)\*")

# Characters XML 1.0 does not allow (tab, newline and carriage return are fine)
XML_ILLEGAL_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass
class TextSegment:
    """A run of text with uniform inline styling."""

    text: str
    bold: bool = False
    italic: bool = False


@dataclass
class DescriptionLine:
    """
    One non-blank line of a description.

    Attributes:
        segments: Inline runs in reading order
        bullet: Whether the line was written as a bullet item
    """

    segments: List[TextSegment] = field(default_factory=list)
    bullet: bool = False

    @property
    def plaintext(self) -> str:
        return "".join(segment.text for segment in self.segments)


def parse_inline(text: str) -> List[TextSegment]:
    """Split a line into plain, bold and italic segments."""
    segments = []
    position = 0

    for match in INLINE_PATTERN.finditer(text):
        if match.start() > position:
            segments.append(TextSegment(text[position : match.start()]))
        if match.group(1) is not None:
            segments.append(TextSegment(match.group(1), bold=True))
        else:
            segments.append(TextSegment(match.group(2), italic=True))
        position = match.end()

    if position < len(text):
        segments.append(TextSegment(text[position:]))

    return segments


def parse_description(description: str) -> List[DescriptionLine]:
    """
    Parse a description into styled lines.

    Args:
        description: Raw description text (may be empty)

    Returns:
        List of DescriptionLine, one per non-blank input line, in order

    Example:
        >>> lines = parse_description("Led team\\n- Cut costs by **30%**")
        >>> lines[1].bullet, lines[1].segments[1].bold
        (True, True)
    """
    if not description:
        return []

    lines = []
    for raw_line in description.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        bullet = line.startswith(BULLET_PREFIXES)
        if bullet:
            line = line[2:].strip()

        lines.append(DescriptionLine(segments=parse_inline(line), bullet=bullet))

    return lines


def strip_control_characters(text: str) -> str:
    """
    Drop characters that cannot appear in an XML document.

    Pasted text can carry form feeds or other control characters that both
    the PDF markup parser and the DOCX writer refuse.

    Example:
        >>> strip_control_characters("Line one\\x0cpage two")
        'Line onepage two'
    """
    return XML_ILLEGAL_PATTERN.sub("", text)

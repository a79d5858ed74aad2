"""Line-level structure of a TJA file.

Implements the first three stages of the decoding pipeline:

  1. split_lines()    : raw text → numbered Line views
  2. locate_blocks()  : #START / #END balance check and marker positions
  3. split_courses()  : contiguous per-course spans cut at COURSE lines

A :class:`Line` never copies the text it describes.  It keeps a reference to
the string handed to :func:`split_lines` plus an offset and a length, so the
caller's string stays alive for as long as any line or span derived from it.
"""

from dataclasses import dataclass

from loguru import logger

from ..exceptions import ErrorKind, ParseError

BLOCK_START = "#START"
BLOCK_END = "#END"
COURSE_MARKER = "COURSE"
COMMENT_MARKER = "//"


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Line:
    """A read-only view of one line of the source text.

    ``number`` is the zero-based position of the line in the original split
    and is kept unchanged when lines are grouped into course spans.
    """

    source: str
    start: int
    length: int
    number: int

    @property
    def content(self) -> str:
        return self.source[self.start : self.start + self.length]

    def startswith(self, prefix: str) -> bool:
        """Case-sensitive prefix test, done in place against the source."""
        if len(prefix) > self.length:
            return False
        return self.source.startswith(prefix, self.start, self.start + self.length)

    def trimmed(self) -> "Line":
        """Return this line without a trailing carriage return."""
        if self.length and self.source[self.start + self.length - 1] == "\r":
            return Line(self.source, self.start, self.length - 1, self.number)
        return self

    def is_blank(self) -> bool:
        return not self.content.strip()

    def is_comment(self) -> bool:
        return self.content.lstrip().startswith(COMMENT_MARKER)

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.content


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def split_lines(text: str) -> list[Line]:
    """Split *text* on ``\\n`` into numbered line views.

    Carriage returns are left in place; use :meth:`Line.trimmed` where they
    matter.  ``n`` separators always yield ``n + 1`` lines, so empty input
    yields a single empty line.
    """
    lines: list[Line] = []
    start = 0
    while True:
        end = text.find("\n", start)
        if end == -1:
            lines.append(Line(text, start, len(text) - start, len(lines)))
            break
        lines.append(Line(text, start, end - start, len(lines)))
        start = end + 1

    logger.debug("Split text into {} lines", len(lines))
    return lines


def locate_blocks(lines: list[Line]) -> list[int]:
    """Check that ``#START`` / ``#END`` markers are balanced and not nested.

    Markers are recognised by prefix, so ``#START P1`` counts as a start.

    Args:
        lines: The full line sequence of a chart.

    Returns:
        Line numbers of every start and end marker, in scan order.

    Raises:
        ParseError: ``unclosed_block`` at a nested start or, for a block
            still open at end of input, at the last line; ``unopened_block``
            at an end with no open block.
    """
    positions: list[int] = []
    opened = False

    for line in lines:
        if line.startswith(BLOCK_START):
            if opened:
                raise ParseError(ErrorKind.UNCLOSED_BLOCK, line.number)
            opened = True
            positions.append(line.number)

        if line.startswith(BLOCK_END):
            if not opened:
                raise ParseError(ErrorKind.UNOPENED_BLOCK, line.number)
            opened = False
            positions.append(line.number)

    if opened:
        raise ParseError(ErrorKind.UNCLOSED_BLOCK, len(lines) - 1)

    logger.debug("Located block markers at {}", positions)
    return positions


def split_courses(lines: list[Line]) -> list[list[Line]]:
    """Partition *lines* into contiguous spans, one per course.

    Every line starting with ``COURSE`` opens a new span and is its first
    line.  A ``COURSE`` line at the very top does not leave an empty span in
    front of it, and text with no ``COURSE`` lines comes back as one span.
    Concatenating the spans gives back *lines* unchanged.
    """
    spans: list[list[Line]] = []
    start = 0

    for i, line in enumerate(lines):
        if line.startswith(COURSE_MARKER) and i > start:
            spans.append(lines[start:i])
            start = i

    if start < len(lines):
        spans.append(lines[start:])

    logger.debug("Split {} lines into {} course spans", len(lines), len(spans))
    return spans

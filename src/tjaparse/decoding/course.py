"""Per-course line routing.

Every line of a course span goes to exactly one place:

  - ``#START`` .. ``#END``          → a :class:`~tjaparse.models.Block`; the
                                      lines in between are kept undecoded
  - blank lines, ``//`` comments    → skipped
  - other ``#COMMAND`` lines        → ``Course.commands``
  - COURSE / LEVEL / BALLOON /
    SCOREINIT / SCOREDIFF headers   → typed ``Course`` fields
  - any other ``NAME:VALUE`` line   → ``Course.headers`` via the header
                                      aggregator

A leading ``#`` is what separates a command from a header.  A trailing
``\\r`` is dropped before routing, so CRLF files behave like LF files.
"""

from loguru import logger

from ..exceptions import ErrorKind, ParseError
from ..models import Block, Course, CourseKind
from .fields import parse_command, parse_header, to_int
from .headers import apply_header
from .lines import BLOCK_END, BLOCK_START, Line

_COURSE_KINDS = list(CourseKind)
_COURSE_BY_NAME = {kind.value: kind for kind in CourseKind}
_COURSE_BY_NAME["ura"] = CourseKind.EDIT

_INT_COURSE_HEADERS = {"LEVEL": "level", "SCOREINIT": "scoreinit", "SCOREDIFF": "scorediff"}


def course_kind(value: str) -> CourseKind | None:
    """Map a ``COURSE`` value (``Oni``, ``oni``, ``3``) to its kind.

    Returns ``None`` when the value names no known course.
    """
    key = value.strip().lower()
    if key.isascii() and key.isdigit() and int(key) < len(_COURSE_KINDS):
        return _COURSE_KINDS[int(key)]
    return _COURSE_BY_NAME.get(key)


def parse_balloon(value: str, line: int) -> list[int]:
    """Parse a comma separated ``BALLOON`` hit-count list, skipping empty items."""
    return [to_int(item, line) for item in value.split(",") if item.strip()]


def build_course(span: list[Line], defaults: Course | None = None) -> Course:
    """Route the lines of one course span into a :class:`~tjaparse.models.Course`.

    *defaults* is the common region before the first ``COURSE`` line; its
    level, balloon, score and command values seed the new course and are
    overridden by whatever the span sets itself.

    Raises:
        ParseError: the first malformed header, command or number in the
            span; ``unopened_block`` / ``unclosed_block`` when a block
            crosses a ``COURSE`` line.
    """
    course = Course(first_line=span[0].number)
    if defaults is not None:
        course.level = defaults.level
        course.balloon = list(defaults.balloon)
        course.scoreinit = defaults.scoreinit
        course.scorediff = defaults.scorediff
        course.commands = list(defaults.commands)
    block: Block | None = None

    for raw in span:
        line = raw.trimmed()

        if block is not None:
            if line.startswith(BLOCK_END):
                block.end_line = line.number
                course.blocks.append(block)
                block = None
            else:
                block.body.append(raw)
            continue

        if line.startswith(BLOCK_START):
            command = parse_command(line)
            block = Block(start_line=line.number, end_line=line.number, player=command.value or None)
            continue

        if line.startswith(BLOCK_END):
            raise ParseError(ErrorKind.UNOPENED_BLOCK, line.number)

        if line.is_blank() or line.is_comment():
            continue

        if line.startswith("#"):
            course.commands.append(parse_command(line))
            continue

        header = parse_header(line)
        if header.name == "COURSE":
            kind = course_kind(header.value)
            if kind is None:
                logger.warning("Unknown course {!r} at line {}", header.value, line.number)
                course.headers.extra["COURSE"] = header.value
            else:
                course.kind = kind
        elif header.name == "BALLOON":
            course.balloon = parse_balloon(header.value, line.number)
        elif header.name in _INT_COURSE_HEADERS:
            setattr(course, _INT_COURSE_HEADERS[header.name], to_int(header.value, line.number))
        else:
            apply_header(course.headers, header, line.number)

    if block is not None:
        raise ParseError(ErrorKind.UNCLOSED_BLOCK, span[-1].number)

    logger.debug(
        "Built {} course from line {} ({} blocks, {} commands)",
        course.kind.value,
        course.first_line,
        len(course.blocks),
        len(course.commands),
    )
    return course

"""Top-level TJA parsing.

Usage::

    from tjaparse import parse
    chart = parse(Path("song.tja").read_text(encoding="utf-8-sig"))
    chart.headers.title
"""

from loguru import logger

from .decoding.course import build_course
from .decoding.lines import COURSE_MARKER, locate_blocks, split_courses, split_lines
from .models import Chart, Course


def _has_course_fields(course: Course) -> bool:
    return bool(
        course.level is not None
        or course.balloon
        or course.scoreinit is not None
        or course.scorediff is not None
        or course.commands
    )


def parse(text: str) -> Chart:
    """Parse a decoded TJA file into a :class:`~tjaparse.models.Chart`.

    The lines before the first ``COURSE`` line are the common region: its
    headers become ``Chart.headers`` and its LEVEL, BALLOON, SCOREINIT,
    SCOREDIFF and command lines are defaults for every course that follows.
    The region is a course of its own when it holds ``#START`` blocks, as in
    files with no ``COURSE`` line at all, or when no ``COURSE`` line follows
    and it sets any course field.  Note data inside blocks is kept as
    undecoded line views.

    Parsing is all-or-nothing: the first defect raises and no partial chart
    is returned.

    Raises:
        ParseError: the first structural or syntactic error, in line order.
    """
    lines = split_lines(text)
    locate_blocks(lines)

    spans = split_courses(lines)
    chart = Chart()
    common: Course | None = None

    if not spans[0][0].startswith(COURSE_MARKER):
        common = build_course(spans.pop(0))
        chart.headers = common.headers
        if common.blocks or (not spans and _has_course_fields(common)):
            chart.courses.append(common)

    for span in spans:
        chart.courses.append(build_course(span, common))

    logger.debug("Parsed {!r} with {} courses", chart.headers.title, len(chart.courses))
    return chart

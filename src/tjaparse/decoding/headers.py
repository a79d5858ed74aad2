"""Header aggregation.

Folds ``NAME:VALUE`` lines into a :class:`~tjaparse.models.ChartHeaders`
record.  Recognised names are routed to typed fields; everything else lands
in ``ChartHeaders.extra`` keyed by its verbatim name (last write wins).
"""

from ..models import ChartHeaders
from .fields import Field, parse_header, to_float
from .genre import normalize_genre
from .lines import Line

_GENRE_HEADERS = {"GENRE": "genre", "SUBGENRE": "subgenre"}
_TEXT_HEADERS = {"WAVE": "wave", "TITLE": "title", "SUBTITLE": "subtitle"}
_FLOAT_HEADERS = {"BPM": "bpm", "OFFSET": "offset", "DEMOSTART": "demostart"}


def apply_header(headers: ChartHeaders, header: Field, line: int) -> None:
    """Store one parsed header on *headers*.

    Raises:
        ParseError: ``float_convert_failed`` at *line* for a non-numeric
            ``BPM``, ``OFFSET`` or ``DEMOSTART``.
    """
    name, value = header.name, header.value
    if name in _GENRE_HEADERS:
        setattr(headers, _GENRE_HEADERS[name], normalize_genre(value))
    elif name in _TEXT_HEADERS:
        setattr(headers, _TEXT_HEADERS[name], value)
    elif name in _FLOAT_HEADERS:
        setattr(headers, _FLOAT_HEADERS[name], to_float(value, line))
    else:
        headers.extra[name] = value


def aggregate_headers(lines: list[Line], headers: ChartHeaders | None = None) -> ChartHeaders:
    """Parse every line in *lines* as a header and fold it into a record.

    There is no skip-and-continue: the first malformed line, in line order,
    aborts the whole call.

    Args:
        lines:   Header lines only.
        headers: Record to update in place; a fresh one when omitted.

    Returns:
        The populated headers record.

    Raises:
        ParseError: from :func:`~tjaparse.decoding.fields.parse_header` or
            from float conversion, carrying the offending line number.
    """
    if headers is None:
        headers = ChartHeaders()
    for line in lines:
        apply_header(headers, parse_header(line), line.number)
    return headers

"""Render a headers record back to TJA header text.

Header → line mapping
---------------------

+------------------------------+------------------------------------------+
| Field                        | Output                                   |
+==============================+==========================================+
| ``title``, ``subtitle``,     | ``TITLE:<value>`` etc., omitted when     |
| ``wave``                     | empty                                    |
+------------------------------+------------------------------------------+
| ``genre``, ``subgenre``      | ``GENRE:<canonical name>``, omitted when |
|                              | ``Genre.UNKNOWN``                        |
+------------------------------+------------------------------------------+
| ``bpm``, ``offset``,         | ``BPM:<number>``, always emitted         |
| ``demostart``                |                                          |
+------------------------------+------------------------------------------+
| ``extra``                    | one ``NAME:VALUE`` line per entry, in    |
|                              | insertion order                          |
+------------------------------+------------------------------------------+

Usage::

    from tjaparse.render import render_headers
    Path("headers.tja").write_text(render_headers(chart.headers), encoding="utf-8")
"""

from .models import ChartHeaders, Genre

_TEXT_FIELDS = (("TITLE", "title"), ("SUBTITLE", "subtitle"))
_GENRE_FIELDS = (("GENRE", "genre"), ("SUBGENRE", "subgenre"))
_NUMBER_FIELDS = (("BPM", "bpm"), ("OFFSET", "offset"), ("DEMOSTART", "demostart"))


def render_headers(headers: ChartHeaders) -> str:
    """Return TJA header text for *headers*.

    The result ends with a single newline and uses ``\\n`` line endings.
    Re-parsing it yields an equal record.
    """
    parts: list[str] = []

    for name, attr in _TEXT_FIELDS:
        value = getattr(headers, attr)
        if value:
            parts.append(f"{name}:{value}")

    for name, attr in _GENRE_FIELDS:
        genre = getattr(headers, attr)
        if genre is not Genre.UNKNOWN:
            parts.append(f"{name}:{genre.value}")

    if headers.wave:
        parts.append(f"WAVE:{headers.wave}")

    for name, attr in _NUMBER_FIELDS:
        parts.append(f"{name}:{_format_number(getattr(headers, attr))}")

    parts.extend(f"{name}:{value}" for name, value in headers.extra.items())

    return "\n".join(parts) + "\n"


def _format_number(value: float) -> str:
    """Shortest text that reads back as *value*: ``120.0`` → ``120``, ``-1.5`` → ``-1.5``."""
    return repr(value).removesuffix(".0")

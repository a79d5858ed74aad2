"""Single-line field parsers and typed value conversion.

Two sibling parsers turn one :class:`~tjaparse.decoding.lines.Line` into a
:class:`Field`:

  parse_header()   : ``NAME:VALUE``
  parse_command()  : ``#COMMAND`` or ``#COMMAND ARG``

Both return names and values verbatim (no trimming, no case folding), so
callers must compare against the exact spelling they expect.

to_int() / to_float() convert a value with permissive-prefix semantics: any
leading whitespace is skipped, the longest numeric prefix is converted and
whatever follows it is ignored (``"120 bpm"`` → 120).
"""

import math
import re
from dataclasses import dataclass

from ..exceptions import ErrorKind, ParseError
from .lines import Line

# Commands that are complete without an argument.
ZERO_ARGUMENT_COMMANDS = frozenset(
    {"START", "END", "GOGOSTART", "GOGOEND", "BARLINEON", "BARLINEOFF"}
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# ASCII only: int()/float() would otherwise accept full-width digits.
_INT_PREFIX_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX_RE = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


@dataclass(frozen=True)
class Field:
    """A decoded ``(name, value)`` pair.

    ``value`` is ``None`` only for a command that takes no argument.
    """

    name: str
    value: str | None = None


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def parse_header(line: Line) -> Field:
    """Parse a ``NAME:VALUE`` header line.

    The line is split at its first colon, so the value may itself contain
    colons.

    Raises:
        ParseError: ``missing_header_format`` when there is no colon or no
            name; ``empty_header_value`` when nothing follows the colon.
    """
    name, sep, value = line.content.partition(":")
    if not sep or not name:
        raise ParseError(ErrorKind.MISSING_HEADER_FORMAT, line.number)
    if not value:
        raise ParseError(ErrorKind.EMPTY_HEADER_VALUE, line.number)
    return Field(name, value)


def parse_command(line: Line) -> Field:
    """Parse a ``#COMMAND [ARG]`` line.

    The text after ``#`` is split once on a single space.  A command with no
    argument is only accepted when it is in :data:`ZERO_ARGUMENT_COMMANDS`.

    Raises:
        ParseError: ``missing_command_format`` when the line does not start
            with ``#`` or names no command; ``empty_command_value`` when an
            argument-taking command has none.
    """
    content = line.content
    if not content.startswith("#"):
        raise ParseError(ErrorKind.MISSING_COMMAND_FORMAT, line.number)

    parts = content[1:].split(" ", 1)
    name = parts[0]
    if not name:
        raise ParseError(ErrorKind.MISSING_COMMAND_FORMAT, line.number)

    if len(parts) == 2:
        return Field(name, parts[1])
    if name in ZERO_ARGUMENT_COMMANDS:
        return Field(name)
    raise ParseError(ErrorKind.EMPTY_COMMAND_VALUE, line.number)


# ---------------------------------------------------------------------------
# Typed conversion
# ---------------------------------------------------------------------------


def to_int(value: str, line: int) -> int:
    """Convert the leading base-10 integer of *value*.

    Raises:
        ParseError: ``int_convert_failed`` at *line* when *value* has no
            integer prefix or it does not fit in a signed 32-bit int.
    """
    m = _INT_PREFIX_RE.match(value)
    if not m:
        raise ParseError(ErrorKind.INT_CONVERT_FAILED, line)
    try:
        result = int(m.group(1))
    except ValueError as exc:
        raise ParseError(ErrorKind.INT_CONVERT_FAILED, line) from exc
    if not INT_MIN <= result <= INT_MAX:
        raise ParseError(ErrorKind.INT_CONVERT_FAILED, line)
    return result


def to_float(value: str, line: int) -> float:
    """Convert the leading decimal number of *value*.

    Raises:
        ParseError: ``float_convert_failed`` at *line* when *value* has no
            numeric prefix or the number overflows.
    """
    m = _FLOAT_PREFIX_RE.match(value)
    if not m:
        raise ParseError(ErrorKind.FLOAT_CONVERT_FAILED, line)
    try:
        result = float(m.group(1))
    except (ValueError, OverflowError) as exc:
        raise ParseError(ErrorKind.FLOAT_CONVERT_FAILED, line) from exc
    if math.isinf(result):
        raise ParseError(ErrorKind.FLOAT_CONVERT_FAILED, line)
    return result

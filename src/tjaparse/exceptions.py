from enum import Enum


class ErrorKind(Enum):
    """Every way a chart can fail to decode."""

    UNOPENED_BLOCK = "unopened_block"
    UNCLOSED_BLOCK = "unclosed_block"
    EMPTY_HEADER_VALUE = "empty_header_value"
    MISSING_HEADER_FORMAT = "missing_header_format"
    EMPTY_COMMAND_VALUE = "empty_command_value"
    MISSING_COMMAND_FORMAT = "missing_command_format"
    INT_CONVERT_FAILED = "int_convert_failed"
    FLOAT_CONVERT_FAILED = "float_convert_failed"
    NO_IMPLEMENTED = "no_implemented"


class TjaError(Exception):
    """Base exception for tjaparse."""


class ParseError(TjaError):
    """Raised at the first structural or syntactic defect in a chart.

    Errors are line-granular: ``column`` is always 0.
    """

    def __init__(self, kind: ErrorKind, line: int, column: int = 0):
        self.kind = kind
        self.line = line
        self.column = column
        super().__init__(f"{kind.value} at line {line}, column {column}")


class DecodeError(TjaError):
    """Raised when a chart file cannot be decoded to text."""

    def __init__(self, path: str, encodings: tuple[str, ...]):
        self.path = path
        self.encodings = encodings
        super().__init__(f"Could not decode {path} as {' or '.join(encodings)}")

"""Parser for TJA rhythm-game chart files."""

from loguru import logger

from .exceptions import ErrorKind, ParseError, TjaError
from .models import Block, Chart, ChartHeaders, Course, CourseKind, Genre
from .parser import parse

MAJOR = 1
MINOR = 0
PATCH = 0
VERSION = (MAJOR, MINOR, PATCH)
__version__ = f"{MAJOR}.{MINOR}.{PATCH}"

# Silent unless an application opts in with logger.enable("tjaparse").
logger.disable("tjaparse")

__all__ = [
    "Block",
    "Chart",
    "ChartHeaders",
    "Course",
    "CourseKind",
    "ErrorKind",
    "Genre",
    "ParseError",
    "TjaError",
    "VERSION",
    "parse",
]

from dataclasses import dataclass, field
from enum import Enum

from .decoding.fields import Field
from .decoding.lines import Line


class Genre(Enum):
    POP = "pop"
    KIDS = "kids"
    NAMCO = "namco"
    CLASSIC = "classic"
    VARIETY = "variety"
    GAME = "game"
    VOCALOID = "vocaloid"
    ANIME = "anime"
    UNKNOWN = "unknown"


class CourseKind(Enum):
    """Difficulty of a course, in the order of the numeric ``COURSE:<n>`` form."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    ONI = "oni"
    EDIT = "edit"  # ura oni
    TOWER = "tower"
    DAN = "dan"


@dataclass
class ChartHeaders:
    """Song metadata, either file-wide or specific to one course."""

    genre: Genre = Genre.UNKNOWN
    subgenre: Genre = Genre.UNKNOWN
    wave: str = ""  # audio file name, relative to the chart
    title: str = ""
    subtitle: str = ""
    bpm: float = 0.0
    offset: float = 0.0
    demostart: float = 0.0
    extra: dict[str, str] = field(default_factory=dict)  # unrecognized NAME -> raw VALUE


@dataclass
class Block:
    """One ``#START`` .. ``#END`` region of a course.

    ``body`` holds the lines strictly between the two markers. They are views
    into the parsed text and are not decoded into notes.
    """

    start_line: int
    end_line: int
    player: str | None = None  # "P1" / "P2" for double-play charts
    body: list[Line] = field(default_factory=list)


@dataclass
class Course:
    """A single difficulty of a chart."""

    kind: CourseKind = CourseKind.ONI
    level: int | None = None
    balloon: list[int] = field(default_factory=list)
    scoreinit: int | None = None
    scorediff: int | None = None
    headers: ChartHeaders = field(default_factory=ChartHeaders)
    commands: list[Field] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)
    first_line: int = 0


@dataclass
class Chart:
    """Canonical representation of a parsed TJA file."""

    headers: ChartHeaders = field(default_factory=ChartHeaders)
    courses: list[Course] = field(default_factory=list)
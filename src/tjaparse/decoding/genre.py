"""Genre normalization.

TJA files spell the same genre many ways: the English/romanized name, the
Japanese category name used by the game's song select, and assorted
community variants.  Each spelling below is compared by exact equality; the
tables are disjoint, so lookup order does not matter.
"""

from ..models import Genre

_GENRE_SPELLINGS: dict[Genre, tuple[str, ...]] = {
    Genre.POP: ("pop", "j-pop", "J-POP", "ポップス", "ポップ"),
    Genre.KIDS: ("kids", "キッズ", "どうよう", "童謡"),
    Genre.NAMCO: ("namco", "namco original", "ナムコオリジナル", "ナムコ"),
    Genre.CLASSIC: ("classic", "classical", "クラシック"),
    Genre.VARIETY: ("variety", "バラエティ", "バラエティー"),
    Genre.GAME: ("game", "game music", "ゲームミュージック", "ゲーム"),
    Genre.VOCALOID: ("vocaloid", "VOCALOID", "ボーカロイド", "ボーカロイド曲"),
    Genre.ANIME: ("anime", "アニメ"),
}

GENRE_LOOKUP: dict[str, Genre] = {
    spelling: genre for genre, spellings in _GENRE_SPELLINGS.items() for spelling in spellings
}


def normalize_genre(value: str) -> Genre:
    """Return the canonical :class:`~tjaparse.models.Genre` for *value*.

    Never fails: unrecognised spellings give ``Genre.UNKNOWN``.
    """
    return GENRE_LOOKUP.get(value, Genre.UNKNOWN)

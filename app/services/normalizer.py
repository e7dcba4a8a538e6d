import math
import re
from typing import Any

from app.models.movie import NormalizedMovie, OmdbRecord

NOT_AVAILABLE = "N/A"
DEFAULT_OVERVIEW = "No description available."

_GROUPING_CHARS = re.compile(r"[,\s_']")


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value or value == NOT_AVAILABLE:
        return None
    return value


def _parse_rating(value: str | None) -> float | None:
    cleaned = _clean(value)
    if cleaned is None:
        return None
    # tolerate "8.8/10"
    cleaned = cleaned.split("/", 1)[0]
    try:
        rating = float(cleaned)
    except ValueError:
        return None
    return rating if math.isfinite(rating) else None


def _parse_votes(value: str | None) -> int | None:
    cleaned = _clean(value)
    if cleaned is None:
        return None
    digits = _GROUPING_CHARS.sub("", cleaned)
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def normalize_omdb_movie(record: OmdbRecord | dict[str, Any]) -> NormalizedMovie:
    if not isinstance(record, OmdbRecord):
        record = OmdbRecord.model_validate(record)

    title = _clean(record.title)
    if title is None:
        raise ValueError("OMDb record has no title")

    poster = _clean(record.poster)
    return NormalizedMovie(
        id=_clean(record.imdb_id) or title,
        title=title,
        overview=_clean(record.plot) or DEFAULT_OVERVIEW,
        poster_url=poster,
        backdrop_url=poster,
        year=_clean(record.year),
        rating=_parse_rating(record.imdb_rating),
        vote_count=_parse_votes(record.imdb_votes),
        genre=_clean(record.genre) or "",
        runtime=_clean(record.runtime),
        director=_clean(record.director),
        actors=_clean(record.actors),
    )

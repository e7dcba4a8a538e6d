from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OmdbRecord(BaseModel):
    """Raw OMDb payload. Every field is optional and may hold the "N/A" sentinel."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = Field(default=None, alias="Title")
    plot: str | None = Field(default=None, alias="Plot")
    poster: str | None = Field(default=None, alias="Poster")
    year: str | None = Field(default=None, alias="Year")
    imdb_rating: str | None = Field(default=None, alias="imdbRating")
    imdb_votes: str | None = Field(default=None, alias="imdbVotes")
    genre: str | None = Field(default=None, alias="Genre")
    runtime: str | None = Field(default=None, alias="Runtime")
    director: str | None = Field(default=None, alias="Director")
    actors: str | None = Field(default=None, alias="Actors")
    imdb_id: str | None = Field(default=None, alias="imdbID")


class SearchHit(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = Field(default=None, alias="Title")
    imdb_id: str | None = Field(default=None, alias="imdbID")


class SearchResult(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    hits: list[SearchHit] = Field(default_factory=list, alias="Search")
    total_results: str | None = Field(default=None, alias="totalResults")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NormalizedMovie(CamelModel):
    id: str
    title: str
    overview: str = "No description available."
    poster_url: str | None = None
    backdrop_url: str | None = None
    year: str | None = None
    rating: float | None = None
    vote_count: int | None = None
    genre: str = ""
    runtime: str | None = None
    director: str | None = None
    actors: str | None = None


class MoviePage(CamelModel):
    success: bool = True
    page: int = 1
    total_pages: int = 1
    total_results: int = 0
    movies: list[NormalizedMovie] = Field(default_factory=list)


class MovieDetailResponse(CamelModel):
    success: bool = True
    movie: NormalizedMovie

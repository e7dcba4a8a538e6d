from dataclasses import dataclass, field

NOW_PLAYING_SIZE = 8

# OMDb has no category endpoints, so each named list is a fixed set of titles.
POPULAR_TITLES = (
    "Inception",
    "The Dark Knight",
    "Interstellar",
    "Avengers Endgame",
    "Avatar",
    "Titanic",
    "The Matrix",
    "Forrest Gump",
    "Pulp Fiction",
    "The Shawshank Redemption",
    "Fight Club",
    "Goodfellas",
    "The Godfather",
    "The Lord of the Rings",
    "Inception",
    "Django Unchained",
)

TOP_RATED_TITLES = (
    "The Shawshank Redemption",
    "The Godfather",
    "The Dark Knight",
    "12 Angry Men",
    "Schindler's List",
    "The Lord of the Rings",
    "Pulp Fiction",
    "Inception",
    "Fight Club",
    "Forrest Gump",
    "The Matrix",
    "Goodfellas",
    "One Flew Over the Cuckoo's Nest",
    "Seven",
    "Se7en",
    "The Silence of the Lambs",
)

UPCOMING_TITLES = (
    "Dune Part Two",
    "Deadpool 3",
    "Joker 2",
    "Gladiator 2",
    "Avatar 3",
    "Mission Impossible",
    "Fast X",
    "The Marvels",
    "Aquaman 2",
    "Wonka",
    "The Hunger Games",
    "Napoleon",
    "Wish",
    "Migration",
    "Anyone But You",
    "The Color Purple",
)


@dataclass(frozen=True)
class CatalogLists:
    popular: tuple[str, ...] = field(default=POPULAR_TITLES)
    top_rated: tuple[str, ...] = field(default=TOP_RATED_TITLES)
    upcoming: tuple[str, ...] = field(default=UPCOMING_TITLES)
    now_playing_size: int = NOW_PLAYING_SIZE

    @property
    def now_playing(self) -> tuple[str, ...]:
        return self.popular[: self.now_playing_size]

    def titles_for(self, name: str) -> tuple[str, ...]:
        if name == "popular":
            return self.popular
        if name == "top_rated":
            return self.top_rated
        if name == "upcoming":
            return self.upcoming
        if name == "now_playing":
            return self.now_playing
        raise KeyError(name)

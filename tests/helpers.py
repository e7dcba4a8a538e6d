from typing import Any

import httpx


def omdb_movie(title: str, imdb_id: str, **overrides: Any) -> dict[str, Any]:
    record = {
        "Title": title,
        "Year": "2010",
        "Runtime": "148 min",
        "Genre": "Action, Sci-Fi",
        "Director": "Christopher Nolan",
        "Actors": "Leonardo DiCaprio, Elliot Page",
        "Plot": f"Plot of {title}.",
        "Poster": f"https://img.example/{imdb_id}.jpg",
        "imdbRating": "8.8",
        "imdbVotes": "2,512,401",
        "imdbID": imdb_id,
        "Type": "movie",
        "Response": "True",
    }
    record.update(overrides)
    return record


class FakeOmdb:
    """In-memory stand-in for the OMDb HTTP API."""

    def __init__(self) -> None:
        self.by_title: dict[str, dict[str, Any]] = {}
        self.by_id: dict[str, dict[str, Any]] = {}
        self.search_results: dict[str, dict[str, Any]] = {}
        self.broken: set[str] = set()
        self.calls: list[dict[str, str]] = []

    def add(self, record: dict[str, Any]) -> dict[str, Any]:
        self.by_title[record["Title"]] = record
        self.by_id[record["imdbID"]] = record
        return record

    def handler(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.calls.append(params)
        key = params.get("t") or params.get("i") or params.get("s")
        if key in self.broken:
            raise httpx.ConnectError("connection refused", request=request)
        if "s" in params:
            payload = self.search_results.get(params["s"], {"Response": "False", "Error": "Movie not found!"})
        elif "t" in params:
            payload = self.by_title.get(params["t"], {"Response": "False", "Error": "Movie not found!"})
        else:
            payload = self.by_id.get(params.get("i", ""), {"Response": "False", "Error": "Incorrect IMDb ID."})
        return httpx.Response(200, json=payload)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)



def asgi_client(app) -> httpx.AsyncClient:
    # ASGITransport does not run the lifespan; callers wire app.state.container themselves
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")

from fastapi import APIRouter, Depends

from app.api.deps import get_container
from app.core.container import AppContainer
from app.models.movie import MovieDetailResponse, MoviePage

router = APIRouter(prefix="/api/movies", tags=["movies"])


def parse_page(raw: str | None) -> int:
    # junk or non-positive pages fall back to the first page
    try:
        page = int(raw or 1)
    except ValueError:
        return 1
    return page if page >= 1 else 1


@router.get("/popular", response_model=MoviePage)
async def popular(container: AppContainer = Depends(get_container)) -> MoviePage:
    return await container.catalog_service.list_movies("popular")


@router.get("/top_rated", response_model=MoviePage)
async def top_rated(container: AppContainer = Depends(get_container)) -> MoviePage:
    return await container.catalog_service.list_movies("top_rated")


@router.get("/upcoming", response_model=MoviePage)
async def upcoming(container: AppContainer = Depends(get_container)) -> MoviePage:
    return await container.catalog_service.list_movies("upcoming")


@router.get("/now_playing", response_model=MoviePage)
async def now_playing(container: AppContainer = Depends(get_container)) -> MoviePage:
    return await container.catalog_service.list_movies("now_playing")


@router.get("/search", response_model=MoviePage)
async def search(
    query: str | None = None,
    page: str | None = None,
    container: AppContainer = Depends(get_container),
) -> MoviePage:
    return await container.catalog_service.search(query, parse_page(page))


# must stay last so the fixed paths above win
@router.get("/{movie_id}", response_model=MovieDetailResponse)
async def movie_detail(movie_id: str, container: AppContainer = Depends(get_container)) -> MovieDetailResponse:
    return await container.catalog_service.detail(movie_id)

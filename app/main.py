from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.auth import router as auth_router
from app.api.health import router as health_router
from app.api.movies import router as movies_router
from app.core.container import AppContainer
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging
from app.core.middleware import install_middleware
from app.core.settings import Settings, get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    configure_logging(settings.log_level)
    container = AppContainer(settings)
    try:
        await container.startup()
    except Exception:
        await container.close()
        raise
    app.state.container = container
    yield
    await container.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings

    install_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(movies_router)
    return app


app = create_app()

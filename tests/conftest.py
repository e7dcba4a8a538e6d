import pytest
import pytest_asyncio

from app.core.container import AppContainer
from app.core.settings import Settings
from app.main import create_app
from tests.helpers import FakeOmdb, asgi_client


@pytest.fixture
def fake_omdb() -> FakeOmdb:
    return FakeOmdb()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        omdb_api_key="test-key",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}",
        password_hash_rounds=4,
    )


@pytest_asyncio.fixture
async def container(settings: Settings, fake_omdb: FakeOmdb):
    container = AppContainer(settings, omdb_transport=fake_omdb.transport())
    await container.startup()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(settings: Settings, container: AppContainer):
    app = create_app(settings)
    app.state.container = container
    async with asgi_client(app) as http_client:
        yield http_client

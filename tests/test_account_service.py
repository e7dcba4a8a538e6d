import pytest
import pytest_asyncio

from app.core.errors import AuthError, ConflictError, ValidationError
from app.core.security import hash_password, verify_password
from app.db.accounts import AccountRepository, DuplicateEmail
from app.db.database import Database
from app.models.account import LoginRequest, RegisterRequest
from app.services.account_service import AccountService


class _RecordingRepository:
    """Records every store call so tests can assert none happened."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def email_exists(self, email: str) -> bool:
        self.calls.append("email_exists")
        return False

    async def create(self, **kwargs) -> int:
        self.calls.append("create")
        return 1


@pytest_asyncio.fixture
async def repository(settings):
    database = Database(settings)
    await database.create_schema()
    yield AccountRepository(database.engine)
    await database.close()


def _register(**overrides) -> RegisterRequest:
    data = {"username": "neo", "email": "neo@matrix.io", "password": "redpill", "phone": None}
    data.update(overrides)
    return RegisterRequest(**data)


@pytest.mark.asyncio
async def test_register_then_duplicate_is_conflict(repository) -> None:
    service = AccountService(repository, hash_rounds=4)

    created = await service.register(_register())
    assert isinstance(created.user_id, int)
    assert await repository.count() == 1

    with pytest.raises(ConflictError, match="Email already registered"):
        await service.register(_register(username="other"))
    assert await repository.count() == 1


@pytest.mark.asyncio
async def test_password_is_stored_hashed(repository) -> None:
    await AccountService(repository, hash_rounds=4).register(_register())

    row = await repository.get_by_email("neo@matrix.io")
    assert row["password_hash"] != "redpill"
    assert verify_password("redpill", row["password_hash"])
    assert row["created_at"] is not None


@pytest.mark.asyncio
async def test_unique_index_rejects_racing_insert(repository) -> None:
    await repository.create("neo", "neo@matrix.io", hash_password("redpill", rounds=4))

    with pytest.raises(DuplicateEmail):
        await repository.create("smith", "neo@matrix.io", hash_password("bluepill", rounds=4))
    assert await repository.count() == 1


@pytest.mark.asyncio
async def test_race_past_existence_check_is_still_conflict(repository, monkeypatch) -> None:
    await repository.create("neo", "neo@matrix.io", hash_password("redpill", rounds=4))

    async def _stale_check(email: str) -> bool:
        return False

    monkeypatch.setattr(repository, "email_exists", _stale_check)

    with pytest.raises(ConflictError):
        await AccountService(repository, hash_rounds=4).register(_register())
    assert await repository.count() == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"username": None}, "Username, email, and password are required"),
        ({"email": ""}, "Username, email, and password are required"),
        ({"password": None}, "Username, email, and password are required"),
        ({"email": "not-an-email"}, "Please provide a valid email address"),
        ({"email": "a b@c.io"}, "Please provide a valid email address"),
        ({"email": "neo@matrix.io\n"}, "Please provide a valid email address"),
        ({"password": "abc12"}, "Password must be at least 6 characters long"),
    ],
)
async def test_register_validation_precedes_store_access(overrides, message) -> None:
    repository = _RecordingRepository()

    with pytest.raises(ValidationError, match=message):
        await AccountService(repository, hash_rounds=4).register(_register(**overrides))
    assert repository.calls == []


@pytest.mark.asyncio
async def test_login_success_omits_hash(repository) -> None:
    service = AccountService(repository, hash_rounds=4)
    created = await service.register(_register(phone="555-0100"))

    result = await service.login(LoginRequest(email="neo@matrix.io", password="redpill"))

    assert result.user.id == created.user_id
    assert result.user.username == "neo"
    assert result.user.phone == "555-0100"
    assert "password_hash" not in result.model_dump()["user"]


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_are_indistinguishable(repository) -> None:
    service = AccountService(repository, hash_rounds=4)
    await service.register(_register())

    with pytest.raises(AuthError) as wrong_password:
        await service.login(LoginRequest(email="neo@matrix.io", password="bluepill"))
    with pytest.raises(AuthError) as unknown_email:
        await service.login(LoginRequest(email="trinity@matrix.io", password="redpill"))

    assert wrong_password.value.status_code == unknown_email.value.status_code == 401
    assert wrong_password.value.message == unknown_email.value.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_requires_both_fields() -> None:
    with pytest.raises(ValidationError, match="Email and password are required"):
        await AccountService(_RecordingRepository()).login(LoginRequest(email="neo@matrix.io"))


def test_verify_password_rejects_non_bcrypt_value() -> None:
    assert verify_password("redpill", "plaintext") is False

import logging
import re

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import APIError, AuthError, ConflictError, ValidationError
from app.core.security import hash_password_async, verify_password_async
from app.db.accounts import AccountRepository, DuplicateEmail
from app.models.account import AccountPublic, LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid email or password"


class AccountService:
    def __init__(self, repository: AccountRepository, hash_rounds: int = 10):
        self.repository = repository
        self.hash_rounds = hash_rounds

    @staticmethod
    def validate_registration(payload: RegisterRequest) -> None:
        if not payload.username or not payload.email or not payload.password:
            raise ValidationError("Username, email, and password are required")
        if not EMAIL_PATTERN.fullmatch(payload.email):
            raise ValidationError("Please provide a valid email address")
        if len(payload.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    async def register(self, payload: RegisterRequest) -> RegisterResponse:
        self.validate_registration(payload)

        try:
            if await self.repository.email_exists(payload.email):
                raise ConflictError("Email already registered")

            password_hash = await hash_password_async(payload.password, self.hash_rounds)
            user_id = await self.repository.create(
                username=payload.username,
                email=payload.email,
                password_hash=password_hash,
                phone=payload.phone or None,
            )
        except DuplicateEmail as exc:
            logger.info("Registration lost a race on the unique email index")
            raise ConflictError("Email already registered") from exc
        except SQLAlchemyError as exc:
            logger.exception("Registration failed")
            raise APIError(
                "Internal server error during registration", code="registration_failed", status_code=500
            ) from exc

        logger.info("Account registered", extra={"user_id": user_id})
        return RegisterResponse(message="User registered successfully", user_id=user_id)

    async def login(self, payload: LoginRequest) -> LoginResponse:
        if not payload.email or not payload.password:
            raise ValidationError("Email and password are required")

        try:
            account = await self.repository.get_by_email(payload.email)
        except SQLAlchemyError as exc:
            logger.exception("Login lookup failed")
            raise APIError("Internal server error during login", code="login_failed", status_code=500) from exc

        # same message for both causes so callers cannot probe which emails exist
        if account is None:
            raise AuthError(INVALID_CREDENTIALS)
        if not await verify_password_async(payload.password, account["password_hash"]):
            raise AuthError(INVALID_CREDENTIALS)

        return LoginResponse(message="Login successful", user=AccountPublic.model_validate(account))

from fastapi import APIRouter, Depends, status

from app.api.deps import get_container
from app.core.container import AppContainer
from app.models.account import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, container: AppContainer = Depends(get_container)) -> RegisterResponse:
    return await container.account_service.register(payload)


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, container: AppContainer = Depends(get_container)) -> LoginResponse:
    return await container.account_service.login(payload)

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.auth import LoginRequest, RegisterRequest
from app.security import get_bearer_token
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.post("/login")
async def login(
    request: LoginRequest,
    service: AuthService = Depends(deps.get_auth_service),
) -> Any:
    result = await service.login(request.identifier, request.password)
    if result is None:
        raise HTTPException(status_code=502, detail="Login failed")
    return result


@router.post("/register")
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(deps.get_auth_service),
) -> Any:
    result = await service.register(request.username, request.email, request.password)
    if result is None:
        raise HTTPException(status_code=502, detail="Registration failed")
    return result


@router.get("/me")
async def me(
    token: str = Depends(get_bearer_token),
    service: AuthService = Depends(deps.get_auth_service),
) -> Any:
    profile = await service.get_profile(token)
    if profile is None:
        raise HTTPException(status_code=502, detail="Profile unavailable")
    return profile

"""Auth endpoints - Cadastro, login e logout por email/senha."""

import logging

from fastapi import APIRouter, Depends, Request

import app_state
from quiz.errors import AuthenticationError, InvalidInputError
from quiz.models import UserPublic
from quiz.storage import UserStore

from .identity import login_session, logout_session, require_user

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


async def get_user_store() -> UserStore:
    """Dependency para obter UserStore."""
    return UserStore(await app_state.get_agentfs())


async def _read_json(request: Request) -> dict:
    try:
        body = await request.json()
    except Exception as e:
        raise InvalidInputError("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise InvalidInputError("Invalid JSON body")
    return body


def _as_text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


@router.post("/signup")
async def signup(request: Request, store: UserStore = Depends(get_user_store)):
    """Cria conta e ja inicia a sessao."""
    body = await _read_json(request)
    name = _as_text(body.get("name"))
    email = _as_text(body.get("email"))
    password = body.get("password") if isinstance(body.get("password"), str) else ""

    if not name or not email or not password:
        raise InvalidInputError("Name, email, and password are required")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidInputError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    user = (await store.create(email, password, name)).to_public()
    login_session(request, user)

    return {
        "message": "Account created successfully",
        "user": user.model_dump(by_alias=True),
    }


@router.post("/login")
async def login(request: Request, store: UserStore = Depends(get_user_store)):
    """Valida credenciais e grava o usuario na sessao assinada."""
    body = await _read_json(request)
    email = _as_text(body.get("email"))
    password = body.get("password") if isinstance(body.get("password"), str) else ""

    if not email or not password:
        raise InvalidInputError("Email and password are required")

    record = await store.authenticate(email, password)
    if record is None:
        logger.info("Login recusado para %s", email)
        raise AuthenticationError("Invalid email or password")

    user = record.to_public()
    login_session(request, user)

    return {"message": "Login successful", "user": user.model_dump(by_alias=True)}


@router.post("/logout")
async def logout(request: Request):
    logout_session(request)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserPublic)
async def me(user: UserPublic = Depends(require_user)):
    return user

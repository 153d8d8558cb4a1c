"""User Store - Colecao ``users`` (credenciais) no AgentFS."""

from __future__ import annotations

import logging
import random
import string
import time

from werkzeug.security import check_password_hash, generate_password_hash

from ..errors import DuplicateUserError
from ..models.records import UserRecord
from .base import KVCollection

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_user_id() -> str:
    """``user_<timestamp ms>_<9 chars base36>``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"user_{int(time.time() * 1000)}_{suffix}"


class UserStore(KVCollection):
    """Cadastro e autenticacao por email/senha.

    Estrutura de chaves:
        - users:{email normalizado} -> UserRecord
    """

    COLLECTION = "users"

    def _user_key(self, email: str) -> str:
        return self._key(email.strip().lower())

    async def get_by_email(self, email: str) -> UserRecord | None:
        data = await self._get(self._user_key(email))
        return UserRecord.from_dict(data) if data else None

    async def create(self, email: str, password: str, name: str) -> UserRecord:
        """Cria usuario com senha em hash.

        Raises:
            DuplicateUserError: Email ja cadastrado
        """
        if await self.get_by_email(email) is not None:
            raise DuplicateUserError("User already exists with this email")

        user = UserRecord(
            user_id=new_user_id(),
            email=email.strip(),
            name=name.strip(),
            password_hash=generate_password_hash(password),
        )
        await self._set(self._user_key(email), user.to_dict())
        logger.info("Usuario criado: %s", user.user_id)
        return user

    async def authenticate(self, email: str, password: str) -> UserRecord | None:
        """Retorna o usuario se email/senha conferem, None caso contrario."""
        user = await self.get_by_email(email)
        if user is None or not check_password_hash(user.password_hash, password):
            return None
        return user

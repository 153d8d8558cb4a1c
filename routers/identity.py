"""Identity - Resolucao do usuario a partir da sessao assinada (cookie).

A sessao e mantida pelo SessionMiddleware do Starlette. Os endpoints nunca
leem a sessao diretamente: recebem o usuario (ou owner_id) via Depends e o
repassam explicitamente para os engines.
"""

from typing import Optional

from fastapi import Depends, Request

from quiz.errors import AuthenticationError
from quiz.models import UserPublic

SESSION_USER_KEY = "user"


def get_current_user(request: Request) -> Optional[UserPublic]:
    """Usuario da sessao, ou None (anonimo / sessao invalida)."""
    data = request.session.get(SESSION_USER_KEY)
    if not isinstance(data, dict):
        return None
    try:
        return UserPublic.model_validate(data)
    except ValueError:
        request.session.pop(SESSION_USER_KEY, None)
        return None


def get_owner_id(user: Optional[UserPublic] = Depends(get_current_user)) -> Optional[str]:
    """ID do dono para quizzes/resultados; None quando anonimo."""
    return user.user_id if user else None


def require_user(user: Optional[UserPublic] = Depends(get_current_user)) -> UserPublic:
    """Exige sessao valida (historico e dashboard)."""
    if user is None:
        raise AuthenticationError("Authentication required")
    return user


def login_session(request: Request, user: UserPublic) -> None:
    request.session[SESSION_USER_KEY] = user.model_dump(by_alias=True)


def logout_session(request: Request) -> None:
    request.session.pop(SESSION_USER_KEY, None)

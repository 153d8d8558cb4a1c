"""Routers module for the quiz app.

O router do pipeline vive em ``quiz.router``; aqui ficam os de identidade.
"""

from .auth import router as auth_router

__all__ = ["auth_router"]

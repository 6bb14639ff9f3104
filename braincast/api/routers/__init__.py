"""API routers."""

from .auth import router as auth_router
from .categories import router as categories_router
from .challenges import router as challenges_router
from .friends import router as friends_router
from .health import router as health_router
from .quizzes import router as quizzes_router
from .scores import router as scores_router
from .webhook import router as webhook_router

__all__ = [
    "auth_router",
    "categories_router",
    "challenges_router",
    "friends_router",
    "health_router",
    "quizzes_router",
    "scores_router",
    "webhook_router",
]

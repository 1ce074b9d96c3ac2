"""Route modules."""

from .admin import router as admin_router
from .auth import router as auth_router
from .journals import router as journals_router
from .meditations import router as meditations_router
from .moods import router as moods_router
from .users import router as users_router

__all__ = [
    "admin_router",
    "auth_router",
    "journals_router",
    "meditations_router",
    "moods_router",
    "users_router",
]

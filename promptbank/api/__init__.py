"""API routes."""

from .auth_routes import router as auth_router
from .folders import router as folders_router
from .prompts import router as prompts_router
from .transfer import router as transfer_router
from .workspace import router as workspace_router

__all__ = [
    "auth_router",
    "folders_router",
    "prompts_router",
    "transfer_router",
    "workspace_router",
]

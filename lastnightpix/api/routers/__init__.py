"""API routers."""

from .checkout import router as checkout_router
from .health import router as health_router
from .health import v1_router as health_v1_router
from .images import router as images_router
from .matches import router as matches_router
from .photos import router as photos_router

__all__ = [
    "checkout_router",
    "health_router",
    "health_v1_router",
    "images_router",
    "matches_router",
    "photos_router",
]

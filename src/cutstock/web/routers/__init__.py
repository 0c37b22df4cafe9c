"""API routers for the cutstock REST API."""

from cutstock.web.routers.optimize import router as optimize_router
from cutstock.web.routers.validate import router as validate_router

__all__ = [
    "optimize_router",
    "validate_router",
]

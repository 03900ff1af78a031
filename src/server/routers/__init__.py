"""API routers for the mdlite service."""

from server.routers.render import router

__all__ = ["router"]

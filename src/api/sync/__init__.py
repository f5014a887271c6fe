"""Manual sync trigger endpoints."""

from src.api.sync.endpoints import router

__all__ = ["router"]

"""API module for the Supabase Notion sync bridge."""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]

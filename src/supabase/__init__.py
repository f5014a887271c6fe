"""Supabase integration for reading source records."""

from src.supabase.client import SupabaseClient
from src.supabase.exceptions import SupabaseClientError
from src.supabase.models import SourceRecord
from src.supabase.source import BATCH_SIZE, SupabaseRecordSource

__all__ = [
    "BATCH_SIZE",
    "SourceRecord",
    "SupabaseClient",
    "SupabaseClientError",
    "SupabaseRecordSource",
]

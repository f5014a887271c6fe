"""Custom exceptions for the Supabase client."""


class SupabaseClientError(Exception):
    """Raised when reading from Supabase fails.

    Covers transport errors, HTTP errors returned by PostgREST, unexpected
    payloads and missing connection settings.
    """

    pass

"""Pydantic models for the sync endpoint."""

from pydantic import BaseModel, Field


class SyncResponse(BaseModel):
    """Response for a completed manual sync."""

    success: bool = Field(default=True, description="Whether the sync ran")
    message: str = Field(..., description="Human-readable outcome")
    records_processed: int = Field(..., description="Records fetched from Supabase")
    records_published: int = Field(..., description="Pages created in Notion")
    records_failed: int = Field(..., description="Records that failed to publish")


class SyncErrorResponse(BaseModel):
    """Response for a sync that could not run or failed."""

    success: bool = Field(default=False, description="Always false")
    error: str = Field(..., description="Error message")

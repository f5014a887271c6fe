"""Pydantic models for records read from Supabase."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SourceRecord(BaseModel):
    """A row from the source table.

    Only the columns the sync maps are declared; other columns are ignored.
    Only id is validated. Other values are kept loosely so a dirty row fails
    when it is published, not when the batch is fetched.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | str = Field(..., description="Row identifier, used for logging")
    name: str | None = Field(default=None, description="Display name")
    status: str | None = Field(default=None, description="Status label")
    created_at: Any = Field(default=None, description="Creation timestamp, forwarded verbatim")

    @field_validator("name", "status", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> str | None:
        """Coerce truthy values to strings and falsy ones to None.

        :param v: Raw column value.
        :returns: The value as a string, or None when empty.
        """
        return str(v) if v else None

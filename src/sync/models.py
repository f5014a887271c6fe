"""Pydantic models for sync results."""

from pydantic import BaseModel, Field, computed_field


class SyncResult(BaseModel):
    """Outcome of one sync run.

    records_processed is the number of records fetched. Published and failed
    counts show how many of those reached Notion.
    """

    success: bool = True
    records_processed: int = 0
    records_published: int = 0
    records_failed: int = 0
    errors: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def records_attempted(self) -> int:
        """Number of publish attempts made."""
        return self.records_published + self.records_failed

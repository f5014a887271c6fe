"""Map source records to Notion page properties."""

from typing import Any

from src.supabase.models import SourceRecord

DEFAULT_NAME = "Untitled"
DEFAULT_STATUS = "New"


def build_page_properties(record: SourceRecord) -> dict[str, Any]:
    """Build the Notion property payload for a record.

    Empty or missing name and status fall back to defaults. created_at is
    passed through unparsed.

    :param record: The source record.
    :returns: Notion page properties.
    """
    return {
        "Name": {
            "title": [
                {"text": {"content": record.name or DEFAULT_NAME}},
            ],
        },
        "Status": {
            "select": {"name": record.status or DEFAULT_STATUS},
        },
        "Created At": {
            "date": {"start": record.created_at},
        },
    }

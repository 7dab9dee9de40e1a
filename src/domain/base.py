from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in the database"""
    return datetime.now(UTC).replace(tzinfo=None)


class ValueRecord(BaseModel):
    """Immutable domain record; changes produce a new instance"""

    model_config = ConfigDict(frozen=True)

    def with_changes(self, **changes):
        return self.model_copy(update=changes)

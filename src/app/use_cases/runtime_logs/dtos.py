"""Data Transfer Objects for runtime log persistence"""

from datetime import datetime, timezone
from typing import Any, Literal, Optional
from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["debug", "info", "warn", "error"]
LogSource = Literal["app", "server"]


class LogEntryDTO(BaseModel):
    """
    Payload accepted by the runtime log store

    Unparseable timestamps are dropped so the entry is stamped with the
    time it was persisted. Naive timestamps are read as UTC.
    """

    source: LogSource = Field(..., description="Which side produced the log (app, server)")

    level: LogLevel = Field(default="error", description="Log level")

    message: str = Field(..., min_length=1, description="Log message (non-empty after trim)")

    timestamp: Optional[datetime] = Field(
        default=None,
        description="ISO-8601 timestamp with offset"
    )

    page_url: Optional[str] = Field(default=None, description="Page the frontend log came from")

    context: Optional[Any] = Field(
        default=None,
        description="Structured context serialized after the message"
    )

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v):
        """Trim surrounding whitespace before the length check"""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("timestamp", mode="before")
    @classmethod
    def parse_timestamp(cls, v):
        if v is None or isinstance(v, datetime):
            parsed = v
        elif isinstance(v, str):
            try:
                parsed = datetime.fromisoformat(v.strip().replace("Z", "+00:00"))
            except ValueError:
                return None
        else:
            return None

        if parsed is not None and parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed


class FrontendLogDTO(LogEntryDTO):
    """Frontend logs are always marked with the app source"""

    source: Literal["app"]

    class Config:
        json_schema_extra = {
            "example": {
                "source": "app",
                "level": "error",
                "message": "Failed to load customers",
                "timestamp": "2024-02-05T10:00:00.000Z",
                "page_url": "/sales/customers",
                "context": {"status": 500}
            }
        }


class ServerLogDTO(LogEntryDTO):
    """Server logs are always marked with the server source"""

    source: Literal["server"]


class LogPersistedDTO(BaseModel):
    line: str = Field(..., description="Formatted line that was stored")
    persisted_at: datetime

"""PersistLog Use Case

Validates frontend and server log payloads and appends them to the
runtime log ring buffer.
"""

import json
from datetime import datetime, timezone
from typing import Any, Type
from pydantic import ValidationError
from libs.result import Result, Return, Error
from src.app.services.log_store import LogStore
from src.app.validation import format_issues
from .dtos import LogEntryDTO, FrontendLogDTO, ServerLogDTO, LogPersistedDTO

LOG_PREFIX = {
    "app": "app logs",
    "server": "server logs",
}


def normalize_context(value: Any) -> dict:
    """Coerce any context value into a JSON-able dict"""
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    return {"value": value}


def format_log_line(entry: LogEntryDTO, timestamp: datetime) -> str:
    """
    Render a single log line

    Format: [<timestamp>] [app logs|server logs] [LEVEL] message {context}
    Multi-line messages are folded onto one line.
    """
    context = normalize_context(entry.context)
    message = " ".join(entry.message.splitlines())
    suffix = f" {json.dumps(context, default=str, separators=(',', ':'))}" if context else ""
    return (
        f"[{timestamp.isoformat()}] [{LOG_PREFIX[entry.source]}] "
        f"[{entry.level.upper()}] {message}{suffix}"
    )


class PersistLog:
    """
    Use Case: Persist a log payload into the runtime log file

    Business Rules:
    1. Frontend payloads must carry source=app, server payloads source=server
    2. Missing timestamps default to now (UTC)
    3. Only the most recent lines are kept (ring buffer)
    """

    def __init__(self, log_store: LogStore):
        self.log_store = log_store

    def log_frontend_payload(self, payload: Any) -> Result[LogPersistedDTO]:
        return self._persist(FrontendLogDTO, payload, "Invalid frontend log payload.")

    def log_server_payload(self, payload: Any) -> Result[LogPersistedDTO]:
        return self._persist(ServerLogDTO, payload, "Invalid server log payload.")

    def _persist(self, schema: Type[LogEntryDTO], payload: Any, message: str) -> Result[LogPersistedDTO]:
        try:
            entry = schema.model_validate(payload)
        except ValidationError as e:
            issues = format_issues(e)
            return Return.err(
                Error(
                    code="LOG_VALIDATION_ERROR",
                    message=message,
                    reason="; ".join(issues),
                    issues=issues,
                )
            )

        now = datetime.now(timezone.utc)
        line = format_log_line(entry, entry.timestamp or now)

        try:
            self.log_store.append(line)
        except (OSError, ValueError) as e:
            return Return.err(
                Error(
                    code="LOG_WRITE_ERROR",
                    message="Unable to write log file.",
                    reason=str(e),
                )
            )

        return Return.ok(LogPersistedDTO(line=line, persisted_at=now))

"""Runtime log use cases"""
from .persist_log import PersistLog, format_log_line
from .dtos import LogEntryDTO, FrontendLogDTO, ServerLogDTO, LogPersistedDTO

__all__ = [
    "PersistLog",
    "format_log_line",
    "LogEntryDTO",
    "FrontendLogDTO",
    "ServerLogDTO",
    "LogPersistedDTO",
]

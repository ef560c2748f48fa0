"""Bridges stdlib logging and uncaught exceptions into the runtime log file"""

import logging
import sys
import threading
import traceback
from typing import Optional
from src.app.use_cases.runtime_logs.persist_log import PersistLog

LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def to_log_level(levelno: int) -> str:
    for threshold in (logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO):
        if levelno >= threshold:
            return LEVEL_NAMES[threshold]
    return "debug"


class RuntimeLogHandler(logging.Handler):
    """
    logging.Handler writing server records into the runtime log ring buffer

    Records that fail validation (e.g. an empty message) are dropped
    through Handler.handleError like any other emit failure.
    """

    def __init__(self, persist_log: PersistLog, level: int = logging.WARNING):
        super().__init__(level)
        self.persist_log = persist_log

    def emit(self, record: logging.LogRecord) -> None:
        try:
            context = {"logger": record.name}
            if record.exc_info and record.exc_info[0] is not None:
                context["name"] = record.exc_info[0].__name__
                context["stack"] = "".join(traceback.format_exception(*record.exc_info))

            result = self.persist_log.log_server_payload(
                {
                    "source": "server",
                    "level": to_log_level(record.levelno),
                    "message": record.getMessage(),
                    "context": context,
                    "page_url": "",
                }
            )
            if result.is_err():
                raise RuntimeError(f"{result.error.code}: {result.error.reason}")
        except Exception:
            self.handleError(record)


_installed_lock = threading.Lock()
_installed_persist_log: Optional[PersistLog] = None


def _persist_exception(persist_log: PersistLog, exc_type, exc_value, exc_tb) -> None:
    message = str(exc_value) or f"Unhandled error: {exc_type.__name__}"
    persist_log.log_server_payload(
        {
            "source": "server",
            "level": "error",
            "message": message,
            "context": {
                "name": exc_type.__name__,
                "stack": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
            },
            "page_url": "",
        }
    )


def install_process_error_handlers(persist_log: PersistLog) -> bool:
    """
    Persist uncaught exceptions (main thread and worker threads)

    Installs at most once per process; returns False when already installed.
    The previous hooks still run afterwards.
    """
    global _installed_persist_log

    with _installed_lock:
        if _installed_persist_log is not None:
            return False
        _installed_persist_log = persist_log

    previous_excepthook = sys.excepthook
    previous_threading_hook = threading.excepthook

    def excepthook(exc_type, exc_value, exc_tb):
        _persist_exception(persist_log, exc_type, exc_value, exc_tb)
        previous_excepthook(exc_type, exc_value, exc_tb)

    def threading_excepthook(args):
        if args.exc_type is not SystemExit:
            _persist_exception(persist_log, args.exc_type, args.exc_value, args.exc_traceback)
        previous_threading_hook(args)

    sys.excepthook = excepthook
    threading.excepthook = threading_excepthook
    return True

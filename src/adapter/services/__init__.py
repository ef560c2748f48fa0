from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabPdfService
from .file_log_store import FileLogStore, MAX_LOG_LINES
from .runtime_log_handler import RuntimeLogHandler, install_process_error_handlers

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabPdfService",
    "FileLogStore",
    "MAX_LOG_LINES",
    "RuntimeLogHandler",
    "install_process_error_handlers",
]

from .unit_of_work import UnitOfWork
from .pdf_service import PdfService
from .log_store import LogStore

__all__ = [
    "UnitOfWork",
    "PdfService",
    "LogStore",
]

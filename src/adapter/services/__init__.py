from .unit_of_work import SqlAlchemyUnitOfWork
from .counter_store import InMemoryCounterStore, JsonFileCounterStore
from .csv_service import StdlibCsvService
from .pdf_service import ReportLabPdfService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "InMemoryCounterStore",
    "JsonFileCounterStore",
    "StdlibCsvService",
    "ReportLabPdfService",
]

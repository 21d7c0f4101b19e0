"""
Local calculation history.

Provides:
- Tagged record models for the five calculation types
- CalculationHistoryStore: capped, newest-first history over a key-value backend
- Memory and file backends
- JSON export/import with dedup-by-id merging
"""

from .backends import FileBackend, KeyValueBackend, MemoryBackend
from .codec import dumps_records, dumps_records_pretty, loads_records
from .exceptions import (
    CalcHistoryError,
    ConfigurationError,
    ImportFormatError,
    RecordFormatError,
    StorageReadError,
    StorageWriteError,
)
from .models import (
    CalculationRecord,
    CalculationType,
    ComplianceRecord,
    EosbRecord,
    GosiRecord,
    HistoryStats,
    LeaveRecord,
    RecordMetadata,
    SaudizationRecord,
    StoreConfig,
)
from .store import CalculationHistoryStore

__all__ = [
    "CalculationHistoryStore",
    "KeyValueBackend",
    "MemoryBackend",
    "FileBackend",
    "CalculationType",
    "CalculationRecord",
    "GosiRecord",
    "EosbRecord",
    "LeaveRecord",
    "SaudizationRecord",
    "ComplianceRecord",
    "RecordMetadata",
    "HistoryStats",
    "StoreConfig",
    "dumps_records",
    "dumps_records_pretty",
    "loads_records",
    "CalcHistoryError",
    "ConfigurationError",
    "StorageReadError",
    "StorageWriteError",
    "RecordFormatError",
    "ImportFormatError",
]

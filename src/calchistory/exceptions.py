class CalcHistoryError(Exception):
    """Base exception for all expected calchistory errors."""

    message: str
    exit_code: int

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ConfigurationError(CalcHistoryError):
    """Configuration related errors (env vars)."""


class StorageReadError(CalcHistoryError):
    """The backend could not read the stored collection."""


class StorageWriteError(CalcHistoryError):
    """The backend rejected a write (quota exceeded, disk errors)."""


class RecordFormatError(CalcHistoryError):
    """Stored or supplied JSON is not a list of calculation records."""


class ImportFormatError(RecordFormatError):
    """Imported payload is not an array of record-shaped values."""

from calchistory.backends import FileBackend
from calchistory.config import get_data_dir, load_config
from calchistory.exceptions import ConfigurationError
from calchistory.models import CalculationType
from calchistory.store import CalculationHistoryStore


def open_store() -> CalculationHistoryStore:
    """
    Opens the history store configured by the environment, backed by files in the data dir.
    """
    return CalculationHistoryStore(FileBackend(get_data_dir()), load_config())


def parse_type(value: str) -> CalculationType:
    try:
        return CalculationType(value.lower())
    except ValueError:
        valid = ", ".join(t.value for t in CalculationType)
        raise ConfigurationError(f"Unknown calculation type '{value}'. Expected one of: {valid}") from None

import os
from pathlib import Path
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from calchistory.consts import APP_DIR_NAME, DEFAULT_STORAGE_KEY, MAX_RECORDS
from calchistory.exceptions import ConfigurationError
from calchistory.models import StoreConfig

_max_records_adapter: TypeAdapter[int] = TypeAdapter(Annotated[int, Field(ge=1)])
_storage_key_adapter: TypeAdapter[str] = TypeAdapter(
    Annotated[str, Field(min_length=1, pattern=r"^[A-Za-z0-9_.-]+$")]
)


def load_config() -> StoreConfig:
    """
    Builds the store configuration from CALCHISTORY_STORAGE_KEY and CALCHISTORY_MAX_RECORDS.
    """
    raw_key = os.environ.get("CALCHISTORY_STORAGE_KEY", DEFAULT_STORAGE_KEY)
    try:
        storage_key = _storage_key_adapter.validate_python(raw_key)
    except ValidationError as e:
        raise ConfigurationError(f"CALCHISTORY_STORAGE_KEY is invalid: {raw_key!r}") from e

    max_records = MAX_RECORDS
    if raw_max := os.environ.get("CALCHISTORY_MAX_RECORDS"):
        try:
            max_records = _max_records_adapter.validate_strings(raw_max)
        except ValidationError as e:
            raise ConfigurationError(f"CALCHISTORY_MAX_RECORDS must be a positive integer, got {raw_max!r}") from e

    return StoreConfig(storage_key=storage_key, max_records=max_records)


def get_data_dir() -> Path:
    """
    Directory used by the file backend: CALCHISTORY_HOME, else the XDG data dir.
    """
    if env_path := os.environ.get("CALCHISTORY_HOME"):
        path = Path(env_path)
        if not path.is_absolute():
            raise ConfigurationError("CALCHISTORY_HOME must be an absolute path")
        return path

    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME

"""Key-value persistence primitives the history store is built on."""

import os
import re
from pathlib import Path
from tempfile import mkstemp
from typing import ClassVar, Protocol, final, override

from calchistory.exceptions import StorageReadError, StorageWriteError


class KeyValueBackend(Protocol):
    """
    Synchronous string key-value storage.

    get returns None for a missing key. set raises StorageWriteError when the
    value cannot be stored; the previous value is then left untouched.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


@final
class MemoryBackend:
    """
    Dict-backed backend for a single process.

    quota: maximum length (in UTF-8 bytes) of a single stored value, mirroring
    the per-origin limit of browser storage. None disables the check.
    """

    _data: dict[str, str]
    quota: int | None

    def __init__(self, quota: int | None = None) -> None:
        self._data = {}
        self.quota = quota

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        size = len(value.encode("utf-8"))
        if self.quota is not None and size > self.quota:
            raise StorageWriteError(f"Storage quota exceeded: {size} bytes > {self.quota} bytes for '{key}'")
        self._data[key] = value

    def remove(self, key: str) -> None:
        _ = self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    @override
    def __repr__(self) -> str:
        return f"MemoryBackend(keys={sorted(self._data)!r}, quota={self.quota!r})"


@final
class FileBackend:
    """
    Stores each key as `<root>/<key>.json`.

    Writes go to a temp file in the same directory and are moved into place
    with os.replace, so readers never observe a half-written value.
    """

    _KEY_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_.-]+$")

    root: Path

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_for(self, key: str) -> Path:
        if not self._KEY_RE.match(key) or key.startswith("."):
            raise ValueError(f"Invalid storage key for file backend: {key!r}")
        return self.root / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Could not read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self._atomic_write(path, value)
        except OSError as e:
            raise StorageWriteError(f"Could not write {path}: {e}") from e

    def remove(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)

    def _atomic_write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = mkstemp(suffix=path.suffix, prefix=path.name + ".tmp", dir=path.parent)
        tmp_path = Path(tmp)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                _ = f.write(text)
            os.replace(tmp_path, path)
        finally:
            tmp_path.unlink(missing_ok=True)

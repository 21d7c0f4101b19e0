# pyright: standard

from typing import Any

import msgspec


def to_json(obj: object) -> bytes:
    """Encode an object to compact JSON bytes using msgspec."""
    return msgspec.json.encode(obj)


def to_pretty_json(obj: object, indent: int = 2) -> str:
    """Encode an object to indented, human-diffable JSON text."""
    return msgspec.json.format(msgspec.json.encode(obj), indent=indent).decode("utf-8")


def from_json[T](type_spec: type[T], data: bytes | str) -> T:
    """Decode JSON data (bytes or str) into the specified type."""
    return msgspec.json.decode(data, type=type_spec)


def to_dict(obj: object) -> dict[str, Any]:
    """Convert an object to a plain dictionary using msgspec."""
    match res := msgspec.to_builtins(obj):
        case dict():
            return res
        case _:
            raise TypeError(f"Expected dict from to_builtins, got {type(res)!r}")

# pyright: standard
from collections.abc import Sequence

import msgspec

from calchistory.exceptions import RecordFormatError
from calchistory.models import CalculationRecord
from calchistory.serialization import from_json, to_json, to_pretty_json


def dumps_records(records: Sequence[CalculationRecord]) -> str:
    """
    Compact JSON text for the whole collection, as stored by the backend.
    """
    return to_json(list(records)).decode("utf-8")


def dumps_records_pretty(records: Sequence[CalculationRecord]) -> str:
    """
    Indented JSON text of the collection; the export/backup format.
    """
    return to_pretty_json(list(records))


def loads_records(text: str | bytes) -> list[CalculationRecord]:
    """
    Parse JSON text into calculation records.

    The top-level value must be an array and every element must carry a known
    `type` tag plus the shared record fields. Unknown extra fields on a record
    are ignored. Raises RecordFormatError describing the first problem found.
    """
    try:
        return from_json(list[CalculationRecord], text)
    except msgspec.ValidationError as e:
        raise RecordFormatError(f"Invalid calculation history format: {e}") from e
    except msgspec.DecodeError as e:
        raise RecordFormatError(f"Malformed JSON: {e}") from e

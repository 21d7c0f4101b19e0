import logging
import secrets
import string
import time
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from calchistory.backends import KeyValueBackend
from calchistory.codec import dumps_records, dumps_records_pretty, loads_records
from calchistory.consts import (
    DEFAULT_RECENT_COUNT,
    ID_PREFIX,
    ID_SUFFIX_LENGTH,
    ONE_MONTH_MS,
    ONE_WEEK_MS,
)
from calchistory.exceptions import ImportFormatError, RecordFormatError, StorageReadError, StorageWriteError
from calchistory.models import (
    CalculationRecord,
    CalculationType,
    ComplianceInputs,
    ComplianceOutputs,
    EosbInputs,
    EosbOutputs,
    GosiInputs,
    GosiOutputs,
    HistoryStats,
    LeaveInputs,
    LeaveOutputs,
    RecordMetadata,
    SaudizationInputs,
    SaudizationOutputs,
    StoreConfig,
    empty_type_counts,
    record_class_for,
)

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def now_ms() -> int:
    """Current wall-clock time in integer milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def to_millis(value: int | datetime) -> int:
    match value:
        case datetime():
            return int(value.timestamp() * 1000)
        case int():
            return value
        case _:
            raise TypeError(f"Expected milliseconds or datetime, got {type(value)!r}")


def newest_first(records: Sequence[CalculationRecord]) -> list[CalculationRecord]:
    """Sort by descending timestamp. Stable: equal timestamps keep their relative order."""
    return sorted(records, key=lambda r: r.timestamp, reverse=True)


def record_matches(record: CalculationRecord, query: str) -> bool:
    needle = query.lower()
    if record.metadata is not None:
        meta = record.metadata
        for value in (meta.employee_name, meta.employee_id, meta.department, meta.notes):
            if value is not None and needle in value.lower():
                return True
    return needle in record.type.value


class CalculationHistoryStore:
    """
    Local history of calculation results, persisted under a single backend key.

    Every operation reads the whole collection from the backend, works on it in
    memory, and mutations write the whole collection back. Records come back
    newest first, ids are unique, and at most `config.max_records` records are
    kept (oldest evicted first).

    There is no cross-call atomicity. Two stores sharing a backend key (or
    interleaved mutations on one store) are last-writer-wins: each mutation
    writes back the state it read, overwriting whatever was written in between.
    """

    backend: KeyValueBackend
    config: StoreConfig
    clock: Callable[[], int]

    def __init__(
        self,
        backend: KeyValueBackend,
        config: StoreConfig | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.backend = backend
        self.config = config or StoreConfig()
        self.clock = clock

    # ---------- Reads ----------

    def get_all(self) -> list[CalculationRecord]:
        """
        All stored records, newest first.

        Missing or unreadable data is treated as an empty history; the failure
        is logged, never raised.
        """
        key = self.config.storage_key
        try:
            raw = self.backend.get(key)
        except StorageReadError as e:
            logger.error("Could not read calculation history '%s': %s", key, e.message)
            return []

        if not raw:
            return []

        try:
            records = loads_records(raw)
        except RecordFormatError as e:
            logger.error("Discarding unreadable calculation history '%s': %s", key, e.message)
            return []

        return newest_first(records)

    def get_by_type(self, type_tag: CalculationType | str) -> list[CalculationRecord]:
        wanted = CalculationType(type_tag)
        return [r for r in self.get_all() if r.type is wanted]

    def get_by_id(self, record_id: str) -> CalculationRecord | None:
        for record in self.get_all():
            if record.id == record_id:
                return record
        return None

    def get_recent(self, count: int = DEFAULT_RECENT_COUNT) -> list[CalculationRecord]:
        if count <= 0:
            return []
        return self.get_all()[:count]

    def get_by_date_range(self, start: int | datetime, end: int | datetime) -> list[CalculationRecord]:
        """Records with start <= timestamp <= end (milliseconds, both ends inclusive)."""
        start_ms = to_millis(start)
        end_ms = to_millis(end)
        return [r for r in self.get_all() if start_ms <= r.timestamp <= end_ms]

    def search(self, query: str) -> list[CalculationRecord]:
        """
        Case-insensitive substring search over the metadata fields and the type tag.

        The empty string is a substring of every type tag, so it matches every record.
        """
        return [r for r in self.get_all() if record_matches(r, query)]

    def get_stats(self) -> HistoryStats:
        records = self.get_all()
        now = self.clock()
        week_start = now - ONE_WEEK_MS
        month_start = now - ONE_MONTH_MS

        by_type = empty_type_counts()
        last_week = 0
        last_month = 0
        for record in records:
            by_type[record.type.value] += 1
            if record.timestamp >= week_start:
                last_week += 1
            if record.timestamp >= month_start:
                last_month += 1

        return HistoryStats(
            total=len(records),
            by_type=by_type,
            last_week=last_week,
            last_month=last_month,
            oldest_record=records[-1].timestamp if records else None,
            newest_record=records[0].timestamp if records else None,
        )

    # ---------- Mutations ----------

    def save(
        self,
        type_tag: CalculationType | str,
        inputs: Mapping[str, Any],
        outputs: Mapping[str, Any],
        metadata: RecordMetadata | None = None,
    ) -> CalculationRecord:
        """
        Records a new calculation and returns it with its assigned id and timestamp.

        When the backend rejects the write, the collection is cut down to half
        the cap (oldest dropped, the new record kept) and written once more.
        A second rejection propagates as StorageWriteError.
        """
        record_type = record_class_for(CalculationType(type_tag))
        records = self.get_all()
        timestamp = self.clock()
        record = record_type(
            id=self._new_id(timestamp, {r.id for r in records}),
            timestamp=timestamp,
            inputs=dict(inputs),
            outputs=dict(outputs),
            metadata=metadata,
        )

        kept = [record, *records][: self.config.max_records]
        try:
            self._write(kept)
        except StorageWriteError as e:
            reduced = kept[: max(self.config.max_records // 2, 1)]
            logger.warning(
                "Saving calculation history failed (%s); retrying with %d of %d records",
                e.message,
                len(reduced),
                len(kept),
            )
            self._write(reduced)

        logger.debug("Saved %s calculation %s", record.type.value, record.id)
        return record

    def save_gosi(
        self, inputs: GosiInputs, outputs: GosiOutputs, metadata: RecordMetadata | None = None
    ) -> CalculationRecord:
        return self.save(CalculationType.GOSI, inputs, outputs, metadata)

    def save_eosb(
        self, inputs: EosbInputs, outputs: EosbOutputs, metadata: RecordMetadata | None = None
    ) -> CalculationRecord:
        return self.save(CalculationType.EOSB, inputs, outputs, metadata)

    def save_leave(
        self, inputs: LeaveInputs, outputs: LeaveOutputs, metadata: RecordMetadata | None = None
    ) -> CalculationRecord:
        return self.save(CalculationType.LEAVE, inputs, outputs, metadata)

    def save_saudization(
        self, inputs: SaudizationInputs, outputs: SaudizationOutputs, metadata: RecordMetadata | None = None
    ) -> CalculationRecord:
        return self.save(CalculationType.SAUDIZATION, inputs, outputs, metadata)

    def save_compliance(
        self, inputs: ComplianceInputs, outputs: ComplianceOutputs, metadata: RecordMetadata | None = None
    ) -> CalculationRecord:
        return self.save(CalculationType.COMPLIANCE, inputs, outputs, metadata)

    def delete(self, record_id: str) -> bool:
        records = self.get_all()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            return False
        self._write(remaining)
        return True

    def delete_by_type(self, type_tag: CalculationType | str) -> int:
        doomed = CalculationType(type_tag)
        records = self.get_all()
        remaining = [r for r in records if r.type is not doomed]
        self._write(remaining)
        removed = len(records) - len(remaining)
        logger.info("Deleted %d %s calculation(s)", removed, doomed.value)
        return removed

    def clear(self) -> None:
        self.backend.remove(self.config.storage_key)
        logger.info("Cleared calculation history '%s'", self.config.storage_key)

    # ---------- Export / import ----------

    def export_json(self, records: Sequence[CalculationRecord] | None = None) -> str:
        """Pretty-printed JSON of `records`, or of the whole history when omitted."""
        return dumps_records_pretty(self.get_all() if records is None else records)

    def import_json(self, text: str | bytes) -> int:
        """
        Merges exported records into the history and returns how many were new.

        Existing records always win: an imported record whose id is already
        stored is discarded, not merged. The merged collection is capped like
        any other write, so new records older than the cap boundary are dropped
        even though they are counted. Nothing is written when the payload is
        not a JSON array of records.
        """
        try:
            imported = loads_records(text)
        except RecordFormatError as e:
            raise ImportFormatError(e.message) from e

        existing = self.get_all()
        seen = {r.id for r in existing}
        new_records: list[CalculationRecord] = []
        for record in imported:
            if record.id in seen:
                continue
            seen.add(record.id)
            new_records.append(record)

        combined = newest_first([*new_records, *existing])[: self.config.max_records]
        self._write(combined)
        logger.info("Imported %d of %d calculation record(s)", len(new_records), len(imported))
        return len(new_records)

    # ---------- Internal ----------

    def _write(self, records: Sequence[CalculationRecord]) -> None:
        self.backend.set(self.config.storage_key, dumps_records(records))

    def _new_id(self, timestamp: int, taken: set[str]) -> str:
        while True:
            suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
            candidate = f"{ID_PREFIX}_{timestamp}_{suffix}"
            if candidate not in taken:
                return candidate

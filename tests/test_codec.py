# pyright: standard

import json

import pytest

from calchistory.codec import dumps_records, dumps_records_pretty, loads_records
from calchistory.exceptions import RecordFormatError
from calchistory.models import CalculationType, EosbRecord, GosiRecord, RecordMetadata
from tests.helpers import make_record


def test_dumps_records_is_compact_single_line() -> None:
    # GIVEN records whose payload contains newlines
    records = [make_record("calc_1_a", 1, metadata=RecordMetadata(notes="line1\nline2"))]

    # WHEN serialized for the backend
    text = dumps_records(records)

    # THEN the JSON is a single line and decodes back to the same records
    assert "\n" not in text
    assert loads_records(text) == records


def test_dumps_records_pretty_is_indented() -> None:
    records = [make_record("calc_1_a", 1), make_record("calc_2_b", 2, CalculationType.EOSB)]

    text = dumps_records_pretty(records)

    assert text.startswith("[\n  {")
    assert [r["type"] for r in json.loads(text)] == ["gosi", "eosb"]


def test_loads_records_dispatches_on_type_tag() -> None:
    text = json.dumps(
        [
            {"id": "calc_2_b", "type": "eosb", "timestamp": 2, "inputs": {"allowances": 5}, "outputs": {}},
            {"id": "calc_1_a", "type": "gosi", "timestamp": 1, "inputs": {}, "outputs": {}, "metadata": {}},
        ]
    )

    records = loads_records(text)

    assert isinstance(records[0], EosbRecord)
    assert isinstance(records[1], GosiRecord)
    assert records[0].inputs == {"allowances": 5}
    # AND order is preserved as given; sorting is the store's job
    assert [r.timestamp for r in records] == [2, 1]
    assert records[1].metadata == RecordMetadata()


def test_loads_records_accepts_bytes() -> None:
    assert loads_records(b"[]") == []


@pytest.mark.parametrize(
    ("payload", "reason"),
    [
        ("{}", "Invalid calculation history format"),
        ("[{]", "Malformed JSON"),
        ('[{"id": "x"}]', "Invalid calculation history format"),
    ],
)
def test_loads_records_rejects_with_reason(payload: str, reason: str) -> None:
    with pytest.raises(RecordFormatError) as exc_info:
        _ = loads_records(payload)

    assert reason in exc_info.value.message

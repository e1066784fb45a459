"""Tests for ad_common.serialization.normalize."""

import json
import uuid
from datetime import UTC, date, datetime
from decimal import Decimal

from src.ad_common.serialization import normalize


class TestScalars:
    def test_none_stays_none(self) -> None:
        assert normalize(None) is None

    def test_decimal_becomes_float_with_same_value(self) -> None:
        out = normalize(Decimal("12.50"))
        assert isinstance(out, float)
        assert out == 12.5

    def test_large_int_stays_int(self) -> None:
        big = 2**63 - 1
        assert normalize(big) == big
        assert type(normalize(big)) is int

    def test_bool_is_not_coerced(self) -> None:
        assert normalize(True) is True

    def test_str_and_float_pass_through(self) -> None:
        assert normalize("pending") == "pending"
        assert normalize(1.25) == 1.25

    def test_datetime_becomes_iso_string(self) -> None:
        ts = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert normalize(ts) == "2026-01-02T03:04:05+00:00"
        assert normalize(date(2026, 1, 2)) == "2026-01-02"

    def test_uuid_becomes_str(self) -> None:
        uid = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert normalize(uid) == "12345678-1234-5678-1234-567812345678"


class TestContainers:
    def test_mapping_keeps_key_set(self) -> None:
        row = {"id": "w1", "amount": Decimal("5"), "transaction_hash": None}
        out = normalize(row)
        assert set(out) == {"id", "amount", "transaction_hash"}
        assert out["amount"] == 5.0
        assert out["transaction_hash"] is None

    def test_sequence_keeps_order(self) -> None:
        out = normalize((Decimal("3"), Decimal("1"), Decimal("2")))
        assert out == [3.0, 1.0, 2.0]

    def test_nested_tree(self) -> None:
        tree = [{"status": "completed", "count": 4, "sum": Decimal("10.1")}]
        assert normalize(tree) == [{"status": "completed", "count": 4, "sum": 10.1}]

    def test_output_is_json_stable(self) -> None:
        row = {
            "id": uuid.uuid4(),
            "balance": Decimal("-3.75"),
            "updated_at": datetime.now(UTC),
        }
        out = normalize(row)
        assert json.loads(json.dumps(out)) == out

    def test_normalize_is_idempotent(self) -> None:
        row = {"amount": Decimal("1.5"), "at": datetime(2026, 5, 1, tzinfo=UTC)}
        once = normalize(row)
        assert normalize(once) == once

from __future__ import annotations

import math
from datetime import date, datetime

from invoice_dashboard.models.common import (
    ApiEnvelope,
    AuthToken,
    DateRange,
    PredicateSet,
)
from invoice_dashboard.models.invoice import (
    WIRE_FIELDS,
    deserialize_record,
    deserialize_records,
    serialize_record,
    to_wire,
)

WIRE_ROW = {
    "发票号": "24003100",
    "开票公司": "Acme Supplies",
    "收票公司": "Globex Retail",
    "时间": "2024-01-15 10:00:00",
    "产品名称": "Widget",
    "默认规格": "10cm",
    "数量": "3",
    "含税总价": "339.00",
}


def test_deserialize_wire_row() -> None:
    record = deserialize_record(WIRE_ROW)
    assert record.invoice_number == "24003100"
    assert record.issuing_company == "Acme Supplies"
    assert record.receiving_company == "Globex Retail"
    assert record.product_name == "Widget"
    assert record.specification == "10cm"
    assert record.quantity == 3
    assert record.amount == 339.0


def test_deserialize_tolerates_malformed_values() -> None:
    record = deserialize_record({"发票号": 42, "数量": "many", "含税总价": "n/a", "默认规格": None})
    assert record.invoice_number == "42"
    assert record.issuing_company == ""
    assert record.quantity == 0
    assert record.specification is None
    assert math.isnan(record.amount)
    assert not record.has_valid_amount


def test_deserialize_records_skips_non_mappings() -> None:
    assert len(deserialize_records([WIRE_ROW, None, "row", WIRE_ROW])) == 2
    assert deserialize_records(None) == []


def test_serialize_and_wire_keys(make_record) -> None:
    record = make_record(amount=math.nan)
    data = serialize_record(record)
    assert data["amount"] is None
    assert deserialize_record(data).invoice_number == record.invoice_number
    assert set(to_wire(record)) == set(WIRE_FIELDS.values())


def test_record_display_helpers(make_record) -> None:
    record = make_record(amount=1234.5, timestamp="2024-01-15T10:00:00")
    assert record.formatted_amount() == "¥1,234.50"
    assert record.formatted_timestamp() == "2024-01-15 10:00"
    assert make_record(timestamp="pending").formatted_timestamp() == "pending"


def test_date_range_bounds() -> None:
    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
    assert date_range.lower_bound() == datetime(2024, 1, 1)
    assert date_range.upper_bound() == datetime(2024, 1, 31, 23, 59, 59, 999000)
    assert not DateRange().is_active


def test_predicate_set_signature_tracks_criteria() -> None:
    predicates = PredicateSet.from_inputs(
        keyword="abc",
        product="Widget",
        start_date="2024-01-01",
        max_amount="500",
    )
    same = PredicateSet.from_inputs(
        keyword="abc",
        product="Widget",
        start_date="2024/01/01",
        max_amount="500.0",
    )
    assert same.signature() == predicates.signature()
    assert PredicateSet().signature() != predicates.signature()
    assert predicates.to_dict()["start_date"] == "2024-01-01"


def test_download_params_omit_blank_and_trim() -> None:
    predicates = PredicateSet.from_inputs(
        keyword="ignored",
        receiving_company="  Globex  ",
        issuing_company="   ",
        start_date="2024-01-01",
        min_amount="10",
    )
    assert predicates.download_params() == {
        "receive_company": "Globex",
        "start_date": "2024-01-01",
    }


def test_api_envelope_accepts_msg_alias() -> None:
    envelope = ApiEnvelope.from_dict({"code": 500, "msg": "boom"})
    assert not envelope.ok
    assert envelope.message == "boom"
    assert ApiEnvelope.from_dict({"code": "200", "data": [1]}).ok
    assert ApiEnvelope.from_dict(None).code == 0


def test_auth_token_expires_a_minute_early() -> None:
    token = AuthToken(token="abc", expires_in=3600, created_at=1000.0)
    assert token.is_valid(now=1000.0 + 3539)
    assert not token.is_valid(now=1000.0 + 3540)
    assert not AuthToken().is_valid()


def test_auth_token_storage_round_trip() -> None:
    token = AuthToken(token="abc", expires_in=3600, created_at=1000.5)
    stored = token.to_storage()
    assert AuthToken.from_storage(stored["token"], stored["expires_in"], stored["created_at"]) == token
    assert AuthToken.from_storage("abc", "soon", "") == AuthToken(token="abc")

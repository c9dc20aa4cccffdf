from __future__ import annotations

import csv
import io

import pytest

from invoice_dashboard.data.demo_invoices import DEMO_INVOICES
from invoice_dashboard.models.common import PredicateSet
from invoice_dashboard.models.invoice import WIRE_FIELDS
from invoice_dashboard.services import (
    DemoInvoiceService,
    InvoiceServiceError,
    InvoiceServiceImpl,
    UploadValidationError,
    get_invoice_service,
)


def test_demo_login_issues_valid_token() -> None:
    token = DemoInvoiceService().login("user@example.com", "secret1")
    assert token.token.startswith("demo-")
    assert token.is_valid()


def test_demo_lists_a_copy_of_the_store() -> None:
    service = DemoInvoiceService()
    listed = service.list_invoices()
    assert len(listed) == len(DEMO_INVOICES)
    listed.clear()
    assert len(service.list_invoices()) == len(DEMO_INVOICES)


def test_demo_download_filters_by_criteria(records) -> None:
    service = DemoInvoiceService(records)
    exported = service.download_invoices(PredicateSet(issuing_company="Initech", keyword="nothing"))

    rows = list(csv.DictReader(io.StringIO(exported.content.decode("utf-8-sig"))))
    assert exported.filename == "invoice_data.csv"
    assert [row[WIRE_FIELDS["invoice_number"]] for row in rows] == ["INV-002", "INV-003"]


def test_demo_upload_appends_csv_rows(records) -> None:
    service = DemoInvoiceService(records)
    content = "\n".join(
        [
            ",".join(WIRE_FIELDS.values()),
            "INV-100,Acme,Globex,2024-03-01 09:00:00,Widget,,2,20.5",
            ",Acme,Globex,2024-03-01 09:00:00,Widget,,2,20.5",
        ]
    ).encode("utf-8-sig")

    assert service.upload_invoices("new.csv", content) == 1
    added = service.list_invoices()[-1]
    assert added.invoice_number == "INV-100"
    assert added.amount == 20.5
    assert added.specification is None


def test_demo_upload_rejects_spreadsheets() -> None:
    with pytest.raises(InvoiceServiceError, match="only imports .csv"):
        DemoInvoiceService([]).upload_invoices("new.xlsx", b"binary")


def test_demo_upload_validates_before_import() -> None:
    with pytest.raises(UploadValidationError):
        DemoInvoiceService([]).upload_invoices("new.docx", b"binary")


def test_demo_data_contains_malformed_rows() -> None:
    numbers = {record.invoice_number: record for record in DEMO_INVOICES}
    assert not numbers["2400009998"].has_valid_amount
    assert numbers["2400009999"].timestamp == "pending"


def test_service_factory(monkeypatch) -> None:
    get_invoice_service.cache_clear()
    monkeypatch.setenv("INVOICE_DASHBOARD_SERVICE", "impl")
    try:
        assert isinstance(get_invoice_service(), InvoiceServiceImpl)
        assert isinstance(get_invoice_service("demo"), DemoInvoiceService)
        with pytest.raises(ValueError):
            get_invoice_service("spark")
    finally:
        get_invoice_service.cache_clear()

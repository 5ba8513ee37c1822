"""Canonical sample invoice used by the UI demo button and smoke checks."""

from __future__ import annotations

from typing import Any

_SAMPLE_INVOICE: dict[str, Any] = {
    "supplierVat": "512345679",
    "customerVat": "598765431",
    "invoiceId": "INV-2025-00123",
    "date": "2025-09-12",
    "currency": "ILS",
    "vat": 170,
    "total": 1000,
}

SAMPLE_INVOICE_CSV = (
    "supplierVat,customerVat,total,vat,date,currency,invoiceId\n"
    "512345679,598765431,1000,170,2025-09-12,ILS,INV-2025-00123"
)


def sample_invoice() -> dict[str, Any]:
    return dict(_SAMPLE_INVOICE)

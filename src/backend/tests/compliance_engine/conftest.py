import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import clearedge...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from clearedge.compliance_engine.context import InvoiceContext


@pytest.fixture
def sample_record() -> dict:
    return {
        "supplierVat": "512345679",
        "customerVat": "598765431",
        "invoiceId": "INV-2025-00123",
        "date": "2025-09-12",
        "currency": "ILS",
        "vat": 170,
        "total": 1000,
    }


@pytest.fixture
def make_record(sample_record):
    """Sample record with overrides; a value of `...` drops the field."""

    def _make(**overrides) -> dict:
        record = dict(sample_record)
        for key, value in overrides.items():
            if value is ...:
                record.pop(key, None)
            else:
                record[key] = value
        return record

    return _make


@pytest.fixture
def make_ctx():
    def _make(record: dict) -> InvoiceContext:
        return InvoiceContext.from_record(record)

    return _make

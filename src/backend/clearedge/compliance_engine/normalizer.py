from __future__ import annotations

from typing import Any, Mapping, Optional

from .config import DEFAULT_CURRENCY
from .context import InvoiceContext
from .models import NormalizedMetadata

# payload key -> fallback when the key is missing or None
META_FIELDS = {
    "supplierVat": "",
    "customerVat": "",
    "date": "",
    "currency": DEFAULT_CURRENCY,
    "vat": "",
    "total": "",
}


def normalize(record: Optional[Mapping[str, Any]]) -> NormalizedMetadata:
    """Project the display metadata out of a raw record.

    Values are passed through untouched (amounts keep their numeric type);
    only missing/None fields are replaced by their fallback.
    """
    ctx = InvoiceContext.from_record(record)
    values = {}
    for name, fallback in META_FIELDS.items():
        value = ctx.get(name)
        values[name] = fallback if value is None else value
    return NormalizedMetadata.model_validate(values)

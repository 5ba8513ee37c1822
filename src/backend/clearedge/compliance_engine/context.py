from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Mapping, Optional

from .config import AMOUNT_QUANTUM, VAT_RATE


@dataclass(frozen=True)
class InvoiceContext:
    """Read-only view over a loosely-typed invoice record.

    Every accessor tolerates missing keys and wrong types; rules never index
    the raw mapping directly.
    """

    record: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "InvoiceContext":
        if isinstance(record, InvoiceContext):
            return record
        if not isinstance(record, Mapping):
            return cls(record={})
        return cls(record=record)

    def get(self, name: str) -> Any:
        return self.record.get(name)

    def is_missing(self, name: str) -> bool:
        return self.get(name) is None

    def is_present(self, name: str) -> bool:
        return is_truthy(self.get(name))

    def text(self, name: str) -> Optional[str]:
        value = self.get(name)
        if value is None:
            return None
        return as_text(value)

    def amount(self, name: str) -> Optional[Decimal]:
        return to_decimal(self.get(name))


def is_truthy(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float, Decimal)):
        if isinstance(value, float) and math.isnan(value):
            return False
        if isinstance(value, Decimal) and value.is_nan():
            return False
        return value != 0
    return True


def as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        # Decimal("12.0") reads as "12"; formatting avoids the int/str digit limit.
        return format(value.to_integral_value(), "f")
    return str(value)


def to_decimal(value: Any) -> Optional[Decimal]:
    """Return a finite numeric value as Decimal, else None (strings are not numbers)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return Decimal(str(value))
    return None


def quantize_amount(value: Decimal, quantize: Decimal = AMOUNT_QUANTUM) -> Decimal:
    with localcontext() as dctx:
        dctx.prec = max(dctx.prec, value.adjusted() - quantize.as_tuple().exponent + 2)
        return value.quantize(quantize, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class VatBreakdown:
    total: Decimal
    vat: Decimal
    subtotal: Decimal
    expected_vat: Decimal

    @property
    def difference(self) -> Decimal:
        return abs(self.expected_vat - self.vat)


def compute_vat_breakdown(total: Decimal, vat: Decimal, *, rate: Decimal = VAT_RATE) -> VatBreakdown:
    with localcontext() as dctx:
        # Wide enough that subtraction and the rate multiplication stay exact.
        digits = max(len(total.as_tuple().digits) + abs(total.as_tuple().exponent),
                     len(vat.as_tuple().digits) + abs(vat.as_tuple().exponent))
        dctx.prec = max(dctx.prec, digits * 2 + 8)
        subtotal = total - vat
        expected = quantize_amount(subtotal * rate)
    return VatBreakdown(total=total, vat=vat, subtotal=subtotal, expected_vat=expected)

from __future__ import annotations

from typing import Optional

from ..config import VAT_RATE, VAT_TOLERANCE
from ..context import InvoiceContext, VatBreakdown, compute_vat_breakdown
from ..models import Severity
from ..registry import register_rule
from ..rule import Rule


def vat_breakdown(ctx: InvoiceContext) -> Optional[VatBreakdown]:
    total = ctx.amount("total")
    vat = ctx.amount("vat")
    if total is None or vat is None:
        return None
    return compute_vat_breakdown(total, vat)


def format_rate(rate=VAT_RATE) -> str:
    return f"{(rate * 100).normalize():f}%"


class VatArithmeticRule(Rule):
    """Runs only when both total and vat are numbers."""

    def applies(self, ctx: InvoiceContext) -> bool:
        return vat_breakdown(ctx) is not None


@register_rule
class VAT_RATE_MISMATCH(VatArithmeticRule):
    code = "VAT_MISMATCH"
    severity = Severity.MEDIUM
    message = "VAT amount does not match the {rate} rate."
    fix = "Check intermediate calculations and rounding of the amounts."

    def violated(self, ctx: InvoiceContext) -> bool:
        breakdown = vat_breakdown(ctx)
        return breakdown is not None and breakdown.difference > VAT_TOLERANCE

    def describe(self, ctx: InvoiceContext) -> str:
        return self.message.format(rate=format_rate())


@register_rule
class SUBTOTAL_NOT_POSITIVE(VatArithmeticRule):
    code = "SUBTOTAL_NEG"
    severity = Severity.HIGH
    message = "Amount before VAT is invalid (negative or zero)."
    fix = "Check the line items and the total calculation."

    def violated(self, ctx: InvoiceContext) -> bool:
        breakdown = vat_breakdown(ctx)
        return breakdown is not None and breakdown.subtotal <= 0

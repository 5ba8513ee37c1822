from __future__ import annotations

from ..config import MIN_INVOICE_ID_LENGTH
from ..context import InvoiceContext
from ..models import Severity
from ..registry import register_rule
from ..rule import Rule


@register_rule
class INVOICE_ID_WEAK(Rule):
    code = "INVOICE_ID_WEAK"
    severity = Severity.LOW
    message = "Invoice identifier is weak or too short."
    fix = "Lengthen the invoice identifier to at least 6 characters."

    def applies(self, ctx: InvoiceContext) -> bool:
        return ctx.is_present("invoiceId")

    def violated(self, ctx: InvoiceContext) -> bool:
        return len(ctx.text("invoiceId") or "") < MIN_INVOICE_ID_LENGTH

from __future__ import annotations

from ..config import SUPPORTED_CURRENCIES
from ..context import InvoiceContext
from ..models import Severity
from ..registry import register_rule
from ..rule import Rule


@register_rule
class CURRENCY_UNSUPPORTED(Rule):
    code = "CURRENCY_UNSUPPORTED"
    severity = Severity.LOW
    message = "Currency is not supported."
    fix = "Use one of: " + "/".join(sorted(SUPPORTED_CURRENCIES)) + "."

    def applies(self, ctx: InvoiceContext) -> bool:
        return ctx.is_present("currency")

    def violated(self, ctx: InvoiceContext) -> bool:
        currency = ctx.get("currency")
        # Non-string values (lists, numbers) can never be a supported code.
        return not (isinstance(currency, str) and currency in SUPPORTED_CURRENCIES)

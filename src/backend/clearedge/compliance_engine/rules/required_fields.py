from __future__ import annotations

from ..context import InvoiceContext
from ..models import Severity
from ..registry import register_rule
from ..rule import Rule


class RequiredFieldRule(Rule):
    """Fails when `field` is absent.

    With `allow_falsy` only a missing/None value fails, so an amount of 0 is
    accepted; otherwise empty strings and zero count as missing too.
    """

    field: str
    allow_falsy: bool = False

    def violated(self, ctx: InvoiceContext) -> bool:
        if self.allow_falsy:
            return ctx.is_missing(self.field)
        return not ctx.is_present(self.field)


@register_rule
class SUPPLIER_VAT_REQUIRED(RequiredFieldRule):
    code = "SUPPLIER_VAT"
    severity = Severity.HIGH
    field = "supplierVat"
    message = "Supplier VAT number is missing."
    fix = "Add the supplier's 9-digit VAT number in the supplierVat field."


@register_rule
class CUSTOMER_VAT_REQUIRED(RequiredFieldRule):
    code = "CUSTOMER_VAT"
    severity = Severity.MEDIUM
    field = "customerVat"
    message = "Customer VAT number is missing."
    fix = "Add the customer's VAT number in the customerVat field."


@register_rule
class DATE_REQUIRED(RequiredFieldRule):
    code = "DATE"
    severity = Severity.MEDIUM
    field = "date"
    message = "Invoice date is missing."
    fix = "Add the invoice date in YYYY-MM-DD format."


@register_rule
class TOTAL_REQUIRED(RequiredFieldRule):
    code = "TOTAL"
    severity = Severity.HIGH
    field = "total"
    allow_falsy = True
    message = "Invoice total (total) is missing."
    fix = "Add the gross invoice amount."


@register_rule
class VAT_REQUIRED(RequiredFieldRule):
    code = "VAT"
    severity = Severity.MEDIUM
    field = "vat"
    allow_falsy = True
    message = "VAT amount (vat) is missing."
    fix = "Add the VAT amount."

from __future__ import annotations

import re

from ..config import VAT_NUMBER_LENGTH
from ..context import InvoiceContext
from ..models import Severity
from ..registry import register_rule
from ..rule import Rule

# ASCII digits only; str.isdigit/\d would accept other scripts.
VAT_NUMBER_PATTERN = re.compile(rf"[0-9]{{{VAT_NUMBER_LENGTH}}}")


def is_valid_vat_number(value: str) -> bool:
    return VAT_NUMBER_PATTERN.fullmatch(value) is not None


class VatNumberFormatRule(Rule):
    field: str
    fix = f"Use exactly {VAT_NUMBER_LENGTH} digits with no dashes or spaces."

    def applies(self, ctx: InvoiceContext) -> bool:
        return ctx.is_present(self.field)

    def violated(self, ctx: InvoiceContext) -> bool:
        return not is_valid_vat_number(ctx.text(self.field) or "")


@register_rule
class SUPPLIER_VAT_FORMAT(VatNumberFormatRule):
    code = "SUPPLIER_VAT_FMT"
    severity = Severity.HIGH
    field = "supplierVat"
    message = "Supplier VAT number has an invalid format."


@register_rule
class CUSTOMER_VAT_FORMAT(VatNumberFormatRule):
    code = "CUSTOMER_VAT_FMT"
    severity = Severity.MEDIUM
    field = "customerVat"
    message = "Customer VAT number has an invalid format."

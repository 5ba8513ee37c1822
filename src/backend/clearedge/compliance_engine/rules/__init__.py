# Import order is evaluation order.
from .required_fields import (
    CUSTOMER_VAT_REQUIRED,
    DATE_REQUIRED,
    SUPPLIER_VAT_REQUIRED,
    TOTAL_REQUIRED,
    VAT_REQUIRED,
)
from .vat_number_format import CUSTOMER_VAT_FORMAT, SUPPLIER_VAT_FORMAT
from .vat_arithmetic import SUBTOTAL_NOT_POSITIVE, VAT_RATE_MISMATCH
from .currency_supported import CURRENCY_UNSUPPORTED
from .invoice_id_strength import INVOICE_ID_WEAK

__all__ = [
    "SUPPLIER_VAT_REQUIRED",
    "CUSTOMER_VAT_REQUIRED",
    "DATE_REQUIRED",
    "TOTAL_REQUIRED",
    "VAT_REQUIRED",
    "SUPPLIER_VAT_FORMAT",
    "CUSTOMER_VAT_FORMAT",
    "VAT_RATE_MISMATCH",
    "SUBTOTAL_NOT_POSITIVE",
    "CURRENCY_UNSUPPORTED",
    "INVOICE_ID_WEAK",
]

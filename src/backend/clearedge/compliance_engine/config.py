from __future__ import annotations

from decimal import Decimal
from typing import Dict, FrozenSet

from .models import Severity

# Fixed policy (Israeli VAT, MVP currency allowlist). Not client-configurable.
VAT_RATE = Decimal("0.17")
# Absolute tolerance, in currency units, between stated and expected VAT.
VAT_TOLERANCE = Decimal("1")
AMOUNT_QUANTUM = Decimal("0.01")

VAT_NUMBER_LENGTH = 9
SUPPORTED_CURRENCIES: FrozenSet[str] = frozenset({"ILS", "USD", "EUR"})
DEFAULT_CURRENCY = "ILS"
MIN_INVOICE_ID_LENGTH = 3

MAX_SCORE = 100
MIN_SCORE = 0
SEVERITY_PENALTIES: Dict[Severity, int] = {
    Severity.HIGH: 25,
    Severity.MEDIUM: 12,
    Severity.LOW: 5,
}
# Lower bound (inclusive) of each band.
GREEN_THRESHOLD = 85
YELLOW_THRESHOLD = 60

# Identifier columns keep their text form when a CSV row is decoded, even when
# they are all digits (VAT numbers, numeric invoice ids).
CSV_TEXT_FIELDS: FrozenSet[str] = frozenset({"supplierVat", "customerVat", "invoiceId"})
# Longer integral cells stay Decimal; CPython refuses int/str conversion beyond 4300 digits.
CSV_MAX_INT_DIGITS = 4300

"""Invoice file adapters: decode uploads into raw records and render reports."""

from .decoding import (
    InvoiceDecodeError,
    check_invoice_file,
    check_invoice_text,
    csv_to_record,
    decode_invoice_text,
    json_to_record,
    parser_failure_report,
)
from .display import format_meta_value, render_markdown
from .samples import SAMPLE_INVOICE_CSV, sample_invoice
from .self_check import SelfCheckResult, run_self_checks

__all__ = [
    "InvoiceDecodeError",
    "SAMPLE_INVOICE_CSV",
    "SelfCheckResult",
    "check_invoice_file",
    "check_invoice_text",
    "csv_to_record",
    "decode_invoice_text",
    "format_meta_value",
    "json_to_record",
    "parser_failure_report",
    "render_markdown",
    "run_self_checks",
    "sample_invoice",
]

from __future__ import annotations

import csv
import io
import json
import logging
import re
from decimal import Decimal
from pathlib import Path
from typing import Any

from clearedge.compliance_engine import InvoiceReport, validate_invoice
from clearedge.compliance_engine.config import CSV_MAX_INT_DIGITS, CSV_TEXT_FIELDS
from clearedge.compliance_engine.models import Finding, Level, Severity
from clearedge.compliance_engine.normalizer import normalize

logger = logging.getLogger(__name__)

NUMERIC_CELL = re.compile(r"[0-9]+(\.[0-9]+)?")
SUPPORTED_SUFFIXES = (".json", ".csv")

PARSER_CODE = "PARSER"
PARSER_FIX = "Use a JSON or CSV file, or try the sample invoice."


class InvoiceDecodeError(ValueError):
    """Raised when an uploaded invoice file cannot be turned into a record."""


def decode_invoice_text(filename: str, text: str) -> dict[str, Any]:
    """
    Decode uploaded file contents into a raw invoice record.

    Dispatch is by file extension:
      - .json: the document must be a JSON object
      - .csv: header line + first data row (see `csv_to_record`)
    """
    suffix = Path(filename).suffix.lower()
    if suffix == ".json":
        return json_to_record(text)
    if suffix == ".csv":
        return csv_to_record(text)
    raise InvoiceDecodeError("Only JSON and CSV invoice files are supported.")


def json_to_record(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvoiceDecodeError(f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno}).") from exc
    except (ValueError, RecursionError) as exc:
        # Oversized integers and pathological nesting.
        raise InvoiceDecodeError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvoiceDecodeError("JSON invoice must be an object with named fields.")
    return data


def csv_to_record(text: str) -> dict[str, Any]:
    """
    Promote a single CSV data row to a record keyed by the header line.

    Notes:
    - Cells are trimmed; a missing cell becomes "".
    - Cells that look like unsigned decimals are coerced to numbers
      (int when integral, Decimal otherwise); everything else stays a string.
    - Identifier columns (`CSV_TEXT_FIELDS`) stay strings; a zero fraction is
      dropped so "512345679.0" reads as "512345679".
    - Rows after the first data row are ignored.
    """
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if not lines:
        return {}
    rows = list(csv.reader(io.StringIO("\n".join(lines[:2]))))
    headers = [h.strip() for h in rows[0]]
    values = [v.strip() for v in rows[1]] if len(rows) > 1 else []

    record: dict[str, Any] = {}
    for i, header in enumerate(headers):
        cell = values[i] if i < len(values) else ""
        record[header] = _identifier_cell(cell) if header in CSV_TEXT_FIELDS else _coerce_cell(cell)
    return record


def _identifier_cell(cell: str) -> str:
    if NUMERIC_CELL.fullmatch(cell) and "." in cell:
        whole, fraction = cell.split(".", 1)
        if not fraction.strip("0"):
            return whole
    return cell


def _coerce_cell(cell: str) -> Any:
    if not NUMERIC_CELL.fullmatch(cell):
        return cell
    value = Decimal(cell)
    if value != value.to_integral_value():
        return value
    if len(cell.split(".")[0].lstrip("0")) > CSV_MAX_INT_DIGITS:
        return value
    return int(value)


def parser_failure_report(message: str) -> InvoiceReport:
    """Degraded report for input that never reached the rules engine."""
    finding = Finding(code=PARSER_CODE, severity=Severity.HIGH, message=message, fix=PARSER_FIX)
    return InvoiceReport(
        level=Level.RED,
        score=0,
        issues=[finding],
        meta=normalize({}),
        totals={Severity.HIGH: 1},
    )


def check_invoice_text(filename: str, text: str) -> InvoiceReport:
    try:
        record = decode_invoice_text(filename, text)
    except InvoiceDecodeError as exc:
        logger.warning("Could not decode %s: %s", filename, exc)
        return parser_failure_report(str(exc))
    return validate_invoice(record)


def check_invoice_file(path: Path) -> InvoiceReport:
    """Read, decode and validate one invoice file; bad input degrades the report."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return parser_failure_report(f"Could not read file: {exc}")
    return check_invoice_text(path.name, text)

from __future__ import annotations

from decimal import Decimal
from typing import Any

from clearedge.compliance_engine.models import InvoiceReport, NormalizedMetadata

PLACEHOLDER = "—"

META_LABELS = (
    ("supplier_vat", "Supplier VAT"),
    ("customer_vat", "Customer VAT"),
    ("date", "Date"),
    ("currency", "Currency"),
    ("vat", "VAT"),
    ("total", "Total"),
)


def format_meta_value(value: Any) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal):
        return f"{value:f}"
    return str(value)


def meta_rows(meta: NormalizedMetadata) -> list[tuple[str, str]]:
    return [(label, format_meta_value(getattr(meta, attr))) for attr, label in META_LABELS]


def render_markdown(report: InvoiceReport, *, title: str = "Invoice QuickFix Report") -> str:
    lines = [
        f"# {title}",
        "",
        f"- Level: {report.level.value}",
        f"- Score: {report.score}/100",
        "",
        "## Invoice",
        "",
        "| Field | Value |",
        "| --- | --- |",
    ]
    for label, value in meta_rows(report.meta):
        lines.append(f"| {label} | {value} |")

    lines.extend(["", "## Issues", ""])
    if not report.issues:
        lines.append("No issues found.")
    # Engine order, not severity order.
    for issue in report.issues:
        lines.append(f"- **{issue.code}** ({issue.severity.value}): {issue.message}")
        lines.append(f"  - Suggested fix: {issue.fix}")
    lines.append("")
    return "\n".join(lines)

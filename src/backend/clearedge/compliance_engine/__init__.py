"""Invoice compliance rules engine.

Pure domain logic: a raw invoice mapping goes in, an InvoiceReport comes out.
File decoding and rendering live in `adapters.invoice_files`.
"""

from .context import InvoiceContext
from .models import Finding, InvoiceReport, Level, NormalizedMetadata, Severity
from .normalizer import normalize
from .runner import RulesRunner, evaluate
from .scoring import classify, compose_report, score_findings, validate_invoice

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401

__all__ = [
    "Finding",
    "InvoiceContext",
    "InvoiceReport",
    "Level",
    "NormalizedMetadata",
    "RulesRunner",
    "Severity",
    "classify",
    "compose_report",
    "evaluate",
    "normalize",
    "score_findings",
    "validate_invoice",
]

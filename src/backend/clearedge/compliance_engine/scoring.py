from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .config import (
    GREEN_THRESHOLD,
    MAX_SCORE,
    MIN_SCORE,
    SEVERITY_PENALTIES,
    YELLOW_THRESHOLD,
)
from .models import Finding, InvoiceReport, Level, Severity
from .normalizer import normalize
from .runner import RulesRunner

logger = logging.getLogger(__name__)


def score_findings(findings: Iterable[Finding]) -> int:
    penalty = sum(SEVERITY_PENALTIES[f.severity] for f in findings)
    return max(MIN_SCORE, min(MAX_SCORE, MAX_SCORE - penalty))


def classify(score: int) -> Level:
    if score >= GREEN_THRESHOLD:
        return Level.GREEN
    if score >= YELLOW_THRESHOLD:
        return Level.YELLOW
    return Level.RED


def severity_totals(findings: Iterable[Finding]) -> Dict[Severity, int]:
    totals: Dict[Severity, int] = {}
    for finding in findings:
        totals[finding.severity] = totals.get(finding.severity, 0) + 1
    return totals


def compose_report(record: Optional[Mapping[str, Any]], findings: Iterable[Finding]) -> InvoiceReport:
    issues: List[Finding] = list(findings)
    score = score_findings(issues)
    level = classify(score)
    logger.debug("Invoice scored %s (%s) with %d finding(s)", score, level.value, len(issues))
    return InvoiceReport(
        level=level,
        score=score,
        issues=issues,
        meta=normalize(record),
        totals=severity_totals(issues),
    )


def validate_invoice(record: Optional[Mapping[str, Any]], *, runner: Optional[RulesRunner] = None) -> InvoiceReport:
    """Run the rule battery over `record` and compose the report."""
    runner = runner or RulesRunner()
    return compose_report(record, runner.run(record))

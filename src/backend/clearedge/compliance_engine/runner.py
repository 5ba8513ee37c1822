from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from .context import InvoiceContext
from .models import Finding
from .registry import registry

logger = logging.getLogger(__name__)


class RulesRunner:
    def __init__(self, rules: Optional[Iterable] = None, *, codes: Optional[Iterable[str]] = None):
        self._rules = list(rules) if rules is not None else registry.create_all(codes)

    @property
    def codes(self) -> List[str]:
        return [rule.code for rule in self._rules]

    def run(self, record: Optional[Mapping[str, Any]], *, rule_ids: Optional[set[str]] = None) -> List[Finding]:
        ctx = InvoiceContext.from_record(record)
        findings: List[Finding] = []
        for rule in self._rules:
            if rule_ids is not None and rule.code not in rule_ids:
                continue
            finding = rule.evaluate(ctx)
            if finding is None:
                continue
            logger.debug("Rule %s fired (%s)", finding.code, finding.severity.value)
            findings.append(finding)
        return findings


def evaluate(record: Optional[Mapping[str, Any]]) -> List[Finding]:
    return RulesRunner().run(record)

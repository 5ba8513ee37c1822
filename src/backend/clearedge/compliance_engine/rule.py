from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .context import InvoiceContext
from .models import Finding, Severity


class Rule(ABC):
    code: str
    severity: Severity
    message: str
    fix: str

    def __init__(self):
        if not getattr(self, "code", None):
            raise ValueError("Rule must define code")

    def applies(self, ctx: InvoiceContext) -> bool:
        """Precondition; a rule that does not apply is skipped, not failed."""
        return True

    @abstractmethod
    def violated(self, ctx: InvoiceContext) -> bool:  # pragma: no cover
        raise NotImplementedError

    def describe(self, ctx: InvoiceContext) -> str:
        return self.message

    def evaluate(self, ctx: InvoiceContext) -> Optional[Finding]:
        if not self.applies(ctx) or not self.violated(ctx):
            return None
        return Finding(
            code=self.code,
            severity=self.severity,
            message=self.describe(ctx),
            fix=self.fix,
        )

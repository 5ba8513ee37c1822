from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Level(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


class _ReportModel(BaseModel):
    # Serialized form uses the camelCase keys of the invoice payload.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Finding(_ReportModel):
    code: str
    severity: Severity
    message: str
    fix: str


class NormalizedMetadata(_ReportModel):
    supplier_vat: Any = ""
    customer_vat: Any = ""
    date: Any = ""
    currency: Any = "ILS"
    vat: Any = ""
    total: Any = ""


class InvoiceReport(_ReportModel):
    level: Level
    score: int = Field(ge=0, le=100)
    issues: List[Finding] = Field(default_factory=list)
    meta: NormalizedMetadata = Field(default_factory=NormalizedMetadata)
    # In-process summary only; the serialized report is {level, score, issues, meta}.
    totals: Dict[Severity, int] = Field(default_factory=dict, exclude=True)

    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]

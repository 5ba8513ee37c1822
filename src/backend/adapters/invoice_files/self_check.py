from __future__ import annotations

from dataclasses import dataclass

from clearedge.compliance_engine import Level, validate_invoice

from .decoding import csv_to_record
from .samples import SAMPLE_INVOICE_CSV, sample_invoice


@dataclass(frozen=True)
class SelfCheckResult:
    name: str
    passed: bool
    details: str = ""


def _check_sample_integrity() -> SelfCheckResult:
    sample = sample_invoice()
    ok = sample.get("total") == 1000
    return SelfCheckResult("sample invoice integrity", ok, "OK" if ok else "wrong values")


def _check_sample_validation() -> SelfCheckResult:
    report = validate_invoice(sample_invoice())
    ok = report.level == Level.GREEN and "VAT_MISMATCH" in report.codes()
    return SelfCheckResult("validate(sample) VAT_MISMATCH+GREEN", ok, f"level={report.level.value}")


def _check_csv_decoding() -> SelfCheckResult:
    record = csv_to_record(SAMPLE_INVOICE_CSV)
    ok = record.get("supplierVat") == "512345679" and record.get("total") == 1000
    return SelfCheckResult("csv_to_record parse", ok, repr(record))


SELF_CHECKS = (_check_sample_integrity, _check_sample_validation, _check_csv_decoding)


def run_self_checks() -> list[SelfCheckResult]:
    results: list[SelfCheckResult] = []
    for check in SELF_CHECKS:
        try:
            results.append(check())
        except Exception as exc:  # a broken check is a failed check
            results.append(SelfCheckResult(check.__name__.lstrip("_"), False, str(exc)))
    return results

from decimal import Decimal

import pytest

from clearedge.compliance_engine.context import compute_vat_breakdown, quantize_amount
from clearedge.compliance_engine.models import Severity
from clearedge.compliance_engine.rules.vat_arithmetic import (
    SUBTOTAL_NOT_POSITIVE,
    VAT_RATE_MISMATCH,
    format_rate,
)


def test_sample_amounts_mismatch_the_rate(make_record, make_ctx):
    # subtotal 830 -> expected 141.10, stated 170
    finding = VAT_RATE_MISMATCH().evaluate(make_ctx(make_record()))
    assert finding is not None
    assert finding.severity == Severity.MEDIUM
    assert "17%" in finding.message
    assert SUBTOTAL_NOT_POSITIVE().evaluate(make_ctx(make_record())) is None


def test_consistent_vat_passes(make_record, make_ctx):
    # 1000 net + 170 VAT
    assert VAT_RATE_MISMATCH().evaluate(make_ctx(make_record(total=1170, vat=170))) is None


def test_tolerance_is_inclusive_of_one_unit(make_record, make_ctx):
    # subtotal 1000 -> expected 170.00; |170 - 171| == 1 is within tolerance
    assert VAT_RATE_MISMATCH().evaluate(make_ctx(make_record(total=1171, vat=171))) is None
    assert VAT_RATE_MISMATCH().evaluate(make_ctx(make_record(total=1171.5, vat=171.5))) is not None


def test_breakdown_rounds_expected_vat_to_cents():
    breakdown = compute_vat_breakdown(Decimal("1000"), Decimal("170"))
    assert breakdown.subtotal == Decimal("830")
    assert breakdown.expected_vat == Decimal("141.10")
    assert breakdown.difference == Decimal("28.90")


def test_quantize_rounds_half_up():
    assert quantize_amount(Decimal("0.125")) == Decimal("0.13")
    assert quantize_amount(Decimal("-0.125")) == Decimal("-0.13")


@pytest.mark.parametrize("total, vat", [(100, 100), (100, 150), (0, 0)])
def test_non_positive_subtotal_fires(make_record, make_ctx, total, vat):
    finding = SUBTOTAL_NOT_POSITIVE().evaluate(make_ctx(make_record(total=total, vat=vat)))
    assert finding is not None
    assert finding.code == "SUBTOTAL_NEG"
    assert finding.severity == Severity.HIGH


def test_negative_subtotal_also_mismatches(make_record, make_ctx):
    ctx = make_ctx(make_record(total=100, vat=150))
    assert VAT_RATE_MISMATCH().evaluate(ctx) is not None
    assert SUBTOTAL_NOT_POSITIVE().evaluate(ctx) is not None


@pytest.mark.parametrize(
    "overrides",
    [
        {"total": "1000"},
        {"vat": "170"},
        {"total": None},
        {"vat": ...},
        {"total": True},
        {"total": float("nan")},
        {"vat": float("inf")},
    ],
)
def test_arithmetic_skipped_unless_both_numeric(make_record, make_ctx, overrides):
    ctx = make_ctx(make_record(**overrides))
    assert VAT_RATE_MISMATCH().evaluate(ctx) is None
    assert SUBTOTAL_NOT_POSITIVE().evaluate(ctx) is None


def test_decimal_and_float_amounts_are_numeric(make_record, make_ctx):
    ctx = make_ctx(make_record(total=Decimal("1170.00"), vat=170.0))
    assert VAT_RATE_MISMATCH().evaluate(ctx) is None


def test_huge_amounts_do_not_raise(make_record, make_ctx):
    ctx = make_ctx(make_record(total=1e300, vat=1.0))
    assert VAT_RATE_MISMATCH().evaluate(ctx) is not None
    assert SUBTOTAL_NOT_POSITIVE().evaluate(ctx) is None


def test_format_rate():
    assert format_rate() == "17%"
    assert format_rate(Decimal("0.075")) == "7.5%"

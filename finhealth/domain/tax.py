"""Income tax engine - old vs new regime comparison on fixed FY 2024-25 slabs"""

import logging
import math
from typing import Sequence

from finhealth.domain.models import RegimeBreakdown, TaxComparisonResult, TaxInput, TaxSlab
from finhealth.utils.numbers import ensure_finite, round_half_up

logger = logging.getLogger(__name__)

OLD_REGIME_SLABS = (
    TaxSlab(0, 250_000, 0.0),
    TaxSlab(250_000, 500_000, 0.05),
    TaxSlab(500_000, 1_000_000, 0.20),
    TaxSlab(1_000_000, math.inf, 0.30),
)

NEW_REGIME_SLABS = (
    TaxSlab(0, 300_000, 0.0),
    TaxSlab(300_000, 600_000, 0.05),
    TaxSlab(600_000, 900_000, 0.10),
    TaxSlab(900_000, 1_200_000, 0.15),
    TaxSlab(1_200_000, 1_500_000, 0.20),
    TaxSlab(1_500_000, math.inf, 0.30),
)

STANDARD_DEDUCTION = 50_000  # salaried taxpayers, both regimes
CESS_RATE = 0.04  # health & education cess on slab tax


def calculate_slab_tax(taxable_income: float, slabs: Sequence[TaxSlab]) -> float:
    """
    Progressive (marginal) tax over contiguous slabs.

    Each slab taxes only the slice of income inside [min_income, max_income),
    so boundaries are shared endpoints and nothing is counted twice.
    """
    tax = 0.0
    for slab in slabs:
        if taxable_income > slab.min_income:
            taxable_in_slab = min(taxable_income, slab.max_income) - slab.min_income
            tax += taxable_in_slab * slab.rate
    return tax


def _validate(tax_input: TaxInput) -> None:
    ensure_finite(
        annual_income=tax_input.annual_income,
        section_80_deductions=tax_input.section_80_deductions,
    )


def _breakdown(regime: str, gross_income: float, deductions: float, slabs: Sequence[TaxSlab]) -> RegimeBreakdown:
    taxable_income = max(0, gross_income - deductions)
    tax_before_cess = calculate_slab_tax(taxable_income, slabs)
    cess = tax_before_cess * CESS_RATE

    return RegimeBreakdown(
        regime=regime,
        gross_income=gross_income,
        deductions=deductions,
        taxable_income=taxable_income,
        tax_before_cess=tax_before_cess,
        cess=cess,
        total_tax=tax_before_cess + cess,
    )


def calculate_old_regime_tax(tax_input: TaxInput) -> RegimeBreakdown:
    """Old regime: standard deduction plus section 80 deductions"""
    _validate(tax_input)
    standard = STANDARD_DEDUCTION if tax_input.is_salaried else 0
    deductions = standard + tax_input.section_80_deductions
    return _breakdown("Old", tax_input.annual_income, deductions, OLD_REGIME_SLABS)


def calculate_new_regime_tax(tax_input: TaxInput) -> RegimeBreakdown:
    """New regime: standard deduction only, itemized deductions are not allowed"""
    _validate(tax_input)
    deductions = STANDARD_DEDUCTION if tax_input.is_salaried else 0
    return _breakdown("New", tax_input.annual_income, deductions, NEW_REGIME_SLABS)


def compare_tax_regimes(tax_input: TaxInput) -> TaxComparisonResult:
    """
    Compute both regimes and recommend the cheaper one.

    Rules:
    - Old wins ties (old.total_tax <= new.total_tax)
    - savings = |old - new|, rounded to the nearest rupee
    - savings_percentage = savings / lower tax * 100 (2 decimals), 0 when
      the lower tax is 0
    """
    old_regime = calculate_old_regime_tax(tax_input)
    new_regime = calculate_new_regime_tax(tax_input)

    recommended = "Old" if old_regime.total_tax <= new_regime.total_tax else "New"
    savings = abs(old_regime.total_tax - new_regime.total_tax)
    lower_tax = min(old_regime.total_tax, new_regime.total_tax)
    savings_percentage = savings / lower_tax * 100 if lower_tax > 0 else 0.0

    logger.debug(
        "Tax regimes compared",
        extra={
            "old_total_tax": old_regime.total_tax,
            "new_total_tax": new_regime.total_tax,
            "recommended_regime": recommended,
        },
    )

    return TaxComparisonResult(
        old_regime=old_regime,
        new_regime=new_regime,
        recommended_regime=recommended,
        savings=round_half_up(savings),
        savings_percentage=round(savings_percentage, 2),
    )

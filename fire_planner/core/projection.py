from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

from loguru import logger

from fire_planner.core.rates import annualize, percent_to_decimal
from fire_planner.schemas.profile import FinancialProfile
from fire_planner.schemas.projection import Phase, ProjectionSummary, YearRecord


def phase_for_age(age: int, target_age: int) -> Phase:
    """The target age itself is already a distribution year."""
    return Phase.ACCUMULATION if age < target_age else Phase.DISTRIBUTION


def run_simulation(
    profile: FinancialProfile,
    start_year: Optional[int] = None,
) -> List[YearRecord]:
    """
    Build a year-by-year table from currentAge..lifeExpectancy (inclusive).

    Order of operations (per year):
      1) Returns on the START balance only (real rate, annual compounding).
      2) Accumulation (age < targetAge): add 12 x monthly contribution.
         Distribution (age >= targetAge): subtract 12 x monthly living cost.
      3) Record row; the end balance carries into the next year.

    Balances may go negative and the run always reaches lifeExpectancy.
    lifeExpectancy < currentAge yields an empty list.
    """
    annual_contribution = annualize(profile.monthlyContribution)
    annual_expenses = annualize(profile.monthlyLivingCost)
    real_rate = percent_to_decimal(profile.realReturnRate)

    year0 = start_year if start_year is not None else datetime.now().year

    balance = float(profile.currentNetWorth)
    depleted_at: Optional[int] = None

    records: List[YearRecord] = []
    for step, age in enumerate(range(profile.currentAge, profile.lifeExpectancy + 1)):
        phase = phase_for_age(age, profile.targetAge)
        start_balance = balance

        returns = start_balance * real_rate

        contribution = 0.0
        withdrawal = 0.0
        if phase is Phase.ACCUMULATION:
            contribution = annual_contribution
            balance = start_balance + returns + contribution
        else:
            withdrawal = annual_expenses
            balance = start_balance + returns - withdrawal

        if balance < 0 and depleted_at is None:
            depleted_at = age

        records.append(
            YearRecord(
                year=year0 + step,
                age=age,
                startBalance=start_balance,
                returns=returns,
                contribution=contribution,
                withdrawal=withdrawal,
                endBalance=balance,
                phase=phase,
            )
        )

    if depleted_at is not None:
        logger.debug(f"Projection runs out of money at age {depleted_at}")

    return records


def summarize_projection(records: Sequence[YearRecord], target_age: int) -> ProjectionSummary:
    """Read retirement/peak/final balances and the depletion age off a projection."""
    if not records:
        return ProjectionSummary(years=0)

    retirement_balance = next(
        (r.startBalance for r in records if r.age == target_age),
        None,
    )
    peak = max(records, key=lambda r: r.endBalance)
    depletion_age = next((r.age for r in records if r.endBalance < 0), None)

    return ProjectionSummary(
        years=len(records),
        retirementBalance=retirement_balance,
        peakBalance=peak.endBalance,
        peakAge=peak.age,
        finalBalance=records[-1].endBalance,
        depletionAge=depletion_age,
    )

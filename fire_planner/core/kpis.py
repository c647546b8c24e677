"""KPI calculator: summary metrics derived from the profile alone."""

from fire_planner.core.rates import (
    MONTHS_PER_YEAR,
    annualize,
    percent_to_decimal,
    round_half_away,
)
from fire_planner.schemas.kpis import FiniteRunway, KPISnapshot, UnboundedRunway
from fire_planner.schemas.profile import FinancialProfile


def compute_kpis(profile: FinancialProfile) -> KPISnapshot:
    """Compute the KPI snapshot for a profile.

    Total over its inputs: a zero withdrawal rate gives a zero FIRE number and
    zero living costs give an unbounded runway, never a division error.
    """
    annual_living_cost = annualize(profile.monthlyLivingCost)
    withdrawal_rate = percent_to_decimal(profile.safeWithdrawalRate)

    # annual cost / withdrawal rate, e.g. 40,000 / 0.04 = 1,000,000
    fire_number = annual_living_cost / withdrawal_rate if profile.safeWithdrawalRate > 0 else 0.0

    wealth_gap = max(0.0, fire_number - profile.currentNetWorth)

    # monthly income the current net worth sustains at the withdrawal rate
    perpetual_income = (profile.currentNetWorth * withdrawal_rate) / MONTHS_PER_YEAR

    if annual_living_cost > 0:
        runway = FiniteRunway(years=round_half_away(profile.currentNetWorth / annual_living_cost, 1))
    else:
        runway = UnboundedRunway()

    return KPISnapshot(
        annualLivingCost=annual_living_cost,
        fireNumber=fire_number,
        wealthGap=wealth_gap,
        perpetualIncome=perpetual_income,
        runwayYears=runway,
    )

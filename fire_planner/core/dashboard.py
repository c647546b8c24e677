"""Everything the dashboard renders for one profile, computed in one go."""

from __future__ import annotations

from typing import Optional

from fire_planner.core.kpis import compute_kpis
from fire_planner.core.projection import run_simulation, summarize_projection
from fire_planner.core.rates import nominal_return
from fire_planner.schemas.dashboard import DashboardResponse
from fire_planner.schemas.profile import FinancialProfile


def build_dashboard(profile: FinancialProfile, start_year: Optional[int] = None) -> DashboardResponse:
    records = run_simulation(profile, start_year=start_year)
    return DashboardResponse(
        profile=profile,
        kpis=compute_kpis(profile),
        records=records,
        summary=summarize_projection(records, profile.targetAge),
        nominalReturnRate=nominal_return(profile.realReturnRate, profile.inflationRate),
    )

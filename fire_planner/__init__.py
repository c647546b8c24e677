"""FIRE planner: net-worth projection and retirement-readiness KPIs."""

from fire_planner.core.dashboard import build_dashboard
from fire_planner.core.kpis import compute_kpis
from fire_planner.core.projection import phase_for_age, run_simulation, summarize_projection
from fire_planner.core.rates import format_currency, nominal_return
from fire_planner.schemas.kpis import FiniteRunway, KPISnapshot, UnboundedRunway
from fire_planner.schemas.profile import DEFAULT_PROFILE, FinancialProfile, ProfilePayload
from fire_planner.schemas.projection import Phase, ProjectionSummary, YearRecord

__all__ = [
    "FinancialProfile",
    "ProfilePayload",
    "DEFAULT_PROFILE",
    "Phase",
    "YearRecord",
    "ProjectionSummary",
    "KPISnapshot",
    "FiniteRunway",
    "UnboundedRunway",
    "compute_kpis",
    "run_simulation",
    "summarize_projection",
    "phase_for_age",
    "build_dashboard",
    "nominal_return",
    "format_currency",
]

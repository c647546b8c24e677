from __future__ import annotations

from fire_planner.schemas.profile import DEFAULT_PROFILE, FinancialProfile


def make_profile(**overrides) -> FinancialProfile:
    values = DEFAULT_PROFILE.model_dump()
    values.update(overrides)
    return FinancialProfile(**values)

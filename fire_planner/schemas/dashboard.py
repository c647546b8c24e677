"""Request/response contracts for the HTTP API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fire_planner.schemas.kpis import KPISnapshot
from fire_planner.schemas.profile import FinancialProfile, ProfilePayload
from fire_planner.schemas.projection import ProjectionSummary, YearRecord


class SimulationRequest(ProfilePayload):
    """Profile plus an optional calendar year for the first record."""

    startYear: Optional[int] = Field(
        default=None,
        description="Calendar year of the first record; defaults to the current year.",
    )


class SimulationResponse(BaseModel):
    records: List[YearRecord]
    summary: ProjectionSummary


class DashboardResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    profile: FinancialProfile
    kpis: KPISnapshot
    records: List[YearRecord]
    summary: ProjectionSummary
    nominalReturnRate: float


class NominalRateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    realRate: float
    inflationRate: float


class NominalRateResponse(BaseModel):
    nominalRate: float


class HealthResponse(BaseModel):
    status: str

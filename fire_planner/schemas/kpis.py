"""Data contracts for the KPI snapshot."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class FiniteRunway(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["finite"] = "finite"
    years: float


class UnboundedRunway(BaseModel):
    """Runway when there are no living costs to cover."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["unbounded"] = "unbounded"


Runway = Annotated[Union[FiniteRunway, UnboundedRunway], Field(discriminator="kind")]


class KPISnapshot(BaseModel):
    """Summary metrics derived from the profile alone (no time-stepping)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    annualLivingCost: float
    fireNumber: float
    wealthGap: float = Field(..., ge=0)
    perpetualIncome: float
    runwayYears: Runway

    @property
    def goal_met(self) -> bool:
        return self.wealthGap == 0

"""Data contracts for the financial profile."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FinancialProfile(BaseModel):
    """Inputs for one KPI/projection run.

    Rates are percentages (``5.5`` means 5.5%). Age ordering is not enforced
    here; the engine has a defined policy for out-of-order ages.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    currentAge: int
    targetAge: int
    lifeExpectancy: int

    currentNetWorth: float = Field(..., description="May be negative (debt).")
    monthlyContribution: float = Field(
        ...,
        ge=0,
        description="Added every month before the target age.",
    )
    inflationRate: float
    realReturnRate: float
    monthlyLivingCost: float = Field(
        ...,
        ge=0,
        description="Withdrawn every month from the target age onwards.",
    )
    safeWithdrawalRate: float


class ProfilePayload(FinancialProfile):
    """Profile as accepted over HTTP, with the age ordering checked."""

    @model_validator(mode="after")
    def ensure_age_order(self) -> "ProfilePayload":
        if self.targetAge < self.currentAge:
            raise ValueError("targetAge must not be lower than currentAge")
        if self.lifeExpectancy < self.targetAge:
            raise ValueError("lifeExpectancy must not be lower than targetAge")
        return self

    def to_profile(self) -> FinancialProfile:
        fields = set(FinancialProfile.model_fields)
        return FinancialProfile.model_validate(self.model_dump(include=fields))


DEFAULT_PROFILE = FinancialProfile(
    currentAge=30,
    targetAge=55,
    lifeExpectancy=85,
    currentNetWorth=50000,
    monthlyContribution=2000,
    inflationRate=3.5,
    realReturnRate=5.5,
    monthlyLivingCost=5000,
    safeWithdrawalRate=4.0,
)

"""Data contracts for the year-by-year projection."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Phase(str, Enum):
    ACCUMULATION = "Accumulation"
    DISTRIBUTION = "Distribution"


class YearRecord(BaseModel):
    """Single row of the projection.

    endBalance = startBalance + returns + contribution - withdrawal
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    age: int
    startBalance: float
    returns: float
    contribution: float
    withdrawal: float
    endBalance: float
    phase: Phase


class ProjectionSummary(BaseModel):
    """Headline figures read off a projection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    years: int
    retirementBalance: Optional[float] = None
    peakBalance: Optional[float] = None
    peakAge: Optional[int] = None
    finalBalance: Optional[float] = None
    # first age whose endBalance is below zero
    depletionAge: Optional[int] = None

"""
Risk Assessment Schemas.

A RiskAssessment is created fresh on every pre-fill request and is never
mutated afterwards. User edits produce a new instance via
``caribcp.engine.scoring.reassess``.
"""

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RiskSource(StrEnum):
    BUSINESS_TYPE = "business_type"
    LOCATION = "location"
    COMBINED = "combined"


class RiskAssessment(BaseModel):
    """One scored hazard in the ranked risk list."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    hazard_id: str
    hazard: str                      # Display name
    likelihood: str                  # e.g. "likely"
    severity: str                    # e.g. "major"
    risk_score: int                  # likelihood weight × severity weight
    risk_level: str                  # "Low" | "Medium" | "High" | "Extreme" (scheme-dependent)
    source: Optional[RiskSource] = None
    planning_measures: str = ""


class PriorRating(BaseModel):
    """Likelihood/severity a user already entered for a hazard."""
    likelihood: Optional[str] = None
    severity: Optional[str] = None

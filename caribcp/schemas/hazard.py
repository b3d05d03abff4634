"""
Hazard & Location Schemas.

Reference entities created at catalog load time (Hazard, LocationHazardSet)
and the per-request LocationProfile supplied by the caller.
"""

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ── Enums ──────────────────────────────────────────────────────────────


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"

    @property
    def rank(self) -> int:
        """Total order: low < medium < high < very_high."""
        return _RISK_LEVEL_RANK[self]


_RISK_LEVEL_RANK: dict[RiskLevel, int] = {
    RiskLevel.LOW: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.HIGH: 3,
    RiskLevel.VERY_HIGH: 4,
}


class Frequency(StrEnum):
    RARE = "rare"
    UNLIKELY = "unlikely"
    POSSIBLE = "possible"
    LIKELY = "likely"
    ALMOST_CERTAIN = "almost_certain"


class Impact(StrEnum):
    MINIMAL = "minimal"
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CATASTROPHIC = "catastrophic"


# ── Hazard ─────────────────────────────────────────────────────────────


class Hazard(BaseModel):
    """A named risk category with its base rating."""
    model_config = ConfigDict(frozen=True)

    hazard_id: str
    name: str
    risk_level: RiskLevel
    frequency: Frequency = Frequency.POSSIBLE
    impact: Impact = Impact.MODERATE


class LocationHazardSet(BaseModel):
    """
    Per-country hazard exposure.

    Sub-region, coastal and urban lists are appended to the base list
    when the caller's location matches them.
    """
    model_config = ConfigDict(frozen=True)

    country: str
    country_code: str
    base_hazards: list[Hazard] = Field(default_factory=list)
    sub_regions: dict[str, list[Hazard]] = Field(default_factory=dict)
    coastal_modifiers: list[Hazard] = Field(default_factory=list)
    urban_modifiers: list[Hazard] = Field(default_factory=list)


class Country(BaseModel):
    code: str
    name: str


# ── Location ───────────────────────────────────────────────────────────


class LocationProfile(BaseModel):
    """Caller-supplied location attributes. Not persisted."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    country_code: str
    country: Optional[str] = None
    sub_region: Optional[str] = None
    near_coast: bool = False
    urban_area: bool = False

"""
Pre-Fill Request/Response Schemas.

Wire shape is camelCase (``businessTypeId``, ``preFilledFields`` …); Python
attributes are snake_case. Both names are accepted on input.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from caribcp.schemas.action_plan import ActionPlan
from caribcp.schemas.assessment import PriorRating, RiskAssessment
from caribcp.schemas.hazard import LocationProfile
from caribcp.schemas.industry import IndustryProfile

Locale = Literal["en", "es", "fr"]
LOCALES = ("en", "es", "fr")


def _default_locale() -> str:
    from caribcp.config import settings

    return settings.default_locale if settings.default_locale in LOCALES else "en"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PreFillRequest(_CamelModel):
    """Typed input contract for one pre-fill computation."""
    business_type_id: str
    country_code: str
    parish: Optional[str] = None
    near_coast: bool = False
    urban_area: bool = False
    locale: Locale = Field(default_factory=_default_locale)
    existing_field_values: dict[str, dict[str, Any]] = Field(default_factory=dict)
    prior_ratings: dict[str, PriorRating] = Field(default_factory=dict)

    def to_location(self, country_name: Optional[str] = None) -> LocationProfile:
        return LocationProfile(
            country_code=self.country_code,
            country=country_name,
            sub_region=self.parish,
            near_coast=self.near_coast,
            urban_area=self.urban_area,
        )


class StrategyRecommendation(_CamelModel):
    """Strategy ids per bucket. Repeats are kept unless deduplication is enabled."""
    prevention: list[str] = Field(default_factory=list)
    response: list[str] = Field(default_factory=list)
    recovery: list[str] = Field(default_factory=list)
    narrative: dict[str, list[str]] = Field(default_factory=dict)

    def all_ids(self) -> list[str]:
        return [*self.prevention, *self.response, *self.recovery]


class PreFillBundle(_CamelModel):
    """Engine output: default answers and example hints per wizard step."""
    industry: IndustryProfile
    location: LocationProfile
    hazards: list[RiskAssessment] = Field(default_factory=list)
    pre_filled_fields: dict[str, dict[str, Any]] = Field(default_factory=dict)
    contextual_examples: dict[str, dict[str, list[str]]] = Field(default_factory=dict)
    recommended_strategies: StrategyRecommendation = Field(default_factory=StrategyRecommendation)
    action_plans: list[ActionPlan] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase keys for the form layer."""
        return self.model_dump(mode="json", by_alias=True)

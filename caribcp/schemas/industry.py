"""
Industry Profile Schemas.

An IndustryProfile is the reference description of a business type:
its typical hazard vulnerabilities, essential functions and the example
text fragments used to pre-fill the business overview.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from caribcp.schemas.hazard import RiskLevel


class IndustryCategory(StrEnum):
    RETAIL = "retail"
    HOSPITALITY = "hospitality"
    SERVICES = "services"
    INDUSTRIAL = "industrial"
    OTHER = "other"


class Vulnerability(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    hazard_id: str
    default_risk_level: RiskLevel


class EssentialFunctions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    core: list[str] = Field(default_factory=list)
    support: list[str] = Field(default_factory=list)
    administrative: list[str] = Field(default_factory=list)


class MinimumResources(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    staff: str = ""
    equipment: list[str] = Field(default_factory=list)
    utilities: list[str] = Field(default_factory=list)
    space: str = ""


class IndustryExamples(BaseModel):
    """
    Example text bundles.

    Strings may carry placeholder tokens: [NEIGHBORHOOD], [AREA], [ISLAND].
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_purpose: list[str] = Field(default_factory=list)
    products_services: list[str] = Field(default_factory=list)
    unique_selling_points: list[str] = Field(default_factory=list)
    key_personnel: list[str] = Field(default_factory=list)
    minimum_resources: list[str] = Field(default_factory=list)
    customer_base: list[str] = Field(default_factory=list)


class IndustryProfile(BaseModel):
    """Reference description of one business type."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    local_name: str = ""
    category: IndustryCategory = IndustryCategory.OTHER
    vulnerabilities: list[Vulnerability] = Field(default_factory=list)
    essential_functions: EssentialFunctions = Field(default_factory=EssentialFunctions)
    critical_suppliers: list[str] = Field(default_factory=list)
    minimum_resources: MinimumResources = Field(default_factory=MinimumResources)
    typical_operating_hours: str = ""
    examples: IndustryExamples = Field(default_factory=IndustryExamples)

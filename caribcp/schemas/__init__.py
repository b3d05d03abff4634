"""
Pydantic schemas shared across catalog, engine, planning and pre-fill.
"""

from caribcp.schemas.action_plan import (
    ActionItem,
    ActionPlan,
    ActionPlanTemplate,
    BusinessTypeModifier,
    TaskPriority,
)
from caribcp.schemas.assessment import PriorRating, RiskAssessment, RiskSource
from caribcp.schemas.hazard import (
    Country,
    Frequency,
    Hazard,
    Impact,
    LocationHazardSet,
    LocationProfile,
    RiskLevel,
)
from caribcp.schemas.industry import (
    EssentialFunctions,
    IndustryCategory,
    IndustryExamples,
    IndustryProfile,
    MinimumResources,
    Vulnerability,
)
from caribcp.schemas.prefill import PreFillBundle, PreFillRequest, StrategyRecommendation

__all__ = [
    "ActionItem",
    "ActionPlan",
    "ActionPlanTemplate",
    "BusinessTypeModifier",
    "Country",
    "EssentialFunctions",
    "Frequency",
    "Hazard",
    "Impact",
    "IndustryCategory",
    "IndustryExamples",
    "IndustryProfile",
    "LocationHazardSet",
    "LocationProfile",
    "MinimumResources",
    "PreFillBundle",
    "PreFillRequest",
    "PriorRating",
    "RiskAssessment",
    "RiskLevel",
    "RiskSource",
    "StrategyRecommendation",
    "TaskPriority",
    "Vulnerability",
]

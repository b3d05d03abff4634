"""
Strategy and action-plan matching for priority hazards.
"""

from caribcp.planning.action_plans import ActionPlanGenerator, is_priority
from caribcp.planning.business_type import BusinessTypeClassifier, KeywordRule
from caribcp.planning.hazard_matching import (
    HazardTemplateMatcher,
    MatchResult,
    MatchRule,
    normalize_hazard_name,
)
from caribcp.planning.strategies import StrategyRecommender

__all__ = [
    "ActionPlanGenerator",
    "BusinessTypeClassifier",
    "HazardTemplateMatcher",
    "KeywordRule",
    "MatchResult",
    "MatchRule",
    "StrategyRecommender",
    "is_priority",
    "normalize_hazard_name",
]

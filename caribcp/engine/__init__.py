"""
Risk scoring engine: schemes, amplification and the ranked risk list.
"""

from caribcp.engine.amplification import AmplificationRule, LocationAmplifier
from caribcp.engine.risk_engine import MergedHazard, RiskScoringEngine, merge_hazards
from caribcp.engine.scoring import (
    DYNAMIC,
    INTERACTIVE,
    PRACTICAL,
    ScoringScheme,
    calculate_risk_score,
    get_risk_level,
    get_scheme,
    reassess,
)

__all__ = [
    "AmplificationRule",
    "DYNAMIC",
    "INTERACTIVE",
    "LocationAmplifier",
    "MergedHazard",
    "PRACTICAL",
    "RiskScoringEngine",
    "ScoringScheme",
    "calculate_risk_score",
    "get_risk_level",
    "get_scheme",
    "merge_hazards",
    "reassess",
]

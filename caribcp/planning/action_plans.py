"""
Action Plan Generator: priority hazards → concrete action plans.

Only hazards whose risk-level label contains "high" or "extreme"
(case-insensitive) get a plan. Each plan starts from the matched hazard
template (or the generic plan when nothing matches) and is extended with
the business type's additional resources, tasks and considerations.

Malformed risk input yields no plans; it never raises.
"""

from typing import Any, Mapping, Optional, Sequence

import structlog

from caribcp.catalog.action_plan_data import (
    BUSINESS_TYPE_MODIFIERS,
    GENERIC_ACTION_PLAN,
    HAZARD_ACTION_PLANS,
)
from caribcp.planning.business_type import GENERAL, BusinessTypeClassifier
from caribcp.planning.hazard_matching import HazardTemplateMatcher
from caribcp.schemas.action_plan import ActionPlan, ActionPlanTemplate, BusinessTypeModifier
from caribcp.schemas.assessment import RiskAssessment

logger = structlog.get_logger(__name__)

PRIORITY_MARKERS = ("high", "extreme")

_HAZARD_KEYS = ("hazard", "hazardName", "hazard_name")
_LEVEL_KEYS = ("riskLevel", "risk_level")
_SCORE_KEYS = ("riskScore", "risk_score")


def is_priority(risk_level: str) -> bool:
    level = (risk_level or "").lower()
    return any(marker in level for marker in PRIORITY_MARKERS)


def _first(entry: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        value = entry.get(key)
        if value not in (None, ""):
            return value
    return None


def normalize_risk_entries(risks: Any) -> Optional[list[tuple[str, str, int]]]:
    """
    (hazard, risk level, score) per entry, or None when the input is malformed.

    Accepts RiskAssessment objects and camelCase or snake_case mappings.
    """
    if not isinstance(risks, (list, tuple)):
        return None
    entries = []
    for risk in risks:
        if isinstance(risk, RiskAssessment):
            entries.append((risk.hazard, risk.risk_level, risk.risk_score))
            continue
        if not isinstance(risk, Mapping):
            return None
        hazard = _first(risk, _HAZARD_KEYS)
        level = _first(risk, _LEVEL_KEYS)
        if hazard is None or level is None:
            return None
        score = _first(risk, _SCORE_KEYS) or 0
        try:
            score = int(score)
        except (TypeError, ValueError):
            score = 0
        entries.append((str(hazard), str(level), score))
    return entries


class ActionPlanGenerator:
    """Builds action plans for priority hazards."""

    def __init__(
        self,
        templates: Optional[dict[str, ActionPlanTemplate]] = None,
        modifiers: Optional[dict[str, BusinessTypeModifier]] = None,
        generic: ActionPlanTemplate = GENERIC_ACTION_PLAN,
        matcher: Optional[HazardTemplateMatcher] = None,
        classifier: Optional[BusinessTypeClassifier] = None,
    ):
        self.templates = HAZARD_ACTION_PLANS if templates is None else templates
        self.modifiers = BUSINESS_TYPE_MODIFIERS if modifiers is None else modifiers
        self.generic = generic
        self.matcher = matcher or HazardTemplateMatcher(self.templates)
        self.classifier = classifier or BusinessTypeClassifier()

    def generate(
        self,
        risks: Any,
        business_type: Optional[str] = None,
        business_description: str = "",
    ) -> list[ActionPlan]:
        """
        Action plans for the priority hazards in ``risks``.

        Args:
            risks: RiskAssessment list, or a list of risk-matrix rows
                   (``{"hazard", "riskLevel", "riskScore"}``)
            business_type: Explicit business type; inferred from
                           ``business_description`` when omitted
            business_description: Free text used for inference
        """
        entries = normalize_risk_entries(risks)
        if entries is None:
            logger.warning(
                "malformed_risk_input",
                input_type=type(risks).__name__,
            )
            return []

        resolved_type = business_type or self.classifier.classify(business_description)
        plans = [
            self.build_plan(hazard, level, resolved_type)
            for hazard, level, _ in entries
            if is_priority(level)
        ]
        logger.info(
            "action_plans_generated",
            business_type=resolved_type,
            risks=len(entries),
            plans=len(plans),
        )
        return plans

    def generate_from_form(self, step_data: Mapping[str, Any], translator=None) -> list[ActionPlan]:
        """
        Plans from a BUSINESS_OVERVIEW + RISK_ASSESSMENT form snapshot.

        The risk matrix may sit under its English, legacy or localized
        field name.
        """
        from caribcp.prefill.migration import find_risk_matrix

        business_type = self.classifier.infer_from_overview(step_data.get("BUSINESS_OVERVIEW"))
        return self.generate(find_risk_matrix(step_data, translator), business_type=business_type)

    def build_plan(self, hazard: str, risk_level: str, business_type: str) -> ActionPlan:
        result = self.matcher.explain_match(hazard)
        if result.matched:
            template = self.templates[result.template_key]
        else:
            logger.info("hazard_template_fallback", hazard=hazard)
            template = self.generic

        modifier = self.modifiers.get(business_type) or BusinessTypeModifier()
        return ActionPlan(
            hazard=hazard,
            risk_level=risk_level,
            business_type=business_type or GENERAL,
            template_key=result.template_key,
            resources_needed=[*template.resources_needed, *modifier.additional_resources],
            immediate_actions=[*template.immediate_actions, *modifier.immediate_actions],
            short_term_actions=[*template.short_term_actions, *modifier.short_term_actions],
            medium_term_actions=list(template.medium_term_actions),
            long_term_reduction=list(template.long_term_reduction),
            specific_considerations=list(modifier.specific_considerations),
        )

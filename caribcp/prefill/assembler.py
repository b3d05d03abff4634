"""
Pre-Fill Assembler: industry + location → PreFillBundle.

Pipeline for one request:
1. Resolve the industry profile (unknown → no bundle)
2. Score the ranked risk list, honoring prior user ratings
3. Pick and localize the example bundle
4. Infer the business type and build action plans for priority hazards
5. Recommend strategies
6. Lay out default field values per wizard step

Field names are localized through the translation service. The bundle
is never merged here; ``apply`` merges it into the caller's draft
without overwriting anything already filled.
"""

from datetime import date
from typing import Any, Optional

import structlog

from caribcp.catalog.repository import HazardRepository, IndustryRepository
from caribcp.engine.risk_engine import RiskScoringEngine
from caribcp.i18n.translations import TranslationManager, get_translator
from caribcp.planning.action_plans import ActionPlanGenerator
from caribcp.planning.strategies import StrategyRecommender
from caribcp.prefill import narratives
from caribcp.prefill.examples import ExampleBuilder, first_or_empty
from caribcp.prefill.merge import merge_prefill_data
from caribcp.prefill.migration import extract_prior_ratings, from_legacy_form
from caribcp.schemas.action_plan import ActionPlan
from caribcp.schemas.assessment import RiskAssessment
from caribcp.schemas.hazard import LocationProfile
from caribcp.schemas.industry import IndustryExamples, IndustryProfile
from caribcp.schemas.prefill import PreFillBundle, PreFillRequest, StrategyRecommendation

logger = structlog.get_logger(__name__)

STEPS = (
    "BUSINESS_OVERVIEW",
    "ESSENTIAL_FUNCTIONS",
    "RISK_ASSESSMENT",
    "STRATEGIES",
    "ACTION_PLAN",
)


def _dump(model) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


class PreFillAssembler:
    """Produces the PreFillBundle for one business and location."""

    def __init__(
        self,
        hazards: HazardRepository,
        industries: IndustryRepository,
        engine: Optional[RiskScoringEngine] = None,
        action_plans: Optional[ActionPlanGenerator] = None,
        strategies: Optional[StrategyRecommender] = None,
        translator: Optional[TranslationManager] = None,
        review_interval_days: Optional[int] = None,
    ):
        from caribcp.config import settings

        self.hazards = hazards
        self.industries = industries
        self.translator = translator or get_translator()
        self.engine = engine or RiskScoringEngine(hazards, industries, translator=self.translator)
        self.action_plans = action_plans or ActionPlanGenerator()
        self.strategies = strategies or StrategyRecommender(translator=self.translator)
        self.examples = ExampleBuilder(industries, self.translator)
        self.review_interval_days = (
            settings.review_interval_days if review_interval_days is None else review_interval_days
        )

    async def resolve_location(self, request: PreFillRequest) -> LocationProfile:
        hazard_set = await self.hazards.get_location_hazard_set(request.country_code)
        return request.to_location(hazard_set.country if hazard_set else None)

    async def generate(
        self,
        request: PreFillRequest,
        today: Optional[date] = None,
    ) -> Optional[PreFillBundle]:
        """
        Build the bundle, or None when the business type is unknown.

        Args:
            request: Typed pre-fill input
            today: Clock for the next-review date; defaults to date.today()
        """
        profile = await self.industries.get_industry_profile(request.business_type_id)
        if profile is None:
            logger.info("industry_not_found", industry_id=request.business_type_id)
            return None

        locale = request.locale
        location = await self.resolve_location(request)
        prior = request.prior_ratings or extract_prior_ratings(
            request.existing_field_values, self.translator
        )

        hazards = await self.engine.assess(location, profile, prior=prior, locale=locale)

        raw_examples = await self.examples.examples_for(profile, locale)
        examples = self.examples.localize(raw_examples, location, locale)

        # Inference reads the English text so keywords match in every locale
        description = " ".join(
            (first_or_empty(profile.examples.business_purpose),
             first_or_empty(profile.examples.products_services))
        )
        business_type = self.action_plans.classifier.classify(description)
        plans = self.action_plans.generate(hazards, business_type=business_type)

        recommendation = self.strategies.recommend(
            hazards, category=profile.category.value, location=location, locale=locale
        )

        fields = {
            "BUSINESS_OVERVIEW": self.business_overview_fields(profile, examples, location, locale),
            "ESSENTIAL_FUNCTIONS": self.essential_function_fields(locale),
            "RISK_ASSESSMENT": self.risk_assessment_fields(hazards, locale),
            "STRATEGIES": self.strategy_fields(recommendation, plans, locale),
            "ACTION_PLAN": self.action_plan_fields(plans, today or date.today(), locale),
        }

        bundle = PreFillBundle(
            industry=profile,
            location=location,
            hazards=hazards,
            pre_filled_fields=fields,
            contextual_examples=self.examples.contextual_examples(profile, examples, locale),
            recommended_strategies=recommendation,
            action_plans=plans,
        )
        logger.info(
            "prefill_generated",
            industry_id=profile.id,
            country_code=location.country_code,
            locale=locale,
            business_type=business_type,
            hazards=len(hazards),
            action_plans=len(plans),
        )
        return bundle

    async def apply(
        self,
        request: PreFillRequest,
        today: Optional[date] = None,
    ) -> dict[str, dict[str, Any]]:
        """Caller's draft (legacy names migrated) with empty fields filled from the bundle."""
        existing = from_legacy_form(request.existing_field_values)
        bundle = await self.generate(request, today=today)
        if bundle is None:
            return existing
        return merge_prefill_data(existing, bundle)

    # ── Field layout ─────────────────────────────────────────────────

    def _field(self, key: str, locale: str) -> str:
        return self.translator.translate(f"fields.{key}", locale)

    def business_overview_fields(
        self,
        profile: IndustryProfile,
        examples: IndustryExamples,
        location: LocationProfile,
        locale: str,
    ) -> dict[str, Any]:
        def f(key: str) -> str:
            return self._field(key, locale)

        return {
            f("business_purpose"): first_or_empty(examples.business_purpose),
            f("products_and_services"): first_or_empty(examples.products_services),
            f("key_personnel_involved"): first_or_empty(examples.key_personnel),
            f("operating_hours"): profile.typical_operating_hours,
            f("minimum_resource_requirements"): first_or_empty(examples.minimum_resources),
            f("customer_base"): first_or_empty(examples.customer_base),
            f("unique_selling_points"): first_or_empty(examples.unique_selling_points),
            f("industry_type"): profile.name,
            f("country"): location.country or location.country_code,
            f("parish"): location.sub_region or "",
            f("near_coast"): location.near_coast,
            f("urban_area"): location.urban_area,
        }

    def essential_function_fields(self, locale: str) -> dict[str, Any]:
        rows = []
        for entry in self.translator.translate_list("functions", locale):
            rows.append({
                self._field("business_function", locale): entry.get("function", ""),
                self._field("description", locale): entry.get("description", ""),
                self._field("priority_level", locale): entry.get("priority", ""),
                self._field("maximum_acceptable_downtime", locale): entry.get("downtime", ""),
                self._field("critical_resources_needed", locale): entry.get("resources", ""),
            })
        return {self._field("business_functions", locale): rows}

    def risk_assessment_fields(self, hazards: list[RiskAssessment], locale: str) -> dict[str, Any]:
        return {
            self._field("potential_hazards", locale): [h.hazard_id for h in hazards],
            self._field("risk_assessment_matrix", locale): [_dump(h) for h in hazards],
        }

    def strategy_fields(
        self,
        recommendation: StrategyRecommendation,
        plans: list[ActionPlan],
        locale: str,
    ) -> dict[str, Any]:
        return {
            self._field("recommended_strategies", locale): {
                "prevention": list(recommendation.prevention),
                "response": list(recommendation.response),
                "recovery": list(recommendation.recovery),
            },
            self._field("business_continuity_strategies", locale): narratives.strategy_narrative(
                plans, locale, self.translator
            ),
        }

    def action_plan_fields(self, plans: list[ActionPlan], today: date, locale: str) -> dict[str, Any]:
        t = self.translator
        return {
            self._field("action_plan_by_risk_level", locale): [_dump(p) for p in plans],
            self._field("implementation_priorities", locale): narratives.implementation_priorities(
                plans, locale, t
            ),
            self._field("budget_estimate", locale): narratives.budget_estimate(locale, t),
            self._field("implementation_team", locale): narratives.implementation_team(locale, t),
            self._field("resource_requirements", locale): narratives.resource_requirements(plans),
            self._field("responsible_parties", locale): narratives.responsibility_assignment(
                plans, locale, t
            ),
            self._field("review_schedule", locale): narratives.review_schedule(
                today, self.review_interval_days, locale, t
            ),
            self._field("testing_plan", locale): narratives.testing_schedule(plans, locale, t),
        }

"""
Strategy recommendation.

Base strategy ids are always present. Hazard keyword families (power,
storm/flood, cyber) and the business category each append a fixed set of
ids, at most once per family. Repeats across families are kept unless
deduplication is enabled.

Free-text narrative (category prevention advice, coastal/urban advice,
hazard-specific advice) rides alongside the ids, localized.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import structlog

from caribcp.i18n.translations import TranslationManager, get_translator
from caribcp.schemas.assessment import RiskAssessment
from caribcp.schemas.hazard import LocationProfile
from caribcp.schemas.prefill import StrategyRecommendation

logger = structlog.get_logger(__name__)

BUCKETS = ("prevention", "response", "recovery")


@dataclass(frozen=True)
class StrategyFamily:
    """Strategy ids contributed when any trigger matches."""
    name: str
    triggers: tuple[str, ...]
    prevention: tuple[str, ...] = ()
    response: tuple[str, ...] = ()
    recovery: tuple[str, ...] = ()


BASE_STRATEGIES = StrategyFamily(
    name="base",
    triggers=(),
    prevention=("insurance", "employee_training", "emergency_supplies"),
    response=("emergency_team", "safety_procedures", "emergency_communication"),
    recovery=("damage_assessment", "business_resumption", "lessons_learned"),
)

# Triggers are substrings of hazard id or display name
HAZARD_FAMILIES: tuple[StrategyFamily, ...] = (
    StrategyFamily(
        name="power",
        triggers=("power",),
        prevention=("maintenance", "emergency_supplies"),
        response=("essential_operations",),
        recovery=("equipment_replacement",),
    ),
    StrategyFamily(
        name="storm_flood",
        triggers=("hurricane", "storm", "flood", "surge", "tsunami"),
        prevention=("building_upgrades", "insurance"),
        response=("closure_procedures", "emergency_services"),
        recovery=("facility_repair", "insurance_claims"),
    ),
    StrategyFamily(
        name="cyber",
        triggers=("cyber", "data", "hack"),
        prevention=("cybersecurity", "data_backup"),
        response=("remote_work",),
        recovery=("equipment_replacement",),
    ),
)

# Triggers are business categories or business types
CATEGORY_FAMILIES: tuple[StrategyFamily, ...] = (
    StrategyFamily(
        name="retail",
        triggers=("retail",),
        prevention=("physical_security", "supplier_diversity"),
        response=("emergency_inventory",),
        recovery=("customer_retention",),
    ),
    StrategyFamily(
        name="hospitality",
        triggers=("hospitality", "tourism", "food_service"),
        prevention=("community_partnerships",),
        response=("customer_continuity", "alternative_locations"),
        recovery=("reputation_management",),
    ),
    StrategyFamily(
        name="services",
        triggers=("services", "technology"),
        prevention=("data_backup", "financial_reserves"),
        response=("remote_work", "customer_continuity"),
        recovery=("customer_retention",),
    ),
)

_NARRATIVE_HAZARDS = ("hurricane", "power_outage", "flash_flood")


@dataclass
class _Buckets:
    prevention: list[str] = field(default_factory=list)
    response: list[str] = field(default_factory=list)
    recovery: list[str] = field(default_factory=list)

    def add(self, family: StrategyFamily) -> None:
        self.prevention.extend(family.prevention)
        self.response.extend(family.response)
        self.recovery.extend(family.recovery)


def _dedupe(ids: list[str]) -> list[str]:
    return list(dict.fromkeys(ids))


class StrategyRecommender:
    """Aggregates strategy ids and advice text for a risk list."""

    def __init__(
        self,
        dedupe: Optional[bool] = None,
        translator: Optional[TranslationManager] = None,
    ):
        from caribcp.config import settings

        self.dedupe = settings.dedupe_strategies if dedupe is None else dedupe
        self.translator = translator or get_translator()

    def matched_hazard_families(self, hazards: Sequence[RiskAssessment]) -> list[StrategyFamily]:
        text = " ".join(f"{h.hazard_id} {h.hazard}".lower() for h in hazards)
        return [f for f in HAZARD_FAMILIES if any(t in text for t in f.triggers)]

    def matched_category_family(self, category: Optional[str]) -> Optional[StrategyFamily]:
        if not category:
            return None
        return next((f for f in CATEGORY_FAMILIES if category in f.triggers), None)

    def recommend(
        self,
        hazards: Sequence[RiskAssessment],
        category: Optional[str] = None,
        location: Optional[LocationProfile] = None,
        locale: str = "en",
    ) -> StrategyRecommendation:
        buckets = _Buckets()
        buckets.add(BASE_STRATEGIES)

        families = self.matched_hazard_families(hazards)
        for family in families:
            buckets.add(family)
        category_family = self.matched_category_family(category)
        if category_family is not None:
            buckets.add(category_family)

        prevention, response, recovery = buckets.prevention, buckets.response, buckets.recovery
        if self.dedupe:
            prevention, response, recovery = _dedupe(prevention), _dedupe(response), _dedupe(recovery)

        logger.debug(
            "strategies_recommended",
            families=[f.name for f in families],
            category=category,
            deduped=self.dedupe,
        )
        return StrategyRecommendation(
            prevention=prevention,
            response=response,
            recovery=recovery,
            narrative=self.narrative(hazards, category, location, locale),
        )

    def narrative(
        self,
        hazards: Sequence[RiskAssessment],
        category: Optional[str],
        location: Optional[LocationProfile],
        locale: str = "en",
    ) -> dict[str, list[str]]:
        """Localized advice text per bucket."""
        t = self.translator
        text: dict[str, list[str]] = {bucket: [] for bucket in BUCKETS}

        if category:
            text["prevention"].extend(t.translate_list(f"strategies.category.{category}", locale))

        if location is not None:
            for flag, key in ((location.near_coast, "coastal"), (location.urban_area, "urban")):
                if flag:
                    text["prevention"].append(t.translate(f"strategies.{key}.prevention", locale))
                    text["response"].append(t.translate(f"strategies.{key}.response", locale))

        for hazard in hazards:
            if hazard.hazard_id not in _NARRATIVE_HAZARDS:
                continue
            for bucket in BUCKETS:
                text[bucket].append(
                    t.translate(f"strategies.hazard.{hazard.hazard_id}.{bucket}", locale)
                )
        return text

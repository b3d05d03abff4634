"""
Risk Scoring Engine: location + industry → ranked hazard list.

This is the single entry point for the risk list. It:
1. Collects location hazards (base, sub-region, coastal, urban)
2. Collects industry vulnerabilities as hazard entries
3. Merges both lists, deduplicating by hazard id (higher level wins)
4. Maps each resolved level to a (likelihood, severity) pair
5. Applies location amplification
6. Scores, labels and sorts by descending score (stable)

Prior user ratings overlay the amplified pair for their hazard; a code
the user left unset keeps its amplified default: recalculate, don't reset.

Unknown country or industry contributes nothing; it is never an error.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

import structlog

from caribcp.catalog.hazards_data import display_name
from caribcp.catalog.repository import HazardRepository, IndustryRepository
from caribcp.engine.amplification import LocationAmplifier
from caribcp.engine.scoring import (
    SchemeLike,
    calculate_risk_score,
    default_ratings,
    get_risk_level,
    get_scheme,
)
from caribcp.i18n.translations import TranslationManager, get_translator
from caribcp.schemas.assessment import PriorRating, RiskAssessment, RiskSource
from caribcp.schemas.hazard import Frequency, Hazard, Impact, LocationProfile
from caribcp.schemas.industry import IndustryProfile

logger = structlog.get_logger(__name__)


@dataclass
class MergedHazard:
    """A hazard after dedup, with every source that contributed it."""
    hazard: Hazard
    sources: set[RiskSource] = field(default_factory=set)

    @property
    def source(self) -> RiskSource:
        if len(self.sources) > 1:
            return RiskSource.COMBINED
        return next(iter(self.sources))


def merge_hazards(
    location_hazards: list[Hazard],
    industry_hazards: list[Hazard],
) -> list[MergedHazard]:
    """
    Deduplicate by hazard id.

    The entry with the higher risk level wins; ties keep the earlier one.
    Position is that of the first appearance. Location entries come first.
    """
    merged: dict[str, MergedHazard] = {}
    tagged = [(h, RiskSource.LOCATION) for h in location_hazards] + [
        (h, RiskSource.BUSINESS_TYPE) for h in industry_hazards
    ]
    for hazard, source in tagged:
        existing = merged.get(hazard.hazard_id)
        if existing is None:
            merged[hazard.hazard_id] = MergedHazard(hazard=hazard, sources={source})
            continue
        existing.sources.add(source)
        if hazard.risk_level.rank > existing.hazard.risk_level.rank:
            existing.hazard = hazard
    return list(merged.values())


class RiskScoringEngine:
    """
    Computes the deduplicated, prioritized risk list.

    Catalog lookups are async (a remote store may back them); scoring
    itself is pure.
    """

    def __init__(
        self,
        hazards: HazardRepository,
        industries: IndustryRepository,
        scheme: SchemeLike = None,
        amplifier: Optional[LocationAmplifier] = None,
        translator: Optional[TranslationManager] = None,
    ):
        self.hazards = hazards
        self.industries = industries
        self.scheme = get_scheme(scheme)
        self.amplifier = amplifier or LocationAmplifier()
        self.translator = translator or get_translator()

    # ── Collection ───────────────────────────────────────────────────

    async def collect_location_hazards(self, location: LocationProfile) -> list[Hazard]:
        hazard_set = await self.hazards.get_location_hazard_set(location.country_code)
        if hazard_set is None:
            logger.info("country_not_found", country_code=location.country_code)
            return []

        collected = list(hazard_set.base_hazards)
        if location.sub_region:
            region_hazards = hazard_set.sub_regions.get(location.sub_region)
            if region_hazards is None:
                logger.debug(
                    "sub_region_not_found",
                    country_code=location.country_code,
                    sub_region=location.sub_region,
                )
            else:
                collected.extend(region_hazards)
        if location.near_coast:
            collected.extend(hazard_set.coastal_modifiers)
        if location.urban_area:
            collected.extend(hazard_set.urban_modifiers)
        return collected

    async def collect_industry_hazards(self, industry: Optional[IndustryProfile]) -> list[Hazard]:
        if industry is None:
            return []
        collected = []
        for vulnerability in industry.vulnerabilities:
            known = await self.hazards.get_hazard(vulnerability.hazard_id)
            collected.append(
                Hazard(
                    hazard_id=vulnerability.hazard_id,
                    name=known.name if known else display_name(vulnerability.hazard_id),
                    risk_level=vulnerability.default_risk_level,
                    frequency=Frequency.POSSIBLE,
                    impact=Impact.MODERATE,
                )
            )
        return collected

    async def resolve_industry(
        self, industry: Union[str, IndustryProfile, None]
    ) -> Optional[IndustryProfile]:
        if industry is None or isinstance(industry, IndustryProfile):
            return industry
        profile = await self.industries.get_industry_profile(industry)
        if profile is None:
            logger.info("industry_not_found", industry_id=industry)
        return profile

    # ── Assessment ───────────────────────────────────────────────────

    async def assess(
        self,
        location: LocationProfile,
        industry: Union[str, IndustryProfile, None] = None,
        prior: Optional[dict[str, PriorRating]] = None,
        locale: str = "en",
    ) -> list[RiskAssessment]:
        """
        Ranked risk list for a location and business type.

        Args:
            location: Caller-supplied location attributes
            industry: Industry id or an already-resolved profile
            prior: User-entered ratings keyed by hazard id
            locale: Language of the planning-measures hint
        """
        profile = await self.resolve_industry(industry)
        location_hazards = await self.collect_location_hazards(location)
        industry_hazards = await self.collect_industry_hazards(profile)

        merged = merge_hazards(location_hazards, industry_hazards)
        prior = prior or {}
        assessments = [
            self.score_hazard(m, location, prior.get(m.hazard.hazard_id), locale)
            for m in merged
        ]
        ranked = sorted(assessments, key=lambda a: -a.risk_score)

        logger.info(
            "risk_list_computed",
            country_code=location.country_code,
            industry_id=profile.id if profile else industry,
            scheme=self.scheme.name,
            location_hazards=len(location_hazards),
            industry_hazards=len(industry_hazards),
            total=len(ranked),
        )
        return ranked

    def score_hazard(
        self,
        merged: MergedHazard,
        location: LocationProfile,
        prior: Optional[PriorRating],
        locale: str = "en",
    ) -> RiskAssessment:
        hazard = merged.hazard
        if self.scheme.uses_catalog_ratings:
            likelihood, severity = hazard.frequency.value, hazard.impact.value
        else:
            likelihood, severity = default_ratings(hazard.risk_level)

        # User codes overlay the amplified defaults; a code the user left unset keeps its default
        if prior is None or not (prior.likelihood and prior.severity):
            likelihood, severity, _ = self.amplifier.amplify(
                hazard.hazard_id, likelihood, severity, location, self.scheme
            )
        if prior is not None:
            likelihood = prior.likelihood or likelihood
            severity = prior.severity or severity

        score = calculate_risk_score(likelihood, severity, self.scheme)
        return RiskAssessment(
            hazard_id=hazard.hazard_id,
            hazard=hazard.name,
            likelihood=likelihood,
            severity=severity,
            risk_score=score,
            risk_level=get_risk_level(score, self.scheme),
            source=merged.source,
            planning_measures=self.translator.translate(
                "strategies.implement_prevention", locale, hazard=self.hazard_label(hazard, locale)
            ),
        )

    def hazard_label(self, hazard: Hazard, locale: str) -> str:
        """Lower-cased hazard name in ``locale``; the catalog name when untranslated."""
        return self.translator.translate(
            f"hazards.{hazard.hazard_id}", locale, default=hazard.name
        ).lower()

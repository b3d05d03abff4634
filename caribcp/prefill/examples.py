"""
Example text bundles with location placeholders filled in.

    [NEIGHBORHOOD] → sub-region, or the localized "local area"
    [AREA]         → localized coastal / inland area term
    [ISLAND]       → country name
"""

import structlog

from caribcp.catalog.repository import IndustryRepository
from caribcp.i18n.translations import TranslationManager
from caribcp.schemas.hazard import LocationProfile
from caribcp.schemas.industry import IndustryExamples, IndustryProfile

logger = structlog.get_logger(__name__)


def localize_placeholders(
    text: str,
    location: LocationProfile,
    locale: str,
    translator: TranslationManager,
) -> str:
    neighborhood = location.sub_region or translator.translate("location.local_area", locale)
    area_key = "location.coastal_area" if location.near_coast else "location.inland_area"
    island = location.country or location.country_code
    return (
        text.replace("[NEIGHBORHOOD]", neighborhood)
        .replace("[AREA]", translator.translate(area_key, locale))
        .replace("[ISLAND]", island)
    )


class ExampleBuilder:
    """Selects the locale's example bundle and localizes its placeholders."""

    def __init__(self, industries: IndustryRepository, translator: TranslationManager):
        self.industries = industries
        self.translator = translator

    async def examples_for(self, profile: IndustryProfile, locale: str) -> IndustryExamples:
        """Translated bundle for ``locale``, else the profile's English bundle."""
        if locale != "en":
            localized = await self.industries.get_localized_examples(profile.id, locale)
            if localized is not None:
                return localized
            logger.debug("locale_fallback", industry_id=profile.id, requested=locale)
        return profile.examples

    def localize(
        self,
        examples: IndustryExamples,
        location: LocationProfile,
        locale: str,
    ) -> IndustryExamples:
        def fill(items: list[str]) -> list[str]:
            return [localize_placeholders(s, location, locale, self.translator) for s in items]

        return IndustryExamples(
            business_purpose=fill(examples.business_purpose),
            products_services=fill(examples.products_services),
            unique_selling_points=fill(examples.unique_selling_points),
            key_personnel=fill(examples.key_personnel),
            minimum_resources=fill(examples.minimum_resources),
            customer_base=fill(examples.customer_base),
        )

    def contextual_examples(
        self,
        profile: IndustryProfile,
        examples: IndustryExamples,
        locale: str,
    ) -> dict[str, dict[str, list[str]]]:
        """Per-step, per-field hint lists. ``examples`` must already be localized."""
        f = self._field_namer(locale)
        return {
            "BUSINESS_OVERVIEW": {
                f("business_purpose"): examples.business_purpose,
                f("products_and_services"): examples.products_services,
                f("unique_selling_points"): examples.unique_selling_points,
                f("key_personnel_involved"): examples.key_personnel,
                f("customer_base"): examples.customer_base,
                f("minimum_resource_requirements"): examples.minimum_resources,
                f("operating_hours"): [profile.typical_operating_hours],
            },
            "ESSENTIAL_FUNCTIONS": {
                f("business_functions"): self.translator.translate_list(
                    "examples.essential_functions", locale
                ),
            },
            "RISK_ASSESSMENT": {
                f("potential_hazards"): self.translator.translate_list(
                    "examples.risk_assessment", locale
                ),
            },
        }

    def _field_namer(self, locale: str):
        return lambda key: self.translator.translate(f"fields.{key}", locale)


def first_or_empty(items: list[str]) -> str:
    return items[0] if items else ""


"""
Example localization tests.
"""

import pytest

from caribcp.prefill.examples import ExampleBuilder, localize_placeholders
from caribcp.schemas.hazard import LocationProfile

TEXT = "Serving [NEIGHBORHOOD] in the [AREA] of [ISLAND]"


class TestPlaceholders:
    def test_all_tokens(self, translator):
        location = LocationProfile(
            country_code="BB", country="Barbados", sub_region="Bridgetown", near_coast=True
        )
        assert localize_placeholders(TEXT, location, "en", translator) == (
            "Serving Bridgetown in the coastal area of Barbados"
        )

    def test_fallbacks(self, translator):
        location = LocationProfile(country_code="XX")
        assert localize_placeholders(TEXT, location, "en", translator) == (
            "Serving local area in the inland area of XX"
        )

    def test_localized_area_terms(self, translator):
        location = LocationProfile(country_code="JM", country="Jamaica", near_coast=True)
        result = localize_placeholders("[AREA]", location, "es", translator)
        assert result == translator.translate("location.coastal_area", "es")
        assert result != "coastal area"


class TestExampleBuilder:
    @pytest.mark.asyncio
    async def test_localized_bundle_preferred(self, industry_repo, translator):
        builder = ExampleBuilder(industry_repo, translator)
        profile = await industry_repo.get_industry_profile("restaurant")
        examples = await builder.examples_for(profile, "fr")
        assert examples.business_purpose[0].startswith("Servir une cuisine")

    @pytest.mark.asyncio
    async def test_english_fallback(self, industry_repo, translator):
        builder = ExampleBuilder(industry_repo, translator)
        profile = await industry_repo.get_industry_profile("beauty_salon")
        assert await builder.examples_for(profile, "es") == profile.examples

    @pytest.mark.asyncio
    async def test_localize_replaces_every_list(self, industry_repo, translator, kingston):
        builder = ExampleBuilder(industry_repo, translator)
        profile = await industry_repo.get_industry_profile("grocery_store")
        examples = builder.localize(profile.examples, kingston, "en")
        for items in examples.model_dump().values():
            assert all("[" not in s for s in items)

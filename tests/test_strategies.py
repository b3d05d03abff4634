"""
Strategy Recommendation Tests.
"""

import pytest

from caribcp.planning.strategies import BASE_STRATEGIES, StrategyRecommender
from caribcp.schemas.assessment import RiskAssessment
from caribcp.schemas.hazard import LocationProfile


def _risk(hazard_id: str, name: str) -> RiskAssessment:
    return RiskAssessment(
        hazard_id=hazard_id,
        hazard=name,
        likelihood="likely",
        severity="major",
        risk_score=9,
        risk_level="High",
    )


HURRICANE = _risk("hurricane", "Hurricane/Tropical Storm")
POWER = _risk("power_outage", "Power Outage")
CYBER = _risk("cyber_attack", "Cyber Attack")
DROUGHT = _risk("drought", "Drought")


class TestBaseStrategies:
    def test_always_present(self, recommender):
        rec = recommender.recommend([])
        assert rec.prevention == list(BASE_STRATEGIES.prevention)
        assert rec.response == list(BASE_STRATEGIES.response)
        assert rec.recovery == list(BASE_STRATEGIES.recovery)

    def test_unrelated_hazard_adds_nothing(self, recommender):
        assert recommender.recommend([DROUGHT]).all_ids() == recommender.recommend([]).all_ids()


class TestHazardFamilies:
    def test_power_family(self, recommender):
        rec = recommender.recommend([POWER])
        assert "maintenance" in rec.prevention
        assert "essential_operations" in rec.response
        assert "equipment_replacement" in rec.recovery

    def test_storm_family(self, recommender):
        rec = recommender.recommend([HURRICANE])
        assert "building_upgrades" in rec.prevention
        assert "closure_procedures" in rec.response
        assert "insurance_claims" in rec.recovery

    def test_cyber_family(self, recommender):
        rec = recommender.recommend([CYBER])
        assert "cybersecurity" in rec.prevention
        assert "remote_work" in rec.response

    def test_family_contributes_once(self, recommender):
        """Two storm hazards still add the storm family a single time."""
        rec = recommender.recommend([HURRICANE, _risk("storm_surge", "Storm Surge")])
        assert rec.prevention.count("building_upgrades") == 1

    def test_matched_families_by_name(self, recommender):
        names = [f.name for f in recommender.matched_hazard_families([POWER, HURRICANE, CYBER])]
        assert names == ["power", "storm_flood", "cyber"]


class TestCategoryFamilies:
    @pytest.mark.parametrize(
        "category,expected",
        [
            ("retail", "supplier_diversity"),
            ("hospitality", "community_partnerships"),
            ("tourism", "community_partnerships"),
            ("services", "financial_reserves"),
            ("technology", "financial_reserves"),
        ],
    )
    def test_category_prevention(self, recommender, category, expected):
        assert expected in recommender.recommend([], category=category).prevention

    def test_unknown_category(self, recommender):
        assert recommender.matched_category_family("industrial") is None
        assert recommender.matched_category_family(None) is None


class TestDuplicates:
    """Repeats across families are kept unless deduplication is on."""

    def test_repeats_kept_by_default(self, recommender):
        rec = recommender.recommend([POWER])
        assert rec.prevention.count("emergency_supplies") == 2

    def test_dedupe_removes_repeats_keeping_order(self, translator):
        rec = StrategyRecommender(dedupe=True, translator=translator).recommend(
            [POWER, HURRICANE], category="retail"
        )
        assert rec.prevention.count("emergency_supplies") == 1
        assert rec.prevention.count("insurance") == 1
        assert rec.prevention[0] == "insurance"


class TestNarrative:
    def test_category_text(self, recommender):
        rec = recommender.recommend([], category="retail")
        assert rec.narrative["prevention"]

    def test_coastal_and_urban_text(self, recommender):
        coastal = LocationProfile(country_code="BB", near_coast=True)
        both = LocationProfile(country_code="BB", near_coast=True, urban_area=True)
        assert len(recommender.recommend([], location=coastal).narrative["response"]) == 1
        assert len(recommender.recommend([], location=both).narrative["response"]) == 2

    def test_hazard_text_for_known_hazards(self, recommender):
        rec = recommender.recommend([HURRICANE, DROUGHT])
        assert len(rec.narrative["recovery"]) == 1

    def test_localized(self, recommender):
        en = recommender.recommend([], category="retail", locale="en")
        es = recommender.recommend([], category="retail", locale="es")
        assert en.narrative["prevention"] != es.narrative["prevention"]
        assert es.prevention == en.prevention

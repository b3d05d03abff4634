"""
Hazard Template Matching Tests.

Each rule is exercised on its own, then the ordered rule list as a whole.
"""

import pytest

from caribcp.catalog.action_plan_data import HAZARD_ACTION_PLANS
from caribcp.planning.hazard_matching import (
    DEFAULT_MATCH_RULES,
    HazardTemplateMatcher,
    MatchRule,
    normalize_hazard_name,
)

RULES = {r.name: r for r in DEFAULT_MATCH_RULES}


@pytest.fixture
def matcher():
    return HazardTemplateMatcher(HAZARD_ACTION_PLANS)


class TestNormalize:
    def test_lowercase_and_collapse_separators(self):
        assert normalize_hazard_name("Hurricane/Tropical  Storm") == "hurricane tropical storm"

    def test_underscores_become_spaces(self):
        assert normalize_hazard_name("power_outage") == "power outage"

    def test_empty(self):
        assert normalize_hazard_name("") == ""
        assert normalize_hazard_name("  --  ") == ""


class TestIndividualRules:
    def test_exact(self):
        assert RULES["exact"].matches("power outage", "power_outage")
        assert not RULES["exact"].matches("power outage risk", "power_outage")

    def test_substring_either_direction(self):
        assert RULES["substring"].matches("urban flooding", "flood")
        assert RULES["substring"].matches("fire", "fire")
        assert not RULES["substring"].matches("drought", "flood")

    def test_synonym(self):
        assert RULES["synonym"].matches("island wide blackout", "power_outage")
        assert not RULES["synonym"].matches("blackout", "hurricane")


class TestMatcher:
    """Rule order, then table order, decides the template."""

    @pytest.mark.parametrize(
        "hazard,key,rule",
        [
            ("Power Outage", "power_outage", "exact"),
            ("Hurricane/Tropical Storm", "hurricane", "substring"),
            ("Urban Flooding", "flood", "substring"),
            ("Flash Flooding", "flood", "substring"),
            ("Bushfire", "fire", "substring"),
            ("Tropical Storm", "hurricane", "synonym"),
            ("Data Breach", "cyber_attack", "synonym"),
            ("Seismic activity", "earthquake", "synonym"),
        ],
    )
    def test_known_hazards(self, matcher, hazard, key, rule):
        result = matcher.explain_match(hazard)
        assert result.matched
        assert result.template_key == key
        assert result.rule == rule

    @pytest.mark.parametrize(
        "hazard", ["Supply Chain Disruption", "Traffic/Transport Disruption", "Drought"]
    )
    def test_unmatched_hazards(self, matcher, hazard):
        assert matcher.match(hazard) is None

    def test_empty_name_never_matches(self, matcher):
        result = matcher.explain_match("")
        assert not result.matched
        assert result.rule is None

    def test_table_order_breaks_ties(self):
        matcher = HazardTemplateMatcher(["fire", "hurricane"])
        assert matcher.match("hurricane fire") == "fire"

    def test_custom_rules(self):
        starts = MatchRule("prefix", lambda name, key: name.startswith(key[:3]))
        matcher = HazardTemplateMatcher(["earthquake"], rules=[starts])
        assert matcher.explain_match("Earth tremors").rule == "prefix"

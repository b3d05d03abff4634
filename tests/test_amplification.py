"""
Location Amplification Tests.
"""

import pytest

from caribcp.engine.amplification import DEFAULT_RULES, AmplificationRule, LocationAmplifier, bump
from caribcp.engine.scoring import DYNAMIC, PRACTICAL
from caribcp.schemas.hazard import LocationProfile


def _location(**kwargs) -> LocationProfile:
    return LocationProfile(country_code=kwargs.pop("country_code", "JM"), **kwargs)


class TestBump:
    def test_one_step_up(self):
        assert bump("possible", PRACTICAL.likelihood_scale) == "likely"

    def test_capped_at_top(self):
        assert bump("almost_certain", PRACTICAL.likelihood_scale) == "almost_certain"
        assert bump("catastrophic", DYNAMIC.severity_scale) == "catastrophic"

    def test_off_scale_passes_through(self):
        assert bump("rare", PRACTICAL.likelihood_scale) == "rare"


class TestLocationAmplifier:
    """Coastal and urban bumps."""

    def setup_method(self):
        self.amplifier = LocationAmplifier(apply_location=True, apply_country=False)

    def test_coastal_hurricane_bumps_both(self):
        l, s, fired = self.amplifier.amplify(
            "hurricane", "likely", "major", _location(near_coast=True), PRACTICAL
        )
        assert (l, s) == ("almost_certain", "catastrophic")
        assert fired == ["coastal_exposure"]

    def test_inland_hurricane_unchanged(self):
        l, s, fired = self.amplifier.amplify(
            "hurricane", "likely", "major", _location(near_coast=False), PRACTICAL
        )
        assert (l, s) == ("likely", "major")
        assert fired == []

    def test_urban_power_outage_bumps_likelihood_only(self):
        l, s, fired = self.amplifier.amplify(
            "power_outage", "likely", "major", _location(urban_area=True), PRACTICAL
        )
        assert (l, s) == ("almost_certain", "major")
        assert fired == ["urban_dependency"]

    def test_urban_fire_bumps_severity_only(self):
        l, s, _ = self.amplifier.amplify(
            "fire", "possible", "moderate", _location(urban_area=True), PRACTICAL
        )
        assert (l, s) == ("possible", "major")

    def test_unrelated_hazard_unchanged(self):
        l, s, fired = self.amplifier.amplify(
            "drought", "possible", "moderate", _location(near_coast=True, urban_area=True), PRACTICAL
        )
        assert (l, s) == ("possible", "moderate")
        assert fired == []

    def test_location_rules_can_be_disabled(self):
        amplifier = LocationAmplifier(apply_location=False, apply_country=False)
        assert amplifier.active_rules() == []
        l, s, _ = amplifier.amplify(
            "hurricane", "likely", "major", _location(near_coast=True), PRACTICAL
        )
        assert (l, s) == ("likely", "major")


class TestCountryRules:
    """Named country rules are opt-in."""

    def test_country_rule_off_by_default_in_fixture(self):
        amplifier = LocationAmplifier(apply_location=True, apply_country=False)
        assert all(not r.is_country_rule for r in amplifier.active_rules())

    def test_jamaica_hurricane_bump_when_enabled(self):
        amplifier = LocationAmplifier(apply_location=True, apply_country=True)
        l, s, fired = amplifier.amplify("hurricane", "likely", "major", _location(), PRACTICAL)
        assert (l, s) == ("almost_certain", "major")
        assert fired == ["jamaica_seismic_and_storm"]

    def test_country_rule_ignores_other_countries(self):
        amplifier = LocationAmplifier(apply_location=True, apply_country=True)
        _, _, fired = amplifier.amplify(
            "earthquake", "possible", "major", _location(country_code="BB"), PRACTICAL
        )
        assert fired == []

    def test_country_code_case_insensitive(self):
        rule = next(r for r in DEFAULT_RULES if r.is_country_rule)
        assert rule.applies("earthquake", _location(country_code="jm"))


class TestCustomRules:
    def test_rules_fire_in_order_and_stack(self):
        rules = [
            AmplificationRule("first", frozenset({"flood"}), bump_likelihood=True),
            AmplificationRule("second", frozenset({"flood"}), bump_likelihood=True),
        ]
        amplifier = LocationAmplifier(rules=rules, apply_location=True, apply_country=False)
        l, _, fired = amplifier.amplify("flood", "unlikely", "minor", _location(), PRACTICAL)
        assert l == "likely"
        assert fired == ["first", "second"]

    @pytest.mark.parametrize("scheme", [PRACTICAL, DYNAMIC])
    def test_bumps_follow_scheme_scale(self, scheme):
        amplifier = LocationAmplifier(apply_location=True, apply_country=False)
        top = scheme.likelihood_scale[-1]
        l, _, _ = amplifier.amplify(
            "tsunami", top, scheme.severity_scale[0], _location(near_coast=True), scheme
        )
        assert l == top

"""
Location-specific risk amplification.

Each rule bumps likelihood and/or severity one step up the scheme's
ordinal scale, capped at the maximum. Rules are evaluated in order and
each one fires at most once per hazard.

Coastal and urban rules are on by default. Named country rules are
opt-in (APPLY_COUNTRY_AMPLIFICATION).
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import structlog

from caribcp.engine.scoring import ScoringScheme
from caribcp.schemas.hazard import LocationProfile

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AmplificationRule:
    """One (location predicate, hazard set) → bump rule."""
    name: str
    hazard_ids: frozenset[str]
    bump_likelihood: bool = False
    bump_severity: bool = False
    near_coast: bool = False
    urban_area: bool = False
    country_code: Optional[str] = None

    @property
    def is_country_rule(self) -> bool:
        return self.country_code is not None

    def applies(self, hazard_id: str, location: LocationProfile) -> bool:
        if hazard_id not in self.hazard_ids:
            return False
        if self.near_coast and not location.near_coast:
            return False
        if self.urban_area and not location.urban_area:
            return False
        if self.country_code is not None and location.country_code.upper() != self.country_code:
            return False
        return True


DEFAULT_RULES: tuple[AmplificationRule, ...] = (
    AmplificationRule(
        name="coastal_exposure",
        hazard_ids=frozenset({"hurricane", "storm_surge", "coastal_flooding", "tsunami"}),
        bump_likelihood=True,
        bump_severity=True,
        near_coast=True,
    ),
    AmplificationRule(
        name="urban_dependency",
        hazard_ids=frozenset({"power_outage", "infrastructure_failure", "cyber_attack", "crime"}),
        bump_likelihood=True,
        urban_area=True,
    ),
    AmplificationRule(
        name="urban_density",
        hazard_ids=frozenset({"fire", "traffic_disruption"}),
        bump_severity=True,
        urban_area=True,
    ),
    AmplificationRule(
        name="jamaica_seismic_and_storm",
        hazard_ids=frozenset({"hurricane", "earthquake"}),
        bump_likelihood=True,
        country_code="JM",
    ),
)


def bump(code: str, scale: Sequence[str]) -> str:
    """One step up ``scale``, capped at the top. Codes off the scale pass through."""
    try:
        idx = list(scale).index(code)
    except ValueError:
        return code
    return scale[min(idx + 1, len(scale) - 1)]


class LocationAmplifier:
    """Applies amplification rules to a (likelihood, severity) pair."""

    def __init__(
        self,
        rules: Sequence[AmplificationRule] = DEFAULT_RULES,
        apply_location: Optional[bool] = None,
        apply_country: Optional[bool] = None,
    ):
        from caribcp.config import settings

        self.rules = tuple(rules)
        self.apply_location = (
            settings.apply_location_amplification if apply_location is None else apply_location
        )
        self.apply_country = (
            settings.apply_country_amplification if apply_country is None else apply_country
        )

    def active_rules(self) -> list[AmplificationRule]:
        return [
            r for r in self.rules
            if (self.apply_country if r.is_country_rule else self.apply_location)
        ]

    def amplify(
        self,
        hazard_id: str,
        likelihood: str,
        severity: str,
        location: LocationProfile,
        scheme: ScoringScheme,
    ) -> tuple[str, str, list[str]]:
        """Return the amplified pair and the names of the rules that fired."""
        fired: list[str] = []
        for rule in self.active_rules():
            if not rule.applies(hazard_id, location):
                continue
            if rule.bump_likelihood:
                likelihood = bump(likelihood, scheme.likelihood_scale)
            if rule.bump_severity:
                severity = bump(severity, scheme.severity_scale)
            fired.append(rule.name)

        if fired:
            logger.debug(
                "hazard_amplified",
                hazard_id=hazard_id,
                rules=fired,
                likelihood=likelihood,
                severity=severity,
            )
        return likelihood, severity, fired

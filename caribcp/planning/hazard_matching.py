"""
Hazard name → action-plan template key.

Matching is an ordered list of rules. For each rule, template keys are
tried in table order; the first (rule, key) pair that matches wins:

    1. exact       normalized name == normalized key
    2. substring   either one contains the other
    3. synonym     name equals or contains a listed synonym of the key

No match → None, and the caller synthesizes a generic plan.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import structlog

logger = structlog.get_logger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

SYNONYMS: dict[str, tuple[str, ...]] = {
    "hurricane": ("tropical storm", "cyclone"),
    "power_outage": ("blackout", "electrical failure"),
    "cyber_attack": ("data breach", "hacking"),
    "flood": ("flash flood", "coastal flood"),
    "fire": ("blaze",),
    "earthquake": ("seismic", "tremor"),
}


def normalize_hazard_name(name: str) -> str:
    """Lowercase; runs of non-alphanumerics become a single space."""
    if not name:
        return ""
    return _NON_ALNUM.sub(" ", name.lower()).strip()


@dataclass(frozen=True)
class MatchRule:
    """A named predicate over (normalized name, template key)."""
    name: str
    predicate: Callable[[str, str], bool]

    def matches(self, normalized_name: str, template_key: str) -> bool:
        return self.predicate(normalized_name, template_key)


@dataclass(frozen=True)
class MatchResult:
    hazard: str
    normalized: str
    template_key: Optional[str]
    rule: Optional[str]

    @property
    def matched(self) -> bool:
        return self.template_key is not None


def _exact(name: str, key: str) -> bool:
    return name == normalize_hazard_name(key)


def _substring(name: str, key: str) -> bool:
    normalized_key = normalize_hazard_name(key)
    return normalized_key in name or name in normalized_key


def _synonym(name: str, key: str) -> bool:
    for synonym in SYNONYMS.get(key, ()):
        if normalize_hazard_name(synonym) in name:
            return True
    return False


DEFAULT_MATCH_RULES: tuple[MatchRule, ...] = (
    MatchRule("exact", _exact),
    MatchRule("substring", _substring),
    MatchRule("synonym", _synonym),
)


class HazardTemplateMatcher:
    """Resolves hazard display names to template keys."""

    def __init__(
        self,
        template_keys: Iterable[str],
        rules: Iterable[MatchRule] = DEFAULT_MATCH_RULES,
    ):
        self.template_keys = list(template_keys)
        self.rules = list(rules)

    def explain_match(self, hazard_name: str) -> MatchResult:
        """Which rule and key matched ``hazard_name``, if any."""
        normalized = normalize_hazard_name(hazard_name)
        if normalized:
            for rule in self.rules:
                for key in self.template_keys:
                    if rule.matches(normalized, key):
                        return MatchResult(hazard_name, normalized, key, rule.name)
        return MatchResult(hazard_name, normalized, None, None)

    def match(self, hazard_name: str) -> Optional[str]:
        return self.explain_match(hazard_name).template_key

"""
Business type inference from free-text business description.

Keyword families are checked in fixed priority order and the first family
with a keyword in the description wins. Descriptions often mention several
families ("hotel restaurant"), so the order is part of the behavior.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

GENERAL = "general"


@dataclass(frozen=True)
class KeywordRule:
    """Business type selected when any keyword occurs in the description."""
    business_type: str
    keywords: tuple[str, ...]

    def matches(self, description: str) -> bool:
        return any(keyword in description for keyword in self.keywords)


DEFAULT_KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule("tourism", ("hotel", "resort", "tour", "tourism", "accommodation")),
    KeywordRule("retail", ("retail", "shop", "store", "sales", "merchandise", "grocer")),
    KeywordRule("food_service", ("restaurant", "food", "catering", "kitchen", "dining", "culinary")),
    KeywordRule("manufacturing", ("manufacturing", "production", "factory", "assembly", "industrial", "processing")),
    KeywordRule("technology", ("technology", "software", "tech", "digital", "computer")),
)


class BusinessTypeClassifier:
    def __init__(self, rules: Iterable[KeywordRule] = DEFAULT_KEYWORD_RULES):
        self.rules = list(rules)

    def classify(self, description: str) -> str:
        text = (description or "").lower()
        for rule in self.rules:
            if rule.matches(text):
                return rule.business_type
        return GENERAL

    def explain(self, description: str) -> Optional[KeywordRule]:
        """The rule that fires for ``description``, or None for the fallback."""
        text = (description or "").lower()
        return next((r for r in self.rules if r.matches(text)), None)

    def infer_from_overview(self, overview: Optional[Mapping[str, Any]]) -> str:
        """Classify from a BUSINESS_OVERVIEW step (purpose + products/services)."""
        if not overview:
            return GENERAL
        purpose = overview.get("Business Purpose") or ""
        products = overview.get("Products and Services") or overview.get("Products & Services") or ""
        return self.classify(f"{purpose} {products}")

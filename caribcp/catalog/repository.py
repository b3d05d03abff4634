"""
Read-only async catalog repositories.

The engine depends on the HazardRepository / IndustryRepository protocols
only. The in-memory implementations serve the static tables and accept
fixture tables for tests; a remote store would implement the same
methods and raise CatalogError on backend failure.

Lookups return None (or an empty list) for unknown keys. Absence is
never an exception.
"""

from typing import Iterable, Optional, Protocol, Sequence

import structlog

from caribcp.catalog.hazards_data import HAZARD_DEFINITIONS, LOCATION_HAZARDS
from caribcp.catalog.industries_data import INDUSTRY_PROFILES, LOCALIZED_EXAMPLES
from caribcp.schemas.hazard import Country, Hazard, LocationHazardSet
from caribcp.schemas.industry import IndustryCategory, IndustryExamples, IndustryProfile

logger = structlog.get_logger(__name__)


class HazardRepository(Protocol):
    async def get_location_hazard_set(self, country_code: str) -> Optional[LocationHazardSet]: ...

    async def get_hazard(self, hazard_id: str) -> Optional[Hazard]: ...

    async def list_countries(self) -> list[Country]: ...

    async def list_sub_regions(self, country_code: str) -> list[str]: ...


class IndustryRepository(Protocol):
    async def get_industry_profile(self, industry_id: str) -> Optional[IndustryProfile]: ...

    async def list_industries(self) -> list[IndustryProfile]: ...

    async def list_industries_by_category(self, category: str) -> list[IndustryProfile]: ...

    async def get_localized_examples(
        self, industry_id: str, locale: str
    ) -> Optional[IndustryExamples]: ...


class InMemoryHazardRepository:
    """Hazard catalog over static tables."""

    def __init__(
        self,
        location_sets: Optional[Iterable[LocationHazardSet]] = None,
        definitions: Optional[dict[str, Hazard]] = None,
    ):
        sets = LOCATION_HAZARDS if location_sets is None else location_sets
        self._sets: dict[str, LocationHazardSet] = {
            s.country_code.upper(): s for s in sets
        }
        self._definitions = HAZARD_DEFINITIONS if definitions is None else definitions

    async def get_location_hazard_set(self, country_code: str) -> Optional[LocationHazardSet]:
        if not country_code:
            return None
        return self._sets.get(country_code.upper())

    async def get_hazard(self, hazard_id: str) -> Optional[Hazard]:
        return self._definitions.get(hazard_id)

    async def list_countries(self) -> list[Country]:
        return [Country(code=code, name=s.country) for code, s in self._sets.items()]

    async def list_sub_regions(self, country_code: str) -> list[str]:
        hazard_set = await self.get_location_hazard_set(country_code)
        if hazard_set is None:
            return []
        return list(hazard_set.sub_regions)


class InMemoryIndustryRepository:
    """Industry profile catalog over static tables."""

    def __init__(
        self,
        profiles: Optional[Sequence[IndustryProfile]] = None,
        localized_examples: Optional[dict[str, dict[str, IndustryExamples]]] = None,
    ):
        self._profiles: dict[str, IndustryProfile] = {
            p.id: p for p in (INDUSTRY_PROFILES if profiles is None else profiles)
        }
        self._localized = LOCALIZED_EXAMPLES if localized_examples is None else localized_examples

    async def get_industry_profile(self, industry_id: str) -> Optional[IndustryProfile]:
        return self._profiles.get(industry_id)

    async def list_industries(self) -> list[IndustryProfile]:
        return list(self._profiles.values())

    async def list_industries_by_category(self, category: str) -> list[IndustryProfile]:
        try:
            wanted = IndustryCategory(category)
        except ValueError:
            logger.debug("unknown_industry_category", category=category)
            return []
        return [p for p in self._profiles.values() if p.category == wanted]

    async def get_localized_examples(
        self, industry_id: str, locale: str
    ) -> Optional[IndustryExamples]:
        return self._localized.get(locale, {}).get(industry_id)

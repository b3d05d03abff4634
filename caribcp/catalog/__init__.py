"""
Hazard, industry and action-plan reference catalogs.
"""

from caribcp.catalog.hazards_data import HAZARD_DEFINITIONS, LOCATION_HAZARDS, display_name
from caribcp.catalog.industries_data import INDUSTRY_PROFILES, LOCALIZED_EXAMPLES
from caribcp.catalog.repository import (
    HazardRepository,
    IndustryRepository,
    InMemoryHazardRepository,
    InMemoryIndustryRepository,
)

__all__ = [
    "HAZARD_DEFINITIONS",
    "INDUSTRY_PROFILES",
    "LOCALIZED_EXAMPLES",
    "LOCATION_HAZARDS",
    "HazardRepository",
    "InMemoryHazardRepository",
    "InMemoryIndustryRepository",
    "IndustryRepository",
    "display_name",
]

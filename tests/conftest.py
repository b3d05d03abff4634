"""
Test fixtures for the CaribCP pre-fill engine.

Provides:
- In-memory hazard / industry repositories over the bundled catalogs
- A risk engine pinned to the practical scheme (location bumps on,
  country bumps off) so results do not depend on the environment
- Action-plan, strategy and assembler fixtures built on the same engine
- A fixed clock for review-date assertions
"""

from datetime import date

import pytest

from caribcp.catalog.repository import InMemoryHazardRepository, InMemoryIndustryRepository
from caribcp.engine.amplification import LocationAmplifier
from caribcp.engine.risk_engine import RiskScoringEngine
from caribcp.i18n.translations import TranslationManager
from caribcp.planning.action_plans import ActionPlanGenerator
from caribcp.planning.strategies import StrategyRecommender
from caribcp.prefill.assembler import PreFillAssembler
from caribcp.schemas.hazard import LocationProfile

FIXED_TODAY = date(2025, 3, 1)


@pytest.fixture
def hazard_repo():
    return InMemoryHazardRepository()


@pytest.fixture
def industry_repo():
    return InMemoryIndustryRepository()


@pytest.fixture
def translator():
    return TranslationManager()


@pytest.fixture
def amplifier():
    return LocationAmplifier(apply_location=True, apply_country=False)


@pytest.fixture
def engine(hazard_repo, industry_repo, amplifier, translator):
    return RiskScoringEngine(
        hazard_repo,
        industry_repo,
        scheme="practical",
        amplifier=amplifier,
        translator=translator,
    )


@pytest.fixture
def plan_generator():
    return ActionPlanGenerator()


@pytest.fixture
def recommender(translator):
    return StrategyRecommender(dedupe=False, translator=translator)


@pytest.fixture
def assembler(hazard_repo, industry_repo, engine, plan_generator, recommender, translator):
    return PreFillAssembler(
        hazard_repo,
        industry_repo,
        engine=engine,
        action_plans=plan_generator,
        strategies=recommender,
        translator=translator,
        review_interval_days=365,
    )


@pytest.fixture
def today():
    return FIXED_TODAY


@pytest.fixture
def kingston():
    """Urban, inland Kingston location."""
    return LocationProfile(
        country_code="JM",
        country="Jamaica",
        sub_region="Kingston",
        near_coast=False,
        urban_area=True,
    )

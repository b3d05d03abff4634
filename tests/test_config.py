"""
Settings, errors and logging setup.
"""

import structlog

from caribcp.config import Settings, get_settings, settings
from caribcp.errors import CaribcpError, CatalogError, ErrorCode, InvalidInputError
from caribcp.logging_config import configure_logging
from caribcp.schemas.prefill import PreFillRequest


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SCORING_SCHEME", "DEDUPE_STRATEGIES", "APPLY_COUNTRY_AMPLIFICATION"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.scoring_scheme == "practical"
        assert s.apply_location_amplification is True
        assert s.apply_country_amplification is False
        assert s.dedupe_strategies is False
        assert s.review_interval_days == 365

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SCORING_SCHEME", "dynamic")
        monkeypatch.setenv("DEDUPE_STRATEGIES", "true")
        s = Settings(_env_file=None)
        assert s.scoring_scheme == "dynamic"
        assert s.dedupe_strategies is True

    def test_cached(self):
        assert get_settings() is get_settings()


class TestErrors:
    def test_invalid_input_defaults(self):
        err = InvalidInputError("bad")
        assert isinstance(err, CaribcpError)
        assert err.code == ErrorCode.INVALID_INPUT
        assert err.to_dict() == {"code": "E1001", "message": "bad", "details": {}}

    def test_catalog_error(self):
        err = CatalogError("store down", details={"backend": "postgres"})
        assert err.code == ErrorCode.CATALOG_ERROR
        assert err.details["backend"] == "postgres"
        assert str(err) == "store down"


class TestLogging:
    def test_configure(self):
        configure_logging(level="DEBUG", fmt="json")
        assert structlog.is_configured()
        structlog.get_logger("caribcp.test").info("logging_configured")


class TestDefaultLocale:
    def test_request_locale_follows_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "default_locale", "fr")
        request = PreFillRequest(business_type_id="restaurant", country_code="BB")
        assert request.locale == "fr"

    def test_unsupported_default_falls_back_to_english(self, monkeypatch):
        monkeypatch.setattr(settings, "default_locale", "pt")
        assert PreFillRequest(business_type_id="restaurant", country_code="BB").locale == "en"

    def test_explicit_locale_wins(self, monkeypatch):
        monkeypatch.setattr(settings, "default_locale", "fr")
        request = PreFillRequest(business_type_id="restaurant", country_code="BB", locale="es")
        assert request.locale == "es"

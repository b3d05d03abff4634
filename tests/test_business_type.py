"""
Business Type Inference Tests.
"""

import pytest

from caribcp.planning.business_type import GENERAL, BusinessTypeClassifier, KeywordRule


class TestClassify:
    def setup_method(self):
        self.classifier = BusinessTypeClassifier()

    @pytest.mark.parametrize(
        "description,expected",
        [
            ("Beachfront resort with 20 rooms", "tourism"),
            ("Neighbourhood grocery and household items", "retail"),
            ("Family restaurant serving local dishes", "food_service"),
            ("Garment factory", "manufacturing"),
            ("Custom software for small firms", "technology"),
            ("Hair and nail care", GENERAL),
            ("", GENERAL),
        ],
    )
    def test_keyword_families(self, description, expected):
        assert self.classifier.classify(description) == expected

    def test_case_insensitive(self):
        assert self.classifier.classify("HOTEL") == "tourism"

    def test_first_family_wins(self):
        """Tourism is checked before food service."""
        assert self.classifier.classify("hotel restaurant") == "tourism"

    def test_explain_reports_rule(self):
        rule = self.classifier.explain("corner shop")
        assert rule.business_type == "retail"
        assert self.classifier.explain("consulting") is None

    def test_custom_rules(self):
        classifier = BusinessTypeClassifier([KeywordRule("agriculture", ("farm",))])
        assert classifier.classify("Banana farm") == "agriculture"
        assert classifier.classify("Hotel") == GENERAL


class TestInferFromOverview:
    def setup_method(self):
        self.classifier = BusinessTypeClassifier()

    def test_reads_purpose_and_products(self):
        overview = {
            "Business Purpose": "Serving the community",
            "Products and Services": "Catering for events",
        }
        assert self.classifier.infer_from_overview(overview) == "food_service"

    def test_legacy_products_field(self):
        overview = {"Products & Services": "Retail merchandise"}
        assert self.classifier.infer_from_overview(overview) == "retail"

    def test_missing_overview(self):
        assert self.classifier.infer_from_overview(None) == GENERAL
        assert self.classifier.infer_from_overview({}) == GENERAL

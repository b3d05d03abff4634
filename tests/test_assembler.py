"""
Pre-Fill Assembler Tests.

End-to-end: request → risk list → action plans → strategies → step fields.
"""

import pytest
from pydantic import ValidationError

from caribcp.schemas.prefill import PreFillBundle, PreFillRequest

STEPS = {"BUSINESS_OVERVIEW", "ESSENTIAL_FUNCTIONS", "RISK_ASSESSMENT", "STRATEGIES", "ACTION_PLAN"}


def _request(**overrides) -> PreFillRequest:
    data = {
        "businessTypeId": "grocery_store",
        "countryCode": "JM",
        "parish": "Kingston",
        "nearCoast": False,
        "urbanArea": True,
    }
    data.update(overrides)
    return PreFillRequest.model_validate(data)


class TestKingstonGroceryBundle:
    @pytest.mark.asyncio
    async def test_bundle_shape(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        assert isinstance(bundle, PreFillBundle)
        assert set(bundle.pre_filled_fields) == STEPS
        assert bundle.industry.id == "grocery_store"
        assert bundle.location.country == "Jamaica"

    @pytest.mark.asyncio
    async def test_business_overview_placeholders_filled(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        overview = bundle.pre_filled_fields["BUSINESS_OVERVIEW"]
        assert overview["Business Purpose"].endswith("the Kingston community")
        assert "Jamaica seasonings" in overview["Products and Services"]
        assert "[" not in overview["Products and Services"]
        assert overview["Industry Type"] == "Grocery Store"
        assert overview["Country"] == "Jamaica"
        assert overview["Parish"] == "Kingston"
        assert overview["Urban Area"] is True
        assert overview["Near Coast"] is False
        assert overview["Operating Hours"] == bundle.industry.typical_operating_hours

    @pytest.mark.asyncio
    async def test_risk_assessment_fields(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        risk = bundle.pre_filled_fields["RISK_ASSESSMENT"]
        assert risk["Potential Hazards"] == [h.hazard_id for h in bundle.hazards]
        matrix = risk["Risk Assessment Matrix"]
        assert matrix[0]["hazardId"] == "power_outage"
        assert matrix[0]["riskScore"] == 12
        assert matrix[0]["riskLevel"] == "Extreme"
        hurricane = next(row for row in matrix if row["hazardId"] == "hurricane")
        assert hurricane["riskScore"] == 9
        assert hurricane["riskLevel"] == "High"

    @pytest.mark.asyncio
    async def test_action_plans_for_priority_hazards(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        assert bundle.action_plans
        assert all(p.business_type == "retail" for p in bundle.action_plans)
        hazards = {p.hazard for p in bundle.action_plans}
        assert "Power Outage" in hazards
        assert "Urban Flooding" in hazards
        assert "Drought" not in hazards

    @pytest.mark.asyncio
    async def test_action_plan_narratives(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        plan_step = bundle.pre_filled_fields["ACTION_PLAN"]
        assert len(plan_step["Action Plan by Risk Level"]) == len(bundle.action_plans)
        priorities = plan_step["Implementation Priorities"]
        assert priorities[0].startswith("Phase 1 (0-3 months)")
        assert "Power Outage" in priorities[0]
        assert "Urban Flooding" in priorities[1]
        assert priorities[-1].startswith("Phase 3")
        assert len(plan_step["Budget Estimate"]) == 3
        assert plan_step["Resource Requirements"]
        assert len(plan_step["Resource Requirements"]) == len(set(plan_step["Resource Requirements"]))
        assert plan_step["Responsible Parties and Roles"]

    @pytest.mark.asyncio
    async def test_review_date_one_year_out(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        review = bundle.pre_filled_fields["ACTION_PLAN"]["Review and Update Schedule"]
        assert review[-1] == "Next scheduled review: 2026-03-01"

    @pytest.mark.asyncio
    async def test_testing_plan_has_hazard_drills(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        rows = bundle.pre_filled_fields["ACTION_PLAN"]["Testing and Assessment Plan"]
        assert any(r.startswith("Generator Switch-over Test") for r in rows)
        assert any(r.startswith("Hurricane Preparedness Drill") for r in rows)
        assert any(r.startswith("Flood Response Drill") for r in rows)

    @pytest.mark.asyncio
    async def test_strategy_fields(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        strategies = bundle.pre_filled_fields["STRATEGIES"]
        ids = strategies["Recommended Strategies"]
        assert ids["prevention"] == bundle.recommended_strategies.prevention
        assert "supplier_diversity" in ids["prevention"]
        narrative = strategies["Business Continuity Strategies"]
        assert narrative["prevention"].startswith("**Prevention Strategies**")
        assert "- Install impact-resistant windows and doors" in narrative["prevention"]
        assert "**Response Strategies**" in narrative["response"]

    @pytest.mark.asyncio
    async def test_contextual_examples(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        overview = bundle.contextual_examples["BUSINESS_OVERVIEW"]
        assert len(overview["Business Purpose"]) > 1
        assert overview["Operating Hours"] == [bundle.industry.typical_operating_hours]
        assert bundle.contextual_examples["ESSENTIAL_FUNCTIONS"]["Business Functions"]
        assert bundle.contextual_examples["RISK_ASSESSMENT"]["Potential Hazards"]

    @pytest.mark.asyncio
    async def test_payload_is_camel_case(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        payload = bundle.to_payload()
        assert "preFilledFields" in payload
        assert "recommendedStrategies" in payload
        assert payload["hazards"][0]["riskScore"] == 12


class TestEssentialFunctions:
    @pytest.mark.asyncio
    async def test_function_rows(self, assembler, today):
        bundle = await assembler.generate(_request(), today=today)
        rows = bundle.pre_filled_fields["ESSENTIAL_FUNCTIONS"]["Business Functions"]
        assert rows[0]["Business Function"] == "Customer service and sales"
        assert rows[0]["Priority Level"] == "critical"
        assert rows[0]["Maximum Acceptable Downtime"] == "0-2h"


class TestUnknownInputs:
    @pytest.mark.asyncio
    async def test_unknown_industry_returns_none(self, assembler, today):
        assert await assembler.generate(_request(businessTypeId="space_station"), today=today) is None

    @pytest.mark.asyncio
    async def test_unknown_country_still_builds(self, assembler, today):
        bundle = await assembler.generate(
            _request(businessTypeId="restaurant", countryCode="XX", parish=None), today=today
        )
        assert bundle is not None
        assert bundle.hazards
        overview = bundle.pre_filled_fields["BUSINESS_OVERVIEW"]
        assert overview["Country"] == "XX"
        assert overview["Parish"] == ""

    def test_unsupported_locale_rejected(self):
        with pytest.raises(ValidationError):
            _request(locale="de")


class TestLocalization:
    @pytest.mark.asyncio
    async def test_spanish_fields_and_examples(self, assembler, today):
        bundle = await assembler.generate(_request(locale="es"), today=today)
        overview = bundle.pre_filled_fields["BUSINESS_OVERVIEW"]
        assert "Propósito del Negocio" in overview
        assert overview["Propósito del Negocio"].startswith("Proveer comestibles frescos")
        assert overview["Propósito del Negocio"].endswith("Kingston")
        resources = bundle.pre_filled_fields["ACTION_PLAN"]["Requisitos de Recursos"]
        assert resources

    @pytest.mark.asyncio
    async def test_french_planning_measures(self, assembler, today):
        bundle = await assembler.generate(_request(locale="fr"), today=today)
        assert bundle.hazards[0].planning_measures.startswith("Mettre en œuvre")

    @pytest.mark.asyncio
    async def test_missing_locale_examples_fall_back_to_english(self, assembler, today):
        bundle = await assembler.generate(
            _request(businessTypeId="beauty_salon", locale="fr"), today=today
        )
        overview = bundle.pre_filled_fields["BUSINESS_OVERVIEW"]
        assert overview["But de l'Entreprise"].startswith("To provide professional hair care")

    @pytest.mark.asyncio
    async def test_untranslated_narrative_falls_back_to_english(self, assembler, today):
        bundle = await assembler.generate(_request(locale="es"), today=today)
        budget = bundle.pre_filled_fields["ACTION_PLAN"]["Estimación de Presupuesto"]
        assert budget[0].startswith("Phase 1 (0-3 months): $5,000-$15,000")


class TestApply:
    @pytest.mark.asyncio
    async def test_existing_answers_kept(self, assembler, today):
        request = _request(existingFieldValues={"BUSINESS_OVERVIEW": {"Business Purpose": "My shop"}})
        merged = await assembler.apply(request, today=today)
        assert merged["BUSINESS_OVERVIEW"]["Business Purpose"] == "My shop"
        assert merged["BUSINESS_OVERVIEW"]["Industry Type"] == "Grocery Store"

    @pytest.mark.asyncio
    async def test_empty_draft_filled(self, assembler, today):
        merged = await assembler.apply(_request(), today=today)
        assert merged["BUSINESS_OVERVIEW"]["Business Purpose"].startswith("To provide fresh groceries")

    @pytest.mark.asyncio
    async def test_prior_matrix_ratings_respected(self, assembler, today):
        draft = {
            "RISK_ASSESSMENT": {
                "Risk Matrix": [
                    {"hazardId": "power_outage", "likelihood": "2", "severity": "1"},
                ],
            },
        }
        bundle = await assembler.generate(_request(existingFieldValues=draft), today=today)
        outage = next(h for h in bundle.hazards if h.hazard_id == "power_outage")
        assert (outage.likelihood, outage.severity) == ("possible", "minor")
        assert outage.risk_score == 2

    @pytest.mark.asyncio
    async def test_unknown_industry_returns_migrated_draft(self, assembler, today):
        request = _request(
            businessTypeId="space_station",
            existingFieldValues={"BUSINESS_OVERVIEW": {"Products & Services": "Rockets"}},
        )
        merged = await assembler.apply(request, today=today)
        assert merged == {"BUSINESS_OVERVIEW": {"Products and Services": "Rockets"}}


class TestEditedDraftRoundTrip:
    """An edited draft sent back in its own locale keeps the user's ratings."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("locale", ["en", "es", "fr"])
    async def test_edited_matrix_rescored(self, assembler, translator, today, locale):
        first = await assembler.generate(_request(locale=locale), today=today)
        draft = first.model_dump(mode="json")["pre_filled_fields"]
        matrix_field = translator.translate("fields.risk_assessment_matrix", locale)
        for row in draft["RISK_ASSESSMENT"][matrix_field]:
            if row["hazardId"] == "hurricane":
                row["likelihood"], row["severity"] = "unlikely", "minor"

        second = await assembler.generate(
            _request(locale=locale, existingFieldValues=draft), today=today
        )
        hurricane = next(h for h in second.hazards if h.hazard_id == "hurricane")
        assert (hurricane.likelihood, hurricane.severity) == ("unlikely", "minor")
        assert hurricane.risk_score == 1
        assert "Hurricane" not in " ".join(p.hazard for p in second.action_plans)

    @pytest.mark.asyncio
    async def test_localized_matrix_drives_form_plans(self, assembler, plan_generator, translator, today):
        bundle = await assembler.generate(_request(locale="fr"), today=today)
        step_data = bundle.model_dump(mode="json")["pre_filled_fields"]
        plans = plan_generator.generate_from_form(step_data, translator)
        assert [p.hazard for p in plans] == [p.hazard for p in bundle.action_plans]

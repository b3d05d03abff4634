"""
Action-plan narrative tests.
"""

from datetime import date

from caribcp.prefill import narratives
from caribcp.schemas.action_plan import ActionItem, ActionPlan


def _plan(hazard, level, key=None, resources=(), responsible="Management"):
    return ActionPlan(
        hazard=hazard,
        risk_level=level,
        business_type="retail",
        template_key=key,
        resources_needed=list(resources),
        immediate_actions=[ActionItem(task=f"Secure site for {hazard}", responsible=responsible, duration="1 hour")],
        medium_term_actions=[ActionItem(task="Assess damage", responsible="Owner")],
        long_term_reduction=[f"Reduce {hazard} exposure"],
    )


class TestStrategyNarrative:
    def test_sections_and_bullets(self, translator):
        text = narratives.strategy_narrative([_plan("Fire", "High", "fire")], "en", translator)
        assert text["prevention"] == (
            "**Prevention Strategies**\n\n**Fire (High)**\n- Reduce Fire exposure"
        )
        assert "- Secure site for Fire (Management, 1 hour)" in text["response"]
        assert "- Assess damage (Owner)" in text["recovery"]

    def test_no_plans_header_only(self, translator):
        text = narratives.strategy_narrative([], "en", translator)
        assert text["response"] == "**Response Strategies**"


class TestImplementationPriorities:
    def test_phases(self, translator):
        plans = [_plan("Fire", "Extreme"), _plan("Flood", "High"), _plan("Storm", "Very High")]
        lines = narratives.implementation_priorities(plans, "en", translator)
        assert lines[0] == "Phase 1 (0-3 months): Address extreme risks - Fire, Storm"
        assert lines[1] == "Phase 2 (3-6 months): Address high risks - Flood"
        assert lines[2].startswith("Phase 3 (6-12 months)")

    def test_phase_three_always_present(self, translator):
        assert len(narratives.implementation_priorities([], "en", translator)) == 1


class TestResources:
    def test_union_in_order(self):
        plans = [_plan("A", "High", resources=["x", "y"]), _plan("B", "High", resources=["y", "z"])]
        assert narratives.resource_requirements(plans) == ["x", "y", "z"]


class TestResponsibilities:
    def test_grouped_by_role(self, translator):
        lines = narratives.responsibility_assignment(
            [_plan("Fire", "High"), _plan("Flood", "High")], "en", translator
        )
        assert lines[0].startswith("Responsibilities are assigned")
        assert "Management: Secure site for Fire; Secure site for Flood" in lines
        assert "Owner: Assess damage" in lines

    def test_no_plans(self, translator):
        assert narratives.responsibility_assignment([], "en", translator) == []


class TestSchedules:
    def test_next_review(self, translator):
        lines = narratives.review_schedule(date(2024, 1, 15), 365, "en", translator)
        assert lines[-1] == "Next scheduled review: 2025-01-14"
        assert lines[0].startswith("Monthly")

    def test_custom_interval(self):
        assert narratives.next_review_date(date(2024, 1, 1), 30) == date(2024, 1, 31)

    def test_testing_drills_once_per_template(self, translator):
        plans = [_plan("Fire", "High", "fire"), _plan("Blaze", "High", "fire"), _plan("X", "High")]
        rows = narratives.testing_schedule(plans, "en", translator)
        assert len(rows) == 5
        assert rows[-1].startswith("Fire Evacuation Drill")

"""
Pre-Fill Merge Tests.

Merging is additive: filled answers are never overwritten.
"""

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from caribcp.prefill.merge import is_empty, is_field_prefilled, merge_prefill_data
from caribcp.schemas.hazard import LocationProfile
from caribcp.schemas.industry import IndustryProfile
from caribcp.schemas.prefill import PreFillBundle

TEMPLATE = {"BUSINESS_OVERVIEW": {"Business Purpose": "template text"}}


def _bundle(fields) -> PreFillBundle:
    return PreFillBundle(
        industry=IndustryProfile(id="grocery_store", name="Grocery Store"),
        location=LocationProfile(country_code="JM"),
        pre_filled_fields=fields,
    )


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, "", "   ", [], {}, (), set()])
    def test_empty_values(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", ["x", ["a"], {"k": 1}, False, 0, 0.0, True])
    def test_non_empty_values(self, value):
        assert not is_empty(value)


class TestMerge:
    def test_existing_answer_kept(self):
        existing = {"BUSINESS_OVERVIEW": {"Business Purpose": "My shop"}}
        merged = merge_prefill_data(existing, _bundle(TEMPLATE))
        assert merged["BUSINESS_OVERVIEW"]["Business Purpose"] == "My shop"

    def test_empty_draft_filled(self):
        merged = merge_prefill_data({}, _bundle(TEMPLATE))
        assert merged["BUSINESS_OVERVIEW"]["Business Purpose"] == "template text"

    def test_blank_answer_filled(self):
        existing = {"BUSINESS_OVERVIEW": {"Business Purpose": ""}}
        merged = merge_prefill_data(existing, TEMPLATE)
        assert merged["BUSINESS_OVERVIEW"]["Business Purpose"] == "template text"

    def test_false_is_an_answer(self):
        existing = {"BUSINESS_OVERVIEW": {"Near Coast": False}}
        merged = merge_prefill_data(existing, {"BUSINESS_OVERVIEW": {"Near Coast": True}})
        assert merged["BUSINESS_OVERVIEW"]["Near Coast"] is False

    def test_unrelated_fields_preserved(self):
        existing = {"PLAN_INFORMATION": {"Plan Manager": "Ana"}}
        merged = merge_prefill_data(existing, TEMPLATE)
        assert merged["PLAN_INFORMATION"] == {"Plan Manager": "Ana"}

    def test_inputs_not_mutated(self):
        existing = {"BUSINESS_OVERVIEW": {"Customer Base": ["walk-in"]}}
        prefill = {"BUSINESS_OVERVIEW": {"Business Purpose": "template text", "Hours": ["9-5"]}}
        existing_before = copy.deepcopy(existing)
        prefill_before = copy.deepcopy(prefill)

        merged = merge_prefill_data(existing, prefill)
        merged["BUSINESS_OVERVIEW"]["Customer Base"].append("online")
        merged["BUSINESS_OVERVIEW"]["Hours"].append("weekends")

        assert existing == existing_before
        assert prefill == prefill_before

    def test_none_existing(self):
        assert merge_prefill_data(None, TEMPLATE) == TEMPLATE


_values = st.one_of(
    st.none(),
    st.text(max_size=5),
    st.lists(st.text(max_size=3), max_size=2),
    st.booleans(),
    st.integers(min_value=0, max_value=3),
)
_fields = st.dictionaries(st.sampled_from(["a", "b", "c", "d"]), _values, max_size=4)
_steps = st.dictionaries(st.sampled_from(["S1", "S2", "S3"]), _fields, max_size=3)


class TestMergeProperties:
    @given(_steps, _steps)
    def test_never_overwrites_filled_fields(self, existing, prefill):
        merged = merge_prefill_data(existing, prefill)
        for step, fields in existing.items():
            for name, value in fields.items():
                if not is_empty(value):
                    assert merged[step][name] == value

    @given(_steps, _steps)
    def test_fills_every_empty_field(self, existing, prefill):
        merged = merge_prefill_data(existing, prefill)
        for step, fields in prefill.items():
            for name, value in fields.items():
                if is_empty(existing.get(step, {}).get(name)):
                    assert merged[step][name] == value

    @given(_steps, _steps)
    def test_idempotent(self, existing, prefill):
        once = merge_prefill_data(existing, prefill)
        assert merge_prefill_data(once, prefill) == once


class TestIsFieldPrefilled:
    def test_matches_default(self):
        bundle = _bundle(TEMPLATE)
        assert is_field_prefilled("BUSINESS_OVERVIEW", "Business Purpose", "template text", bundle)

    def test_edited_value(self):
        bundle = _bundle(TEMPLATE)
        assert not is_field_prefilled("BUSINESS_OVERVIEW", "Business Purpose", "My shop", bundle)

    def test_empty_value(self):
        assert not is_field_prefilled("BUSINESS_OVERVIEW", "Business Purpose", "", TEMPLATE)

    def test_unknown_field(self):
        assert not is_field_prefilled("BUSINESS_OVERVIEW", "Other", "template text", TEMPLATE)

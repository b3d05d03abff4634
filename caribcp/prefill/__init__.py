"""
Pre-fill assembly, narratives, merge and legacy-form migration.
"""

from caribcp.prefill.assembler import PreFillAssembler
from caribcp.prefill.examples import ExampleBuilder, localize_placeholders
from caribcp.prefill.merge import is_empty, is_field_prefilled, merge_prefill_data
from caribcp.prefill.migration import (
    extract_prior_ratings,
    find_risk_matrix,
    from_legacy_form,
)

__all__ = [
    "ExampleBuilder",
    "PreFillAssembler",
    "extract_prior_ratings",
    "find_risk_matrix",
    "from_legacy_form",
    "is_empty",
    "is_field_prefilled",
    "localize_placeholders",
    "merge_prefill_data",
]

"""
Additive merge of pre-filled defaults into caller-held form state.

A field the caller already filled is never overwritten. Empty means
None, an empty or whitespace-only string, or an empty collection;
``False`` and ``0`` are answers and count as filled.
"""

import copy
from typing import Any, Mapping, Union

import structlog

from caribcp.schemas.prefill import PreFillBundle

logger = structlog.get_logger(__name__)

StepFields = Mapping[str, Mapping[str, Any]]


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def _fields_of(source: Union[PreFillBundle, StepFields]) -> StepFields:
    if isinstance(source, PreFillBundle):
        return source.pre_filled_fields
    return source


def merge_prefill_data(
    existing: StepFields,
    prefill: Union[PreFillBundle, StepFields],
) -> dict[str, dict[str, Any]]:
    """
    Return a new step → field → value dict with defaults filled in.

    Neither argument is mutated. Values copied from ``prefill`` are deep
    copies, so later edits to the result do not leak into the bundle.
    """
    merged: dict[str, dict[str, Any]] = {
        step: dict(copy.deepcopy(fields)) for step, fields in (existing or {}).items()
    }
    filled = kept = 0

    for step, fields in _fields_of(prefill).items():
        target = merged.setdefault(step, {})
        for name, value in fields.items():
            if is_empty(target.get(name)):
                target[name] = copy.deepcopy(value)
                filled += 1
            else:
                kept += 1

    logger.debug("prefill_merged", filled=filled, kept=kept)
    return merged


def is_field_prefilled(
    step: str,
    field: str,
    value: Any,
    prefill: Union[PreFillBundle, StepFields],
) -> bool:
    """True when ``value`` is non-empty and still equals the default for the field."""
    if is_empty(value):
        return False
    default = _fields_of(prefill).get(step, {}).get(field)
    if default is None:
        return False
    return value == default

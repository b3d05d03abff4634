"""
One-time migration of legacy wizard form data.

Older drafts stored fields under historical names ("Products & Services",
"Risk Matrix" …) and ratings as numeric strings. ``from_legacy_form``
renames them once at the boundary so the engine only ever sees the
canonical field names; ``extract_prior_ratings`` turns the migrated risk
matrix into ``PriorRating`` values keyed by hazard id.
"""

import copy
import re
from typing import Any, Mapping, Optional

import structlog

from caribcp.i18n.translations import TranslationManager, get_translator
from caribcp.schemas.assessment import PriorRating

logger = structlog.get_logger(__name__)

RISK_MATRIX_FIELD = "Risk Assessment Matrix"

# step → {legacy name: canonical name}
LEGACY_FIELD_RENAMES: dict[str, dict[str, str]] = {
    "BUSINESS_OVERVIEW": {
        "Products & Services": "Products and Services",
        "Key Personnel": "Key Personnel Involved",
        "Minimum Resources": "Minimum Resource Requirements",
        "Business Hours": "Operating Hours",
    },
    "ESSENTIAL_FUNCTIONS": {
        "Essential Functions": "Business Functions",
    },
    "RISK_ASSESSMENT": {
        "Hazards": "Potential Hazards",
    },
}

# Checked in order; the first non-empty list wins
RISK_MATRIX_FIELDS = (
    RISK_MATRIX_FIELD,
    "Risk Matrix",
    "Hazard Risk Matrix",
    "riskAssessmentMatrix",
    "risk_matrix",
)

LIKELIHOOD_CODES = {"1": "unlikely", "2": "possible", "3": "likely", "4": "almost_certain"}
SEVERITY_CODES = {"1": "minor", "2": "moderate", "3": "major", "4": "catastrophic"}

_HAZARD_ID_KEYS = ("hazardId", "hazard_id")
_HAZARD_NAME_KEYS = ("hazard", "hazardName", "hazard_name")


def from_legacy_form(step_data: Optional[Mapping[str, Any]]) -> dict[str, dict[str, Any]]:
    """
    Return a copy of ``step_data`` with legacy field names migrated.

    A canonical field that is already present is never replaced by its
    legacy counterpart. The risk matrix is moved under
    ``"Risk Assessment Matrix"`` whichever historical name it used.
    """
    migrated: dict[str, dict[str, Any]] = {}
    renamed = 0
    for step, fields in (step_data or {}).items():
        if not isinstance(fields, Mapping):
            migrated[step] = copy.deepcopy(fields)
            continue
        out = {}
        renames = LEGACY_FIELD_RENAMES.get(step, {})
        for name, value in fields.items():
            target = renames.get(name, name)
            if target != name:
                if target in fields:
                    continue
                renamed += 1
            out[target] = copy.deepcopy(value)
        migrated[step] = out

    risk_step = migrated.get("RISK_ASSESSMENT")
    if isinstance(risk_step, dict) and RISK_MATRIX_FIELD not in risk_step:
        for name in RISK_MATRIX_FIELDS[1:]:
            if name in risk_step:
                risk_step[RISK_MATRIX_FIELD] = risk_step.pop(name)
                renamed += 1
                break

    if renamed:
        logger.info("legacy_fields_migrated", renamed=renamed)
    return migrated


def risk_matrix_field_names(translator: Optional[TranslationManager] = None) -> list[str]:
    """Canonical and legacy matrix names, then the localized name of every supported locale."""
    translator = translator or get_translator()
    names = list(RISK_MATRIX_FIELDS)
    for lang in translator.SUPPORTED_LANGUAGES:
        name = translator.translate("fields.risk_assessment_matrix", lang.value)
        if name not in names:
            names.append(name)
    return names


def find_risk_matrix(
    step_data: Optional[Mapping[str, Any]],
    translator: Optional[TranslationManager] = None,
) -> list[Any]:
    """Risk-matrix rows from the RISK_ASSESSMENT step, or []."""
    risk_step = (step_data or {}).get("RISK_ASSESSMENT")
    if not isinstance(risk_step, Mapping):
        return []
    for name in risk_matrix_field_names(translator):
        rows = risk_step.get(name)
        if isinstance(rows, list) and rows:
            return rows
    return []


def hazard_key(row: Mapping[str, Any]) -> Optional[str]:
    """Hazard id of a matrix row, derived from its display name when absent."""
    for key in _HAZARD_ID_KEYS:
        value = row.get(key)
        if value:
            return str(value)
    for key in _HAZARD_NAME_KEYS:
        value = row.get(key)
        if value:
            return re.sub(r"[^a-z0-9]+", "_", str(value).lower()).strip("_") or None
    return None


def _rating(value: Any, codes: dict[str, str]) -> Optional[str]:
    if value is None or value == "":
        return None
    text = str(value).strip()
    return codes.get(text, text.lower())


def extract_prior_ratings(
    step_data: Optional[Mapping[str, Any]],
    translator: Optional[TranslationManager] = None,
) -> dict[str, PriorRating]:
    """
    User-entered likelihood/severity per hazard id.

    The matrix is found under its English, legacy or localized field
    name. Rows without a hazard or without either rating are skipped.
    Numeric codes "1"-"4" map onto the four-point scales; anything else
    is passed through lower-cased and validated later by the scoring
    scheme.
    """
    priors: dict[str, PriorRating] = {}
    for row in find_risk_matrix(from_legacy_form(step_data), translator):
        if not isinstance(row, Mapping):
            continue
        hazard_id = hazard_key(row)
        likelihood = _rating(row.get("likelihood"), LIKELIHOOD_CODES)
        severity = _rating(row.get("severity"), SEVERITY_CODES)
        if hazard_id is None or (likelihood is None and severity is None):
            continue
        priors[hazard_id] = PriorRating(likelihood=likelihood, severity=severity)
    return priors

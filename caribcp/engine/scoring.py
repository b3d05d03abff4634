"""
Risk Scoring: likelihood × severity.

Three named schemes coexist:

    practical    4×4 grid, ≥12 Extreme, ≥8 High, ≥4 Medium, else Low
                 (default; used by the pre-fill risk list)
    interactive  4×4 grid, ≥12 Extreme, ≥8 High, ≥3 Medium, ≥1 Low
                 (the interactive assessment matrix)
    dynamic      5×5 grid, ≥20 Very High, ≥15 High, ≥8 Medium, ≥4 Low,
                 else Very Low (scores catalog frequency/impact directly)

They are never blended: a caller picks one by name.
"""

from dataclasses import dataclass
from typing import Optional, Union

from caribcp.errors import ErrorCode, InvalidInputError
from caribcp.schemas.assessment import RiskAssessment
from caribcp.schemas.hazard import RiskLevel


@dataclass(frozen=True)
class ScoringScheme:
    """Weights and score→label thresholds for one scoring grid."""
    name: str
    likelihood_scale: tuple[str, ...]              # Ordered low → high, weight = index + 1
    severity_scale: tuple[str, ...]
    thresholds: tuple[tuple[int, str], ...]        # (min score, label), descending
    floor_label: str                               # Label below the lowest threshold
    uses_catalog_ratings: bool = False             # Score frequency/impact instead of level mapping

    def likelihood_weight(self, likelihood: str) -> int:
        try:
            return self.likelihood_scale.index(likelihood) + 1
        except ValueError:
            raise InvalidInputError(
                f"Unknown likelihood '{likelihood}' for scheme '{self.name}'",
                code=ErrorCode.UNKNOWN_RATING,
                details={"likelihood": likelihood, "allowed": list(self.likelihood_scale)},
            ) from None

    def severity_weight(self, severity: str) -> int:
        try:
            return self.severity_scale.index(severity) + 1
        except ValueError:
            raise InvalidInputError(
                f"Unknown severity '{severity}' for scheme '{self.name}'",
                code=ErrorCode.UNKNOWN_RATING,
                details={"severity": severity, "allowed": list(self.severity_scale)},
            ) from None

    def label(self, score: int) -> str:
        for minimum, label in self.thresholds:
            if score >= minimum:
                return label
        return self.floor_label

    @property
    def max_score(self) -> int:
        return len(self.likelihood_scale) * len(self.severity_scale)


_FOUR_LIKELIHOOD = ("unlikely", "possible", "likely", "almost_certain")
_FOUR_SEVERITY = ("minor", "moderate", "major", "catastrophic")

PRACTICAL = ScoringScheme(
    name="practical",
    likelihood_scale=_FOUR_LIKELIHOOD,
    severity_scale=_FOUR_SEVERITY,
    thresholds=((12, "Extreme"), (8, "High"), (4, "Medium")),
    floor_label="Low",
)

INTERACTIVE = ScoringScheme(
    name="interactive",
    likelihood_scale=_FOUR_LIKELIHOOD,
    severity_scale=_FOUR_SEVERITY,
    thresholds=((12, "Extreme"), (8, "High"), (3, "Medium"), (1, "Low")),
    floor_label="",
)

DYNAMIC = ScoringScheme(
    name="dynamic",
    likelihood_scale=("rare", "unlikely", "possible", "likely", "almost_certain"),
    severity_scale=("minimal", "minor", "moderate", "major", "catastrophic"),
    thresholds=((20, "Very High"), (15, "High"), (8, "Medium"), (4, "Low")),
    floor_label="Very Low",
    uses_catalog_ratings=True,
)

SCHEMES: dict[str, ScoringScheme] = {s.name: s for s in (PRACTICAL, INTERACTIVE, DYNAMIC)}

# Resolved risk level → default (likelihood, severity)
LEVEL_RATINGS: dict[RiskLevel, tuple[str, str]] = {
    RiskLevel.VERY_HIGH: ("almost_certain", "catastrophic"),
    RiskLevel.HIGH: ("likely", "major"),
    RiskLevel.MEDIUM: ("possible", "moderate"),
    RiskLevel.LOW: ("unlikely", "minor"),
}

SchemeLike = Union[str, ScoringScheme, None]


def get_scheme(scheme: SchemeLike = None) -> ScoringScheme:
    """Resolve a scheme by name. None means the configured default."""
    if isinstance(scheme, ScoringScheme):
        return scheme
    if scheme is None:
        from caribcp.config import settings

        scheme = settings.scoring_scheme
    try:
        return SCHEMES[scheme]
    except KeyError:
        raise InvalidInputError(
            f"Unknown scoring scheme '{scheme}'",
            code=ErrorCode.UNKNOWN_SCHEME,
            details={"scheme": scheme, "allowed": sorted(SCHEMES)},
        ) from None


def calculate_risk_score(likelihood: str, severity: str, scheme: SchemeLike = None) -> int:
    """likelihood weight × severity weight. Unknown codes raise InvalidInputError."""
    s = get_scheme(scheme)
    return s.likelihood_weight(likelihood) * s.severity_weight(severity)


def get_risk_level(score: int, scheme: SchemeLike = None) -> str:
    """Map a score to its label under the given scheme."""
    return get_scheme(scheme).label(score)


def default_ratings(risk_level: RiskLevel) -> tuple[str, str]:
    return LEVEL_RATINGS[RiskLevel(risk_level)]


def reassess(
    assessment: RiskAssessment,
    likelihood: Optional[str] = None,
    severity: Optional[str] = None,
    scheme: SchemeLike = None,
) -> RiskAssessment:
    """
    Apply a user edit to an assessment.

    Only the supplied codes change; score and level are always recomputed
    from the resulting pair. The original instance is left untouched.
    """
    new_likelihood = likelihood if likelihood is not None else assessment.likelihood
    new_severity = severity if severity is not None else assessment.severity
    score = calculate_risk_score(new_likelihood, new_severity, scheme)
    return assessment.model_copy(
        update={
            "likelihood": new_likelihood,
            "severity": new_severity,
            "risk_score": score,
            "risk_level": get_risk_level(score, scheme),
        }
    )

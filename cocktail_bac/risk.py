"""BAC risk tiers.

Bands are half-open with the lower bound inclusive, so exactly 0.02 is
caution and exactly 0.08 is danger. Educational guidance only; never a
guarantee that driving is legal or safe.
"""

from dataclasses import asdict, dataclass

from cocktail_bac.doses import is_number
from cocktail_bac.errors import ValidationError

LEGAL_LIMIT_BAC = 0.08


@dataclass(frozen=True)
class RiskTier:
    level: str  # safe, caution, warning, danger
    message: str
    color: str

    def as_dict(self) -> dict:
        return asdict(self)


SAFE = RiskTier("safe", "Minimal impairment expected", "green")
CAUTION = RiskTier("caution", "Mild relaxation, slight impairment", "yellow")
WARNING = RiskTier("warning", "Impaired coordination and judgment", "orange")
DANGER = RiskTier("danger", "Significant impairment - Do not drive", "red")

RISK_TIERS = (SAFE, CAUTION, WARNING, DANGER)

# (exclusive upper bound, tier), checked in order; anything above is DANGER.
RISK_BANDS = (
    (0.02, SAFE),
    (0.05, CAUTION),
    (LEGAL_LIMIT_BAC, WARNING),
)


def classify_risk(bac: float) -> RiskTier:
    """Map a BAC value to its risk tier."""
    if not is_number(bac):
        raise ValidationError("BAC must be a number")
    if bac < 0:
        raise ValidationError("BAC cannot be negative")
    for upper, tier in RISK_BANDS:
        if bac < upper:
            return tier
    return DANGER

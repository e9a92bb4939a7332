"""One-call BAC summary for a recipe and a drinker profile."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from cocktail_bac.calculations import estimate_bac, time_until_sober
from cocktail_bac.doses import profile_from_record
from cocktail_bac.risk import RiskTier, classify_risk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BACSummary:
    bac: float
    bac_percent: str  # bac * 100 with two decimals, e.g. "1.42"
    hours_until_sober: float
    risk: RiskTier

    def as_dict(self) -> dict:
        return {
            "bac": self.bac,
            "bacPercent": self.bac_percent,
            "hoursUntilSober": self.hours_until_sober,
            "riskLevel": self.risk.as_dict(),
        }


def format_bac_percent(bac: float) -> str:
    return f"{bac * 100:.2f}"


def summarize_bac(doses: Iterable[Any], profile: Any) -> Optional[BACSummary]:
    """Estimate BAC, risk and sober time for one serving.

    Returns None when the profile lacks sex or weight: the caller should ask
    the user to complete their profile. Bad values still raise ValidationError.
    """
    subject = profile_from_record(profile)
    if subject is None:
        logger.debug("BAC summary unavailable: profile incomplete")
        return None

    bac = estimate_bac(doses, subject.sex, subject.weight_kg)
    return BACSummary(
        bac=bac,
        bac_percent=format_bac_percent(bac),
        hours_until_sober=time_until_sober(bac),
        risk=classify_risk(bac),
    )

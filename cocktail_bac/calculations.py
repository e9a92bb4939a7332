"""BAC calculations using the Widmark formula and linear elimination.

Model:
- Alcohol: grams = volume_ml * abv * 0.789
- BAC = grams / (r * body_weight_g), as a decimal (0.08 means 0.08%)
- r = 0.68 (male), 0.55 (female)
- Elimination: 0.015 BAC per hour, never below zero

BAC is instantaneous: the whole serving is treated as consumed and absorbed
at one moment. Absorption lag and drinks spread over time are not modeled.
"""

import logging
import math
from typing import Any, Iterable, List, Optional, Tuple

from cocktail_bac.doses import BiologicalSex, coerce_doses, is_number
from cocktail_bac.errors import ValidationError

logger = logging.getLogger(__name__)

# Distribution ratio (Widmark r)
R_MALE = 0.68
R_FEMALE = 0.55

WIDMARK_FACTORS = {
    BiologicalSex.MALE: R_MALE,
    BiologicalSex.FEMALE: R_FEMALE,
}

# Elimination rate (BAC per hour)
ELIMINATION_PER_HOUR = 0.015


def round_bac(value: float) -> float:
    """Round half up to 4 decimal places."""
    return math.floor(value * 10000 + 0.5) / 10000


def _body_weight_grams(weight_kg: float) -> float:
    return weight_kg * 1000.0


def widmark_factor(sex: Any) -> float:
    return WIDMARK_FACTORS[BiologicalSex.parse(sex)]


def aggregate_alcohol_grams(doses: Iterable[Any]) -> float:
    """Total grams of ethanol in the doses. An empty list is 0.0, not an error."""
    total = 0.0
    for dose in coerce_doses(doses):
        total += dose.ethanol_grams
    return total


def estimate_bac(doses: Iterable[Any], sex: Any, weight_kg: float) -> float:
    """Instantaneous BAC for one serving of the doses, rounded to 4 places."""
    if not is_number(weight_kg) or weight_kg <= 0:
        raise ValidationError("Weight must be positive")
    r = widmark_factor(sex)
    grams = aggregate_alcohol_grams(doses)
    bac = round_bac(grams / (r * _body_weight_grams(weight_kg)))
    logger.debug("Estimated BAC %.4f from %.3f g ethanol (r=%.2f, %.1f kg)", bac, grams, r, weight_kg)
    return bac


def project_bac_after_time(initial_bac: float, hours_elapsed: float) -> float:
    """BAC after hours_elapsed of linear elimination. Floors at 0."""
    if not is_number(initial_bac) or initial_bac < 0:
        raise ValidationError("Initial BAC cannot be negative")
    if not is_number(hours_elapsed) or hours_elapsed < 0:
        raise ValidationError("Hours elapsed cannot be negative")
    metabolized = ELIMINATION_PER_HOUR * hours_elapsed
    return max(0.0, initial_bac - metabolized)


def time_until_sober(bac: float) -> float:
    """Hours until BAC reaches 0. Already sober (bac <= 0) is 0.0."""
    if not is_number(bac):
        raise ValidationError("BAC must be a number")
    if bac <= 0:
        return 0.0
    return bac / ELIMINATION_PER_HOUR


def decay_curve(
    initial_bac: float,
    step_hours: float = 0.25,
    max_hours: Optional[float] = None,
) -> List[Tuple[float, float]]:
    """Return (hours, bac) pairs from 0 until sober, for graphing.

    The last point is the sober time itself unless max_hours cuts it short.
    """
    if not is_number(step_hours) or step_hours <= 0:
        raise ValidationError("step_hours must be > 0")
    if not is_number(initial_bac) or initial_bac < 0:
        raise ValidationError("Initial BAC cannot be negative")

    end = time_until_sober(initial_bac)
    if max_hours is not None:
        if not is_number(max_hours) or max_hours < 0:
            raise ValidationError("max_hours cannot be negative")
        end = min(end, max_hours)

    points: List[Tuple[float, float]] = []
    i = 0
    t = 0.0
    # Tolerance keeps float noise in the sober time from adding a duplicate end point.
    while end - t > 1e-9:
        points.append((round(t, 4), project_bac_after_time(initial_bac, t)))
        i += 1
        t = i * step_hours
    points.append((round(end, 4), project_bac_after_time(initial_bac, end)))
    return points

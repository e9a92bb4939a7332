"""
Cocktail BAC engine: Widmark BAC estimate, linear decay, and risk tiers
for one serving of a recipe.
Use from project root: python -m cocktail_bac.main
"""

from cocktail_bac.calculations import (
    aggregate_alcohol_grams,
    decay_curve,
    estimate_bac,
    project_bac_after_time,
    time_until_sober,
)
from cocktail_bac.doses import (
    ETHANOL_DENSITY,
    BiologicalSex,
    IngredientDose,
    PhysiologicalProfile,
    parse_recipe_ingredients,
    profile_from_record,
)
from cocktail_bac.errors import ValidationError
from cocktail_bac.risk import RiskTier, classify_risk
from cocktail_bac.summary import BACSummary, summarize_bac

__all__ = [
    "BACSummary",
    "BiologicalSex",
    "ETHANOL_DENSITY",
    "IngredientDose",
    "PhysiologicalProfile",
    "RiskTier",
    "ValidationError",
    "aggregate_alcohol_grams",
    "classify_risk",
    "decay_curve",
    "estimate_bac",
    "parse_recipe_ingredients",
    "profile_from_record",
    "project_bac_after_time",
    "summarize_bac",
    "time_until_sober",
]

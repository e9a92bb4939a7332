"""Ingredient doses and drinker profiles for BAC estimation.

A dose is one consumed liquid: volume in mL and ABV as a fraction (0 to 1).
Recipe ingredient records ({"name", "volumeInMl", "abv", ...}) are accepted
anywhere doses are; only volume and ABV are used.
"""

import math
from collections import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from cocktail_bac.errors import ValidationError

# Ethanol density (g/mL) for volume x ABV -> grams.
ETHANOL_DENSITY = 0.789


def is_number(value: Any) -> bool:
    """True for real, non-NaN numbers. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def _raise_if(errors: List[str]) -> None:
    if errors:
        raise ValidationError("; ".join(errors))


class BiologicalSex(str, Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: Any) -> "BiologicalSex":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError("Biological sex must be male or female")


def dose_errors(volume_ml: Any, abv: Any) -> List[str]:
    """Return the constraints one dose violates (empty list when valid)."""
    if not is_number(volume_ml) or not is_number(abv):
        return ["Volume and ABV must be numbers"]
    errors = []
    if volume_ml <= 0:
        errors.append("Volume must be greater than 0")
    if abv < 0:
        errors.append("ABV cannot be negative")
    elif abv > 1:
        errors.append("ABV cannot exceed 1")
    return errors


@dataclass(frozen=True)
class IngredientDose:
    """One consumed liquid. Validated on construction."""

    volume_ml: float
    abv: float  # e.g. 0.4 for 40%

    def __post_init__(self):
        _raise_if(dose_errors(self.volume_ml, self.abv))

    @property
    def ethanol_ml(self) -> float:
        return self.volume_ml * self.abv

    @property
    def ethanol_grams(self) -> float:
        return self.ethanol_ml * ETHANOL_DENSITY


def _dose_fields(item: Any) -> Tuple[Any, Any]:
    if isinstance(item, Mapping):
        volume = item.get("volumeInMl", item.get("volume_ml"))
        abv = item.get("abv", item.get("strength"))
        return volume, abv
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return item[0], item[1]
    return getattr(item, "volume_ml", None), getattr(item, "abv", None)


def coerce_doses(items: Iterable[Any]) -> List[IngredientDose]:
    """Validate every item and return doses in input order.

    Items may be IngredientDose, (volume_ml, abv) pairs, recipe ingredient
    mappings or objects with volume_ml/abv attributes. All problems across
    the list are reported together; nothing is returned on failure.
    """
    if not isinstance(items, abc.Iterable) or isinstance(items, (str, bytes, Mapping)):
        raise ValidationError("Ingredients must be a list")

    doses: List[IngredientDose] = []
    errors: List[str] = []
    for item in items:
        if isinstance(item, IngredientDose):
            doses.append(item)
            continue
        volume, abv = _dose_fields(item)
        problems = dose_errors(volume, abv)
        if problems:
            errors.extend(problems)
            continue
        doses.append(IngredientDose(volume, abv))
    _raise_if(errors)
    return doses


def parse_recipe_ingredients(raw: Any, min_count: int = 0) -> List[IngredientDose]:
    """Validate recipe ingredient records and return their doses.

    Each record needs a non-blank name, positive volumeInMl and abv in [0, 1];
    estimatedPrice (positive) and order (positive int) are optional.
    """
    if not isinstance(raw, list):
        raise ValidationError("Ingredients must be a list")

    doses: List[IngredientDose] = []
    errors: List[str] = []
    for item in raw:
        if not isinstance(item, Mapping):
            errors.append("Ingredient must be an object")
            continue
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append("Ingredient name is required")
        problems = dose_errors(item.get("volumeInMl"), item.get("abv"))
        errors.extend(problems)
        price = item.get("estimatedPrice")
        if price is not None and (not is_number(price) or price <= 0):
            errors.append("Estimated price must be greater than 0")
        order = item.get("order")
        if order is not None and (isinstance(order, bool) or not isinstance(order, int) or order <= 0):
            errors.append("Order must be a positive integer")
        if not problems:
            doses.append(IngredientDose(item["volumeInMl"], item["abv"]))

    if len(raw) < min_count:
        errors.append(f"Recipe must have at least {min_count} ingredients")
    _raise_if(errors)
    return doses


@dataclass(frozen=True)
class PhysiologicalProfile:
    """The drinker: biological sex and body weight in kg."""

    sex: BiologicalSex
    weight_kg: float

    def __post_init__(self):
        object.__setattr__(self, "sex", BiologicalSex.parse(self.sex))
        if not is_number(self.weight_kg) or self.weight_kg <= 0:
            raise ValidationError("Weight must be positive")


def profile_from_record(record: Any) -> Optional[PhysiologicalProfile]:
    """Build a profile from a user record, or None when sex or weight is missing.

    Accepts a PhysiologicalProfile, a mapping with biologicalSex/weightInKg
    (or sex/weight_kg) or an object with sex/weight_kg attributes.
    """
    if record is None:
        return None
    if isinstance(record, PhysiologicalProfile):
        return record
    if isinstance(record, Mapping):
        sex = record.get("biologicalSex", record.get("sex"))
        weight = record.get("weightInKg", record.get("weight_kg"))
    else:
        sex = getattr(record, "sex", None)
        weight = getattr(record, "weight_kg", None)
    if not sex or not weight:
        return None
    return PhysiologicalProfile(sex=sex, weight_kg=weight)

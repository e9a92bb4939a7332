"""
Cocktail BAC CLI. Run from project root: python -m cocktail_bac.main
Estimates BAC for one serving of a recipe, prints risk and sober time,
and optionally saves a decay graph.
"""

import argparse
import sys

from cocktail_bac.calculations import project_bac_after_time
from cocktail_bac.doses import IngredientDose, PhysiologicalProfile
from cocktail_bac.errors import ValidationError
from cocktail_bac.graph import save_bac_graph
from cocktail_bac.summary import summarize_bac

# Screwdriver: 45 mL vodka (40%) + 90 mL orange juice.
DEMO_INGREDIENTS = ["45:0.4", "90:0"]


def parse_ingredient(text: str) -> IngredientDose:
    """Parse "VOLUME_ML:ABV", e.g. "45:0.4"."""
    try:
        volume, abv = text.split(":")
        return IngredientDose(float(volume), float(abv))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"bad ingredient {text!r}: {exc}") from exc


def main(argv=None):
    parser = argparse.ArgumentParser(description="Estimate BAC for one serving of a cocktail")
    parser.add_argument("--weight-kg", type=float, default=70.0, help="Body weight (kg)")
    parser.add_argument("--female", action="store_true", help="Female (default male)")
    parser.add_argument(
        "--ingredient",
        action="append",
        metavar="ML:ABV",
        help="Ingredient volume and ABV fraction, repeatable (default: screwdriver)",
    )
    parser.add_argument("--hours", type=float, help="Also show projected BAC after this many hours")
    parser.add_argument("--graph", type=str, metavar="FILE", help="Save BAC decay graph to FILE (e.g. bac_graph.png)")
    args = parser.parse_args(argv)

    try:
        doses = [parse_ingredient(text) for text in (args.ingredient or DEMO_INGREDIENTS)]
        profile = PhysiologicalProfile(sex="female" if args.female else "male", weight_kg=args.weight_kg)
        summary = summarize_bac(doses, profile)
        projected = None if args.hours is None else project_bac_after_time(summary.bac, args.hours)
    except (ValidationError, argparse.ArgumentTypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"{profile.sex.value}, {profile.weight_kg} kg, {len(doses)} ingredient(s)")
    print(f"BAC: {summary.bac:.4f} ({summary.bac_percent}%)")
    print(f"Risk: {summary.risk.level} - {summary.risk.message}")
    print(f"Hours until sober: {summary.hours_until_sober:.1f}h")
    if projected is not None:
        print(f"BAC after {args.hours}h: {projected:.4f}")

    if args.graph:
        path = save_bac_graph(summary.bac, output_path=args.graph)
        print(f"Graph saved: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)

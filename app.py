"""Cocktail BAC Flask API.

Run from project root:
    python app.py
"""

import logging
import math
import os
from typing import Any

from flask import Flask, jsonify, request

from cocktail_bac.app_logging import configure_logging
from cocktail_bac.calculations import (
    aggregate_alcohol_grams,
    decay_curve,
    estimate_bac,
    project_bac_after_time,
    time_until_sober,
)
from cocktail_bac.doses import is_number, parse_recipe_ingredients
from cocktail_bac.errors import ValidationError
from cocktail_bac.risk import classify_risk
from cocktail_bac.summary import summarize_bac

configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
logger = logging.getLogger("cocktail_bac.api")

app = Flask(__name__)

DEFAULT_STEP_HOURS = 0.25
MIN_STEP_HOURS = 0.05
MAX_STEP_HOURS = 4.0
DEFAULT_CURVE_HOURS = 24.0
MAX_CURVE_HOURS = 48.0


def _min_ingredients() -> int:
    try:
        return max(0, int(os.environ.get("MIN_RECIPE_INGREDIENTS", "0")))
    except ValueError:
        return 0


def _clamp_float(value: Any, default: float, min_value: float, max_value: float) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        parsed = default
    if math.isnan(parsed):
        parsed = default
    return max(min_value, min(max_value, parsed))


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("JSON body is required")
    return data


def _number(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if not is_number(value):
        raise ValidationError(f"{key} must be a number")
    return float(value)


def _doses(data: dict[str, Any]):
    return parse_recipe_ingredients(data.get("ingredients"), min_count=_min_ingredients())


@app.errorhandler(ValidationError)
def handle_validation_error(exc: ValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.path, exc)
    return jsonify({"error": str(exc)}), 400


@app.route("/healthz")
def healthz():
    return jsonify({"ok": True})


@app.route("/api/bac/grams", methods=["POST"])
def api_bac_grams():
    data = _json_body()
    grams = aggregate_alcohol_grams(_doses(data))
    return jsonify({"grams": grams})


@app.route("/api/bac/estimate", methods=["POST"])
def api_bac_estimate():
    data = _json_body()
    bac = estimate_bac(_doses(data), data.get("biologicalSex"), data.get("weightInKg"))
    return jsonify({"bac": bac})


@app.route("/api/bac/project", methods=["POST"])
def api_bac_project():
    data = _json_body()
    bac = project_bac_after_time(_number(data, "initialBac"), _number(data, "hoursElapsed"))
    return jsonify({"bac": bac, "hoursUntilSober": time_until_sober(bac)})


@app.route("/api/bac/risk", methods=["POST"])
def api_bac_risk():
    data = _json_body()
    tier = classify_risk(_number(data, "bac"))
    return jsonify({"riskLevel": tier.as_dict()})


@app.route("/api/bac/summary", methods=["POST"])
def api_bac_summary():
    data = _json_body()
    profile = data.get("profile")
    if profile is not None and not isinstance(profile, dict):
        raise ValidationError("profile must be an object")

    summary = summarize_bac(_doses(data), profile)
    if summary is None:
        return jsonify({"available": False, "summary": None})
    return jsonify({"available": True, "summary": summary.as_dict()})


@app.route("/api/bac/curve", methods=["POST"])
def api_bac_curve():
    data = _json_body()
    step_hours = _clamp_float(data.get("stepHours"), DEFAULT_STEP_HOURS, MIN_STEP_HOURS, MAX_STEP_HOURS)
    max_hours = _clamp_float(data.get("maxHours"), DEFAULT_CURVE_HOURS, 0.0, MAX_CURVE_HOURS)
    points = decay_curve(_number(data, "initialBac"), step_hours=step_hours, max_hours=max_hours)
    return jsonify({"points": [[t, bac] for t, bac in points]})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG", "0") == "1")

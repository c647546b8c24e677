"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError

from fire_planner.config import Settings
from fire_planner.core.dashboard import build_dashboard
from fire_planner.core.kpis import compute_kpis
from fire_planner.core.projection import run_simulation, summarize_projection
from fire_planner.core.rates import nominal_return
from fire_planner.schemas.dashboard import (
    HealthResponse,
    NominalRateRequest,
    NominalRateResponse,
    SimulationRequest,
    SimulationResponse,
)
from fire_planner.schemas.profile import ProfilePayload
from fire_planner.utils import log_profile, log_results

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _json_body() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info(f"Rejected {request.method} {request.path}: {exc.error_count()} validation error(s)")
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(status="ok").model_dump())


@api_bp.get("/profile/default")
def default_profile() -> Any:
    """Profile the dashboard starts from."""
    return jsonify(_settings().default_profile.model_dump(mode="json"))


@api_bp.post("/kpis")
def kpis() -> Any:
    payload = ProfilePayload.model_validate(_json_body())
    snapshot = compute_kpis(payload.to_profile())
    return jsonify(snapshot.model_dump(mode="json"))


@api_bp.post("/simulation")
def simulation() -> Any:
    """Year-by-year projection plus its summary."""
    payload = SimulationRequest.model_validate(_json_body())
    profile = payload.to_profile()
    records = run_simulation(profile, start_year=payload.startYear)
    response = SimulationResponse(
        records=records,
        summary=summarize_projection(records, profile.targetAge),
    )
    logger.debug(f"Simulated {len(records)} years for ages {profile.currentAge}-{profile.lifeExpectancy}")
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/dashboard")
def dashboard() -> Any:
    """KPIs, projection, summary and implied nominal return in one response."""
    payload = SimulationRequest.model_validate(_json_body())
    profile = payload.to_profile()
    prefix = _settings().currency_prefix

    log_profile(profile, prefix)
    response = build_dashboard(profile, start_year=payload.startYear)
    log_results(response.kpis, response.summary, prefix)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/rates/nominal")
def nominal_rate() -> Any:
    payload = NominalRateRequest.model_validate(_json_body())
    response = NominalRateResponse(
        nominalRate=nominal_return(payload.realRate, payload.inflationRate)
    )
    return jsonify(response.model_dump())

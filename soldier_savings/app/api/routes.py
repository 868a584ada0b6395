"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from soldier_savings import __version__
from soldier_savings.config import Settings
from soldier_savings.core.accrual import INTEREST_RATE, run_accrual
from soldier_savings.core.sharing import decode_inputs, encode_inputs
from soldier_savings.core.units import deposits_to_won
from soldier_savings.database import fetch_latest_run, save_run
from soldier_savings.domain.policy import POLICY_TABLE, fallback_policy
from soldier_savings.domain.service import SERVICE_MONTHS
from soldier_savings.exceptions import (
    ComputationFault,
    ShareLinkError,
    UnknownBranchError,
)
from soldier_savings.models import CalculationResult
from soldier_savings.schemas.calculation import (
    CalculationRequest,
    CalculationResponse,
    SavedRunResponse,
    ShareResponse,
)
from soldier_savings.schemas.meta import PingResponse, PoliciesResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(UnknownBranchError)
@api_bp.errorhandler(ShareLinkError)
def _handle_bad_input(exc: Exception):
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ComputationFault)
def _handle_computation_fault(exc: ComputationFault):
    logger.error("calculation aborted: %s", exc)
    return jsonify({"error": str(exc)}), HTTPStatus.INTERNAL_SERVER_ERROR


def _canonical_inputs(payload: CalculationRequest) -> Dict[str, Any]:
    """Inputs in won, the only unit the engine accepts."""
    unit = payload.unit or _settings().default_unit
    return {
        "startDate": payload.startDate,
        "branch": payload.branch,
        "deposits": deposits_to_won(payload.deposits, unit),
    }


def _calculate(inputs: Dict[str, Any]) -> CalculationResult:
    return run_accrual(inputs["startDate"], inputs["branch"], inputs["deposits"])


def _respond(result: CalculationResult) -> Any:
    response = CalculationResponse.model_validate(result.model_dump())
    return jsonify(response.model_dump(mode="json"))


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/policies")
def policies() -> Any:
    """Matching policy per year, service lengths and the interest rate."""
    response = PoliciesResponse(
        policies=dict(POLICY_TABLE),
        fallback=fallback_policy(),
        serviceMonths={branch.value: months for branch, months in SERVICE_MONTHS.items()},
        interestRate=INTEREST_RATE,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/savings")
def calculate_savings() -> Any:
    """Project the payout for one enlistment and return the monthly ledger."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)
    inputs = _canonical_inputs(payload)
    result = _calculate(inputs)

    if payload.save:
        save_run(
            _settings().database_path,
            payload={
                "startDate": inputs["startDate"].isoformat(),
                "branch": inputs["branch"].value,
                "deposits": inputs["deposits"],
            },
            result=result.model_dump(mode="json"),
        )

    return _respond(result)


@api_bp.get("/calc/latest")
def latest_run() -> Any:
    """Most recently saved run, or nulls when nothing was saved yet."""
    record = fetch_latest_run(_settings().database_path)
    response = SavedRunResponse.model_validate(record or {})
    return jsonify(response.model_dump())


@api_bp.post("/calc/share")
def share_link() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)
    inputs = _canonical_inputs(payload)
    query = encode_inputs(inputs["startDate"], inputs["branch"], inputs["deposits"])
    response = ShareResponse(query=query, url=f"{_settings().share_base_url}?{query}")
    return jsonify(response.model_dump())


@api_bp.get("/calc/shared")
def shared_calculation() -> Any:
    """Decode a share link and run the calculation it describes."""
    decoded = decode_inputs(request.args.to_dict())
    payload = CalculationRequest.model_validate({**decoded, "unit": "won", "save": False})
    return _respond(_calculate(_canonical_inputs(payload)))

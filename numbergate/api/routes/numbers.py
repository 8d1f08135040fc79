# numbergate/api/routes/numbers.py
"""Time-derived number, prediction and algorithm information endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from numbergate.api.deps import get_app_settings, get_clock, get_request_payload
from numbergate.api.models.requests import PredictRequest
from numbergate.api.models.responses import (
    CurrentNumberResponse,
    ErrorResponse,
    PredictionResponse,
    SystemInfoResponse,
)
from numbergate.config.settings import Settings
from numbergate.core.clock import Clock, isoformat_utc
from numbergate.core.constants import (
    ALGORITHM_NAME,
    FORMULA,
    NUMBER_RANGE,
    UPDATE_FREQUENCY,
    ErrorMessages,
)
from numbergate.core.exceptions import EndpointError, NumberGateException
from numbergate.core.generator import check_prediction, take_sample
from numbergate.utils.logger import log_prediction

router = APIRouter(tags=["Numbers"])


@router.get(
    "/current-number",
    response_model=CurrentNumberResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Get the current time-based number",
)
async def current_number(clock: Clock = Depends(get_clock)) -> CurrentNumberResponse:
    """Derive the number from the server clock at this instant."""
    try:
        sample = take_sample(clock)
        return CurrentNumberResponse(
            data={
                "number": sample.number,
                "timestamp": isoformat_utc(sample.taken_at),
                "formula": sample.formula,
                "components": sample.components,
            }
        )
    except Exception as e:
        raise EndpointError(ErrorMessages.CURRENT_NUMBER, endpoint="current-number") from e


@router.post(
    "/predict",
    response_model=PredictionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Submit a prediction",
)
async def predict(
    payload: Any = Depends(get_request_payload),
    clock: Clock = Depends(get_clock),
) -> PredictionResponse:
    """
    Compare a prediction with a freshly derived number.

    The number is recomputed here; nothing links this call to an earlier
    ``/current-number`` response.
    """
    try:
        request = PredictRequest.from_payload(payload)
        outcome = check_prediction(request.prediction, clock)

        log_prediction(request.session_id, outcome.predicted, outcome.actual, outcome.correct)

        return PredictionResponse(
            data={
                "predicted": outcome.predicted,
                "actual": outcome.actual,
                "correct": outcome.correct,
                "timestamp": isoformat_utc(outcome.sample.taken_at),
                "sessionId": request.session_id,
            }
        )
    except NumberGateException:
        raise
    except Exception as e:
        raise EndpointError(ErrorMessages.PREDICT, endpoint="predict") from e


@router.get(
    "/system-info",
    response_model=SystemInfoResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Get algorithm and game information",
)
async def system_info(
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_app_settings),
) -> SystemInfoResponse:
    """Static algorithm metadata plus the current server time."""
    try:
        return SystemInfoResponse(
            data={
                "algorithm": ALGORITHM_NAME,
                "formula": FORMULA,
                "range": NUMBER_RANGE,
                "updateFrequency": UPDATE_FREQUENCY,
                "maxAttempts": settings.game.max_attempts,
                "requiredCorrect": settings.game.required_correct,
                "serverTime": isoformat_utc(clock.now()),
            }
        )
    except Exception as e:
        raise EndpointError(ErrorMessages.SYSTEM_INFO, endpoint="system-info") from e

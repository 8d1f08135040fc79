# numbergate/api/routes/access.py
"""Access reporting endpoint."""

from typing import Any, Optional

from fastapi import APIRouter, Depends

from numbergate.api.deps import get_client_ip, get_clock, get_request_payload
from numbergate.api.models.requests import AccessLogRequest
from numbergate.api.models.responses import AccessLogResponse, ErrorResponse
from numbergate.core.clock import Clock, isoformat_utc
from numbergate.core.constants import ErrorMessages
from numbergate.core.exceptions import EndpointError
from numbergate.utils.logger import log_access

router = APIRouter(tags=["Access"])


@router.post(
    "/log-access",
    response_model=AccessLogResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Log frontend access",
    description="Accepts any JSON or URL-encoded body, stamps it with server time and client IP, logs it and echoes it back.",
)
async def log_access_event(
    payload: Any = Depends(get_request_payload),
    clock: Clock = Depends(get_clock),
    client_ip: Optional[str] = Depends(get_client_ip),
) -> AccessLogResponse:
    try:
        record = AccessLogRequest.from_payload(payload).to_record()
        record["timestamp"] = isoformat_utc(clock.now())
        record["ip"] = client_ip

        log_access(record)

        return AccessLogResponse(data=record)
    except Exception as e:
        raise EndpointError(ErrorMessages.LOG_ACCESS, endpoint="log-access") from e

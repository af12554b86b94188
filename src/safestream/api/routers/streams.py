"""Stream creation API routes."""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, HTTPException, status
from prometheus_client import Counter, Gauge, Histogram

from ...application.dtos import CreateStreamRequestDTO, StreamBatchResponseDTO
from ...application.stream.service import StreamService
from ...domain.errors import CollaboratorError
from ..dependencies import get_stream_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/streams", tags=["streams"])

REQUEST_DURATION_BUCKETS = (
    [round(0.5 * i, 1) for i in range(1, 21)]
    + [float(x) for x in range(15, 55, 5)]
    + [float("inf")]
)

stream_requests_total = Counter(
    "stream_requests_total",
    "Total stream batch requests processed",
    ["endpoint", "status"],
)
stream_request_duration_milliseconds = Histogram(
    "stream_request_duration_milliseconds",
    "Wall time to build (and submit) a stream batch (ms)",
    ["endpoint", "status"],
    buckets=REQUEST_DURATION_BUCKETS,
)
stream_requests_inprogress = Gauge(
    "stream_requests_inprogress",
    "Number of stream batch requests currently being processed",
    multiprocess_mode="livesum",
)


def _observe(endpoint: str, outcome: str, start_time: float) -> None:
    stream_requests_total.labels(endpoint=endpoint, status=outcome).inc()
    elapsed = (time.perf_counter() - start_time) * 1000
    stream_request_duration_milliseconds.labels(
        endpoint=endpoint, status=outcome
    ).observe(elapsed)


async def _handle(
    endpoint: str,
    action: Callable[[], Awaitable[StreamBatchResponseDTO]],
) -> StreamBatchResponseDTO:
    start_time = time.perf_counter()
    stream_requests_inprogress.inc()
    try:
        result = await action()
        _observe(endpoint, "success", start_time)
        return result
    except ValueError as e:
        _observe(endpoint, "client_error", start_time)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CollaboratorError as e:
        logger.warning("Upstream failure while handling %s: %s", endpoint, e)
        _observe(endpoint, "upstream_error", start_time)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except Exception as e:
        logger.exception("Internal server error while handling %s: %s", endpoint, e)
        _observe(endpoint, "server_error", start_time)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while building stream transactions",
        )
    finally:
        stream_requests_inprogress.dec()


@router.post(
    "/preview",
    response_model=StreamBatchResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def preview_stream(
    payload: CreateStreamRequestDTO,
    stream_service: StreamService = Depends(get_stream_service),
) -> StreamBatchResponseDTO:
    """Build the stream batch without submitting it."""
    return await _handle("preview", lambda: stream_service.preview_stream(payload))


@router.post(
    "",
    response_model=StreamBatchResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_stream(
    payload: CreateStreamRequestDTO,
    stream_service: StreamService = Depends(get_stream_service),
) -> StreamBatchResponseDTO:
    """Build the stream batch and hand it to the Safe for owner approval."""
    return await _handle("create", lambda: stream_service.create_stream(payload))

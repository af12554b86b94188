"""Network and token list API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...application.dtos import TokenListResponseDTO
from ...application.stream.service import StreamService
from ..dependencies import get_stream_service

router = APIRouter(prefix="/networks", tags=["networks"])


@router.get("/{network}/tokens", response_model=TokenListResponseDTO)
async def list_tokens(
    network: str = Path(..., description="Network identifier, e.g. mainnet"),
    stream_service: StreamService = Depends(get_stream_service),
) -> TokenListResponseDTO:
    """Tokens that can be streamed on a network."""
    try:
        return stream_service.list_tokens(network)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

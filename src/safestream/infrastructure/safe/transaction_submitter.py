"""Hands stream batches to the wallet's transaction-proposal endpoint."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx

from ...domain.entities import TransactionDescriptor
from ...domain.errors import CollaboratorError
from ...middleware.timing import log_timing
from ..http.http_client import AsyncHttpClient, describe_http_error

logger = logging.getLogger(__name__)


class HttpTransactionSubmitter:
    """Posts the ordered batch as one proposal; the wallet's owners approve it.

    Implements ``TransactionSubmitterProtocol``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = AsyncHttpClient(base_url, timeout=timeout, transport=transport)

    @log_timing("submit_transactions")
    async def submit(
        self,
        network: str,
        sender: str,
        transactions: Sequence[TransactionDescriptor],
    ) -> None:
        body = {
            "network": network,
            "safe": sender,
            "txs": [tx.model_dump() for tx in transactions],
        }
        try:
            await self._http.post(f"/safes/{sender}/transactions", json=body)
        except httpx.HTTPError as e:
            raise CollaboratorError(
                f"Submitting {len(transactions)} transactions failed: "
                f"{describe_http_error(e)}"
            ) from e
        logger.info(
            "Submitted %d transactions for Safe %s on %s",
            len(transactions),
            sender,
            network,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

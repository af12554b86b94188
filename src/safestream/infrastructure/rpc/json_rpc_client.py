"""Minimal Ethereum JSON-RPC client over httpx."""

from __future__ import annotations

import itertools
from typing import Any, Optional, Type
from types import TracebackType

import httpx

from ...domain.errors import CollaboratorError
from ..http.http_client import AsyncHttpClient, describe_http_error


class JsonRpcClient:
    """Sends JSON-RPC 2.0 requests to a single node endpoint."""

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 10.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = AsyncHttpClient(rpc_url, timeout=timeout, transport=transport)
        self._ids = itertools.count(1)

    async def call(self, method: str, params: list[Any]) -> Any:
        """Return the ``result`` of ``method``.

        Raises:
            CollaboratorError: On transport failures or a JSON-RPC error object.
        """
        body = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        try:
            resp = await self._http.post("", json=body)
            data = resp.json()
        except httpx.HTTPError as e:
            raise CollaboratorError(
                f"RPC {method} failed: {describe_http_error(e)}"
            ) from e
        except ValueError as e:
            raise CollaboratorError(f"RPC {method} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise CollaboratorError(f"RPC {method} returned an unexpected payload")
        if data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise CollaboratorError(f"RPC {method} error: {message}")
        if "result" not in data:
            raise CollaboratorError(f"RPC {method} response has no result")
        return data["result"]

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "JsonRpcClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

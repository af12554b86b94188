"""Balance reads against the network's JSON-RPC node."""

from __future__ import annotations

import logging
from typing import Mapping

from ...chain.abi import decode_uint256, encode_balance_of
from ...domain.entities import TokenDescriptor
from ...domain.errors import CollaboratorError, UnsupportedNetworkError
from ...middleware.timing import log_timing
from .json_rpc_client import JsonRpcClient

logger = logging.getLogger(__name__)


class RpcBalanceReader:
    """Reads native balances with ``eth_getBalance`` and token balances with
    ``balanceOf`` through ``eth_call``.

    Implements ``BalanceReaderProtocol``.
    """

    def __init__(self, clients: Mapping[str, JsonRpcClient]) -> None:
        self._clients = {network.lower(): c for network, c in clients.items()}

    def _client(self, network: str) -> JsonRpcClient:
        client = self._clients.get(network.lower())
        if client is None:
            raise UnsupportedNetworkError(network)
        return client

    @log_timing("rpc_get_balance")
    async def get_balance(
        self, network: str, owner: str, token: TokenDescriptor
    ) -> int:
        client = self._client(network)
        if token.is_native:
            result = await client.call("eth_getBalance", [owner, "latest"])
        else:
            call = {"to": token.address, "data": encode_balance_of(owner)}
            result = await client.call("eth_call", [call, "latest"])

        try:
            balance = decode_uint256(result)
        except ValueError as e:
            raise CollaboratorError(
                f"Unreadable {token.label} balance on {network}: {result!r}"
            ) from e
        logger.debug("Balance of %s on %s: %s %s", owner, network, balance, token.id)
        return balance

    async def aclose(self) -> None:
        for client in self._clients.values():
            await client.aclose()

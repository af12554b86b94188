"""FastAPI dependencies for the stream API."""

from __future__ import annotations

from functools import lru_cache
from typing import AsyncIterator, Optional

from fastapi import Depends

from ..application.stream.service import StreamService
from ..config.deployments import DeploymentRegistry
from ..config.loader import load_network_config
from ..config.tokens import TokenRegistry
from ..env import Settings, get_settings
from ..infrastructure.rpc.balance_reader import RpcBalanceReader
from ..infrastructure.rpc.json_rpc_client import JsonRpcClient
from ..infrastructure.safe.transaction_submitter import HttpTransactionSubmitter


@lru_cache(maxsize=8)
def get_network_config(
    path: Optional[str],
) -> tuple[DeploymentRegistry, TokenRegistry]:
    """Registries are read-only, so one instance per config file is shared."""
    return load_network_config(path)


async def get_stream_service(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[StreamService]:
    """Get stream service wired to the configured RPC nodes and submitter."""
    deployments, tokens = get_network_config(settings.network_config_file)
    balance_reader = RpcBalanceReader(
        {
            network: JsonRpcClient(url, timeout=settings.http_timeout_seconds)
            for network, url in settings.rpc_urls.items()
        }
    )
    submitter = HttpTransactionSubmitter(
        settings.submission_base_url, timeout=settings.http_timeout_seconds
    )
    try:
        yield StreamService(
            settings.safe_address,
            deployments,
            tokens,
            balance_reader,
            submitter,
            default_network=settings.safe_network,
        )
    finally:
        await balance_reader.aclose()
        await submitter.aclose()

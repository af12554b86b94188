"""Shared pytest fixtures for stream tests."""

from __future__ import annotations

import pytest

from safestream.application.stream.service import StreamService
from safestream.config.deployments import DeploymentRegistry, default_deployment_registry
from safestream.config.tokens import TokenRegistry, default_token_registry
from safestream.domain.entities import NetworkDeployment, TokenDescriptor, TokenKind
from tests.fixtures.fake_collaborators import InMemoryBalanceReader, RecordingSubmitter
from tests.fixtures.addresses import NOW, SENDER


@pytest.fixture
def deployment() -> NetworkDeployment:
    return NetworkDeployment(
        network="testnet",
        chain_id=1337,
        streaming_contract="0x" + "cc" * 20,
        wrapped_native_asset="0x" + "ee" * 20,
    )


@pytest.fixture
def native_token() -> TokenDescriptor:
    return TokenDescriptor(
        id="ETH", label="ETH", name="Ether", decimals=18, kind=TokenKind.NATIVE_ASSET
    )


@pytest.fixture
def fungible_token() -> TokenDescriptor:
    return TokenDescriptor(
        id="TKN", label="TKN", name="Test Token", decimals=6, address="0x" + "aa" * 20
    )


@pytest.fixture
def deployments() -> DeploymentRegistry:
    return default_deployment_registry()


@pytest.fixture
def tokens() -> TokenRegistry:
    return default_token_registry()


@pytest.fixture
def balance_reader() -> InMemoryBalanceReader:
    return InMemoryBalanceReader(
        {
            ("mainnet", "DAI"): 10**21,
            ("mainnet", "ETH"): 5 * 10**18,
            ("mainnet", "USDC"): 500,
        }
    )


@pytest.fixture
def submitter() -> RecordingSubmitter:
    return RecordingSubmitter()


@pytest.fixture
def stream_service(
    deployments: DeploymentRegistry,
    tokens: TokenRegistry,
    balance_reader: InMemoryBalanceReader,
    submitter: RecordingSubmitter,
) -> StreamService:
    return StreamService(
        SENDER,
        deployments,
        tokens,
        balance_reader,
        submitter,
        clock=lambda: NOW,
    )

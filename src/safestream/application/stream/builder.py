"""Transaction batch builder for stream creation.

The batch is returned in execution order. Each step depends on the one before
it (wrap/approve, then createStream), so the order is never changed.
"""

from __future__ import annotations

from ...chain.abi import encode_approve, encode_create_stream, encode_deposit
from ...config.deployments import DeploymentRegistry
from ...domain.entities import (
    NetworkDeployment,
    StreamParameters,
    TokenDescriptor,
    TokenKind,
    TransactionDescriptor,
)


def _create_stream_tx(
    deployment: NetworkDeployment,
    params: StreamParameters,
    token_address: str,
) -> TransactionDescriptor:
    return TransactionDescriptor(
        to=deployment.streaming_contract,
        value=0,
        data=encode_create_stream(
            recipient=params.recipient,
            deposit=params.amount,
            token_address=token_address,
            start_time=params.window.start_time,
            stop_time=params.window.stop_time,
        ),
    )


def build_native_stream_txs(
    deployment: NetworkDeployment,
    params: StreamParameters,
) -> list[TransactionDescriptor]:
    """Wrap the native asset, then stream the wrapped token.

    Returns:
        [deposit() on the wrapper with value=amount, createStream(...)]
    """
    wrap_tx = TransactionDescriptor(
        to=deployment.wrapped_native_asset,
        value=params.amount,
        data=encode_deposit(),
    )
    stream_tx = _create_stream_tx(
        deployment, params, deployment.wrapped_native_asset
    )
    return [wrap_tx, stream_tx]


def build_token_stream_txs(
    deployment: NetworkDeployment,
    params: StreamParameters,
    token_address: str,
) -> list[TransactionDescriptor]:
    """Approve the streaming contract, then stream the token.

    Returns:
        [approve(streaming_contract, amount) on the token, createStream(...)]
    """
    approve_tx = TransactionDescriptor(
        to=token_address,
        value=0,
        data=encode_approve(deployment.streaming_contract, params.amount),
    )
    stream_tx = _create_stream_tx(deployment, params, token_address)
    return [approve_tx, stream_tx]


def build_stream_transactions(
    network: str,
    token: TokenDescriptor,
    params: StreamParameters,
    deployments: DeploymentRegistry,
) -> list[TransactionDescriptor]:
    """Ordered batch that establishes the stream on ``network``.

    Raises:
        UnsupportedNetworkError: If nothing is deployed on ``network``.
    """
    deployment = deployments.get(network)
    if token.kind is TokenKind.NATIVE_ASSET:
        return build_native_stream_txs(deployment, params)
    # Fungible tokens always carry an address (enforced by TokenDescriptor).
    assert token.address is not None
    return build_token_stream_txs(deployment, params, token.address)

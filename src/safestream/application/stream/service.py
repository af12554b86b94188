"""Use case: turn a stream request into a submitted transaction batch."""

from __future__ import annotations

import logging
import time
from typing import Optional

from ...chain.addresses import validate_recipient
from ...chain.units import format_units, parse_units
from ...config.deployments import DeploymentRegistry
from ...config.tokens import TokenRegistry
from ...domain.entities import TransactionDescriptor
from ...domain.shared import (
    BalanceReaderProtocol,
    Clock,
    TransactionSubmitterProtocol,
)
from ..dtos import (
    CreateStreamRequestDTO,
    StreamBatchResponseDTO,
    TokenDTO,
    TokenListResponseDTO,
    TransactionDTO,
)
from .builder import build_stream_transactions
from .calculator import (
    calculate_stream_parameters,
    duration_from_parts,
    ensure_sufficient_balance,
)

logger = logging.getLogger(__name__)


def system_clock() -> int:
    return int(time.time())


class StreamService:
    """Service for building and submitting stream-creation batches.

    Every check runs before the batch is handed over; a failing request never
    reaches the submitter.
    """

    def __init__(
        self,
        sender: str,
        deployments: DeploymentRegistry,
        tokens: TokenRegistry,
        balance_reader: BalanceReaderProtocol,
        submitter: TransactionSubmitterProtocol,
        *,
        clock: Optional[Clock] = None,
        default_network: str = "mainnet",
    ):
        self.sender = sender
        self.deployments = deployments
        self.tokens = tokens
        self.balance_reader = balance_reader
        self.submitter = submitter
        self.clock = clock or system_clock
        self.default_network = default_network.lower()

    def list_tokens(self, network: str) -> TokenListResponseDTO:
        tokens = self.tokens.list_tokens(network)
        return TokenListResponseDTO(
            network=network,
            default_token_id=self.tokens.default_token(network).id,
            native_token_id=self.tokens.native_token(network).id,
            tokens=[TokenDTO.from_entity(t) for t in tokens],
        )

    async def preview_stream(
        self, dto: CreateStreamRequestDTO
    ) -> StreamBatchResponseDTO:
        """Validate the request and build its batch without submitting it."""
        return await self._prepare(dto, submit=False)

    async def create_stream(
        self, dto: CreateStreamRequestDTO
    ) -> StreamBatchResponseDTO:
        """Validate the request, build its batch and submit it to the wallet."""
        return await self._prepare(dto, submit=True)

    async def _prepare(
        self, dto: CreateStreamRequestDTO, *, submit: bool
    ) -> StreamBatchResponseDTO:
        network = (dto.network or self.default_network).lower()
        # Resolve the deployment first so unsupported networks fail before any I/O.
        self.deployments.get(network)
        token = self.tokens.get_token(network, dto.token_id)
        recipient = validate_recipient(dto.recipient, self.sender)

        if dto.amount is not None:
            amount = dto.amount
        else:
            amount = parse_units(dto.amount_display, token.decimals)
        if dto.duration_seconds is not None:
            duration = dto.duration_seconds
        else:
            duration = duration_from_parts(**dto.duration_parts())

        params = calculate_stream_parameters(
            recipient=recipient,
            amount=amount,
            duration=duration,
            current_time=self.clock(),
        )

        balance = await self.balance_reader.get_balance(network, self.sender, token)
        ensure_sufficient_balance(amount, balance, token)

        transactions: list[TransactionDescriptor] = build_stream_transactions(
            network, token, params, self.deployments
        )

        if params.amount != params.requested_amount:
            logger.info(
                "Stream amount truncated from %s to %s %s to divide evenly over %ss",
                params.requested_amount,
                params.amount,
                token.id,
                params.window.duration,
            )

        if submit:
            await self.submitter.submit(network, self.sender, transactions)

        return StreamBatchResponseDTO(
            network=network,
            token_id=token.id,
            sender=self.sender,
            recipient=recipient,
            requested_amount=params.requested_amount,
            amount=params.amount,
            amount_display=f"{format_units(params.amount, token.decimals)} {token.label}",
            rate_per_second=params.rate_per_second,
            start_time=params.window.start_time,
            stop_time=params.window.stop_time,
            submitted=submit,
            transactions=[TransactionDTO.from_entity(tx) for tx in transactions],
        )

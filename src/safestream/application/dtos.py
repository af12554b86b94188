"""Data Transfer Objects for the stream application layer.

Amounts are arbitrary-precision integers in the token's smallest unit. They
are accepted as JSON numbers or decimal strings and always returned as
decimal strings so no client loses precision.
"""

from __future__ import annotations

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_serializer,
    field_validator,
    model_validator,
)

from ..domain.entities import TokenDescriptor, TokenKind, TransactionDescriptor

DURATION_PARTS = ("days", "hours", "minutes", "seconds")


class CreateStreamRequestDTO(BaseModel):
    """Stream requested by the wallet owner.

    The amount is given either in smallest units (``amount``) or as a decimal
    in display units (``amount_display``, e.g. ``"12.5"``). The duration is
    given either in seconds or as days/hours/minutes/seconds parts. Without a
    ``network`` the service falls back to the wallet's configured network.
    """

    model_config = ConfigDict(extra="forbid")

    network: Optional[str] = Field(default=None, min_length=1)
    token_id: str = Field(..., min_length=1)
    recipient: str
    amount: Optional[int] = Field(
        default=None, description="Requested amount in smallest units"
    )
    amount_display: Optional[str] = Field(
        default=None, min_length=1, description="Requested amount in display units"
    )
    duration_seconds: Optional[StrictInt] = Field(
        default=None, description="Stream length in seconds"
    )
    days: Optional[StrictInt] = None
    hours: Optional[StrictInt] = None
    minutes: Optional[StrictInt] = None
    seconds: Optional[StrictInt] = None

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, v: object) -> object:
        if isinstance(v, bool):
            raise ValueError("amount must be an integer, not a boolean")
        if isinstance(v, str):
            v = v.strip()
            if not v.isdigit():
                raise ValueError("amount must be a non-negative integer string")
            return int(v)
        return v

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("amount must be non-negative")
        return v

    @model_validator(mode="after")
    def check_amount_and_duration_forms(self) -> "CreateStreamRequestDTO":
        if (self.amount is None) == (self.amount_display is None):
            raise ValueError("Provide exactly one of amount or amount_display")
        parts_given = any(getattr(self, name) is not None for name in DURATION_PARTS)
        if self.duration_seconds is not None and parts_given:
            raise ValueError(
                "Provide duration_seconds or days/hours/minutes/seconds, not both"
            )
        if self.duration_seconds is None and not parts_given:
            raise ValueError("A stream duration is required")
        return self

    def duration_parts(self) -> dict[str, int]:
        return {name: getattr(self, name) or 0 for name in DURATION_PARTS}


class TransactionDTO(BaseModel):
    to: str
    value: str
    data: str

    @classmethod
    def from_entity(cls, tx: TransactionDescriptor) -> "TransactionDTO":
        return cls(to=tx.to, value=str(tx.value), data=tx.data)


class StreamBatchResponseDTO(BaseModel):
    """Batch that establishes the stream, plus what will actually be streamed.

    ``amount`` is the truncated deposit, which can be lower than
    ``requested_amount``.
    """

    network: str
    token_id: str
    sender: str
    recipient: str
    requested_amount: int
    amount: int
    amount_display: str
    rate_per_second: int
    start_time: int
    stop_time: int
    submitted: bool
    transactions: list[TransactionDTO]

    @field_serializer("requested_amount", "amount", "rate_per_second")
    def serialize_big_int(self, value: int) -> str:
        return str(value)


class TokenDTO(BaseModel):
    id: str
    label: str
    name: str
    decimals: int
    kind: TokenKind
    address: Optional[str] = None

    @classmethod
    def from_entity(cls, token: TokenDescriptor) -> "TokenDTO":
        return cls.model_validate(token.model_dump())


class TokenListResponseDTO(BaseModel):
    network: str
    default_token_id: str
    native_token_id: str
    tokens: list[TokenDTO]

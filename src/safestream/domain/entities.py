"""Stream domain entities: tokens, deployments, stream parameters and transactions."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)
from eth_utils import to_checksum_address

from ..chain.addresses import is_well_formed_address


def _checksum(value: str) -> str:
    if not is_well_formed_address(value):
        raise ValueError(f"Invalid contract address: {value!r}")
    return to_checksum_address(value)


class TokenKind(str, Enum):
    """How a token is moved into the streaming contract."""

    NATIVE_ASSET = "native_asset"
    FUNGIBLE_TOKEN = "fungible_token"


class TokenDescriptor(BaseModel):
    """Token listed for a network.

    The native asset has no contract address; it is wrapped before streaming.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1)
    label: str
    name: str
    decimals: int = Field(..., ge=0, le=77)
    kind: TokenKind = TokenKind.FUNGIBLE_TOKEN
    address: Optional[str] = None

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _checksum(v)

    @model_validator(mode="after")
    def check_kind_matches_address(self) -> "TokenDescriptor":
        if self.kind is TokenKind.NATIVE_ASSET and self.address is not None:
            raise ValueError(f"Native asset '{self.id}' must not have an address")
        if self.kind is TokenKind.FUNGIBLE_TOKEN and self.address is None:
            raise ValueError(f"Token '{self.id}' requires a contract address")
        return self

    @property
    def is_native(self) -> bool:
        return self.kind is TokenKind.NATIVE_ASSET


class NetworkDeployment(BaseModel):
    """Contract addresses the batch targets on one network."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    network: str = Field(..., min_length=1)
    chain_id: int = Field(..., gt=0)
    streaming_contract: str
    wrapped_native_asset: str

    @field_validator("streaming_contract", "wrapped_native_asset")
    @classmethod
    def validate_contract(cls, v: str) -> str:
        return _checksum(v)


class StreamWindow(BaseModel):
    """Start and stop of a stream as Unix-epoch seconds."""

    model_config = ConfigDict(frozen=True)

    start_time: int
    stop_time: int

    @model_validator(mode="after")
    def check_order(self) -> "StreamWindow":
        if self.stop_time <= self.start_time:
            raise ValueError("stop_time must be after start_time")
        return self

    @property
    def duration(self) -> int:
        return self.stop_time - self.start_time


class StreamParameters(BaseModel):
    """Validated calculator output handed to the batch builder."""

    model_config = ConfigDict(frozen=True)

    recipient: str
    requested_amount: int
    amount: int
    window: StreamWindow

    @property
    def rate_per_second(self) -> int:
        return self.amount // self.window.duration


class TransactionDescriptor(BaseModel):
    """One call of the batch, in the shape the wallet submission API expects."""

    model_config = ConfigDict(frozen=True)

    to: str
    value: int = Field(default=0, ge=0)
    data: str = "0x"

    @field_serializer("value")
    def serialize_value(self, value: int) -> str:
        return str(value)

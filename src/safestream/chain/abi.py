"""Calldata for the contract calls that make up a stream batch.

Selectors are the first four bytes of keccak256 over the canonical function
signature; arguments are ABI-encoded head words. Amounts stay Python ints up
to this point.
"""

from __future__ import annotations

from typing import Any, Final, Sequence

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector

UINT256_MAX: Final[int] = 2**256 - 1

DEPOSIT_SIGNATURE: Final[str] = "deposit()"
APPROVE_SIGNATURE: Final[str] = "approve(address,uint256)"
BALANCE_OF_SIGNATURE: Final[str] = "balanceOf(address)"
CREATE_STREAM_SIGNATURE: Final[str] = (
    "createStream(address,uint256,address,uint256,uint256)"
)


def encode_call(signature: str, arg_types: Sequence[str], args: Sequence[Any]) -> str:
    """Return ``0x``-prefixed calldata for ``signature`` applied to ``args``."""
    selector = function_signature_to_4byte_selector(signature)
    payload = encode(list(arg_types), list(args)) if arg_types else b""
    return "0x" + (selector + payload).hex()


def encode_deposit() -> str:
    """Wrap the attached native value (WETH-style ``deposit()``)."""
    return encode_call(DEPOSIT_SIGNATURE, [], [])


def encode_approve(spender: str, amount: int) -> str:
    return encode_call(APPROVE_SIGNATURE, ["address", "uint256"], [spender, amount])


def encode_balance_of(owner: str) -> str:
    return encode_call(BALANCE_OF_SIGNATURE, ["address"], [owner])


def encode_create_stream(
    recipient: str,
    deposit: int,
    token_address: str,
    start_time: int,
    stop_time: int,
) -> str:
    """Calldata for ``createStream`` on the streaming contract.

    The contract requires ``deposit`` to be a multiple of
    ``stop_time - start_time`` and ``start_time`` to be in the future when
    the transaction executes.
    """
    return encode_call(
        CREATE_STREAM_SIGNATURE,
        ["address", "uint256", "address", "uint256", "uint256"],
        [recipient, deposit, token_address, start_time, stop_time],
    )


def decode_uint256(result_hex: str) -> int:
    """Decode a single uint256 word returned by ``eth_call``/``eth_getBalance``."""
    if not isinstance(result_hex, str) or not result_hex.startswith("0x"):
        raise ValueError(f"Expected 0x-prefixed hex, got {result_hex!r}")
    digits = result_hex[2:]
    if not digits:
        return 0
    return int(digits, 16)

"""Pure stream parameter calculations.

These functions derive the stream window and the contract-safe deposit from
user input. They read no clock and perform no I/O: the current time is passed
in, so identical inputs always produce identical output.
"""

from __future__ import annotations

from typing import Final

from ...chain.abi import UINT256_MAX
from ...chain.units import format_units
from ...domain.entities import StreamParameters, StreamWindow, TokenDescriptor
from ...domain.errors import (
    AmountOutOfRangeError,
    AmountTooSmallError,
    InsufficientBalanceError,
    InvalidDurationError,
)

# Multi-owner approval has to happen before the stream starts.
BUFFER_SECONDS: Final[int] = 3600


def validate_duration(duration: int) -> None:
    """Reject durations that are not a positive number of whole seconds."""
    if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
        raise InvalidDurationError(duration)


def compute_stream_window(current_time: int, duration: int) -> StreamWindow:
    """Window starting ``BUFFER_SECONDS`` after ``current_time``.

    Args:
        current_time: Current Unix time in seconds
        duration: Stream length in seconds

    Returns:
        StreamWindow with ``stop_time == start_time + duration``.
    """
    validate_duration(duration)
    start_time = current_time + BUFFER_SECONDS
    stop_time = start_time + duration
    if stop_time > UINT256_MAX:
        raise AmountOutOfRangeError("stop_time", stop_time)
    return StreamWindow(start_time=start_time, stop_time=stop_time)


def adjust_amount(amount: int, duration: int) -> int:
    """Truncate ``amount`` down to the nearest multiple of ``duration``.

    The streaming contract pays ``deposit / duration`` per second and rejects
    deposits that do not divide evenly.

    Raises:
        InvalidDurationError: If duration is not positive.
        AmountTooSmallError: If amount < duration (nothing left to stream).
        AmountOutOfRangeError: If amount does not fit in a uint256.
    """
    validate_duration(duration)
    if amount > UINT256_MAX:
        raise AmountOutOfRangeError("amount", amount)
    if amount < duration:
        raise AmountTooSmallError(amount, duration)
    return amount - (amount % duration)


def calculate_stream_parameters(
    recipient: str,
    amount: int,
    duration: int,
    current_time: int,
) -> StreamParameters:
    """Derive the window and adjusted amount for one stream request.

    The recipient is expected to be validated already; it is carried through
    unchanged for the batch builder.
    """
    adjusted = adjust_amount(amount, duration)
    window = compute_stream_window(current_time, duration)
    return StreamParameters(
        recipient=recipient,
        requested_amount=amount,
        amount=adjusted,
        window=window,
    )


def is_amount_sufficient(amount: int, balance: int) -> bool:
    return amount <= balance


def ensure_sufficient_balance(
    amount: int,
    balance: int,
    token: TokenDescriptor,
) -> None:
    """Reject a request the wallet cannot fund.

    Raises:
        InsufficientBalanceError: If amount > balance. The message states the
            balance and the shortfall in the token's display units.
    """
    if is_amount_sufficient(amount, balance):
        return
    shortfall = amount - balance
    message = (
        f"You only have {format_units(balance, token.decimals)} {token.label} "
        f"in your Safe, {format_units(shortfall, token.decimals)} {token.label} "
        "short of the requested amount"
    )
    raise InsufficientBalanceError(amount, balance, message)


def duration_from_parts(
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
) -> int:
    """Total seconds for a duration picked as days/hours/minutes/seconds."""
    parts = {"days": days, "hours": hours, "minutes": minutes, "seconds": seconds}
    for name, value in parts.items():
        if value < 0:
            raise ValueError(f"{name} must be >= 0")
    return ((days * 24 + hours) * 60 + minutes) * 60 + seconds

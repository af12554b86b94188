"""Domain-specific exceptions.

Every stream creation condition is a ``ValueError`` so callers (and the HTTP
layer) can treat them uniformly as rejected input.
"""

from __future__ import annotations


class StreamCreationError(ValueError):
    """Base class for conditions that abort building a stream batch."""


class InvalidDurationError(StreamCreationError):
    """Raised when the stream duration is not a positive number of seconds."""

    def __init__(self, duration: int) -> None:
        self.duration = duration
        super().__init__(f"Stream duration must be positive, got {duration}")


class AmountTooSmallError(StreamCreationError):
    """Raised when the amount cannot pay at least one unit per second."""

    def __init__(self, amount: int, duration: int) -> None:
        self.amount = amount
        self.duration = duration
        super().__init__(
            f"Amount {amount} is smaller than the stream duration of {duration} "
            "seconds; the stream would pay nothing per second"
        )


class AmountOutOfRangeError(StreamCreationError):
    """Raised when an amount or timestamp does not fit in a uint256."""

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {value} does not fit in a uint256")


class InsufficientBalanceError(StreamCreationError):
    """Raised when the requested amount exceeds the available balance."""

    def __init__(
        self,
        requested: int,
        balance: int,
        message: str | None = None,
    ) -> None:
        self.requested = requested
        self.balance = balance
        self.shortfall = requested - balance
        super().__init__(
            message
            or f"Requested {requested} exceeds available balance {balance} "
            f"(short by {self.shortfall})"
        )


class UnsupportedNetworkError(StreamCreationError):
    """Raised when no deployment or token list is known for a network."""

    def __init__(self, network: str) -> None:
        self.network = network
        super().__init__(f"Network '{network}' is not supported")


class UnknownTokenError(StreamCreationError):
    """Raised when a token id is not listed for the requested network."""

    def __init__(self, network: str, token_id: str) -> None:
        self.network = network
        self.token_id = token_id
        super().__init__(f"Token '{token_id}' is not available on '{network}'")


class InvalidRecipientError(StreamCreationError):
    """Raised when the recipient address is missing, malformed or the sender."""


class CollaboratorError(Exception):
    """Raised when an external collaborator (RPC node, submission endpoint) fails."""

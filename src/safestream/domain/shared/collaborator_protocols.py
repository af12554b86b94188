"""Protocol interfaces for the collaborators the stream service depends on.

These protocols let the service accept any balance source or submission
channel, so tests can plug in in-memory fakes instead of HTTP clients.
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import TokenDescriptor, TransactionDescriptor


class BalanceReaderProtocol(Protocol):
    """Supplies the current balance of a wallet for one token."""

    async def get_balance(
        self, network: str, owner: str, token: "TokenDescriptor"
    ) -> int:
        """Return the balance of ``owner`` in the token's smallest unit.

        Args:
            network: Network identifier the token lives on
            owner: Checksummed wallet address
            token: Token to read (native asset or fungible token)

        Raises:
            CollaboratorError: If the balance could not be read.
        """
        ...


class TransactionSubmitterProtocol(Protocol):
    """Hands an ordered batch of transactions to the wallet.

    Submission is fire-and-forget: confirmation and the multi-owner approval
    are the wallet's responsibility.
    """

    async def submit(
        self,
        network: str,
        sender: str,
        transactions: Sequence["TransactionDescriptor"],
    ) -> None:
        """Submit the batch in the given order.

        Raises:
            CollaboratorError: If the wallet rejected or never received the batch.
        """
        ...


# Returns the current Unix time in whole seconds.
Clock = Callable[[], int]

"""Shared domain utilities.

This package is domain-accessible and should not depend on application code.
"""

from .collaborator_protocols import (
    BalanceReaderProtocol,
    Clock,
    TransactionSubmitterProtocol,
)

__all__ = ["BalanceReaderProtocol", "Clock", "TransactionSubmitterProtocol"]

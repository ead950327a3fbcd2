# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class MultisigWalletError(Exception):
    """Base class for all multisig-wallet errors."""

    def __init__(self, message: str, code: str = "WALLET_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidAmountError(MultisigWalletError):
    """
    Raised when a transaction amount is not a positive number of cents.

    Attributes:
        amount_cents: The rejected amount.
    """

    def __init__(self, amount_cents: int) -> None:
        super().__init__(
            f"Transaction amount must be > 0 cents; got {amount_cents!r}.",
            code="INVALID_AMOUNT",
        )
        self.amount_cents = amount_cents


class NotAuthorizedError(MultisigWalletError):
    """
    Raised when a user who is not a wallet owner tries to approve.

    Attributes:
        user_id: The caller that was refused.
        wallet_id: The wallet whose owner list was checked.
    """

    def __init__(self, user_id: str, wallet_id: str) -> None:
        super().__init__(
            f"User '{user_id}' is not an owner of wallet '{wallet_id}'.",
            code="NOT_AUTHORIZED",
        )
        self.user_id = user_id
        self.wallet_id = wallet_id


class NotFoundError(MultisigWalletError):
    """Raised when a referenced record does not exist."""

    def __init__(self, message: str, code: str = "NOT_FOUND") -> None:
        super().__init__(message, code=code)


class WalletNotFoundError(NotFoundError):
    """Raised when a wallet id is unknown."""

    def __init__(self, wallet_id: str) -> None:
        super().__init__(f"Wallet '{wallet_id}' does not exist.", code="WALLET_NOT_FOUND")
        self.wallet_id = wallet_id


class TransactionNotFoundError(NotFoundError):
    """Raised when a transaction id is unknown."""

    def __init__(self, transaction_id: str) -> None:
        super().__init__(
            f"Transaction '{transaction_id}' does not exist.",
            code="TRANSACTION_NOT_FOUND",
        )
        self.transaction_id = transaction_id


class InvalidConfigurationError(MultisigWalletError):
    """Raised when a WalletSpec describes an invalid wallet."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_CONFIGURATION")

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from abc import ABC, abstractmethod

from multisig_wallet.types import Transaction, Wallet


class WalletStorage(ABC):
    """
    Minimal persistence contract for wallets and transactions.

    Implementations hold records only; they apply no business rules. Every
    method must be safe to call from several threads at once. The default
    MemoryStorage keeps state for the lifetime of the process only.
    """

    # ─── Wallets ──────────────────────────────────────────────────────────────

    @abstractmethod
    def create_wallet(self, wallet: Wallet) -> None:
        ...

    @abstractmethod
    def get_wallet(self, wallet_id: str) -> Wallet | None:
        ...

    @abstractmethod
    def list_wallets(self) -> list[Wallet]:
        ...

    @abstractmethod
    def count_wallets(self) -> int:
        ...

    # ─── Transactions ─────────────────────────────────────────────────────────

    @abstractmethod
    def create_transaction(self, transaction: Transaction) -> None:
        ...

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Transaction | None:
        ...

    @abstractmethod
    def update_transaction(self, transaction: Transaction) -> None:
        ...

    @abstractmethod
    def list_transactions_by_wallet(self, wallet_id: str) -> list[Transaction]:
        ...

    @abstractmethod
    def count_transactions(self) -> int:
        ...

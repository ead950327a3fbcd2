# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging

from multisig_wallet.locks import ReadWriteLock
from multisig_wallet.storage.interface import WalletStorage
from multisig_wallet.types import Transaction, Wallet

logger = logging.getLogger("multisig_wallet.storage")


class MemoryStorage(WalletStorage):
    """
    In-process memory store guarded by one reader/writer lock per collection.

    Records are deep-copied on every write and read, so callers never share
    a mutable object with the store. All state is lost when the process exits.
    """

    def __init__(self) -> None:
        self._wallets: dict[str, Wallet] = {}
        self._transactions: dict[str, Transaction] = {}
        self._wallets_lock = ReadWriteLock()
        self._transactions_lock = ReadWriteLock()

    # ─── Wallets ──────────────────────────────────────────────────────────────

    def create_wallet(self, wallet: Wallet) -> None:
        with self._wallets_lock.write():
            if wallet.id in self._wallets:
                logger.debug("Overwriting wallet %s", wallet.id)
            self._wallets[wallet.id] = wallet.model_copy(deep=True)

    def get_wallet(self, wallet_id: str) -> Wallet | None:
        with self._wallets_lock.read():
            wallet = self._wallets.get(wallet_id)
            return wallet.model_copy(deep=True) if wallet is not None else None

    def list_wallets(self) -> list[Wallet]:
        with self._wallets_lock.read():
            return [wallet.model_copy(deep=True) for wallet in self._wallets.values()]

    def count_wallets(self) -> int:
        with self._wallets_lock.read():
            return len(self._wallets)

    # ─── Transactions ─────────────────────────────────────────────────────────

    def create_transaction(self, transaction: Transaction) -> None:
        with self._transactions_lock.write():
            self._transactions[transaction.id] = transaction.model_copy(deep=True)

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        with self._transactions_lock.read():
            transaction = self._transactions.get(transaction_id)
            return transaction.model_copy(deep=True) if transaction is not None else None

    def update_transaction(self, transaction: Transaction) -> None:
        with self._transactions_lock.write():
            self._transactions[transaction.id] = transaction.model_copy(deep=True)

    def list_transactions_by_wallet(self, wallet_id: str) -> list[Transaction]:
        with self._transactions_lock.read():
            return [
                transaction.model_copy(deep=True)
                for transaction in self._transactions.values()
                if transaction.wallet_id == wallet_id
            ]

    def count_transactions(self) -> int:
        with self._transactions_lock.read():
            return len(self._transactions)

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import logging
from uuid import uuid4

from multisig_wallet.approval import approve_transaction, build_wallet, create_transaction
from multisig_wallet.audit.log import AuditLog
from multisig_wallet.audit.record import AuditAction, AuditEvent, AuditOutcome
from multisig_wallet.config import ServiceConfig
from multisig_wallet.errors import (
    NotAuthorizedError,
    TransactionNotFoundError,
    WalletNotFoundError,
)
from multisig_wallet.locks import KeyedLock
from multisig_wallet.storage.interface import WalletStorage
from multisig_wallet.storage.memory import MemoryStorage
from multisig_wallet.types import Transaction, Wallet, WalletSpec

logger = logging.getLogger("multisig_wallet.service")


class WalletService:
    """
    Entry point for a transport layer: wallets, submissions and approvals.

    Design contract
    ---------------
    - The caller's identity is always an explicit argument. Nothing is read
      from ambient request state.
    - Decisions are made by the pure functions in
      :mod:`multisig_wallet.approval`; this class only fetches, decides and
      persists.
    - ``approve_transaction()`` runs its fetch-decide-persist sequence under
      a lock scoped to the transaction id. Concurrent approvals of the same
      transaction are serialised and none is lost; different transactions
      never wait on each other.
    - Every failure is raised before anything is written.

    Usage
    -----
    ::

        service = WalletService()
        wallet = service.create_wallet(
            WalletSpec(name="ops", owners=["alice", "bob", "carol"],
                       daily_limit_cents=1_000, required_approvals=2),
            creator_id="alice",
        )
        tx = service.create_transaction(wallet.id, 500, "servers", creator_id="alice")
        tx = service.approve_transaction(tx.id, approver_id="bob")
        assert tx.status is TransactionStatus.APPROVED
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        storage: WalletStorage | None = None,
    ) -> None:
        self._config = config or ServiceConfig()
        self._storage: WalletStorage = storage if storage is not None else MemoryStorage()
        self._transaction_locks = KeyedLock()
        self.audit = AuditLog(self._config.audit)

    @property
    def storage(self) -> WalletStorage:
        return self._storage

    # ─── Wallets ──────────────────────────────────────────────────────────────

    def create_wallet(self, spec: WalletSpec, creator_id: str) -> Wallet:
        """
        Validate ``spec``, store the resulting wallet and return it.

        An id is generated when ``spec.id`` is None. A caller-supplied id that
        collides with an existing wallet overwrites it.

        Raises:
            InvalidConfigurationError: If the spec is invalid.
        """
        if spec.id is None:
            spec = spec.model_copy(update={"id": self._new_id()})
        wallet = build_wallet(spec)
        self._storage.create_wallet(wallet)

        logger.info(
            "Wallet %s created by %s: owners=%d required_approvals=%d daily_limit_cents=%d",
            wallet.id,
            creator_id,
            len(wallet.owners),
            wallet.required_approvals,
            wallet.daily_limit_cents,
        )
        self.audit.record(
            AuditEvent(
                action=AuditAction.WALLET_CREATED,
                outcome=AuditOutcome.ALLOW,
                actor_id=creator_id,
                wallet_id=wallet.id,
                detail=wallet.name,
            )
        )
        return wallet

    def get_wallet(self, wallet_id: str) -> Wallet:
        """Raises WalletNotFoundError if ``wallet_id`` is unknown."""
        wallet = self._storage.get_wallet(wallet_id)
        if wallet is None:
            logger.debug("Wallet %s not found", wallet_id)
            raise WalletNotFoundError(wallet_id)
        return wallet

    def list_wallets(self) -> list[Wallet]:
        return self._storage.list_wallets()

    # ─── Transactions ─────────────────────────────────────────────────────────

    def create_transaction(
        self,
        wallet_id: str,
        amount_cents: int,
        memo: str,
        creator_id: str,
    ) -> Transaction:
        """
        Submit a spending transaction against a wallet.

        Raises:
            WalletNotFoundError: If the wallet does not exist.
            InvalidAmountError: If ``amount_cents`` is not positive.
        """
        wallet = self.get_wallet(wallet_id)
        transaction = create_transaction(
            wallet,
            amount_cents,
            memo,
            creator_id,
            transaction_id=self._new_id(),
        )
        self._storage.create_transaction(transaction)

        logger.info(
            "Transaction %s submitted by %s on wallet %s: amount_cents=%d status=%s",
            transaction.id,
            creator_id,
            wallet.id,
            amount_cents,
            transaction.status.value,
        )
        self.audit.record(
            AuditEvent(
                action=AuditAction.TRANSACTION_CREATED,
                outcome=AuditOutcome.ALLOW,
                actor_id=creator_id,
                wallet_id=wallet.id,
                transaction_id=transaction.id,
                status=transaction.status,
                approvers=list(transaction.approvers),
            )
        )
        return transaction

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Raises TransactionNotFoundError if ``transaction_id`` is unknown."""
        transaction = self._storage.get_transaction(transaction_id)
        if transaction is None:
            logger.debug("Transaction %s not found", transaction_id)
            raise TransactionNotFoundError(transaction_id)
        return transaction

    def list_transactions(self, wallet_id: str) -> list[Transaction]:
        """Return all transactions of a wallet; empty for an unknown wallet."""
        return self._storage.list_transactions_by_wallet(wallet_id)

    def approve_transaction(self, transaction_id: str, approver_id: str) -> Transaction:
        """
        Record an owner's approval of a transaction.

        Approving twice, or approving a transaction that is no longer pending,
        returns the stored transaction unchanged.

        Raises:
            TransactionNotFoundError: If the transaction does not exist.
            WalletNotFoundError: If the transaction's wallet does not exist.
            NotAuthorizedError: If ``approver_id`` is not a wallet owner.
        """
        with self._transaction_locks.hold(transaction_id):
            transaction = self.get_transaction(transaction_id)
            wallet = self.get_wallet(transaction.wallet_id)

            try:
                updated = approve_transaction(transaction, wallet, approver_id)
            except NotAuthorizedError:
                logger.warning(
                    "Approval of transaction %s refused: %s is not an owner of wallet %s",
                    transaction.id,
                    approver_id,
                    wallet.id,
                )
                self._record_approval(AuditAction.APPROVAL_DENIED, AuditOutcome.DENY, approver_id, transaction)
                raise

            if updated is transaction:
                logger.info(
                    "Approval of transaction %s by %s ignored: status=%s approvers=%d",
                    transaction.id,
                    approver_id,
                    transaction.status.value,
                    len(transaction.approvers),
                )
                self._record_approval(AuditAction.APPROVAL_IGNORED, AuditOutcome.NOOP, approver_id, transaction)
                return transaction

            self._storage.update_transaction(updated)
            logger.info(
                "Transaction %s approved by %s: approvers=%d/%d status=%s",
                updated.id,
                approver_id,
                len(updated.approvers),
                wallet.required_approvals,
                updated.status.value,
            )
            self._record_approval(AuditAction.TRANSACTION_APPROVED, AuditOutcome.ALLOW, approver_id, updated)
            return updated

    # ─── Private helpers ──────────────────────────────────────────────────────

    def _new_id(self) -> str:
        if self._config.id_prefix is None:
            return str(uuid4())
        return f"{self._config.id_prefix}-{uuid4()}"

    def _record_approval(
        self,
        action: AuditAction,
        outcome: AuditOutcome,
        approver_id: str,
        transaction: Transaction,
    ) -> None:
        self.audit.record(
            AuditEvent(
                action=action,
                outcome=outcome,
                actor_id=approver_id,
                wallet_id=transaction.wallet_id,
                transaction_id=transaction.id,
                status=transaction.status,
                approvers=list(transaction.approvers),
            )
        )

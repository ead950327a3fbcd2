# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Approval decisions for wallets and transactions.

Every function here is pure: it reads the records it is given and returns
new ones, and never touches storage. All validation happens before any new
record is built, so a raised error leaves nothing half-applied.

Known limitation: ``daily_limit_cents`` is compared against a single
transaction's amount. Spending across several transactions in one day is
not accumulated.
"""
from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from multisig_wallet.errors import (
    InvalidAmountError,
    InvalidConfigurationError,
    NotAuthorizedError,
)
from multisig_wallet.types import Transaction, TransactionStatus, Wallet, WalletSpec


def build_wallet(spec: WalletSpec, *, now: datetime | None = None) -> Wallet:
    """
    Validate a WalletSpec and build the immutable Wallet it describes.

    Duplicate owner ids are collapsed, keeping the first occurrence.

    Raises:
        InvalidConfigurationError: If the name is blank, there are no owners,
            an owner id is empty, the daily limit is negative, or
            ``required_approvals`` is outside ``1..len(owners)``.
    """
    if not spec.name.strip():
        raise InvalidConfigurationError("Wallet name must be a non-empty string.")

    owners = list(dict.fromkeys(spec.owners))
    if not owners:
        raise InvalidConfigurationError("A wallet needs at least one owner.")
    if any(not owner for owner in owners):
        raise InvalidConfigurationError("Owner ids must be non-empty strings.")

    if spec.daily_limit_cents < 0:
        raise InvalidConfigurationError(
            f"daily_limit_cents must be >= 0; got {spec.daily_limit_cents}."
        )
    if spec.required_approvals < 1:
        raise InvalidConfigurationError(
            f"required_approvals must be >= 1; got {spec.required_approvals}."
        )
    if spec.required_approvals > len(owners):
        raise InvalidConfigurationError(
            f"required_approvals ({spec.required_approvals}) cannot exceed "
            f"the number of owners ({len(owners)})."
        )

    return Wallet(
        id=spec.id if spec.id is not None else str(uuid4()),
        name=spec.name,
        owners=tuple(owners),
        daily_limit_cents=spec.daily_limit_cents,
        required_approvals=spec.required_approvals,
        created_at=now if now is not None else datetime.now(tz=timezone.utc),
    )


def is_owner(wallet: Wallet, user_id: str) -> bool:
    """Return True if ``user_id`` is one of the wallet's owners."""
    return user_id in wallet.owners


def approvals_remaining(transaction: Transaction, wallet: Wallet) -> int:
    """Number of further distinct approvals needed, never below zero."""
    return max(0, wallet.required_approvals - len(transaction.approvers))


def create_transaction(
    wallet: Wallet,
    amount_cents: int,
    memo: str,
    creator_id: str,
    *,
    transaction_id: str | None = None,
    now: datetime | None = None,
) -> Transaction:
    """
    Build a new pending transaction against ``wallet``.

    Anyone may submit. When the creator is an owner and the amount is within
    ``daily_limit_cents`` the creator is recorded as the first approver, and
    the transaction is approved at once if that meets the threshold.

    Raises:
        InvalidAmountError: If ``amount_cents`` is not positive.
    """
    if amount_cents <= 0:
        raise InvalidAmountError(amount_cents)

    approvers: list[str] = []
    if is_owner(wallet, creator_id) and amount_cents <= wallet.daily_limit_cents:
        approvers.append(creator_id)

    return Transaction(
        id=transaction_id if transaction_id is not None else str(uuid4()),
        wallet_id=wallet.id,
        amount_cents=amount_cents,
        memo=memo,
        created_by=creator_id,
        approvers=approvers,
        status=_status_after_approval(approvers, wallet),
        created_at=now if now is not None else datetime.now(tz=timezone.utc),
    )


def approve_transaction(
    transaction: Transaction,
    wallet: Wallet,
    approver_id: str,
) -> Transaction:
    """
    Record ``approver_id``'s approval of ``transaction``.

    Approving twice, or approving a transaction that is no longer pending,
    is harmless: the very same ``transaction`` object is returned untouched.
    Callers can test ``result is transaction`` to detect that case.

    Raises:
        NotAuthorizedError: If ``approver_id`` is not a wallet owner. This is
            checked before the idempotence rules.
    """
    if not is_owner(wallet, approver_id):
        raise NotAuthorizedError(approver_id, wallet.id)

    if approver_id in transaction.approvers or transaction.status.is_terminal():
        return transaction

    approvers = [*transaction.approvers, approver_id]
    return transaction.model_copy(
        update={
            "approvers": approvers,
            "status": _status_after_approval(approvers, wallet),
        }
    )


def _status_after_approval(approvers: list[str], wallet: Wallet) -> TransactionStatus:
    if len(approvers) >= wallet.required_approvals:
        return TransactionStatus.APPROVED
    return TransactionStatus.PENDING

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
multisig-wallet — shared wallets with threshold spending approvals.

Quick start::

    from multisig_wallet import WalletService, WalletSpec, TransactionStatus

    service = WalletService()
    wallet = service.create_wallet(
        WalletSpec(
            name="operations",
            owners=["alice", "bob", "carol"],
            daily_limit_cents=1_000,
            required_approvals=2,
        ),
        creator_id="alice",
    )

    tx = service.create_transaction(wallet.id, 500, "hosting", creator_id="alice")
    print(tx.approvers)  # ['alice']

    tx = service.approve_transaction(tx.id, approver_id="bob")
    print(tx.status is TransactionStatus.APPROVED)  # True
"""
from __future__ import annotations

from multisig_wallet.approval import (
    approvals_remaining,
    approve_transaction,
    build_wallet,
    create_transaction,
    is_owner,
)
from multisig_wallet.audit import (
    AuditAction,
    AuditEvent,
    AuditFilter,
    AuditLog,
    AuditOutcome,
    AuditQueryResult,
)
from multisig_wallet.config import AuditConfig, ServiceConfig
from multisig_wallet.errors import (
    InvalidAmountError,
    InvalidConfigurationError,
    MultisigWalletError,
    NotAuthorizedError,
    NotFoundError,
    TransactionNotFoundError,
    WalletNotFoundError,
)
from multisig_wallet.service import WalletService
from multisig_wallet.storage import MemoryStorage, WalletStorage
from multisig_wallet.types import Transaction, TransactionStatus, Wallet, WalletSpec

__version__ = "0.1.0"

__all__ = [
    # Core types
    "Wallet",
    "WalletSpec",
    "Transaction",
    "TransactionStatus",
    # Configuration
    "ServiceConfig",
    "AuditConfig",
    # Service
    "WalletService",
    # Storage
    "WalletStorage",
    "MemoryStorage",
    # Approval engine
    "build_wallet",
    "create_transaction",
    "approve_transaction",
    "is_owner",
    "approvals_remaining",
    # Audit
    "AuditLog",
    "AuditEvent",
    "AuditAction",
    "AuditOutcome",
    "AuditFilter",
    "AuditQueryResult",
    # Errors
    "MultisigWalletError",
    "InvalidAmountError",
    "NotAuthorizedError",
    "NotFoundError",
    "WalletNotFoundError",
    "TransactionNotFoundError",
    "InvalidConfigurationError",
    "__version__",
]

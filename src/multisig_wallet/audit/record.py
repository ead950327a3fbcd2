# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from multisig_wallet.types import TransactionStatus


class AuditAction(str, Enum):
    """Kinds of wallet operations that produce an audit event."""

    WALLET_CREATED = "wallet_created"
    TRANSACTION_CREATED = "transaction_created"
    TRANSACTION_APPROVED = "transaction_approved"
    APPROVAL_IGNORED = "approval_ignored"
    APPROVAL_DENIED = "approval_denied"


class AuditOutcome(str, Enum):
    """Effect an operation had on stored state."""

    ALLOW = "allow"
    DENY = "deny"
    NOOP = "noop"


class AuditEvent(BaseModel, frozen=True):
    """
    An immutable record of one wallet decision.

    Attributes:
        event_id: Unique UUID for this event.
        action: What was attempted.
        outcome: Whether state changed, was refused, or stayed the same.
        actor_id: User who performed the action.
        wallet_id: Wallet involved.
        transaction_id: Transaction involved, if any.
        status: Transaction status after the action, if any.
        approvers: Transaction approvers after the action.
        detail: Short human-readable note.
        timestamp: UTC time the event was recorded.
    """

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    action: AuditAction
    outcome: AuditOutcome
    actor_id: str
    wallet_id: str
    transaction_id: str | None = None
    status: TransactionStatus | None = None
    approvers: list[str] = Field(default_factory=list)
    detail: str = ""
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(tz=timezone.utc)
    )

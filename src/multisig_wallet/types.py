# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ─── Status ───────────────────────────────────────────────────────────────────


class TransactionStatus(str, Enum):
    """
    Lifecycle states of a spending transaction.

    Only ``PENDING -> APPROVED`` happens inside this library. ``REJECTED`` and
    ``EXECUTED`` are set by outside collaborators and are terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    EXECUTED = "executed"

    def is_terminal(self) -> bool:
        """Return True if no further approvals may be recorded."""
        _terminal: dict[TransactionStatus, bool] = {
            TransactionStatus.PENDING: False,
            TransactionStatus.APPROVED: True,
            TransactionStatus.REJECTED: True,
            TransactionStatus.EXECUTED: True,
        }
        return _terminal[self]


_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


# ─── Wallet ───────────────────────────────────────────────────────────────────


class WalletSpec(BaseModel):
    """Input model for creating a wallet. Validated by ``build_wallet``."""

    model_config = _WIRE_CONFIG

    id: Optional[str] = None
    name: str
    owners: list[str]
    daily_limit_cents: int = 0
    required_approvals: int = 1


class Wallet(BaseModel):
    """
    A shared wallet. Immutable once created.

    Attributes:
        id: Opaque wallet identifier.
        name: Display name.
        owners: Distinct owner ids in the order they were supplied.
        daily_limit_cents: Ceiling, in minor units, under which an owner's
            own transaction is approved by its creator at submission time.
        required_approvals: Distinct owner approvals needed to approve.
        created_at: UTC creation timestamp.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    owners: tuple[str, ...]
    daily_limit_cents: int
    required_approvals: int
    created_at: datetime = Field(default_factory=_utcnow)


# ─── Transaction ──────────────────────────────────────────────────────────────


class Transaction(BaseModel):
    """A spending request accumulating owner approvals."""

    model_config = _WIRE_CONFIG

    id: str
    wallet_id: str
    amount_cents: int
    memo: str = ""
    created_by: str
    approvers: list[str] = Field(default_factory=list)
    status: TransactionStatus = TransactionStatus.PENDING
    created_at: datetime = Field(default_factory=_utcnow)

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from pydantic import BaseModel

from multisig_wallet.audit.record import AuditAction, AuditEvent, AuditOutcome


class AuditFilter(BaseModel, frozen=True):
    """
    Filter criteria for querying audit events.

    All fields are optional and AND-ed together.

    Attributes:
        wallet_id: Only events for this wallet.
        transaction_id: Only events for this transaction.
        actor_id: Only events performed by this user.
        action: Only events of this kind.
        outcome: Only events with this outcome.
        limit: Maximum number of events to return. 0 means no limit.
        offset: Number of matching events to skip.
    """

    wallet_id: str | None = None
    transaction_id: str | None = None
    actor_id: str | None = None
    action: AuditAction | None = None
    outcome: AuditOutcome | None = None
    limit: int = 0
    offset: int = 0


class AuditQueryResult(BaseModel, frozen=True):
    """
    Result of an audit query.

    Attributes:
        events: Matching events, oldest first.
        total_matched: Matches before ``offset`` and ``limit`` were applied.
    """

    events: list[AuditEvent]
    total_matched: int


def apply_filter(events: list[AuditEvent], audit_filter: AuditFilter) -> AuditQueryResult:
    """Apply ``audit_filter`` to ``events`` and paginate the matches."""
    matched = [event for event in events if _event_matches(event, audit_filter)]

    paginated = matched[audit_filter.offset :]
    if audit_filter.limit > 0:
        paginated = paginated[: audit_filter.limit]

    return AuditQueryResult(events=paginated, total_matched=len(matched))


def _event_matches(event: AuditEvent, audit_filter: AuditFilter) -> bool:
    if audit_filter.wallet_id is not None and event.wallet_id != audit_filter.wallet_id:
        return False
    if (
        audit_filter.transaction_id is not None
        and event.transaction_id != audit_filter.transaction_id
    ):
        return False
    if audit_filter.actor_id is not None and event.actor_id != audit_filter.actor_id:
        return False
    if audit_filter.action is not None and event.action != audit_filter.action:
        return False
    if audit_filter.outcome is not None and event.outcome != audit_filter.outcome:
        return False
    return True

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import collections
import threading

from multisig_wallet.audit.query import AuditFilter, AuditQueryResult, apply_filter
from multisig_wallet.audit.record import AuditEvent
from multisig_wallet.config import AuditConfig


class AuditLog:
    """
    Records wallet decisions as immutable audit events.

    The log is RECORDING ONLY. Nothing here feeds back into approval
    decisions.

    Events are kept in a bounded deque. When
    :attr:`~AuditConfig.max_records` is reached the oldest event is evicted.

    Example::

        audit = AuditLog(AuditConfig(max_records=1000))
        audit.record(AuditEvent(
            action=AuditAction.WALLET_CREATED,
            outcome=AuditOutcome.ALLOW,
            actor_id="alice",
            wallet_id="w-1",
        ))
        result = audit.query(AuditFilter(wallet_id="w-1"))
    """

    def __init__(self, config: AuditConfig | None = None) -> None:
        self._config = config or AuditConfig()
        self._lock = threading.Lock()
        self._events: collections.deque[AuditEvent] = collections.deque(
            maxlen=self._config.max_records
        )

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    def record(self, event: AuditEvent) -> None:
        """Store ``event`` unless auditing is disabled."""
        if not self._config.enabled:
            return
        with self._lock:
            self._events.append(event)

    def query(self, audit_filter: AuditFilter | None = None) -> AuditQueryResult:
        """
        Query stored events. Returns everything when no filter is given.

        Args:
            audit_filter: Optional :class:`AuditFilter` narrowing the result.

        Returns:
            An :class:`AuditQueryResult` with the matching events.
        """
        with self._lock:
            snapshot = list(self._events)
        return apply_filter(snapshot, audit_filter or AuditFilter())

    def count(self) -> int:
        with self._lock:
            return len(self._events)

    def latest(self, n: int = 10) -> list[AuditEvent]:
        """Return the ``n`` most recent events, most recent last."""
        if n < 1:
            raise ValueError(f"n must be >= 1; got {n}.")
        with self._lock:
            return list(self._events)[-n:]

    def clear(self) -> int:
        """Remove all events and return how many were dropped."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
        return count

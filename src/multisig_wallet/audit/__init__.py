# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Recording-only decision log for wallet operations."""
from __future__ import annotations

from multisig_wallet.audit.log import AuditLog
from multisig_wallet.audit.query import AuditFilter, AuditQueryResult, apply_filter
from multisig_wallet.audit.record import AuditAction, AuditEvent, AuditOutcome

__all__ = [
    "AuditLog",
    "AuditEvent",
    "AuditAction",
    "AuditOutcome",
    "AuditFilter",
    "AuditQueryResult",
    "apply_filter",
]

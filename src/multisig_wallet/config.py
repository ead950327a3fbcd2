# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field


class AuditConfig(BaseModel, frozen=True):
    """
    Configuration for the AuditLog.

    Attributes:
        enabled: When False, no audit events are retained.
        max_records: Maximum number of events kept in memory. The oldest
            event is evicted when this limit is reached.
    """

    enabled: bool = True
    max_records: Annotated[int, Field(gt=0)] = 10_000


class ServiceConfig(BaseModel, frozen=True):
    """
    Top-level configuration for the WalletService.

    Example::

        config = ServiceConfig(
            audit=AuditConfig(max_records=500),
            id_prefix="tenant-a",
        )
        service = WalletService(config=config)

    Attributes:
        audit: Settings for the decision log.
        id_prefix: Optional prefix for generated wallet and transaction ids.
    """

    audit: AuditConfig = Field(default_factory=AuditConfig)
    id_prefix: Annotated[str, Field(min_length=1)] | None = None

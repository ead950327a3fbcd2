# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for multisig-wallet tests."""

from __future__ import annotations

import pytest

from multisig_wallet.approval import build_wallet
from multisig_wallet.service import WalletService
from multisig_wallet.types import Wallet, WalletSpec


@pytest.fixture
def service() -> WalletService:
    """A fresh WalletService with default config and in-memory storage."""
    return WalletService()


@pytest.fixture
def wallet_abc() -> Wallet:
    """Owners alice/bob/carol, two approvals, 1000-cent auto-approval ceiling."""
    return build_wallet(
        WalletSpec(
            id="wallet-abc",
            name="operations",
            owners=["alice", "bob", "carol"],
            daily_limit_cents=1_000,
            required_approvals=2,
        )
    )


@pytest.fixture
def solo_wallet() -> Wallet:
    """Single owner, single approval, 1000-cent ceiling."""
    return build_wallet(
        WalletSpec(
            id="wallet-solo",
            name="petty cash",
            owners=["alice"],
            daily_limit_cents=1_000,
            required_approvals=1,
        )
    )


@pytest.fixture
def stored_wallet(service: WalletService) -> Wallet:
    """The alice/bob/carol wallet, created through the service."""
    return service.create_wallet(
        WalletSpec(
            name="operations",
            owners=["alice", "bob", "carol"],
            daily_limit_cents=1_000,
            required_approvals=2,
        ),
        creator_id="alice",
    )

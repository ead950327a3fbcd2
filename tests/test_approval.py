# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Tests for the pure approval functions — wallet validation, transaction
creation with auto-approval, and owner approvals.
"""

from __future__ import annotations

import pytest

from multisig_wallet.approval import (
    approvals_remaining,
    approve_transaction,
    build_wallet,
    create_transaction,
    is_owner,
)
from multisig_wallet.errors import (
    InvalidAmountError,
    InvalidConfigurationError,
    NotAuthorizedError,
)
from multisig_wallet.types import Transaction, TransactionStatus, Wallet, WalletSpec


# ---------------------------------------------------------------------------
# TestTransactionStatus
# ---------------------------------------------------------------------------


class TestTransactionStatus:
    def test_only_pending_is_not_terminal(self) -> None:
        assert TransactionStatus.PENDING.is_terminal() is False
        assert TransactionStatus.APPROVED.is_terminal() is True
        assert TransactionStatus.REJECTED.is_terminal() is True
        assert TransactionStatus.EXECUTED.is_terminal() is True

    def test_values_match_wire_strings(self) -> None:
        assert [status.value for status in TransactionStatus] == [
            "pending",
            "approved",
            "rejected",
            "executed",
        ]


# ---------------------------------------------------------------------------
# TestBuildWallet
# ---------------------------------------------------------------------------


class TestBuildWallet:
    def test_generates_id_when_absent(self) -> None:
        wallet = build_wallet(WalletSpec(name="w", owners=["a"], required_approvals=1))
        assert isinstance(wallet.id, str)
        assert len(wallet.id) > 0

    def test_keeps_caller_supplied_id(self) -> None:
        wallet = build_wallet(WalletSpec(id="w-1", name="w", owners=["a"]))
        assert wallet.id == "w-1"

    def test_created_at_is_timezone_aware(self) -> None:
        wallet = build_wallet(WalletSpec(name="w", owners=["a"]))
        assert wallet.created_at.tzinfo is not None

    def test_duplicate_owners_are_collapsed_in_order(self) -> None:
        wallet = build_wallet(
            WalletSpec(name="w", owners=["b", "a", "b", "c", "a"], required_approvals=3)
        )
        assert wallet.owners == ("b", "a", "c")

    def test_required_approvals_above_distinct_owner_count_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            build_wallet(WalletSpec(name="w", owners=["a", "a"], required_approvals=2))

    def test_required_approvals_above_owner_count_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="cannot exceed"):
            build_wallet(WalletSpec(name="w", owners=["a", "b"], required_approvals=3))

    def test_zero_required_approvals_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="required_approvals"):
            build_wallet(WalletSpec(name="w", owners=["a"], required_approvals=0))

    def test_empty_owner_list_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="owner"):
            build_wallet(WalletSpec(name="w", owners=[], required_approvals=1))

    def test_empty_owner_id_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            build_wallet(WalletSpec(name="w", owners=["a", ""], required_approvals=1))

    def test_blank_name_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="name"):
            build_wallet(WalletSpec(name="   ", owners=["a"]))

    def test_negative_daily_limit_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="daily_limit_cents"):
            build_wallet(WalletSpec(name="w", owners=["a"], daily_limit_cents=-1))

    def test_error_code_is_invalid_configuration(self) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            build_wallet(WalletSpec(name="w", owners=["a"], required_approvals=5))
        assert exc_info.value.code == "INVALID_CONFIGURATION"

    def test_wallet_is_frozen(self, wallet_abc: Wallet) -> None:
        with pytest.raises(Exception):
            wallet_abc.required_approvals = 1  # type: ignore[misc]

    def test_spec_accepts_camel_case_input(self) -> None:
        spec = WalletSpec.model_validate(
            {
                "name": "w",
                "owners": ["a", "b"],
                "dailyLimitCents": 250,
                "requiredApprovals": 2,
            }
        )
        wallet = build_wallet(spec)
        assert wallet.daily_limit_cents == 250
        assert wallet.required_approvals == 2

    def test_wallet_dumps_camel_case_names(self, wallet_abc: Wallet) -> None:
        payload = wallet_abc.model_dump(by_alias=True)
        assert payload["dailyLimitCents"] == 1_000
        assert payload["requiredApprovals"] == 2
        assert "createdAt" in payload


# ---------------------------------------------------------------------------
# TestCreateTransaction
# ---------------------------------------------------------------------------


class TestCreateTransaction:
    def test_zero_amount_raises_invalid_amount(self, wallet_abc: Wallet) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            create_transaction(wallet_abc, 0, "", "alice")
        assert exc_info.value.code == "INVALID_AMOUNT"
        assert exc_info.value.amount_cents == 0

    def test_negative_amount_raises_invalid_amount(self, wallet_abc: Wallet) -> None:
        with pytest.raises(InvalidAmountError):
            create_transaction(wallet_abc, -50, "", "alice")

    def test_owner_under_limit_is_recorded_as_first_approver(self, wallet_abc: Wallet) -> None:
        tx = create_transaction(wallet_abc, 500, "hosting", "alice")
        assert tx.approvers == ["alice"]
        assert tx.status is TransactionStatus.PENDING

    def test_owner_over_limit_is_not_auto_approver(self, wallet_abc: Wallet) -> None:
        tx = create_transaction(wallet_abc, 1_001, "hosting", "alice")
        assert tx.approvers == []
        assert tx.status is TransactionStatus.PENDING

    def test_non_owner_may_create_but_not_auto_approve(self, wallet_abc: Wallet) -> None:
        tx = create_transaction(wallet_abc, 10, "snacks", "mallory")
        assert tx.created_by == "mallory"
        assert tx.approvers == []
        assert tx.status is TransactionStatus.PENDING

    def test_amount_equal_to_limit_self_approves_single_threshold_wallet(
        self, solo_wallet: Wallet
    ) -> None:
        tx = create_transaction(solo_wallet, 1_000, "", "alice")
        assert tx.approvers == ["alice"]
        assert tx.status is TransactionStatus.APPROVED

    def test_amount_one_over_limit_stays_pending_on_single_threshold_wallet(
        self, solo_wallet: Wallet
    ) -> None:
        tx = create_transaction(solo_wallet, 1_001, "", "alice")
        assert tx.approvers == []
        assert tx.status is TransactionStatus.PENDING

    def test_zero_daily_limit_disables_auto_approval(self) -> None:
        wallet = build_wallet(WalletSpec(name="w", owners=["a"], daily_limit_cents=0))
        tx = create_transaction(wallet, 1, "", "a")
        assert tx.approvers == []
        assert tx.status is TransactionStatus.PENDING

    def test_fields_are_copied_from_arguments(self, wallet_abc: Wallet) -> None:
        tx = create_transaction(wallet_abc, 42, "coffee", "bob", transaction_id="tx-1")
        assert tx.id == "tx-1"
        assert tx.wallet_id == wallet_abc.id
        assert tx.amount_cents == 42
        assert tx.memo == "coffee"

    def test_transaction_dumps_camel_case_names(self, wallet_abc: Wallet) -> None:
        tx = create_transaction(wallet_abc, 42, "coffee", "bob")
        payload = tx.model_dump(by_alias=True, mode="json")
        assert payload["walletId"] == wallet_abc.id
        assert payload["amountCents"] == 42
        assert payload["createdBy"] == "bob"
        assert payload["status"] == "pending"


# ---------------------------------------------------------------------------
# TestApproveTransaction
# ---------------------------------------------------------------------------


def _pending(wallet: Wallet, approvers: list[str] | None = None) -> Transaction:
    return Transaction(
        id="tx-1",
        wallet_id=wallet.id,
        amount_cents=5_000,
        created_by="alice",
        approvers=approvers or [],
    )


class TestApproveTransaction:
    def test_non_owner_raises_not_authorized(self, wallet_abc: Wallet) -> None:
        tx = _pending(wallet_abc)
        with pytest.raises(NotAuthorizedError) as exc_info:
            approve_transaction(tx, wallet_abc, "mallory")
        assert exc_info.value.user_id == "mallory"
        assert exc_info.value.wallet_id == wallet_abc.id

    def test_non_owner_leaves_transaction_unchanged(self, wallet_abc: Wallet) -> None:
        tx = _pending(wallet_abc, ["alice"])
        before = tx.model_copy(deep=True)
        with pytest.raises(NotAuthorizedError):
            approve_transaction(tx, wallet_abc, "mallory")
        assert tx == before

    def test_non_owner_is_refused_even_on_approved_transaction(self, wallet_abc: Wallet) -> None:
        tx = _pending(wallet_abc, ["alice", "bob"]).model_copy(
            update={"status": TransactionStatus.APPROVED}
        )
        with pytest.raises(NotAuthorizedError):
            approve_transaction(tx, wallet_abc, "mallory")

    def test_approval_below_threshold_stays_pending(self, wallet_abc: Wallet) -> None:
        tx = approve_transaction(_pending(wallet_abc), wallet_abc, "bob")
        assert tx.approvers == ["bob"]
        assert tx.status is TransactionStatus.PENDING

    def test_approval_reaching_threshold_approves(self, wallet_abc: Wallet) -> None:
        tx = approve_transaction(_pending(wallet_abc, ["alice"]), wallet_abc, "carol")
        assert tx.approvers == ["alice", "carol"]
        assert tx.status is TransactionStatus.APPROVED

    def test_approval_does_not_mutate_input(self, wallet_abc: Wallet) -> None:
        original = _pending(wallet_abc, ["alice"])
        approve_transaction(original, wallet_abc, "bob")
        assert original.approvers == ["alice"]
        assert original.status is TransactionStatus.PENDING

    def test_repeat_approval_is_a_noop(self, wallet_abc: Wallet) -> None:
        once = approve_transaction(_pending(wallet_abc), wallet_abc, "bob")
        twice = approve_transaction(once, wallet_abc, "bob")
        assert twice is once
        assert twice.approvers == ["bob"]

    @pytest.mark.parametrize(
        "status",
        [TransactionStatus.APPROVED, TransactionStatus.EXECUTED, TransactionStatus.REJECTED],
    )
    def test_terminal_status_is_a_noop(self, wallet_abc: Wallet, status: TransactionStatus) -> None:
        tx = _pending(wallet_abc, ["alice"]).model_copy(update={"status": status})
        result = approve_transaction(tx, wallet_abc, "carol")
        assert result is tx
        assert result.approvers == ["alice"]
        assert result.status is status

    def test_threshold_reached_exactly_on_last_required_owner(self) -> None:
        owners = ["o1", "o2", "o3", "o4"]
        wallet = build_wallet(WalletSpec(name="w", owners=owners, required_approvals=4))
        tx = _pending(wallet)
        counts: list[int] = []
        for owner in owners:
            tx = approve_transaction(tx, wallet, owner)
            counts.append(len(tx.approvers))
            expected = TransactionStatus.APPROVED if len(tx.approvers) == 4 else TransactionStatus.PENDING
            assert tx.status is expected
        assert counts == [1, 2, 3, 4]

    def test_approvers_never_shrink_over_a_sequence(self, wallet_abc: Wallet) -> None:
        tx = _pending(wallet_abc)
        previous = 0
        for approver in ["bob", "bob", "alice", "carol", "alice"]:
            tx = approve_transaction(tx, wallet_abc, approver)
            assert len(tx.approvers) >= previous
            assert len(set(tx.approvers)) == len(tx.approvers)
            previous = len(tx.approvers)
        assert tx.approvers == ["bob", "alice"]

    def test_end_to_end_example(self, wallet_abc: Wallet) -> None:
        tx = create_transaction(wallet_abc, 500, "", "alice")
        assert tx.approvers == ["alice"]
        assert tx.status is TransactionStatus.PENDING

        tx = approve_transaction(tx, wallet_abc, "bob")
        assert tx.approvers == ["alice", "bob"]
        assert tx.status is TransactionStatus.APPROVED

        tx = approve_transaction(tx, wallet_abc, "carol")
        assert tx.approvers == ["alice", "bob"]
        assert tx.status is TransactionStatus.APPROVED


# ---------------------------------------------------------------------------
# TestHelpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_is_owner(self, wallet_abc: Wallet) -> None:
        assert is_owner(wallet_abc, "bob") is True
        assert is_owner(wallet_abc, "mallory") is False

    def test_approvals_remaining_counts_down_to_zero(self, wallet_abc: Wallet) -> None:
        assert approvals_remaining(_pending(wallet_abc), wallet_abc) == 2
        assert approvals_remaining(_pending(wallet_abc, ["alice"]), wallet_abc) == 1
        assert approvals_remaining(_pending(wallet_abc, ["alice", "bob", "carol"]), wallet_abc) == 0

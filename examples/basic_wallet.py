# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_wallet.py

Walks through the approval loop for a three-owner wallet:
  1. Create a wallet needing two approvals.
  2. Submit a small spend (auto-approved by its owner-creator) and a large one.
  3. Collect approvals, including a repeat and a refused non-owner.
  4. Print the audit trail.

Run with:  python examples/basic_wallet.py
(with multisig-wallet installed)
"""

import logging

from multisig_wallet import NotAuthorizedError, WalletService, WalletSpec

logging.basicConfig(level=logging.INFO, format="%(levelname)-7s %(name)s: %(message)s")

# ─── Setup ────────────────────────────────────────────────────────────────────

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

# ─── Submit ───────────────────────────────────────────────────────────────────

small = service.create_transaction(wallet.id, 500, "domain renewal", creator_id="alice")
large = service.create_transaction(wallet.id, 250_000, "new servers", creator_id="bob")

# ─── Approve ──────────────────────────────────────────────────────────────────

service.approve_transaction(small.id, approver_id="bob")
service.approve_transaction(small.id, approver_id="carol")  # already approved: no-op

service.approve_transaction(large.id, approver_id="alice")
service.approve_transaction(large.id, approver_id="alice")  # repeat: no-op

try:
    service.approve_transaction(large.id, approver_id="mallory")
except NotAuthorizedError as exc:
    print(f"refused: {exc.message}")

service.approve_transaction(large.id, approver_id="carol")

# ─── Summary ──────────────────────────────────────────────────────────────────

print("\n── Transactions ──────────────────────────────────────")
for transaction in service.list_transactions(wallet.id):
    print(
        f"  [{transaction.id[:8]}] {transaction.amount_cents:>8} cents  "
        f"{transaction.status.value:<9} approvers={transaction.approvers}  {transaction.memo}"
    )

print("\n── Audit trail ───────────────────────────────────────")
for event in service.audit.query().events:
    print(f"  {event.action.value:<20} {event.outcome.value:<5} by {event.actor_id}")

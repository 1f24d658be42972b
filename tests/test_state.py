"""Tests for the wallet registry and the transaction ledger."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from wallet_mock.errors import NotFoundError, ValidationError
from wallet_mock.oracle import BalanceOracle, SequenceDraw
from wallet_mock.state import (
    TransactionDraft,
    TransactionLedger,
    TransactionStatus,
    WalletRegistry,
)


# ---------------------------------------------------------------------------
#  WalletRegistry
# ---------------------------------------------------------------------------

class TestWalletRegistry:

    def test_connect_creates_record(self, registry):
        wallet, created = registry.connect("0xA", "metamask")
        assert created is True
        assert wallet.address == "0xA"
        assert wallet.wallet_type == "metamask"
        assert wallet.chain_id == "0x1"
        assert wallet.balance == Decimal("5.0000")
        assert wallet.is_connected is True
        assert wallet.connected_at == wallet.last_activity

    def test_connect_keeps_explicit_chain(self, registry):
        wallet, _ = registry.connect("0xA", "metamask", "0x89")
        assert wallet.chain_id == "0x89"

    def test_custom_default_chain(self, oracle):
        registry = WalletRegistry(oracle, default_chain_id="0x5")
        wallet, _ = registry.connect("0xA", "metamask")
        assert wallet.chain_id == "0x5"

    def test_connect_is_idempotent(self):
        registry = WalletRegistry(BalanceOracle(SequenceDraw([0.25, 0.9])))
        first, _ = registry.connect("0xA", "metamask")
        second, created = registry.connect("0xA", "phantom", "0x89")
        assert created is False
        assert second.wallet_id == first.wallet_id
        assert second.balance == first.balance == Decimal("2.5000")
        assert second.wallet_type == "metamask"
        assert len(registry) == 1

    @pytest.mark.parametrize("address,wallet_type", [
        (None, "metamask"),
        ("", "metamask"),
        ("   ", "metamask"),
        ("0xA", None),
        ("0xA", ""),
        (42, "metamask"),
    ])
    def test_connect_requires_fields(self, registry, address, wallet_type):
        with pytest.raises(ValidationError, match="Missing required fields"):
            registry.connect(address, wallet_type)
        assert len(registry) == 0

    def test_find_by_address(self, registry):
        assert registry.find_by_address("0xA") is None
        registry.connect("0xA", "metamask")
        assert registry.find_by_address("0xA").address == "0xA"

    def test_returned_records_are_copies(self, registry):
        wallet, _ = registry.connect("0xA", "metamask")
        wallet.balance = Decimal("999")
        assert registry.find_by_address("0xA").balance == Decimal("5.0000")

    def test_credit_and_debit(self, registry):
        registry.connect("0xA", "metamask")
        assert registry.credit_or_debit("0xA", Decimal("1.5")).balance == Decimal("6.5000")
        assert registry.credit_or_debit("0xA", Decimal("-2.25")).balance == Decimal("4.2500")

    def test_debit_clamps_at_zero(self, registry):
        registry.connect("0xA", "metamask")
        wallet = registry.credit_or_debit("0xA", Decimal("-100"))
        assert wallet.balance == Decimal("0")
        assert wallet.balance >= 0

    def test_credit_unknown_wallet(self, registry):
        with pytest.raises(NotFoundError):
            registry.credit_or_debit("0xMissing", Decimal("1"))

    def test_get_uses_custom_message(self, registry):
        with pytest.raises(NotFoundError, match="Sender wallet not found"):
            registry.get("0xMissing", message="Sender wallet not found")

    def test_list_all(self, registry):
        registry.connect("0xA", "metamask")
        registry.connect("0xB", "ledger")
        assert sorted(w.address for w in registry.list_all()) == ["0xA", "0xB"]

    def test_wire_shape(self, registry):
        wallet, _ = registry.connect("0xA", "metamask")
        data = wallet.to_dict()
        assert set(data) == {
            "id", "address", "walletType", "chainId",
            "balance", "isConnected", "connectedAt", "lastActivity",
        }
        assert data["balance"] == "5.0000"


# ---------------------------------------------------------------------------
#  TransactionLedger
# ---------------------------------------------------------------------------

def _draft(**overrides):
    values = dict(sender="0xA", recipient="0xB", amount=Decimal("1"), asset_type="ETH", gas_fee=Decimal("0.001"))
    values.update(overrides)
    return TransactionDraft(**values)


class TestTransactionLedger:

    def test_record_assigns_identity(self, ledger):
        tx = ledger.record(_draft())
        assert tx.tx_id.startswith("tx-")
        assert tx.tx_hash.startswith("0x")
        assert tx.amount == "1"
        assert tx.gas_fee == "0.001"
        assert tx.status is TransactionStatus.COMPLETED
        assert tx.admin_initiated is False
        assert len(ledger) == 1

    def test_hashes_and_ids_are_unique(self, ledger):
        txs = [ledger.record(_draft()) for _ in range(100)]
        assert len({t.tx_hash for t in txs}) == 100
        assert len({t.tx_id for t in txs}) == 100

    def test_transactions_are_immutable(self, ledger):
        tx = ledger.record(_draft())
        with pytest.raises(FrozenInstanceError):
            tx.amount = "1000"

    def test_append_only_order(self, ledger):
        first = ledger.record(_draft(amount=Decimal("1")))
        second = ledger.record(_draft(amount=Decimal("2")))
        assert ledger.all() == (first, second)

    def test_for_address_matches_sender_or_recipient(self, ledger):
        a_to_b = ledger.record(_draft())
        c_to_a = ledger.record(_draft(sender="0xC", recipient="0xA"))
        ledger.record(_draft(sender="0xC", recipient="0xD"))
        assert ledger.for_address("0xA") == (a_to_b, c_to_a)
        assert ledger.for_address("0xZ") == ()

    def test_wire_shape(self, ledger):
        tx = ledger.record(_draft(status=TransactionStatus.ADMIN_COMPLETED, admin_initiated=True, gas_fee=Decimal("0")))
        data = tx.to_dict()
        assert data["from"] == "0xA"
        assert data["to"] == "0xB"
        assert data["cryptoType"] == "ETH"
        assert data["gasFee"] == "0"
        assert data["status"] == "admin_completed"
        assert data["adminInitiated"] is True

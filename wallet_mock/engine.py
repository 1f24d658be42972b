"""Wallet ledger engine.

Each HTTP endpoint maps to exactly one method here. The engine reads and
mutates the registry and the ledger, asks the oracle and the gas estimator for
simulated values, and checks the admin gate before privileged operations.

Every balance check and the debit and ledger append that follow it run under
one lock, so two concurrent sends cannot both pass the same check. A failed
operation leaves no partial effect.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from threading import RLock
from typing import Any

from .auth import AdminAuthGate
from .errors import InsufficientFundsError
from .gas import NATIVE_ASSET, GasEstimator, GasQuote
from .money import ZERO, charge_amount, parse_amount
from .oracle import BalanceOracle
from .state import (
    Transaction,
    TransactionDraft,
    TransactionLedger,
    TransactionStatus,
    WalletRecord,
    WalletRegistry,
    required_text,
)


log = logging.getLogger("wallet_mock.engine")


@dataclass(frozen=True, slots=True)
class SendResult:
    transaction: Transaction
    wallet: WalletRecord


@dataclass(frozen=True, slots=True)
class WalletsSnapshot:
    wallets: list[WalletRecord]
    total_balance: Decimal


def _asset(value: Any) -> str:
    return value.strip() if isinstance(value, str) and value.strip() else NATIVE_ASSET


class WalletLedgerEngine:
    def __init__(
        self,
        *,
        registry: WalletRegistry,
        ledger: TransactionLedger,
        oracle: BalanceOracle,
        gas: GasEstimator,
        auth: AdminAuthGate,
    ) -> None:
        self.registry = registry
        self.ledger = ledger
        self.oracle = oracle
        self.gas = gas
        self.auth = auth
        self._lock = RLock()

    def connect(self, address: Any, wallet_type: Any, chain_id: Any = None) -> tuple[WalletRecord, bool]:
        wallet, created = self.registry.connect(address, wallet_type, chain_id)
        if created:
            log.info("Wallet connected: address=%s type=%s chain=%s", wallet.address, wallet.wallet_type, wallet.chain_id)
        return wallet, created

    def get_balance(self, address: Any) -> WalletRecord:
        """Refresh the simulated balance with oracle jitter and return the wallet."""

        address = required_text(address, "address")
        with self._lock:
            return self.registry.credit_or_debit(address, self.oracle.jitter())

    def estimate_gas(self, amount: Any, asset_type: Any) -> GasQuote:
        return self.gas.quote(parse_amount(amount, "amount"), _asset(asset_type))

    def send(self, sender: Any, recipient: Any, amount: Any, asset_type: Any, gas_fee: Any = None) -> SendResult:
        sender = required_text(sender, "from")
        recipient = required_text(recipient, "to")
        value = parse_amount(amount, "amount")
        fee = parse_amount(gas_fee, "gasFee", allow_zero=True, default=ZERO)
        asset = _asset(asset_type)

        with self._lock:
            wallet = self.registry.get(sender, message="Sender wallet not found")
            cost = charge_amount(value + fee)
            if wallet.balance < cost:
                log.warning("Send rejected: address=%s balance=%s required=%s", sender, wallet.balance, cost)
                raise InsufficientFundsError(details={"balance": str(wallet.balance), "required": str(cost)})

            wallet = self.registry.credit_or_debit(sender, -cost)
            tx = self.ledger.record(
                TransactionDraft(
                    sender=sender,
                    recipient=recipient,
                    amount=value,
                    asset_type=asset,
                    gas_fee=fee,
                    status=TransactionStatus.COMPLETED,
                )
            )

        log.info("Transaction sent: hash=%s from=%s to=%s amount=%s fee=%s", tx.tx_hash, sender, recipient, tx.amount, tx.gas_fee)
        return SendResult(transaction=tx, wallet=wallet)

    def admin_send(
        self,
        authorization: str | None,
        sender: Any,
        recipient: Any,
        amount: Any,
        asset_type: Any = None,
    ) -> SendResult:
        """Move funds out of a user wallet on the admin's behalf; no gas is charged."""

        self.auth.require(authorization)

        sender = required_text(sender, "fromAddress")
        recipient = required_text(recipient, "toAddress")
        value = parse_amount(amount, "amount")
        asset = _asset(asset_type)

        with self._lock:
            wallet = self.registry.get(sender)
            cost = charge_amount(value)
            if wallet.balance < cost:
                log.warning("Admin send rejected: address=%s balance=%s required=%s", sender, wallet.balance, cost)
                raise InsufficientFundsError(details={"balance": str(wallet.balance), "required": str(cost)})

            wallet = self.registry.credit_or_debit(sender, -cost)
            tx = self.ledger.record(
                TransactionDraft(
                    sender=sender,
                    recipient=recipient,
                    amount=value,
                    asset_type=asset,
                    gas_fee=ZERO,
                    status=TransactionStatus.ADMIN_COMPLETED,
                    admin_initiated=True,
                )
            )

        log.info("Admin transaction completed: hash=%s from=%s to=%s amount=%s", tx.tx_hash, sender, recipient, tx.amount)
        return SendResult(transaction=tx, wallet=wallet)

    def admin_list_wallets(self, authorization: str | None) -> WalletsSnapshot:
        self.auth.require(authorization)
        with self._lock:
            wallets = self.registry.list_all()
        return WalletsSnapshot(wallets=wallets, total_balance=sum((w.balance for w in wallets), ZERO))

    def admin_list_transactions(self, authorization: str | None, address: str | None = None) -> tuple[Transaction, ...]:
        self.auth.require(authorization)
        if address:
            return self.ledger.for_address(address)
        return self.ledger.all()

    def admin_login(self, password: Any) -> str:
        return self.auth.login(password)

    def admin_logout(self, authorization: str | None) -> None:
        self.auth.logout(authorization)

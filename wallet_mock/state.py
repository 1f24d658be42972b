"""In-memory state for the wallet mock.

Two stores, linked only by address strings:
  - WalletRegistry owns the connected wallet records (one per address).
  - TransactionLedger owns the append-only list of executed transactions.

Both hand out copies or frozen values, never their internal records.
Nothing here survives a restart.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from threading import RLock
from typing import Any

from .errors import NotFoundError, ValidationError
from .money import ZERO, clamp_non_negative, format_balance, format_plain, quantize_balance
from .oracle import BalanceOracle
from .versioning import new_id, new_tx_hash, now_utc_iso


JsonObject = dict[str, Any]

DEFAULT_CHAIN_ID = "0x1"


class TransactionStatus(str, Enum):
    COMPLETED = "completed"
    ADMIN_COMPLETED = "admin_completed"


@dataclass(slots=True)
class WalletRecord:
    wallet_id: str
    address: str
    wallet_type: str
    chain_id: str
    balance: Decimal
    is_connected: bool = True
    connected_at: str = field(default_factory=now_utc_iso)
    last_activity: str = field(default_factory=now_utc_iso)

    def to_dict(self) -> JsonObject:
        return {
            "id": self.wallet_id,
            "address": self.address,
            "walletType": self.wallet_type,
            "chainId": self.chain_id,
            "balance": format_balance(self.balance),
            "isConnected": self.is_connected,
            "connectedAt": self.connected_at,
            "lastActivity": self.last_activity,
        }


@dataclass(frozen=True, slots=True)
class TransactionDraft:
    sender: str
    recipient: str
    amount: Decimal
    asset_type: str
    gas_fee: Decimal = ZERO
    status: TransactionStatus = TransactionStatus.COMPLETED
    admin_initiated: bool = False


@dataclass(frozen=True, slots=True)
class Transaction:
    tx_id: str
    sender: str
    recipient: str
    amount: str
    asset_type: str
    gas_fee: str
    status: TransactionStatus
    admin_initiated: bool
    timestamp: str
    tx_hash: str

    def to_dict(self) -> JsonObject:
        return {
            "id": self.tx_id,
            "from": self.sender,
            "to": self.recipient,
            "amount": self.amount,
            "cryptoType": self.asset_type,
            "gasFee": self.gas_fee,
            "status": self.status.value,
            "adminInitiated": self.admin_initiated,
            "timestamp": self.timestamp,
            "txHash": self.tx_hash,
        }


def required_text(value: Any, name: str) -> str:
    """Return the stripped string value of a required field."""

    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(details={"field": name})
    return text


class WalletRegistry:
    """Thread-safe registry of connected wallets keyed by address."""

    def __init__(self, oracle: BalanceOracle, *, default_chain_id: str = DEFAULT_CHAIN_ID) -> None:
        self._lock = RLock()
        self._oracle = oracle
        self._default_chain_id = default_chain_id
        self._wallets: dict[str, WalletRecord] = {}

    def __len__(self) -> int:
        return len(self._wallets)

    def connect(self, address: Any, wallet_type: Any, chain_id: Any = None) -> tuple[WalletRecord, bool]:
        """Return the wallet for `address`, creating it on first contact.

        The boolean is True when a new record was created. Reconnecting never
        resets balance or activity time.
        """

        address = required_text(address, "address")
        wallet_type = required_text(wallet_type, "walletType")
        chain = chain_id.strip() if isinstance(chain_id, str) and chain_id.strip() else self._default_chain_id

        with self._lock:
            existing = self._wallets.get(address)
            if existing is not None:
                return replace(existing), False

            now = now_utc_iso()
            record = WalletRecord(
                wallet_id=new_id("wallet"),
                address=address,
                wallet_type=wallet_type,
                chain_id=chain,
                balance=self._oracle.initial_balance(),
                connected_at=now,
                last_activity=now,
            )
            self._wallets[address] = record
            return replace(record), True

    def find_by_address(self, address: str) -> WalletRecord | None:
        with self._lock:
            record = self._wallets.get(address)
            return replace(record) if record is not None else None

    def get(self, address: str, *, message: str | None = None) -> WalletRecord:
        record = self.find_by_address(address)
        if record is None:
            raise NotFoundError(message, details={"address": address})
        return record

    def credit_or_debit(self, address: str, delta: Decimal) -> WalletRecord:
        """Apply `delta` to the balance, clamped at zero, and touch last activity."""

        with self._lock:
            record = self._wallets.get(address)
            if record is None:
                raise NotFoundError(details={"address": address})
            record.balance = clamp_non_negative(quantize_balance(record.balance + delta))
            record.last_activity = now_utc_iso()
            return replace(record)

    def list_all(self) -> list[WalletRecord]:
        with self._lock:
            return [replace(w) for w in self._wallets.values()]


class TransactionLedger:
    """Append-only audit trail of executed transactions."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._transactions: list[Transaction] = []
        self._hashes: set[str] = set()

    def __len__(self) -> int:
        return len(self._transactions)

    def _unique_hash(self) -> str:
        tx_hash = new_tx_hash()
        while tx_hash in self._hashes:
            tx_hash = new_tx_hash()
        return tx_hash

    def record(self, draft: TransactionDraft) -> Transaction:
        with self._lock:
            tx = Transaction(
                tx_id=new_id("tx"),
                sender=draft.sender,
                recipient=draft.recipient,
                amount=format_plain(draft.amount),
                asset_type=draft.asset_type,
                gas_fee=format_plain(draft.gas_fee),
                status=draft.status,
                admin_initiated=draft.admin_initiated,
                timestamp=now_utc_iso(),
                tx_hash=self._unique_hash(),
            )
            self._hashes.add(tx.tx_hash)
            self._transactions.append(tx)
            return tx

    def all(self) -> tuple[Transaction, ...]:
        with self._lock:
            return tuple(self._transactions)

    def for_address(self, address: str) -> tuple[Transaction, ...]:
        """Transactions where `address` is the sender or the recipient."""

        with self._lock:
            return tuple(t for t in self._transactions if address in (t.sender, t.recipient))

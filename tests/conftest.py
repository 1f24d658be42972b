"""
Wallet Mock Test Suite - Shared Fixtures
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wallet_mock.auth import AdminAuthGate
from wallet_mock.config import Settings
from wallet_mock.engine import WalletLedgerEngine
from wallet_mock.gas import GasEstimator
from wallet_mock.oracle import BalanceOracle, SequenceDraw
from wallet_mock.server import create_app
from wallet_mock.state import TransactionLedger, WalletRegistry


ADMIN_PASSWORD = "test-admin-secret"


class FakeClock:
    """Manually advanced clock for session expiry tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD


@pytest.fixture
def settings():
    return Settings(admin_password=ADMIN_PASSWORD, token_ttl=600)


@pytest.fixture
def oracle():
    """Every draw returns 0.5: initial balance 5.0000, jitter exactly zero."""
    return BalanceOracle(SequenceDraw([0.5]))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def auth(clock):
    return AdminAuthGate(ADMIN_PASSWORD, token_ttl=600, clock=clock)


@pytest.fixture
def registry(oracle):
    return WalletRegistry(oracle)


@pytest.fixture
def ledger():
    return TransactionLedger()


@pytest.fixture
def engine(registry, ledger, oracle, auth):
    return WalletLedgerEngine(
        registry=registry,
        ledger=ledger,
        oracle=oracle,
        gas=GasEstimator(),
        auth=auth,
    )


@pytest.fixture
def admin_header(auth):
    return f"Bearer {auth.login(ADMIN_PASSWORD)}"


@pytest.fixture
def app(settings, oracle):
    return create_app(settings, oracle=oracle)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

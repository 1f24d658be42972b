"""Static catalog of wallet providers a client can connect with."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class WalletProvider:
    id: str
    name: str
    type: str


WALLET_CATALOG: tuple[WalletProvider, ...] = (
    WalletProvider("metamask", "MetaMask", "extension"),
    WalletProvider("trustwallet", "Trust Wallet", "mobile"),
    WalletProvider("coinbase", "Coinbase Wallet", "mobile"),
    WalletProvider("walletconnect", "WalletConnect", "qr"),
    WalletProvider("phantom", "Phantom", "extension"),
    WalletProvider("ledger", "Ledger Live", "hardware"),
    WalletProvider("trezor", "Trezor", "hardware"),
    WalletProvider("brave", "Brave Wallet", "browser"),
    WalletProvider("exodus", "Exodus", "desktop"),
    WalletProvider("atomic", "Atomic Wallet", "desktop"),
    WalletProvider("myetherwallet", "MyEtherWallet", "web"),
    WalletProvider("argent", "Argent", "mobile"),
    WalletProvider("rainbow", "Rainbow", "mobile"),
    WalletProvider("mathwallet", "Math Wallet", "mobile"),
    WalletProvider("tokenpocket", "TokenPocket", "mobile"),
    WalletProvider("safepal", "SafePal", "hardware"),
    WalletProvider("bitkeep", "BitKeep", "extension"),
    WalletProvider("zenGo", "ZenGo", "mobile"),
    WalletProvider("alpha", "Alpha Wallet", "mobile"),
    WalletProvider("crypto.com", "Crypto.com DeFi Wallet", "mobile"),
    WalletProvider("1inch", "1inch Wallet", "mobile"),
    WalletProvider("binance", "Binance Chain Wallet", "extension"),
)


def catalog_payload() -> list[dict[str, str]]:
    return [asdict(p) for p in WALLET_CATALOG]

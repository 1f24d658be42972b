"""Module entrypoint for the wallet mock server.

Configuration comes from WALLET_MOCK_* environment variables, see
wallet_mock.config.
"""

from __future__ import annotations

import logging

import uvicorn

from .config import Settings


def main() -> None:
    settings = Settings.from_env()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)8s | %(name)s | %(message)s",
    )

    uvicorn.run(
        "wallet_mock.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        # Wallet UIs are often run behind reverse proxies / tunnels.
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()

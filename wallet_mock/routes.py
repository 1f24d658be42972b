"""Route table for the wallet mock API."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .handlers.admin import (
    get_admin_transactions,
    get_admin_wallets,
    post_admin_login,
    post_admin_logout,
    post_admin_send,
)
from .handlers.wallets import (
    get_wallet_catalog,
    post_balance,
    post_connect,
    post_estimate_gas,
    post_send,
)


log = logging.getLogger("wallet_mock.routes")

Handler = Callable[[Request], Awaitable[JSONResponse]]

# Each item: {'path': str, 'methods': [str], 'handler': Handler}
ROUTES: list[dict[str, Any]] = [
    {"path": "/api/wallets", "methods": ["GET"], "handler": get_wallet_catalog},
    {"path": "/api/connect", "methods": ["POST"], "handler": post_connect},
    {"path": "/api/balance", "methods": ["POST"], "handler": post_balance},
    {"path": "/api/estimate-gas", "methods": ["POST"], "handler": post_estimate_gas},
    {"path": "/api/send", "methods": ["POST"], "handler": post_send},
    {"path": "/api/admin/login", "methods": ["POST"], "handler": post_admin_login},
    {"path": "/api/admin/logout", "methods": ["POST"], "handler": post_admin_logout},
    {"path": "/api/admin/wallets", "methods": ["GET"], "handler": get_admin_wallets},
    {"path": "/api/admin/transactions", "methods": ["GET"], "handler": get_admin_transactions},
    {"path": "/api/admin/send", "methods": ["POST"], "handler": post_admin_send},
]


def register_routes(app: FastAPI) -> None:
    for item in ROUTES:
        app.add_route(item["path"], item["handler"], methods=item["methods"])
    log.debug("Registered %d API routes", len(ROUTES))

"""Admin handlers.

Implements:
- POST /api/admin/login
- POST /api/admin/logout
- GET  /api/admin/wallets
- GET  /api/admin/transactions
- POST /api/admin/send

Everything except login requires `Authorization: Bearer <token>`.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from ..money import format_balance
from ..responses import ok_response
from . import get_engine, read_json_object, request_context


async def post_admin_login(request: Request) -> JSONResponse:
    body = await read_json_object(request)
    engine = get_engine(request)
    token = engine.admin_login(body.get("password"))
    return ok_response(
        {
            "message": "Admin login successful",
            "token": token,
            "expiresIn": int(engine.auth.token_ttl),
        }
    )


async def post_admin_logout(request: Request) -> JSONResponse:
    get_engine(request).admin_logout(request_context(request).authorization)
    return ok_response({"message": "Admin logged out"})


async def get_admin_wallets(request: Request) -> JSONResponse:
    snapshot = get_engine(request).admin_list_wallets(request_context(request).authorization)
    return ok_response(
        {
            "wallets": [w.to_dict() for w in snapshot.wallets],
            "totalConnected": len(snapshot.wallets),
            "totalBalance": format_balance(snapshot.total_balance),
        }
    )


async def get_admin_transactions(request: Request) -> JSONResponse:
    address = (request.query_params.get("address") or "").strip() or None
    transactions = get_engine(request).admin_list_transactions(request_context(request).authorization, address)
    return ok_response(
        {
            "transactions": [t.to_dict() for t in transactions],
            "totalTransactions": len(transactions),
        }
    )


async def post_admin_send(request: Request) -> JSONResponse:
    ctx = request_context(request)
    engine = get_engine(request)
    # Authorize before touching the body so an unauthenticated caller learns nothing.
    engine.auth.require(ctx.authorization)
    body = await read_json_object(request)
    result = engine.admin_send(
        ctx.authorization,
        body.get("fromAddress"),
        body.get("toAddress"),
        body.get("amount"),
        body.get("cryptoType"),
    )
    return ok_response(
        {
            "message": "Admin transaction completed",
            "transaction": result.transaction.to_dict(),
            "newBalance": format_balance(result.wallet.balance),
        }
    )

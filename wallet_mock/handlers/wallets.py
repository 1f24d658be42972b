"""Public wallet handlers.

Implements:
- GET  /api/wallets
- POST /api/connect
- POST /api/balance
- POST /api/estimate-gas
- POST /api/send
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from ..catalog import catalog_payload
from ..money import format_balance
from ..responses import ok_response
from . import get_engine, read_json_object


async def get_wallet_catalog(request: Request) -> JSONResponse:
    return ok_response({"wallets": catalog_payload()})


async def post_connect(request: Request) -> JSONResponse:
    body = await read_json_object(request)
    wallet, created = get_engine(request).connect(body.get("address"), body.get("walletType"), body.get("chainId"))
    return ok_response(
        {
            "message": "Wallet connected successfully" if created else "Wallet already connected",
            "wallet": wallet.to_dict(),
        }
    )


async def post_balance(request: Request) -> JSONResponse:
    body = await read_json_object(request)
    wallet = get_engine(request).get_balance(body.get("address"))
    return ok_response({"balance": format_balance(wallet.balance), "address": wallet.address})


async def post_estimate_gas(request: Request) -> JSONResponse:
    body = await read_json_object(request)
    # from/to are accepted for compatibility; the simulated fee ignores them.
    quote = get_engine(request).estimate_gas(body.get("amount"), body.get("cryptoType"))
    return ok_response(quote.to_dict())


async def post_send(request: Request) -> JSONResponse:
    body = await read_json_object(request)
    result = get_engine(request).send(
        body.get("from"),
        body.get("to"),
        body.get("amount"),
        body.get("cryptoType"),
        body.get("gasFee"),
    )
    return ok_response(
        {
            "message": "Transaction sent successfully",
            "transaction": result.transaction.to_dict(),
            "newBalance": format_balance(result.wallet.balance),
        }
    )

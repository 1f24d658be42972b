"""HTTP server for the wallet mock.

Builds the ledger engine once per application and exposes it on
`app.state.engine`. Domain errors map to their HTTP status; anything else is
caught by the guard middleware and returned as a stable 500 body.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from . import __version__
from .auth import AdminAuthGate
from .config import Settings
from .engine import WalletLedgerEngine
from .errors import UNEXPECTED_ERROR, WalletMockError, error_from_exception
from .gas import GasEstimator
from .headers import REQUEST_ID, build_request_context
from .oracle import BalanceOracle
from .responses import fail_response, ok
from .routes import register_routes
from .state import TransactionLedger, WalletRegistry


log = logging.getLogger("wallet_mock.server")


def build_engine(settings: Settings, *, oracle: BalanceOracle | None = None) -> WalletLedgerEngine:
    oracle = oracle or BalanceOracle()
    return WalletLedgerEngine(
        registry=WalletRegistry(oracle, default_chain_id=settings.default_chain_id),
        ledger=TransactionLedger(),
        oracle=oracle,
        gas=GasEstimator(settings.gas_price_gwei),
        auth=AdminAuthGate(settings.admin_password, token_ttl=settings.token_ttl),
    )


def create_app(settings: Settings | None = None, *, oracle: BalanceOracle | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    if settings.uses_default_password:
        log.warning("Admin password is the built-in default; set WALLET_MOCK_ADMIN_PASSWORD")

    app = FastAPI(
        title="Wallet Mock Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings  # type: ignore[attr-defined]
    app.state.engine = build_engine(settings, oracle=oracle)  # type: ignore[attr-defined]

    # Browser wallet UIs are usually served from another origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    @app.exception_handler(WalletMockError)
    async def _domain_error(request: Request, exc: WalletMockError) -> JSONResponse:
        ctx = getattr(request.state, "ctx", None)
        log.info(
            "%s %s -> %d %s (request_id=%s)",
            request.method,
            request.url.path,
            exc.status_code,
            exc.error_code.code,
            ctx.request_id if ctx is not None else "-",
        )
        return fail_response(exc)

    @app.middleware("http")
    async def _exception_guard(request: Request, call_next):
        """Ensure unexpected exceptions never escape as framework 500 pages."""

        context = build_request_context(request.headers)
        request.state.ctx = context
        try:
            response: Response = await call_next(request)
        except Exception as exc:  # noqa: BLE001
            log.exception("Unhandled error on %s %s (request_id=%s)", request.method, request.url.path, context.request_id)
            response = JSONResponse(
                error_from_exception(exc, include_details=settings.debug),
                status_code=UNEXPECTED_ERROR.status_code,
            )
        response.headers[REQUEST_ID] = context.request_id
        return response

    @app.get("/healthz")
    async def healthz():
        return ok({"status": "ok"})

    register_routes(app)
    return app


app = create_app()

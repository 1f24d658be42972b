"""Response envelope helpers.

Successful responses carry `success: true` with the payload keys merged into
the top-level object. Failures carry an `error` message plus a stable `code`.
Field names are part of the public contract; clients match on them.
"""

from __future__ import annotations

from typing import Any, Mapping

from fastapi.responses import JSONResponse

from .errors import WalletMockError


JsonObject = dict[str, Any]


def ok(payload: Mapping[str, Any] | None = None) -> JsonObject:
    """Build a successful response body."""

    out: JsonObject = {"success": True}
    if payload:
        out.update(dict(payload))
    return out


def ok_response(payload: Mapping[str, Any] | None = None) -> JSONResponse:
    return JSONResponse(ok(payload), status_code=200)


def fail_response(exc: WalletMockError) -> JSONResponse:
    return JSONResponse(exc.as_error(), status_code=exc.status_code)

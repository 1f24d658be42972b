"""Request handlers and shared request helpers."""

from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from ..engine import WalletLedgerEngine
from ..errors import ValidationError
from ..headers import RequestContext, build_request_context


def request_context(request: Request) -> RequestContext:
    return getattr(request.state, "ctx", None) or build_request_context(request.headers)


def get_engine(request: Request) -> WalletLedgerEngine:
    return request.app.state.engine  # type: ignore[attr-defined]


async def read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object.

    An empty body counts as `{}` so missing fields surface as field-level
    validation errors instead of a parse error.
    """

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise ValidationError("Request body must be valid JSON") from None
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data

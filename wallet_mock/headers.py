"""Header normalization utilities.

Handlers only care about two headers: the admin bearer credential and a
request id used to correlate log lines. Missing request ids are generated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping
from uuid import uuid4


AUTHORIZATION = "Authorization"
REQUEST_ID = "X-Request-Id"


def _lower_map(headers: Mapping[str, str]) -> dict[str, str]:
    return {str(k).lower(): str(v) for k, v in headers.items()}


@dataclass(slots=True)
class RequestContext:
    request_id: str
    authorization: str | None


def build_request_context(headers: Mapping[str, str]) -> RequestContext:
    """Build a RequestContext from incoming headers. Always succeeds."""

    h = _lower_map(headers)
    request_id = h.get(REQUEST_ID.lower(), "").strip() or f"req-{uuid4().hex}"
    authorization = h.get(AUTHORIZATION.lower())
    return RequestContext(request_id=request_id, authorization=authorization)

"""Runtime configuration read from the environment.

All variables share the WALLET_MOCK_ prefix, e.g.:
  WALLET_MOCK_ADMIN_PASSWORD=s3cret WALLET_MOCK_PORT=3000 python -m wallet_mock
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .auth import DEFAULT_TOKEN_TTL_SECONDS
from .gas import DEFAULT_GAS_PRICE_GWEI
from .state import DEFAULT_CHAIN_ID


ENV_PREFIX = "WALLET_MOCK_"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "info"


def _truthy(value: str | None) -> bool:
    v = (value or "").strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(ENV_PREFIX + name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    token_ttl: int = DEFAULT_TOKEN_TTL_SECONDS
    gas_price_gwei: int = DEFAULT_GAS_PRICE_GWEI
    default_chain_id: str = DEFAULT_CHAIN_ID
    debug: bool = False

    @property
    def uses_default_password(self) -> bool:
        return self.admin_password == DEFAULT_ADMIN_PASSWORD

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if env is None else env

        def get(name: str, default: str) -> str:
            return (env.get(ENV_PREFIX + name) or "").strip() or default

        return cls(
            host=get("HOST", DEFAULT_HOST),
            port=_positive_int(env, "PORT", DEFAULT_PORT),
            log_level=get("LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
            admin_password=env.get(ENV_PREFIX + "ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
            token_ttl=_positive_int(env, "TOKEN_TTL", DEFAULT_TOKEN_TTL_SECONDS),
            gas_price_gwei=_positive_int(env, "GAS_PRICE_GWEI", DEFAULT_GAS_PRICE_GWEI),
            default_chain_id=get("DEFAULT_CHAIN", DEFAULT_CHAIN_ID),
            debug=_truthy(env.get(ENV_PREFIX + "DEBUG")),
        )

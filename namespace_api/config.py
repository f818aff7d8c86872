from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_RPC_TIMEOUT = 30.0
DEFAULT_BATCH_SIZE = 5
DEFAULT_BATCH_PAUSE_MS = 100
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class Settings:
    rpc_url: str
    rpc_user: str
    rpc_password: str
    rpc_timeout: float = DEFAULT_RPC_TIMEOUT
    batch_size: int = DEFAULT_BATCH_SIZE
    batch_pause_ms: int = DEFAULT_BATCH_PAUSE_MS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None

    @property
    def batch_pause(self) -> float:
        return self.batch_pause_ms / 1000


def _require(environ: Mapping[str, str], key: str) -> str:
    value = environ.get(key, "").strip()
    if not value:
        raise RuntimeError(f"{key} must be set to reach the currency daemon.")
    return value


def _positive_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{key} must be an integer, got {raw!r}.") from exc
    if value < 0:
        raise RuntimeError(f"{key} must not be negative.")
    return value


def _timeout(environ: Mapping[str, str]) -> float:
    raw = environ.get("NAMESPACE_RPC_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_RPC_TIMEOUT
    try:
        value = float(raw)
    except ValueError as exc:
        raise RuntimeError(
            f"NAMESPACE_RPC_TIMEOUT must be a number, got {raw!r}."
        ) from exc
    if value <= 0:
        raise RuntimeError("NAMESPACE_RPC_TIMEOUT must be positive.")
    return value


def _log_level(environ: Mapping[str, str]) -> str:
    raw = environ.get("NAMESPACE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise RuntimeError(
            f"NAMESPACE_LOG_LEVEL must be a logging level name, got {raw!r}."
        )
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    if environ is None:
        environ = os.environ
    batch_size = _positive_int(environ, "NAMESPACE_BATCH_SIZE", DEFAULT_BATCH_SIZE)
    if batch_size == 0:
        raise RuntimeError("NAMESPACE_BATCH_SIZE must be at least 1.")
    return Settings(
        rpc_url=_require(environ, "NAMESPACE_RPC_URL"),
        rpc_user=_require(environ, "NAMESPACE_RPC_USER"),
        rpc_password=_require(environ, "NAMESPACE_RPC_PASSWORD"),
        rpc_timeout=_timeout(environ),
        batch_size=batch_size,
        batch_pause_ms=_positive_int(
            environ, "NAMESPACE_BATCH_PAUSE_MS", DEFAULT_BATCH_PAUSE_MS
        ),
        log_level=_log_level(environ),
        log_file=environ.get("NAMESPACE_LOG_FILE") or None,
    )

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_PORT = 3001
DEFAULT_LISTENER_URL = "http://localhost:8347"
DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_LOG_DIR = "./logs"


class ConfigError(ValueError):
    pass


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


def _positive_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be greater than zero, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    DASHBOARD_URL: str
    CURSOR_LISTENER_URL: str = DEFAULT_LISTENER_URL
    ENABLE_NGROK: bool = False
    CURSOR_ENABLE_VSCODE: bool = False
    TIMEOUT_SECONDS: float = DEFAULT_TIMEOUT_SECONDS
    CONNECT_TIMEOUT_SECONDS: Optional[float] = None
    LOG_DIR: str = DEFAULT_LOG_DIR
    LOG_LEVEL: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Resolve every recognized option once.

    When no mapping is given, a local .env file is loaded first and the process
    environment is used; variables already set in the environment win.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    port = environ.get("PORT") or str(DEFAULT_PORT)
    if not port.isdigit():
        raise ConfigError(f"PORT must be an integer, got {port!r}")

    dashboard_url = (
        environ.get("DASHBOARD_URL")
        or environ.get("MONITOR_URL")
        or f"http://localhost:{port}"
    )
    listener_url = environ.get("CURSOR_LISTENER_URL") or DEFAULT_LISTENER_URL

    timeout_s = _positive_float(
        environ, "INTEGRATION_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS
    )
    connect_timeout_s = _positive_float(
        environ, "INTEGRATION_CONNECT_TIMEOUT_SECONDS", timeout_s
    )

    return Settings(
        DASHBOARD_URL=dashboard_url.rstrip("/"),
        CURSOR_LISTENER_URL=listener_url.rstrip("/"),
        ENABLE_NGROK=_flag(environ.get("ENABLE_NGROK")),
        CURSOR_ENABLE_VSCODE=_flag(environ.get("CURSOR_ENABLE_VSCODE")),
        TIMEOUT_SECONDS=timeout_s,
        CONNECT_TIMEOUT_SECONDS=connect_timeout_s,
        LOG_DIR=environ.get("INTEGRATION_LOG_DIR") or DEFAULT_LOG_DIR,
        LOG_LEVEL=(environ.get("LOG_LEVEL") or "INFO").upper(),
    )

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class HttpResult:
    ok: bool
    latency_ms: int
    status_code: int | None = None
    payload: Any = None
    error: str | None = None


@dataclass
class CheckResult:
    name: str
    ok: bool
    detail: str
    status_code: int | None = None
    latency_ms: int | None = None

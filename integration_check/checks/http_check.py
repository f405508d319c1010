from __future__ import annotations

import time

import requests

from integration_check.checks.results import HttpResult

JSON_HEADERS = {"Content-Type": "application/json"}


def run_http(
    url: str,
    timeout_s: float,
    connect_timeout_s: float | None = None,
    method: str = "GET",
) -> HttpResult:
    """
    Issue a single request and decode its JSON body.

    Transport errors, timeouts, non-2xx statuses and undecodable bodies all come
    back as ``ok=False`` with ``error`` set; nothing here raises.
    """
    start = time.perf_counter()
    connect_timeout = timeout_s if connect_timeout_s is None else connect_timeout_s
    kwargs = {"timeout": (connect_timeout, timeout_s)}
    if method == "POST":
        kwargs["headers"] = JSON_HEADERS
        kwargs["json"] = {}

    try:
        r = requests.request(method, url, **kwargs)
    except requests.Timeout:
        latency_ms = int((time.perf_counter() - start) * 1000)
        return HttpResult(
            ok=False, latency_ms=latency_ms, error=f"timed out after {timeout_s}s"
        )
    except requests.RequestException as e:
        latency_ms = int((time.perf_counter() - start) * 1000)
        return HttpResult(ok=False, latency_ms=latency_ms, error=str(e))

    latency_ms = int((time.perf_counter() - start) * 1000)
    if not 200 <= r.status_code < 300:
        return HttpResult(
            ok=False,
            latency_ms=latency_ms,
            status_code=r.status_code,
            error=f"HTTP {r.status_code}",
        )

    try:
        payload = r.json()
    except ValueError as e:
        return HttpResult(
            ok=False,
            latency_ms=latency_ms,
            status_code=r.status_code,
            error=f"invalid JSON: {e}",
        )
    return HttpResult(
        ok=True, latency_ms=latency_ms, status_code=r.status_code, payload=payload
    )

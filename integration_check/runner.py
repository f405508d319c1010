from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from integration_check.checks.http_check import run_http
from integration_check.checks.results import CheckResult, HttpResult
from integration_check.config import Settings
from integration_check.formatting import Console
from integration_check.integrations import INTEGRATIONS, Integration
from integration_check.models import StatusPayload, parse_relay_event

logger = logging.getLogger(__name__)


class IntegrationCheckError(RuntimeError):
    pass


class DashboardUnavailableError(IntegrationCheckError):
    pass


@dataclass
class RunReport:
    dashboard_url: str
    components: list[str] = field(default_factory=list)
    webhook_url: str | None = None
    results: list[CheckResult] = field(default_factory=list)


def _request(settings: Settings, url: str, method: str = "GET") -> HttpResult:
    res = run_http(
        url,
        timeout_s=settings.TIMEOUT_SECONDS,
        connect_timeout_s=settings.CONNECT_TIMEOUT_SECONDS,
        method=method,
    )
    logger.debug(
        "%s %s -> ok=%s status=%s latency=%sms error=%s",
        method,
        url,
        res.ok,
        res.status_code,
        res.latency_ms,
        res.error,
    )
    return res


def fetch_status(settings: Settings) -> StatusPayload:
    """GET /status and validate it; raises DashboardUnavailableError on any failure."""
    url = f"{settings.DASHBOARD_URL}/status"
    res = _request(settings, url)
    if not res.ok:
        raise DashboardUnavailableError(
            f"Dashboard not running at {settings.DASHBOARD_URL} ({res.error})"
        )
    try:
        return StatusPayload.model_validate(res.payload)
    except ValidationError as exc:
        raise DashboardUnavailableError(
            f"Dashboard at {settings.DASHBOARD_URL} returned an unexpected status "
            f"payload: {exc.error_count()} validation error(s)"
        ) from exc


def check_dashboard(settings: Settings, console: Console) -> list[str]:
    console.section("dashboard connectivity")
    status = fetch_status(settings)
    names = status.component_names()
    console.success("Dashboard is running")
    console.detail(f"Components detected: {', '.join(names)}")
    return names


def discover_webhook_url(settings: Settings, console: Console) -> str | None:
    try:
        status = fetch_status(settings)
    except DashboardUnavailableError as exc:
        logger.warning("Webhook URL lookup failed: %s", exc)
        console.warn(f"Could not re-read dashboard status: {exc}")
        return None

    url = status.webhook_url("replit")
    if url:
        console.detail(f"Found webhook URL: {url}")
    else:
        console.warn("No ngrok webhook URL found yet - ngrok might still be starting")
    return url


def run_relay_test(
    integration: Integration, settings: Settings, console: Console
) -> CheckResult:
    res = _request(settings, integration.url(settings), method="POST")
    if not res.ok:
        console.error(f"{integration.name} integration test failed")
        console.error_detail(f"Reason: {res.error}")
        return CheckResult(
            name=integration.summary_label,
            ok=False,
            detail=res.error or "failed",
            status_code=res.status_code,
            latency_ms=res.latency_ms,
        )

    detail = integration.describe(parse_relay_event(res.payload))
    console.success(f"{integration.name} integration test successful")
    console.detail(detail)
    return CheckResult(
        name=integration.summary_label,
        ok=True,
        detail=detail,
        status_code=res.status_code,
        latency_ms=res.latency_ms,
    )


def run_checks(
    settings: Settings,
    console: Console,
    integrations: tuple[Integration, ...] = INTEGRATIONS,
) -> RunReport:
    report = RunReport(dashboard_url=settings.DASHBOARD_URL)
    report.components = check_dashboard(settings, console)

    for integration in integrations:
        console.section(integration.heading)

        if integration.feature is not None:
            if integration.feature_enabled(settings):
                console.detail(integration.feature.enabled_line)
                if integration.discovers_webhook:
                    report.webhook_url = discover_webhook_url(settings, console)
            else:
                console.warn(integration.feature.disabled_line)

        report.results.append(run_relay_test(integration, settings, console))

    return report

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from integration_check.config import Settings
from integration_check.models import RelayEvent


@dataclass(frozen=True)
class FeatureSwitch:
    setting: str
    enabled_line: str
    disabled_line: str


@dataclass(frozen=True)
class Integration:
    key: str
    heading: str
    name: str
    summary_label: str
    path: str
    describe: Callable[[RelayEvent], str]
    on_listener: bool = False
    feature: Optional[FeatureSwitch] = None
    discovers_webhook: bool = False

    def url(self, settings: Settings) -> str:
        base = settings.CURSOR_LISTENER_URL if self.on_listener else settings.DASHBOARD_URL
        return f"{base}{self.path}"

    def feature_enabled(self, settings: Settings) -> bool:
        if self.feature is None:
            return True
        return bool(getattr(settings, self.feature.setting))


def _describe_github(ev: RelayEvent) -> str:
    return f"Event: {ev.event or 'workflow_run'} - {ev.action or 'completed'}"


def _describe_replit(ev: RelayEvent) -> str:
    workspace = ev.workspace.name if ev.workspace else None
    return f"Event: {ev.event or 'deploy'} on workspace {workspace or 'test'}"


def _describe_cursor(ev: RelayEvent) -> str:
    return f"Event: {ev.event or 'test'} on file {ev.file or 'test-file.js'}"


INTEGRATIONS: tuple[Integration, ...] = (
    Integration(
        key="github",
        heading="GitHub Actions integration",
        name="GitHub Actions",
        summary_label="GitHub Actions",
        path="/api/github-events/test",
        describe=_describe_github,
    ),
    Integration(
        key="replit",
        heading="Replit integration (ngrok)",
        name="Replit",
        summary_label="Replit (ngrok)",
        path="/api/replit-events/test",
        describe=_describe_replit,
        feature=FeatureSwitch(
            setting="ENABLE_NGROK",
            enabled_line="ngrok is enabled - checking for webhook URL",
            disabled_line="ngrok is not enabled in .env file (ENABLE_NGROK=true)",
        ),
        discovers_webhook=True,
    ),
    Integration(
        key="cursor",
        heading="Cursor integration (VSCode extension)",
        name="Cursor/VSCode",
        summary_label="Cursor (VSCode)",
        path="/api/vscode-events/test",
        describe=_describe_cursor,
        on_listener=True,
        feature=FeatureSwitch(
            setting="CURSOR_ENABLE_VSCODE",
            enabled_line="VSCode extension integration is enabled",
            disabled_line=(
                "VSCode extension integration is not enabled in .env file "
                "(CURSOR_ENABLE_VSCODE=true)"
            ),
        ),
    ),
)

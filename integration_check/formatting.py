from __future__ import annotations

import sys
from typing import TextIO

from integration_check.checks.results import CheckResult

BANNER = "🧪 Testing All Integrations"
RULE = "==========================="
START_HINT = "Make sure the dashboard is running with: npm run start:all"


class Console:
    """Human-readable output. Warnings and errors go to ``err``."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err

    def line(self, text: str = "") -> None:
        print(text, file=self.out)

    def section(self, title: str) -> None:
        self.line()
        self.line(f"🔍 Testing {title}...")

    def detail(self, text: str) -> None:
        self.line(f"   {text}")

    def success(self, text: str) -> None:
        self.line(f"✅ {text}")

    def warn(self, text: str) -> None:
        print(f"⚠️ {text}", file=self.err)

    def error(self, text: str) -> None:
        print(f"❌ {text}", file=self.err)

    def error_detail(self, text: str) -> None:
        print(f"   {text}", file=self.err)


def status_word(ok: bool) -> str:
    return "✅ Connected" if ok else "❌ Failed"


def render_summary(results: list[CheckResult], dashboard_url: str) -> list[str]:
    lines = ["", "📋 Integration Test Summary", RULE]
    lines.extend(f"{r.name}: {status_word(r.ok)}" for r in results)
    lines.append("")
    lines.append(f"🌐 Dashboard URL: {dashboard_url}")
    lines.append("Open this URL in your browser to see the dashboard")
    return lines


def render_fatal(message: str) -> list[str]:
    return ["", f"❌ Error during integration tests: {message}", START_HINT]

import logging
from pathlib import Path
from typing import Mapping, Optional, TextIO

from integration_check.config import ConfigError, Settings, load_settings
from integration_check.formatting import (
    BANNER,
    RULE,
    Console,
    render_fatal,
    render_summary,
)
from integration_check.runner import IntegrationCheckError, run_checks

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def ensure_log_dir(path: str) -> None:
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create logs directory %s: %s", path, exc)


def run(settings: Settings, console: Console) -> int:
    console.line(BANNER)
    console.line(RULE)
    ensure_log_dir(settings.LOG_DIR)

    try:
        report = run_checks(settings, console)
    except IntegrationCheckError as exc:
        logger.debug("Integration run aborted: %s", exc)
        for text in render_fatal(str(exc)):
            print(text, file=console.err)
        return 1
    except Exception as exc:
        logger.exception("Unexpected error during integration tests")
        for text in render_fatal(f"{exc.__class__.__name__}: {exc}"):
            print(text, file=console.err)
        return 1

    for text in render_summary(report.results, report.dashboard_url):
        console.line(text)
    return 0


def main(
    environ: Optional[Mapping[str, str]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    console = Console(out=out, err=err)
    try:
        settings = load_settings(environ)
    except ConfigError as exc:
        for text in render_fatal(f"Invalid configuration: {exc}"):
            print(text, file=console.err)
        return 1

    configure_logging(settings.LOG_LEVEL)
    return run(settings, console)


if __name__ == "__main__":
    raise SystemExit(main())

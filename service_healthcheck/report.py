# service_healthcheck/report.py
"""
Plain-text rendering of health check results.

Every function returns a list of lines; the caller decides where they go
(stdout by default, a list in tests).
"""

from collections.abc import Sequence

from .config import START_HINT
from .models import CheckOutcome, NotRunning, Running, ServiceTarget, TimedOut, is_running


def header_lines(title: str) -> list[str]:
    return [f"🔍 Checking {title}...", ""]


def _label(target: ServiceTarget) -> str:
    return f"{target.name} (Port {target.port})"


def outcome_lines(outcome: CheckOutcome) -> list[str]:
    if isinstance(outcome, Running):
        lines = [f"✅ {_label(outcome.target)} - RUNNING"]
        if outcome.status is not None:
            lines.append(f"   Status: {outcome.status}")
        return lines
    if isinstance(outcome, NotRunning):
        return [f"❌ {_label(outcome.target)} - NOT RUNNING", f"   Error: {outcome.error}"]
    if isinstance(outcome, TimedOut):
        return [f"⏱️  {_label(outcome.target)} - TIMEOUT"]
    raise TypeError(f"unknown outcome type: {type(outcome).__name__}")


def summary_lines(
    outcomes: Sequence[CheckOutcome], targets: Sequence[ServiceTarget]
) -> list[str]:
    """
    Aggregate banner printed once every target has settled.

    Success needs every outcome to be Running. A refused/broken connection
    gets the "not running" wording plus the start hint; a run whose only
    failures are timeouts gets the softer "may not be running".
    """
    if all(is_running(o) for o in outcomes):
        lines = ["", "🎉 All services are running!", "", "📱 Access your application:"]
        lines.extend(f"   {t.name}: {t.access_url}" for t in targets)
        return lines

    if any(isinstance(o, NotRunning) for o in outcomes):
        return ["", "⚠️  Some services are not running.", f"   {START_HINT}"]

    return ["", "⚠️  Some services may not be running."]

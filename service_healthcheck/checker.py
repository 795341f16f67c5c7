# service_healthcheck/checker.py
import asyncio
import logging
from collections.abc import Callable, Iterable

import httpx

from .config import DEFAULT_TARGETS, DEFAULT_TIMEOUT, DEFAULT_TITLE
from .models import CheckOutcome, NotRunning, Running, ServiceTarget, TimedOut, is_running
from .report import header_lines, outcome_lines, summary_lines

_log = logging.getLogger(__name__)


def _body_status(response: httpx.Response) -> str | None:
    """`status` field of a JSON body, "OK" for JSON without one, None otherwise."""
    if not response.content:
        return None
    try:
        data = response.json()
    except ValueError:
        # non-API endpoints (e.g. a frontend) serve HTML
        return None
    status = data.get("status") if isinstance(data, dict) else None
    return str(status) if status else "OK"


class HealthChecker:
    """
    Probe every target once, concurrently, and print a status report.

    Each target gets a single GET bounded by `timeout` seconds from its own
    dispatch. Lines for a target are emitted as soon as it settles; the
    aggregate banner is emitted when the settled count reaches the number of
    targets, so it appears exactly once and always last.
    """

    def __init__(
        self,
        targets: Iterable[ServiceTarget] = DEFAULT_TARGETS,
        timeout: float = DEFAULT_TIMEOUT,
        emit: Callable[[str], None] = print,
        transport: httpx.AsyncBaseTransport | None = None,
        title: str = DEFAULT_TITLE,
    ):
        self.targets = tuple(targets)
        self.timeout = timeout
        self.emit = emit
        self.transport = transport
        self.title = title
        self._settled: list[CheckOutcome] = []
        self._summary_emitted = False

    async def check_target(self, client: httpx.AsyncClient, target: ServiceTarget) -> CheckOutcome:
        _log.debug("GET %s (%s, timeout=%.1fs)", target.url, target.name, self.timeout)
        try:
            response = await asyncio.wait_for(client.get(target.url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            _log.debug("%s timed out after %.1fs", target.name, self.timeout)
            return TimedOut(target=target)
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            _log.debug("%s unreachable: %r", target.name, e)
            return NotRunning(target=target, error=str(e) or type(e).__name__)

        _log.debug("%s answered HTTP %s", target.name, response.status_code)
        return Running(target=target, status=_body_status(response))

    def _emit_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.emit(line)

    def _settle(self, outcome: CheckOutcome) -> None:
        self._emit_lines(outcome_lines(outcome))
        self._settled.append(outcome)
        if len(self._settled) == len(self.targets):
            self._finish()

    def _finish(self) -> None:
        if self._summary_emitted:
            return
        self._summary_emitted = True
        self._emit_lines(summary_lines(self._settled, self.targets))

    async def _probe(self, client: httpx.AsyncClient, target: ServiceTarget) -> CheckOutcome:
        outcome = await self.check_target(client, target)
        self._settle(outcome)
        return outcome

    async def run(self) -> list[CheckOutcome]:
        """Run one round of checks; returns outcomes in target order."""
        self._settled = []
        self._summary_emitted = False
        self._emit_lines(header_lines(self.title))

        if not self.targets:
            self._finish()
            return []

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            tasks = [asyncio.create_task(self._probe(client, t)) for t in self.targets]
            outcomes = await asyncio.gather(*tasks)

        up = sum(1 for o in outcomes if is_running(o))
        _log.debug("%d/%d services running", up, len(outcomes))
        return list(outcomes)


def check_services(targets: Iterable[ServiceTarget] | None = None, **kwargs) -> list[CheckOutcome]:
    """Synchronous entry point: run a `HealthChecker` on a fresh event loop."""
    checker = HealthChecker(DEFAULT_TARGETS if targets is None else targets, **kwargs)
    return asyncio.run(checker.run())

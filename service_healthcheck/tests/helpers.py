# service_healthcheck/tests/helpers.py
import asyncio

import httpx


def port_transport(behaviours: dict[int, str], cancelled: list[int] | None = None) -> httpx.MockTransport:
    """
    MockTransport answering per destination port:
      "running"  -> 200 {"status": "running"}
      "html"     -> 200 text/html
      "refused"  -> ConnectError("[Errno 111] Connection refused")
      "hang"     -> never answers (records the port in `cancelled` once aborted)
    """

    async def handler(request: httpx.Request) -> httpx.Response:
        kind = behaviours[request.url.port]
        if kind == "running":
            return httpx.Response(200, json={"status": "running"})
        if kind == "html":
            return httpx.Response(200, text="<!doctype html><title>app</title>")
        if kind == "refused":
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
        if kind == "hang":
            try:
                await asyncio.sleep(30)
            except asyncio.CancelledError:
                if cancelled is not None:
                    cancelled.append(request.url.port)
                raise
        raise AssertionError(f"unexpected behaviour {kind!r}")

    return httpx.MockTransport(handler)

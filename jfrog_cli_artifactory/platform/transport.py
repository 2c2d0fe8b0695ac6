"""Minimal HTTP transport used by the platform service clients."""

from __future__ import annotations

import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol

from jfrog_cli_artifactory.errors import TransportError

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw body returned by a transport."""

    status: int
    body: bytes

    def text(self) -> str:
        """Return the body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")


class HttpTransport(Protocol):
    """HTTP transport protocol injected into service clients."""

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse: ...


class UrllibTransport:
    """Transport backed by ``urllib.request``."""

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout = timeout

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        """Send one request and return its response, raising on HTTP errors."""
        request = urllib.request.Request(url=url, method=method, data=body, headers=headers)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:  # noqa: S310
                return HttpResponse(status=int(response.status), body=response.read())
        except urllib.error.HTTPError as exc:
            payload = exc.read().decode("utf-8", errors="replace")
            raise TransportError(
                f"{method} {url} failed with status {exc.code}: {payload}",
                status=exc.code,
                body=payload,
            ) from exc
        except urllib.error.URLError as exc:
            raise TransportError(f"{method} {url} failed: {exc.reason}") from exc

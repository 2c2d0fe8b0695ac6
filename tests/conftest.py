"""Shared fakes for platform client and transport tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from jfrog_cli_artifactory.artifactory.repository.params import RepositoryParams
from jfrog_cli_artifactory.config import ServerDetails
from jfrog_cli_artifactory.platform.transport import HttpResponse


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: bytes | None


class FakeTransport:
    """Transport answering from a route table keyed by method and URL suffix."""

    def __init__(self, routes: dict[tuple[str, str], tuple[int, Any]] | None = None) -> None:
        self.routes = dict(routes or {})
        self.requests: list[RecordedRequest] = []

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        self.requests.append(RecordedRequest(method, url, dict(headers), body))
        for (route_method, suffix), (status, payload) in self.routes.items():
            if route_method == method and url.endswith(suffix):
                raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
                return HttpResponse(status=status, body=raw)
        return HttpResponse(status=404, body=b'{"errors": [{"message": "not found"}]}')

    def find(self, method: str, suffix: str) -> RecordedRequest:
        for recorded in self.requests:
            if recorded.method == method and recorded.url.endswith(suffix):
                return recorded
        raise AssertionError(f"no {method} request ending with {suffix}")


@dataclass
class FakeRepositoryClient:
    """In-memory stand-in for the Artifactory repository operations."""

    version: str = "7.110.0"
    created: list[RepositoryParams] = field(default_factory=list)
    updated: list[RepositoryParams] = field(default_factory=list)
    batches: list[tuple[list[dict[str, Any]], bool]] = field(default_factory=list)
    version_calls: int = 0

    def get_version(self) -> str:
        self.version_calls += 1
        return self.version

    def create_repository(self, params: RepositoryParams) -> None:
        self.created.append(params)

    def update_repository(self, params: RepositoryParams) -> None:
        self.updated.append(params)

    def create_update_repositories_in_batch(self, payload: bytes, is_update: bool) -> None:
        self.batches.append((json.loads(payload), is_update))


@pytest.fixture
def server_details() -> ServerDetails:
    return ServerDetails.from_platform_url("https://acme.jfrog.io", access_token="token-123")


@pytest.fixture
def repo_client() -> FakeRepositoryClient:
    return FakeRepositoryClient()


@pytest.fixture
def make_transport() -> type[FakeTransport]:
    return FakeTransport

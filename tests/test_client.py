"""Tests for the platform REST clients."""

from __future__ import annotations

import base64
import json
from typing import Any

import pytest

from jfrog_cli_artifactory.artifactory.repository.params import NpmRemoteRepositoryParams
from jfrog_cli_artifactory.config import ServerDetails
from jfrog_cli_artifactory.errors import TransportError
from jfrog_cli_artifactory.platform.client import ArtifactoryClient, EvidenceClient, MetadataClient


def test_get_version_uses_bearer_token(server_details: Any, make_transport: Any) -> None:
    transport = make_transport({("GET", "api/system/version"): (200, {"version": "7.104.2"})})
    client = ArtifactoryClient(server_details, transport=transport)

    assert client.get_version() == "7.104.2"
    request = transport.requests[0]
    assert request.url == "https://acme.jfrog.io/artifactory/api/system/version"
    assert request.headers["Authorization"] == "Bearer token-123"


def test_basic_auth_header(make_transport: Any) -> None:
    details = ServerDetails.from_platform_url("https://acme.jfrog.io", user="admin", password="pw")
    transport = make_transport({("GET", "api/system/version"): (200, {"version": "7.90.0"})})
    ArtifactoryClient(details, transport=transport).get_version()
    expected = base64.b64encode(b"admin:pw").decode("ascii")
    assert transport.requests[0].headers["Authorization"] == f"Basic {expected}"


def test_error_status_raises_transport_error(server_details: Any, make_transport: Any) -> None:
    transport = make_transport({("GET", "api/system/version"): (500, {"errors": ["boom"]})})
    with pytest.raises(TransportError) as excinfo:
        ArtifactoryClient(server_details, transport=transport).get_version()
    assert excinfo.value.status == 500
    assert "boom" in excinfo.value.body


def test_missing_version_is_an_error(server_details: Any, make_transport: Any) -> None:
    transport = make_transport({("GET", "api/system/version"): (200, {})})
    with pytest.raises(TransportError, match="did not report a version"):
        ArtifactoryClient(server_details, transport=transport).get_version()


def test_create_and_update_repository_methods(server_details: Any, make_transport: Any) -> None:
    transport = make_transport(
        {
            ("PUT", "api/repositories/npm-remote"): (200, b""),
            ("POST", "api/repositories/npm-remote"): (200, b""),
        }
    )
    client = ArtifactoryClient(server_details, transport=transport)
    params = NpmRemoteRepositoryParams(key="npm-remote", url="https://registry.npmjs.org")

    client.create_repository(params)
    client.update_repository(params)

    created, updated = transport.requests
    assert (created.method, updated.method) == ("PUT", "POST")
    body = json.loads(created.body)
    assert body["key"] == "npm-remote"
    assert body["rclass"] == "remote"
    assert body["packageType"] == "npm"
    assert created.headers["Content-Type"] == "application/json"


@pytest.mark.parametrize(("is_update", "method"), [(False, "PUT"), (True, "POST")])
def test_batch_method_follows_update_flag(
    server_details: Any, make_transport: Any, is_update: bool, method: str
) -> None:
    transport = make_transport({(method, "api/v2/repositories/batch"): (200, b"")})
    payload = b'[{"key": "a"}]'
    ArtifactoryClient(server_details, transport=transport).create_update_repositories_in_batch(
        payload, is_update
    )
    assert transport.requests[0].method == method
    assert transport.requests[0].body == payload


def test_build_info_passes_project(server_details: Any, make_transport: Any) -> None:
    transport = make_transport(
        {("GET", "api/build/app/12?project=proj"): (200, {"buildInfo": {"number": "12"}})}
    )
    client = ArtifactoryClient(server_details, transport=transport)
    assert client.get_build_info("app", "12", "proj") == {"buildInfo": {"number": "12"}}


def test_evidence_and_metadata_clients_use_service_urls(
    server_details: Any, make_transport: Any
) -> None:
    transport = make_transport(
        {
            ("POST", "evidence/api/v1/subject/repo/file.bin"): (201, {"id": "x"}),
            ("POST", "metadata/api/v1/query"): (200, {"data": {}}),
        }
    )
    assert EvidenceClient(server_details, transport=transport).upload_evidence(b"{}", "repo/file.bin") == {
        "id": "x"
    }
    assert MetadataClient(server_details, transport=transport).graphql_query("{x}") == {"data": {}}
    assert json.loads(transport.requests[1].body) == {"query": "{x}"}

"""REST clients for the Artifactory, Evidence, and Metadata services."""

from __future__ import annotations

import base64
import json
import urllib.parse
from typing import TYPE_CHECKING, Any

from jfrog_cli_artifactory.config import ServerDetails
from jfrog_cli_artifactory.errors import TransportError
from jfrog_cli_artifactory.logging_utils import get_logger
from jfrog_cli_artifactory.platform.transport import HttpTransport, UrllibTransport

if TYPE_CHECKING:
    from jfrog_cli_artifactory.artifactory.repository.params import RepositoryParams

LOGGER = get_logger()

_USER_AGENT = "jfrog-cli-artifactory-python"


class _ServiceClient:
    """Shared request plumbing for one platform service."""

    def __init__(
        self,
        base_url: str,
        details: ServerDetails,
        *,
        transport: HttpTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.details = details
        self.transport: HttpTransport = transport or UrllibTransport()

    def _headers(self, content_type: str | None) -> dict[str, str]:
        headers = {"User-Agent": _USER_AGENT, "Accept": "application/json"}
        if self.details.access_token:
            headers["Authorization"] = f"Bearer {self.details.access_token}"
        elif self.details.uses_basic_auth:
            raw = f"{self.details.user}:{self.details.password}".encode()
            headers["Authorization"] = f"Basic {base64.b64encode(raw).decode('ascii')}"
        if content_type is not None:
            headers["Content-Type"] = content_type
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> bytes:
        url = f"{self.base_url}{path}"
        LOGGER.debug("Sending %s %s", method, url)
        response = self.transport.request(
            method, url, headers=self._headers(content_type), body=body
        )
        if response.status >= 400:
            raise TransportError(
                f"{method} {url} failed with status {response.status}: {response.text()}",
                status=response.status,
                body=response.text(),
            )
        return response.body

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> Any:
        raw = self._request(method, path, body=body, content_type=content_type)
        if not raw:
            return {}
        try:
            return json.loads(raw.decode("utf-8"))
        except json.JSONDecodeError as exc:
            raise TransportError(f"{method} {path} returned a non-JSON body.") from exc


class ArtifactoryClient(_ServiceClient):
    """Artifactory REST operations used by repository and evidence commands."""

    def __init__(self, details: ServerDetails, *, transport: HttpTransport | None = None) -> None:
        super().__init__(details.artifactory_url, details, transport=transport)

    def get_version(self) -> str:
        """Return the version string reported by Artifactory."""
        payload = self._request_json("GET", "api/system/version")
        version = payload.get("version") if isinstance(payload, dict) else None
        if not isinstance(version, str) or not version:
            raise TransportError("Artifactory did not report a version.")
        return version

    def create_repository(self, params: RepositoryParams) -> None:
        """Create one repository from typed parameters."""
        self._send_repository("PUT", params)
        LOGGER.info("Repository '%s' created.", params.key)

    def update_repository(self, params: RepositoryParams) -> None:
        """Update one repository from typed parameters."""
        self._send_repository("POST", params)
        LOGGER.info("Repository '%s' updated.", params.key)

    def _send_repository(self, method: str, params: RepositoryParams) -> None:
        body = json.dumps(params.to_dict()).encode("utf-8")
        self._request(
            method,
            f"api/repositories/{_quote(params.key)}",
            body=body,
            content_type="application/json",
        )

    def create_update_repositories_in_batch(self, payload: bytes, is_update: bool) -> None:
        """Create or update several repositories with one batch request."""
        method = "POST" if is_update else "PUT"
        self._request(
            method,
            "api/v2/repositories/batch",
            body=payload,
            content_type="application/json",
        )

    def get_repository(self, repo_key: str) -> dict[str, Any]:
        """Return the configuration of one repository."""
        payload = self._request_json("GET", f"api/repositories/{_quote(repo_key)}")
        return payload if isinstance(payload, dict) else {}

    def get_file_info(self, path: str) -> dict[str, Any]:
        """Return storage info (including checksums) for one artifact path."""
        payload = self._request_json("GET", f"api/storage/{_quote(path)}")
        return payload if isinstance(payload, dict) else {}

    def get_build_info(
        self, build_name: str, build_number: str, project: str | None = None
    ) -> dict[str, Any]:
        """Return the published build info for a build run."""
        path = f"api/build/{_quote(build_name)}/{_quote(build_number)}"
        if project:
            path = f"{path}?{urllib.parse.urlencode({'project': project})}"
        payload = self._request_json("GET", path)
        return payload if isinstance(payload, dict) else {}


class EvidenceClient(_ServiceClient):
    """Evidence service operations."""

    def __init__(self, details: ServerDetails, *, transport: HttpTransport | None = None) -> None:
        super().__init__(details.evidence_url, details, transport=transport)

    def upload_evidence(self, envelope: bytes, subject_path: str) -> dict[str, Any]:
        """Attach a signed envelope to the subject at ``subject_path``."""
        payload = self._request_json(
            "POST",
            f"api/v1/subject/{_quote(subject_path)}",
            body=envelope,
            content_type="application/json",
        )
        return payload if isinstance(payload, dict) else {}


class MetadataClient(_ServiceClient):
    """Metadata service GraphQL operations."""

    def __init__(self, details: ServerDetails, *, transport: HttpTransport | None = None) -> None:
        super().__init__(details.metadata_url, details, transport=transport)

    def graphql_query(self, query: str) -> dict[str, Any]:
        """Run one GraphQL query and return the decoded response."""
        body = json.dumps({"query": query}).encode("utf-8")
        payload = self._request_json(
            "POST", "api/v1/query", body=body, content_type="application/json"
        )
        return payload if isinstance(payload, dict) else {}


def _quote(path: str) -> str:
    return urllib.parse.quote(path, safe="/")

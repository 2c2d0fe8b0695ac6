"""Evidence creation for repository paths, release bundles, builds, and packages."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from jfrog_cli_artifactory.config import ServerDetails
from jfrog_cli_artifactory.errors import ValidationError
from jfrog_cli_artifactory.evidence.envelope import build_statement, sign_envelope
from jfrog_cli_artifactory.evidence.keys import load_key_content, read_private_key
from jfrog_cli_artifactory.evidence.subject import (
    BUILD_NAME,
    BUILD_NUMBER,
    PACKAGE_NAME,
    RELEASE_BUNDLE,
    SUBJECT_REPO_PATH,
    EvidenceSubject,
)
from jfrog_cli_artifactory.lifecycle.common import (
    ReleaseBundleDetails,
    validate_artifactory_version_supported,
    validate_feature_supported_version,
)
from jfrog_cli_artifactory.logging_utils import get_logger
from jfrog_cli_artifactory.platform.client import ArtifactoryClient, EvidenceClient, MetadataClient
from jfrog_cli_artifactory.platform.transport import HttpTransport
from jfrog_cli_artifactory.platform.version import MIN_MULTI_SOURCE_AND_PACKAGES_VERSION

LOGGER = get_logger()

SIGNING_KEY_ENV = "JFROG_CLI_SIGNING_KEY"
KEY_ALIAS_ENV = "JFROG_CLI_KEY_ALIAS"

BUILD_STARTED_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True)
class CreateEvidenceOptions:
    """Validated inputs shared by every create-evidence subject."""

    predicate_path: Path
    predicate_type: str
    key: str
    key_alias: str | None = None
    markdown_path: Path | None = None


def validate_create_evidence_context(
    *,
    predicate: str | None,
    predicate_type: str | None,
    key: str | None,
    key_alias: str | None,
    markdown: str | None,
    environ: Mapping[str, str],
) -> CreateEvidenceOptions:
    """Check mandatory inputs and apply the signing-key environment fallbacks."""
    if not predicate:
        raise ValidationError(
            "'predicate' is a mandatory field for creating evidence: --predicate"
        )
    if not predicate_type:
        raise ValidationError(
            "'predicate-type' is a mandatory field for creating evidence: --predicate-type"
        )
    resolved_key = key or environ.get(SIGNING_KEY_ENV, "")
    if not resolved_key:
        raise ValidationError(
            f"{SIGNING_KEY_ENV} env variable or --key flag must be provided when creating evidence"
        )
    resolved_alias = key_alias or environ.get(KEY_ALIAS_ENV) or None
    return CreateEvidenceOptions(
        predicate_path=Path(predicate),
        predicate_type=predicate_type,
        key=resolved_key,
        key_alias=resolved_alias,
        markdown_path=Path(markdown) if markdown else None,
    )


def evidence_server_details(
    url: str | None,
    *,
    access_token: str | None = None,
    user: str | None = None,
    password: str | None = None,
) -> ServerDetails:
    """Build server details for evidence commands from the platform URL."""
    if not url:
        raise ValidationError("platform URL is mandatory for evidence commands")
    details = ServerDetails.from_platform_url(
        url, access_token=access_token, user=user, password=password
    )
    if details.uses_basic_auth:
        raise ValidationError("evidence service does not support basic authentication")
    return details


class CreateEvidenceBase(ABC):
    """Shared envelope creation and upload for all evidence subjects."""

    def __init__(
        self,
        details: ServerDetails,
        options: CreateEvidenceOptions,
        *,
        transport: HttpTransport | None = None,
    ) -> None:
        self.details = details
        self.options = options
        self.transport = transport
        self.artifactory = ArtifactoryClient(details, transport=transport)
        self.evidence = EvidenceClient(details, transport=transport)

    @abstractmethod
    def build_subject(self) -> tuple[str, str]:
        """Return the subject repository path and its sha256 checksum."""

    def run(self) -> dict[str, Any]:
        subject_path, sha256 = self.build_subject()
        envelope = self.create_envelope(subject_path, sha256)
        response = self.upload_evidence(envelope, subject_path)
        LOGGER.info("Evidence successfully created for %s", subject_path)
        return response

    def create_envelope(self, subject_path: str, sha256: str) -> bytes:
        predicate = self._read_predicate()
        markdown = self._read_markdown()
        key = read_private_key(load_key_content(self.options.key))
        statement = build_statement(
            sha256, self.options.predicate_type, predicate, markdown=markdown
        )
        LOGGER.debug("Signing evidence statement for %s", subject_path)
        envelope = sign_envelope(statement, key, key_id=self.options.key_alias)
        return json.dumps(envelope).encode("utf-8")

    def upload_evidence(self, envelope: bytes, subject_path: str) -> dict[str, Any]:
        return self.evidence.upload_evidence(envelope, subject_path)

    def get_file_checksum(self, path: str) -> str:
        """Return the sha256 checksum Artifactory stores for ``path``."""
        info = self.artifactory.get_file_info(path)
        checksums = info.get("checksums")
        sha256 = checksums.get("sha256") if isinstance(checksums, dict) else None
        if not isinstance(sha256, str) or not sha256:
            raise ValidationError(f"no sha256 checksum found for {path}")
        return sha256

    def _read_predicate(self) -> Any:
        try:
            raw = self.options.predicate_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ValidationError(
                f"failed to read predicate file {self.options.predicate_path}: {exc}"
            ) from exc
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"predicate file is not valid JSON: {exc}") from exc

    def _read_markdown(self) -> str | None:
        path = self.options.markdown_path
        if path is None:
            return None
        if path.suffix.lower() != ".md":
            raise ValidationError("file type for markdown must be .md")
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ValidationError(f"failed to read markdown file {path}: {exc}") from exc


class CreateEvidenceCustom(CreateEvidenceBase):
    """Evidence on an arbitrary artifact path."""

    def __init__(
        self,
        details: ServerDetails,
        options: CreateEvidenceOptions,
        repo_path: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(details, options, **kwargs)
        self.repo_path = repo_path

    def build_subject(self) -> tuple[str, str]:
        return self.repo_path, self.get_file_checksum(self.repo_path)


class CreateEvidenceReleaseBundle(CreateEvidenceBase):
    """Evidence on a release bundle manifest."""

    def __init__(
        self,
        details: ServerDetails,
        options: CreateEvidenceOptions,
        *,
        project: str | None,
        release_bundle: str,
        release_bundle_version: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(details, options, **kwargs)
        self.bundle = ReleaseBundleDetails(
            name=release_bundle, version=release_bundle_version, project_key=project
        )

    def build_subject(self) -> tuple[str, str]:
        if not self.bundle.version:
            raise ValidationError("the --release-bundle-version option is mandatory")
        validate_artifactory_version_supported(self.artifactory)
        manifest_path = self.bundle.manifest_path
        return manifest_path, self.get_file_checksum(manifest_path)


def build_info_repo_key(project: str | None) -> str:
    """Return the build-info repository key for a project."""
    return f"{project or 'artifactory'}-build-info"


def build_started_millis(started: str) -> int:
    """Convert a build-info ``started`` timestamp to epoch milliseconds."""
    try:
        parsed = datetime.strptime(started, BUILD_STARTED_FORMAT)
    except ValueError as exc:
        raise ValidationError(f"unexpected build start time format: {started}") from exc
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


class CreateEvidenceBuild(CreateEvidenceBase):
    """Evidence on a published build-info JSON."""

    def __init__(
        self,
        details: ServerDetails,
        options: CreateEvidenceOptions,
        *,
        project: str | None,
        build_name: str,
        build_number: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(details, options, **kwargs)
        self.project = project
        self.build_name = build_name
        self.build_number = build_number

    def build_subject(self) -> tuple[str, str]:
        payload = self.artifactory.get_build_info(self.build_name, self.build_number, self.project)
        build_info = payload.get("buildInfo")
        started = build_info.get("started") if isinstance(build_info, dict) else None
        if not isinstance(started, str):
            raise ValidationError(
                f"build {self.build_name}/{self.build_number} was not found"
            )
        millis = build_started_millis(started)
        path = (
            f"{build_info_repo_key(self.project)}/{self.build_name}/"
            f"{self.build_number}-{millis}.json"
        )
        return path, self.get_file_checksum(path)


def package_versions_query(package_type: str, name: str, version: str, repo: str) -> str:
    """Return the metadata GraphQL query locating a package version's lead file."""
    return (
        "{versions(filter:{"
        f'packageId:"{package_type}://{name}", name:"{version}", '
        f'repositoriesIn:[{{name:"{repo}"}}]'
        "}){edges{node{repos{name leadFilePath}}}}}"
    )


def find_lead_file_path(response: Mapping[str, Any], repo: str) -> str | None:
    """Return the lead file path of ``repo`` from a versions query response."""
    data = response.get("data")
    versions = data.get("versions") if isinstance(data, dict) else None
    edges = versions.get("edges") if isinstance(versions, dict) else None
    for edge in edges or []:
        node = edge.get("node") if isinstance(edge, dict) else None
        for entry in (node or {}).get("repos") or []:
            if isinstance(entry, dict) and entry.get("name") == repo and entry.get("leadFilePath"):
                return str(entry["leadFilePath"])
    return None


class CreateEvidencePackage(CreateEvidenceBase):
    """Evidence on a package version's lead artifact."""

    def __init__(
        self,
        details: ServerDetails,
        options: CreateEvidenceOptions,
        *,
        package_name: str,
        package_version: str,
        package_repo_name: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(details, options, **kwargs)
        self.package_name = package_name
        self.package_version = package_version
        self.package_repo_name = package_repo_name
        self.metadata = MetadataClient(details, transport=self.transport)

    def build_subject(self) -> tuple[str, str]:
        if not self.package_version or not self.package_repo_name:
            raise ValidationError(
                "the --package-version and --package-repo-name options are mandatory"
            )
        validate_feature_supported_version(
            self.artifactory, MIN_MULTI_SOURCE_AND_PACKAGES_VERSION, feature="package evidence"
        )
        package_type = self.artifactory.get_repository(self.package_repo_name).get("packageType")
        if not isinstance(package_type, str) or not package_type:
            raise ValidationError(
                f"could not resolve the package type of repository {self.package_repo_name}"
            )
        query = package_versions_query(
            package_type.lower(), self.package_name, self.package_version, self.package_repo_name
        )
        lead_file = find_lead_file_path(self.metadata.graphql_query(query), self.package_repo_name)
        if lead_file is None:
            raise ValidationError(
                f"package {self.package_name}:{self.package_version} was not found "
                f"in repository {self.package_repo_name}"
            )
        path = f"{self.package_repo_name}/{lead_file.lstrip('/')}"
        return path, self.get_file_checksum(path)


def new_create_evidence_command(
    subject: EvidenceSubject,
    details: ServerDetails,
    options: CreateEvidenceOptions,
    *,
    project: str | None = None,
    transport: HttpTransport | None = None,
) -> CreateEvidenceBase:
    """Return the create command for a resolved subject."""
    if subject.kind == SUBJECT_REPO_PATH:
        return CreateEvidenceCustom(
            details, options, subject.value(SUBJECT_REPO_PATH), transport=transport
        )
    if subject.kind == RELEASE_BUNDLE:
        return CreateEvidenceReleaseBundle(
            details,
            options,
            project=project,
            release_bundle=subject.value(RELEASE_BUNDLE),
            release_bundle_version=subject.value("release-bundle-version"),
            transport=transport,
        )
    if subject.kind == BUILD_NAME:
        return CreateEvidenceBuild(
            details,
            options,
            project=project,
            build_name=subject.value(BUILD_NAME),
            build_number=subject.value(BUILD_NUMBER),
            transport=transport,
        )
    if subject.kind == PACKAGE_NAME:
        return CreateEvidencePackage(
            details,
            options,
            package_name=subject.value(PACKAGE_NAME),
            package_version=subject.value("package-version"),
            package_repo_name=subject.value("package-repo-name"),
            transport=transport,
        )
    raise ValidationError("unsupported subject")

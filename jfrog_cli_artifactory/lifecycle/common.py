"""Release-bundle path helpers and shared lifecycle prerequisites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from jfrog_cli_artifactory.errors import UnsupportedVersionError
from jfrog_cli_artifactory.platform.version import (
    MINIMAL_LIFECYCLE_ARTIFACTORY_VERSION,
    is_at_least,
)

RELEASE_BUNDLES_V2 = "release-bundles-v2"
RELEASE_BUNDLE_MANIFEST_NAME = "release-bundle.json.evd"
DEFAULT_PROJECT = "default"


class VersionedClient(Protocol):
    def get_version(self) -> str: ...


def build_repo_key(project: str | None) -> str:
    """Return the release-bundles repository key for a project."""
    if not project or project == DEFAULT_PROJECT:
        return RELEASE_BUNDLES_V2
    return f"{project}-{RELEASE_BUNDLES_V2}"


def build_manifest_path(project: str | None, name: str, version: str) -> str:
    """Return the repository path of a release bundle's manifest."""
    return f"{build_repo_key(project)}/{name}/{version}/{RELEASE_BUNDLE_MANIFEST_NAME}"


@dataclass(frozen=True)
class ReleaseBundleDetails:
    """Name and version identifying a release bundle inside a project."""

    name: str
    version: str
    project_key: str | None = None

    @property
    def manifest_path(self) -> str:
        return build_manifest_path(self.project_key, self.name, self.version)


def validate_feature_supported_version(
    client: VersionedClient, min_version: str, *, feature: str = "this operation"
) -> None:
    """Raise ``UnsupportedVersionError`` if Artifactory is older than ``min_version``."""
    actual = client.get_version()
    if not is_at_least(actual, min_version):
        raise UnsupportedVersionError(feature, min_version, actual)


def validate_artifactory_version_supported(client: VersionedClient) -> None:
    """Check that Artifactory supports release bundles v2."""
    validate_feature_supported_version(
        client, MINIMAL_LIFECYCLE_ARTIFACTORY_VERSION, feature="release bundles v2"
    )

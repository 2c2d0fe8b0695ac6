"""Typed repository parameters, one dataclass per repository class and package type.

Each dataclass mirrors the platform's repository configuration schema for one
``(rclass, packageType)`` pair. Attributes are snake_case and serialize with the
platform's camelCase JSON names; a few names that do not camel-case cleanly carry
an explicit ``json`` alias in their field metadata.

Decoding is lenient about unknown JSON keys and strict about value types: a
string where a boolean is expected, or a boolean where an integer is expected,
fails the decode.
"""

from __future__ import annotations

import dataclasses
import functools
import json
import types
import typing
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

from jfrog_cli_artifactory.artifactory.repository.fields import (
    ALPINE,
    BOWER,
    CARGO,
    CHEF,
    COCOAPODS,
    COMPOSER,
    CONAN,
    CONDA,
    CRAN,
    DEBIAN,
    DOCKER,
    FEDERATED,
    GEMS,
    GENERIC,
    GITLFS,
    GO,
    GRADLE,
    HELM,
    IVY,
    LOCAL,
    MAVEN,
    NPM,
    NUGET,
    OPKG,
    P2,
    PUPPET,
    PYPI,
    REMOTE,
    RPM,
    SBT,
    SWIFT,
    TERRAFORM,
    VAGRANT,
    VCS,
    VIRTUAL,
    YUM,
)

T = TypeVar("T", bound="JsonModel")


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _alias(json_name: str) -> Any:
    return field(default=None, metadata={"json": json_name})


class JsonModel:
    """Mixin giving dataclasses strict camelCase JSON decoding and encoding."""

    @classmethod
    @functools.cache
    def _field_specs(cls) -> tuple[tuple[str, str, Any], ...]:
        hints = typing.get_type_hints(cls)
        specs = []
        for item in dataclasses.fields(cls):  # type: ignore[arg-type]
            json_name = item.metadata.get("json", _camel_case(item.name))
            specs.append((item.name, json_name, hints[item.name]))
        return tuple(specs)

    @classmethod
    def from_dict(cls: type[T], data: Any) -> T:
        """Build an instance from decoded JSON, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}.")
        kwargs: dict[str, Any] = {}
        for attr, json_name, hint in cls._field_specs():
            if json_name in data:
                kwargs[attr] = _decode_value(data[json_name], hint, json_name)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting unset fields."""
        payload: dict[str, Any] = {}
        for attr, json_name, _ in self._field_specs():
            value = getattr(self, attr)
            if value is not None:
                payload[json_name] = _encode_value(value)
        return payload


def _decode_value(value: Any, hint: Any, name: str) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        candidates = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(candidates) != 1:
            raise TypeError(f"Unsupported annotation for '{name}'.")
        return _decode_value(value, candidates[0], name)
    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"'{name}' must be a JSON array.")
        (item_hint,) = typing.get_args(hint)
        return [_decode_value(item, item_hint, f"{name}[{i}]") for i, item in enumerate(value)]
    if isinstance(hint, type) and issubclass(hint, JsonModel):
        return hint.from_dict(value)
    if hint is bool:
        if not isinstance(value, bool):
            raise TypeError(f"'{name}' must be a boolean, got {value!r}.")
        return value
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"'{name}' must be an integer, got {value!r}.")
        return value
    if hint is str:
        if not isinstance(value, str):
            raise TypeError(f"'{name}' must be a string, got {value!r}.")
        return value
    raise TypeError(f"Unsupported annotation for '{name}'.")


def _encode_value(value: Any) -> Any:
    if isinstance(value, JsonModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    return value


@dataclass
class ContentSynchronisationStatistics(JsonModel):
    enabled: bool | None = None


@dataclass
class ContentSynchronisationProperties(JsonModel):
    enabled: bool | None = None


@dataclass
class ContentSynchronisationSource(JsonModel):
    origin_absence_detection: bool | None = None


@dataclass
class ContentSynchronisation(JsonModel):
    """Smart remote repository content synchronisation settings."""

    enabled: bool | None = None
    statistics: ContentSynchronisationStatistics | None = None
    properties: ContentSynchronisationProperties | None = None
    source: ContentSynchronisationSource | None = None

    @classmethod
    def from_flags(
        cls,
        enabled: bool,
        statistics_enabled: bool,
        properties_enabled: bool,
        origin_absence_detection: bool,
    ) -> ContentSynchronisation:
        """Build settings from the four flags of the template tuple."""
        return cls(
            enabled=enabled,
            statistics=ContentSynchronisationStatistics(enabled=statistics_enabled),
            properties=ContentSynchronisationProperties(enabled=properties_enabled),
            source=ContentSynchronisationSource(origin_absence_detection=origin_absence_detection),
        )


@dataclass
class FederatedRepositoryMember(JsonModel):
    url: str | None = None
    enabled: bool | None = None


# Base parameters per repository class


@dataclass
class RepositoryParams(JsonModel):
    """Fields shared by every repository class."""

    RCLASS: ClassVar[str] = ""
    PACKAGE_TYPE: ClassVar[str] = ""

    key: str = ""
    rclass: str | None = None
    package_type: str | None = None
    description: str | None = None
    notes: str | None = None
    includes_pattern: str | None = None
    excludes_pattern: str | None = None
    repo_layout_ref: str | None = None
    project_key: str | None = None
    environments: list[str] | None = None

    def __post_init__(self) -> None:
        if self.rclass is None:
            self.rclass = self.RCLASS or None
        if self.package_type is None:
            self.package_type = self.PACKAGE_TYPE or None

    @classmethod
    def from_json(cls: type[T], payload: bytes | str) -> T:
        """Decode a JSON document into typed parameters."""
        return cls.from_dict(json.loads(payload))


@dataclass
class AdditionalRepositoryFields:
    blacked_out: bool | None = None
    xray_index: bool | None = None
    property_sets: list[str] | None = None
    download_redirect: bool | None = None
    priority_resolution: bool | None = None
    cdn_redirect: bool | None = None


@dataclass
class LocalRepositoryBaseParams(AdditionalRepositoryFields, RepositoryParams):
    RCLASS: ClassVar[str] = LOCAL

    archive_browsing_enabled: bool | None = None


@dataclass
class RemoteRepositoryBaseParams(AdditionalRepositoryFields, RepositoryParams):
    RCLASS: ClassVar[str] = REMOTE

    url: str | None = None
    username: str | None = None
    password: str | None = None
    proxy: str | None = None
    disable_proxy: bool | None = None
    hard_fail: bool | None = None
    offline: bool | None = None
    store_artifacts_locally: bool | None = None
    socket_timeout_millis: int | None = None
    local_address: str | None = None
    retrieval_cache_period_secs: int | None = None
    failed_retrieval_cache_period_secs: int | None = None
    missed_retrieval_cache_period_secs: int | None = None
    unused_artifacts_cleanup_enabled: bool | None = None
    unused_artifacts_cleanup_period_hours: int | None = None
    assumed_offline_period_secs: int | None = None
    share_configuration: bool | None = None
    synchronize_properties: bool | None = None
    block_mismatching_mime_types: bool | None = None
    allow_any_host_auth: bool | None = None
    enable_cookie_management: bool | None = None
    bypass_head_requests: bool | None = None
    client_tls_certificate: str | None = None
    content_synchronisation: ContentSynchronisation | None = None
    list_remote_folder_items: bool | None = None
    archive_browsing_enabled: bool | None = None
    disable_url_normalization: bool | None = None


@dataclass
class VirtualRepositoryBaseParams(RepositoryParams):
    RCLASS: ClassVar[str] = VIRTUAL

    repositories: list[str] | None = None
    artifactory_requests_can_retrieve_remote_artifacts: bool | None = None
    default_deployment_repo: str | None = None


@dataclass
class FederatedRepositoryBaseParams(LocalRepositoryBaseParams):
    RCLASS: ClassVar[str] = FEDERATED

    members: list[FederatedRepositoryMember] | None = None


# Package-type field groups


@dataclass
class MavenGradleLocalFields:
    max_unique_snapshots: int | None = None
    handle_releases: bool | None = None
    handle_snapshots: bool | None = None
    suppress_pom_consistency_checks: bool | None = None
    snapshot_version_behavior: str | None = None
    checksum_policy_type: str | None = None


@dataclass
class JavaRemoteFields:
    fetch_jars_eagerly: bool | None = None
    fetch_sources_eagerly: bool | None = None
    remote_repo_checksum_policy_type: str | None = None
    max_unique_snapshots: int | None = None
    suppress_pom_consistency_checks: bool | None = None
    handle_releases: bool | None = None
    handle_snapshots: bool | None = None
    reject_invalid_jars: bool | None = None


@dataclass
class MavenVirtualFields:
    key_pair: str | None = None
    pom_repository_references_cleanup_policy: str | None = None
    force_maven_authentication: bool | None = None


@dataclass
class DockerLocalFields:
    max_unique_tags: int | None = None
    docker_api_version: str | None = None
    block_pushing_schema1: bool | None = None


@dataclass
class DockerRemoteFields:
    max_unique_tags: int | None = None
    block_pushing_schema1: bool | None = None
    external_dependencies_enabled: bool | None = None
    external_dependencies_patterns: list[str] | None = None
    enable_token_authentication: bool | None = None


@dataclass
class DebianLocalFields:
    debian_trivial_layout: bool | None = None
    optional_index_compression_formats: list[str] | None = None


@dataclass
class DebianVirtualFields:
    debian_default_architectures: str | None = None
    optional_index_compression_formats: list[str] | None = None


@dataclass
class RpmLocalFields:
    yum_root_depth: int | None = None
    calculate_yum_metadata: bool | None = None
    enable_file_lists_indexing: bool | None = None


@dataclass
class NugetLocalFields:
    max_unique_snapshots: int | None = None
    force_nuget_authentication: bool | None = None


@dataclass
class NugetRemoteFields:
    feed_context_path: str | None = None
    download_context_path: str | None = None
    v3_feed_url: str | None = None
    force_nuget_authentication: bool | None = None


@dataclass
class NugetVirtualFields:
    force_nuget_authentication: bool | None = None


@dataclass
class VcsGitFields:
    vcs_type: str | None = None
    vcs_git_provider: str | None = None
    vcs_git_download_url: str | None = None


@dataclass
class BowerRemoteFields(VcsGitFields):
    bower_registry_url: str | None = None


@dataclass
class CocoapodsRemoteFields(VcsGitFields):
    pods_specs_repo_url: str | None = None


@dataclass
class ComposerRemoteFields(VcsGitFields):
    composer_registry_url: str | None = None


@dataclass
class VcsRemoteFields(VcsGitFields):
    max_unique_snapshots: int | None = None


@dataclass
class GoRemoteFields:
    vcs_git_provider: str | None = None


@dataclass
class PypiRemoteFields:
    pypi_registry_url: str | None = _alias("pyPIRegistryUrl")
    pypi_repository_suffix: str | None = _alias("pyPIRepositorySuffix")


@dataclass
class HelmRemoteFields:
    charts_base_url: str | None = None


@dataclass
class CargoLocalFields:
    cargo_anonymous_access: bool | None = None
    cargo_internal_index: bool | None = None


@dataclass
class CargoRemoteFields:
    git_registry_url: str | None = None
    cargo_anonymous_access: bool | None = None


@dataclass
class TerraformLocalFields:
    terraform_type: str | None = None


@dataclass
class TerraformRemoteFields:
    terraform_registry_url: str | None = None
    terraform_providers_url: str | None = None


@dataclass
class ExternalDependenciesVirtualFields:
    external_dependencies_enabled: bool | None = None
    external_dependencies_patterns: list[str] | None = None
    external_dependencies_remote_repo: str | None = None


@dataclass
class VirtualRetrievalCacheFields:
    virtual_retrieval_cache_period_secs: int | None = None


@dataclass
class P2VirtualFields:
    p2_urls: list[str] | None = _alias("p2Urls")


# Local repositories


@dataclass
class AlpineLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = ALPINE


@dataclass
class BowerLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = BOWER


@dataclass
class CargoLocalRepositoryParams(CargoLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CARGO


@dataclass
class ChefLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CHEF


@dataclass
class CocoapodsLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = COCOAPODS


@dataclass
class ComposerLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = COMPOSER


@dataclass
class ConanLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONAN


@dataclass
class CondaLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONDA


@dataclass
class CranLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CRAN


@dataclass
class DebianLocalRepositoryParams(DebianLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = DEBIAN


@dataclass
class DockerLocalRepositoryParams(DockerLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = DOCKER


@dataclass
class GemsLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GEMS


@dataclass
class GenericLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GENERIC


@dataclass
class GitlfsLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GITLFS


@dataclass
class GoLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GO


@dataclass
class GradleLocalRepositoryParams(MavenGradleLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GRADLE


@dataclass
class HelmLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = HELM


@dataclass
class IvyLocalRepositoryParams(MavenGradleLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = IVY


@dataclass
class MavenLocalRepositoryParams(MavenGradleLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = MAVEN


@dataclass
class NpmLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = NPM


@dataclass
class NugetLocalRepositoryParams(NugetLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = NUGET


@dataclass
class OpkgLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = OPKG


@dataclass
class PuppetLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PUPPET


@dataclass
class PypiLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PYPI


@dataclass
class RpmLocalRepositoryParams(RpmLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = RPM


@dataclass
class SbtLocalRepositoryParams(MavenGradleLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SBT


@dataclass
class SwiftLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SWIFT


@dataclass
class TerraformLocalRepositoryParams(TerraformLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = TERRAFORM


@dataclass
class VagrantLocalRepositoryParams(LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = VAGRANT


@dataclass
class YumLocalRepositoryParams(RpmLocalFields, LocalRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = YUM


# Remote repositories


@dataclass
class AlpineRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = ALPINE


@dataclass
class BowerRemoteRepositoryParams(BowerRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = BOWER


@dataclass
class CargoRemoteRepositoryParams(CargoRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CARGO


@dataclass
class ChefRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CHEF


@dataclass
class CocoapodsRemoteRepositoryParams(CocoapodsRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = COCOAPODS


@dataclass
class ComposerRemoteRepositoryParams(ComposerRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = COMPOSER


@dataclass
class ConanRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONAN


@dataclass
class CondaRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONDA


@dataclass
class CranRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CRAN


@dataclass
class DebianRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = DEBIAN


@dataclass
class DockerRemoteRepositoryParams(DockerRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = DOCKER


@dataclass
class GemsRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GEMS


@dataclass
class GenericRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GENERIC


@dataclass
class GitlfsRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GITLFS


@dataclass
class GoRemoteRepositoryParams(GoRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GO


@dataclass
class GradleRemoteRepositoryParams(JavaRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GRADLE


@dataclass
class HelmRemoteRepositoryParams(HelmRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = HELM


@dataclass
class IvyRemoteRepositoryParams(JavaRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = IVY


@dataclass
class MavenRemoteRepositoryParams(JavaRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = MAVEN


@dataclass
class NpmRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = NPM


@dataclass
class NugetRemoteRepositoryParams(NugetRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = NUGET


@dataclass
class OpkgRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = OPKG


@dataclass
class P2RemoteRepositoryParams(JavaRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = P2


@dataclass
class PuppetRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PUPPET


@dataclass
class PypiRemoteRepositoryParams(PypiRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PYPI


@dataclass
class RpmRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = RPM


@dataclass
class SbtRemoteRepositoryParams(JavaRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SBT


@dataclass
class SwiftRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SWIFT


@dataclass
class TerraformRemoteRepositoryParams(TerraformRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = TERRAFORM


@dataclass
class VcsRemoteRepositoryParams(VcsRemoteFields, RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = VCS


@dataclass
class YumRemoteRepositoryParams(RemoteRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = YUM


# Virtual repositories


@dataclass
class AlpineVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = ALPINE


@dataclass
class BowerVirtualRepositoryParams(
    ExternalDependenciesVirtualFields, VirtualRepositoryBaseParams
):
    PACKAGE_TYPE: ClassVar[str] = BOWER


@dataclass
class ChefVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CHEF


@dataclass
class ConanVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONAN


@dataclass
class CondaVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONDA


@dataclass
class CranVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CRAN


@dataclass
class DebianVirtualRepositoryParams(
    DebianVirtualFields, VirtualRetrievalCacheFields, VirtualRepositoryBaseParams
):
    PACKAGE_TYPE: ClassVar[str] = DEBIAN


@dataclass
class DockerVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = DOCKER


@dataclass
class GemsVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GEMS


@dataclass
class GenericVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GENERIC


@dataclass
class GitlfsVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GITLFS


@dataclass
class GoVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GO

    external_dependencies_enabled: bool | None = None
    external_dependencies_patterns: list[str] | None = None


@dataclass
class GradleVirtualRepositoryParams(MavenVirtualFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GRADLE


@dataclass
class HelmVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = HELM


@dataclass
class IvyVirtualRepositoryParams(MavenVirtualFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = IVY


@dataclass
class MavenVirtualRepositoryParams(MavenVirtualFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = MAVEN


@dataclass
class NpmVirtualRepositoryParams(
    ExternalDependenciesVirtualFields, VirtualRetrievalCacheFields, VirtualRepositoryBaseParams
):
    PACKAGE_TYPE: ClassVar[str] = NPM


@dataclass
class NugetVirtualRepositoryParams(NugetVirtualFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = NUGET


@dataclass
class P2VirtualRepositoryParams(P2VirtualFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = P2


@dataclass
class PuppetVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PUPPET


@dataclass
class PypiVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PYPI


@dataclass
class RpmVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = RPM


@dataclass
class SbtVirtualRepositoryParams(MavenVirtualFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SBT


@dataclass
class SwiftVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SWIFT


@dataclass
class TerraformVirtualRepositoryParams(VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = TERRAFORM


@dataclass
class YumVirtualRepositoryParams(VirtualRetrievalCacheFields, VirtualRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = YUM


# Federated repositories


@dataclass
class AlpineFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = ALPINE


@dataclass
class BowerFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = BOWER


@dataclass
class CargoFederatedRepositoryParams(CargoLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CARGO


@dataclass
class ChefFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CHEF


@dataclass
class CocoapodsFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = COCOAPODS


@dataclass
class ComposerFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = COMPOSER


@dataclass
class ConanFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONAN


@dataclass
class CondaFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CONDA


@dataclass
class CranFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = CRAN


@dataclass
class DebianFederatedRepositoryParams(DebianLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = DEBIAN


@dataclass
class DockerFederatedRepositoryParams(DockerLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = DOCKER


@dataclass
class GemsFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GEMS


@dataclass
class GenericFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GENERIC


@dataclass
class GitlfsFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GITLFS


@dataclass
class GoFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GO


@dataclass
class GradleFederatedRepositoryParams(MavenGradleLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = GRADLE


@dataclass
class HelmFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = HELM


@dataclass
class IvyFederatedRepositoryParams(MavenGradleLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = IVY


@dataclass
class MavenFederatedRepositoryParams(MavenGradleLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = MAVEN


@dataclass
class NpmFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = NPM


@dataclass
class NugetFederatedRepositoryParams(NugetLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = NUGET


@dataclass
class OpkgFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = OPKG


@dataclass
class PuppetFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PUPPET


@dataclass
class PypiFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = PYPI


@dataclass
class RpmFederatedRepositoryParams(RpmLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = RPM


@dataclass
class SbtFederatedRepositoryParams(MavenGradleLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SBT


@dataclass
class SwiftFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = SWIFT


@dataclass
class TerraformFederatedRepositoryParams(TerraformLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = TERRAFORM


@dataclass
class VagrantFederatedRepositoryParams(FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = VAGRANT


@dataclass
class YumFederatedRepositoryParams(RpmLocalFields, FederatedRepositoryBaseParams):
    PACKAGE_TYPE: ClassVar[str] = YUM

"""Rclass and package-type dispatch tables for repository create/update."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from jfrog_cli_artifactory.artifactory.repository import params as p
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
    PACKAGE_TYPE,
    PUPPET,
    PYPI,
    RCLASS,
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
from jfrog_cli_artifactory.errors import (
    MalformedConfigError,
    UnsupportedPackageTypeError,
    UnsupportedRclassError,
)
from jfrog_cli_artifactory.logging_utils import get_logger

LOGGER = get_logger()


class RepositoryService(Protocol):
    """Client operations a repository handler calls."""

    def create_repository(self, params: p.RepositoryParams) -> None: ...

    def update_repository(self, params: p.RepositoryParams) -> None: ...


@dataclass(frozen=True)
class RepoHandler:
    """Decodes a configuration into ``params_type`` and calls the client."""

    params_type: type[p.RepositoryParams]

    def __call__(self, client: RepositoryService, payload: bytes, is_update: bool) -> None:
        rclass, package_type = self.params_type.RCLASS, self.params_type.PACKAGE_TYPE
        try:
            params = self.params_type.from_json(payload)
        except (ValueError, TypeError) as exc:
            raise MalformedConfigError(
                f"failed to decode {rclass} {package_type} repository configuration: {exc}"
            ) from exc
        LOGGER.debug("Dispatching %s %s repository '%s'", rclass, package_type, params.key)
        if is_update:
            client.update_repository(params)
        else:
            client.create_repository(params)


LOCAL_REPO_HANDLERS: Mapping[str, RepoHandler] = MappingProxyType(
    {
        ALPINE: RepoHandler(p.AlpineLocalRepositoryParams),
        BOWER: RepoHandler(p.BowerLocalRepositoryParams),
        CARGO: RepoHandler(p.CargoLocalRepositoryParams),
        CHEF: RepoHandler(p.ChefLocalRepositoryParams),
        COCOAPODS: RepoHandler(p.CocoapodsLocalRepositoryParams),
        COMPOSER: RepoHandler(p.ComposerLocalRepositoryParams),
        CONAN: RepoHandler(p.ConanLocalRepositoryParams),
        CONDA: RepoHandler(p.CondaLocalRepositoryParams),
        CRAN: RepoHandler(p.CranLocalRepositoryParams),
        DEBIAN: RepoHandler(p.DebianLocalRepositoryParams),
        DOCKER: RepoHandler(p.DockerLocalRepositoryParams),
        GEMS: RepoHandler(p.GemsLocalRepositoryParams),
        GENERIC: RepoHandler(p.GenericLocalRepositoryParams),
        GITLFS: RepoHandler(p.GitlfsLocalRepositoryParams),
        GO: RepoHandler(p.GoLocalRepositoryParams),
        GRADLE: RepoHandler(p.GradleLocalRepositoryParams),
        HELM: RepoHandler(p.HelmLocalRepositoryParams),
        IVY: RepoHandler(p.IvyLocalRepositoryParams),
        MAVEN: RepoHandler(p.MavenLocalRepositoryParams),
        NPM: RepoHandler(p.NpmLocalRepositoryParams),
        NUGET: RepoHandler(p.NugetLocalRepositoryParams),
        OPKG: RepoHandler(p.OpkgLocalRepositoryParams),
        PUPPET: RepoHandler(p.PuppetLocalRepositoryParams),
        PYPI: RepoHandler(p.PypiLocalRepositoryParams),
        RPM: RepoHandler(p.RpmLocalRepositoryParams),
        SBT: RepoHandler(p.SbtLocalRepositoryParams),
        SWIFT: RepoHandler(p.SwiftLocalRepositoryParams),
        TERRAFORM: RepoHandler(p.TerraformLocalRepositoryParams),
        VAGRANT: RepoHandler(p.VagrantLocalRepositoryParams),
        YUM: RepoHandler(p.YumLocalRepositoryParams),
    }
)

REMOTE_REPO_HANDLERS: Mapping[str, RepoHandler] = MappingProxyType(
    {
        ALPINE: RepoHandler(p.AlpineRemoteRepositoryParams),
        BOWER: RepoHandler(p.BowerRemoteRepositoryParams),
        CARGO: RepoHandler(p.CargoRemoteRepositoryParams),
        CHEF: RepoHandler(p.ChefRemoteRepositoryParams),
        COCOAPODS: RepoHandler(p.CocoapodsRemoteRepositoryParams),
        COMPOSER: RepoHandler(p.ComposerRemoteRepositoryParams),
        CONAN: RepoHandler(p.ConanRemoteRepositoryParams),
        CONDA: RepoHandler(p.CondaRemoteRepositoryParams),
        CRAN: RepoHandler(p.CranRemoteRepositoryParams),
        DEBIAN: RepoHandler(p.DebianRemoteRepositoryParams),
        DOCKER: RepoHandler(p.DockerRemoteRepositoryParams),
        GEMS: RepoHandler(p.GemsRemoteRepositoryParams),
        GENERIC: RepoHandler(p.GenericRemoteRepositoryParams),
        GITLFS: RepoHandler(p.GitlfsRemoteRepositoryParams),
        GO: RepoHandler(p.GoRemoteRepositoryParams),
        GRADLE: RepoHandler(p.GradleRemoteRepositoryParams),
        HELM: RepoHandler(p.HelmRemoteRepositoryParams),
        IVY: RepoHandler(p.IvyRemoteRepositoryParams),
        MAVEN: RepoHandler(p.MavenRemoteRepositoryParams),
        NPM: RepoHandler(p.NpmRemoteRepositoryParams),
        NUGET: RepoHandler(p.NugetRemoteRepositoryParams),
        OPKG: RepoHandler(p.OpkgRemoteRepositoryParams),
        P2: RepoHandler(p.P2RemoteRepositoryParams),
        PUPPET: RepoHandler(p.PuppetRemoteRepositoryParams),
        PYPI: RepoHandler(p.PypiRemoteRepositoryParams),
        RPM: RepoHandler(p.RpmRemoteRepositoryParams),
        SBT: RepoHandler(p.SbtRemoteRepositoryParams),
        SWIFT: RepoHandler(p.SwiftRemoteRepositoryParams),
        TERRAFORM: RepoHandler(p.TerraformRemoteRepositoryParams),
        VCS: RepoHandler(p.VcsRemoteRepositoryParams),
        YUM: RepoHandler(p.YumRemoteRepositoryParams),
    }
)

VIRTUAL_REPO_HANDLERS: Mapping[str, RepoHandler] = MappingProxyType(
    {
        ALPINE: RepoHandler(p.AlpineVirtualRepositoryParams),
        BOWER: RepoHandler(p.BowerVirtualRepositoryParams),
        CHEF: RepoHandler(p.ChefVirtualRepositoryParams),
        CONAN: RepoHandler(p.ConanVirtualRepositoryParams),
        CONDA: RepoHandler(p.CondaVirtualRepositoryParams),
        CRAN: RepoHandler(p.CranVirtualRepositoryParams),
        DEBIAN: RepoHandler(p.DebianVirtualRepositoryParams),
        DOCKER: RepoHandler(p.DockerVirtualRepositoryParams),
        GEMS: RepoHandler(p.GemsVirtualRepositoryParams),
        GENERIC: RepoHandler(p.GenericVirtualRepositoryParams),
        GITLFS: RepoHandler(p.GitlfsVirtualRepositoryParams),
        GO: RepoHandler(p.GoVirtualRepositoryParams),
        GRADLE: RepoHandler(p.GradleVirtualRepositoryParams),
        HELM: RepoHandler(p.HelmVirtualRepositoryParams),
        IVY: RepoHandler(p.IvyVirtualRepositoryParams),
        MAVEN: RepoHandler(p.MavenVirtualRepositoryParams),
        NPM: RepoHandler(p.NpmVirtualRepositoryParams),
        NUGET: RepoHandler(p.NugetVirtualRepositoryParams),
        P2: RepoHandler(p.P2VirtualRepositoryParams),
        PUPPET: RepoHandler(p.PuppetVirtualRepositoryParams),
        PYPI: RepoHandler(p.PypiVirtualRepositoryParams),
        RPM: RepoHandler(p.RpmVirtualRepositoryParams),
        SBT: RepoHandler(p.SbtVirtualRepositoryParams),
        SWIFT: RepoHandler(p.SwiftVirtualRepositoryParams),
        TERRAFORM: RepoHandler(p.TerraformVirtualRepositoryParams),
        YUM: RepoHandler(p.YumVirtualRepositoryParams),
    }
)

FEDERATED_REPO_HANDLERS: Mapping[str, RepoHandler] = MappingProxyType(
    {
        ALPINE: RepoHandler(p.AlpineFederatedRepositoryParams),
        BOWER: RepoHandler(p.BowerFederatedRepositoryParams),
        CARGO: RepoHandler(p.CargoFederatedRepositoryParams),
        CHEF: RepoHandler(p.ChefFederatedRepositoryParams),
        COCOAPODS: RepoHandler(p.CocoapodsFederatedRepositoryParams),
        COMPOSER: RepoHandler(p.ComposerFederatedRepositoryParams),
        CONAN: RepoHandler(p.ConanFederatedRepositoryParams),
        CONDA: RepoHandler(p.CondaFederatedRepositoryParams),
        CRAN: RepoHandler(p.CranFederatedRepositoryParams),
        DEBIAN: RepoHandler(p.DebianFederatedRepositoryParams),
        DOCKER: RepoHandler(p.DockerFederatedRepositoryParams),
        GEMS: RepoHandler(p.GemsFederatedRepositoryParams),
        GENERIC: RepoHandler(p.GenericFederatedRepositoryParams),
        GITLFS: RepoHandler(p.GitlfsFederatedRepositoryParams),
        GO: RepoHandler(p.GoFederatedRepositoryParams),
        GRADLE: RepoHandler(p.GradleFederatedRepositoryParams),
        HELM: RepoHandler(p.HelmFederatedRepositoryParams),
        IVY: RepoHandler(p.IvyFederatedRepositoryParams),
        MAVEN: RepoHandler(p.MavenFederatedRepositoryParams),
        NPM: RepoHandler(p.NpmFederatedRepositoryParams),
        NUGET: RepoHandler(p.NugetFederatedRepositoryParams),
        OPKG: RepoHandler(p.OpkgFederatedRepositoryParams),
        PUPPET: RepoHandler(p.PuppetFederatedRepositoryParams),
        PYPI: RepoHandler(p.PypiFederatedRepositoryParams),
        RPM: RepoHandler(p.RpmFederatedRepositoryParams),
        SBT: RepoHandler(p.SbtFederatedRepositoryParams),
        SWIFT: RepoHandler(p.SwiftFederatedRepositoryParams),
        TERRAFORM: RepoHandler(p.TerraformFederatedRepositoryParams),
        VAGRANT: RepoHandler(p.VagrantFederatedRepositoryParams),
        YUM: RepoHandler(p.YumFederatedRepositoryParams),
    }
)

REPO_HANDLERS_BY_RCLASS: Mapping[str, Mapping[str, RepoHandler]] = MappingProxyType(
    {
        LOCAL: LOCAL_REPO_HANDLERS,
        REMOTE: REMOTE_REPO_HANDLERS,
        VIRTUAL: VIRTUAL_REPO_HANDLERS,
        FEDERATED: FEDERATED_REPO_HANDLERS,
    }
)


def resolve_handler(rclass: object, package_type: object) -> RepoHandler:
    """Return the handler for a repository class and package type."""
    table = REPO_HANDLERS_BY_RCLASS.get(rclass) if isinstance(rclass, str) else None
    if table is None:
        raise UnsupportedRclassError(rclass)
    handler = table.get(package_type) if isinstance(package_type, str) else None
    if handler is None:
        raise UnsupportedPackageTypeError(str(rclass), package_type)
    return handler


def dispatch(
    client: RepositoryService, config: Mapping[str, object], is_update: bool
) -> None:
    """Serialize one coerced configuration and hand it to its handler."""
    handler = resolve_handler(config.get(RCLASS), config.get(PACKAGE_TYPE))
    handler(client, json.dumps(config).encode("utf-8"), is_update)

"""Repository create/update command: single-item and batch paths."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from jfrog_cli_artifactory.artifactory.repository.fields import KEY
from jfrog_cli_artifactory.artifactory.repository.handlers import RepositoryService, dispatch
from jfrog_cli_artifactory.artifactory.repository.template import RepositoryConfig, load_template
from jfrog_cli_artifactory.artifactory.repository.writers import (
    coerce_config,
    normalize_batch_config,
)
from jfrog_cli_artifactory.errors import MissingKeyError, UnsupportedVersionError
from jfrog_cli_artifactory.logging_utils import get_logger
from jfrog_cli_artifactory.platform.version import (
    MIN_BULK_CREATE_VERSION,
    MIN_BULK_UPDATE_VERSION,
    is_at_least,
)

LOGGER = get_logger()


class RepositoryClient(RepositoryService, Protocol):
    """Client operations used by the repository command."""

    def get_version(self) -> str: ...

    def create_update_repositories_in_batch(self, payload: bytes, is_update: bool) -> None: ...


def find_missing_keys(configs: Sequence[RepositoryConfig]) -> list[RepositoryConfig]:
    """Return every configuration without a present, non-empty ``key``."""
    return [config for config in configs if config.get(KEY) in (None, "")]


class RepoCommand:
    """Create or update repositories from a template file."""

    def __init__(
        self,
        client: RepositoryClient,
        template_path: Path,
        template_vars: str | None = None,
    ) -> None:
        self.client = client
        self.template_path = template_path
        self.template_vars = template_vars

    def perform_repo_cmd(self, is_update: bool) -> None:
        """Load the template and run the single-item or batch path."""
        loaded = load_template(self.template_path, self.template_vars)
        configs = loaded if isinstance(loaded, list) else [loaded]
        missing = find_missing_keys(configs)
        if missing:
            raise MissingKeyError(missing)
        if isinstance(loaded, list):
            self.perform_batch(loaded, is_update)
        else:
            self.perform_single(loaded, is_update)

    def perform_single(self, config: RepositoryConfig, is_update: bool) -> None:
        """Coerce one configuration field by field and dispatch it by type."""
        dispatch(self.client, coerce_config(config), is_update)

    def perform_batch(self, configs: list[dict[str, Any]], is_update: bool) -> None:
        """Submit all configurations in one batch call after the version gate."""
        payload = json.dumps([normalize_batch_config(config) for config in configs])
        actual = self.client.get_version()
        if is_update:
            feature, required = "bulk repository update", MIN_BULK_UPDATE_VERSION
        else:
            feature, required = "bulk repository creation", MIN_BULK_CREATE_VERSION
        if not is_at_least(actual, required):
            raise UnsupportedVersionError(feature, required, actual)
        LOGGER.debug("creating/updating repositories in batch...")
        self.client.create_update_repositories_in_batch(payload.encode("utf-8"), is_update)
        LOGGER.info("Successfully created/updated the repositories")

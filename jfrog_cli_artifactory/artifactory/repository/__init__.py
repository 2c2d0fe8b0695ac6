"""Repository create/update from templates."""

from jfrog_cli_artifactory.artifactory.repository.command import RepoCommand
from jfrog_cli_artifactory.artifactory.repository.handlers import resolve_handler

__all__ = ["RepoCommand", "resolve_handler"]

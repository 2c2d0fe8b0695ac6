"""Command-line interface for the JFrog Artifactory plugin."""

from __future__ import annotations

# Importing the command modules registers their commands on the shared app.
from jfrog_cli_artifactory.commands import evidence, repository, root  # noqa: F401
from jfrog_cli_artifactory.commands.common import app

__all__ = ["app"]

if __name__ == "__main__":
    app()

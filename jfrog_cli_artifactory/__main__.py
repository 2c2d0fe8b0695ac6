"""Module entrypoint for python -m jfrog_cli_artifactory."""

from __future__ import annotations

from jfrog_cli_artifactory.cli import app

if __name__ == "__main__":
    app()

"""CLI command registrations."""

from __future__ import annotations

# mypy: ignore-errors
# ruff: noqa: B008,F403,F405,I001
from jfrog_cli_artifactory.commands.common import *

TemplateArgument = Annotated[
    Path,
    typer.Argument(help="Path to a JSON or YAML repository template."),
]
VarsOption = Annotated[
    str | None,
    typer.Option(
        "--vars",
        help="Template variables in the form 'key1=value1;key2=value2'.",
    ),
]


@app.command("repo-create")
def repo_create(
    template: TemplateArgument,
    template_vars: VarsOption = None,
    url: UrlOption = None,
    access_token: AccessTokenOption = None,
    user: UserOption = None,
    password: PasswordOption = None,
) -> None:
    """Create one or more repositories from a template."""
    details = _server_details(url, access_token, user, password)
    _run_repo_command(template, template_vars, details, is_update=False)
    console.print("Repository configuration applied.")


@app.command("repo-update")
def repo_update(
    template: TemplateArgument,
    template_vars: VarsOption = None,
    url: UrlOption = None,
    access_token: AccessTokenOption = None,
    user: UserOption = None,
    password: PasswordOption = None,
) -> None:
    """Update one or more repositories from a template."""
    details = _server_details(url, access_token, user, password)
    _run_repo_command(template, template_vars, details, is_update=True)
    console.print("Repository configuration applied.")

"""CLI command registrations."""

from __future__ import annotations

# mypy: ignore-errors
# ruff: noqa: B008,F403,F405,I001
from jfrog_cli_artifactory.commands.common import *


@app.command("create", hidden=True)
@app.command("create-evidence")
def create_evidence(
    predicate: Annotated[
        str | None,
        typer.Option("--predicate", help="Path to the JSON predicate file."),
    ] = None,
    predicate_type: Annotated[
        str | None,
        typer.Option("--predicate-type", help="Predicate type URI."),
    ] = None,
    markdown: Annotated[
        str | None,
        typer.Option("--markdown", help="Optional markdown (.md) file describing the evidence."),
    ] = None,
    key: Annotated[
        str | None,
        typer.Option("--key", help="Private key file or PEM content used for signing."),
    ] = None,
    key_alias: Annotated[
        str | None,
        typer.Option("--key-alias", help="Key alias recorded as the signature key id."),
    ] = None,
    repo_path: Annotated[
        str | None,
        typer.Option("--repo-path", help="Subject artifact path '<repo>/<path>'."),
    ] = None,
    release_bundle: Annotated[
        str | None,
        typer.Option("--release-bundle", help="Subject release bundle name."),
    ] = None,
    release_bundle_version: Annotated[
        str | None,
        typer.Option("--release-bundle-version", help="Subject release bundle version."),
    ] = None,
    build_name: Annotated[
        str | None,
        typer.Option("--build-name", help="Subject build name."),
    ] = None,
    build_number: Annotated[
        str | None,
        typer.Option("--build-number", help="Subject build number."),
    ] = None,
    package_name: Annotated[
        str | None,
        typer.Option("--package-name", help="Subject package name."),
    ] = None,
    package_version: Annotated[
        str | None,
        typer.Option("--package-version", help="Subject package version."),
    ] = None,
    package_repo_name: Annotated[
        str | None,
        typer.Option("--package-repo-name", help="Repository holding the subject package."),
    ] = None,
    project: Annotated[
        str | None,
        typer.Option("--project", help="Project key of the subject."),
    ] = None,
    url: UrlOption = None,
    access_token: AccessTokenOption = None,
    user: UserOption = None,
    password: PasswordOption = None,
) -> None:
    """Create signed evidence on an artifact, release bundle, build, or package."""
    try:
        options = validate_create_evidence_context(
            predicate=predicate,
            predicate_type=predicate_type,
            key=key,
            key_alias=key_alias,
            markdown=markdown,
            environ=os.environ,
        )
        subject = resolve_subject(
            {
                SUBJECT_REPO_PATH: repo_path,
                RELEASE_BUNDLE: release_bundle,
                "release-bundle-version": release_bundle_version,
                BUILD_NAME: build_name,
                BUILD_NUMBER: build_number,
                PACKAGE_NAME: package_name,
                "package-version": package_version,
                "package-repo-name": package_repo_name,
            },
            os.environ,
        )
        details = evidence_server_details(
            url, access_token=access_token, user=user, password=password
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    command = new_create_evidence_command(subject, details, options, project=project)
    try:
        command.run()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except JFrogCliError as exc:
        raise _fail(exc) from exc
    console.print(f"Evidence created on {subject.kind} subject.")

"""Server connection details and shared configuration validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from jfrog_cli_artifactory.errors import ValidationError

URL_ENV = "JFROG_URL"
ACCESS_TOKEN_ENV = "JFROG_ACCESS_TOKEN"
USER_ENV = "JFROG_USER"
PASSWORD_ENV = "JFROG_PASSWORD"


def add_trailing_slash(url: str) -> str:
    """Return the URL with exactly one trailing slash."""
    return url if url.endswith("/") else f"{url}/"


@dataclass(frozen=True)
class ServerDetails:
    """Platform URLs and credentials used to build service clients."""

    url: str
    artifactory_url: str
    evidence_url: str
    metadata_url: str
    access_token: str | None = None
    user: str | None = None
    password: str | None = None

    @classmethod
    def from_platform_url(
        cls,
        url: str,
        *,
        access_token: str | None = None,
        user: str | None = None,
        password: str | None = None,
    ) -> ServerDetails:
        """Derive Artifactory, Evidence, and Metadata URLs from the platform URL."""
        base = add_trailing_slash(require_non_empty(url, "url"))
        return cls(
            url=base,
            artifactory_url=f"{base}artifactory/",
            evidence_url=f"{base}evidence/",
            metadata_url=f"{base}metadata/",
            access_token=access_token or None,
            user=user or None,
            password=password or None,
        )

    @property
    def uses_basic_auth(self) -> bool:
        """Return whether both user and password are configured."""
        return bool(self.user) and bool(self.password)


def require_non_empty(value: str | None, field_name: str) -> str:
    """Validate a mandatory string option and return it stripped."""
    if value is None or not value.strip():
        raise ValidationError(f"the --{field_name} option is mandatory")
    return value.strip()


def parse_template_vars(raw_vars: str | None) -> dict[str, str]:
    """Parse ``key1=value1;key2=value2`` template variables.

    A backslash before ``;`` escapes it so values may contain semicolons.
    Entries without ``=`` are ignored.
    """
    if not raw_vars:
        return {}
    entries: list[str] = []
    for candidate in raw_vars.split(";"):
        if entries and entries[-1].endswith("\\"):
            entries[-1] = entries[-1][:-1] + ";" + candidate
            continue
        entries.append(candidate)
    result: dict[str, str] = {}
    for entry in entries:
        name, sep, value = entry.partition("=")
        if not sep:
            continue
        result[name] = value
    return result


def replace_template_vars(content: str, template_vars: dict[str, str]) -> str:
    """Substitute ``${name}`` placeholders with their values."""
    for name, value in template_vars.items():
        content = content.replace("${" + name + "}", value)
    return content

"""Error taxonomy shared by repository, lifecycle, and evidence commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class JFrogCliError(RuntimeError):
    """Base class for every failure surfaced by the plugin commands."""


class ValidationError(JFrogCliError):
    """Raised when user input is missing or malformed."""


class InvalidFieldError(ValidationError):
    """Raised when a template field is unknown or carries an unsupported value shape."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f'template syntax error: {message} (key: "{field}")')


class CoercionError(ValidationError):
    """Raised when a raw template value cannot be coerced to the field's type."""

    def __init__(self, field: str, value: str, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"invalid value '{value}' for '{field}': expected {expected}")


class MissingKeyError(ValidationError):
    """Raised when one or more repository configurations lack a ``key``."""

    def __init__(self, configs: Sequence[dict[str, Any]]) -> None:
        self.configs = list(configs)
        listed = "\n".join(f"{config}" for config in self.configs)
        super().__init__(f"'key' is missing in the following configs:\n{listed}")


class AmbiguousSubjectError(ValidationError):
    """Raised when more than one evidence subject flag is set."""

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"multiple subjects found: [{', '.join(self.fields)}]")


class NoSubjectError(ValidationError):
    """Raised when no evidence subject can be resolved from flags or environment."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(f"subject must be one of the fields: [{', '.join(self.candidates)}]")


class KeyNotFoundError(ValidationError):
    """Raised when key content does not hold the requested half of a key pair."""


class UnsupportedRclassError(JFrogCliError):
    """Raised when a repository class has no dispatch table."""

    def __init__(self, rclass: object) -> None:
        self.rclass = rclass
        super().__init__(f"unsupported rclass: {rclass}")


class UnsupportedPackageTypeError(JFrogCliError):
    """Raised when a repository class does not support a package type."""

    def __init__(self, rclass: str, package_type: object) -> None:
        self.rclass = rclass
        self.package_type = package_type
        super().__init__(f"unsupported package type: {package_type} (rclass: {rclass})")


class UnsupportedVersionError(JFrogCliError):
    """Raised when the platform version is older than a feature requires."""

    def __init__(self, feature: str, required: str, actual: str) -> None:
        self.feature = feature
        self.required = required
        self.actual = actual
        super().__init__(
            f"{feature} is supported from Artifactory version {required}, "
            f"current version: {actual}"
        )


class MalformedConfigError(JFrogCliError):
    """Raised when a configuration payload cannot be decoded into typed parameters."""


class TransportError(JFrogCliError):
    """Raised when the platform responds with an error or cannot be reached."""

    def __init__(self, message: str, *, status: int | None = None, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(message)

"""Resolution of the single subject an evidence envelope attests about."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from jfrog_cli_artifactory.errors import AmbiguousSubjectError, NoSubjectError

SUBJECT_REPO_PATH = "repo-path"
RELEASE_BUNDLE = "release-bundle"
BUILD_NAME = "build-name"
PACKAGE_NAME = "package-name"
BUILD_NUMBER = "build-number"

SUBJECT_TYPES: tuple[str, ...] = (SUBJECT_REPO_PATH, RELEASE_BUNDLE, BUILD_NAME, PACKAGE_NAME)

BUILD_NAME_ENV = "JFROG_CLI_BUILD_NAME"
BUILD_NUMBER_ENV = "JFROG_CLI_BUILD_NUMBER"


@dataclass(frozen=True)
class EvidenceSubject:
    """The resolved subject type plus the flag values it was resolved with."""

    kind: str
    flags: Mapping[str, str]

    def value(self, flag: str) -> str:
        return self.flags.get(flag, "")


def _fill_from_env(flags: dict[str, str], flag: str, env_name: str, environ: Mapping[str, str]) -> bool:
    if flags.get(flag):
        return True
    env_value = environ.get(env_name, "")
    if env_value:
        flags[flag] = env_value
        return True
    return False


def resolve_subject(flags: Mapping[str, str | None], environ: Mapping[str, str]) -> EvidenceSubject:
    """Resolve exactly one subject from the subject flags and build env fallbacks.

    Zero subject flags fall back to ``JFROG_CLI_BUILD_NAME`` and
    ``JFROG_CLI_BUILD_NUMBER``; an explicit ``--build-number`` counts toward
    that fallback.
    """
    resolved = {name: value for name, value in flags.items() if value}
    found = [name for name in SUBJECT_TYPES if resolved.get(name)]
    if not found:
        name_set = _fill_from_env(resolved, BUILD_NAME, BUILD_NAME_ENV, environ)
        number_set = _fill_from_env(resolved, BUILD_NUMBER, BUILD_NUMBER_ENV, environ)
        if not (name_set and number_set):
            raise NoSubjectError(SUBJECT_TYPES)
        found = [BUILD_NAME]
    if len(found) > 1:
        raise AmbiguousSubjectError(found)
    return EvidenceSubject(kind=found[0], flags=resolved)

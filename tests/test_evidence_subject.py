"""Tests for evidence subject resolution."""

from __future__ import annotations

import pytest

from jfrog_cli_artifactory.errors import AmbiguousSubjectError, NoSubjectError
from jfrog_cli_artifactory.evidence.subject import resolve_subject


def test_single_flag_resolves_subject() -> None:
    subject = resolve_subject({"repo-path": "libs/a.jar", "release-bundle": None}, {})
    assert subject.kind == "repo-path"
    assert subject.value("repo-path") == "libs/a.jar"


def test_release_bundle_and_build_name_are_ambiguous() -> None:
    with pytest.raises(AmbiguousSubjectError) as excinfo:
        resolve_subject({"release-bundle": "rb", "build-name": "b", "build-number": "1"}, {})
    assert excinfo.value.fields == ["release-bundle", "build-name"]
    assert str(excinfo.value) == "multiple subjects found: [release-bundle, build-name]"


def test_build_env_fallback_resolves_build_subject() -> None:
    env = {"JFROG_CLI_BUILD_NAME": "my-build", "JFROG_CLI_BUILD_NUMBER": "42"}
    subject = resolve_subject({"repo-path": "", "package-name": None}, env)
    assert subject.kind == "build-name"
    assert subject.value("build-name") == "my-build"
    assert subject.value("build-number") == "42"


def test_explicit_build_number_counts_for_fallback() -> None:
    subject = resolve_subject({"build-number": "7"}, {"JFROG_CLI_BUILD_NAME": "nightly"})
    assert subject.kind == "build-name"
    assert subject.value("build-number") == "7"


def test_partial_build_env_is_not_enough() -> None:
    with pytest.raises(NoSubjectError) as excinfo:
        resolve_subject({}, {"JFROG_CLI_BUILD_NAME": "nightly"})
    assert "repo-path, release-bundle, build-name, package-name" in str(excinfo.value)


def test_no_flags_and_no_env_fails() -> None:
    with pytest.raises(NoSubjectError):
        resolve_subject({}, {})

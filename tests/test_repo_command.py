"""Tests for the repository create/update orchestrator."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from jfrog_cli_artifactory.artifactory.repository import params as p
from jfrog_cli_artifactory.artifactory.repository.command import RepoCommand, find_missing_keys
from jfrog_cli_artifactory.errors import (
    InvalidFieldError,
    MissingKeyError,
    UnsupportedRclassError,
    UnsupportedVersionError,
    ValidationError,
)


def _write_json(tmp_path: Path, payload: Any, name: str = "template.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_single_template_is_coerced_and_created(tmp_path: Path, repo_client: Any) -> None:
    template = _write_json(
        tmp_path,
        {
            "key": "libs-release-local",
            "rclass": "local",
            "packageType": "maven",
            "handleReleases": "true",
            "maxUniqueSnapshots": "3",
            "propertySets": "artifactory,custom",
        },
    )

    RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)

    (params,) = repo_client.created
    assert isinstance(params, p.MavenLocalRepositoryParams)
    assert params.handle_releases is True
    assert params.max_unique_snapshots == 3
    assert params.property_sets == ["artifactory", "custom"]
    assert repo_client.version_calls == 0


def test_single_yaml_template_with_vars_is_updated(tmp_path: Path, repo_client: Any) -> None:
    template = tmp_path / "npm.yaml"
    template.write_text(
        "key: ${name}\n"
        "rclass: remote\n"
        "packageType: npm\n"
        "url: ${url}\n"
        "contentSynchronisation: true,false,true,false\n",
        encoding="utf-8",
    )

    command = RepoCommand(
        repo_client, template, "name=npm-remote;url=https://registry.npmjs.org"
    )
    command.perform_repo_cmd(is_update=True)

    assert repo_client.created == []
    (params,) = repo_client.updated
    assert isinstance(params, p.NpmRemoteRepositoryParams)
    assert params.key == "npm-remote"
    assert params.url == "https://registry.npmjs.org"
    assert params.content_synchronisation is not None
    assert params.content_synchronisation.enabled is True


def test_single_template_with_unknown_field_fails(tmp_path: Path, repo_client: Any) -> None:
    template = _write_json(
        tmp_path, {"key": "r", "rclass": "local", "packageType": "maven", "bogus": "x"}
    )
    with pytest.raises(InvalidFieldError):
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)
    assert repo_client.created == []


def test_single_template_with_unknown_rclass_fails(tmp_path: Path, repo_client: Any) -> None:
    template = _write_json(tmp_path, {"key": "r", "rclass": "edge", "packageType": "maven"})
    with pytest.raises(UnsupportedRclassError):
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)


def test_batch_create_below_minimum_version_makes_no_batch_call(
    tmp_path: Path, repo_client: Any
) -> None:
    repo_client.version = "7.84.2"
    template = _write_json(
        tmp_path,
        [
            {"key": "a", "rclass": "local", "packageType": "generic"},
            {"key": "b", "rclass": "local", "packageType": "generic"},
        ],
    )

    with pytest.raises(UnsupportedVersionError) as excinfo:
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)

    assert excinfo.value.required == "7.84.3"
    assert excinfo.value.actual == "7.84.2"
    assert repo_client.batches == []
    assert repo_client.created == []


def test_batch_update_requires_newer_version(tmp_path: Path, repo_client: Any) -> None:
    repo_client.version = "7.104.1"
    template = _write_json(tmp_path, [{"key": "a", "rclass": "local", "packageType": "npm"}])

    with pytest.raises(UnsupportedVersionError) as excinfo:
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=True)

    assert excinfo.value.required == "7.104.2"
    assert repo_client.batches == []


def test_batch_sends_whole_array_in_one_call(tmp_path: Path, repo_client: Any) -> None:
    repo_client.version = "7.104.2"
    configs = [
        {"key": "a", "rclass": "local", "packageType": "npm"},
        {"key": "b", "rclass": "remote", "packageType": "npm", "url": "https://registry.npmjs.org"},
    ]
    template = _write_json(tmp_path, configs)

    RepoCommand(repo_client, template).perform_repo_cmd(is_update=True)

    assert repo_client.batches == [(configs, True)]
    assert repo_client.created == []
    assert repo_client.updated == []


def test_missing_keys_are_reported_together(tmp_path: Path, repo_client: Any) -> None:
    template = _write_json(
        tmp_path,
        [
            {"key": "ok", "rclass": "local", "packageType": "npm"},
            {"rclass": "local", "packageType": "maven"},
            {"key": "", "rclass": "remote", "packageType": "docker"},
        ],
    )

    with pytest.raises(MissingKeyError) as excinfo:
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)

    assert len(excinfo.value.configs) == 2
    message = str(excinfo.value)
    assert "maven" in message
    assert "docker" in message
    assert repo_client.version_calls == 0


def test_single_config_missing_key_lists_its_content(tmp_path: Path, repo_client: Any) -> None:
    template = _write_json(tmp_path, {"rclass": "local", "packageType": "pypi"})
    with pytest.raises(MissingKeyError) as excinfo:
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)
    assert "pypi" in str(excinfo.value)
    assert repo_client.created == []


def test_unexpected_template_shape_is_rejected(tmp_path: Path, repo_client: Any) -> None:
    template = _write_json(tmp_path, ["not", "objects"])
    with pytest.raises(ValidationError):
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)


def test_find_missing_keys_keeps_order() -> None:
    configs: list[dict[str, Any]] = [{"key": "a"}, {"x": 1}, {"key": None}]
    assert find_missing_keys(configs) == [{"x": 1}, {"key": None}]


def test_find_missing_keys_accepts_falsy_scalar_keys() -> None:
    configs: list[dict[str, Any]] = [{"key": 0}, {"key": False}, {"key": ""}]
    assert find_missing_keys(configs) == [{"key": ""}]


def test_yaml_batch_dates_are_sent_as_iso_strings(tmp_path: Path, repo_client: Any) -> None:
    template = tmp_path / "repos.yaml"
    template.write_text(
        "- key: a\n"
        "  rclass: local\n"
        "  packageType: npm\n"
        "  notes: 2024-01-01\n"
        "- key: b\n"
        "  rclass: local\n"
        "  packageType: npm\n"
        "  description: 2024-01-02 10:30:00\n",
        encoding="utf-8",
    )

    RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)

    ((configs, is_update),) = repo_client.batches
    assert is_update is False
    assert configs[0]["notes"] == "2024-01-01"
    assert configs[1]["description"] == "2024-01-02T10:30:00"


def test_yaml_batch_with_unsupported_value_fails_before_any_call(
    tmp_path: Path, repo_client: Any
) -> None:
    template = tmp_path / "repos.yaml"
    template.write_text(
        "- key: a\n  rclass: local\n  packageType: npm\n  notes: !!set {x, y}\n",
        encoding="utf-8",
    )

    with pytest.raises(InvalidFieldError) as excinfo:
        RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)

    assert excinfo.value.field == "notes"
    assert repo_client.version_calls == 0
    assert repo_client.batches == []


def test_single_yaml_date_is_written_as_string(tmp_path: Path, repo_client: Any) -> None:
    template = tmp_path / "repo.yaml"
    template.write_text(
        "key: a\nrclass: local\npackageType: generic\nnotes: 2024-01-01\n", encoding="utf-8"
    )

    RepoCommand(repo_client, template).perform_repo_cmd(is_update=False)

    (params,) = repo_client.created
    assert params.notes == "2024-01-01"

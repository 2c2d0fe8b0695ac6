"""Tests for typed repository parameter serialization."""

from __future__ import annotations

import pytest

from jfrog_cli_artifactory.artifactory.repository import params as p


def test_to_dict_uses_camel_case_and_omits_unset_fields() -> None:
    params = p.MavenLocalRepositoryParams(
        key="libs-release-local",
        handle_snapshots=False,
        max_unique_snapshots=3,
        property_sets=["artifactory"],
    )
    assert params.to_dict() == {
        "key": "libs-release-local",
        "rclass": "local",
        "packageType": "maven",
        "handleSnapshots": False,
        "maxUniqueSnapshots": 3,
        "propertySets": ["artifactory"],
    }


def test_aliased_fields_keep_platform_names() -> None:
    params = p.PypiRemoteRepositoryParams.from_dict(
        {"key": "pypi-remote", "pyPIRegistryUrl": "https://pypi.org"}
    )
    assert params.pypi_registry_url == "https://pypi.org"
    assert params.to_dict()["pyPIRegistryUrl"] == "https://pypi.org"


def test_content_synchronisation_round_trips_nested_object() -> None:
    payload = {
        "key": "generic-remote",
        "contentSynchronisation": {
            "enabled": True,
            "statistics": {"enabled": False},
            "properties": {"enabled": True},
            "source": {"originAbsenceDetection": False},
        },
    }
    params = p.GenericRemoteRepositoryParams.from_dict(payload)
    assert params.content_synchronisation == p.ContentSynchronisation.from_flags(
        True, False, True, False
    )
    assert params.to_dict()["contentSynchronisation"] == payload["contentSynchronisation"]


def test_federated_members_decode_to_dataclasses() -> None:
    params = p.MavenFederatedRepositoryParams.from_dict(
        {
            "key": "libs-federated",
            "members": [{"url": "https://edge.example/artifactory/libs-federated", "enabled": True}],
        }
    )
    assert params.members == [
        p.FederatedRepositoryMember(
            url="https://edge.example/artifactory/libs-federated", enabled=True
        )
    ]
    assert params.rclass == "federated"


def test_explicit_discriminators_are_kept() -> None:
    params = p.NpmVirtualRepositoryParams.from_dict(
        {"key": "npm", "rclass": "virtual", "packageType": "npm", "repositories": ["a", "b"]}
    )
    assert params.repositories == ["a", "b"]
    assert params.to_dict()["packageType"] == "npm"


@pytest.mark.parametrize(
    "payload",
    [
        {"key": 5},
        {"key": "r", "maxUniqueTags": True},
        {"key": "r", "maxUniqueTags": "10"},
        {"key": "r", "blockPushingSchema1": "false"},
        {"key": "r", "members": [{"url": 1}]},
    ],
)
def test_from_dict_rejects_wrong_types(payload: dict[str, object]) -> None:
    with pytest.raises(TypeError):
        p.DockerFederatedRepositoryParams.from_dict(payload)

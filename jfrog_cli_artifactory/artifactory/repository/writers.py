"""Answer writers: per-field coercion of raw template values into typed values."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import date
from types import MappingProxyType
from typing import Any

from jfrog_cli_artifactory.artifactory.repository import fields as f
from jfrog_cli_artifactory.artifactory.repository.params import ContentSynchronisation
from jfrog_cli_artifactory.errors import CoercionError, InvalidFieldError

AnswerWriter = Callable[[dict[str, Any], str, str], None]

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_CONTENT_SYNCHRONISATION_PARTS = 4


def parse_bool(field: str, value: str) -> bool:
    """Parse the boolean spellings accepted in templates."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise CoercionError(field, value, "a boolean")


def write_string(config: dict[str, Any], field: str, value: str) -> None:
    config[field] = value


def write_bool(config: dict[str, Any], field: str, value: str) -> None:
    if value == "":
        config.pop(field, None)
        return
    config[field] = parse_bool(field, value)


def write_int(config: dict[str, Any], field: str, value: str) -> None:
    if value == "":
        config.pop(field, None)
        return
    if not _INT_PATTERN.match(value):
        raise CoercionError(field, value, "an integer")
    config[field] = int(value)


def write_string_array(config: dict[str, Any], field: str, value: str) -> None:
    if value == "":
        config.pop(field, None)
        return
    config[field] = [item.strip() for item in value.split(",") if item.strip()]


def write_content_synchronisation(config: dict[str, Any], field: str, value: str) -> None:
    """Decode ``enabled,statistics,properties,originAbsenceDetection``."""
    parts = value.split(",")
    if len(parts) != _CONTENT_SYNCHRONISATION_PARTS:
        raise CoercionError(field, value, "four comma-separated booleans")
    flags = [parse_bool(field, part.strip()) for part in parts]
    config[field] = ContentSynchronisation.from_flags(*flags).to_dict()


FIELD_WRITERS: Mapping[str, AnswerWriter] = MappingProxyType(
    {
        f.KEY: write_string,
        f.RCLASS: write_string,
        f.PACKAGE_TYPE: write_string,
        f.URL: write_string,
        f.DESCRIPTION: write_string,
        f.NOTES: write_string,
        f.INCLUDES_PATTERN: write_string,
        f.EXCLUDES_PATTERN: write_string,
        f.REPO_LAYOUT_REF: write_string,
        f.PROJECT_KEY: write_string,
        f.ENVIRONMENTS: write_string_array,
        f.HANDLE_RELEASES: write_bool,
        f.HANDLE_SNAPSHOTS: write_bool,
        f.MAX_UNIQUE_SNAPSHOTS: write_int,
        f.SUPPRESS_POM_CONSISTENCY_CHECKS: write_bool,
        f.BLACKED_OUT: write_bool,
        f.DOWNLOAD_REDIRECT: write_bool,
        f.PRIORITY_RESOLUTION: write_bool,
        f.CDN_REDIRECT: write_bool,
        f.BLOCK_PUSHING_SCHEMA1: write_bool,
        f.DEBIAN_TRIVIAL_LAYOUT: write_bool,
        f.EXTERNAL_DEPENDENCIES_ENABLED: write_bool,
        f.EXTERNAL_DEPENDENCIES_PATTERNS: write_string_array,
        f.CHECKSUM_POLICY_TYPE: write_string,
        f.MAX_UNIQUE_TAGS: write_int,
        f.SNAPSHOT_VERSION_BEHAVIOR: write_string,
        f.XRAY_INDEX: write_bool,
        f.PROPERTY_SETS: write_string_array,
        f.ARCHIVE_BROWSING_ENABLED: write_bool,
        f.CALCULATE_YUM_METADATA: write_bool,
        f.YUM_ROOT_DEPTH: write_int,
        f.DOCKER_API_VERSION: write_string,
        f.ENABLE_FILE_LISTS_INDEXING: write_bool,
        f.OPTIONAL_INDEX_COMPRESSION_FORMATS: write_string_array,
        f.USERNAME: write_string,
        f.PASSWORD: write_string,
        f.PROXY: write_string,
        f.REMOTE_REPO_CHECKSUM_POLICY_TYPE: write_string,
        f.HARD_FAIL: write_bool,
        f.OFFLINE: write_bool,
        f.STORE_ARTIFACTS_LOCALLY: write_bool,
        f.SOCKET_TIMEOUT_MILLIS: write_int,
        f.LOCAL_ADDRESS: write_string,
        f.RETRIEVAL_CACHE_PERIOD_SECS: write_int,
        f.FAILED_RETRIEVAL_CACHE_PERIOD_SECS: write_int,
        f.MISSED_RETRIEVAL_CACHE_PERIOD_SECS: write_int,
        f.UNUSED_ARTIFACTS_CLEANUP_ENABLED: write_bool,
        f.UNUSED_ARTIFACTS_CLEANUP_PERIOD_HOURS: write_int,
        f.ASSUMED_OFFLINE_PERIOD_SECS: write_int,
        f.FETCH_JARS_EAGERLY: write_bool,
        f.FETCH_SOURCES_EAGERLY: write_bool,
        f.SHARE_CONFIGURATION: write_bool,
        f.SYNCHRONIZE_PROPERTIES: write_bool,
        f.BLOCK_MISMATCHING_MIME_TYPES: write_bool,
        f.ALLOW_ANY_HOST_AUTH: write_bool,
        f.ENABLE_COOKIE_MANAGEMENT: write_bool,
        f.BOWER_REGISTRY_URL: write_string,
        f.COMPOSER_REGISTRY_URL: write_string,
        f.PYPI_REGISTRY_URL: write_string,
        f.VCS_TYPE: write_string,
        f.VCS_GIT_PROVIDER: write_string,
        f.VCS_GIT_DOWNLOAD_URL: write_string,
        f.BYPASS_HEAD_REQUESTS: write_bool,
        f.CLIENT_TLS_CERTIFICATE: write_string,
        f.FEED_CONTEXT_PATH: write_string,
        f.DOWNLOAD_CONTEXT_PATH: write_string,
        f.V3_FEED_URL: write_string,
        f.CONTENT_SYNCHRONISATION: write_content_synchronisation,
        f.LIST_REMOTE_FOLDER_ITEMS: write_bool,
        f.REJECT_INVALID_JARS: write_bool,
        f.PODS_SPECS_REPO_URL: write_string,
        f.ENABLE_TOKEN_AUTHENTICATION: write_bool,
        f.REPOSITORIES: write_string_array,
        f.ARTIFACTORY_REQUESTS_CAN_RETRIEVE_REMOTE_ARTIFACTS: write_bool,
        f.KEY_PAIR: write_string,
        f.POM_REPOSITORY_REFERENCES_CLEANUP_POLICY: write_string,
        f.DEFAULT_DEPLOYMENT_REPO: write_string,
        f.FORCE_MAVEN_AUTHENTICATION: write_bool,
        f.FORCE_NUGET_AUTHENTICATION: write_bool,
        f.EXTERNAL_DEPENDENCIES_REMOTE_REPO: write_string,
    }
)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bool, int, float, date))


def validate_entry(field: str, value: Any) -> None:
    """Check that ``field`` is a known template key with a scalar or list value."""
    if field not in FIELD_WRITERS:
        raise InvalidFieldError(field, "unknown key")
    if _is_scalar(value):
        return
    if isinstance(value, list) and all(_is_scalar(item) for item in value):
        return
    raise InvalidFieldError(field, f"unsupported value type {type(value).__name__}")


def render_value(value: Any) -> str:
    """Render a decoded template value in the string form the writers parse."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, list):
        return ",".join(render_value(item) for item in value)
    return str(value)


def write_answer(config: dict[str, Any], field: str, value: str) -> None:
    """Coerce ``value`` with the writer registered for ``field`` and store it."""
    writer = FIELD_WRITERS.get(field)
    if writer is None:
        raise InvalidFieldError(field, "unknown key")
    writer(config, field, value)


def coerce_config(config: Mapping[str, Any]) -> dict[str, Any]:
    """Validate and coerce every entry of one repository configuration."""
    result = dict(config)
    for field, value in config.items():
        validate_entry(field, value)
        write_answer(result, field, render_value(value))
    return result


def to_json_value(field: str, value: Any) -> Any:
    """Return ``value`` in a JSON-encodable form for the batch payload.

    YAML dates and timestamps become ISO-8601 strings; nested mappings and
    lists are converted recursively.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, list):
        return [to_json_value(field, item) for item in value]
    if isinstance(value, dict):
        return {str(name): to_json_value(field, item) for name, item in value.items()}
    raise InvalidFieldError(field, f"unsupported value type {type(value).__name__}")


def normalize_batch_config(config: Mapping[str, Any]) -> dict[str, Any]:
    """Convert one batch configuration into JSON-encodable values."""
    return {str(field): to_json_value(str(field), value) for field, value in config.items()}

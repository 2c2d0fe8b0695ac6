"""Dot-separated version comparison for platform feature gates."""

from __future__ import annotations

import re

MINIMAL_LIFECYCLE_ARTIFACTORY_VERSION = "7.63.2"
MIN_BULK_CREATE_VERSION = "7.84.3"
MIN_BULK_UPDATE_VERSION = "7.104.2"
MIN_MULTI_SOURCE_AND_PACKAGES_VERSION = "7.114.0"

_PART_PATTERN = re.compile(r"^(\d+)(.*)$")


def _part_key(token: str) -> tuple[int, str]:
    match = _PART_PATTERN.match(token)
    if match is None:
        return -1, token
    return int(match.group(1)), match.group(2)


def compare_versions(left: str, right: str) -> int:
    """Compare two versions part by part; return -1, 0 or 1."""
    left_parts = left.strip().lstrip("v").split(".")
    right_parts = right.strip().lstrip("v").split(".")
    width = max(len(left_parts), len(right_parts))
    left_parts += ["0"] * (width - len(left_parts))
    right_parts += ["0"] * (width - len(right_parts))
    for left_token, right_token in zip(left_parts, right_parts, strict=True):
        left_key = _part_key(left_token)
        right_key = _part_key(right_token)
        if left_key == right_key:
            continue
        # A bare number sorts after the same number with a pre-release suffix.
        if left_key[0] == right_key[0] and (not left_key[1] or not right_key[1]):
            return 1 if not left_key[1] else -1
        return 1 if left_key > right_key else -1
    return 0


def is_at_least(actual: str, minimum: str) -> bool:
    """Return whether ``actual`` is the same as or newer than ``minimum``."""
    if not minimum:
        return True
    if not actual:
        return False
    return compare_versions(actual, minimum) >= 0

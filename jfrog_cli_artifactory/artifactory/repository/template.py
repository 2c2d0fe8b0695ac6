"""Repository template loading with ``${var}`` substitution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from jfrog_cli_artifactory.config import parse_template_vars, replace_template_vars
from jfrog_cli_artifactory.errors import ValidationError

_YAML_SUFFIXES = {".yaml", ".yml"}

RepositoryConfig = dict[str, Any]


def parse_template(content: str, *, yaml_format: bool = False) -> RepositoryConfig | list[RepositoryConfig]:
    """Decode template text into one configuration or a list of configurations."""
    try:
        decoded = yaml.safe_load(content) if yaml_format else json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValidationError(f"failed to parse repository template: {exc}") from exc
    if isinstance(decoded, dict):
        return decoded
    if isinstance(decoded, list) and all(isinstance(item, dict) for item in decoded):
        return decoded
    raise ValidationError(
        f"unexpected repository configuration type: {type(decoded).__name__}"
    )


def load_template(
    template_path: Path, raw_vars: str | None = None
) -> RepositoryConfig | list[RepositoryConfig]:
    """Read a JSON or YAML template file and substitute template variables."""
    try:
        content = template_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValidationError(f"failed to read repository template {template_path}: {exc}") from exc
    content = replace_template_vars(content, parse_template_vars(raw_vars))
    return parse_template(content, yaml_format=template_path.suffix.lower() in _YAML_SUFFIXES)

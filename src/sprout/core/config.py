"""Per-template configuration loaded from `.template.json`."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sprout.core.errors import ConfigParseError

CONFIG_FILENAME = ".template.json"


@dataclass(kw_only=True)
class TemplateConfig:
    """
    Optional settings shipped alongside a template.

    Attributes:
        files: Reserved list of template-relative paths. Read but not used
            when copying the template.
        post_message: Text printed after the project has been created.
        description: One-line summary shown when listing templates.
    """

    files: list[str] | None = None
    post_message: str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TemplateConfig:
        """Build a config from decoded JSON. Unknown keys are ignored."""
        files = data.get("files")
        if files is not None:
            if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
                raise ConfigParseError(f"'files' must be a list of strings, got {files!r}.")
            files = list(files)

        post_message = _optional_str(data, "postMessage")
        description = _optional_str(data, "description")

        return cls(files=files, post_message=post_message, description=description)


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigParseError(f"'{key}' must be a string, got {value!r}.")
    return value


def load_template_config(template_root: Path) -> TemplateConfig:
    """
    Read the configuration of the template at *template_root*.

    A missing `.template.json` yields an empty configuration.

    Raises:
        ConfigParseError: The file exists but is not a JSON object with
            correctly typed recognized fields.
    """
    config_path = template_root / CONFIG_FILENAME
    if not config_path.is_file():
        return TemplateConfig()

    raw = config_path.read_bytes()

    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"{config_path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"{config_path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigParseError(f"{config_path} must contain a JSON object.")

    try:
        return TemplateConfig.from_dict(data)
    except ConfigParseError as exc:
        raise ConfigParseError(f"{config_path}: {exc}") from None

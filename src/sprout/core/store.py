"""Catalog of the templates available for scaffolding."""

from __future__ import annotations

import importlib.resources as ilr
from dataclasses import dataclass
from pathlib import Path

from sprout.core.config import TemplateConfig, load_template_config
from sprout.core.errors import UnknownTemplateError

_IGNORED_DIRS = frozenset({"__pycache__"})


def default_root() -> Path:
    """Directory holding the templates bundled with sprout."""
    return Path(str(ilr.files("sprout").joinpath("templates")))


@dataclass(frozen=True)
class Template:
    """A named directory tree used as the source of a new project."""

    name: str
    path: Path

    def load_config(self) -> TemplateConfig:
        return load_template_config(self.path)


class TemplateStore:
    """Read-only view over a directory containing one subdirectory per template."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else default_root()

    def list_templates(self) -> list[str]:
        """Return the template names, sorted."""
        if not self.root.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.root.iterdir()
            if entry.is_dir() and not entry.name.startswith(".") and entry.name not in _IGNORED_DIRS
        )

    def get(self, name: str) -> Template:
        if name not in self.list_templates():
            raise UnknownTemplateError(f"No template named {name!r} in {self.root}.")
        return Template(name=name, path=self.root / name)

    def load_config(self, name: str) -> TemplateConfig:
        return self.get(name).load_config()

"""Copy a template tree into a fresh project directory."""

from __future__ import annotations

import re
import shutil
from collections.abc import Mapping
from pathlib import Path

from sprout.core.config import CONFIG_FILENAME
from sprout.core.errors import TargetExistsError, ValidationError
from sprout.core.render import render

SKIP_NAMES = frozenset({CONFIG_FILENAME, "node_modules", "__pycache__"})

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
PROJECT_NAME_MESSAGE = "Project name may only include letters, numbers, underscores and hashes."


def validate_project_name(name: str) -> None:
    """Raise `ValidationError` unless *name* is letters, digits, `_` or `-`."""
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        raise ValidationError(PROJECT_NAME_MESSAGE)


def create_project(target: Path) -> None:
    """Create the project root. It must not exist yet."""
    if target.exists():
        raise TargetExistsError(f"{target} exists. Please delete first.")
    target.mkdir()


def _copy_file(source: Path, destination: Path, variables: Mapping[str, object]) -> None:
    raw = source.read_bytes()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError:
        # binary
        destination.write_bytes(raw)
    else:
        destination.write_bytes(render(content, variables).encode("utf-8"))
    shutil.copymode(source, destination)


def copy_tree(
    source: Path,
    destination: Path,
    variables: Mapping[str, object],
    _prefix: str = "",
) -> list[str]:
    """
    Recursively copy *source* into the existing directory *destination*.

    Every file is rendered with the same *variables*, whatever its depth.
    Entries named in `SKIP_NAMES` are left out at every level. Symlinks are
    recreated as links with the same target and never followed. Other
    special files (sockets, FIFOs) are not copied.

    Returns:
        Created entries relative to the project root, directories with a
        trailing ``/``.
    """
    created: list[str] = []

    for entry in sorted(source.iterdir(), key=lambda p: p.name):
        if entry.name in SKIP_NAMES:
            continue

        rel = f"{_prefix}{entry.name}"
        out = destination / entry.name

        if entry.is_symlink():
            out.symlink_to(entry.readlink(), target_is_directory=entry.is_dir())
            created.append(rel)
        elif entry.is_dir():
            out.mkdir()
            created.append(f"{rel}/")
            created.extend(copy_tree(entry, out, variables, _prefix=f"{rel}/"))
        elif entry.is_file():
            _copy_file(entry, out, variables)
            created.append(rel)

    return created


def materialize(template_root: Path, target: Path, variables: Mapping[str, object]) -> list[str]:
    """
    Create *target* and fill it with the rendered contents of *template_root*.

    Nothing is rolled back on failure: a partially written project stays on
    disk.

    Raises:
        TargetExistsError: *target* already exists. Nothing is written.
    """
    create_project(target)
    return copy_tree(template_root, target, variables)

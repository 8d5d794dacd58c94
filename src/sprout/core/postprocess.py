"""Dependency installation after a project has been created."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Ecosystem:
    """
    A dependency-managed project type.

    Attributes:
        name: Short identifier shown to the user.
        manifest: File at the template root that marks this ecosystem.
        installers: Install commands in order of preference. The first one
            whose executable is on ``PATH`` is used.
    """

    name: str
    manifest: str
    installers: tuple[tuple[str, ...], ...]

    @property
    def executables(self) -> list[str]:
        return [cmd[0] for cmd in self.installers]


ECOSYSTEMS: tuple[Ecosystem, ...] = (
    Ecosystem(name="node", manifest="package.json", installers=(("yarn",), ("npm", "install"))),
    Ecosystem(name="python", manifest="pyproject.toml", installers=(("uv", "sync"),)),
)


@dataclass(frozen=True)
class PostProcessResult:
    ecosystem: Ecosystem | None = None
    installer: tuple[str, ...] | None = None
    returncode: int | None = None

    @property
    def skipped(self) -> bool:
        return self.ecosystem is None

    @property
    def missing_installer(self) -> bool:
        return self.ecosystem is not None and self.installer is None

    @property
    def failed(self) -> bool:
        return self.returncode is not None and self.returncode != 0


def detect_ecosystem(template_root: Path) -> Ecosystem | None:
    for ecosystem in ECOSYSTEMS:
        if (template_root / ecosystem.manifest).is_file():
            return ecosystem
    return None


def find_installer(ecosystem: Ecosystem) -> tuple[tuple[str, ...], str] | None:
    """
    Return the first available install command and the resolved executable.

    Commands run through the resolved path, which also covers ``.cmd`` shims
    on Windows.
    """
    for cmd in ecosystem.installers:
        executable = shutil.which(cmd[0])
        if executable:
            return cmd, executable
    return None


def post_process(template_root: Path, target: Path) -> PostProcessResult:
    """
    Install dependencies inside *target* when the template needs it.

    The installer inherits the terminal and is waited on. Its exit status is
    reported back, never raised.
    """
    ecosystem = detect_ecosystem(template_root)
    if ecosystem is None:
        return PostProcessResult()

    found = find_installer(ecosystem)
    if found is None:
        return PostProcessResult(ecosystem=ecosystem)

    installer, executable = found
    completed = subprocess.run([executable, *installer[1:]], cwd=target, check=False)
    return PostProcessResult(ecosystem=ecosystem, installer=installer, returncode=completed.returncode)

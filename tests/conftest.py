"""Shared fixtures for the sprout test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sprout.core import TemplateStore


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A store with a configured `basic` template and an unconfigured `plain` one."""
    root = tmp_path / "templates"

    basic = root / "basic"
    write(basic / "a.txt", "Hello {{projectName}}\n")
    write(basic / "dir" / "b.txt", "b of {{ projectName }}\n")
    write(basic / "dir" / "sub" / "c.txt", "name={{ projectName }}\n")
    write(basic / "node_modules" / "left-pad.js", "module.exports = 1;\n")
    write(basic / "dir" / "node_modules" / "nested.js", "module.exports = 2;\n")
    write(basic / "dir" / ".template.json", "{}")
    write(
        basic / ".template.json",
        json.dumps(
            {
                "description": "Basic test template.",
                "files": ["a.txt"],
                "postMessage": "Remember to water {{projectName}}.",
                "unknownKey": 42,
            }
        ),
    )

    plain = root / "plain"
    write(plain / "index.html", "<h1>{{ projectName }}</h1>\n")

    return root


@pytest.fixture
def store(templates_root: Path) -> TemplateStore:
    return TemplateStore(templates_root)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty working directory the test process is chdir'd into."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work

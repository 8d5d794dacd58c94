"""State of a single scaffolding run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sprout.core.config import TemplateConfig
from sprout.core.materialize import materialize, validate_project_name
from sprout.core.postprocess import PostProcessResult, post_process
from sprout.core.store import Template, TemplateStore


@dataclass(kw_only=True)
class Session:
    """
    One scaffolding run.

    Attributes:
        template: The selected template.
        project_name: Validated name of the new project.
        target: Directory the project is created in.
        config: The template's configuration.
    """

    template: Template
    project_name: str
    target: Path
    config: TemplateConfig

    @classmethod
    def open(
        cls,
        store: TemplateStore,
        template_name: str,
        project_name: str,
        cwd: Path | None = None,
    ) -> Session:
        """
        Resolve the user's choices into a session.

        The template configuration is parsed here so that a broken
        `.template.json` aborts the run before anything is written.
        """
        validate_project_name(project_name)
        template = store.get(template_name)
        config = template.load_config()
        base = cwd if cwd is not None else Path.cwd()
        return cls(
            template=template,
            project_name=project_name,
            target=base / project_name,
            config=config,
        )

    @property
    def variables(self) -> dict[str, str]:
        return {"projectName": self.project_name}

    def materialize(self) -> list[str]:
        return materialize(self.template.path, self.target, self.variables)

    def post_process(self) -> PostProcessResult:
        return post_process(self.template.path, self.target)

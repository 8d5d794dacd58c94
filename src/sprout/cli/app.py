"""Typer CLI application for sprout."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import sprout
from sprout.cli._prompts import prompt_project_name, prompt_template
from sprout.core import (
    CONFIG_FILENAME,
    ConfigParseError,
    PostProcessResult,
    Session,
    TargetExistsError,
    TemplateStore,
    ValidationError,
    validate_project_name,
)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"sprout {sprout.__version__}")
        raise Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """sprout: scaffold new projects from directory templates."""


def _print_templates(store: TemplateStore) -> None:
    names = store.list_templates()
    width = max((len(n) for n in names), default=0) + 2

    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for name in names:
        try:
            description = store.load_config(name).description or ""
        except ConfigParseError:
            description = f"(invalid {CONFIG_FILENAME})"
        _console.print(
            f"[dim]│[/]  [bold cyan]{escape(name.ljust(width))}[/] [dim]{escape(description)}[/]",
            emoji=False,
        )
    _console.print("[dim]│[/]")
    _console.print()


def _print_answer(question: str, answer: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(answer)}", emoji=False)
    _console.print("[dim]│[/]")


def _report_install(result: PostProcessResult) -> None:
    ecosystem = result.ecosystem
    if ecosystem is None:
        return

    if result.missing_installer:
        managers = " or ".join(ecosystem.executables)
        _console.print(f"[dim]│[/]  [dim]No {managers} found. Cannot run installation.[/]")
    elif result.failed:
        cmd = " ".join(result.installer or ())
        _console.print(
            f"[dim]│[/]  [yellow]Warning:[/] '{cmd}' exited with code {result.returncode}."
        )
    _console.print("[dim]│[/]")


@app.command()
def create(
    project_name: Annotated[
        str | None,
        Argument(help="Name for the new project directory", show_default=False),
    ] = None,
    template_name: Annotated[
        str | None,
        Option(
            "--template",
            "-t",
            help="Project template. Run with --list-templates / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    templates_dir: Annotated[
        Path | None,
        Option(
            "--templates-dir",
            help="Directory containing one subdirectory per template.",
            envvar="SPROUT_TEMPLATES_DIR",
            file_okay=False,
            show_default=False,
        ),
    ] = None,
    skip_install: Annotated[
        bool,
        Option("--skip-install", help="Do not install dependencies after scaffolding."),
    ] = False,
    list_templates: Annotated[
        bool,
        Option("--list-templates", "-l", help="List all available templates and exit."),
    ] = False,
) -> None:
    """Create a new project from a template."""
    store = TemplateStore(templates_dir)

    if list_templates:
        _print_templates(store)
        raise Exit()

    names = store.list_templates()

    if not names:
        _console.print(f"[bold red]Error:[/] No templates found in {escape(str(store.root))}.")
        raise Exit(code=1)

    if project_name is not None:
        try:
            validate_project_name(project_name)
        except ValidationError as exc:
            _console.print(f"[bold red]Error:[/] {exc}")
            raise Exit(code=2) from None

    if template_name is not None and template_name not in names:
        valid = ", ".join(f"'{n}'" for n in names)
        _console.print()
        _console.print(
            f"[bold red]Error:[/] [bold]{escape(repr(template_name))}[/] is not a valid template.",
            emoji=False,
        )
        _console.print(f"[dim]Valid values:[/] {escape(valid)}", emoji=False)
        raise Exit(code=2)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  sprout v{sprout.__version__}")
    _console.print("[dim]│[/]")

    # Interactive prompts for missing options
    if template_name is None:
        template_name = prompt_template(names)
    else:
        _print_answer("What project template would you like to generate?", template_name)

    if project_name is None:
        project_name = prompt_project_name()
    else:
        _print_answer("Project name:", project_name)

    try:
        session = Session.open(store, template_name, project_name)
        _console.print(f"[bold green]◇[/]  Creating {project_name}/...")
        created = session.materialize()
    except (TargetExistsError, ConfigParseError) as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}", emoji=False)
        raise Exit(code=1) from None

    for name in created:
        _console.print(f"[dim]│[/]  {escape(name)}", emoji=False)
    _console.print("[dim]│[/]")

    if not skip_install:
        _report_install(session.post_process())

    _console.print("[bold cyan]●[/]  Done!")
    _console.print(f"[dim]│[/]  Go into the project: cd {project_name}")

    if session.config.post_message:
        _console.print()
        _console.print(
            escape(session.config.post_message),
            style="yellow",
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    _console.print()

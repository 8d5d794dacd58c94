"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from sprout.core import ValidationError, validate_project_name

_console = Console()

T = TypeVar("T")


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _text(question: str) -> str:
    """Display a clack-style free-text prompt, re-asking until the answer is valid."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    error_lines = 0
    while True:
        _console.print("[dim]│[/]  ", end="")
        answer = input().strip()
        try:
            validate_project_name(answer)
        except ValidationError as exc:
            _console.print(f"[dim]│[/]  [bold red]{exc}[/]")
            error_lines += 2
            continue
        break

    # Overwrite the ◆ question + │ bar + every input/error line
    _clear_lines(3 + error_lines)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _print_bar()

    return answer


def prompt_template(names: list[str]) -> str:
    """Prompt user to choose a project template."""
    return _select("What project template would you like to generate?", names, names)


def prompt_project_name() -> str:
    """Prompt user for the name of the new project."""
    return _text("Project name:")

"""
demo_path.py – Terminal demo for the learning path generator

Run:
    python demo_path.py

Uses the live OpenAI generator when OPENAI_API_KEY is set in .env,
otherwise the canned mock path.  See .env.example for format.
"""

from __future__ import annotations

import sys
from pathlib import Path

# ── make src/ importable without installing the package ──────────────────────
sys.path.insert(0, str(Path(__file__).parent / "src"))

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from career_path.config import configure_logging, get_settings
from career_path.errors import CareerPathError, ConfigurationError
from career_path.models import ExperienceLevel, LearningStep, StepType
from career_path.path_generator import build_generator
from career_path.session import DEFAULT_GOAL, PathSession, SubmissionState

console = Console()

TYPE_STYLE = {
    StepType.COURSE:  "bold cyan",
    StepType.PROJECT: "bold green",
}

TYPE_ICON = {
    StepType.COURSE:  "📘",
    StepType.PROJECT: "🛠",
}


# ─── Display helpers ─────────────────────────────────────────────────────────

def show_path(goal: str, level: ExperienceLevel, path: list[LearningStep]) -> None:
    """Render the learning path as a rich table."""
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white on dark_cyan",
        padding=(0, 1),
    )
    table.add_column("#",           justify="right", no_wrap=True)
    table.add_column("Type",        justify="left",  min_width=10)
    table.add_column("Title",       style="white",   min_width=28)
    table.add_column("Duration",    justify="left",  no_wrap=True)
    table.add_column("Description", style="dim white", min_width=32)

    for s in path:
        style = TYPE_STYLE.get(s.type, "white")
        table.add_row(
            str(s.step),
            f"[{style}]{TYPE_ICON.get(s.type, '?')} {s.type.value}[/{style}]",
            s.title,
            s.duration,
            s.description,
        )

    console.print()
    console.print(Panel(
        table,
        title=f"[bold]Learning path — {goal} ({level.value})[/bold]",
        border_style="cyan",
    ))


# ─── Main ────────────────────────────────────────────────────────────────────

def main() -> None:
    configure_logging()
    settings = get_settings()

    console.print()
    console.print(Panel(
        "[bold]Learning Path Generator[/bold]\n"
        f"[dim]{settings.status_summary()['Generation service']}[/dim]",
        style="on dark_cyan",
        expand=False,
    ))

    try:
        generator = build_generator(settings)
    except ConfigurationError as e:
        console.print(f"\n[bold red]Configuration error:[/bold red] {e}")
        console.print("[dim]Create a .env file based on .env.example and retry.[/dim]")
        sys.exit(1)

    try:
        goal = Prompt.ask("[cyan]1.[/cyan] Your career goal", default=DEFAULT_GOAL)
        level = ExperienceLevel(Prompt.ask(
            "[cyan]2.[/cyan] Your experience level",
            choices=[lvl.value for lvl in ExperienceLevel],
            default=ExperienceLevel.BEGINNER.value,
        ))

        session = PathSession()
        with console.status("[bold blue]Generating your learning path…"):
            state = session.submit(generator, goal, level)

        if state == SubmissionState.FAILED:
            console.print(f"\n[bold red]✗[/bold red] {session.error}")
            sys.exit(1)

        show_path(session.goal.strip(), session.level, session.path)
        for v in session.warnings:
            console.print(f"[yellow]⚠ [{v.code}] {v.message}[/yellow]")

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(0)

    except CareerPathError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
vercel-to-netlify Command Line Interface

Main entry point for the vercel-to-netlify CLI.
"""

import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console

from vercel_to_netlify.wizard.exceptions import MigratorError, get_error_code
from vercel_to_netlify.wizard.logging_config import setup_logging

console = Console()


def _fail(error: Exception):
    """Print an error with its remediation and exit with the mapped code."""
    if isinstance(error, MigratorError):
        console.print(f"[red]Error:[/red] {error.message}")
        if error.details:
            console.print(f"[dim]Details: {error.details}[/dim]")
        if error.remediation:
            console.print(f"[yellow]To fix:[/yellow] {error.remediation}")
    else:
        console.print(f"[red]Error:[/red] {error}")
    sys.exit(get_error_code(error))


path_option = click.option(
    "--path", "-p",
    type=click.Path(file_okay=False),
    default=os.getcwd,
    show_default="current directory",
    help="Project directory path",
)


@click.group()
@click.version_option(package_name="vercel-to-netlify")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def main(verbose: bool):
    """vercel-to-netlify: migrate projects from Vercel to Netlify"""
    setup_logging(level=logging.DEBUG if verbose else None)


@main.command()
@path_option
@click.option("--answers", type=click.Path(exists=True, dir_okay=False), help="YAML answers file for a silent run")
@click.option("--yes", "-y", is_flag=True, help="Accept default answers without prompting")
def migrate(path: str, answers: str, yes: bool):
    """Start the interactive migration process.

    Examples:
        vercel-to-netlify migrate                      # Guided migration
        vercel-to-netlify migrate --yes                # Use defaults
        vercel-to-netlify migrate --answers ans.yaml   # Silent migration
    """
    from vercel_to_netlify.converter.project import resolve_project_path
    from vercel_to_netlify.wizard import MigrationOrchestrator
    from vercel_to_netlify.wizard.orchestrator import MigrationAnswers, load_answers
    from vercel_to_netlify.wizard.steps import MIGRATION_STEPS

    try:
        project_path = resolve_project_path(path)

        preset = None
        if answers:
            preset = load_answers(Path(answers))
        elif yes:
            preset = MigrationAnswers()

        wizard = MigrationOrchestrator(
            project_path=project_path,
            console=console,
            answers=preset,
            interactive=preset is None,
        )
        for step in MIGRATION_STEPS:
            wizard.add_step(
                name=step["name"],
                title=step["title"],
                description=step["description"],
                handler=step["handler"],
                skippable=step.get("skippable", False),
            )

        success = wizard.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Migration cancelled.[/yellow]")
        sys.exit(130)
    except MigratorError as e:
        _fail(e)

    sys.exit(0 if success else 1)


@main.command("convert-config")
@path_option
def convert_config(path: str):
    """Convert vercel.json to netlify.toml."""
    from vercel_to_netlify.converter.project import NETLIFY_CONFIG_FILE, convert_project_config

    try:
        convert_project_config(path)
    except MigratorError as e:
        _fail(e)

    console.print(f"[green]✓[/green] Created {NETLIFY_CONFIG_FILE}")
    console.print("[green]✓[/green] Configuration converted successfully")


@main.command("env-migrate")
@path_option
def env_migrate(path: str):
    """Migrate environment variables from .env files."""
    from vercel_to_netlify.converter.project import migrate_project_env

    try:
        report = migrate_project_env(path)
    except MigratorError as e:
        _fail(e)

    if report is None:
        console.print("[yellow]⚠[/yellow] No .env files found")
        return

    console.print(
        f"[green]✓[/green] Migrated {report.total} variables from {', '.join(report.source_files)}"
    )
    for written in report.written_files:
        console.print(f"  [dim]→[/dim] {written.name}")
    console.print("[green]✓[/green] Environment variables processed")


@main.command()
@path_option
@click.option("--framework", "-f", default="Next.js", show_default=True, help="Framework name")
def checklist(path: str, framework: str):
    """Generate the migration checklist."""
    from vercel_to_netlify.converter.project import write_project_checklist

    try:
        checklist_path = write_project_checklist(path, framework)
    except MigratorError as e:
        _fail(e)

    console.print(f"[green]✓[/green] Checklist generated: {checklist_path.name}")


@main.command()
@click.option("--host", help="Interface to bind (default: $V2N_HOST or 127.0.0.1)")
@click.option("--port", type=int, help="Port to listen on (default: $PORT or 3001)")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode")
def serve(host: str, port: int, debug: bool):
    """Run the migration HTTP API."""
    from vercel_to_netlify.server import run_server

    run_server(host=host, port=port, debug=debug)


@main.command("help")
@click.argument("topic", required=False)
def help_topic(topic: str):
    """Show detailed help for a topic.

    Topics: config, env, checklist, server

    Examples:
        vercel-to-netlify help          # List all topics
        vercel-to-netlify help env      # Show env help
    """
    from rich.panel import Panel
    from vercel_to_netlify.help_topics import get_help_content, list_topics, get_topic_names

    if not topic:
        console.print("[bold blue]vercel-to-netlify Help Topics[/bold blue]")
        console.print()
        for topic_name, description in list_topics():
            console.print(f"  [cyan]{topic_name}[/cyan] - {description}")
        console.print()
        console.print("[dim]Run 'vercel-to-netlify help <topic>' for details[/dim]")
        return

    content = get_help_content(topic.lower())
    if content:
        console.print(Panel(content, border_style="blue", title=f"Help: {topic}"))
    else:
        console.print(f"[red]Unknown topic: {topic}[/red]")
        console.print(f"[dim]Available topics: {', '.join(get_topic_names())}[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()

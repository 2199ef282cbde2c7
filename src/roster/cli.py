"""CLI entry point for the roster manager.

Provides an interactive shell over an in-memory roster:
- add / remove / undo mutate the roster and print the change notification
- list / sort / search render snapshots without changing anything
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import click
from pydantic import ValidationError

from roster.config import ConfigError, RosterConfig, find_config, load_config
from roster.enrollment import EnrollmentError, EnrollmentEvent, EnrollmentService
from roster.forms import DEFAULT_BIRTH_DATE, DEFAULT_MAJOR, MAJORS, StudentForm, seed_demo_students
from roster.logging import setup_logging
from roster.students import Student, StudentValidationError

logger = logging.getLogger(__name__)

SHELL_HELP = """Commands:
  add                 add a student (prompts for each field)
  remove <FN>         remove the student with faculty number FN
  undo                revert the last add or remove
  list                show all students in the order they were added
  sort name|fn        show students sorted by name or faculty number
  search <TERM>       show students whose name or FN contains TERM
  help                show this message
  quit                leave the shell"""


def render_students(students: Sequence[Student]) -> None:
    """Print one numbered line per student."""
    if not students:
        click.echo("  (no students)")
        return
    for index, student in enumerate(students, start=1):
        click.echo(f"  {index:>3}. {student}")


def format_event(event: EnrollmentEvent) -> str:
    """Format an event as a status line in local time."""
    return f"{event.occurred_at.astimezone():%H:%M:%S} - {event.message}"


def build_service(config: RosterConfig) -> EnrollmentService:
    """Create a roster from configuration, seeding demo data if enabled."""
    service = EnrollmentService(undo_limit=config.undo_limit)
    if config.seed_demo:
        seed_demo_students(service)
    return service


def _validation_message(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        field = ".".join(str(loc) for loc in detail["loc"])
        parts.append(f"{field}: {detail['msg']}" if field else detail["msg"])
    return "; ".join(parts)


def prompt_student_form() -> StudentForm:
    """Collect student fields interactively.

    Raises:
        ValidationError: If the collected input is invalid.
    """
    first_name = click.prompt("First name", default="", show_default=False)
    last_name = click.prompt("Last name", default="", show_default=False)
    birth_date = click.prompt(
        "Birth date",
        type=click.DateTime(formats=["%Y-%m-%d", "%d.%m.%Y"]),
        default=DEFAULT_BIRTH_DATE.isoformat(),
    )
    faculty_number = click.prompt("Faculty No", default="", show_default=False)
    major = click.prompt(
        "Major",
        type=click.Choice(MAJORS, case_sensitive=False),
        default=DEFAULT_MAJOR,
    )
    return StudentForm(
        first_name=first_name,
        last_name=last_name,
        birth_date=birth_date.date(),
        faculty_number=faculty_number,
        major=major,
    )


def _add(service: EnrollmentService) -> None:
    try:
        form = prompt_student_form()
        service.add(form.to_student())
    except ValidationError as e:
        click.echo(f"Validation error: {_validation_message(e)}", err=True)
    except (StudentValidationError, EnrollmentError) as e:
        click.echo(f"Validation error: {e}", err=True)


def run_command(service: EnrollmentService, line: str) -> bool:
    """Execute one shell command.

    Args:
        service: Roster the command operates on.
        line: Raw command line.

    Returns:
        False when the shell should exit, True otherwise.
    """
    command, _, argument = line.strip().partition(" ")
    if not command:
        return True
    command = command.lower()
    argument = argument.strip()

    if command in ("quit", "exit"):
        return False
    if command == "help":
        click.echo(SHELL_HELP)
    elif command == "add":
        _add(service)
    elif command == "remove":
        if not service.remove_by_faculty_number(argument):
            click.echo(f"No student with faculty number {argument!r}.")
    elif command == "undo":
        if not service.undo():
            click.echo("Nothing to undo.")
    elif command == "list":
        render_students(service.all())
    elif command == "sort":
        if argument.lower() == "name":
            render_students(service.sorted_by_name())
        elif argument.lower() in ("fn", "faculty"):
            render_students(service.sorted_by_faculty())
        else:
            click.echo("Usage: sort name|fn", err=True)
    elif command == "search":
        render_students(service.search(argument))
    else:
        click.echo(f"Unknown command {command!r}. Type 'help' for a list.", err=True)
    return True


def _load_config(config_path: Path | None) -> RosterConfig:
    if config_path is None:
        config_path = find_config()
    if config_path is None:
        return RosterConfig()
    return load_config(config_path)


@click.group()
@click.version_option(package_name="roster-manager")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to roster.yaml (auto-detected if not specified)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Roster manager - track students in memory with single-step undo."""
    try:
        config = _load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(
        log_dir=config.get_log_dir(),
        level="DEBUG" if verbose else config.logging.level,
        console=config.logging.console,
    )
    ctx.obj = config


@main.command()
@click.pass_obj
def shell(config: RosterConfig) -> None:
    """Start an interactive roster session."""
    service = build_service(config)

    def on_change(event: EnrollmentEvent) -> None:
        click.echo(format_event(event))
        render_students(service.all())

    subscription = service.events.subscribe(on_change)
    logger.info("Shell started with %d students", len(service))

    click.echo("Student roster. Type 'help' for commands.")
    render_students(service.all())
    try:
        while True:
            try:
                line = click.prompt("roster", prompt_suffix="> ", default="", show_default=False)
                keep_going = run_command(service, line)
            except click.Abort:
                click.echo()
                break
            if not keep_going:
                break
    finally:
        service.events.unsubscribe(subscription.id)
        logger.info("Shell closed with %d students", len(service))


@main.command()
@click.pass_obj
def demo(config: RosterConfig) -> None:
    """Seed the demo students and print them sorted by name."""
    service = EnrollmentService(undo_limit=config.undo_limit)
    seed_demo_students(service)
    render_students(service.sorted_by_name())


if __name__ == "__main__":
    main()

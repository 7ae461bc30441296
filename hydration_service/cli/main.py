"""Main CLI entry point for hydration-service."""

import click

from hydration_service import __version__
from hydration_service.cli.commands import intake, reminder, run, status
from hydration_service.core.settings import get_app_settings
from hydration_service.infra.logging import set_log_context
from hydration_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="hydration")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Hydration reminder - track daily water intake and get reminded to drink.

    \b
    Command Groups:
      intake     Record water and reset today's total
      reminder   Interval, do-not-disturb window and next reminder

    \b
    Quick Start:
      hydration status                    # Today's total and next reminder
      hydration intake add 250            # Record 250 ml
      hydration reminder interval 45      # Remind every 45 minutes
      hydration reminder dnd 23:00 07:00  # Quiet overnight
      hydration run                       # Deliver reminders until Ctrl+C
    """
    ctx.ensure_object(dict)
    if ctx.invoked_subcommand:
        set_log_context(command=ctx.invoked_subcommand)


cli.add_command(status.status)
cli.add_command(intake.intake)
cli.add_command(reminder.reminder)
cli.add_command(run.run)


def main() -> None:
    """Entry point for CLI."""
    if get_app_settings().debug:
        setup_logging(log_level="DEBUG", console_level="DEBUG")
    else:
        setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()

"""CLI entry point for studio-planner."""

import logging

import click

from . import __version__
from .commands import calendar, classes, init, movements, serve, templates
from .settings import get_settings


@click.group()
@click.version_option(version=__version__, prog_name="studio-planner")
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level")
def main(verbose: bool):
    """studio-planner: class calendar and movement sequencing for Pilates studios.

    Example usage:

        # Initialize the database and movement library
        studio-planner init

        # Browse the library and this week's classes
        studio-planner movements list --category Core
        studio-planner calendar week

        # Reuse a class
        studio-planner templates from-class <class-id>
        studio-planner classes from-template <template-id>
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


main.add_command(init)
main.add_command(movements)
main.add_command(classes)
main.add_command(templates)
main.add_command(calendar)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()

"""Main CLI entry point for corpmail."""

import logging

import typer
from typing_extensions import Annotated

from corpmail import __version__
from corpmail.cli import commands
from corpmail.config import get_log_level, load_config

app = typer.Typer(
    name="corpmail",
    help="Provision and manage corporate email accounts",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(commands.account.app, name="account")
app.add_typer(commands.config.app, name="config")
app.command("session")(commands.session.session)


def setup_logging(verbose: bool = False, quiet: bool = False, level: str = "WARNING"):
    """Configure logging based on verbosity, falling back to the configured level."""
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, level, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only log errors")
    ] = False,
):
    """Provision and manage corporate email accounts."""
    setup_logging(verbose, quiet, get_log_level(load_config()))


@app.command()
def version():
    """Show version information."""
    typer.echo(f"corpmail version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

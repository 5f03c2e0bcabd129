"""Collate command line interface."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from collate import __version__
from collate.config import CollateConfig
from collate.constants import DEFAULT_JOBS, DEFAULT_THRESHOLD
from collate.reporting import render_document
from collate.services import PortfolioService
from collate.types.errors import CollateError
from collate.utils.logger import configure_logging, logger


@click.command()
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.argument("author")
@click.option(
    "--threshold",
    "-t",
    type=float,
    default=DEFAULT_THRESHOLD,
    show_default=True,
    envvar="COLLATE_THRESHOLD",
    help="Fraction of a unit's lines the author must exceed to own it.",
)
@click.option(
    "--jobs",
    "-j",
    type=int,
    default=DEFAULT_JOBS,
    show_default=True,
    envvar="COLLATE_JOBS",
    help="Number of files processed in parallel.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, message="collate v%(version)s")
def cli(root: Path, author: str, threshold: float, jobs: int, verbose: bool) -> None:
    """Collate - Collect the code and docs AUTHOR wrote under ROOT.

    Prints a Markdown portfolio of every class member and document section
    mostly written by AUTHOR (an e-mail address), according to git blame.
    """
    configure_logging(verbose)
    try:
        config = CollateConfig(threshold=threshold, jobs=jobs, verbose=verbose)
        excerpts = PortfolioService(author, config).collect(root)
    except CollateError as e:
        logger.debug("Aborting run: {!r}", e)
        click.echo(e.get_formatted_message(), err=True)
        sys.exit(1)

    click.echo(render_document(author, excerpts), nl=False)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()

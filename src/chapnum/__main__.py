"""Command-line interface for chapnum."""

from __future__ import annotations

import logging
import sys

import click

from chapnum import __version__
from chapnum.config import get_config
from chapnum.scraper.series_parser import SeriesPageParser
from chapnum.utils import format_chapter_number

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging for the command line."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to the config file setting).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Recognize chapter numbers in manga chapter titles."""
    config = get_config()
    level = (log_level or config.log_level).upper()
    if level not in LOG_LEVELS:
        raise click.ClickException(
            f"Invalid log_level {level!r} in {config.config_path}, expected one of {LOG_LEVELS}"
        )
    setup_logging(level)
    ctx.obj = config.get_parser()


@cli.command("parse")
@click.argument("title")
@click.argument("chapters", nargs=-1, required=True)
@click.pass_obj
def parse_command(parser, title: str, chapters: tuple[str, ...]) -> None:
    """Print the chapter number of each CHAPTERS text of series TITLE."""
    for chapter in chapters:
        number = parser.parse(title, chapter)
        click.echo(f"{format_chapter_number(number)}\t{chapter}")


@cli.command("series")
@click.argument("html_file", type=click.File("r", encoding="utf-8"))
@click.option("--title", "-t", default=None, help="Series title (defaults to the page heading).")
@click.pass_obj
def series_command(parser, html_file, title: str | None) -> None:
    """Print the numbered chapter list of a saved series page."""
    page = SeriesPageParser(html_file.read(), parser=parser)
    for warning in page.validate_structure():
        logger.warning(warning)

    chapters = page.get_numbered_chapters(title)
    if not chapters:
        raise click.ClickException("No chapters found")

    for chapter in chapters:
        click.echo(f"{format_chapter_number(chapter.number)}\t{chapter.title}\t{chapter.url}")


def main() -> None:
    """Run the chapnum command line."""
    cli()


if __name__ == "__main__":
    main()

"""Command line entry points."""

import logging
from typing import Optional

import rich_click as click
from bpgen import __version__
from bpgen.config import Variant, load_config
from bpgen.exceptions import InvalidInputError
from bpgen.generators import GenerationResult, generate_component
from bpgen.reporter import ConsoleReporter
from rich.console import Console

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True)

# Cyan theme
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.STYLE_OPTIONS_TABLE_EXPAND = False
click.rich_click.STYLE_OPTIONS_PANEL_BOX = None
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running with '--help' for more information."


def configure_logging(verbose: bool) -> None:
    """Send bpgen log records to stderr through rich."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _generate(name: Optional[str], variant: Variant, verbose: bool) -> GenerationResult:
    configure_logging(verbose)

    try:
        config = load_config(name, variant=variant)
    except InvalidInputError as e:
        raise click.ClickException(str(e))

    return generate_component(config, reporter=ConsoleReporter(console))


@click.command(
    help="""
[bold white on cyan] bp [/] Scaffold an [bold cyan]Ionic React[/] component.

Creates [cyan]NAME/NAME.tsx[/] and [cyan]NAME/NAME.styles.js[/] in the current directory.

Put [cyan]--[/] before a NAME that starts with a dash: [cyan]bp -- -Card[/].
"""
)
@click.argument("name", required=False)
@click.option("-v", "--verbose", is_flag=True, help="Log each step to stderr")
@click.version_option(__version__)
def bp(name: Optional[str], verbose: bool) -> None:
    _generate(name, Variant.IONIC, verbose)


@click.command(
    help="""
[bold white on cyan] bp-scoped [/] Scaffold a React component with a [bold cyan]scoped class name[/].

Creates [cyan]NAME/NAME.tsx[/] and [cyan]NAME/NAME.styles.js[/] in the current directory,
both sharing a random 8 character CSS class.

Put [cyan]--[/] before a NAME that starts with a dash: [cyan]bp-scoped -- -Card[/].
"""
)
@click.argument("name", required=False)
@click.option("-v", "--verbose", is_flag=True, help="Log each step to stderr")
@click.version_option(__version__)
def bp_scoped(name: Optional[str], verbose: bool) -> None:
    _generate(name, Variant.SCOPED, verbose)


if __name__ == "__main__":
    bp()

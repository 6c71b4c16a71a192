"""
Command-line interface for PDF Text.
"""

import json
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdf_text import __version__
from pdf_text.config import ChannelConfig
from pdf_text.exceptions import PdfTextException
from pdf_text.utils import configure_logging, get_doc_page_text, get_doc_text, init_doc, parse_page_numbers

console = Console()

password_option = click.option(
    '--password', '-p',
    default='',
    help='Password used to unlock an encrypted PDF',
    type=str
)
json_option = click.option(
    '--json', 'as_json',
    is_flag=True,
    help='Print the raw result as JSON'
)


def _fail(exc: PdfTextException) -> None:
    console.print(f"[bold red]✗ Error:[/bold red] {escape(f'[{exc.code}]')} {escape(exc.message)}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--log-level',
    default='WARNING',
    help='Logging level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False)
)
@click.option(
    '--date-format',
    default=None,
    help='strftime pattern for creation and modification dates',
    type=str
)
@click.pass_context
def cli(ctx, log_level, date_format):
    """
    PDF Text - Inspect PDF files and extract page text.
    """
    config = ChannelConfig().with_updates(log_level=log_level.upper(), date_format=date_format)
    configure_logging(config.log_level)
    ctx.obj = config


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path())
@password_option
@json_option
@click.pass_obj
def show_info(config, input_pdf, password, as_json):
    """
    Display the page count and metadata of a PDF file.

    Example:

        pdf-text info input.pdf -p secret
    """
    try:
        metadata = init_doc(input_pdf, password, date_format=config.date_format)
    except PdfTextException as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(metadata.to_dict(), ensure_ascii=False))
        return

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Pages", str(metadata.page_count))
    for label, value in metadata.info.to_dict().items():
        table.add_row(label, escape(value) if value is not None else "[dim]-[/dim]")

    console.print()
    console.print(table)
    console.print()


@cli.command(name="page")
@click.argument('input_pdf', type=click.Path())
@click.argument('number', type=int)
@password_option
@json_option
def show_page(input_pdf, number, password, as_json):
    """
    Print the text of a single page (1-indexed).

    Example:

        pdf-text page input.pdf 3
    """
    try:
        text = get_doc_page_text(input_pdf, password, number)
    except PdfTextException as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(text, ensure_ascii=False))
    else:
        click.echo(text)


@cli.command(name="text")
@click.argument('input_pdf', type=click.Path())
@click.option(
    '--pages',
    required=True,
    help='Comma separated page numbers (1-indexed), e.g. "1,5,2"',
    type=str
)
@password_option
@json_option
def show_text(input_pdf, pages, password, as_json):
    """
    Print the text of several pages. Missing pages print as empty text.

    Example:

        pdf-text text input.pdf --pages 1,5,2
    """
    try:
        page_numbers = parse_page_numbers(pages)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--pages")

    try:
        texts = get_doc_text(input_pdf, password, page_numbers)
    except PdfTextException as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(texts, ensure_ascii=False))
        return

    for number, text in zip(page_numbers, texts):
        console.rule(f"Page {number}")
        click.echo(text)


if __name__ == '__main__':
    cli()

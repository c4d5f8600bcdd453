"""CLI entry point for Gopher Talk."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from gophertalk import __version__
from gophertalk.config import Settings, validate_port
from gophertalk.history import TranslationHistory
from gophertalk.translation import (
    DEFAULT_CONTEXT,
    TranslationError,
    translate_sentence,
    translate_word,
)

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """Gopher Talk - English to gopher translator."""
    pass


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind host")
@click.option("--port", "-p", required=True, help="Bind port (1-65535)")
@click.option("--timeout", default=5, help="Keep-alive timeout in seconds")
@click.option("--log-level", default="info", help="Log level")
def serve(host: str, port: str, timeout: int, log_level: str):
    """Start the translation server.

    Example: gophertalk serve --port 8080
    """
    from gophertalk.api.main import run_server

    try:
        port_number = validate_port(port)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    console.print(f"[bold blue]Starting Gopher Talk {__version__}[/bold blue]")
    console.print(f"[dim]Binding to http://{host}:{port_number}[/dim]")

    run_server(
        Settings(
            host=host,
            port=port_number,
            timeout_seconds=timeout,
            log_level=log_level,
        )
    )


@cli.command()
@click.argument("word")
def word(word: str):
    """Translate a single English word.

    Example: gophertalk word apple
    """
    history = TranslationHistory(workers=1)
    try:
        console.print(translate_word(DEFAULT_CONTEXT, word, history=history))
    except TranslationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    finally:
        history.close()


@cli.command()
@click.argument("sentence")
def sentence(sentence: str):
    """Translate an English sentence ending with a punctuation mark.

    Example: gophertalk sentence "The quick brown fox."
    """
    history = TranslationHistory(workers=1)
    try:
        console.print(translate_sentence(DEFAULT_CONTEXT, sentence, history=history))
    except TranslationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    finally:
        history.close()


if __name__ == "__main__":
    cli()

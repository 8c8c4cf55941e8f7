"""Command-line interface for taskpal."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .assistant import Assistant, Response
from .config import CONFIG_ENV_VAR, ConfigModel, get_config, load_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: ConfigModel, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, str(config.log_level).upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_console(config: ConfigModel) -> Console:
    return Console(no_color=config.no_color, highlight=False)


def show_response(console: Console, response: Response) -> None:
    """Render one response: the reply, then the task listing if there is one."""
    style = "bold red" if response.is_error else "green"
    console.print(Text(response.message, style=style))
    if response.tasks:
        console.print(Panel(Text(response.tasks), title="Tasks", expand=False))


@click.group(invoke_without_command=True)
@click.option("--config", type=click.Path(dir_okay=False), envvar=CONFIG_ENV_VAR, help="Path to config file")
@click.option("--file", "-f", "file_path", type=click.Path(dir_okay=False), help="Task storage file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, file_path, verbose):
    """taskpal - a small personal task assistant."""
    ctx.ensure_object(dict)

    try:
        settings = load_config(Path(config)) if config else get_config()
    except OSError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(settings, verbose)
    ctx.obj["config"] = settings
    ctx.obj["file_path"] = Path(file_path) if file_path else settings.get_storage_path()

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Start an interactive session (the default)."""
    settings: ConfigModel = ctx.obj["config"]
    console = get_console(settings)
    assistant = Assistant(ctx.obj["file_path"])

    console.print(Text(assistant.ui.greeting(), style="bold"))
    if assistant.startup_message:
        console.print(Text(assistant.startup_message, style="bold red"))

    while not assistant.is_exit:
        try:
            line = console.input(settings.prompt)
        except (KeyboardInterrupt, EOFError):
            show_response(console, assistant.get_response("bye"))
            break
        if not line.strip():
            continue
        show_response(console, assistant.get_response(line))


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def run(ctx, words):
    """Run a single command, e.g. ``taskpal run todo read book``."""
    settings: ConfigModel = ctx.obj["config"]
    console = get_console(settings)
    assistant = Assistant(ctx.obj["file_path"])
    if assistant.startup_message:
        console.print(Text(assistant.startup_message, style="bold red"))
        sys.exit(1)

    response = assistant.get_response(" ".join(words))
    show_response(console, response)
    if response.is_error:
        sys.exit(1)


"""Command-line interface for the todo parser."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __author__, __version__
from .config import get_config, load_config
from .display import dump_tree, render_project
from .errors import ParseError, SyntaxFailure
from .parser import TodoParser


def get_console() -> Console:
    """Console honoring the no_color preference."""
    return Console(no_color=get_config().no_color)


@click.group()
@click.option("--config", type=click.Path(), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="todo-parser")
@click.pass_context
def main(ctx, config, verbose):
    """Todo Parser - parse project and task files written in the todo language."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )

    if config:
        load_config(Path(config))
    else:
        get_config()


@main.command()
def credits():
    """Show who made this tool."""
    console = get_console()
    console.print(f"Author: {__author__}")
    console.print("Project: ToDo Parser")
    console.print("Language: Python")


@main.command()
@click.option("--file", "-f", "file_path", required=True, help="Todo file to parse")
@click.option("--tree", is_flag=True, help="Print the raw syntax tree instead of projects")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed projects as JSON")
def parse(file_path, tree, as_json):
    """Parse a todo file and display its projects."""
    config = get_config()
    console = get_console()
    parser = TodoParser()

    try:
        text = parser.read_source(file_path, config.encoding)
        if tree:
            console.print("Syntax tree:\n")
            dump_tree(parser.parse_tree(text), console, config.tree_indent)
            return

        projects = parser.parse(text)
    except ParseError as e:
        console.print(f"[red]Parsing error: {escape(str(e))}[/red]")
        if isinstance(e, SyntaxFailure) and e.context:
            console.print(e.context, markup=False, highlight=False)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in projects], indent=2, ensure_ascii=False))
        return

    for project in projects:
        render_project(project, console, config)
        console.print()


if __name__ == "__main__":
    main()

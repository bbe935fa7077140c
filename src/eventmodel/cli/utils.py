"""
eventmodel CLI utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform

import typer

from eventmodel._version import get_version
from eventmodel.core import ir
from eventmodel.core.errors import ParseError

LOG_LEVEL_ENV = "EVENTMODEL_LOG_LEVEL"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"eventmodel {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """
    Configure root logging for a CLI run.

    ``--verbose`` wins; otherwise EVENTMODEL_LOG_LEVEL is used, defaulting
    to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def print_parse_error(error: ParseError) -> None:
    typer.echo(f"Parse error: {error}", err=True)


def describe_node(node: ir.Node) -> str:
    """One-line description of a node for tree output."""
    if isinstance(node, ir.Title):
        text = f"title {node.name}"
    elif isinstance(node, ir.Declaration):
        text = f"{node.kind.value} {node.name}"
    elif isinstance(node, ir.Arrow):
        text = f"arrow {node.source} -> {node.target}"
    elif isinstance(node, ir.Line):
        text = f"line {node.source} -- {node.target}"
    else:
        return f"comment {node.text}"

    if node.caption is not None:
        text += f' "{node.caption}"'
    return text

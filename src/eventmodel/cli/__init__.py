"""
eventmodel CLI package.

- project.py: validate, parse and graph commands
- utils.py: Shared utilities
"""

import sys

import typer

from eventmodel.cli.project import graph_command, parse_command, validate_command
from eventmodel.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""eventmodel – parse event modeling notation

  • validate: check every model file of a project (eventmodel.toml)
  • parse: print the syntax tree of one file
  • graph: print the nodes and edges handed to a renderer
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """eventmodel CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="validate")(validate_command)
app.command(name="parse")(parse_command)
app.command(name="graph")(graph_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])

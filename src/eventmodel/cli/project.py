"""
Project commands for the eventmodel CLI.

- validate: Parse every model file of a project
- parse: Print the syntax tree of one model file
- graph: Print the renderer hand-off view of one model file
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from eventmodel.core import ir
from eventmodel.core.errors import ConfigError, ParseError
from eventmodel.core.fileset import discover_model_files
from eventmodel.core.manifest import load_manifest
from eventmodel.core.parser import parse_model_files

from .utils import describe_node, print_parse_error


def _parse_single(file: Path) -> ir.ModelFile:
    if not file.exists():
        typer.echo(f"Error: file not found: {file}", err=True)
        raise typer.Exit(code=1)
    if not file.is_file():
        typer.echo(f"Error: not a file: {file}", err=True)
        raise typer.Exit(code=1)
    try:
        return parse_model_files([file])[0]
    except ParseError as e:
        print_parse_error(e)
        raise typer.Exit(code=1)


def validate_command(
    manifest: str = typer.Option(
        "eventmodel.toml", "--manifest", "-m", help="Path to eventmodel.toml"
    ),
) -> None:
    """
    Parse all model files of the project.

    Operates relative to the directory containing the manifest.
    """
    manifest_path = Path(manifest).resolve()
    root = manifest_path.parent

    try:
        mf = load_manifest(manifest_path)
        files = discover_model_files(root, mf)
        models = parse_model_files(files)
    except ParseError as e:
        print_parse_error(e)
        raise typer.Exit(code=1)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not models:
        typer.echo(f"No model files found for project '{mf.name}'")
        return

    for model in models:
        shown = model.file.relative_to(root) if model.file.is_relative_to(root) else model.file
        typer.echo(f"  {shown}: {len(model.document)} nodes")
    typer.echo(f"✓ {len(models)} model file(s) valid")


def parse_command(
    file: Path = typer.Argument(..., help="Model file to parse"),
    format: str = typer.Option("tree", "--format", "-f", help="Output format: 'tree' or 'json'"),
) -> None:
    """
    Print the syntax tree of a model file.
    """
    model = _parse_single(file)

    if format == "json":
        typer.echo(model.document.model_dump_json(indent=2))
        return
    if format != "tree":
        typer.echo(f"Error: unknown format '{format}'", err=True)
        raise typer.Exit(code=1)

    typer.echo(model.name)
    for node in model.document.nodes:
        typer.echo(f"  {describe_node(node)}")


def graph_command(
    file: Path = typer.Argument(..., help="Model file to parse"),
) -> None:
    """
    Print the title, nodes and edges handed to the renderer, as JSON.
    """
    model = _parse_single(file)
    graph = ir.build_graph(model.document)
    typer.echo(json.dumps(graph.model_dump(mode="json"), indent=2, ensure_ascii=False))

"""
schema-graft CLI - build the field graph and look for graft candidates
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import IO

import click
from rich.console import Console
from rich.table import Table

from schema_graft.pipeline import GraphBuilder
from schema_graft.query import GraftError, candidate_grafts_for, graft_report
from schema_graft.rdf.graph import Graph
from schema_graft.rdf.nquads import read_nquads, write_nquads
from schema_graft.rdf.terms import StatementError
from schema_graft.settings import settings
from schema_graft.sources import (
    DocumentError,
    SourceError,
    ecs_spec,
    iter_package_documents,
    iter_schema_documents,
)

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def taxonomy_options(fn):
    fn = click.option(
        "--strict/--no-strict",
        default=settings.strict_fields,
        help="Reject unknown keys in source documents",
    )(fn)
    fn = click.option("--ecs-version", default=settings.ecs_version, help="ECS tag, branch or sha")(fn)
    fn = click.option(
        "--ecs-root",
        default=settings.ecs_root,
        type=click.Path(file_okay=False),
        help="Path to the root of the ECS repo",
    )(fn)
    fn = click.option(
        "--schema",
        "schema_files",
        multiple=True,
        type=click.File("r"),
        help="Nested ECS schema file, instead of reading it from the ECS repo",
    )(fn)
    return fn


def _builder(
    schema_files: tuple[IO[str], ...],
    ecs_root: str | None,
    ecs_version: str | None,
    strict: bool,
    packages: tuple[IO[str], ...] = (),
) -> GraphBuilder:
    if schema_files:
        sources: list[str | IO[str]] = list(schema_files)
    elif ecs_root and ecs_version:
        if not Path(ecs_root).is_dir():
            raise click.BadParameter(f"directory {ecs_root!r} does not exist", param_hint="'--ecs-root'")
        sources = [ecs_spec(ecs_root, ecs_version, settings.nested_path)]
    else:
        raise click.UsageError("specify --schema, or both --ecs-root and --ecs-version")

    b = GraphBuilder()
    for src in sources:
        for doc in iter_schema_documents(src, strict=strict):
            b.add_schema(doc)
    for f in packages:
        for doc in iter_package_documents(f, strict=strict):
            b.add_package(doc)
    logger.info(
        "flattened %d schema and %d package documents into %d statements (%d errors)",
        b.stats.schema_documents,
        b.stats.package_documents,
        b.stats.statements,
        b.stats.errors,
    )
    return b


def _load_graph(path: str) -> Graph:
    with Path(path).open() as f:
        try:
            return Graph.load(read_nquads(f))
        except StatementError as e:
            raise click.ClickException(f"{path}: {e}") from e


@click.group()
def cli():
    """Find graft candidates for package fields in the ECS"""
    _configure_logging()


@cli.command()
def version():
    """Print the version"""
    from schema_graft import __version__

    click.echo(__version__)


@cli.command()
@taxonomy_options
@click.argument("packages", nargs=-1, type=click.File("r"))
def statements(schema_files, ecs_root, ecs_version, strict, packages):
    """Print the canonical statements of the schema and PACKAGES as N-Quads.

    PACKAGES are package fields.yml files; use - for stdin.
    """
    try:
        b = _builder(schema_files, ecs_root, ecs_version, strict, packages)
    except (DocumentError, SourceError) as e:
        raise click.ClickException(str(e)) from e
    write_nquads(b.statements(), sys.stdout)


@cli.command()
@taxonomy_options
@click.option("--graph", "graph_file", type=click.Path(exists=True, dir_okay=False), help="Read a dumped graph")
@click.option("--only-candidates", is_flag=True, help="Hide fields without candidates")
@click.option("--format", "fmt", type=click.Choice(["table", "json"]), default="table")
@click.argument("packages", nargs=-1, type=click.File("r"))
def grafts(schema_files, ecs_root, ecs_version, strict, graph_file, only_candidates, fmt, packages):
    """Report graft candidates for every published field of PACKAGES"""
    if graph_file:
        g = _load_graph(graph_file)
    else:
        try:
            g = _builder(schema_files, ecs_root, ecs_version, strict, packages).build()
        except (DocumentError, SourceError) as e:
            raise click.ClickException(str(e)) from e

    reports = graft_report(g)
    if only_candidates:
        reports = [r for r in reports if r.candidates]

    if fmt == "json":
        click.echo(json.dumps(
            [
                {
                    "path": r.path,
                    "candidates": r.candidates,
                    "error": str(r.error) if r.error else None,
                }
                for r in reports
            ],
            indent=2,
        ))
        return

    if not reports:
        console.print("[yellow]No published fields found[/yellow]")
        return

    table = Table(title="Graft candidates")
    table.add_column("Field", style="cyan", overflow="fold")
    table.add_column("Candidates", style="green", overflow="fold")
    table.add_column("Error", style="red", overflow="fold")
    for r in reports:
        table.add_row(r.path, "\n".join(r.candidates), str(r.error) if r.error else "")
    console.print(table)


@cli.command("graft-for")
@taxonomy_options
@click.option("--graph", "graph_file", type=click.Path(exists=True, dir_okay=False), help="Read a dumped graph")
@click.argument("path")
@click.argument("typ", metavar="TYPE")
def graft_for(schema_files, ecs_root, ecs_version, strict, graph_file, path, typ):
    """List graft candidates for a field PATH of type TYPE"""
    if graph_file:
        g = _load_graph(graph_file)
    else:
        try:
            g = _builder(schema_files, ecs_root, ecs_version, strict).build()
        except (DocumentError, SourceError) as e:
            raise click.ClickException(str(e)) from e

    try:
        candidates = candidate_grafts_for(g, path, typ)
    except GraftError as e:
        raise click.ClickException(str(e)) from e

    if not candidates:
        console.print(f"[yellow]No candidates for {path} ({typ})[/yellow]")
        return
    for c in candidates:
        click.echo(c)


def app() -> None:
    cli()


if __name__ == "__main__":
    app()

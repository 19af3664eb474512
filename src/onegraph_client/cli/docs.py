"""CLI: onegraph docs get|create"""

from pathlib import Path

import click
from rich.console import Console
from rich.syntax import Syntax

console = Console()


def _load_config() -> dict:
    from onegraph_client.cli.main import _load_config
    return _load_config()


def _require(cfg: dict, *keys: str) -> None:
    from onegraph_client.cli.main import _require
    _require(cfg, *keys)


def _get_client():
    from onegraph_client.cli.main import _get_client
    return _get_client()


def _run(coro):
    from onegraph_client.cli.main import _run
    return _run(coro)


def _unwrap_or_exit(result, action: str):
    from onegraph_client.cli.main import _unwrap_or_exit
    return _unwrap_or_exit(result, action)


@click.group()
def docs():
    """Persisted operations documents."""


@docs.command("get")
@click.argument("doc_id")
@click.option("--json-output", "--json", is_flag=True)
def docs_get(doc_id: str, json_output: bool):
    """Print a persisted document."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")

    async def _get():
        async with _get_client() as client:
            return await client.docs.fetch(cfg["auth_token"], cfg["site_id"], doc_id)

    doc = _unwrap_or_exit(_run(_get()), "Fetch document")
    if json_output:
        click.echo(doc.model_dump_json(by_alias=True, indent=2))
        return
    if doc.description:
        console.print(f"[bold]{doc.description}[/bold]")
    if doc.tags:
        console.print(f"[dim]tags: {', '.join(doc.tags)}[/dim]")
    console.print(Syntax(doc.query, "graphql"))


@docs.command("create")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--description", default="", help="Human readable description")
@click.option("--tag", "tags", multiple=True, help="Tag to attach (repeatable)")
def docs_create(path: Path, description: str, tags: tuple[str, ...]):
    """Persist the GraphQL operations document at PATH."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    document = path.read_text()

    async def _create():
        async with _get_client() as client:
            with console.status("Persisting document..."):
                return await client.docs.create(
                    cfg["auth_token"], cfg["site_id"], document, description=description, tags=list(tags),
                )

    doc = _unwrap_or_exit(_run(_create()), "Create document")
    console.print(f"[green]Persisted document: {doc.id}[/green]")

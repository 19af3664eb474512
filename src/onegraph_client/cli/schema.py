"""CLI: onegraph schema fetch|services|ensure-app"""

from pathlib import Path
from typing import Optional

import click
from graphql import print_schema
from rich.console import Console
from rich.table import Table

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
def schema():
    """Schema download and app setup."""


@schema.command("fetch")
@click.option("--service", "services", multiple=True, help="Enabled service (repeatable); defaults to the app's")
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None)
def schema_fetch(services: tuple[str, ...], out: Optional[Path]):
    """Download the app schema and print it as SDL."""
    cfg = _load_config()
    _require(cfg, "site_id")

    async def _fetch():
        async with _get_client() as client:
            enabled = list(services)
            if not enabled:
                _require(cfg, "auth_token")
                found = _unwrap_or_exit(
                    await client.apps.fetch_enabled_services(cfg["auth_token"], cfg["site_id"]), "Fetch services",
                )
                enabled = [s.service for s in found]
            return await client.schema.fetch_schema(cfg["site_id"], enabled)

    built = _run(_fetch())
    if built is None:
        console.print("[red]Schema unavailable.[/red]")
        raise SystemExit(1)
    sdl = print_schema(built)
    if out:
        out.write_text(sdl)
        console.print(f"[green]Wrote schema to {out}[/green]")
    else:
        click.echo(sdl)


@schema.command("services")
def schema_services():
    """List the services enabled for the site."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")

    async def _services():
        async with _get_client() as client:
            return await client.apps.fetch_enabled_services(cfg["auth_token"], cfg["site_id"])

    found = _unwrap_or_exit(_run(_services()), "Fetch services")
    table = Table(title=f"Enabled services ({len(found)})")
    table.add_column("Service", style="bold")
    table.add_column("Name")
    table.add_column("Slug")
    for svc in found:
        table.add_row(svc.service, svc.friendly_service_name or "", svc.slug or "")
    console.print(table)


@schema.command("ensure-app")
def schema_ensure_app():
    """Create the upstream app and default schema for the site if missing."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")

    async def _ensure():
        async with _get_client() as client:
            with console.status("Ensuring app..."):
                return await client.apps.ensure_app_for_site(cfg["auth_token"], cfg["site_id"])

    app_schema = _unwrap_or_exit(_run(_ensure()), "Ensure app")
    console.print(f"[green]App schema ready: {app_schema.id}[/green]")

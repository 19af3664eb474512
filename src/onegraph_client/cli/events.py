"""CLI: onegraph events list|ack|watch"""

import asyncio
import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from onegraph_client.channel import DEFAULT_BATCH_SIZE
from onegraph_client.events import describe_event
from onegraph_client.models.event import CliEvent

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


def _print_errors(errors: list, action: str) -> None:
    from onegraph_client.cli.main import _print_errors
    _print_errors(errors, action)


def _session_id(cfg: dict, session_id: Optional[str]) -> str:
    from onegraph_client.cli.sessions import _session_id
    return _session_id(cfg, session_id)


@click.group()
def events():
    """Session event queue."""


@events.command("list")
@click.option("-s", "--session", "session_id", default=None)
@click.option("--count", default=DEFAULT_BATCH_SIZE, type=click.IntRange(min=1), show_default=True)
@click.option("--json-output", "--json", is_flag=True)
def events_list(session_id: Optional[str], count: int, json_output: bool):
    """List pending events without acknowledging them."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    sid = _session_id(cfg, session_id)

    async def _list():
        async with _get_client() as client:
            return await client.events.fetch_batch(cfg["site_id"], cfg["auth_token"], sid, count)

    batch = _run(_list())
    if batch.errors:
        _print_errors(batch.errors, "Fetch events")
        raise SystemExit(1)
    if json_output:
        click.echo(json.dumps([e.model_dump(by_alias=True) for e in batch.events], indent=2))
        return
    table = Table(title=f"Pending events ({len(batch.events)})")
    table.add_column("ID", style="bold")
    table.add_column("Event")
    table.add_column("Created")
    for event in batch.events:
        table.add_row(event.id or "", describe_event(event), event.created_at or "")
    console.print(table)


@events.command("ack")
@click.argument("event_ids", nargs=-1)
@click.option("-s", "--session", "session_id", default=None)
def events_ack(event_ids: tuple[str, ...], session_id: Optional[str]):
    """Acknowledge (delete) processed events."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    sid = _session_id(cfg, session_id)

    async def _ack():
        async with _get_client() as client:
            return await client.events.acknowledge(cfg["site_id"], cfg["auth_token"], sid, list(event_ids))

    acked = _unwrap_or_exit(_run(_ack()), "Acknowledge")
    console.print(f"[green]Acknowledged {len(acked)} event(s).[/green]")


def _print_event(event: CliEvent) -> None:
    console.print(f"[cyan]{describe_event(event)}[/cyan] [dim]{event.id}[/dim]")


@events.command("watch")
@click.option("-s", "--session", "session_id", default=None)
@click.option("--interval", default=5.0, type=click.FloatRange(min=0), show_default=True,
              help="Seconds between polls")
@click.option("--count", default=DEFAULT_BATCH_SIZE, type=click.IntRange(min=1), show_default=True)
@click.option("--once", is_flag=True, help="Process a single batch and exit")
def events_watch(session_id: Optional[str], interval: float, count: int, once: bool):
    """Heartbeat, fetch, print and acknowledge events until interrupted."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    sid = _session_id(cfg, session_id)
    token, site_id = cfg["auth_token"], cfg["site_id"]

    async def _watch():
        async with _get_client() as client:
            while True:
                beat = await client.events.heartbeat(token, site_id, sid)
                if beat.errors:
                    _print_errors(beat.errors, "Heartbeat")
                result = await client.events.process_batch(site_id, token, sid, _print_event, count)
                if result.errors:
                    _print_errors(result.errors, "Process events")
                if once:
                    return
                await asyncio.sleep(interval)

    async def _deactivate():
        async with _get_client() as client:
            return await client.events.deactivate(token, site_id, sid)

    console.print(f"[dim]Watching session {sid} (Ctrl+C to stop)[/dim]")
    try:
        _run(_watch())
    except KeyboardInterrupt:
        result = _run(_deactivate())
        if result.errors:
            _print_errors(result.errors, "Deactivate")
        console.print("[yellow]Stopped; session marked inactive.[/yellow]")

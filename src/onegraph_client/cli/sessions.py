"""CLI: onegraph sessions create|show|heartbeat|deactivate|update-metadata"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _load_config() -> dict:
    from onegraph_client.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from onegraph_client.cli.main import _save_config
    _save_config(cfg)


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


def _parse_metadata(raw: Optional[str]) -> dict:
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}")
    if not isinstance(value, dict):
        raise click.BadParameter("metadata must be a JSON object")
    return value


def _session_id(cfg: dict, session_id: Optional[str]) -> str:
    sid = session_id or cfg.get("session_id")
    if not sid:
        console.print("[red]No session. Pass --session or run `onegraph sessions create`.[/red]")
        raise SystemExit(1)
    return sid


@click.group()
def sessions():
    """CLI session lifecycle."""


@sessions.command("create")
@click.argument("name")
@click.option("--metadata", default=None, help="JSON object attached to the session")
def sessions_create(name: str, metadata: Optional[str]):
    """Create a session and make it the current one."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    meta = _parse_metadata(metadata)

    async def _create():
        async with _get_client() as client:
            with console.status("Creating session..."):
                return await client.sessions.create(cfg["auth_token"], cfg["site_id"], name, meta)

    session = _unwrap_or_exit(_run(_create()), "Create session")
    _save_config({**cfg, "session_id": session.id})
    console.print(f"[green]Session created: {session.id}[/green]")


@sessions.command("show")
@click.option("-s", "--session", "session_id", default=None)
@click.option("--json-output", "--json", is_flag=True)
def sessions_show(session_id: Optional[str], json_output: bool):
    """Show a session and its pending events."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    sid = _session_id(cfg, session_id)

    async def _show():
        async with _get_client() as client:
            return await client.sessions.fetch(cfg["site_id"], cfg["auth_token"], sid)

    session = _unwrap_or_exit(_run(_show()), "Fetch session")
    if json_output:
        click.echo(session.model_dump_json(by_alias=True, indent=2))
        return
    table = Table(title=f"Session {session.id}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Name", session.name or "")
    table.add_row("App", session.app_id or "")
    table.add_row("Created", session.created_at or "")
    table.add_row("Last event", session.last_event_at or "")
    table.add_row("Pending events", str(len(session.events)))
    table.add_row("Metadata", json.dumps(session.metadata or {}))
    console.print(table)


@sessions.command("heartbeat")
@click.option("-s", "--session", "session_id", default=None)
def sessions_heartbeat(session_id: Optional[str]):
    """Mark the session active."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    sid = _session_id(cfg, session_id)

    async def _beat():
        async with _get_client() as client:
            return await client.events.heartbeat(cfg["auth_token"], cfg["site_id"], sid)

    session = _unwrap_or_exit(_run(_beat()), "Heartbeat")
    console.print(f"[green]{session.id}: {session.status.value}[/green] [dim](updated {session.updated_at})[/dim]")


@sessions.command("deactivate")
@click.option("-s", "--session", "session_id", default=None)
def sessions_deactivate(session_id: Optional[str]):
    """Mark the session inactive."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    sid = _session_id(cfg, session_id)

    async def _deactivate():
        async with _get_client() as client:
            return await client.events.deactivate(cfg["auth_token"], cfg["site_id"], sid)

    session = _unwrap_or_exit(_run(_deactivate()), "Deactivate")
    console.print(f"[green]{session.id}: {session.status.value}[/green]")


@sessions.command("update-metadata")
@click.argument("metadata")
@click.option("-s", "--session", "session_id", default=None)
def sessions_update_metadata(metadata: str, session_id: Optional[str]):
    """Replace the session metadata with a JSON object."""
    cfg = _load_config()
    _require(cfg, "auth_token", "site_id")
    sid = _session_id(cfg, session_id)
    meta = _parse_metadata(metadata)

    async def _update():
        async with _get_client() as client:
            return await client.sessions.update_metadata(cfg["auth_token"], cfg["site_id"], sid, meta)

    session = _unwrap_or_exit(_run(_update()), "Update metadata")
    console.print(f"[green]Metadata updated for {session.id}[/green]")

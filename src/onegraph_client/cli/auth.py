"""CLI: onegraph auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from onegraph_client.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from onegraph_client.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--token", default=None, help="Netlify access token")
@click.option("--site-id", default=None, help="Netlify site id (the OneGraph app id)")
@click.option("--base-url", default=None, help="OneGraph serve host")
def auth_login(token: Optional[str], site_id: Optional[str], base_url: Optional[str]):
    """Save credentials for later commands."""
    cfg = _load_config()
    token = token or click.prompt("Netlify token", hide_input=True)
    site_id = site_id or click.prompt("Site id", default=cfg.get("site_id") or "", show_default=False)
    updated = {**cfg, "auth_token": token, "site_id": site_id}
    if base_url:
        updated["base_url"] = base_url
    _save_config(updated)
    console.print(f"[green]Saved credentials for site {site_id}[/green]")
    console.print("[dim]Stored in ~/.onegraph/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = _load_config()
    if cfg.get("auth_token"):
        console.print(f"[green]Logged in[/green] for site {cfg.get('site_id', 'unknown')}")
        if cfg.get("session_id"):
            console.print(f"[dim]Current session: {cfg['session_id']}[/dim]")
    else:
        console.print("[yellow]Not logged in. Run `onegraph auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    _save_config({})
    console.print("[green]Logged out.[/green]")

"""
OneGraph CLI — `onegraph` command.

Commands:
  onegraph auth login          Save a Netlify token and site id
  onegraph sessions <cmd>      CLI session lifecycle
  onegraph events <cmd>        Poll, acknowledge and watch session events
  onegraph docs <cmd>          Persisted operations documents
  onegraph schema <cmd>        Schema download and app setup
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install onegraph-client[cli]")

from onegraph_client import __version__
from onegraph_client.client import AsyncOneGraph
from onegraph_client.config import OneGraphConfig
from onegraph_client.results import Empty, Failure

console = Console()
CONFIG_FILE = Path.home() / ".onegraph" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _require(cfg: dict, *keys: str) -> None:
    missing = [k for k in keys if not cfg.get(k)]
    if missing:
        console.print(f"[red]Missing {', '.join(missing)}. Run `onegraph auth login` first.[/red]")
        raise SystemExit(1)


def _get_client() -> AsyncOneGraph:
    cfg = _load_config()
    return AsyncOneGraph(OneGraphConfig.from_env(base_url=cfg.get("base_url")))


def _run(coro):
    return asyncio.run(coro)


def _print_errors(errors: list, action: str) -> None:
    console.print(f"[red]{action} failed:[/red]")
    for err in errors:
        console.print(f"  [red]- {err.get('message', err)}[/red]")


def _unwrap_or_exit(result: Any, action: str) -> Any:
    """Return a Success payload; print errors or the missing field and exit otherwise."""
    if isinstance(result, Failure):
        _print_errors(result.errors, action)
        raise SystemExit(1)
    if isinstance(result, Empty):
        console.print(f"[yellow]{action}: nothing returned at {'.'.join(result.path)}[/yellow]")
        raise SystemExit(1)
    return result.payload


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP and protocol details.")
def main(verbose: bool):
    """OneGraph CLI — manage schemas, persisted documents and CLI sessions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console)],
        )


# Register subcommands from separate modules
from onegraph_client.cli.auth import auth
from onegraph_client.cli.docs import docs
from onegraph_client.cli.events import events
from onegraph_client.cli.schema import schema
from onegraph_client.cli.sessions import sessions

main.add_command(auth)
main.add_command(sessions)
main.add_command(events)
main.add_command(docs)
main.add_command(schema)


if __name__ == "__main__":
    main()

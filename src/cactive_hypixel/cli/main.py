"""
Cactive Hypixel CLI — `cactive` command.

Commands:
  cactive config <cmd>        Store API key and cache preference
  cactive nickname <name>     Nickname history
  cactive player <uuid>       Player data
  cactive staff               Staff tracker
  cactive punishment <id>     Punishment lookup
  cactive key [key]           API key introspection
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

try:
    import click
    from rich.console import Console
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install cactive-hypixel-api[cli]")

from cactive_hypixel.client import AsyncHypixelClient
from cactive_hypixel.errors import HypixelAPIError
from cactive_hypixel.transport.http import DEFAULT_BASE_URL

err_console = Console(stderr=True)
CONFIG_FILE = Path.home() / ".cactive" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_client(key: Optional[str] = None) -> AsyncHypixelClient:
    cfg = _load_config()
    api_key = key or cfg.get("api_key")
    if not api_key:
        err_console.print("[red]No API key. Pass --key, set CACTIVE_API_KEY or run `cactive config set`.[/red]")
        raise SystemExit(1)
    return AsyncHypixelClient(
        api_key,
        prefer_cache=cfg.get("cache", False),
        base_url=cfg.get("base_url", DEFAULT_BASE_URL),
    )


def _report(error: HypixelAPIError) -> None:
    for e in error.errors:
        origin = "internal" if e.internal else "api"
        label = escape(f"[{e.type} {e.code}]")
        err_console.print(f"[red]{label}[/red] {escape(e.message)} [dim]({origin})[/dim]")


def _run(coro):
    try:
        return asyncio.run(coro)
    except HypixelAPIError as e:
        _report(e)
        raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Cactive Hypixel CLI: player, staff and punishment lookups."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        # httpx logs full request URLs, API key included
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


# Register subcommands from separate modules
from cactive_hypixel.cli.config import config
from cactive_hypixel.cli.lookup import nickname_cmd, player_cmd, staff_cmd, punishment_cmd, key_cmd

main.add_command(config)
main.add_command(nickname_cmd)
main.add_command(player_cmd)
main.add_command(staff_cmd)
main.add_command(punishment_cmd)
main.add_command(key_cmd)


if __name__ == "__main__":
    main()

"""CLI: cactive config set|show|clear"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from cactive_hypixel.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from cactive_hypixel.cli.main import _save_config
    _save_config(cfg)


def _mask(key: str) -> str:
    return key[:4] + "…" if len(key) > 4 else "****"


@click.group()
def config():
    """Stored client settings."""


@config.command("set")
@click.option("--key", "api_key", default=None, help="Cactive API key")
@click.option("--cache/--no-cache", default=None, help="Ask the service for cached responses")
@click.option("--base-url", default=None, help="API base URL")
def config_set(api_key: Optional[str], cache: Optional[bool], base_url: Optional[str]):
    """Update stored settings."""
    cfg = _load_config()
    if api_key is not None:
        cfg["api_key"] = api_key
    if cache is not None:
        cfg["cache"] = cache
    if base_url is not None:
        cfg["base_url"] = base_url
    _save_config(cfg)
    console.print("[green]Settings saved.[/green]")


@config.command("show")
def config_show():
    """Show stored settings."""
    cfg = _load_config()
    if not cfg.get("api_key"):
        console.print("[yellow]No API key stored. Run `cactive config set --key KEY`.[/yellow]")
        return
    console.print(f"key: {_mask(cfg['api_key'])}")
    console.print(f"cache: {str(cfg.get('cache', False)).lower()}")
    if cfg.get("base_url"):
        console.print(f"base_url: {cfg['base_url']}")


@config.command("clear")
def config_clear():
    """Forget stored settings."""
    _save_config({})
    console.print("[green]Settings cleared.[/green]")

"""CLI: cactive nickname|player|staff|punishment|key"""

import json
from typing import Any, Optional

import click
from rich.console import Console
from rich.table import Table

from cactive_hypixel.models.staff import StaffFilter

console = Console()

key_option = click.option("--key", envvar="CACTIVE_API_KEY", default=None, help="API key (overrides config)")
json_option = click.option("--json-output", "--json", is_flag=True)


def _get_client(key: Optional[str]):
    from cactive_hypixel.cli.main import _get_client
    return _get_client(key)


def _run(coro):
    from cactive_hypixel.cli.main import _run
    return _run(coro)


def _lookup(key: Optional[str], operation: str, *args: Any) -> Any:
    client = _get_client(key)

    async def _call():
        async with client:
            return await getattr(client, operation)(*args)
    return _run(_call())


def _echo_json(result: Any) -> None:
    if isinstance(result, list):
        data = [item.model_dump() for item in result]
    else:
        data = result.model_dump()
    click.echo(json.dumps(data, indent=2))


def _fmt(value: Any) -> str:
    return "-" if value is None else str(value)


@click.command("nickname")
@click.argument("nickname")
@key_option
@json_option
def nickname_cmd(nickname: str, key: Optional[str], json_output: bool):
    """Nickname history of a player."""
    entries = _lookup(key, "nickname_history", nickname)
    if json_output:
        _echo_json(entries)
        return
    table = Table(title=f"Nickname history of {nickname}")
    table.add_column("Nickname", style="bold")
    table.add_column("UUID")
    table.add_column("Active")
    table.add_column("Created")
    table.add_column("Voided")
    for e in entries:
        table.add_row(e.nickname, e.uuid, _fmt(e.active), e.created_at, _fmt(e.voided_at))
    console.print(table)


@click.command("player")
@click.argument("uuid")
@key_option
@json_option
def player_cmd(uuid: str, key: Optional[str], json_output: bool):
    """Player data: nicknames, infractions, tracker."""
    profile = _lookup(key, "player_data", uuid)
    if json_output:
        _echo_json(profile)
        return
    console.print(f"[bold]{profile.uuid}[/bold]")
    t = profile.tracker
    console.print(f"server: {_fmt(t.server)}  map: {_fmt(t.map)}  proxy: {_fmt(t.proxy)}  last login: {_fmt(t.last_login)}")

    nicknames = Table(title="Nicknames")
    nicknames.add_column("Nickname", style="bold")
    nicknames.add_column("Active")
    nicknames.add_column("Created")
    nicknames.add_column("Voided")
    for n in profile.nickname_history:
        nicknames.add_row(n.nickname, _fmt(n.active), n.created_at, _fmt(n.voided_at))
    console.print(nicknames)

    if profile.infractions:
        infractions = Table(title="Infractions")
        infractions.add_column("ID", style="bold")
        infractions.add_column("Type")
        infractions.add_column("Reason")
        infractions.add_column("Executor")
        infractions.add_column("Length")
        for i in profile.infractions:
            infractions.add_row(i.id, i.punishment_type, i.reason, _fmt(i.executor), _fmt(i.length))
        console.print(infractions)

    if profile.ip_history:
        ips = Table(title="IP history")
        ips.add_column("IP", style="bold")
        ips.add_column("Login")
        ips.add_column("Logout")
        ips.add_column("Proxy")
        for h in profile.ip_history:
            ips.add_row(h.ip, h.login_at, _fmt(h.logout_at), _fmt(h.connection_proxy))
        console.print(ips)


@click.command("staff")
@click.option("--filter", "staff_filter", type=click.Choice([f.value for f in StaffFilter]), default=None)
@key_option
@json_option
def staff_cmd(staff_filter: Optional[str], key: Optional[str], json_output: bool):
    """Hypixel staff tracker."""
    staff = _lookup(key, "staff_tracker", staff_filter)
    if json_output:
        _echo_json(staff)
        return
    table = Table(title=f"Staff ({len(staff)})")
    table.add_column("UUID", style="bold")
    table.add_column("Rank")
    table.add_column("Online")
    for s in staff:
        table.add_row(s.uuid, s.rank, _fmt(s.online))
    console.print(table)


@click.command("punishment")
@click.argument("punishment_id")
@key_option
@json_option
def punishment_cmd(punishment_id: str, key: Optional[str], json_output: bool):
    """Look up a punishment by ID."""
    p = _lookup(key, "punishment_data", punishment_id)
    if json_output:
        _echo_json(p)
        return
    console.print(f"[bold]{p.id}[/bold] {p.punishment_type}: {p.reason}")
    console.print(f"player: {p.uuid}  executor: {_fmt(p.executor)}  length: {_fmt(p.length)}")


@click.command("key")
@click.argument("target", required=False)
@key_option
@json_option
def key_cmd(target: Optional[str], key: Optional[str], json_output: bool):
    """Inspect an API key (defaults to your own)."""
    info = _lookup(key, "key_data", target)
    if json_output:
        _echo_json(info)
        return
    status = "[green]valid[/green]" if info.valid else "[red]invalid[/red]"
    active = "active" if info.active else "inactive"
    console.print(f"{status}, {active}  created: {_fmt(info.created_at)}  expires: {_fmt(info.expires_at)}")
    table = Table(title="Endpoints")
    table.add_column("Endpoint", style="bold")
    table.add_column("Version")
    table.add_column("Enabled")
    for e in info.endpoints:
        table.add_row(e.id, str(e.version), str(e.status))
    console.print(table)

"""Firewall commands."""

import typer

from pacicli.cli.client import expect_status, parse_response
from pacicli.cli.commands import NO_HEADER_OPTION, SETTING_FILE_OPTION
from pacicli.cli.output import output_result, print_message, print_table
from pacicli.cli.session import Session, api_command, api_session
from pacicli.config import load_config
from pacicli.errors import CommandUsageError
from pacicli.models import Firewall

FIREWALL_COLUMNS = (
    ("ID", True),
    ("NAME", False),
    ("PROTOCOL", False),
    ("LOCAL_PORT", True),
    ("REMOTE_PORT", True),
    ("REMOTE_NET", False),
)


def firewall_rows(firewall: Firewall) -> list[tuple]:
    """One row per rule, plus a continuation row per extra remote network."""
    rows: list[tuple] = []
    for rule in firewall.rule:
        first = rule.remote_net[0] if rule.remote_net else ""
        rows.append(
            (rule.id, rule.name, rule.protocol, rule.local_port, rule.remote_port, first)
        )
        rows.extend(("", "", "", "", "", net) for net in rule.remote_net[1:])
    return rows


@api_command
def fwlist(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """List firewall rules of a server."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", f"/ve/{server_name}/firewall")
        firewall = parse_response(response, Firewall)

    output_result(
        session.state,
        firewall,
        lambda: print_table(FIREWALL_COLUMNS, firewall_rows(firewall), no_header),
    )


def _firewall_setting(session: Session, server_name: str, setting_file: str) -> Firewall:
    if setting_file:
        return load_config(setting_file, Firewall)
    settings = session.config.servers.get(server_name)
    if settings is None or not settings.firewall.rule:
        raise CommandUsageError(
            message=f"Couldn't find Firewall rules for '{server_name}'",
            error_code="CMD-MissingFirewall",
            suggestion="Use --setting-file or add firewall rules to the config file",
        )
    return settings.firewall


def _send_firewall(
    ctx: typer.Context, method: str, server_name: str, setting_file: str
) -> None:
    with api_session(ctx) as session:
        firewall = _firewall_setting(session, server_name, setting_file)
        response = session.client.send_request(
            method, f"/ve/{server_name}/firewall", firewall.to_xml()
        )
    expect_status(response, 200)
    print_message(response.text)


@api_command
def fwcreate(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    setting_file: str = SETTING_FILE_OPTION,
) -> None:
    """Create firewall rules for a server.

    Rules come from --setting-file or the server's entry in the config
    file. Use fwmodify when the server already has rules.
    """
    _send_firewall(ctx, "POST", server_name, setting_file)


@api_command
def fwmodify(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    setting_file: str = SETTING_FILE_OPTION,
) -> None:
    """Replace all firewall rules of a server."""
    _send_firewall(ctx, "PUT", server_name, setting_file)


@api_command
def fwdelete(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Delete all firewall rules of a server."""
    with api_session(ctx) as session:
        response = session.client.send_request("DELETE", f"/ve/{server_name}/firewall")
    expect_status(response, 200)
    print_message(response.text)

"""Autoscale commands."""

from typing import Any, Optional

import typer

from pacicli.cli.client import expect_status, parse_response
from pacicli.cli.commands import (
    FROM_OPTION,
    NO_HEADER_OPTION,
    NUM_RECORDS_OPTION,
    SETTING_FILE_OPTION,
    TO_OPTION,
    VERBOSE_OPTION,
    parse_period,
)
from pacicli.cli.output import output_result, print_message, print_table
from pacicli.cli.session import Session, api_command, api_session
from pacicli.config import load_config
from pacicli.errors import CommandUsageError
from pacicli.models import (
    Autoscale,
    AutoscaleData,
    AutoscaleRule,
    ResourceConsumptionAndAutoscaleHistory,
    Threshold,
)
from pacicli.render import render_record

RULE_COLUMNS = (
    ("METRIC", False),
    ("VERSION", True),
    ("UPDATED", False),
    ("DELIVERED", False),
    ("DELIVERED-OK", False),
    ("MIGRATION", False),
    ("RESTART", False),
    ("MIN", True),
    ("MAX", True),
    ("STEP", True),
    ("UP_THRES", True),
    ("UP_PERIOD", True),
    ("DOWN_THRES", True),
    ("DOWN_PERIOD", True),
)

CONSUMPTION_COLUMNS = (
    ("CPU_USAGE", True),
    ("RAM_USAGE", True),
    ("PRIV_IN", True),
    ("PRIV_OUT", True),
    ("PUB_IN", True),
    ("PUB_OUT", True),
    ("DATETIME", False),
    ("CPU", True),
    ("RAM", True),
    ("BANDWIDTH", True),
)


def _threshold(threshold: Optional[Threshold]) -> tuple[Any, Any]:
    if threshold is None:
        return None, None
    return threshold.threshold, threshold.period


def rule_row(rule: AutoscaleRule) -> tuple:
    limits = rule.limits
    thresholds = rule.thresholds
    up = _threshold(thresholds.up if thresholds else None)
    down = _threshold(thresholds.down if thresholds else None)
    return (
        rule.metric,
        rule.version,
        rule.updated,
        rule.update_delivered,
        rule.update_delivered_ok,
        rule.allow_migration,
        rule.allow_restart,
        limits.min if limits else None,
        limits.max if limits else None,
        limits.step if limits else None,
        *up,
        *down,
    )


@api_command
def autoscale(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Show autoscale rules of a server."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", f"/ve/{server_name}/autoscale")
        rules = parse_response(response, Autoscale)
    output_result(session.state, rules, lambda: render_record(rules))


def _autoscale_setting(
    session: Session, server_name: str, setting_file: str
) -> AutoscaleData:
    if setting_file:
        return load_config(setting_file, AutoscaleData)
    settings = session.config.servers.get(server_name)
    if settings is None or not settings.autoscale_rule:
        raise CommandUsageError(
            message=f"Couldn't find Autoscale rules for '{server_name}'",
            error_code="CMD-MissingAutoscale",
            suggestion="Use --setting-file or add autoscale rules to the config file",
        )
    return AutoscaleData(autoscale_rule=settings.autoscale_rule)


def _send_autoscale(
    ctx: typer.Context, method: str, server_name: str, setting_file: str
) -> None:
    with api_session(ctx) as session:
        data = _autoscale_setting(session, server_name, setting_file)
        response = session.client.send_request(
            method, f"/ve/{server_name}/autoscale", data.to_xml()
        )
        expect_status(response, 200)
        rules = Autoscale.from_xml(response.body)
    output_result(session.state, rules, lambda: render_record(rules))


@api_command
def autoscale_create(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    setting_file: str = SETTING_FILE_OPTION,
) -> None:
    """Create autoscale rules for a server.

    Rules come from --setting-file or the server's entry in the config file.
    """
    _send_autoscale(ctx, "POST", server_name, setting_file)


@api_command
def autoscale_update(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    setting_file: str = SETTING_FILE_OPTION,
) -> None:
    """Update existing autoscale rules of a server."""
    _send_autoscale(ctx, "PUT", server_name, setting_file)


@api_command
def autoscale_drop(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Drop autoscale rules from a server."""
    with api_session(ctx) as session:
        response = session.client.send_request("DELETE", f"/ve/{server_name}/autoscale")
    expect_status(response, 200)
    print_message(response.text)


@api_command
def autoscale_history(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    num_records: int = NUM_RECORDS_OPTION,
    from_: str = FROM_OPTION,
    to: str = TO_OPTION,
    average_period: int = typer.Option(
        0,
        "--average-period",
        help="Interval in seconds over which consumption values are averaged",
    ),
    tail: int = typer.Option(
        0,
        "--tail",
        help="Seconds at the end of each average period that are not averaged",
    ),
    verbose: bool = VERBOSE_OPTION,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """Show autoscale and resource consumption history of a server.

    Use a pair of --from and --to, or --num-records. --average-period and
    --tail only apply with --from and --to.
    """
    path = f"/ve/{server_name}/autoscale/history/"
    params = []
    if from_ and to:
        parse_period(from_, to)
        path += f"{from_}/{to}"
        if average_period > 0:
            params.append(("average-period", average_period))
        if tail > 0:
            params.append(("tail", tail))
    elif num_records > 0:
        path += str(num_records)
    else:
        raise CommandUsageError(
            message=(
                "This command must be used with a pair of --from and --to "
                "or with --num-records"
            ),
            error_code="CMD-MissingPeriod",
        )

    with api_session(ctx) as session:
        response = session.client.send_request("GET", path, params=params or None)
        hst = parse_response(response, ResourceConsumptionAndAutoscaleHistory)

    def text_view() -> None:
        if verbose:
            render_record(hst)
            return
        if hst.autoscale_rule:
            print("AUTOSCALE RULE HISTORY")
            print_table(
                RULE_COLUMNS, (rule_row(e) for e in hst.autoscale_rule), no_header
            )
            print()
        print("RESOURCE CONSUMPTION")
        print_table(
            CONSUMPTION_COLUMNS,
            (
                (
                    e.cpu_usage,
                    e.ram_usage,
                    e.private_incoming_traffic,
                    e.private_outgoing_traffic,
                    e.public_incoming_traffic,
                    e.public_outgoing_traffic,
                    e.paci_timestamp,
                    e.cpu,
                    e.ram,
                    e.bandwidth,
                )
                for e in hst.resource_consumption_sample
            ),
            no_header,
        )

    output_result(session.state, hst, text_view)

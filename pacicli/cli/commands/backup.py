"""Backup and backup schedule commands."""

import typer

from pacicli.cli.client import expect_status, parse_response
from pacicli.cli.commands import (
    FROM_OPTION,
    NO_HEADER_OPTION,
    TO_OPTION,
    VERBOSE_OPTION,
    parse_period,
)
from pacicli.cli.output import output_result, print_message, print_table
from pacicli.cli.session import api_command, api_session, backup_id
from pacicli.errors import CommandUsageError
from pacicli.models import Backup, BackupScheduleList, VeBackups
from pacicli.render import render_record

BYTES_PER_GB = 1 << 30


def _send(ctx: typer.Context, method: str, path: str, expected: int = 202) -> None:
    with api_session(ctx) as session:
        response = session.client.send_request(method, path)
    expect_status(response, expected)
    print_message(response.text)


@api_command
def backup_schedule_set(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    schedule_name: str = typer.Argument(..., help="Backup schedule name"),
) -> None:
    """Assign a backup schedule to a server.

    Schedules are predefined; list them with 'backup-schedule'.
    """
    _send(ctx, "PUT", f"/ve/{server_name}/schedule/{schedule_name}")


@api_command
def backup_schedule_remove(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Remove the backup schedule from a server."""
    _send(ctx, "PUT", f"/ve/{server_name}/nobackup/")


@api_command
def backup(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Perform an on-demand backup of a server."""
    _send(ctx, "POST", f"/ve/{server_name}/backup")


@api_command
def backup_list(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    from_: str = FROM_OPTION,
    to: str = TO_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List backups of a server taken between --from and --to."""
    if not from_ or not to:
        raise CommandUsageError(
            message="This command must be used with a pair of --from and --to",
            error_code="CMD-MissingPeriod",
        )
    start_at, end_at = parse_period(from_, to)

    with api_session(ctx) as session:
        response = session.client.send_request(
            "GET", f"/ve/{server_name}/backups/{from_}/{to}"
        )
        backups = parse_response(response, VeBackups)

    def text_view() -> None:
        if verbose:
            render_record(backups)
            return
        print("BACKUP LIST")
        print(f"Server: {server_name}")
        print(f"  From: {start_at}")
        print(f"    To: {end_at}\n")
        print_table(
            (
                ("ID", False),
                ("SCHEDULE", False),
                ("START", False),
                ("END", False),
                ("RESULT", True),
                ("SIZE(GB)", True),
                ("NODE", False),
                ("DESCRIPTION", False),
            ),
            (
                (
                    e.cloud_backup_id,
                    e.schedule_name or "-",
                    e.started,
                    e.ended,
                    "ok" if e.successful else "fail",
                    f"{e.backup_size / BYTES_PER_GB:.3f}",
                    e.backup_node_name,
                    e.description,
                )
                for e in backups.backup
            ),
        )

    output_result(session.state, backups, text_view)


@api_command
def backup_restore(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    backup_ref: str = typer.Argument(..., metavar="BACKUP_ID", help="Backup ID"),
) -> None:
    """Restore a stopped server from a backup."""
    _send(ctx, "PUT", f"/ve/{server_name}/restore/{backup_id(backup_ref)}")


@api_command
def backup_info(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    backup_ref: str = typer.Argument(..., metavar="BACKUP_ID", help="Backup ID"),
) -> None:
    """Show backup detail."""
    with api_session(ctx) as session:
        response = session.client.send_request(
            "GET", f"/ve/{server_name}/backup/{backup_id(backup_ref)}"
        )
        record = parse_response(response, Backup)
    output_result(session.state, record, lambda: render_record(record))


@api_command
def backup_delete(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    backup_ref: str = typer.Argument(..., metavar="BACKUP_ID", help="Backup ID"),
) -> None:
    """Delete an on-demand backup of a server."""
    _send(ctx, "DELETE", f"/ve/{server_name}/backup/{backup_id(backup_ref)}")


@api_command
def backup_schedule(
    ctx: typer.Context,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """List backup schedules."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", "/schedule")
        schedules = parse_response(response, BackupScheduleList)

    output_result(
        session.state,
        schedules,
        lambda: print_table(
            (
                ("ID", True),
                ("NAME", False),
                ("DESCRIPTION", False),
                ("ENABLED", True),
                ("KEEP", True),
                ("INCREMENTAL", True),
            ),
            (
                (
                    e.id,
                    e.name,
                    e.description,
                    e.enabled,
                    e.backups_to_keep,
                    e.no_of_incremental,
                )
                for e in schedules.backup_schedule
            ),
            no_header,
        ),
    )

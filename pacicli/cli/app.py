"""CLI app entry point.

Provides the main Typer app with the global options for the config file,
output format and debug logging, and registers every command. State is
stored in the Typer context for commands to access.
"""

import platform

import typer

from pacicli.cli.commands import (
    application,
    autoscale,
    backup,
    firewall,
    image,
    loadbalancer,
    server,
)
from pacicli.cli.state import DEFAULT_CONFIG_PATH, CLIState, OutputFormat
from pacicli.logging import configure_logging
from pacicli.logging.config import debug_requested
from pacicli.version import __version__

app = typer.Typer(
    name="pacicli",
    help="Command line interface for Parallels Cloud Infrastructure.",
    add_completion=True,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        print(f"pacicli {__version__}")
        print(f"Python version: {platform.python_version()}")
        raise typer.Exit()


@app.callback()
def cli_callback(
    ctx: typer.Context,
    config: str = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Config file path (JSON or TOML)",
        envvar="PACICLI_CONFIG",
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--output",
        "-o",
        help="Output format",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log API requests and responses to stderr (also enabled by DEBUG)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """pacicli - manage servers, backups and load balancers on the cloud API."""
    debug = debug or debug_requested()
    configure_logging(config={"debug_mode": debug})

    ctx.obj = CLIState(config_path=config, output_format=output, debug=debug)


# Servers
app.command("list")(server.list_servers)
app.command("start")(server.start)
app.command("stop")(server.stop)
app.command("create")(server.create)
app.command("create-from-image")(server.create_from_image)
app.command("clone")(server.clone)
app.command("recreate")(server.recreate)
app.command("modify")(server.modify)
app.command("reset-passwd")(server.reset_password)
app.command("info")(server.info)
app.command("history")(server.history)
app.command("usage")(server.usage)
app.command("delete")(server.delete)
app.command("vnc")(server.vnc)

# Firewall
app.command("fwlist")(firewall.fwlist)
app.command("fwcreate")(firewall.fwcreate)
app.command("fwmodify")(firewall.fwmodify)
app.command("fwdelete")(firewall.fwdelete)

# Backups
app.command("backup-schedule-set")(backup.backup_schedule_set)
app.command("backup-schedule-remove")(backup.backup_schedule_remove)
app.command("backup")(backup.backup)
app.command("backup-list")(backup.backup_list)
app.command("backup-restore")(backup.backup_restore)
app.command("backup-info")(backup.backup_info)
app.command("backup-delete")(backup.backup_delete)
app.command("backup-schedule")(backup.backup_schedule)

# Autoscale
app.command("autoscale")(autoscale.autoscale)
app.command("autoscale-create")(autoscale.autoscale_create)
app.command("autoscale-update")(autoscale.autoscale_update)
app.command("autoscale-drop")(autoscale.autoscale_drop)
app.command("autoscale-history")(autoscale.autoscale_history)

# Applications and OS templates
app.command("applist")(application.applist)
app.command("appinfo")(application.appinfo)
app.command("appinstall")(application.appinstall)
app.command("appreset")(application.appreset)
app.command("appdelete")(application.appdelete)
app.command("oslist")(application.oslist)

# Images
app.command("imglist")(image.imglist)
app.command("imginfo")(image.imginfo)
app.command("imgcreate")(image.imgcreate)
app.command("imgdelete")(image.imgdelete)

# Load balancers
app.command("lblist")(loadbalancer.lblist)
app.command("lbinfo")(loadbalancer.lbinfo)
app.command("lbhistory")(loadbalancer.lbhistory)
app.command("lbcreate")(loadbalancer.lbcreate)
app.command("lbrestart")(loadbalancer.lbrestart)
app.command("lbdelete")(loadbalancer.lbdelete)
app.command("lbattach")(loadbalancer.lbattach)
app.command("lbdetach")(loadbalancer.lbdetach)

# Short names
for alias, command in (
    ("ls", server.list_servers),
    ("fwls", firewall.fwlist),
    ("bkpls", backup.backup_list),
    ("appls", application.applist),
    ("osls", application.oslist),
    ("imgls", image.imglist),
    ("lbls", loadbalancer.lblist),
    ("lbhist", loadbalancer.lbhistory),
):
    app.command(alias, hidden=True)(command)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()

"""Server commands.

Implements the container / virtual machine commands: listing, power
control, creation (from a setting, an image or another server),
reconfiguration, history and usage reports, deletion and VNC access.
"""

from typing import Optional

import typer

from pacicli.cli.client import expect_status, parse_response
from pacicli.cli.commands import (
    FROM_OPTION,
    NO_HEADER_OPTION,
    NUM_RECORDS_OPTION,
    SETTING_FILE_OPTION,
    SUBSCRIPTION_OPTION,
    TO_OPTION,
    VERBOSE_OPTION,
    parse_period,
)
from pacicli.cli.output import output_result, print_message, print_table
from pacicli.cli.session import Session, api_command, api_session
from pacicli.config import load_config
from pacicli.errors import CommandUsageError
from pacicli.models import (
    AddIP,
    ChangeCPU,
    CreateVe,
    DropIP,
    PasswordResponse,
    ReconfigureIP,
    ReconfigureVe,
    Ve,
    VeHistory,
    VeList,
    VeResourceUsageReport,
)
from pacicli.render import render_record
from pacicli.values import IPAddr

HISTORY_COLUMNS = (
    ("DATETIME", False),
    ("CPU", True),
    ("MEMORY", True),
    ("DISK", True),
    ("BANDWIDTH", True),
    ("PUB_IPS", True),
    ("STATUS", False),
)


def print_history_table(history: VeHistory, no_header: bool = False) -> None:
    print_table(
        HISTORY_COLUMNS,
        (
            (
                e.event_timestamp,
                e.cpu,
                e.ram,
                e.local_disk,
                e.bandwidth,
                e.no_of_public_ip,
                e.state,
            )
            for e in history.ve_snapshot
        ),
        no_header,
    )


def print_password(session: Session, path: str, body: Optional[bytes] = None) -> None:
    """POST a request answered with a generated password and print it."""
    response = session.client.send_request("POST", path, body)
    pwd = parse_response(response, PasswordResponse)
    output_result(session.state, pwd, lambda: render_record(pwd))


@api_command
def list_servers(
    ctx: typer.Context,
    subscription_id: int = SUBSCRIPTION_OPTION,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """List Containers/Virtual machines.

    Use --subscription-id to list only the servers of one subscription.
    """
    params = [("subscription", subscription_id)] if subscription_id > 0 else None
    with api_session(ctx) as session:
        response = session.client.send_request("GET", "/ve", params=params)
        velist = parse_response(response, VeList)

    output_result(
        session.state,
        velist,
        lambda: print_table(
            (
                ("ID", True),
                ("NAME", False),
                ("HOSTNAME", False),
                ("STATE", False),
                ("SUBSCR_ID", True),
            ),
            (
                (e.id, e.name, e.hostname, e.state, e.subscription_id)
                for e in velist.ve_info
            ),
            no_header,
        ),
    )


def _start_stop(ctx: typer.Context, server_name: str, action: str) -> None:
    with api_session(ctx) as session:
        response = session.client.send_request("PUT", f"/ve/{server_name}/{action}")

    if response.status_code == 304:
        done = "started" if action == "start" else "stopped"
        raise CommandUsageError(
            message=f"{server_name} has already {done}",
            error_code="CMD-NotModified",
        )
    expect_status(response, 202)
    print_message(server_name, response.text)


@api_command
def start(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Start Container/Virtual machine."""
    _start_stop(ctx, server_name, "start")


@api_command
def stop(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Stop Container/Virtual machine."""
    _start_stop(ctx, server_name, "stop")


@api_command
def create(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="New server name"),
    setting_file: str = SETTING_FILE_OPTION,
) -> None:
    """Create Container/Virtual machine.

    The server properties come from --setting-file, or from the server's
    'spec' entry in the config file. The administrator password is
    generated and printed.
    """
    with api_session(ctx) as session:
        if setting_file:
            ve = load_config(setting_file, CreateVe)
            ve.name = server_name
        else:
            settings = session.config.servers.get(server_name)
            if settings is None or settings.spec is None:
                raise CommandUsageError(
                    message=f"Couldn't find a server spec for '{server_name}'",
                    error_code="CMD-MissingSpec",
                    suggestion="Use --setting-file or add a spec to the config file",
                )
            ve = settings.spec.model_copy(deep=True)
            ve.name = ve.name or server_name
        if not ve.hostname:
            ve.hostname = ve.name

        print_password(session, "/ve/", ve.to_xml())


@api_command
def create_from_image(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="New server name"),
    image_name: str = typer.Argument(..., help="Source image name"),
    subscription_id: int = SUBSCRIPTION_OPTION,
) -> None:
    """Create Container/Virtual machine from image."""
    path = "/ve"
    if subscription_id > 0:
        path += f"/{subscription_id}"
    path += f"/{server_name}/from/{image_name}"

    with api_session(ctx) as session:
        response = session.client.send_request("POST", path)
    expect_status(response, 202)
    print_message(server_name, response.text)


@api_command
def clone(
    ctx: typer.Context,
    src_server_name: str = typer.Argument(..., help="Source server name"),
    dst_server_name: str = typer.Argument(..., help="New server name"),
    subscription_id: int = SUBSCRIPTION_OPTION,
) -> None:
    """Clone Container/Virtual machine.

    Addresses, gateway and DNS settings of the clone are set automatically;
    everything else is inherited from the source server.
    """
    path = f"/ve/{src_server_name}/clone-to/{dst_server_name}"
    if subscription_id > 0:
        path += f"/for/{subscription_id}"

    with api_session(ctx) as session:
        print_password(session, path)


@api_command
def recreate(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    template: str = typer.Option("", "--template", "-T", help="OS template name"),
    drop_apps: bool = typer.Option(
        False, "--drop-apps", "-D", help="Don't reinstall the server's applications"
    ),
) -> None:
    """Recreate Container/Virtual machine.

    The new server keeps the resources, addresses, autoscale and firewall
    rules of the original, optionally with a different OS template.
    """
    params = []
    if template:
        params.append(("template", template))
    if drop_apps:
        params.append(("drop-apps", "true"))

    with api_session(ctx) as session:
        response = session.client.send_request(
            "POST", f"/ve/{server_name}/recreate", params=params or None
        )
        pwd = parse_response(response, PasswordResponse)
    output_result(session.state, pwd, lambda: render_record(pwd))


def _reconfigure_ip(
    current: Optional[ReconfigureIP], add: int, drop: list[str]
) -> Optional[ReconfigureIP]:
    if add <= 0 and not drop:
        return current
    ip = current or ReconfigureIP()
    if add > 0:
        ip.add_ip = AddIP(number=add)
    if drop:
        ip.drop_ip = ip.drop_ip or DropIP()
        ip.drop_ip.ip.extend(IPAddr.parse(text) for text in drop)
    return ip


def build_reconfiguration(
    ve: ReconfigureVe,
    description: str = "",
    cpus: int = 0,
    cpu_power: int = 0,
    ram_size: int = 0,
    bandwidth: int = 0,
    add_ipv4: int = 0,
    drop_ipv4: Optional[list[str]] = None,
    add_ipv6: int = 0,
    drop_ipv6: Optional[list[str]] = None,
    disk_size: int = 0,
    custom_ns: Optional[bool] = None,
) -> ReconfigureVe:
    """Apply modify flags on top of a (possibly empty) reconfiguration.

    Raises:
        InvalidAddressError: If an address to drop is not valid
        CommandUsageError: If nothing is modified, or addresses of one
            family are both added and dropped
    """
    if description:
        ve.description = description
    if cpus > 0 or cpu_power > 0:
        ve.change_cpu = ve.change_cpu or ChangeCPU()
        if cpus > 0:
            ve.change_cpu.number = cpus
        if cpu_power > 0:
            ve.change_cpu.power = cpu_power
    if ram_size > 0:
        ve.ram_size = ram_size
    if bandwidth > 0:
        ve.bandwidth = bandwidth
    ve.reconfigure_ipv4 = _reconfigure_ip(ve.reconfigure_ipv4, add_ipv4, drop_ipv4 or [])
    ve.reconfigure_ipv6 = _reconfigure_ip(ve.reconfigure_ipv6, add_ipv6, drop_ipv6 or [])
    if disk_size > 0:
        ve.primary_disk_size = disk_size
    if custom_ns is not None:
        ve.custom_ns = 1 if custom_ns else 0

    if ve.is_empty():
        raise CommandUsageError(
            message="There is no modification parameter",
            error_code="CMD-NothingToModify",
            suggestion="Use --setting-file or at least one modification option",
        )
    for family, ip in (("IPv4", ve.reconfigure_ipv4), ("IPv6", ve.reconfigure_ipv6)):
        if ip is not None and ip.add_ip is not None and ip.drop_ip is not None:
            raise CommandUsageError(
                message=(
                    f"Invalid modification setting. Both {family} add and drop "
                    "can't be specified at same time"
                ),
                error_code="CMD-ConflictingOptions",
            )
    return ve


@api_command
def modify(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    setting_file: str = SETTING_FILE_OPTION,
    description: str = typer.Option(
        "", "--description", "--desc", help="Server description"
    ),
    cpus: int = typer.Option(0, "--cpus", help="Number of CPU cores"),
    cpu_power: int = typer.Option(0, "--cpu-power", help="CPU clock rate in MHz"),
    ram_size: int = typer.Option(0, "--ram-size", "--ram", help="RAM size in MB"),
    bandwidth: int = typer.Option(0, "--bandwidth", help="Bandwidth in kbps"),
    add_ipv4: int = typer.Option(
        0, "--add-ipv4", help="Number of IPv4 addresses to add; not with --drop-ipv4"
    ),
    drop_ipv4: Optional[list[str]] = typer.Option(
        None, "--drop-ipv4", help="IPv4 address to remove; repeatable"
    ),
    add_ipv6: int = typer.Option(
        0, "--add-ipv6", help="Number of IPv6 addresses to add; not with --drop-ipv6"
    ),
    drop_ipv6: Optional[list[str]] = typer.Option(
        None, "--drop-ipv6", help="IPv6 address to remove; repeatable"
    ),
    disk_size: int = typer.Option(0, "--disk-size", help="Disk size in GB"),
    custom_ns: Optional[bool] = typer.Option(
        None,
        "--custom-ns/--no-custom-ns",
        help="Keep or drop name server changes made inside the server",
    ),
) -> None:
    """Modify Container/Virtual machine configuration.

    Backup schedules are changed with backup-schedule-set instead.
    """
    ve = load_config(setting_file, ReconfigureVe) if setting_file else ReconfigureVe()
    ve = build_reconfiguration(
        ve,
        description=description,
        cpus=cpus,
        cpu_power=cpu_power,
        ram_size=ram_size,
        bandwidth=bandwidth,
        add_ipv4=add_ipv4,
        drop_ipv4=drop_ipv4,
        add_ipv6=add_ipv6,
        drop_ipv6=drop_ipv6,
        disk_size=disk_size,
        custom_ns=custom_ns,
    )

    with api_session(ctx) as session:
        response = session.client.send_request("PUT", f"/ve/{server_name}", ve.to_xml())
    expect_status(response, 202)
    print_message(server_name, response.text)


@api_command
def reset_password(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Reset Container/Virtual machine password."""
    with api_session(ctx) as session:
        print_password(session, f"/ve/{server_name}/reset-password")


@api_command
def info(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Show Container/Virtual machine detail."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", f"/ve/{server_name}")
        ve = parse_response(response, Ve)
    output_result(session.state, ve, lambda: render_record(ve))


@api_command
def history(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    num_records: int = NUM_RECORDS_OPTION,
    from_: str = FROM_OPTION,
    to: str = TO_OPTION,
    verbose: bool = VERBOSE_OPTION,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """Show Container/Virtual machine history.

    Use a pair of --from and --to, or --num-records.
    """
    path = f"/ve/{server_name}/history/"
    if from_ and to:
        parse_period(from_, to)
        path += f"{from_}/{to}"
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
        response = session.client.send_request("GET", path)
        hst = parse_response(response, VeHistory)

    def text_view() -> None:
        if verbose:
            render_record(hst)
        else:
            print_history_table(hst, no_header)

    output_result(session.state, hst, text_view)


@api_command
def usage(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    from_: str = FROM_OPTION,
    to: str = TO_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show Container/Virtual machine resource usage report."""
    if not from_ or not to:
        raise CommandUsageError(
            message="This command must be used with a pair of --from and --to",
            error_code="CMD-MissingPeriod",
        )
    start_at, end_at = parse_period(from_, to)

    with api_session(ctx) as session:
        response = session.client.send_request(
            "GET", f"/ve/{server_name}/usage/{from_}/{to}"
        )
        report = parse_response(response, VeResourceUsageReport)

    def text_view() -> None:
        if verbose:
            render_record(report)
            return
        print("RESOURCE USAGE REPORT")
        print(f"Server: {report.ve_name}")
        print(f"  From: {start_at}")
        print(f"    To: {end_at}\n")
        rows: list[tuple[str, int]] = []
        for e in report.resource_usage:
            name = e.resource_type
            if e.resource_usage_type:
                name += f"({e.resource_usage_type})"
            rows.append((name, e.value))
        rows.extend((e.traffic_type, e.used) for e in report.ve_traffic)
        print_table((("RESOURCE_TYPE", False), ("USAGE", True)), rows)

    output_result(session.state, report, text_view)


@api_command
def delete(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Delete Container/Virtual machine.

    Only a fully stopped server can be deleted.
    """
    with api_session(ctx) as session:
        response = session.client.send_request("DELETE", f"/ve/{server_name}")
    expect_status(response, 202)
    print_message(server_name, response.text)


@api_command
def vnc(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Initiate a VNC session to Container/Virtual machine.

    Prints the generated VNC password; the console address and port are
    in the 'console' part of 'info'.
    """
    with api_session(ctx) as session:
        print_password(session, f"/ve/{server_name}/console")

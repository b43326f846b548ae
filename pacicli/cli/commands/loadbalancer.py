"""Load balancer commands."""

import typer

from pacicli.cli.client import expect_status, parse_response
from pacicli.cli.commands import (
    NO_HEADER_OPTION,
    NUM_RECORDS_OPTION,
    SUBSCRIPTION_OPTION,
    VERBOSE_OPTION,
)
from pacicli.cli.commands.server import print_history_table
from pacicli.cli.output import output_result, print_message, print_table
from pacicli.cli.session import api_command, api_session
from pacicli.errors import CommandUsageError
from pacicli.models import LbList, LoadBalancer, PasswordResponse, VeHistory
from pacicli.render import render_record


@api_command
def lblist(
    ctx: typer.Context,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """List load balancers."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", "/load-balancer")
        lbs = parse_response(response, LbList)

    output_result(
        session.state,
        lbs,
        lambda: print_table(
            (("NAME", False), ("STATE", False), ("SUBSCR_ID", True)),
            ((e.name, e.state, e.subscription_id) for e in lbs.load_balancer),
            no_header,
        ),
    )


@api_command
def lbinfo(
    ctx: typer.Context,
    lb_name: str = typer.Argument(..., help="Load balancer name"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show load balancer detail and the servers it balances."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", f"/load-balancer/{lb_name}")
        lb = parse_response(response, LoadBalancer)

    def text_view() -> None:
        if verbose:
            render_record(lb)
            return
        public_ips = lb.network.public_ip
        public_ip = public_ips[0].address if public_ips else None
        print("LOAD BALANCER INFO")
        print(f"             Name: {lb.name}")
        print(f"  Subscription ID: {lb.subscription_id}")
        print(f"Public IP address: {public_ip or ''}")
        print(f"           Status: {lb.state}\n")
        print("BALANCED SERVERS")
        print_table(
            (("NAME", False), ("IPADDR", False)),
            ((e.ve_name, e.ip) for e in lb.used_by),
        )

    output_result(session.state, lb, text_view)


@api_command
def lbhistory(
    ctx: typer.Context,
    lb_name: str = typer.Argument(..., help="Load balancer name"),
    num_records: int = NUM_RECORDS_OPTION,
    verbose: bool = VERBOSE_OPTION,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """Show load balancer history."""
    if num_records <= 0:
        raise CommandUsageError(
            message="This command must be used with --num-records",
            error_code="CMD-MissingNumRecords",
        )

    with api_session(ctx) as session:
        response = session.client.send_request(
            "GET", f"/load-balancer/{lb_name}/history/{num_records}"
        )
        hst = parse_response(response, VeHistory)

    def text_view() -> None:
        if verbose:
            render_record(hst)
        else:
            print_history_table(hst, no_header)

    output_result(session.state, hst, text_view)


@api_command
def lbcreate(
    ctx: typer.Context,
    lb_name: str = typer.Argument(..., help="New load balancer name"),
    subscription_id: int = SUBSCRIPTION_OPTION,
) -> None:
    """Create a load balancer."""
    path = "/load-balancer"
    if subscription_id > 0:
        path += f"/{subscription_id}"
    path += f"/create/{lb_name}"

    with api_session(ctx) as session:
        response = session.client.send_request("POST", path)
        pwd = parse_response(response, PasswordResponse)
    output_result(session.state, pwd, lambda: render_record(pwd))


@api_command
def lbrestart(
    ctx: typer.Context,
    lb_name: str = typer.Argument(..., help="Load balancer name"),
) -> None:
    """Restart a load balancer."""
    with api_session(ctx) as session:
        response = session.client.send_request("PUT", f"/load-balancer/{lb_name}/restart")
    expect_status(response, 202)
    print_message(lb_name, response.text)


@api_command
def lbdelete(
    ctx: typer.Context,
    lb_name: str = typer.Argument(..., help="Load balancer name"),
) -> None:
    """Delete a load balancer that has no servers attached."""
    with api_session(ctx) as session:
        response = session.client.send_request("DELETE", f"/load-balancer/{lb_name}")
    expect_status(response, 202)
    print_message(lb_name, response.text)


@api_command
def lbattach(
    ctx: typer.Context,
    lb_name: str = typer.Argument(..., help="Load balancer name"),
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Attach a server to a load balancer."""
    with api_session(ctx) as session:
        response = session.client.send_request(
            "POST", f"/load-balancer/{lb_name}/{server_name}"
        )
    expect_status(response, 202)
    print_message(response.text)


@api_command
def lbdetach(
    ctx: typer.Context,
    lb_name: str = typer.Argument(..., help="Load balancer name"),
    server_name: str = typer.Argument(..., help="Server name"),
) -> None:
    """Detach a server from a load balancer."""
    with api_session(ctx) as session:
        response = session.client.send_request(
            "DELETE", f"/load-balancer/{lb_name}/{server_name}"
        )
    expect_status(response, 202)
    print_message(response.text)

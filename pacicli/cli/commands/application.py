"""Application template and OS template commands."""

from typing import Union

import typer

from pacicli.cli.client import expect_status, parse_response
from pacicli.cli.commands import NO_HEADER_OPTION, VERBOSE_OPTION
from pacicli.cli.output import output_result, print_message, print_table
from pacicli.cli.session import api_command, api_session
from pacicli.models import ApplicationList, ApplicationTemplate, Template, TemplateList
from pacicli.render import render_record

TEMPLATE_LIST_TAG = b"template-list"


@api_command
def applist(
    ctx: typer.Context,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """List application templates available for Containers."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", "/application-template")
        apps = parse_response(response, ApplicationList)

    output_result(
        session.state,
        apps,
        lambda: print_table(
            (("ID", True), ("NAME", False), ("FOROS", False), ("DESCRIPTION", False)),
            (
                (e.id, e.name, e.for_os, e.description)
                for e in apps.application_template
            ),
            no_header,
        ),
    )


@api_command
def appinfo(
    ctx: typer.Context,
    app_name: str = typer.Argument(..., help="Application template name"),
    os_name: str = typer.Argument(..., help="OS template the application is for"),
) -> None:
    """Show application template detail.

    An application template is identified by its name together with the
    OS template it is designed for.
    """
    with api_session(ctx) as session:
        response = session.client.send_request(
            "GET", f"/application-template/{app_name}/{os_name}"
        )
        app = parse_response(response, ApplicationTemplate)
    output_result(session.state, app, lambda: render_record(app))


@api_command
def appinstall(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    app_names: list[str] = typer.Argument(..., help="Application template names"),
) -> None:
    """Install application templates into a Container."""
    path = f"/ve/{server_name}/install"
    params = None
    if len(app_names) == 1:
        path += f"/{app_names[0]}"
    else:
        params = [("name", name) for name in app_names]

    with api_session(ctx) as session:
        response = session.client.send_request("PUT", path, params=params)
    expect_status(response, 202)
    print_message(response.text)


@api_command
def appreset(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    app_names: list[str] = typer.Argument(..., help="Application template names"),
) -> None:
    """Reset the applications of a Container to the given list.

    Listed templates are installed if missing; all others are removed.
    """
    with api_session(ctx) as session:
        response = session.client.send_request(
            "POST",
            f"/ve/{server_name}/application",
            params=[("name", name) for name in app_names],
        )
    expect_status(response, 202)
    print_message(response.text)


@api_command
def appdelete(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Server name"),
    app_name: str = typer.Argument(..., help="Application template name"),
) -> None:
    """Remove an application template from a Container."""
    with api_session(ctx) as session:
        response = session.client.send_request(
            "DELETE", f"/ve/{server_name}/application/{app_name}"
        )
    expect_status(response, 202)
    print_message(response.text)


@api_command
def oslist(
    ctx: typer.Context,
    os_name: str = typer.Argument("", help="Only show this OS template"),
    verbose: bool = VERBOSE_OPTION,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """List OS templates servers can be created from."""
    path = "/template"
    if os_name:
        path += f"/{os_name}"

    with api_session(ctx) as session:
        response = session.client.send_request("GET", path)
        # A name lookup answers with a single template
        record: Union[TemplateList, Template]
        if TEMPLATE_LIST_TAG in response.body:
            record = parse_response(response, TemplateList)
            templates = record.template
        else:
            record = parse_response(response, Template)
            templates = [record]

    def text_view() -> None:
        if verbose:
            render_record(record)
            return
        print_table(
            (("TEMPLATE_NAME", False), ("TECHNOLOGY", False), ("TYPE", False)),
            ((e.name, e.technology, e.os_type) for e in templates),
            no_header,
        )

    output_result(session.state, record, text_view)

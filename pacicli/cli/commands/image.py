"""Server image commands."""

import typer

from pacicli.cli.client import expect_status, parse_response
from pacicli.cli.commands import NO_HEADER_OPTION, SUBSCRIPTION_OPTION
from pacicli.cli.output import output_result, print_message, print_table
from pacicli.cli.session import api_command, api_session
from pacicli.models import ImageList, VeImage
from pacicli.render import render_record


@api_command
def imglist(
    ctx: typer.Context,
    no_header: bool = NO_HEADER_OPTION,
) -> None:
    """List server images."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", "/image")
        images = parse_response(response, ImageList)

    output_result(
        session.state,
        images,
        lambda: print_table(
            (
                ("NAME", False),
                ("SIZE", True),
                ("CREATED", False),
                ("SUBSCR_ID", True),
                ("IMAGE_OF", False),
                ("DESCRIPTION", False),
            ),
            (
                (e.name, e.size, e.created, e.subscription_id, e.image_of, e.description)
                for e in images.image_info
            ),
            no_header,
        ),
    )


@api_command
def imginfo(
    ctx: typer.Context,
    image_name: str = typer.Argument(..., help="Image name"),
) -> None:
    """Show image detail."""
    with api_session(ctx) as session:
        response = session.client.send_request("GET", f"/image/{image_name}")
        image = parse_response(response, VeImage)
    output_result(session.state, image, lambda: render_record(image))


@api_command
def imgcreate(
    ctx: typer.Context,
    server_name: str = typer.Argument(..., help="Source server name"),
    image_name: str = typer.Argument(..., help="New image name"),
    subscription_id: int = SUBSCRIPTION_OPTION,
) -> None:
    """Create an image from a stopped server."""
    path = f"/image/{server_name}"
    if subscription_id > 0:
        path += f"/{subscription_id}"
    path += f"/create/{image_name}"

    with api_session(ctx) as session:
        response = session.client.send_request("POST", path)
    expect_status(response, 202)
    print_message(response.text)


@api_command
def imgdelete(
    ctx: typer.Context,
    image_name: str = typer.Argument(..., help="Image name"),
) -> None:
    """Delete a server image."""
    with api_session(ctx) as session:
        response = session.client.send_request("DELETE", f"/image/{image_name}")
    expect_status(response, 202)
    print_message(image_name, response.text)

"""Core shared logic for the API client.

Holds the client configuration, the response value returned by
PaciClient.send_request and the helpers commands use to check statuses
and decode XML bodies.
"""

from dataclasses import dataclass
from typing import Optional, TypeVar

from pacicli.cli.client.errors import APIError
from pacicli.models import XmlModel

M = TypeVar("M", bound=XmlModel)

XML_CONTENT_TYPE = "application/xml"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for PaciClient instances.

    Attributes:
        base_url: API root; request paths are appended to it verbatim
        username: Basic auth user name
        password: Basic auth password
        timeout: Request timeout in seconds
    """

    base_url: str
    username: str
    password: str
    timeout: float = 60.0


@dataclass(frozen=True)
class Response:
    """Raw outcome of one API exchange.

    Attributes:
        status: Status line text, e.g. ``202 Accepted``
        status_code: Numeric HTTP status
        body: Undecoded response body
    """

    status: str
    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return f"Status: {self.status}, Body:\n{self.text}\n"


def error_from_response(response: Response) -> APIError:
    return APIError(
        message=response.text.strip() or response.status,
        status_code=response.status_code,
        details={"status": response.status},
    )


def expect_status(response: Response, *codes: int) -> Response:
    """Return the response if its status is one of codes.

    Raises:
        APIError: For any other status
    """
    if response.status_code not in codes:
        raise error_from_response(response)
    return response


def parse_response(
    response: Response, model_type: type[M], ok_below: Optional[int] = 400
) -> M:
    """Check a response for an error status and decode its XML body.

    Args:
        response: Response returned by PaciClient.send_request
        model_type: Record type the body holds
        ok_below: Statuses at or above this are errors

    Raises:
        APIError: If the status is an error status
        PayloadDecodeError: If the body is not a valid model_type payload
    """
    if ok_below is not None and response.status_code >= ok_below:
        raise error_from_response(response)
    return model_type.from_xml(response.body)

"""Synchronous HTTP client for the cloud API.

This module provides PaciClient, which wraps httpx.Client with HTTP
basic authentication and XML request bodies. Every exchange is logged at
DEBUG level, request and response bodies included.
"""

from typing import Any, Optional

import httpx

from pacicli.cli.client.core import XML_CONTENT_TYPE, ClientConfig, Response
from pacicli.cli.client.errors import ConnectionError, TimeoutError
from pacicli.logging import get_logger

logger = get_logger(__name__)

QueryParams = Optional[list[tuple[str, Any]]]


class PaciClient:
    """Synchronous client for the cloud API.

    Usage:
        with PaciClient(base_url, username, password) as client:
            response = client.send_request("GET", "/ve")

    Attributes:
        config: Immutable client configuration
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root URL
            username: Basic auth user name
            password: Basic auth password
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.config = ClientConfig(
            base_url=base_url.rstrip("/"),
            username=username,
            password=password,
            timeout=timeout,
        )
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def __enter__(self) -> "PaciClient":
        self._client = httpx.Client(
            auth=httpx.BasicAuth(self.config.username, self.config.password),
            headers={"Content-Type": XML_CONTENT_TYPE},
            timeout=self.config.timeout,
            transport=self._transport,
        )
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def send_request(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
        params: QueryParams = None,
    ) -> Response:
        """Send one request and return the raw response.

        Any status is returned as-is; commands decide which ones they accept.

        Args:
            method: HTTP method
            path: Resource path appended to the base URL
            body: XML request body
            params: Query parameters as (name, value) pairs

        Raises:
            ConnectionError: Cannot connect to the server
            TimeoutError: Request exceeded the timeout
        """
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'with PaciClient(...) as client:'"
            )

        url = f"{self.config.base_url}{path}"
        logger.debug(f"Request Method: {method}, Path: {url}")
        if body is not None:
            logger.debug("Raw request:\n" + body.decode("utf-8", errors="replace"))

        try:
            http_response = self._client.request(
                method, url, content=body, params=params
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(
                message=f"Request timed out after {self.config.timeout}s",
                details={"url": url, "timeout": self.config.timeout},
            ) from e
        except httpx.TransportError as e:
            raise ConnectionError(
                message=f"Could not connect to API at {url}",
                details={"url": url, "error": str(e)},
            ) from e

        response = Response(
            status=f"{http_response.status_code} {http_response.reason_phrase}",
            status_code=http_response.status_code,
            body=http_response.content,
        )
        logger.debug(f"Raw response: {response}")
        return response

"""Shared fixtures for CLI tests."""

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import httpx
import pytest
from typer.testing import CliRunner

from pacicli.cli.client import PaciClient
from pacicli.logging import set_debug_mode

if TYPE_CHECKING:
    from typer.testing import Result

# ANSI escape code pattern for stripping styling from output
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

BASE_URL = "https://api.example.com/paci/v1.0"
BASE_PATH = "/paci/v1.0"

CONFIG_TOML = f"""
base_url = "{BASE_URL}"
username = "user@example.com"
password = "secret"

[servers.web.spec]
hostname = "web.example"
ram_size = 512
bandwidth = 100

[servers.web.spec.cpu]
number = 2
power = 1600

[servers.web.spec.ve_disk]
local = true
size = 10

[servers.web.spec.platform.template_info]
name = "centos-7"

[servers.web.spec.platform.os_info]
type = "linux"
technology = "CT"

[[servers.web.firewall.rule]]
name = "ssh"
protocol = "TCP"
local_port = 22
remote_port = 0
remote_net = ["10.0.0.0/8"]

[[servers.web.autoscale_rule]]
metric = "CPU"
allow_migration = true

[servers.web.autoscale_rule.limits]
min = 1
max = 4
step = 1
"""


class CleanResult:
    """Result wrapper that strips ANSI codes from stdout/stderr/output.

    Rich/Typer applies markdown-style formatting to help text even with
    NO_COLOR=1 - it disables colors but not bold/dim styling, which breaks
    string assertions on option names.
    """

    def __init__(self, result: "Result") -> None:
        self._result = result

    @property
    def exit_code(self) -> int:
        return self._result.exit_code

    @property
    def stdout(self) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", self._result.stdout)

    @property
    def output(self) -> str:
        """The terminal output (mixed stdout+stderr) with ANSI codes stripped."""
        return ANSI_ESCAPE_PATTERN.sub("", self._result.output)

    @property
    def exception(self):
        return self._result.exception


class CleanCliRunner(CliRunner):
    """CLI runner that returns results with ANSI codes stripped."""

    def invoke(self, *args, **kwargs) -> CleanResult:
        result = super().invoke(*args, **kwargs)
        return CleanResult(result)


@pytest.fixture
def runner():
    """CLI runner with NO_COLOR set and ANSI codes stripped."""
    return CleanCliRunner(env={"NO_COLOR": "1", "DEBUG": ""})


class FakeAPI:
    """Canned API answers keyed by method and path, with a request log."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, bytes]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, body: bytes = b"") -> None:
        self.routes[(method, BASE_PATH + path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(
            (request.method, request.url.path), (404, b"Resource not found")
        )
        return httpx.Response(status, content=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def path(self, request: Optional[httpx.Request] = None) -> str:
        """Request path relative to the API root."""
        request = request or self.last
        return request.url.path[len(BASE_PATH):]


@pytest.fixture
def api(monkeypatch) -> FakeAPI:
    """Route every command's client to a FakeAPI."""
    fake = FakeAPI()

    def create_client(config):
        return PaciClient(
            config.base_url,
            config.username,
            config.password,
            transport=httpx.MockTransport(fake.handler),
        )

    monkeypatch.setattr("pacicli.cli.session.create_client", create_client)
    return fake


@pytest.fixture
def config_path(tmp_path) -> Path:
    path = tmp_path / "Pacifile"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    return path


@pytest.fixture
def cli(runner, config_path):
    """Invoke the app with the test config file."""
    from pacicli.cli.app import app

    def invoke(*args: str) -> CleanResult:
        return runner.invoke(app, ["--config", str(config_path), *args])

    return invoke


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handler the app callback installs on the captured stderr."""
    yield
    logger = logging.getLogger("pacicli")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    set_debug_mode(False)

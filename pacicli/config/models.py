"""
Configuration models for pacicli.

A configuration file holds the API endpoint and credentials plus named
server settings used by the create, fwcreate, fwmodify and autoscale
commands.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pacicli.models import AutoscaleRule, CreateVe, Firewall


class ServerSettings(BaseModel):
    """Settings for one named server."""

    spec: Optional[CreateVe] = None
    firewall: Firewall = Field(default_factory=Firewall)
    autoscale_rule: list[AutoscaleRule] = Field(default_factory=list)


class PaciConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="ignore")

    base_url: str = ""
    username: str = ""
    password: str = ""
    servers: dict[str, ServerSettings] = Field(default_factory=dict)

    def missing_settings(self) -> list[str]:
        """Names of the connection settings that are not set."""
        return [
            name
            for name in ("base_url", "username", "password")
            if not getattr(self, name)
        ]

"""Firewall rules."""

from typing import Annotated

from pydantic import Field

from pacicli.models.binding import XmlAttr, XmlElement, XmlModel
from pacicli.values import IPAddr


class FirewallRule(XmlModel):
    # Assigned by the API; never read from or written to setting files
    id: Annotated[int, XmlAttr("id", omitempty=True)] = Field(default=0, exclude=True)
    name: Annotated[str, XmlAttr("name")] = ""
    protocol: Annotated[str, XmlAttr("protocol")] = ""
    local_port: Annotated[int, XmlAttr("local-port")] = 0
    remote_port: Annotated[int, XmlAttr("remote-port")] = 0
    remote_net: Annotated[list[IPAddr], XmlElement("remote-net")] = Field(
        default_factory=list
    )


class Firewall(XmlModel):
    xml_tag = "firewall"

    rule: Annotated[list[FirewallRule], XmlElement("rule")] = Field(
        default_factory=list
    )

"""Load balancer records."""

from typing import Annotated, Optional

from pydantic import Field

from pacicli.models.binding import XmlAttr, XmlElement, XmlModel
from pacicli.models.server import (
    CPU,
    Admin,
    BackupSchedule,
    Console,
    Network,
    Platform,
    VeDisk,
)
from pacicli.values import IPAddr


class LbInfo(XmlModel):
    name: Annotated[str, XmlAttr("name")] = ""
    state: Annotated[str, XmlAttr("state")] = ""
    subscription_id: Annotated[int, XmlAttr("subscription-id")] = 0


class LbList(XmlModel):
    xml_tag = "lb-list"

    load_balancer: Annotated[list[LbInfo], XmlElement("load-balancer")] = Field(
        default_factory=list
    )


class UsedBy(XmlModel):
    ve_name: Annotated[str, XmlAttr("ve-name")] = ""
    ip: Annotated[Optional[IPAddr], XmlAttr("ip")] = None


class LoadBalancer(XmlModel):
    """Full load balancer description, including the servers attached to it."""

    xml_tag = "load-balancer"

    id: Annotated[int, XmlElement("id")] = 0
    uuid: Annotated[str, XmlElement("uuid")] = ""
    hnid: Annotated[int, XmlElement("hnId")] = 0
    customer_id: Annotated[int, XmlElement("customer-id")] = 0
    name: Annotated[str, XmlElement("name")] = ""
    hostname: Annotated[str, XmlElement("hostname")] = ""
    description: Annotated[str, XmlElement("description")] = ""
    subscription_id: Annotated[int, XmlElement("subscription-id")] = 0
    cpu: Annotated[CPU, XmlElement("cpu")] = Field(default_factory=CPU)
    ram_size: Annotated[int, XmlElement("ram-size")] = 0
    bandwidth: Annotated[int, XmlElement("bandwidth")] = 0
    ve_disk: Annotated[VeDisk, XmlElement("ve-disk")] = Field(default_factory=VeDisk)
    platform: Annotated[Platform, XmlElement("platform")] = Field(
        default_factory=Platform
    )
    network: Annotated[Network, XmlElement("network")] = Field(default_factory=Network)
    backup_schedule: Annotated[BackupSchedule, XmlElement("backup-schedule")] = Field(
        default_factory=BackupSchedule
    )
    console: Annotated[Console, XmlElement("console")] = Field(default_factory=Console)
    state: Annotated[str, XmlElement("state")] = ""
    primary_disk_id: Annotated[int, XmlElement("primary-disk-id")] = 0
    template_id: Annotated[int, XmlElement("template-id")] = 0
    admin: Annotated[Admin, XmlElement("admin")] = Field(default_factory=Admin)
    last_operation_rc: Annotated[int, XmlElement("last-operation-rc")] = 0
    used_by: Annotated[list[UsedBy], XmlElement("used-by")] = Field(
        default_factory=list
    )

"""
Server (container / virtual machine) records.

Ve is the full description returned by the info call, CreateVe and
ReconfigureVe are request bodies, and the remaining records are the
responses of the list, history and usage calls.
"""

from typing import Annotated, Optional

from pydantic import Field

from pacicli.models.autoscale import Autoscale
from pacicli.models.binding import XmlAttr, XmlElement, XmlModel
from pacicli.values import IPAddr, IPAddrList, Timestamp


class PasswordResponse(XmlModel):
    """Response carrying a generated administrator or VNC password."""

    xml_tag = "pwd-response"

    message: Annotated[str, XmlElement("message")] = ""
    password: Annotated[str, XmlElement("password")] = ""


class VeInfo(XmlModel):
    id: Annotated[int, XmlAttr("id")] = 0
    name: Annotated[str, XmlAttr("name")] = ""
    hostname: Annotated[str, XmlAttr("hostname")] = ""
    state: Annotated[str, XmlAttr("state")] = ""
    subscription_id: Annotated[int, XmlAttr("subscription-id")] = 0


class VeList(XmlModel):
    xml_tag = "ve-list"

    ve_info: Annotated[list[VeInfo], XmlElement("ve-info")] = Field(
        default_factory=list
    )


class CPU(XmlModel):
    number: Annotated[int, XmlAttr("number")] = 0
    power: Annotated[int, XmlAttr("power")] = 0


class VeDisk(XmlModel):
    storage_id: Annotated[str, XmlAttr("storage-id")] = ""
    created: Annotated[bool, XmlAttr("created")] = False
    global_id: Annotated[int, XmlAttr("global-id")] = 0
    id: Annotated[int, XmlAttr("id")] = 0
    type: Annotated[str, XmlAttr("type")] = ""
    size: Annotated[int, XmlAttr("size")] = 0


class TemplateInfo(XmlModel):
    name: Annotated[str, XmlAttr("name")] = ""


class OSInfo(XmlModel):
    type: Annotated[str, XmlAttr("type")] = ""
    technology: Annotated[str, XmlAttr("technology")] = ""
    family: Annotated[str, XmlAttr("family", omitempty=True)] = ""


class Platform(XmlModel):
    template_info: Annotated[TemplateInfo, XmlElement("template-info")] = Field(
        default_factory=TemplateInfo
    )
    os_info: Annotated[OSInfo, XmlElement("os-info")] = Field(default_factory=OSInfo)


class PublicIP(XmlModel):
    chunk_ref: Annotated[int, XmlAttr("chunk-ref")] = 0
    id: Annotated[int, XmlAttr("id")] = 0
    address: Annotated[Optional[IPAddr], XmlAttr("address")] = None
    gateway: Annotated[Optional[IPAddr], XmlAttr("gateway")] = None


class PublicIPv6(XmlModel):
    id: Annotated[int, XmlAttr("id")] = 0
    address: Annotated[Optional[IPAddr], XmlAttr("address")] = None
    gateway: Annotated[Optional[IPAddr], XmlAttr("gateway")] = None


class Network(XmlModel):
    private_ip: Annotated[Optional[IPAddr], XmlAttr("private-ip")] = None
    public_ip: Annotated[list[PublicIP], XmlElement("public-ip")] = Field(
        default_factory=list
    )
    public_ip6: Annotated[list[PublicIPv6], XmlElement("public-ip6")] = Field(
        default_factory=list
    )


class BackupSchedule(XmlModel):
    name: Annotated[str, XmlAttr("name")] = ""


class Console(XmlModel):
    address: Annotated[Optional[IPAddr], XmlElement("address")] = None
    port: Annotated[int, XmlElement("port")] = 0


class Admin(XmlModel):
    login: Annotated[str, XmlAttr("login")] = ""
    password: Annotated[str, XmlElement("password")] = ""


class Traffic(XmlModel):
    sent: Annotated[int, XmlAttr("sent")] = 0
    received: Annotated[int, XmlAttr("received")] = 0


class AppInfo(XmlModel):
    app_template: Annotated[str, XmlAttr("app-template")] = ""
    for_os: Annotated[str, XmlAttr("for-os")] = ""
    installed_at: Annotated[str, XmlAttr("installed-at")] = ""
    installed_ok: Annotated[bool, XmlAttr("installed-ok")] = False
    uninstalled_at: Annotated[str, XmlAttr("uninstalled-at")] = ""
    uninstalled_ok: Annotated[bool, XmlAttr("uninstalled-ok")] = False
    app_template_id: Annotated[int, XmlAttr("app-template-id")] = 0


class ResourceConsumption(XmlModel):
    cpu: Annotated[int, XmlAttr("cpu")] = 0
    ram: Annotated[int, XmlAttr("ram")] = 0
    private_traffic: Annotated[Traffic, XmlElement("private-traffic")] = Field(
        default_factory=Traffic
    )
    public_traffic: Annotated[Traffic, XmlElement("public-traffic")] = Field(
        default_factory=Traffic
    )


class Ve(XmlModel):
    """Full server description."""

    xml_tag = "ve"

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
    app_info: Annotated[list[AppInfo], XmlElement("app-info")] = Field(
        default_factory=list
    )
    load_balancer: Annotated[str, XmlElement("load-balancer")] = ""
    steady_state: Annotated[str, XmlElement("steady-state")] = ""
    autoscale: Annotated[Optional[Autoscale], XmlElement("autoscale")] = None
    current_resource_consumption: Annotated[
        ResourceConsumption, XmlElement("current-resource-consumption")
    ] = Field(default_factory=ResourceConsumption)


class CreateVeDisk(XmlModel):
    local: Annotated[bool, XmlAttr("local")] = False
    primary: Annotated[bool, XmlAttr("primary", omitempty=True)] = False
    size: Annotated[int, XmlAttr("size")] = 0


class CreateVe(XmlModel):
    """Request body for creating a server; also the server spec in config files."""

    xml_tag = "ve"

    custom_ns: Annotated[bool, XmlAttr("custom-ns", omitempty=True)] = False
    name: Annotated[str, XmlElement("name")] = ""
    hostname: Annotated[str, XmlElement("hostname")] = ""
    description: Annotated[str, XmlElement("description")] = ""
    subscription_id: Annotated[int, XmlElement("subscription-id", omitempty=True)] = 0
    cpu: Annotated[CPU, XmlElement("cpu")] = Field(default_factory=CPU)
    ram_size: Annotated[int, XmlElement("ram-size")] = 0
    bandwidth: Annotated[int, XmlElement("bandwidth")] = 0
    no_of_public_ip: Annotated[int, XmlElement("no-of-public-ip", omitempty=True)] = 0
    no_of_public_ipv6: Annotated[
        int, XmlElement("no-of-public-ipv6", omitempty=True)
    ] = 0
    ve_disk: Annotated[CreateVeDisk, XmlElement("ve-disk")] = Field(
        default_factory=CreateVeDisk
    )
    platform: Annotated[Platform, XmlElement("platform")] = Field(
        default_factory=Platform
    )
    backup_schedule: Annotated[
        Optional[BackupSchedule], XmlElement("backup-schedule")
    ] = None


class ChangeCPU(XmlModel):
    number: Annotated[int, XmlAttr("number", omitempty=True)] = 0
    power: Annotated[int, XmlAttr("power", omitempty=True)] = 0


class AddIP(XmlModel):
    number: Annotated[int, XmlAttr("number")] = 0


class DropIP(XmlModel):
    ip: Annotated[IPAddrList, XmlAttr("ip")] = Field(default_factory=IPAddrList)


class ReconfigureIP(XmlModel):
    add_ip: Annotated[Optional[AddIP], XmlElement("add-ip")] = None
    drop_ip: Annotated[Optional[DropIP], XmlElement("drop-ip")] = None


class ReconfigureVe(XmlModel):
    """Request body for the modify command; only populated fields are sent."""

    xml_tag = "reconfigure-ve"

    description: Annotated[str, XmlElement("description", omitempty=True)] = ""
    change_cpu: Annotated[Optional[ChangeCPU], XmlElement("change-cpu")] = None
    ram_size: Annotated[int, XmlElement("ram-size", omitempty=True)] = 0
    bandwidth: Annotated[int, XmlElement("bandwidth", omitempty=True)] = 0
    reconfigure_ipv4: Annotated[
        Optional[ReconfigureIP], XmlElement("reconfigure-ipv4")
    ] = None
    reconfigure_ipv6: Annotated[
        Optional[ReconfigureIP], XmlElement("reconfigure-ipv6")
    ] = None
    primary_disk_size: Annotated[
        int, XmlElement("primary-disk-size", omitempty=True)
    ] = 0
    custom_ns: Annotated[Optional[int], XmlElement("custom-ns")] = None

    def is_empty(self) -> bool:
        return self == ReconfigureVe()


class VeSnapshot(XmlModel):
    cpu: Annotated[int, XmlAttr("cpu")] = 0
    ram: Annotated[int, XmlAttr("ram")] = 0
    local_disk: Annotated[int, XmlAttr("local-disk")] = 0
    nbd: Annotated[int, XmlAttr("nbd")] = 0
    bandwidth: Annotated[int, XmlAttr("bandwidth")] = 0
    last_touched_from: Annotated[str, XmlAttr("last-touched-from")] = ""
    state: Annotated[str, XmlAttr("state")] = ""
    steady_state: Annotated[str, XmlAttr("steady-state")] = ""
    last_changed_by: Annotated[str, XmlAttr("last-changed-by")] = ""
    event_timestamp: Annotated[Optional[Timestamp], XmlAttr("event-timestamp")] = None
    no_of_public_ip: Annotated[int, XmlAttr("no-of-public-ip")] = 0
    no_of_public_ipv6: Annotated[int, XmlAttr("no-of-public-ipv6")] = 0
    is_lb: Annotated[bool, XmlAttr("is-lb")] = False
    private_incoming_traffic: Annotated[int, XmlAttr("private-incoming-traffic")] = 0
    private_outgoing_traffic: Annotated[int, XmlAttr("private-outgoing-traffic")] = 0
    public_incoming_traffic: Annotated[int, XmlAttr("public-incoming-traffic")] = 0
    public_outgoing_traffic: Annotated[int, XmlAttr("public-outgoing-traffic")] = 0


class VeHistory(XmlModel):
    xml_tag = "ve-history"

    ve_snapshot: Annotated[list[VeSnapshot], XmlElement("ve-snapshot")] = Field(
        default_factory=list
    )


class ResourceUsage(XmlModel):
    value: Annotated[int, XmlAttr("value")] = 0
    resource_usage_type: Annotated[str, XmlAttr("resource-usage-type")] = ""
    resource_type: Annotated[str, XmlAttr("resource-type")] = ""


class VeTraffic(XmlModel):
    traffic_type: Annotated[str, XmlAttr("traffic-type")] = ""
    used: Annotated[int, XmlAttr("used")] = 0


class ActiveBackupSchedule(XmlModel):
    schedule_name: Annotated[str, XmlAttr("schedule-name")] = ""


class VeResourceUsageReport(XmlModel):
    xml_tag = "ve-resource-usage-report"

    ve_name: Annotated[str, XmlAttr("ve-name")] = ""
    ve_id: Annotated[int, XmlAttr("ve-id")] = 0
    os: Annotated[str, XmlAttr("os")] = ""
    technology: Annotated[str, XmlAttr("technology")] = ""
    life_time_in_minutes: Annotated[int, XmlAttr("life-time-in-minutes")] = 0
    is_load_balancer: Annotated[bool, XmlAttr("is-load-balancer")] = False
    resource_usage: Annotated[list[ResourceUsage], XmlElement("resource-usage")] = (
        Field(default_factory=list)
    )
    ve_traffic: Annotated[list[VeTraffic], XmlElement("ve-traffic")] = Field(
        default_factory=list
    )
    active_backup_schedule: Annotated[
        list[ActiveBackupSchedule], XmlElement("active-backup-schedule")
    ] = Field(default_factory=list)

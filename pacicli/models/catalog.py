"""Catalog records: application templates, OS templates and server images."""

from typing import Annotated, Optional

from pydantic import Field

from pacicli.models.binding import XmlAttr, XmlElement, XmlModel
from pacicli.models.server import Platform
from pacicli.values import Timestamp


class ApplicationTemplate(XmlModel):
    xml_tag = "application-template"

    id: Annotated[int, XmlAttr("id")] = 0
    name: Annotated[str, XmlAttr("name")] = ""
    for_os: Annotated[str, XmlAttr("for-os")] = ""
    description: Annotated[str, XmlElement("description")] = ""


class ApplicationList(XmlModel):
    xml_tag = "application-list"

    application_template: Annotated[
        list[ApplicationTemplate], XmlElement("application-template")
    ] = Field(default_factory=list)


class TemplateOption(XmlModel):
    name: Annotated[str, XmlAttr("name")] = ""
    value: Annotated[str, XmlAttr("value")] = ""


class Template(XmlModel):
    """An OS template servers can be created from."""

    xml_tag = "template"

    id: Annotated[int, XmlAttr("id")] = 0
    name: Annotated[str, XmlAttr("name")] = ""
    os_type: Annotated[str, XmlAttr("osType")] = ""
    technology: Annotated[str, XmlAttr("technology")] = ""
    active: Annotated[bool, XmlAttr("active")] = False
    default: Annotated[bool, XmlAttr("default")] = False
    root_login: Annotated[str, XmlAttr("root-login")] = ""
    min_hdd_size: Annotated[int, XmlAttr("min-hdd-size")] = 0
    pwd_regex: Annotated[str, XmlAttr("pwd-regex")] = ""
    high_watermark_for_delivery: Annotated[
        int, XmlAttr("high-watermark-for-delivery")
    ] = 0
    low_watermark_for_delivery: Annotated[
        int, XmlAttr("low-watermark-for-delivery")
    ] = 0
    option: Annotated[list[TemplateOption], XmlElement("option")] = Field(
        default_factory=list
    )


class TemplateList(XmlModel):
    xml_tag = "template-list"

    template: Annotated[list[Template], XmlElement("template")] = Field(
        default_factory=list
    )


class ImageInfo(XmlModel):
    name: Annotated[str, XmlAttr("name")] = ""
    description: Annotated[str, XmlAttr("description")] = ""
    size: Annotated[int, XmlAttr("size")] = 0
    created: Annotated[Optional[Timestamp], XmlAttr("created")] = None
    subscription_id: Annotated[int, XmlAttr("subscription-id")] = 0
    image_of: Annotated[str, XmlAttr("image-of")] = ""
    location: Annotated[str, XmlAttr("location")] = ""


class ImageList(XmlModel):
    xml_tag = "image-list"

    image_info: Annotated[list[ImageInfo], XmlElement("image-info")] = Field(
        default_factory=list
    )


class DiskInfo(XmlModel):
    id: Annotated[int, XmlAttr("id")] = 0
    type: Annotated[str, XmlAttr("type")] = ""
    primary: Annotated[bool, XmlAttr("primary")] = False
    size: Annotated[int, XmlAttr("size")] = 0


class VeImage(XmlModel):
    xml_tag = "ve-image"

    id: Annotated[int, XmlAttr("id")] = 0
    bnode_uuid: Annotated[str, XmlAttr("bnode-uuid")] = ""
    customer_id: Annotated[int, XmlAttr("customer-id")] = 0
    subscription_id: Annotated[int, XmlAttr("subscription-id")] = 0
    name: Annotated[str, XmlAttr("name")] = ""
    hostname: Annotated[str, XmlAttr("hostname")] = ""
    description: Annotated[str, XmlElement("description")] = ""
    cpu_number: Annotated[int, XmlAttr("cpu-number")] = 0
    cpu_power: Annotated[int, XmlAttr("cpu-power")] = 0
    ram_size: Annotated[int, XmlAttr("ram-size")] = 0
    bandwidth: Annotated[int, XmlAttr("bandwidth")] = 0
    login: Annotated[str, XmlAttr("login")] = ""
    primary_disk_id: Annotated[int, XmlAttr("primary-disk-id")] = 0
    image_size: Annotated[int, XmlAttr("image-size")] = 0
    created: Annotated[Optional[Timestamp], XmlAttr("created")] = None
    image_of: Annotated[str, XmlAttr("image-of")] = ""
    no_of_public_ip: Annotated[int, XmlAttr("no-of-public-ip")] = 0
    no_of_public_ipv6: Annotated[int, XmlAttr("no-of-public-ipv6")] = 0
    custom_ns: Annotated[bool, XmlAttr("custom-ns")] = False
    disks: Annotated[list[DiskInfo], XmlElement("disks")] = Field(
        default_factory=list
    )
    platform: Annotated[Platform, XmlElement("platform")] = Field(
        default_factory=Platform
    )

"""
API records and their XML binding.
"""

from pacicli.models.autoscale import (
    Autoscale,
    AutoscaleData,
    AutoscaleEvent,
    AutoscaleRule,
    AutoscaleRuleSet,
    Limits,
    ResourceConsumptionAndAutoscaleHistory,
    ResourceConsumptionSample,
    Threshold,
    Thresholds,
)
from pacicli.models.backup import (
    Backup,
    BackupScheduleEntry,
    BackupScheduleList,
    VeBackups,
)
from pacicli.models.binding import XmlAttr, XmlElement, XmlModel
from pacicli.models.catalog import (
    ApplicationList,
    ApplicationTemplate,
    DiskInfo,
    ImageInfo,
    ImageList,
    Template,
    TemplateList,
    TemplateOption,
    VeImage,
)
from pacicli.models.firewall import Firewall, FirewallRule
from pacicli.models.loadbalancer import LbInfo, LbList, LoadBalancer, UsedBy
from pacicli.models.server import (
    CPU,
    AddIP,
    Admin,
    AppInfo,
    BackupSchedule,
    ChangeCPU,
    Console,
    CreateVe,
    CreateVeDisk,
    DropIP,
    Network,
    OSInfo,
    PasswordResponse,
    Platform,
    PublicIP,
    PublicIPv6,
    ReconfigureIP,
    ReconfigureVe,
    ResourceConsumption,
    TemplateInfo,
    Traffic,
    Ve,
    VeDisk,
    VeHistory,
    VeInfo,
    VeList,
    VeResourceUsageReport,
    VeSnapshot,
)

__all__ = [
    "XmlModel",
    "XmlAttr",
    "XmlElement",
    # Servers
    "PasswordResponse",
    "VeInfo",
    "VeList",
    "CPU",
    "VeDisk",
    "TemplateInfo",
    "OSInfo",
    "Platform",
    "PublicIP",
    "PublicIPv6",
    "Network",
    "BackupSchedule",
    "Console",
    "Admin",
    "Traffic",
    "AppInfo",
    "ResourceConsumption",
    "Ve",
    "CreateVeDisk",
    "CreateVe",
    "ChangeCPU",
    "AddIP",
    "DropIP",
    "ReconfigureIP",
    "ReconfigureVe",
    "VeSnapshot",
    "VeHistory",
    "VeResourceUsageReport",
    # Firewall
    "FirewallRule",
    "Firewall",
    # Backups
    "Backup",
    "VeBackups",
    "BackupScheduleEntry",
    "BackupScheduleList",
    # Autoscale
    "Threshold",
    "Limits",
    "Thresholds",
    "AutoscaleRule",
    "AutoscaleRuleSet",
    "Autoscale",
    "AutoscaleData",
    "ResourceConsumptionSample",
    "AutoscaleEvent",
    "ResourceConsumptionAndAutoscaleHistory",
    # Catalog
    "ApplicationTemplate",
    "ApplicationList",
    "TemplateOption",
    "Template",
    "TemplateList",
    "ImageInfo",
    "ImageList",
    "DiskInfo",
    "VeImage",
    # Load balancers
    "LbInfo",
    "LbList",
    "UsedBy",
    "LoadBalancer",
]

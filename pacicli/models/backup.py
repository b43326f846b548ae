"""Backups and backup schedules."""

from typing import Annotated, Optional

from pydantic import Field

from pacicli.models.binding import XmlAttr, XmlElement, XmlModel
from pacicli.values import Timestamp


class Backup(XmlModel):
    xml_tag = "backup"

    im_backup_id: Annotated[int, XmlAttr("im-backup-id")] = 0
    cloud_backup_id: Annotated[str, XmlAttr("cloud-backup-id")] = ""
    schedule_name: Annotated[str, XmlAttr("schedule-name")] = ""
    started: Annotated[Optional[Timestamp], XmlAttr("started")] = None
    ended: Annotated[Optional[Timestamp], XmlAttr("ended")] = None
    successful: Annotated[bool, XmlAttr("successful")] = False
    backup_size: Annotated[int, XmlAttr("backup-size")] = 0
    backup_node_name: Annotated[str, XmlAttr("backup-node-name")] = ""
    description: Annotated[str, XmlElement("description")] = ""


class VeBackups(XmlModel):
    xml_tag = "ve-backups"

    backup: Annotated[list[Backup], XmlElement("backup")] = Field(
        default_factory=list
    )


class BackupScheduleEntry(XmlModel):
    id: Annotated[int, XmlAttr("id")] = 0
    name: Annotated[str, XmlAttr("name")] = ""
    description: Annotated[str, XmlElement("description")] = ""
    enabled: Annotated[bool, XmlAttr("enabled")] = False
    backups_to_keep: Annotated[int, XmlAttr("backups-to-keep")] = 0
    no_of_incremental: Annotated[int, XmlAttr("no-of-incremental")] = 0


class BackupScheduleList(XmlModel):
    xml_tag = "backup-schedule-list"

    backup_schedule: Annotated[
        list[BackupScheduleEntry], XmlElement("backup-schedule")
    ] = Field(default_factory=list)

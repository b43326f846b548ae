"""Autoscale rules and resource consumption history."""

from typing import Annotated, Optional

from pydantic import Field

from pacicli.models.binding import XmlAttr, XmlElement, XmlModel
from pacicli.values import Timestamp


class Threshold(XmlModel):
    threshold: Annotated[Optional[int], XmlAttr("threshold")] = None
    period: Annotated[int, XmlAttr("period")] = 0


class Limits(XmlModel):
    min: Annotated[int, XmlAttr("min")] = 0
    max: Annotated[int, XmlAttr("max")] = 0
    step: Annotated[int, XmlAttr("step")] = 0


class Thresholds(XmlModel):
    up: Annotated[Optional[Threshold], XmlElement("up")] = None
    down: Annotated[Optional[Threshold], XmlElement("down")] = None


class AutoscaleRule(XmlModel):
    """
    One autoscale rule for a metric.

    Most attributes are optional: the API omits them in rule definitions
    sent by the client and fills them in on the rules it returns.
    """

    xml_tag = "autoscale-rule"

    enabled: Annotated[Optional[bool], XmlAttr("enabled")] = None
    deleted: Annotated[Optional[bool], XmlAttr("deleted")] = None
    metric: Annotated[str, XmlAttr("metric")] = ""
    version: Annotated[Optional[int], XmlAttr("version")] = None
    updated: Annotated[Optional[Timestamp], XmlAttr("updated", omitempty=True)] = None
    update_delivered_ok: Annotated[
        Optional[bool], XmlAttr("update-delivered-ok")
    ] = None
    update_delivered: Annotated[
        Optional[Timestamp], XmlAttr("update-delivered", omitempty=True)
    ] = None
    allow_migration: Annotated[Optional[bool], XmlAttr("allow-migration")] = None
    allow_restart: Annotated[Optional[bool], XmlAttr("allow-restart")] = None
    limits: Annotated[Optional[Limits], XmlElement("limits")] = None
    thresholds: Annotated[Optional[Thresholds], XmlElement("thresholds")] = None


class AutoscaleRuleSet(XmlModel):
    autoscale_rule: Annotated[
        list[AutoscaleRule], XmlElement("autoscale-rule")
    ] = Field(default_factory=list)


class Autoscale(XmlModel):
    """Current and in-flight autoscale rules of a server."""

    xml_tag = "autoscale"

    current: Annotated[Optional[AutoscaleRuleSet], XmlElement("current")] = None
    ongoing: Annotated[Optional[AutoscaleRuleSet], XmlElement("ongoing")] = None


class AutoscaleData(XmlModel):
    """Request body for autoscale-create and autoscale-update."""

    xml_tag = "autoscale-data"

    autoscale_rule: Annotated[
        list[AutoscaleRule], XmlElement("autoscale-rule")
    ] = Field(default_factory=list)


class ResourceConsumptionSample(XmlModel):
    ram_usage: Annotated[int, XmlAttr("ram-usage")] = 0
    cpu_usage: Annotated[int, XmlAttr("cpu-usage")] = 0
    private_incoming_traffic: Annotated[int, XmlAttr("private-incoming-traffic")] = 0
    private_outgoing_traffic: Annotated[int, XmlAttr("private-outgoing-traffic")] = 0
    public_incoming_traffic: Annotated[int, XmlAttr("public-incoming-traffic")] = 0
    public_outgoing_traffic: Annotated[int, XmlAttr("public-outgoing-traffic")] = 0
    node_seq_no: Annotated[int, XmlAttr("node-seq-no")] = 0
    node_timestamp: Annotated[Optional[Timestamp], XmlAttr("node-timestamp")] = None
    paci_timestamp: Annotated[Optional[Timestamp], XmlAttr("paci-timestamp")] = None
    cpu: Annotated[int, XmlAttr("cpu")] = 0
    ram: Annotated[int, XmlAttr("ram")] = 0
    bandwidth: Annotated[int, XmlAttr("bandwidth")] = 0


class AutoscaleEvent(XmlModel):
    direction: Annotated[str, XmlAttr("direction")] = ""
    rule_version: Annotated[int, XmlAttr("rule-version")] = 0
    node_seq_no: Annotated[int, XmlAttr("node-seq-no")] = 0
    node_timestamp: Annotated[Optional[Timestamp], XmlAttr("node-timestamp")] = None
    metric: Annotated[str, XmlAttr("metric")] = ""
    new_value: Annotated[int, XmlAttr("new-value")] = 0
    node_uuid: Annotated[str, XmlAttr("node-uuid")] = ""
    started: Annotated[str, XmlAttr("started")] = ""
    ended: Annotated[str, XmlAttr("ended")] = ""
    ended_ok: Annotated[bool, XmlAttr("ended-ok")] = False


class ResourceConsumptionAndAutoscaleHistory(XmlModel):
    xml_tag = "resource-consumption-and-autoscale-history"

    resource_consumption_sample: Annotated[
        list[ResourceConsumptionSample], XmlElement("resource-consumption-sample")
    ] = Field(default_factory=list)
    autoscale_event: Annotated[
        Optional[AutoscaleEvent], XmlElement("autoscale-event")
    ] = None
    autoscale_rule: Annotated[
        list[AutoscaleRule], XmlElement("autoscale-rule")
    ] = Field(default_factory=list)

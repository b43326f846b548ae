"""
XML binding for API records.

Records are pydantic models whose fields are annotated with an XmlAttr or
XmlElement marker naming the attribute or child element they map to::

    class CPU(XmlModel):
        number: Annotated[int, XmlAttr("number")] = 0
        power: Annotated[int, XmlAttr("power")] = 0

Decoding turns an element tree into plain data and lets pydantic validate
it, so text values such as IPAddr and Timestamp parse through their own
validators. Encoding walks the model and writes attributes and child
elements back, using ``to_text`` for text values.
"""

import types
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.fields import FieldInfo

from pacicli.errors import PayloadDecodeError
from pacicli.values.base import SupportsText


@dataclass(frozen=True)
class XmlAttr:
    """Field maps to an attribute of the record's element."""

    name: str
    omitempty: bool = False


@dataclass(frozen=True)
class XmlElement:
    """Field maps to one child element, or repeated child elements for lists."""

    name: str
    omitempty: bool = False


XmlNode = Union[XmlAttr, XmlElement]


def xml_node(info: FieldInfo) -> Optional[XmlNode]:
    """Return the XML marker attached to a model field, if any."""
    for item in info.metadata:
        if isinstance(item, (XmlAttr, XmlElement)):
            return item
    return None


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def field_shape(annotation: Any) -> tuple[bool, Any]:
    """
    Describe a field annotation as ``(repeated, item_type)``.

    ``Optional[X]`` is treated as ``X``, ``list[X]`` as repeated ``X``.
    """
    annotation = _unwrap_optional(annotation)
    if get_origin(annotation) is list:
        (item,) = get_args(annotation)
        return True, _unwrap_optional(item)
    return False, annotation


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _is_empty(value: Any) -> bool:
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return value == 0
    return False


def to_wire_text(value: Any) -> str:
    """Convert a leaf value to its XML text form."""
    if isinstance(value, SupportsText):
        return value.to_text()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def element_to_data(model: type[BaseModel], element: ET.Element) -> dict[str, Any]:
    """
    Collect the values a model's fields map to from an element.

    Missing attributes and child elements are left out so the model's
    defaults apply.
    """
    data: dict[str, Any] = {}
    for name, info in model.model_fields.items():
        node = xml_node(info)
        if node is None:
            continue

        if isinstance(node, XmlAttr):
            value = element.get(node.name)
            if value is not None:
                data[name] = value
            continue

        children = element.findall(node.name)
        if not children:
            continue
        repeated, item = field_shape(info.annotation)
        if repeated:
            data[name] = [_child_value(item, child) for child in children]
        else:
            data[name] = _child_value(item, children[0])
    return data


def _child_value(item: Any, child: ET.Element) -> Any:
    if _is_model(item):
        return element_to_data(item, child)
    return child.text or ""


def fill_element(record: BaseModel, element: ET.Element) -> ET.Element:
    """Write a record's fields into an element as attributes and children."""
    for name, info in type(record).model_fields.items():
        node = xml_node(info)
        if node is None:
            continue

        value = getattr(record, name)
        if value is None or (node.omitempty and _is_empty(value)):
            continue

        if isinstance(node, XmlAttr):
            element.set(node.name, to_wire_text(value))
            continue

        repeated, _ = field_shape(info.annotation)
        for item in value if repeated else [value]:
            child = ET.SubElement(element, node.name)
            if isinstance(item, BaseModel):
                fill_element(item, child)
            else:
                child.text = to_wire_text(item)
    return element


class XmlModel(BaseModel):
    """
    Base class for records exchanged with the API as XML.

    Attributes:
        xml_tag: Root element name when the record is a whole payload
    """

    model_config = ConfigDict(extra="ignore")

    xml_tag: ClassVar[Optional[str]] = None

    @classmethod
    def from_xml(cls, payload: Union[bytes, str]):
        """
        Decode an XML payload into this record type.

        Raises:
            PayloadDecodeError: If the payload is not well-formed, has the
                wrong root element or does not validate
        """
        try:
            root = ET.fromstring(payload)
        except ET.ParseError as e:
            raise PayloadDecodeError(
                message=f"Malformed XML response: {e}",
                error_code="PAYLOAD-MalformedXml",
                details={"record": cls.__name__},
            ) from e

        if cls.xml_tag is not None and root.tag != cls.xml_tag:
            raise PayloadDecodeError(
                message=f"Expected <{cls.xml_tag}> but got <{root.tag}>",
                error_code="PAYLOAD-UnexpectedElement",
                details={"expected": cls.xml_tag, "actual": root.tag},
            )

        try:
            return cls.model_validate(element_to_data(cls, root))
        except ValidationError as e:
            raise PayloadDecodeError(
                message=f"Invalid {cls.__name__} payload: {e}",
                error_code="PAYLOAD-ValidationFailed",
                details={"validation_errors": e.errors(include_url=False)},
            ) from e

    def to_element(self, tag: Optional[str] = None) -> ET.Element:
        element_tag = tag or self.xml_tag
        if element_tag is None:
            raise ValueError(f"{type(self).__name__} has no XML element name")
        return fill_element(self, ET.Element(element_tag))

    def to_xml(self) -> bytes:
        """Encode this record as a request body."""
        return ET.tostring(self.to_element(), encoding="utf-8")

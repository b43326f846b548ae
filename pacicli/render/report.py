"""
Introspective report renderer.

Walks any record (a pydantic model or a dataclass instance) field by field
and prints an indented ``name: value`` report. Nothing about the record's
shape is known in advance: values that implement ``to_text`` print their
wire text, everything else is handled by kind. Absent optionals and values
of unknown kind print nothing; the report is best-effort and never raises.
"""

import dataclasses
import sys
from typing import Any, Iterator, Optional, TextIO

from pydantic import BaseModel

from pacicli.errors import PaciError
from pacicli.logging import get_logger
from pacicli.values.base import SupportsText

logger = get_logger(__name__)

INDENT_WIDTH = 2

# Fields that only name the XML element and carry no data
FORMAT_TAG_FIELDS = frozenset({"XMLName", "xml_name"})


def is_record(value: Any) -> bool:
    """Return True for pydantic model and dataclass instances."""
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def iter_record_fields(value: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` for each field of a record in declaration order."""
    if isinstance(value, BaseModel):
        for name in type(value).model_fields:
            yield name, getattr(value, name)
    elif is_record(value):
        for field in dataclasses.fields(value):
            yield field.name, getattr(value, field.name)


def format_scalar(value: Any) -> Optional[str]:
    """
    Format a leaf value, or return None when it has no printable form.

    The text capability is checked first, then bool before int since
    bool is an int subclass.
    """
    if isinstance(value, SupportsText):
        try:
            return value.to_text()
        except (PaciError, ValueError) as e:
            logger.debug(f"Skipping unprintable {type(value).__name__}: {e}")
            return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    return None


def render_record(value: Any, indent: int = 0, file: Optional[TextIO] = None) -> None:
    """
    Print every populated field of a record.

    Args:
        value: Record to print; anything that is not a record prints nothing
        indent: Indentation level, two spaces per level
        file: Output stream, standard output by default
    """
    if not is_record(value):
        return

    out = file if file is not None else sys.stdout
    pad = " " * (indent * INDENT_WIDTH)

    for name, field_value in iter_record_fields(value):
        if name in FORMAT_TAG_FIELDS or field_value is None:
            continue

        text = format_scalar(field_value)
        if text is not None:
            print(f"{pad}{name}: {text}", file=out)
        elif is_record(field_value):
            print(f"{pad}{name}:", file=out)
            render_record(field_value, indent + 1, out)
        elif isinstance(field_value, (list, tuple)):
            for element in field_value:
                if element is None:
                    continue
                element_text = format_scalar(element)
                if element_text is not None:
                    print(f"{pad}{name}: {element_text}", file=out)
                    continue
                print(f"{pad}{name}:", file=out)
                render_record(element, indent + 1, out)
        elif isinstance(field_value, dict):
            print(f"{pad}{name}:", file=out)
            key_pad = " " * ((indent + 1) * INDENT_WIDTH)
            for key, element in field_value.items():
                print(f"{key_pad}{key}:", file=out)
                render_record(element, indent + 2, out)

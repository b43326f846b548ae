"""
Text capability shared by the wire value types.

A value that knows how to turn itself into wire text implements
``to_text()``. The renderer and the XML binding check for this capability
before falling back to kind-based handling, and the pydantic hook below
lets the same types be used as model fields that validate from text and
serialize back to it.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


@runtime_checkable
class SupportsText(Protocol):
    """Anything that converts itself to its canonical wire text."""

    def to_text(self) -> str: ...


class TextValue:
    """
    Mixin for immutable values parsed from and serialized to wire text.

    Subclasses implement ``parse`` (raising a ValueFormatError subclass on
    bad input) and ``to_text``.
    """

    @classmethod
    def parse(cls, text: str) -> Any:
        raise NotImplementedError

    def to_text(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"{cls.__name__} expects text, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_text(), return_schema=core_schema.str_schema()
            ),
        )

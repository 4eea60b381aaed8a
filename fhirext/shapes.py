"""Catalog of extension value shapes.

FHIR R4 encodes an extension's value as exactly one ``value[x]`` field, where
``[x]`` is the type name in upper camel case. The catalog here is closed: a
shape not listed cannot be addressed by the typed accessors, although the
locator and mutator still handle such extensions as plain dicts.
"""

from enum import Enum

VALUE_PREFIX = "value"


class ValueShape(str, Enum):
    """Value shapes and their FHIR type names."""

    # Primitive shapes
    STRING = "String"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    DECIMAL = "Decimal"
    URL = "Url"
    CODE = "Code"
    CANONICAL = "Canonical"
    URI = "Uri"
    MARKDOWN = "Markdown"
    ID = "Id"
    OID = "Oid"
    UUID = "Uuid"
    DATE = "Date"
    DATE_TIME = "DateTime"
    INSTANT = "Instant"
    TIME = "Time"
    POSITIVE_INT = "PositiveInt"
    UNSIGNED_INT = "UnsignedInt"
    BASE64_BINARY = "Base64Binary"

    # Structured shapes
    CODING = "Coding"
    CODEABLE_CONCEPT = "CodeableConcept"
    QUANTITY = "Quantity"
    DURATION = "Duration"
    REFERENCE = "Reference"
    EXPRESSION = "Expression"
    IDENTIFIER = "Identifier"
    PERIOD = "Period"

    @property
    def field_name(self) -> str:
        """Wire field name, e.g. ``valueString``."""
        return f"{VALUE_PREFIX}{self.value}"

    @property
    def is_structured(self) -> bool:
        return self in STRUCTURED_SHAPES

    @classmethod
    def from_field_name(cls, field_name: str) -> "ValueShape | None":
        """Look up the shape for a ``value[x]`` field name.

        Returns:
            The matching shape, or None for keys outside the catalog.
        """
        return _SHAPES_BY_FIELD.get(field_name)


STRUCTURED_SHAPES = frozenset(
    {
        ValueShape.CODING,
        ValueShape.CODEABLE_CONCEPT,
        ValueShape.QUANTITY,
        ValueShape.DURATION,
        ValueShape.REFERENCE,
        ValueShape.EXPRESSION,
        ValueShape.IDENTIFIER,
        ValueShape.PERIOD,
    }
)

_SHAPES_BY_FIELD: dict[str, ValueShape] = {shape.field_name: shape for shape in ValueShape}


def value_fields(extension: dict) -> list[str]:
    """Return the ``value[x]`` keys present on an extension dict, in key order.

    Any key starting with ``value`` followed by an upper case letter counts,
    including shapes outside the catalog.
    """
    return [
        key
        for key in extension
        if key.startswith(VALUE_PREFIX) and key[len(VALUE_PREFIX):][:1].isupper()
    ]

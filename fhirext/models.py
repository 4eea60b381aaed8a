"""Pydantic models for extensions and structured extension values.

Elements and extensions travel as plain FHIR JSON dicts. These models are the
typed view over them: ``Extension`` pairs a url with exactly one value tagged
by its ``ValueShape``, and the structured value models validate Coding,
Quantity and the other complex datatypes before they are written into an
element.

FHIR reference: https://hl7.org/fhir/R4/extensibility.html
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fhirext.config import settings
from fhirext.errors import InvalidExtensionError
from fhirext.shapes import ValueShape, value_fields

_TEMPORAL_SHAPES = frozenset(
    {ValueShape.DATE, ValueShape.DATE_TIME, ValueShape.INSTANT, ValueShape.TIME}
)


class FhirDatatype(BaseModel):
    """Base for complex datatypes.

    Unknown keys (``id``, nested ``extension``) are kept so that nothing a
    caller supplied is lost on the way into the element.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_fhir(self) -> dict[str, Any]:
        """Dump to FHIR JSON, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Coding(FhirDatatype):
    """A code defined by a terminology system."""

    system: str | None = None
    version: str | None = None
    code: str | None = None
    display: str | None = None
    user_selected: bool | None = Field(default=None, alias="userSelected")


class CodeableConcept(FhirDatatype):
    """A concept given by one or more codings and/or text."""

    coding: list[Coding] | None = None
    text: str | None = None


class Quantity(FhirDatatype):
    """A measured amount."""

    value: int | float | None = None
    comparator: str | None = Field(default=None, description="<, <=, >= or >")
    unit: str | None = None
    system: str | None = None
    code: str | None = None


class Duration(Quantity):
    """A length of time, expressed as a Quantity."""


class Period(FhirDatatype):
    """A time range given by start and/or end dateTime strings."""

    start: str | None = None
    end: str | None = None


class Identifier(FhirDatatype):
    """A business identifier."""

    use: str | None = None
    type: CodeableConcept | None = None
    system: str | None = None
    value: str | None = None
    period: Period | None = None
    assigner: "Reference | None" = None


class Reference(FhirDatatype):
    """A reference from one resource to another."""

    reference: str | None = None
    type: str | None = None
    identifier: Identifier | None = None
    display: str | None = None


class Expression(FhirDatatype):
    """An expression that is evaluated in a specified context."""

    description: str | None = None
    name: str | None = None
    language: str = Field(..., description="Media type of the expression, e.g. text/fhirpath")
    expression: str | None = None
    reference: str | None = None


Identifier.model_rebuild()
Reference.model_rebuild()

STRUCTURED_MODELS: dict[ValueShape, type[FhirDatatype]] = {
    ValueShape.CODING: Coding,
    ValueShape.CODEABLE_CONCEPT: CodeableConcept,
    ValueShape.QUANTITY: Quantity,
    ValueShape.DURATION: Duration,
    ValueShape.REFERENCE: Reference,
    ValueShape.EXPRESSION: Expression,
    ValueShape.IDENTIFIER: Identifier,
    ValueShape.PERIOD: Period,
}


def normalize_value(shape: ValueShape, value: Any) -> Any:
    """Convert a value to the JSON form stored under the shape's field.

    Structured values may be given as a model or a dict; dicts are validated
    against the shape's model unless ``settings.validate_structured_values``
    is off. Dates and datetimes are written as ISO strings. Other primitive
    values are stored unchanged.

    Raises:
        InvalidExtensionError: The value is None, is a model of another
            shape, or a structured value failed validation.
    """
    if value is None:
        raise InvalidExtensionError(f"{shape.value} value must not be None")

    if shape.is_structured:
        model = STRUCTURED_MODELS[shape]
        # A Duration is a Quantity, so subclasses are accepted
        if isinstance(value, BaseModel):
            if not isinstance(value, model):
                raise InvalidExtensionError(
                    f"{shape.value} value must be a {model.__name__}, got {type(value).__name__}"
                )
            return value.model_dump(by_alias=True, exclude_none=True)
        if not isinstance(value, Mapping):
            raise InvalidExtensionError(
                f"{shape.value} value must be a mapping, got {type(value).__name__}"
            )
        if not settings.validate_structured_values:
            return dict(value)
        try:
            return model.model_validate(dict(value)).to_fhir()
        except ValidationError as e:
            raise InvalidExtensionError(f"Invalid {shape.value} value: {e}") from e

    if shape in _TEMPORAL_SHAPES and hasattr(value, "isoformat"):
        return value.isoformat()
    return value


class Extension(BaseModel):
    """A url paired with exactly one typed value.

    The value shape is an explicit discriminator, so an extension carrying
    two ``value[x]`` fields at once cannot be built.
    """

    url: str = Field(..., min_length=1, description="Identifies the meaning of the extension")
    shape: ValueShape = Field(..., description="Which value[x] field the value is written to")
    value: Any = Field(..., description="The value, in JSON form or as a datatype model")

    def to_fhir(self) -> dict[str, Any]:
        """Return the wire form ``{"url": ..., "value<Shape>": ...}``."""
        return {"url": self.url, self.shape.field_name: normalize_value(self.shape, self.value)}

    @classmethod
    def from_fhir(cls, data: Mapping[str, Any]) -> "Extension":
        """Read a wire-form extension dict.

        Raises:
            InvalidExtensionError: The dict has no url, no value field, more
                than one value field, or a value field outside the catalog.
        """
        if not isinstance(data, Mapping):
            raise InvalidExtensionError(f"Extension must be a mapping, got {type(data).__name__}")
        url = data.get("url")
        if not isinstance(url, str) or not url:
            raise InvalidExtensionError("Extension has no url")

        fields = value_fields(data)
        if len(fields) != 1:
            raise InvalidExtensionError(
                f"Extension {url!r} must carry exactly one value field, found {len(fields)}"
            )
        shape = ValueShape.from_field_name(fields[0])
        if shape is None:
            raise InvalidExtensionError(f"Extension {url!r} uses unsupported field {fields[0]!r}")
        return cls(url=url, shape=shape, value=data[fields[0]])


def make_extension(url: str, shape: ValueShape, value: Any) -> dict[str, Any]:
    """Build a wire-form extension dict for a url and a typed value."""
    return {"url": url, shape.field_name: normalize_value(shape, value)}

"""Typed extension value accessors.

One get/get-all/set/add family per value shape, built on the locator and
mutator. A getter only sees entries whose value is stored under its own
shape's field: ``get_extension_string_value`` returns None for a url whose
first entry holds a ``valueBoolean``.

Structured getters return the raw FHIR dict. Structured setters accept the
matching model from ``fhirext.models`` or a dict, validated before storing.

Shapes without a named family here are reachable through the generic
``get_extension_value``/``set_extension_value`` functions.
"""

from collections.abc import Mapping, MutableMapping
from datetime import date, datetime
from typing import Any

from fhirext.locator import get_extension, get_extensions
from fhirext.models import (
    CodeableConcept,
    Coding,
    Duration,
    Expression,
    Identifier,
    Period,
    Quantity,
    Reference,
    make_extension,
)
from fhirext.mutator import ElementFactory, add_extension, clear_extension, set_extension
from fhirext.shapes import ValueShape

Element = MutableMapping[str, Any]


# =============================================================================
# Generic accessors
# =============================================================================


def get_extension_value(element: Mapping[str, Any] | None, url: str, shape: ValueShape) -> Any:
    """Get the value of the first extension with this url.

    Args:
        element: FHIR resource, datatype or backbone element.
        url: Extension URL to read.
        shape: Expected value shape.

    Returns:
        The value, or None if there is no match or the first match holds a
        different shape.
    """
    extension = get_extension(element, url)
    if extension is None:
        return None
    return extension.get(shape.field_name)


def get_extension_values(
    element: Mapping[str, Any] | None, url: str, shape: ValueShape
) -> list[Any] | None:
    """Get the values of every extension with this url holding this shape.

    Falsy values (False, 0, "") are kept; entries of other shapes are skipped.

    Returns:
        Values in element order, or None if there are none. Never an empty list.
    """
    values = [
        extension[shape.field_name]
        for extension in get_extensions(element, url) or []
        if extension.get(shape.field_name) is not None
    ]
    return values or None


def set_extension_value(
    element: Element | None,
    url: str,
    shape: ValueShape,
    value: Any,
    create_element: ElementFactory | None = None,
) -> Element | None:
    """Set ``{url, value<Shape>}``, replacing any entries with the same url.

    A None value clears the url instead, since FHIR never carries an empty
    value field.
    """
    if value is None:
        clear_extension(element, url)
        return element
    return set_extension(element, make_extension(url, shape, value), create_element)


def add_extension_value(
    element: Element | None,
    url: str,
    shape: ValueShape,
    value: Any,
    create_element: ElementFactory | None = None,
) -> Element:
    """Append ``{url, value<Shape>}``, keeping entries with the same url."""
    return add_extension(element, make_extension(url, shape, value), create_element)


# =============================================================================
# Primitive shapes
# =============================================================================


def get_extension_string_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the string value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.STRING)


def get_extension_string_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.STRING)


def set_extension_string_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.STRING, value, create_element)


def add_extension_string_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.STRING, value, create_element)


def get_extension_boolean_value(element: Mapping[str, Any] | None, url: str) -> bool | None:
    """Get the boolean value of the first extension with this url.

    False is a real value here; None means there is no boolean to read.
    """
    return get_extension_value(element, url, ValueShape.BOOLEAN)


def get_extension_boolean_values(element: Mapping[str, Any] | None, url: str) -> list[bool] | None:
    return get_extension_values(element, url, ValueShape.BOOLEAN)


def set_extension_boolean_value(
    element: Element | None, url: str, value: bool, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.BOOLEAN, value, create_element)


def add_extension_boolean_value(
    element: Element | None, url: str, value: bool, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.BOOLEAN, value, create_element)


def get_extension_integer_value(element: Mapping[str, Any] | None, url: str) -> int | None:
    """Get the integer value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.INTEGER)


def get_extension_integer_values(element: Mapping[str, Any] | None, url: str) -> list[int] | None:
    return get_extension_values(element, url, ValueShape.INTEGER)


def set_extension_integer_value(
    element: Element | None, url: str, value: int, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.INTEGER, value, create_element)


def add_extension_integer_value(
    element: Element | None, url: str, value: int, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.INTEGER, value, create_element)


def get_extension_decimal_value(element: Mapping[str, Any] | None, url: str) -> float | None:
    """Get the decimal value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.DECIMAL)


def get_extension_decimal_values(element: Mapping[str, Any] | None, url: str) -> list[float] | None:
    return get_extension_values(element, url, ValueShape.DECIMAL)


def set_extension_decimal_value(
    element: Element | None, url: str, value: float, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.DECIMAL, value, create_element)


def add_extension_decimal_value(
    element: Element | None, url: str, value: float, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.DECIMAL, value, create_element)


def get_extension_url_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the url value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.URL)


def get_extension_url_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.URL)


def set_extension_url_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.URL, value, create_element)


def add_extension_url_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.URL, value, create_element)


def get_extension_code_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the code value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.CODE)


def get_extension_code_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.CODE)


def set_extension_code_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.CODE, value, create_element)


def add_extension_code_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.CODE, value, create_element)


def get_extension_canonical_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the canonical value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.CANONICAL)


def get_extension_canonical_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.CANONICAL)


def set_extension_canonical_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.CANONICAL, value, create_element)


def add_extension_canonical_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.CANONICAL, value, create_element)


def get_extension_uri_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the uri value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.URI)


def get_extension_uri_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.URI)


def set_extension_uri_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.URI, value, create_element)


def add_extension_uri_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.URI, value, create_element)


def get_extension_markdown_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the markdown value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.MARKDOWN)


def get_extension_markdown_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.MARKDOWN)


def set_extension_markdown_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element | None:
    return set_extension_value(element, url, ValueShape.MARKDOWN, value, create_element)


def add_extension_markdown_value(
    element: Element | None, url: str, value: str, create_element: ElementFactory | None = None
) -> Element:
    return add_extension_value(element, url, ValueShape.MARKDOWN, value, create_element)


def get_extension_date_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the date value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.DATE)


def get_extension_date_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.DATE)


def set_extension_date_value(
    element: Element | None,
    url: str,
    value: str | date,
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.DATE, value, create_element)


def add_extension_date_value(
    element: Element | None,
    url: str,
    value: str | date,
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.DATE, value, create_element)


def get_extension_date_time_value(element: Mapping[str, Any] | None, url: str) -> str | None:
    """Get the dateTime value of the first extension with this url."""
    return get_extension_value(element, url, ValueShape.DATE_TIME)


def get_extension_date_time_values(element: Mapping[str, Any] | None, url: str) -> list[str] | None:
    return get_extension_values(element, url, ValueShape.DATE_TIME)


def set_extension_date_time_value(
    element: Element | None,
    url: str,
    value: str | datetime,
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.DATE_TIME, value, create_element)


def add_extension_date_time_value(
    element: Element | None,
    url: str,
    value: str | datetime,
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.DATE_TIME, value, create_element)


# =============================================================================
# Structured shapes
# =============================================================================


def get_extension_coding_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the Coding of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.CODING)


def get_extension_coding_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.CODING)


def set_extension_coding_value(
    element: Element | None,
    url: str,
    value: Coding | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.CODING, value, create_element)


def add_extension_coding_value(
    element: Element | None,
    url: str,
    value: Coding | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.CODING, value, create_element)


def get_extension_codeable_concept_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the CodeableConcept of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.CODEABLE_CONCEPT)


def get_extension_codeable_concept_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.CODEABLE_CONCEPT)


def set_extension_codeable_concept_value(
    element: Element | None,
    url: str,
    value: CodeableConcept | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.CODEABLE_CONCEPT, value, create_element)


def add_extension_codeable_concept_value(
    element: Element | None,
    url: str,
    value: CodeableConcept | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.CODEABLE_CONCEPT, value, create_element)


def get_extension_quantity_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the Quantity of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.QUANTITY)


def get_extension_quantity_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.QUANTITY)


def set_extension_quantity_value(
    element: Element | None,
    url: str,
    value: Quantity | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.QUANTITY, value, create_element)


def add_extension_quantity_value(
    element: Element | None,
    url: str,
    value: Quantity | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.QUANTITY, value, create_element)


def get_extension_duration_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the Duration of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.DURATION)


def get_extension_duration_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.DURATION)


def set_extension_duration_value(
    element: Element | None,
    url: str,
    value: Duration | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.DURATION, value, create_element)


def add_extension_duration_value(
    element: Element | None,
    url: str,
    value: Duration | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.DURATION, value, create_element)


def get_extension_reference_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the Reference of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.REFERENCE)


def get_extension_reference_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.REFERENCE)


def set_extension_reference_value(
    element: Element | None,
    url: str,
    value: Reference | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.REFERENCE, value, create_element)


def add_extension_reference_value(
    element: Element | None,
    url: str,
    value: Reference | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.REFERENCE, value, create_element)


def get_extension_expression_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the Expression of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.EXPRESSION)


def get_extension_expression_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.EXPRESSION)


def set_extension_expression_value(
    element: Element | None,
    url: str,
    value: Expression | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.EXPRESSION, value, create_element)


def add_extension_expression_value(
    element: Element | None,
    url: str,
    value: Expression | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.EXPRESSION, value, create_element)


def get_extension_identifier_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the Identifier of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.IDENTIFIER)


def get_extension_identifier_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.IDENTIFIER)


def set_extension_identifier_value(
    element: Element | None,
    url: str,
    value: Identifier | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.IDENTIFIER, value, create_element)


def add_extension_identifier_value(
    element: Element | None,
    url: str,
    value: Identifier | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.IDENTIFIER, value, create_element)


def get_extension_period_value(
    element: Mapping[str, Any] | None, url: str
) -> dict[str, Any] | None:
    """Get the Period of the first extension with this url, as a FHIR dict."""
    return get_extension_value(element, url, ValueShape.PERIOD)


def get_extension_period_values(
    element: Mapping[str, Any] | None, url: str
) -> list[dict[str, Any]] | None:
    return get_extension_values(element, url, ValueShape.PERIOD)


def set_extension_period_value(
    element: Element | None,
    url: str,
    value: Period | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element | None:
    return set_extension_value(element, url, ValueShape.PERIOD, value, create_element)


def add_extension_period_value(
    element: Element | None,
    url: str,
    value: Period | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> Element:
    return add_extension_value(element, url, ValueShape.PERIOD, value, create_element)

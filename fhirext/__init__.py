"""FHIR extension access and mutation helpers.

Locate, set, add and clear ``extension`` entries on FHIR JSON elements, with
typed accessors for each value shape.
"""

from fhirext.accessors import (
    add_extension_boolean_value,
    add_extension_canonical_value,
    add_extension_code_value,
    add_extension_codeable_concept_value,
    add_extension_coding_value,
    add_extension_date_time_value,
    add_extension_date_value,
    add_extension_decimal_value,
    add_extension_duration_value,
    add_extension_expression_value,
    add_extension_identifier_value,
    add_extension_integer_value,
    add_extension_markdown_value,
    add_extension_period_value,
    add_extension_quantity_value,
    add_extension_reference_value,
    add_extension_string_value,
    add_extension_uri_value,
    add_extension_url_value,
    add_extension_value,
    get_extension_boolean_value,
    get_extension_boolean_values,
    get_extension_canonical_value,
    get_extension_canonical_values,
    get_extension_code_value,
    get_extension_code_values,
    get_extension_codeable_concept_value,
    get_extension_codeable_concept_values,
    get_extension_coding_value,
    get_extension_coding_values,
    get_extension_date_time_value,
    get_extension_date_time_values,
    get_extension_date_value,
    get_extension_date_values,
    get_extension_decimal_value,
    get_extension_decimal_values,
    get_extension_duration_value,
    get_extension_duration_values,
    get_extension_expression_value,
    get_extension_expression_values,
    get_extension_identifier_value,
    get_extension_identifier_values,
    get_extension_integer_value,
    get_extension_integer_values,
    get_extension_markdown_value,
    get_extension_markdown_values,
    get_extension_period_value,
    get_extension_period_values,
    get_extension_quantity_value,
    get_extension_quantity_values,
    get_extension_reference_value,
    get_extension_reference_values,
    get_extension_string_value,
    get_extension_string_values,
    get_extension_uri_value,
    get_extension_uri_values,
    get_extension_url_value,
    get_extension_url_values,
    get_extension_value,
    get_extension_values,
    set_extension_boolean_value,
    set_extension_canonical_value,
    set_extension_code_value,
    set_extension_codeable_concept_value,
    set_extension_coding_value,
    set_extension_date_time_value,
    set_extension_date_value,
    set_extension_decimal_value,
    set_extension_duration_value,
    set_extension_expression_value,
    set_extension_identifier_value,
    set_extension_integer_value,
    set_extension_markdown_value,
    set_extension_period_value,
    set_extension_quantity_value,
    set_extension_reference_value,
    set_extension_string_value,
    set_extension_uri_value,
    set_extension_url_value,
    set_extension_value,
)
from fhirext.errors import (
    ElementCreationError,
    ExtensionError,
    InvalidExtensionError,
    MissingTargetError,
)
from fhirext.locator import (
    extension_urls,
    get_extension,
    get_extensions,
    has_extension,
    has_extension_any,
)
from fhirext.models import Extension, make_extension
from fhirext.mutator import add_extension, clear_extension, set_extension
from fhirext.primitives import (
    add_primitive_extension,
    clear_primitive_extension,
    get_primitive_extension,
    set_primitive_extension,
    shadow_element_factory,
)
from fhirext.shapes import ValueShape

__all__ = [
    "ElementCreationError",
    "Extension",
    "ExtensionError",
    "InvalidExtensionError",
    "MissingTargetError",
    "ValueShape",
    "add_extension",
    "add_extension_boolean_value",
    "add_extension_canonical_value",
    "add_extension_code_value",
    "add_extension_codeable_concept_value",
    "add_extension_coding_value",
    "add_extension_date_time_value",
    "add_extension_date_value",
    "add_extension_decimal_value",
    "add_extension_duration_value",
    "add_extension_expression_value",
    "add_extension_identifier_value",
    "add_extension_integer_value",
    "add_extension_markdown_value",
    "add_extension_period_value",
    "add_extension_quantity_value",
    "add_extension_reference_value",
    "add_extension_string_value",
    "add_extension_uri_value",
    "add_extension_url_value",
    "add_extension_value",
    "add_primitive_extension",
    "clear_extension",
    "clear_primitive_extension",
    "extension_urls",
    "get_extension",
    "get_extension_boolean_value",
    "get_extension_boolean_values",
    "get_extension_canonical_value",
    "get_extension_canonical_values",
    "get_extension_code_value",
    "get_extension_code_values",
    "get_extension_codeable_concept_value",
    "get_extension_codeable_concept_values",
    "get_extension_coding_value",
    "get_extension_coding_values",
    "get_extension_date_time_value",
    "get_extension_date_time_values",
    "get_extension_date_value",
    "get_extension_date_values",
    "get_extension_decimal_value",
    "get_extension_decimal_values",
    "get_extension_duration_value",
    "get_extension_duration_values",
    "get_extension_expression_value",
    "get_extension_expression_values",
    "get_extension_identifier_value",
    "get_extension_identifier_values",
    "get_extension_integer_value",
    "get_extension_integer_values",
    "get_extension_markdown_value",
    "get_extension_markdown_values",
    "get_extension_period_value",
    "get_extension_period_values",
    "get_extension_quantity_value",
    "get_extension_quantity_values",
    "get_extension_reference_value",
    "get_extension_reference_values",
    "get_extension_string_value",
    "get_extension_string_values",
    "get_extension_uri_value",
    "get_extension_uri_values",
    "get_extension_url_value",
    "get_extension_url_values",
    "get_extension_value",
    "get_extension_values",
    "get_extensions",
    "get_primitive_extension",
    "has_extension",
    "has_extension_any",
    "make_extension",
    "set_extension",
    "set_extension_boolean_value",
    "set_extension_canonical_value",
    "set_extension_code_value",
    "set_extension_codeable_concept_value",
    "set_extension_coding_value",
    "set_extension_date_time_value",
    "set_extension_date_value",
    "set_extension_decimal_value",
    "set_extension_duration_value",
    "set_extension_expression_value",
    "set_extension_identifier_value",
    "set_extension_integer_value",
    "set_extension_markdown_value",
    "set_extension_period_value",
    "set_extension_quantity_value",
    "set_extension_reference_value",
    "set_extension_string_value",
    "set_extension_uri_value",
    "set_extension_url_value",
    "set_extension_value",
    "set_primitive_extension",
    "shadow_element_factory",
]

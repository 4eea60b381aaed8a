"""Extensions on primitive fields.

FHIR JSON cannot attach an ``extension`` list to a string or date, so a
primitive field ``birthDate`` carries its extensions on a sibling object
under ``_birthDate``. That shadow element usually does not exist until the
first extension is written.

Example:
    >>> patient = {"resourceType": "Patient", "birthDate": "1970-01-01"}
    >>> set_primitive_extension(patient, "birthDate", {"url": "u", "valueString": "x"})
    >>> patient["_birthDate"]
    {'extension': [{'url': 'u', 'valueString': 'x'}]}
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from fhirext.locator import get_extension
from fhirext.models import Extension
from fhirext.mutator import ElementFactory, add_extension, clear_extension, set_extension

logger = logging.getLogger(__name__)


def shadow_key(field: str) -> str:
    """Return the key of the shadow element for a primitive field."""
    return f"_{field}"


def get_shadow_element(resource: Mapping[str, Any], field: str) -> dict | None:
    """Get the shadow element for a primitive field, if present."""
    return resource.get(shadow_key(field))


def shadow_element_factory(resource: MutableMapping[str, Any], field: str) -> ElementFactory:
    """Build a ``create_element`` factory for a primitive field's shadow element.

    The factory attaches an empty element to ``resource`` under ``_<field>``
    and returns it.
    """

    def create() -> dict:
        element: dict = {}
        resource[shadow_key(field)] = element
        logger.debug("Created shadow element %s", shadow_key(field))
        return element

    return create


def set_primitive_extension(
    resource: MutableMapping[str, Any],
    field: str,
    extension: Extension | Mapping[str, Any],
) -> None:
    """Set an extension on a primitive field, creating ``_<field>`` if needed."""
    set_extension(
        get_shadow_element(resource, field),
        extension,
        shadow_element_factory(resource, field),
    )


def add_primitive_extension(
    resource: MutableMapping[str, Any],
    field: str,
    extension: Extension | Mapping[str, Any],
) -> None:
    """Add an extension on a primitive field, creating ``_<field>`` if needed."""
    add_extension(
        get_shadow_element(resource, field),
        extension,
        shadow_element_factory(resource, field),
    )


def get_primitive_extension(resource: Mapping[str, Any], field: str, url: str) -> dict | None:
    return get_extension(get_shadow_element(resource, field), url)


def clear_primitive_extension(resource: MutableMapping[str, Any], field: str, url: str) -> None:
    """Clear an extension from a primitive field.

    When the shadow element is left with no content at all, it is removed
    from the resource too.
    """
    element = get_shadow_element(resource, field)
    if element is None:
        return
    clear_extension(element, url)
    if not element:
        del resource[shadow_key(field)]

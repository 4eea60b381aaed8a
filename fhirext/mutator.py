"""Extension mutator.

Set, add and clear extensions on an element, keeping the ``extension`` list
in its single valid "no extensions" form: the key is absent, never ``[]``.

Extensions on primitive fields live on a sibling shadow element (``_birthDate``
for ``birthDate``) that may not exist yet. ``set_extension`` and
``add_extension`` take an optional zero-argument ``create_element`` factory
that is called only when the element is None; the factory is responsible for
attaching the new element to its host resource.
"""

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from fhirext.errors import ElementCreationError, InvalidExtensionError, MissingTargetError
from fhirext.locator import EXTENSION_KEY, matches_url
from fhirext.models import Extension
from fhirext.shapes import value_fields

logger = logging.getLogger(__name__)

ElementFactory = Callable[[], MutableMapping[str, Any]]


def _to_wire(extension: Extension | Mapping[str, Any]) -> dict[str, Any]:
    """Normalize an extension argument to a fresh wire-form dict.

    Raises:
        InvalidExtensionError: No url, more than one value[x] field, or a
            value[x] field holding None.
    """
    if isinstance(extension, Extension):
        return extension.to_fhir()
    if not isinstance(extension, Mapping):
        raise InvalidExtensionError(
            f"Extension must be a mapping or Extension, got {type(extension).__name__}"
        )

    url = extension.get("url")
    if not isinstance(url, str) or not url:
        raise InvalidExtensionError("Extension has no url")
    fields = value_fields(extension)
    if len(fields) > 1:
        raise InvalidExtensionError(
            f"Extension {url!r} has more than one value field: {', '.join(fields)}"
        )
    if fields and extension[fields[0]] is None:
        raise InvalidExtensionError(f"Extension {url!r} has an empty {fields[0]} field")
    return dict(extension)


def _resolve_element(
    element: MutableMapping[str, Any] | None,
    url: str,
    create_element: ElementFactory | None,
) -> MutableMapping[str, Any]:
    """Return the element to mutate, creating it through the factory if needed."""
    if element is not None:
        return element
    if create_element is None:
        raise MissingTargetError(url)

    try:
        created = create_element()
    except Exception as e:
        logger.warning("Element factory failed for extension %s: %s", url, e)
        raise ElementCreationError(url, reason=f"factory raised {type(e).__name__}: {e}") from e

    if not isinstance(created, MutableMapping):
        raise ElementCreationError(url, reason=f"factory returned {type(created).__name__}")
    logger.debug("Created element for extension %s", url)
    return created


def set_extension(
    element: MutableMapping[str, Any] | None,
    extension: Extension | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> MutableMapping[str, Any]:
    """Set an extension, replacing every existing entry with the same url.

    The new entry takes the position of the first existing match and any
    later matches are removed. With no existing match it is appended.
    (Use clear_extension() to remove the url altogether.)

    Args:
        element: Resource/element to set the extension on, or None.
        extension: Wire-form dict or Extension model.
        create_element: Factory used only when ``element`` is None.

    Returns:
        The element that was mutated.

    Raises:
        MissingTargetError: ``element`` is None and no factory was given.
        ElementCreationError: The factory raised or returned a non-mapping.
        InvalidExtensionError: The extension is malformed.
    """
    new_entry = _to_wire(extension)
    url = new_entry["url"]
    target = _resolve_element(element, url, create_element)

    entries = target.get(EXTENSION_KEY)
    updated: list = []
    replaced = False
    for entry in entries or []:
        if not matches_url(entry, url):
            updated.append(entry)
        elif not replaced:
            updated.append(new_entry)
            replaced = True
    if not replaced:
        updated.append(new_entry)

    dropped = len(entries or []) + (0 if replaced else 1) - len(updated)
    if dropped:
        logger.debug("Collapsed %d duplicate extension(s) for %s", dropped, url)

    if isinstance(entries, list):
        entries[:] = updated
    else:
        target[EXTENSION_KEY] = updated
    return target


def add_extension(
    element: MutableMapping[str, Any] | None,
    extension: Extension | Mapping[str, Any],
    create_element: ElementFactory | None = None,
) -> MutableMapping[str, Any]:
    """Append an extension, leaving existing entries with the same url in place.

    Args:
        element: Resource/element to add the extension to, or None.
        extension: Wire-form dict or Extension model.
        create_element: Factory used only when ``element`` is None.

    Returns:
        The element that was mutated.

    Raises:
        MissingTargetError: ``element`` is None and no factory was given.
        ElementCreationError: The factory raised or returned a non-mapping.
        InvalidExtensionError: The extension is malformed.
    """
    new_entry = _to_wire(extension)
    target = _resolve_element(element, new_entry["url"], create_element)

    entries = target.get(EXTENSION_KEY)
    if isinstance(entries, list):
        entries.append(new_entry)
    else:
        target[EXTENSION_KEY] = [new_entry]
    return target


def clear_extension(element: MutableMapping[str, Any] | None, url: str) -> None:
    """Remove every extension with this url.

    If no extensions are left, the ``extension`` key is removed from the
    element. No-op when the element or its extension list is absent.
    """
    if element is None or EXTENSION_KEY not in element:
        return

    entries = element[EXTENSION_KEY] or []
    remaining = [entry for entry in entries if not matches_url(entry, url)]
    removed = len(entries) - len(remaining)
    if removed:
        logger.debug("Cleared %d extension(s) for %s", removed, url)

    if remaining:
        entries[:] = remaining
    else:
        del element[EXTENSION_KEY]

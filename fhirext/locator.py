"""Extension locator.

Pure lookups over an element's ``extension`` list. Every function accepts
``None`` for the element and treats it like an element without extensions.
Entries that are not dicts, or have no url, never match.
"""

from collections.abc import Iterable, Mapping
from typing import Any

EXTENSION_KEY = "extension"


def _entries(element: Mapping[str, Any] | None) -> list:
    """Return the element's extension list, or an empty list if there is none."""
    if not element:
        return []
    return element.get(EXTENSION_KEY) or []


def matches_url(entry: Any, url: str) -> bool:
    """Check if an extension list entry is a dict carrying this url."""
    return isinstance(entry, Mapping) and entry.get("url") == url


def get_extension(element: Mapping[str, Any] | None, url: str) -> dict | None:
    """Get the first extension with this url.

    Use get_extensions() when the url may legitimately repeat.

    Args:
        element: FHIR resource, datatype or backbone element.
        url: Extension URL to find.

    Returns:
        The earliest matching extension dict, or None.
    """
    for entry in _entries(element):
        if matches_url(entry, url):
            return entry
    return None


def get_extensions(element: Mapping[str, Any] | None, url: str) -> list[dict] | None:
    """Get every extension with this url, in element order.

    Args:
        element: FHIR resource, datatype or backbone element.
        url: Extension URL to find.

    Returns:
        Non-empty list of matching extension dicts, or None if nothing
        matches. Never an empty list.
    """
    matches = [entry for entry in _entries(element) if matches_url(entry, url)]
    return matches or None


def has_extension(element: Mapping[str, Any] | None, url: str) -> bool:
    """Check if at least one extension has this url."""
    return get_extension(element, url) is not None


def has_extension_any(element: Mapping[str, Any] | None, urls: Iterable[str]) -> bool:
    """Check if any extension's url is one of ``urls``.

    A single url string is treated as a one-item collection.
    """
    wanted = {urls} if isinstance(urls, str) else set(urls)
    if not wanted:
        return False
    return any(
        isinstance(entry, Mapping)
        and isinstance(entry.get("url"), str)
        and entry["url"] in wanted
        for entry in _entries(element)
    )


def extension_urls(element: Mapping[str, Any] | None) -> list[str]:
    """List the distinct extension urls on an element, in first-seen order."""
    urls: dict[str, None] = {}
    for entry in _entries(element):
        if isinstance(entry, Mapping) and isinstance(entry.get("url"), str):
            urls.setdefault(entry["url"])
    return list(urls)

"""Pytest configuration and shared fixtures.

Elements are plain FHIR JSON dicts, built fresh for every test so that
mutations never leak between tests.
"""

import pytest

EXT_URL = "exturl"
OTHER_URL = "http://example.org/fhir/StructureDefinition/other"
TIME_URL = "http://example.org/time"


@pytest.fixture
def sample_coding() -> dict:
    """Coding element with no extensions."""
    return {"system": "system", "code": "c", "display": "blah"}


@pytest.fixture
def patient() -> dict:
    """Minimal Patient resource with a primitive birthDate."""
    return {"resourceType": "Patient", "birthDate": "1970-01-01"}


@pytest.fixture
def element_with_duplicates() -> dict:
    """Element whose extension list repeats EXT_URL around other urls."""
    return {
        "system": "system",
        "extension": [
            {"url": EXT_URL, "valueString": "first"},
            {"url": OTHER_URL, "valueBoolean": True},
            {"url": EXT_URL, "valueString": "second"},
            {"url": "http://example.org/third", "valueInteger": 3},
            {"url": EXT_URL, "valueString": "third"},
        ],
    }

"""Tests for set_extension, add_extension and clear_extension."""

import json
import logging

import pytest

from fhirext.errors import ElementCreationError, InvalidExtensionError, MissingTargetError
from fhirext.locator import get_extensions, has_extension
from fhirext.models import Extension
from fhirext.mutator import add_extension, clear_extension, set_extension
from fhirext.shapes import ValueShape
from tests.conftest import EXT_URL, OTHER_URL


def _compact(data: dict) -> str:
    return json.dumps(data, separators=(",", ":"))


class TestSetExtension:
    """Tests for set_extension function."""

    def test_appends_when_no_match(self, sample_coding):
        """Test appends a new entry and creates the extension list."""
        set_extension(sample_coding, {"url": EXT_URL, "valueString": "test"})
        assert _compact(sample_coding) == (
            '{"system":"system","code":"c","display":"blah",'
            '"extension":[{"url":"exturl","valueString":"test"}]}'
        )

    def test_overwrites_in_place(self, sample_coding):
        """Test a second set replaces the value rather than appending."""
        set_extension(sample_coding, {"url": EXT_URL, "valueString": "test"})
        set_extension(sample_coding, {"url": EXT_URL, "valueString": "test2"})
        assert sample_coding["extension"] == [{"url": EXT_URL, "valueString": "test2"}]

    def test_collapses_duplicates_to_first_position(self, element_with_duplicates):
        """Test every match collapses into one entry at the first match's index."""
        set_extension(element_with_duplicates, {"url": EXT_URL, "valueString": "new"})
        assert element_with_duplicates["extension"] == [
            {"url": EXT_URL, "valueString": "new"},
            {"url": OTHER_URL, "valueBoolean": True},
            {"url": "http://example.org/third", "valueInteger": 3},
        ]

    def test_keeps_position_of_first_match(self):
        """Test the replaced entry keeps its index among other urls."""
        element = {
            "extension": [
                {"url": "a", "valueString": "1"},
                {"url": "b", "valueString": "2"},
                {"url": "c", "valueString": "3"},
            ]
        }
        set_extension(element, {"url": "b", "valueInteger": 9})
        assert [e["url"] for e in element["extension"]] == ["a", "b", "c"]
        assert element["extension"][1] == {"url": "b", "valueInteger": 9}

    def test_preserves_list_identity(self, element_with_duplicates):
        """Test the existing extension list object is updated, not replaced."""
        extensions = element_with_duplicates["extension"]
        set_extension(element_with_duplicates, {"url": EXT_URL, "valueString": "new"})
        assert element_with_duplicates["extension"] is extensions

    def test_stores_a_copy_of_the_extension(self, sample_coding):
        """Test later changes to the caller's dict do not leak into the element."""
        extension = {"url": EXT_URL, "valueString": "test"}
        set_extension(sample_coding, extension)
        extension["valueString"] = "changed"
        assert sample_coding["extension"][0]["valueString"] == "test"

    def test_accepts_extension_model(self, sample_coding):
        """Test accepts an Extension model in place of a dict."""
        set_extension(sample_coding, Extension(url=EXT_URL, shape=ValueShape.BOOLEAN, value=False))
        assert sample_coding["extension"] == [{"url": EXT_URL, "valueBoolean": False}]

    def test_returns_element(self, sample_coding):
        """Test returns the element that was mutated."""
        result = set_extension(sample_coding, {"url": EXT_URL, "valueString": "test"})
        assert result is sample_coding

    def test_logs_collapsed_duplicates(self, element_with_duplicates, caplog):
        """Test logs how many duplicates were removed."""
        with caplog.at_level(logging.DEBUG, logger="fhirext.mutator"):
            set_extension(element_with_duplicates, {"url": EXT_URL, "valueString": "new"})
        assert "Collapsed 2 duplicate extension(s) for exturl" in caplog.text


class TestAddExtension:
    """Tests for add_extension function."""

    def test_appends_without_dedup(self, sample_coding):
        """Test entries with the same url accumulate in insertion order."""
        set_extension(sample_coding, {"url": EXT_URL, "valueString": "test"})
        add_extension(sample_coding, {"url": EXT_URL, "valueString": "test2"})
        assert _compact(sample_coding) == (
            '{"system":"system","code":"c","display":"blah","extension":['
            '{"url":"exturl","valueString":"test"},{"url":"exturl","valueString":"test2"}]}'
        )

    def test_preserves_relative_order(self, element_with_duplicates):
        """Test added entries land at the end in call order."""
        add_extension(element_with_duplicates, {"url": "a", "valueString": "1"})
        add_extension(element_with_duplicates, {"url": "b", "valueString": "2"})
        assert [e["url"] for e in element_with_duplicates["extension"][-2:]] == ["a", "b"]
        assert len(element_with_duplicates["extension"]) == 7

    def test_set_after_add_collapses(self, sample_coding):
        """Test a set after repeated adds leaves a single entry."""
        add_extension(sample_coding, {"url": EXT_URL, "valueString": "a"})
        add_extension(sample_coding, {"url": OTHER_URL, "valueString": "b"})
        add_extension(sample_coding, {"url": EXT_URL, "valueString": "c"})
        set_extension(sample_coding, {"url": EXT_URL, "valueString": "d"})
        assert sample_coding["extension"] == [
            {"url": EXT_URL, "valueString": "d"},
            {"url": OTHER_URL, "valueString": "b"},
        ]


class TestMissingElement:
    """Tests for set/add against an element that does not exist."""

    def test_set_without_factory_raises(self):
        """Test raises MissingTargetError with no way to create the element."""
        with pytest.raises(MissingTargetError, match="without a createExtension method"):
            set_extension(None, {"url": EXT_URL, "valueString": "test"})

    def test_add_without_factory_raises(self):
        """Test add shares the same missing element contract."""
        with pytest.raises(MissingTargetError):
            add_extension(None, {"url": EXT_URL, "valueString": "test"})

    def test_set_with_factory_uses_created_element(self, patient):
        """Test the factory's element receives the extension."""

        def create() -> dict:
            patient["_birthDate"] = {}
            return patient["_birthDate"]

        result = set_extension(None, {"url": EXT_URL, "valueString": "test"}, create)
        assert result is patient["_birthDate"]
        assert patient["_birthDate"] == {"extension": [{"url": EXT_URL, "valueString": "test"}]}

    def test_factory_not_called_when_element_exists(self, sample_coding):
        """Test the factory is only used when the element is None."""

        def create() -> dict:
            raise AssertionError("factory should not be called")

        set_extension(sample_coding, {"url": EXT_URL, "valueString": "test"}, create)
        assert has_extension(sample_coding, EXT_URL)

    def test_factory_returning_none_raises(self):
        """Test raises ElementCreationError when the factory yields nothing."""
        with pytest.raises(ElementCreationError, match="factory returned NoneType"):
            set_extension(None, {"url": EXT_URL, "valueString": "test"}, lambda: None)

    def test_factory_returning_non_mapping_raises(self):
        """Test raises ElementCreationError for a non-dict element."""
        with pytest.raises(ElementCreationError):
            add_extension(None, {"url": EXT_URL, "valueString": "test"}, lambda: "1970-01-01")

    def test_factory_exception_is_wrapped(self, caplog):
        """Test factory errors surface as ElementCreationError with the cause chained."""

        def create() -> dict:
            raise RuntimeError("boom")

        with caplog.at_level(logging.WARNING, logger="fhirext.mutator"):
            with pytest.raises(ElementCreationError) as exc_info:
                set_extension(None, {"url": EXT_URL, "valueString": "test"}, create)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.url == EXT_URL
        assert "Element factory failed" in caplog.text

    def test_invalid_extension_checked_before_factory(self):
        """Test a malformed extension fails before any element is created."""
        calls = []

        def create() -> dict:
            calls.append(1)
            return {}

        with pytest.raises(InvalidExtensionError):
            set_extension(None, {"valueString": "no url"}, create)
        assert calls == []


class TestInvalidExtension:
    """Tests for malformed extension arguments."""

    def test_rejects_missing_url(self, sample_coding):
        """Test rejects an extension without a url and leaves the element alone."""
        with pytest.raises(InvalidExtensionError):
            set_extension(sample_coding, {"valueString": "test"})
        assert "extension" not in sample_coding

    def test_rejects_two_value_fields(self, sample_coding):
        """Test rejects an extension carrying two value fields."""
        with pytest.raises(InvalidExtensionError, match="more than one value field"):
            add_extension(sample_coding, {"url": EXT_URL, "valueString": "a", "valueBoolean": True})
        assert "extension" not in sample_coding

    def test_rejects_null_value_field(self, sample_coding):
        """Test a value field holding None is rejected before any mutation."""
        with pytest.raises(InvalidExtensionError, match="empty valueString field"):
            set_extension(sample_coding, {"url": EXT_URL, "valueString": None})
        assert "extension" not in sample_coding

    def test_rejects_non_mapping(self, sample_coding):
        """Test rejects arguments that are not dicts or Extension models."""
        with pytest.raises(InvalidExtensionError):
            set_extension(sample_coding, "exturl")

    def test_accepts_complex_extension_without_value(self, sample_coding):
        """Test nested extensions with no value[x] are allowed."""
        nested = {"url": EXT_URL, "extension": [{"url": "part", "valueString": "x"}]}
        set_extension(sample_coding, nested)
        assert sample_coding["extension"] == [nested]


class TestClearExtension:
    """Tests for clear_extension function."""

    def test_restores_original_element(self, sample_coding):
        """Test clearing the only url removes the extension key entirely."""
        set_extension(sample_coding, {"url": EXT_URL, "valueString": "test"})
        clear_extension(sample_coding, EXT_URL)
        assert _compact(sample_coding) == '{"system":"system","code":"c","display":"blah"}'

    def test_removes_every_match(self, element_with_duplicates):
        """Test removes all entries for the url and keeps the rest in order."""
        clear_extension(element_with_duplicates, EXT_URL)
        assert get_extensions(element_with_duplicates, EXT_URL) is None
        assert [e["url"] for e in element_with_duplicates["extension"]] == [
            OTHER_URL,
            "http://example.org/third",
        ]

    def test_no_match_leaves_element_unchanged(self, element_with_duplicates):
        """Test clearing an absent url changes nothing."""
        before = json.dumps(element_with_duplicates)
        clear_extension(element_with_duplicates, "http://example.org/missing")
        assert json.dumps(element_with_duplicates) == before

    def test_noop_without_extension_list(self, sample_coding):
        """Test no-op for an element with no extensions."""
        clear_extension(sample_coding, EXT_URL)
        assert sample_coding == {"system": "system", "code": "c", "display": "blah"}

    def test_noop_for_none_element(self):
        """Test no-op for a missing element."""
        clear_extension(None, EXT_URL)

    def test_removes_empty_list(self):
        """Test an empty extension list left behind by a caller is removed."""
        element = {"id": "x", "extension": []}
        clear_extension(element, EXT_URL)
        assert element == {"id": "x"}

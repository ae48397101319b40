"""Tests for attribute projection and schema discovery."""

import logging

from jsonstore.core.projector import list_attribute_names, project, to_value
from jsonstore.core.types import AttributeMissing, ListValue, RecordNotFound, Scalar


class TestProject:
    def test_miss_floods_every_name(self):
        result = project(None, ["role", "mail", "groups"])
        assert result == {
            "role": RecordNotFound,
            "mail": RecordNotFound,
            "groups": RecordNotFound,
        }

    def test_found_record_mixes_values_and_missing(self):
        result = project({"id": "bob", "role": "user"}, ["role", "dept"])
        assert result == {"role": Scalar("user"), "dept": AttributeMissing}

    def test_list_stays_list(self):
        record = {"groups": ("a", "b"), "role": "x"}
        result = project(record, ["groups", "role"])
        assert isinstance(result["groups"], ListValue)
        assert result["groups"].items == ("a", "b")
        assert isinstance(result["role"], Scalar)

    def test_empty_list_is_a_list(self):
        assert project({"groups": []}, ["groups"]) == {"groups": ListValue(())}

    def test_unsupported_values_are_missing(self, caplog):
        record = {"n": 3, "flag": True, "nil": None, "obj": {"a": "b"}, "mixed": ["a", 1]}
        with caplog.at_level(logging.DEBUG, logger="jsonstore.core.projector"):
            result = project(record, list(record))
        assert all(v is AttributeMissing for v in result.values())
        assert "unsupported type" in caplog.text

    def test_duplicates_collapse(self):
        result = project({"role": "user"}, ["role", "role", "dept", "dept"])
        assert list(result) == ["role", "dept"]

    def test_empty_request(self):
        assert project({"role": "user"}, []) == {}
        assert project(None, []) == {}

    def test_markers_are_distinct(self):
        assert RecordNotFound is not AttributeMissing
        assert not RecordNotFound and not AttributeMissing
        assert repr(RecordNotFound) == "RecordNotFound"
        assert repr(AttributeMissing) == "AttributeMissing"


def test_to_value():
    assert to_value("x") == Scalar("x")
    assert to_value(["a", "b"]) == ListValue(("a", "b"))
    assert to_value(("a",)) == ListValue(("a",))
    assert to_value(1) is None
    assert to_value(None) is None
    assert to_value(["a", None]) is None


def test_list_attribute_names_sorted_from_first_record(make_document):
    doc = make_document({"role": "a", "id": "x", "mail": "m"}, {"zzz": "only here"})
    assert list_attribute_names(doc) == ["id", "mail", "role"]


def test_list_attribute_names_empty(make_document):
    assert list_attribute_names(make_document()) == []


def test_list_attribute_names_non_object_first(make_document):
    assert list_attribute_names(make_document("nope", {"id": "x"})) == []

"""Tests for the record matcher."""

from jsonstore.core.matcher import find_first


def test_case_insensitive_matches_mixed_case(make_document):
    doc = make_document({"id": "Alice", "role": "admin"}, {"id": "bob", "role": "user"})
    record = find_first(doc, "id", False, "ALICE")
    assert record is doc.records[0]


def test_case_sensitive_requires_exact(make_document):
    doc = make_document({"id": "Alice"}, {"id": "bob"})
    assert find_first(doc, "id", True, "ALICE") is None
    assert find_first(doc, "id", True, "Alice") is doc.records[0]


def test_casefold_not_lower(make_document):
    doc = make_document({"id": "strasse"})
    assert find_first(doc, "id", False, "STRASSE") is doc.records[0]
    assert find_first(doc, "id", False, "straße") is doc.records[0]


def test_first_of_duplicates_wins(make_document):
    doc = make_document(
        {"id": "dup", "n": "1"},
        {"id": "dup", "n": "2"},
    )
    assert find_first(doc, "id", True, "dup")["n"] == "1"


def test_empty_collection_is_miss(make_document):
    assert find_first(make_document(), "id", False, "anyone") is None


def test_no_match_is_miss(make_document):
    doc = make_document({"id": "Alice"}, {"id": "bob"})
    assert find_first(doc, "id", False, "carol") is None


def test_non_string_identifier_skipped(make_document):
    doc = make_document(
        {"id": ["bob"]},
        {"id": 7},
        {"id": None},
        {"id": {"v": "bob"}},
        {"id": "bob", "role": "user"},
    )
    assert find_first(doc, "id", False, "bob") is doc.records[4]
    assert find_first(doc, "id", False, "7") is None


def test_non_object_elements_skipped(make_document):
    doc = make_document("bob", 3, None, ["bob"], {"id": "bob"})
    assert find_first(doc, "id", True, "bob") is doc.records[4]


def test_records_without_attribute_skipped(make_document):
    doc = make_document({"uid": "bob"}, {"id": "bob"})
    assert find_first(doc, "id", True, "bob") is doc.records[1]


def test_every_identifier_finds_itself_or_earlier(make_document):
    doc = make_document(
        {"id": "a"}, {"id": "B"}, {"id": "b"}, {"id": "c"}, {"id": "A"},
    )
    for record in doc.records:
        found = find_first(doc, "id", False, record["id"].swapcase())
        assert found is not None
        assert found["id"].casefold() == record["id"].casefold()
        assert doc.records.index(found) <= doc.records.index(record)

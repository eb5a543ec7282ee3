import pytest

from fluent_validator import DataFileError
from fluent_validator.file_io import DataLoader, SourceLocation, format_source, lookup_source


def test_timestamps_stay_strings():
    data, _ = DataLoader().load_from_string_with_source("joined: 2024-02-29 10:00:00\ncount: 3\n")
    assert data == {"joined": "2024-02-29 10:00:00", "count": 3}


def test_source_map_records_nested_positions():
    content = "users:\n  - name: Ann\n    tags:\n      - a\n"
    _, source_map = DataLoader().load_from_string_with_source(content)
    assert source_map["/users"] == {"line": 2, "column": 3}
    assert source_map["/users/0/name"] == {"line": 2, "column": 11}
    assert source_map["/users/0/tags/0"] == {"line": 4, "column": 9}


def test_json_documents_are_supported():
    data, source_map = DataLoader().load_from_string_with_source('{"a": [1, 2]}')
    assert data == {"a": [1, 2]}
    assert "/a/1" in source_map


def test_empty_document_is_none():
    data, source_map = DataLoader().load_from_string_with_source("")
    assert data is None
    assert source_map == {}


def test_invalid_yaml():
    with pytest.raises(DataFileError, match="Failed to parse"):
        DataLoader().load_from_string_with_source("a: [1, 2\n")


def test_missing_file(tmp_path):
    with pytest.raises(DataFileError, match="not found"):
        DataLoader().load_with_source(tmp_path / "missing.yaml")


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(DataFileError, match="not a file"):
        DataLoader().load_with_source(tmp_path)


def test_invalid_file_names_the_file(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("a: {\n", encoding="utf-8")
    with pytest.raises(DataFileError, match="broken.yaml"):
        DataLoader().load_with_source(path)


def test_lookup_falls_back_to_nearest_ancestor():
    source_map = {"": {"line": 1, "column": 1}, "/user": {"line": 2, "column": 3}}
    loc = lookup_source(source_map, "/user/email")
    assert loc.line == 2
    assert loc.column == 3
    assert loc.yaml_path == "/user/email"


def test_lookup_without_source_map():
    loc = lookup_source(None, "/a")
    assert loc.line is None
    assert loc.yaml_path == "/a"


def test_format_source(tmp_path):
    loc = SourceLocation(file_path=tmp_path / "data.yaml", yaml_path="/a", line=3, column=5)
    assert format_source(loc, source_root=str(tmp_path)) == " (source= data.yaml:3:5  path=/a)"
    assert format_source(SourceLocation()) == ""
    assert format_source(None) == ""

from fluent_validator import (
    DataFileError,
    ErrorKind,
    SchemaConfigurationError,
    SchemaReferenceError,
    ValidationError,
    ValidatorError,
)
from fluent_validator.utils.json_pointer import join_path, prepend_token, split_path


def test_hierarchy():
    for error_type in (ValidationError, SchemaConfigurationError, SchemaReferenceError, DataFileError):
        assert issubclass(error_type, ValidatorError)


def test_validation_error_message_and_path():
    error = ValidationError("Expected string, got int", ErrorKind.TYPE_MISMATCH)
    assert str(error) == "Expected string, got int"
    assert error.path == ""

    error.prepend_path("name").prepend_path(3).prepend_path("users")
    assert error.path == "/users/3/name"
    assert str(error) == "Expected string, got int"


def test_all_kinds_are_distinct():
    kinds = ErrorKind.get_all_kinds()
    assert len(kinds) == len(set(kinds))
    assert ErrorKind.MISSING_FIELD in kinds


def test_json_pointer_helpers():
    assert join_path("", "a/b") == "/a~1b"
    assert join_path("/x", 0) == "/x/0"
    assert prepend_token("~", "/y") == "/~0/y"
    assert split_path("/a~1b/c~0d/0") == ["a/b", "c~d", "0"]
    assert split_path("") == []

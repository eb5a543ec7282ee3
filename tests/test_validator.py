import copy

import pytest

from fluent_validator import (
    AnySchema,
    ArraySchema,
    EmailSchema,
    ErrorKind,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    TimestampSchema,
    ValidationError,
    Validator,
)


@pytest.mark.parametrize("factory, expected", [
    (Validator.string, StringSchema),
    (Validator.number, NumberSchema),
    (Validator.email, EmailSchema),
    (Validator.timestamp, TimestampSchema),
    (Validator.array, ArraySchema),
    (Validator.any, AnySchema),
    (Validator.object, ObjectSchema),
])
def test_factory_returns_fresh_unconfigured_instances(factory, expected):
    first = factory()
    second = factory()
    assert isinstance(first, expected)
    assert first is not second
    assert first.is_optional is False


@pytest.mark.parametrize("schema", [
    Validator.string().min(5),
    Validator.number().min(5),
    Validator.email(),
    Validator.timestamp(),
    Validator.array().items(Validator.number()).min(2),
    Validator.any().min(2),
    Validator.object().schema({"name": Validator.string()}),
])
def test_optional_accepts_none_regardless_of_constraints(schema):
    schema.optional()
    assert schema.validate(None) is None


def test_optional_is_idempotent():
    schema = Validator.string().optional().optional()
    assert schema.is_optional is True
    schema.min(2)
    assert schema.is_optional is True


def test_validation_is_idempotent_and_does_not_mutate_schema(user_schema):
    payload = {"name": "Ann", "email": "ann@example.com", "tags": ["a", "b"]}
    before = copy.deepcopy(payload)
    shape_before = dict(user_schema.shape)

    first = user_schema.validate(payload)
    second = user_schema.validate(payload)

    assert first == second
    assert payload == before
    assert user_schema.shape == shape_before


def test_validated_output_is_stable(user_schema):
    payload = {"name": "Ann", "email": "ann@example.com", "age": 30, "joined": "2024-01-01 00:00:00"}
    once = user_schema.validate(payload)
    assert user_schema.validate(once) == once


def test_shared_child_schema():
    name = Validator.string().min(1)
    person = Validator.object().schema({"name": name})
    team = Validator.object().schema({"lead": person, "members": Validator.array().items(person)})

    result = team.validate({"lead": {"name": "Ann"}, "members": [{"name": "Bob"}, {"name": "Cy"}]})
    assert result == {"lead": {"name": "Ann"}, "members": [{"name": "Bob"}, {"name": "Cy"}]}

    with pytest.raises(ValidationError) as exc:
        team.validate({"lead": {"name": "Ann"}, "members": [{"name": ""}]})
    assert exc.value.path == "/members/0/name"
    assert exc.value.kind == ErrorKind.TOO_SHORT


def test_check_returns_result_instead_of_raising():
    schema = Validator.number().max(3)

    ok = schema.check(2)
    assert ok.ok is True
    assert ok.value == 2
    assert ok.error is None
    assert ok.message is None

    failed = schema.check(9)
    assert failed.ok is False
    assert failed.value is None
    assert failed.error.kind == ErrorKind.TOO_MANY
    assert failed.message == "Number must be at most 3"


def test_repr_describes_configuration():
    schema = Validator.string().min(2).optional()
    assert repr(schema) == "StringSchema(min=2, optional)"
    assert repr(Validator.email()) == "EmailSchema()"

from decimal import Decimal

import pytest

from fluent_validator import ErrorKind, SchemaConfigurationError, ValidationError, Validator


def test_range_is_inclusive():
    schema = Validator.number().min(0).max(10)
    assert schema.validate(5) == 5
    assert schema.validate(0) == 0
    assert schema.validate(10) == 10
    assert schema.validate(2.5) == 2.5

    with pytest.raises(ValidationError, match="at most 10") as exc:
        schema.validate(15)
    assert exc.value.kind == ErrorKind.TOO_MANY

    with pytest.raises(ValidationError, match="at least 0") as exc:
        schema.validate(-1)
    assert exc.value.kind == ErrorKind.TOO_FEW


def test_unbounded_by_default():
    schema = Validator.number()
    assert schema.validate(10 ** 30) == 10 ** 30
    assert schema.validate(-(10 ** 30)) == -(10 ** 30)
    assert schema.validate(Decimal("1.25")) == Decimal("1.25")


def test_numeric_strings_are_accepted_unchanged():
    # Numeric strings pass and are returned as the original string, not converted.
    schema = Validator.number().min(0).max(100)
    assert schema.validate("42") == "42"
    assert isinstance(schema.validate("42"), str)
    assert schema.validate(" 4.5e1 ") == " 4.5e1 "
    assert schema.validate("-0") == "-0"

    with pytest.raises(ValidationError, match="at most 100"):
        schema.validate("101")


@pytest.mark.parametrize("value", ["abc", "", "1,5", "0x1A", "nan", "inf", "1e", "--1", True, False, None, [1]])
def test_rejects_non_numeric(value):
    with pytest.raises(ValidationError, match="Expected number") as exc:
        Validator.number().validate(value)
    assert exc.value.kind == ErrorKind.TYPE_MISMATCH


def test_optional_number():
    schema = Validator.number().min(10).optional()
    assert schema.validate(None) is None
    assert schema.validate("") is None
    with pytest.raises(ValidationError):
        schema.validate(3)


def test_float_bounds():
    schema = Validator.number().min(0.5).max(1.5)
    assert schema.validate("1.5") == "1.5"
    with pytest.raises(ValidationError):
        schema.validate(0.25)


def test_bounds_must_be_numbers():
    with pytest.raises(SchemaConfigurationError):
        Validator.number().min("0")
    with pytest.raises(SchemaConfigurationError):
        Validator.number().max(True)


def test_exponent_beyond_decimal_range():
    huge = "1e99999999999999999999"
    assert Validator.number().validate(huge) == huge
    assert Validator.number().min(0).validate(huge) == huge

    with pytest.raises(ValidationError, match="at most 10") as exc:
        Validator.number().max(10).validate(huge)
    assert exc.value.kind == ErrorKind.TOO_MANY

    with pytest.raises(ValidationError, match="at least 0") as exc:
        Validator.number().min(0).validate("-" + huge)
    assert exc.value.kind == ErrorKind.TOO_FEW


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("-NaN"), Decimal("sNaN")])
def test_decimal_nan_is_not_a_number(value):
    for schema in (Validator.number(), Validator.number().min(0)):
        with pytest.raises(ValidationError, match="Expected number") as exc:
            schema.validate(value)
        assert exc.value.kind == ErrorKind.TYPE_MISMATCH

    with pytest.raises(SchemaConfigurationError):
        Validator.number().min(value)


def test_float_nan_skips_range_check():
    nan = float("nan")
    assert Validator.number().min(Decimal(0)).max(10).validate(nan) is nan

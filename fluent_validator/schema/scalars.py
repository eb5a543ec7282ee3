# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Leaf schemas: string, number, email, timestamp and any."""

from __future__ import annotations

import math
import re
import sys
from datetime import datetime
from typing import Any, Optional, Union

from ..exceptions import ErrorKind, SchemaConfigurationError, ValidationError
from ..utils.numeric import Number, is_numeric, numeric_value
from .base import Schema, check_count, type_name


def _compile_pattern(pattern: Union[str, re.Pattern]) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise SchemaConfigurationError(f"Pattern must be a string or compiled regex, got {type_name(pattern)}")
    try:
        return re.compile(pattern)
    except re.error as e:
        raise SchemaConfigurationError(f"Invalid pattern '{pattern}': {e}") from e


class _TextConstraintSchema(Schema):
    """Shared length and pattern configuration of StringSchema and AnySchema."""

    def __init__(self) -> None:
        super().__init__()
        self.min_length = 0
        self.max_length = sys.maxsize
        self.pattern: Optional[re.Pattern] = None

    def min(self, length: int) -> "_TextConstraintSchema":
        self.min_length = check_count(length, "Minimum length")
        return self

    def max(self, length: int) -> "_TextConstraintSchema":
        self.max_length = check_count(length, "Maximum length")
        return self

    def matches(self, pattern: Union[str, re.Pattern]) -> "_TextConstraintSchema":
        """Require ``pattern`` to match somewhere in the value (``re.search``)."""
        self.pattern = _compile_pattern(pattern)
        return self

    @property
    def has_length_bounds(self) -> bool:
        return self.min_length != 0 or self.max_length != sys.maxsize

    def _check_length(self, length: int, noun: str) -> None:
        if length < self.min_length:
            raise ValidationError(
                f"{noun} must be at least {self.min_length} characters long", ErrorKind.TOO_SHORT
            )
        if length > self.max_length:
            raise ValidationError(
                f"{noun} must be at most {self.max_length} characters long", ErrorKind.TOO_LONG
            )

    def _check_pattern(self, value: str, noun: str) -> None:
        if self.pattern is not None and self.pattern.search(value) is None:
            raise ValidationError(
                f"{noun} must match pattern: {self.pattern.pattern}", ErrorKind.PATTERN_MISMATCH
            )

    def _describe(self) -> str:
        parts = []
        if self.min_length:
            parts.append(f"min={self.min_length}")
        if self.max_length != sys.maxsize:
            parts.append(f"max={self.max_length}")
        if self.pattern is not None:
            parts.append(f"pattern={self.pattern.pattern!r}")
        return ", ".join(parts)


class StringSchema(_TextConstraintSchema):
    """Accepts ``str`` values within the configured length and pattern."""

    def validate(self, value: Any) -> Any:
        if self._check_optional(value):
            return None

        if not isinstance(value, str):
            raise ValidationError(f"Expected string, got {type_name(value)}", ErrorKind.TYPE_MISMATCH)
        self._check_length(len(value), "String")
        self._check_pattern(value, "String")
        return value


class AnySchema(_TextConstraintSchema):
    """Accepts any value; length and pattern apply only when configured.

    Without constraints every value passes through unchanged. With length bounds,
    values that do not support ``len()`` fail as UNMEASURABLE; with a pattern,
    non-string values fail as TYPE_MISMATCH.
    """

    def validate(self, value: Any) -> Any:
        if self._check_optional(value):
            return None

        if self.has_length_bounds:
            try:
                length = len(value)
            except TypeError:
                raise ValidationError(
                    f"Cannot apply length bounds to a value of type {type_name(value)}",
                    ErrorKind.UNMEASURABLE,
                ) from None
            self._check_length(length, "Value")

        if self.pattern is not None:
            if not isinstance(value, str):
                raise ValidationError(
                    f"Pattern requires a string value, got {type_name(value)}", ErrorKind.TYPE_MISMATCH
                )
            self._check_pattern(value, "Value")
        return value


class NumberSchema(Schema):
    """Accepts numbers and numeric strings within inclusive bounds.

    Numeric strings such as ``"42"`` are accepted and returned as the original
    string; they are compared by value only.
    """

    def __init__(self) -> None:
        super().__init__()
        self.minimum: Optional[Number] = None
        self.maximum: Optional[Number] = None

    def min(self, value: Number) -> "NumberSchema":
        self.minimum = self._check_bound(value)
        return self

    def max(self, value: Number) -> "NumberSchema":
        self.maximum = self._check_bound(value)
        return self

    @staticmethod
    def _check_bound(value: Any) -> Number:
        if isinstance(value, str) or not is_numeric(value):
            raise SchemaConfigurationError(f"Number bound must be numeric, got {type_name(value)}")
        return value

    def validate(self, value: Any) -> Any:
        if self._check_optional(value):
            return None

        if not is_numeric(value):
            raise ValidationError(f"Expected number, got {type_name(value)}", ErrorKind.TYPE_MISMATCH)

        if self.minimum is None and self.maximum is None:
            return value

        number = numeric_value(value)
        if isinstance(number, float) and math.isnan(number):
            return value
        if self.minimum is not None and number < self.minimum:
            raise ValidationError(f"Number must be at least {self.minimum}", ErrorKind.TOO_FEW)
        if self.maximum is not None and number > self.maximum:
            raise ValidationError(f"Number must be at most {self.maximum}", ErrorKind.TOO_MANY)
        return value

    def _describe(self) -> str:
        parts = []
        if self.minimum is not None:
            parts.append(f"min={self.minimum}")
        if self.maximum is not None:
            parts.append(f"max={self.maximum}")
        return ", ".join(parts)


_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
_EMAIL_RE = re.compile(
    rf"(?P<local>{_ATOM}(?:\.{_ATOM})*)@(?P<domain>(?:{_LABEL}\.)+[A-Za-z]{{2,63}})"
)
_MAX_EMAIL_LENGTH = 254
_MAX_LOCAL_PART_LENGTH = 64


class EmailSchema(Schema):
    """Accepts strings that are syntactically valid email addresses."""

    def validate(self, value: Any) -> Any:
        if self._check_optional(value):
            return None

        if not isinstance(value, str):
            raise ValidationError(f"Expected string for email, got {type_name(value)}", ErrorKind.TYPE_MISMATCH)

        m = _EMAIL_RE.fullmatch(value)
        if (
            m is None
            or len(value) > _MAX_EMAIL_LENGTH
            or len(m.group("local")) > _MAX_LOCAL_PART_LENGTH
        ):
            raise ValidationError("Invalid email format", ErrorKind.INVALID_FORMAT)
        return value


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def _format_timestamp(parsed: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return (
        f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d} "
        f"{parsed.hour:02d}:{parsed.minute:02d}:{parsed.second:02d}"
    )


class TimestampSchema(Schema):
    """Accepts strings of the form ``YYYY-MM-DD HH:MM:SS`` naming a real date and time."""

    def validate(self, value: Any) -> Any:
        if self._check_optional(value):
            return None

        if not isinstance(value, str):
            raise ValidationError(
                f"Expected string for timestamp, got {type_name(value)}", ErrorKind.TYPE_MISMATCH
            )

        invalid = ValidationError(
            "Invalid timestamp format. Expected format: YYYY-MM-DD HH:MM:SS", ErrorKind.INVALID_FORMAT
        )
        if _TIMESTAMP_RE.fullmatch(value) is None:
            raise invalid
        try:
            parsed = datetime.strptime(value, TIMESTAMP_FORMAT)
        except ValueError:
            raise invalid from None
        if _format_timestamp(parsed) != value:
            raise invalid
        return value

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

"""Abstract schema contract shared by every schema variant."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import SchemaConfigurationError, ValidationError


def type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def check_count(value: Any, what: str) -> int:
    """Validate a length or item-count bound given to a configuration method."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaConfigurationError(f"{what} must be an integer, got {type_name(value)}")
    if value < 0:
        raise SchemaConfigurationError(f"{what} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :meth:`Schema.check`.

    ``value`` holds the normalized value when ``ok`` is true, ``error`` holds the
    first failure otherwise.
    """
    ok: bool
    value: Any = None
    error: Optional[ValidationError] = None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None


class Schema(ABC):
    """Abstract base schema.

    Configuration methods mutate the instance and return it so calls can be
    chained. ``validate`` never mutates the schema, so one tree can be reused
    for any number of inputs and a schema can be shared between parents.
    """

    def __init__(self) -> None:
        self._is_optional = False

    @property
    def is_optional(self) -> bool:
        return self._is_optional

    def optional(self) -> "Schema":
        """Accept ``None`` and ``""`` without running any other check."""
        self._is_optional = True
        return self

    def _check_optional(self, value: Any) -> bool:
        # Must be the first thing every validate() consults.
        return self._is_optional and (value is None or (isinstance(value, str) and value == ""))

    @abstractmethod
    def validate(self, value: Any) -> Any:
        """Validate ``value`` and return the normalized result.

        Raises:
            ValidationError: On the first failed check.
        """
        pass

    def check(self, value: Any) -> ValidationResult:
        """Validate without raising; the failure is returned in the result."""
        try:
            return ValidationResult(ok=True, value=self.validate(value))
        except ValidationError as e:
            return ValidationResult(ok=False, error=e)

    def __repr__(self) -> str:
        suffix = ", optional" if self._is_optional else ""
        return f"{type(self).__name__}({self._describe()}{suffix})"

    def _describe(self) -> str:
        return ""

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

"""Custom exceptions for the fluent_validator package."""

from typing import List, Optional

from .utils.json_pointer import JsonPointer, prepend_token


class ErrorKind:
    """Kinds of validation failure carried by ValidationError."""
    TYPE_MISMATCH = "type_mismatch"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    TOO_FEW = "too_few"
    TOO_MANY = "too_many"
    PATTERN_MISMATCH = "pattern_mismatch"
    INVALID_FORMAT = "invalid_format"
    KEY_TYPE_MISMATCH = "key_type_mismatch"
    MISSING_FIELD = "missing_field"
    UNMEASURABLE = "unmeasurable"

    @classmethod
    def get_all_kinds(cls) -> List[str]:
        return [
            cls.TYPE_MISMATCH,
            cls.TOO_SHORT,
            cls.TOO_LONG,
            cls.TOO_FEW,
            cls.TOO_MANY,
            cls.PATTERN_MISMATCH,
            cls.INVALID_FORMAT,
            cls.KEY_TYPE_MISMATCH,
            cls.MISSING_FIELD,
            cls.UNMEASURABLE,
        ]


class ValidatorError(Exception):
    """Base exception for fluent_validator related errors."""
    pass


class ValidationError(ValidatorError):
    """Exception raised when a value does not satisfy its schema.

    ``str(error)`` is the human-readable message. ``path`` is a JSON pointer to
    the failing value relative to the root passed to ``validate`` ("" for the
    root itself).
    """

    def __init__(self, message: str, kind: Optional[str] = None, path: JsonPointer = ""):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.path = path

    def prepend_path(self, token) -> "ValidationError":
        """Record that the failure happened below ``token`` of an enclosing container."""
        self.path = prepend_token(token, self.path)
        return self

    def __str__(self) -> str:
        return self.message


class SchemaConfigurationError(ValidatorError):
    """Exception raised when a schema is configured incorrectly."""
    pass


class SchemaReferenceError(ValidatorError):
    """Exception raised when a 'module:attribute' schema reference cannot be resolved."""
    pass


class DataFileError(ValidatorError):
    """Exception raised when a data file cannot be read or parsed."""
    pass

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

"""Composable, declarative validation of untrusted input."""

from .exceptions import (
    DataFileError,
    ErrorKind,
    SchemaConfigurationError,
    SchemaReferenceError,
    ValidationError,
    ValidatorError,
)
from .schema import (
    AnySchema,
    ArraySchema,
    EmailSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
    TimestampSchema,
    ValidationResult,
)
from .validator import Validator

__version__ = "0.1.0"

__all__ = [
    "Validator",
    "Schema",
    "ValidationResult",
    "StringSchema",
    "NumberSchema",
    "EmailSchema",
    "TimestampSchema",
    "AnySchema",
    "ArraySchema",
    "ObjectSchema",
    "ErrorKind",
    "ValidatorError",
    "ValidationError",
    "SchemaConfigurationError",
    "SchemaReferenceError",
    "DataFileError",
]

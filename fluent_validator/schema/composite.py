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

"""Composite schemas that recurse into arrays and objects."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Tuple

from ..exceptions import ErrorKind, SchemaConfigurationError, ValidationError
from .base import Schema, check_count, type_name

logger = logging.getLogger(__name__)


class ArraySchema(Schema):
    """Validates every element of a list, tuple or mapping against one item schema.

    Sequences produce a new ``list``; mappings produce a new ``dict`` with the
    same keys. Keys must be non-negative integers unless :meth:`associative`
    was called, in which case they must be strings.
    """

    def __init__(self) -> None:
        super().__init__()
        self.item_schema: Optional[Schema] = None
        self.min_items = 0
        self.max_items = sys.maxsize
        self.is_associative = False

    def items(self, schema: Schema) -> "ArraySchema":
        if not isinstance(schema, Schema):
            raise SchemaConfigurationError(f"Item schema must be a Schema, got {type_name(schema)}")
        self.item_schema = schema
        return self

    def min(self, count: int) -> "ArraySchema":
        self.min_items = check_count(count, "Minimum item count")
        return self

    def max(self, count: int) -> "ArraySchema":
        self.max_items = check_count(count, "Maximum item count")
        return self

    def associative(self) -> "ArraySchema":
        self.is_associative = True
        return self

    def _check_key(self, key: Any) -> None:
        if self.is_associative:
            if not isinstance(key, str):
                raise ValidationError(
                    "Expected string keys for associative array", ErrorKind.KEY_TYPE_MISMATCH
                )
        elif isinstance(key, bool) or not isinstance(key, int) or key < 0:
            raise ValidationError(
                "Expected integer keys for numbered array", ErrorKind.KEY_TYPE_MISMATCH
            )

    def validate(self, value: Any) -> Any:
        if self._check_optional(value):
            return None

        if self.item_schema is None:
            raise SchemaConfigurationError("ArraySchema has no item schema; call items() before validate()")

        if isinstance(value, Mapping):
            pairs: Iterable[Tuple[Any, Any]] = value.items()
        elif isinstance(value, (list, tuple)):
            pairs = enumerate(value)
        else:
            raise ValidationError(f"Expected array, got {type_name(value)}", ErrorKind.TYPE_MISMATCH)

        count = len(value)
        if count < self.min_items:
            raise ValidationError(f"Array must have at least {self.min_items} items", ErrorKind.TOO_FEW)
        if count > self.max_items:
            raise ValidationError(f"Array must have at most {self.max_items} items", ErrorKind.TOO_MANY)

        validated: Dict[Any, Any] = {}
        for key, item in pairs:
            try:
                self._check_key(key)
                validated[key] = self.item_schema.validate(item)
            except ValidationError as e:
                raise e.prepend_path(key)

        if isinstance(value, Mapping):
            return validated
        return list(validated.values())

    def _describe(self) -> str:
        parts = [f"items={self.item_schema!r}"]
        if self.min_items:
            parts.append(f"min={self.min_items}")
        if self.max_items != sys.maxsize:
            parts.append(f"max={self.max_items}")
        if self.is_associative:
            parts.append("associative")
        return ", ".join(parts)


class ObjectSchema(Schema):
    """Projects a mapping onto a fixed set of named fields.

    A field counts as absent when its key is missing or holds ``None``. Absent
    optional fields are still validated (with ``None``) so the output always has
    every field of the shape. Input keys outside the shape are dropped.
    """

    def __init__(self) -> None:
        super().__init__()
        self.shape: Dict[str, Schema] = {}

    def schema(self, shape: Mapping) -> "ObjectSchema":
        if not isinstance(shape, Mapping):
            raise SchemaConfigurationError(
                f"Shape must be a mapping of field names to schemas, got {type_name(shape)}"
            )
        for field_name, field_schema in shape.items():
            if not isinstance(field_name, str):
                raise SchemaConfigurationError(f"Field names must be strings, got {type_name(field_name)}")
            if not isinstance(field_schema, Schema):
                raise SchemaConfigurationError(
                    f"Field '{field_name}' must map to a Schema, got {type_name(field_schema)}"
                )
        self.shape = dict(shape)
        return self

    def validate(self, value: Any) -> Any:
        if self._check_optional(value):
            return None

        if not isinstance(value, Mapping):
            raise ValidationError(f"Expected object, got {type_name(value)}", ErrorKind.TYPE_MISMATCH)

        validated: Dict[str, Any] = {}
        for field_name, field_schema in self.shape.items():
            field_value = value.get(field_name)
            if field_value is None and not field_schema.is_optional:
                raise ValidationError(
                    f"Missing required field: {field_name}", ErrorKind.MISSING_FIELD
                ).prepend_path(field_name)
            try:
                validated[field_name] = field_schema.validate(field_value)
            except ValidationError as e:
                raise e.prepend_path(field_name)

        if logger.isEnabledFor(logging.DEBUG):
            dropped = [key for key in value if key not in self.shape]
            if dropped:
                logger.debug(f"Dropping fields not declared in object schema: {dropped}")

        return validated

    def _describe(self) -> str:
        return ", ".join(f"{name}={schema!r}" for name, schema in self.shape.items())

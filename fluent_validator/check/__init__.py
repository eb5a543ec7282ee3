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

"""Check YAML/JSON data files against a schema defined in Python code."""

import importlib
import logging
from pathlib import Path
from typing import List

from ..exceptions import DataFileError, SchemaConfigurationError, SchemaReferenceError
from ..file_io import data_loader, lookup_source
from ..schema import Schema
from .report import CheckResult

__all__ = ['check_files', 'resolve_schema_reference', 'CheckResult']

logger = logging.getLogger(__name__)


def resolve_schema_reference(reference: str) -> Schema:
    """Resolve a ``package.module:attribute`` reference to a schema.

    The attribute may be a dotted path inside the module. It must be a Schema
    instance or a callable returning one when called without arguments.

    Raises:
        SchemaReferenceError: If the module, the attribute or the schema cannot be resolved
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemaReferenceError(
            f"Invalid schema reference '{reference}'. Expected 'package.module:attribute'"
        )

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaReferenceError(f"Cannot import module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise SchemaReferenceError(f"'{reference}' has no attribute '{attr}'") from e

    if not isinstance(target, Schema) and callable(target):
        target = target()

    if not isinstance(target, Schema):
        raise SchemaReferenceError(
            f"'{reference}' does not resolve to a Schema, got {type(target).__name__}"
        )
    return target


def check_files(file_paths: List[Path], schema: Schema) -> List[CheckResult]:
    """Validate a list of data files against one schema.

    Args:
        file_paths: List of file paths to check
        schema: Schema every document must satisfy

    Returns:
        List of CheckResult objects, one per file
    """
    results = []

    for file_path in file_paths:
        result = CheckResult(file_path)

        try:
            data, source_map = data_loader.load_with_source(file_path)
        except DataFileError as e:
            logger.error(str(e))
            result.add_error(str(e))
            results.append(result)
            continue

        try:
            outcome = schema.check(data)
        except SchemaConfigurationError as e:
            result.add_error(f"Schema configuration error: {e}")
            results.append(result)
            continue

        if outcome.ok:
            result.value = outcome.value
        else:
            error = outcome.error
            loc = lookup_source(source_map, error.path, file_path)
            result.add_error(
                error.message,
                line=loc.line,
                column=loc.column,
                yaml_path=error.path,
                kind=error.kind,
            )

        results.append(result)

    return results

"""Schema definitions and validation.

The schema classes only depend on each other and on the exception types, so the
engine can be used without the file and command-line helpers.
"""

from .base import Schema, ValidationResult
from .scalars import AnySchema, EmailSchema, NumberSchema, StringSchema, TimestampSchema
from .composite import ArraySchema, ObjectSchema

__all__ = [
    "Schema",
    "ValidationResult",
    "StringSchema",
    "NumberSchema",
    "EmailSchema",
    "TimestampSchema",
    "AnySchema",
    "ArraySchema",
    "ObjectSchema",
]

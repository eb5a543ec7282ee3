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

"""Factory exposing one constructor per schema variant.

Example::

    user = Validator.object().schema({
        "name": Validator.string().min(1).max(100),
        "email": Validator.email(),
        "age": Validator.number().min(0).optional(),
        "tags": Validator.array().items(Validator.string()).max(10),
    })
    data = user.validate(payload)
"""

from .schema import (
    AnySchema,
    ArraySchema,
    EmailSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    TimestampSchema,
)


class Validator:
    """Every call returns a fresh, unconfigured schema."""

    @staticmethod
    def string() -> StringSchema:
        return StringSchema()

    @staticmethod
    def number() -> NumberSchema:
        return NumberSchema()

    @staticmethod
    def email() -> EmailSchema:
        return EmailSchema()

    @staticmethod
    def timestamp() -> TimestampSchema:
        return TimestampSchema()

    @staticmethod
    def array() -> ArraySchema:
        return ArraySchema()

    @staticmethod
    def any() -> AnySchema:
        return AnySchema()

    @staticmethod
    def object() -> ObjectSchema:
        return ObjectSchema()

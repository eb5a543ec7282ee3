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

"""Result reporting for the check tool."""

from pathlib import Path
from typing import Any, Dict, List, Optional


class CheckResult:
    """Container for the check result of a single data file."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the file being checked
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.value: Any = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        yaml_path: Optional[str] = None,
        kind: Optional[str] = None,
    ):
        """Add an error message.

        Args:
            message: Error message
            line: Optional line number where error occurred
            column: Optional column number where error occurred
            yaml_path: Optional JSON pointer to the failing value
            kind: Optional ErrorKind of a validation failure
        """
        error = {'message': message}
        if line is not None:
            error['line'] = line
        if column is not None:
            error['column'] = column
        if yaml_path is not None:
            error['yaml_path'] = yaml_path
        if kind is not None:
            error['kind'] = kind
        self.errors.append(error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'ok': self.ok,
            'errors': self.errors,
        }

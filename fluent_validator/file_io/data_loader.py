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

"""YAML/JSON data document loader with source location tracking."""

import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from ..exceptions import DataFileError
from ..utils.json_pointer import join_path

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DataDocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps YAML timestamps as plain strings.

    Untouched text lets TimestampSchema check the exact ``YYYY-MM-DD HH:MM:SS`` form.
    """


DataDocumentLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class DataLoader:
    """Loads data documents to validate, together with a source map."""

    @staticmethod
    def _build_source_map(content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes returned by the loader.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=DataDocumentLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by load(); locations are best effort.
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, join_path(path, key))
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, join_path(path, idx))

        _walk(root, "")
        return source_map

    def load_from_string_with_source(self, content: str) -> Tuple[Any, SourceMap]:
        """Parse YAML or JSON text and return (data, source_map).

        An empty document yields ``None``.
        """
        try:
            data = yaml.load(content, Loader=DataDocumentLoader)
        except yaml.YAMLError as exc:
            raise DataFileError(f"Failed to parse document: {exc}") from exc
        return data, self._build_source_map(content)

    def load_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML or JSON file and return (data, source_map).

        Raises:
            DataFileError: If the file is missing or cannot be parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise DataFileError(f"Data file not found: {path}")

        if not path.is_file():
            raise DataFileError(f"Path is not a file: {path}")

        logger.debug(f"Loading data file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DataFileError(f"Failed to read data file {path}: {exc}") from exc

        try:
            return self.load_from_string_with_source(content)
        except DataFileError as exc:
            raise DataFileError(f"Failed to parse data file {path}: {exc.__cause__}") from exc.__cause__


# Global loader instance
data_loader = DataLoader()

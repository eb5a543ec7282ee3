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

"""Configuration management for fluent_validator tooling."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import DEFAULT_FORMAT, configure_split_stream_logging, level_from_name

OUTPUT_FORMATS = ("human", "json", "github-actions")


@dataclass
class ValidatorConfig:
    """Configuration class for the check tool."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    output_format: str = "human"

    # paths
    source_root: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        output_format = os.getenv('FLUENT_VALIDATOR_OUTPUT_FORMAT', 'human').strip().lower()
        if output_format not in OUTPUT_FORMATS:
            output_format = 'human'
        return cls(
            log_level=os.getenv('FLUENT_VALIDATOR_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('FLUENT_VALIDATOR_PRINT_LEVEL', 'ERROR'),
            output_format=output_format,
            source_root=os.getenv('FLUENT_VALIDATOR_SOURCE_ROOT') or None,
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = level_from_name(self.log_level, logging.INFO)
        stderr_level = level_from_name(self.print_level, logging.ERROR)

        formatter = logging.Formatter(DEFAULT_FORMAT)
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('fluent_validator')


# Global configuration instance
validator_config = ValidatorConfig.from_env()

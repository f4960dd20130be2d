# Copyright 2026 TIER IV, inc.
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

"""Configuration management for nested_schema."""

import os
import logging
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .reporter import ErrorReporter, StringErrorReporter, StructuredErrorReporter
from .utils.logging_utils import PACKAGE_LOGGER_NAME, configure_split_stream_logging

REPORTERS = {
    "structured": StructuredErrorReporter,
    "string": StringErrorReporter,
}


@dataclass(frozen=True)
class ValidationConfig:
    """Library-wide defaults. Read once; never mutated by validation calls."""
    log_level: str = "WARNING"
    print_level: str = "ERROR"
    reporter: str = "structured"

    @classmethod
    def from_env(cls) -> 'ValidationConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('NESTED_SCHEMA_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('NESTED_SCHEMA_PRINT_LEVEL', 'ERROR'),
            reporter=os.getenv('NESTED_SCHEMA_REPORTER', 'structured').strip().lower(),
        )

    def default_reporter(self) -> ErrorReporter:
        """Build the reporter used when a caller does not pass one."""
        try:
            reporter_cls = REPORTERS[self.reporter]
        except KeyError:
            raise ConfigurationError(
                f"Unknown reporter '{self.reporter}'. Valid reporters: {sorted(REPORTERS)}"
            ) from None
        return reporter_cls()

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name=PACKAGE_LOGGER_NAME,
        )


# Global configuration instance
validation_config = ValidationConfig.from_env()

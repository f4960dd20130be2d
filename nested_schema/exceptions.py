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

"""Custom exceptions for nested_schema.

Data mismatches are never raised; they are returned as validation errors.
The exceptions here signal programming errors (malformed schemas) or an
explicit request to fail loudly via ``assert_valid``.
"""


class NestedSchemaError(Exception):
    """Base exception for nested_schema related errors."""
    pass


class SchemaDefinitionError(NestedSchemaError):
    """Exception raised for malformed schema definitions."""
    pass


class InvalidSchemaError(SchemaDefinitionError):
    """Exception raised when a value cannot be used as a schema."""
    pass


class UnknownSchemaTypeError(SchemaDefinitionError):
    """Exception raised when no validation strategy exists for a schema's (type, strict) pair."""

    def __init__(self, schema_type, strict):
        self.schema_type = schema_type
        self.strict = strict
        super().__init__(f"No validation strategy for schema type {schema_type!r} with strict={strict!r}")


class DataValidationError(NestedSchemaError):
    """Exception raised by ``assert_valid`` when a value fails validation."""

    def __init__(self, message, errors=frozenset()):
        super().__init__(message)
        self.errors = frozenset(errors)


class ConfigurationError(NestedSchemaError):
    """Exception raised for invalid nested_schema configuration."""
    pass

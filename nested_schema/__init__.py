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

"""Structural validation of nested maps, sequences and sets.

This package intentionally has no I/O: schemas are built in code and data is
validated in memory.
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationError,
    DataValidationError,
    InvalidSchemaError,
    NestedSchemaError,
    SchemaDefinitionError,
    UnknownSchemaTypeError,
)
from .issues import (
    ConstraintFailure,
    ExtraneousPath,
    MissingPath,
    PredicateFailure,
    TypeMismatch,
    ValidationIssue,
)
from .report import ValidationResult, format_errors
from .reporter import ErrorReporter, StringErrorReporter, StructuredErrorReporter
from .schema import (
    Schema,
    SchemaPath,
    SchemaType,
    Wildcard,
    and_statement,
    as_loose,
    as_strict,
    class_schema,
    loose_map_schema,
    map_schema,
    optional_path,
    or_statement,
    predicate_schema,
    seq_layout_schema,
    seq_schema,
    set_schema,
    wildcard,
)
from .utils.paths import SET_POSITION
from .validation import (
    ValidationContext,
    assert_valid,
    is_valid,
    validate,
    validate_and_handle,
    validation_errors,
)

__all__ = [
    "ConfigurationError",
    "DataValidationError",
    "InvalidSchemaError",
    "NestedSchemaError",
    "SchemaDefinitionError",
    "UnknownSchemaTypeError",
    "ConstraintFailure",
    "ExtraneousPath",
    "MissingPath",
    "PredicateFailure",
    "TypeMismatch",
    "ValidationIssue",
    "ValidationResult",
    "format_errors",
    "ErrorReporter",
    "StringErrorReporter",
    "StructuredErrorReporter",
    "Schema",
    "SchemaPath",
    "SchemaType",
    "Wildcard",
    "and_statement",
    "as_loose",
    "as_strict",
    "class_schema",
    "loose_map_schema",
    "map_schema",
    "optional_path",
    "or_statement",
    "predicate_schema",
    "seq_layout_schema",
    "seq_schema",
    "set_schema",
    "wildcard",
    "SET_POSITION",
    "ValidationContext",
    "assert_valid",
    "is_valid",
    "validate",
    "validate_and_handle",
    "validation_errors",
]

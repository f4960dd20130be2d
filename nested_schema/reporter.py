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

"""Error reporters: one factory method per kind of validation failure.

The validation engine never builds error values itself. It calls the
reporter it was given, so callers choose the representation (plain strings,
structured records, or anything hashable of their own).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Hashable, Tuple

from .issues import (
    ConstraintFailure,
    ExtraneousPath,
    MissingPath,
    PredicateFailure,
    TypeMismatch,
    constraint_message,
    extraneous_path_message,
    instance_of_fail_message,
    missing_path_message,
    predicate_fail_message,
)

if TYPE_CHECKING:
    from .validation import ValidationContext


class ErrorReporter(ABC):
    """Abstract error reporter.

    Every method receives the current :class:`ValidationContext` first. The
    returned value must be hashable because errors are collected in a set.
    """

    @abstractmethod
    def constraint_error(self, ctx: "ValidationContext", constraint: Any) -> Hashable:
        """A constraint rejected the entire value under validation."""

    @abstractmethod
    def extraneous_path_error(self, ctx: "ValidationContext", path: Tuple[Any, ...]) -> Hashable:
        """A strict map holds a path its schema does not declare."""

    @abstractmethod
    def missing_path_error(self, ctx: "ValidationContext", path: Tuple[Any, ...]) -> Hashable:
        """A required path declared by the schema is absent."""

    @abstractmethod
    def predicate_fail_error(self, ctx: "ValidationContext", value: Any, predicate: Any) -> Hashable:
        """A predicate schema returned a falsy value (or raised)."""

    @abstractmethod
    def instance_of_fail_error(self, ctx: "ValidationContext", value: Any, expected_type: Any) -> Hashable:
        """The value is not an instance of the expected type or one of its subtypes."""


class StringErrorReporter(ErrorReporter):
    """Reports every failure as a readable message string."""

    def constraint_error(self, ctx, constraint):
        return constraint_message(ctx.parent_path, constraint)

    def extraneous_path_error(self, ctx, path):
        return extraneous_path_message(path)

    def missing_path_error(self, ctx, path):
        return missing_path_message(path)

    def predicate_fail_error(self, ctx, value, predicate):
        return predicate_fail_message(ctx.full_path, repr(value), predicate)

    def instance_of_fail_error(self, ctx, value, expected_type):
        return instance_of_fail_message(ctx.full_path, repr(value), expected_type, type(value))


class StructuredErrorReporter(ErrorReporter):
    """Reports failures as :class:`~nested_schema.issues.ValidationIssue` records."""

    def constraint_error(self, ctx, constraint):
        return ConstraintFailure(
            path=tuple(ctx.parent_path),
            constraint=constraint,
            value_repr=repr(ctx.data),
            value=ctx.data,
        )

    def extraneous_path_error(self, ctx, path):
        return ExtraneousPath(path=tuple(path))

    def missing_path_error(self, ctx, path):
        return MissingPath(path=tuple(path))

    def predicate_fail_error(self, ctx, value, predicate):
        return PredicateFailure(
            path=tuple(ctx.full_path),
            predicate=predicate,
            value_repr=repr(value),
            value=value,
        )

    def instance_of_fail_error(self, ctx, value, expected_type):
        return TypeMismatch(
            path=tuple(ctx.full_path),
            expected_type=expected_type,
            actual_type=type(value),
            value_repr=repr(value),
            value=value,
        )

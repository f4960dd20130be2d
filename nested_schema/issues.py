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

"""Structured validation issues and their message wording.

Each record is frozen and hashable so error sets stay duplicate free. The
offending value is kept on the record for inspection, but equality goes
through its ``repr`` so unhashable data (dicts, lists) can be reported.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Tuple

from .schema import describe_predicate, describe_schema, type_name
from .utils.paths import format_path

KeyPath = Tuple[Any, ...]


# ---- message wording -------------------------------------------------------

def constraint_message(parent_path: KeyPath, constraint: Any) -> str:
    if not parent_path:
        return f"Constraint failed: '{describe_schema(constraint)}'"
    return f"At parent path {format_path(parent_path)}, constraint failed: '{describe_schema(constraint)}'"


def extraneous_path_message(path: KeyPath) -> str:
    return f"Path {format_path(path)} was not specified in the schema."


def missing_path_message(path: KeyPath) -> str:
    return f"Map did not contain expected path {format_path(path)}."


def predicate_fail_message(full_path: KeyPath, value_repr: str, predicate: Any) -> str:
    if not full_path:
        return f"Value {value_repr} did not match predicate '{describe_predicate(predicate)}'."
    return (
        f"Value {value_repr}, at path {format_path(full_path)}, "
        f"did not match predicate '{describe_predicate(predicate)}'."
    )


def instance_of_fail_message(full_path: KeyPath, value_repr: str, expected_type: Any, actual_type: type) -> str:
    if not full_path:
        return (
            f"Expected value {value_repr} to be an instance of class {type_name(expected_type)}, "
            f"but was {actual_type.__name__}"
        )
    return (
        f"Expected value {value_repr}, at path {format_path(full_path)}, to be an instance of class "
        f"{type_name(expected_type)}, but was {actual_type.__name__}"
    )


# ---- records ---------------------------------------------------------------

@dataclass(frozen=True)
class ValidationIssue(ABC):
    path: KeyPath

    kind = "issue"

    @property
    @abstractmethod
    def message(self) -> str:
        """Human readable description of the failure."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ConstraintFailure(ValidationIssue):
    """A whole-value constraint rejected the value found at ``path``.

    Records are told apart by the constraint's description, never by the
    constraint object, which may not be hashable.
    """

    constraint: Any = field(compare=False)
    value_repr: str
    value: Any = field(default=None, compare=False, repr=False)
    constraint_name: str = field(init=False)

    kind = "constraint"

    def __post_init__(self):
        object.__setattr__(self, "constraint_name", describe_schema(self.constraint))

    @property
    def message(self) -> str:
        return constraint_message(self.path, self.constraint)


@dataclass(frozen=True)
class ExtraneousPath(ValidationIssue):
    """The data holds ``path`` but a strict map schema does not declare it."""

    kind = "extraneous_path"

    @property
    def message(self) -> str:
        return extraneous_path_message(self.path)


@dataclass(frozen=True)
class MissingPath(ValidationIssue):
    """A required path declared by the schema is absent from the data."""

    kind = "missing_path"

    @property
    def message(self) -> str:
        return missing_path_message(self.path)


@dataclass(frozen=True)
class PredicateFailure(ValidationIssue):
    predicate: Any = field(compare=False)
    value_repr: str
    value: Any = field(default=None, compare=False, repr=False)
    predicate_name: str = field(init=False)

    kind = "predicate"

    def __post_init__(self):
        object.__setattr__(self, "predicate_name", describe_predicate(self.predicate))

    @property
    def message(self) -> str:
        return predicate_fail_message(self.path, self.value_repr, self.predicate)


@dataclass(frozen=True)
class TypeMismatch(ValidationIssue):
    expected_type: Any
    actual_type: type
    value_repr: str
    value: Any = field(default=None, compare=False, repr=False)

    kind = "type_mismatch"

    @property
    def message(self) -> str:
        return instance_of_fail_message(self.path, self.value_repr, self.expected_type, self.actual_type)

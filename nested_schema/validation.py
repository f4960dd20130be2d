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

"""Recursive validation of nested data against a :class:`Schema`.

Every call builds a :class:`ValidationContext` and threads it explicitly
through the recursion; nothing is kept in module state, so concurrent calls
are independent.

Wildcard rows are expanded into concrete paths by a cartesian walk over the
data. The cost grows with (wildcards per path) x (keys per level); schemas
are expected to be shallow.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .config import validation_config
from .exceptions import DataValidationError, UnknownSchemaTypeError
from .report import ValidationResult, format_errors
from .reporter import ErrorReporter, StructuredErrorReporter
from .schema import (
    Schema,
    SchemaPath,
    SchemaType,
    describe_predicate,
    is_optional_path,
    is_schema,
    is_wildcard,
    is_wildcard_path,
    schema_path_set,
    schema_rows,
    schema_without_wildcard_paths,
    to_simple_schema,
    wildcard_key_schema,
    wildcard_path_set,
)
from .utils.paths import SET_POSITION, KeyPath, all_paths, get_in, is_subpath, subpaths

logger = logging.getLogger(__name__)

_NOT_FOUND = object()

# Reporter used for yes/no checks (wildcard keys, constraints); only emptiness matters.
_CHECK_REPORTER = StructuredErrorReporter()


@dataclass(frozen=True, eq=False)
class ValidationContext:
    reporter: ErrorReporter
    data: Any
    schema: Schema
    parent_path: KeyPath = ()
    full_path: KeyPath = ()
    # computed per map schema
    all_wildcard_paths: FrozenSet[SchemaPath] = frozenset()
    schema_without_wildcard_paths: Optional[Schema] = None

    def at(self, full_path: Iterable[Any]) -> "ValidationContext":
        return replace(self, full_path=tuple(full_path))


# -------------------------
# Wildcard expansion
# -------------------------

def _safe_keys(value: Any) -> List[Any]:
    if isinstance(value, Mapping):
        return list(value.keys())
    return []


def wildcard_path_to_concrete_paths(value: Any, path: SchemaPath) -> List[SchemaPath]:
    """Expand ``path`` against ``value`` into every literal path it denotes.

    A literal element is its own only candidate; a wildcard element stands
    for every key of the current mapping accepted by its key schema. The
    optional flag of ``path`` is carried onto each result.
    """

    def expand(current: Any, elements: Tuple[Any, ...]) -> List[KeyPath]:
        if not elements:
            return [()]
        first, rest = elements[0], elements[1:]
        if is_wildcard(first):
            key_schema = wildcard_key_schema(first)
            candidates = [k for k in _safe_keys(current) if is_valid(key_schema, k)]
        else:
            candidates = [first]
        return [
            (key,) + tail
            for key in candidates
            for tail in expand(get_in(current, (key,)), rest)
        ]

    optional = is_optional_path(path)
    return [SchemaPath(concrete, optional=optional) for concrete in expand(value, tuple(path))]


# -------------------------
# Map rows
# -------------------------

def _errors_for_concrete_path(ctx: ValidationContext, path: SchemaPath, sub_schema: Schema) -> Set[Any]:
    value = get_in(ctx.data, path, _NOT_FOUND)
    full_path = ctx.parent_path + tuple(path)

    if value is _NOT_FOUND:
        if is_optional_path(path):
            return set()
        return {ctx.reporter.missing_path_error(ctx.at(full_path), full_path)}

    return set(_validation_errors(ctx.reporter, full_path, sub_schema, value))


def _errors_for_possibly_wildcard_path(ctx: ValidationContext, path: SchemaPath, sub_schema: Schema) -> Set[Any]:
    if not is_wildcard_path(path):
        return _errors_for_concrete_path(ctx, path, sub_schema)

    errors: Set[Any] = set()
    for concrete in wildcard_path_to_concrete_paths(ctx.data, path):
        errors |= _errors_for_concrete_path(ctx, concrete, sub_schema)
    return errors


def _path_content_errors(ctx: ValidationContext) -> Set[Any]:
    errors: Set[Any] = set()
    for path, sub_schema in schema_rows(ctx.schema):
        errors |= _errors_for_possibly_wildcard_path(ctx, path, sub_schema)
    return errors


# -------------------------
# Extraneous paths
# -------------------------

def _remove_subpaths(paths: Iterable[KeyPath]) -> Set[KeyPath]:
    """Drop every path that is a strict prefix of another path in ``paths``."""
    paths = set(paths)
    all_subpaths = {sub for path in paths for sub in subpaths(path)}
    return {
        path for path in paths
        if not any(is_subpath(path, other) and path != other for other in all_subpaths)
    }


def _shorten_to_schema_path_set(data_paths: Iterable[KeyPath], schema_paths: Set[KeyPath]) -> Set[KeyPath]:
    """Truncate each data path to its longest prefix declared by the schema.

    Data paths run down to the leaves and may go deeper than the schema does.
    """
    shortened = set()
    for path in data_paths:
        declared = [sub for sub in subpaths(path) if sub in schema_paths]
        shortened.add(declared[-1] if declared else tuple(path))
    return shortened


def _extraneous_paths(ctx: ValidationContext) -> Set[KeyPath]:
    schema_paths = {tuple(p) for p in _remove_subpaths(schema_path_set(ctx.schema_without_wildcard_paths))}
    shortened = _shorten_to_schema_path_set(all_paths(ctx.data), schema_paths)
    return shortened - schema_paths


def _covered_by_wildcard_path(path: KeyPath, wildcard_path: SchemaPath) -> bool:
    if len(path) != len(wildcard_path):
        return False
    for element, pattern in zip(path, wildcard_path):
        if is_wildcard(pattern):
            if not is_valid(wildcard_key_schema(pattern), element):
                return False
        elif element != pattern:
            return False
    return True


def _matches_any_wildcard_path(ctx: ValidationContext, path: KeyPath) -> bool:
    return any(_covered_by_wildcard_path(path, wp) for wp in ctx.all_wildcard_paths)


def _extraneous_path_errors(ctx: ValidationContext) -> Set[Any]:
    errors = set()
    for extra in _extraneous_paths(ctx):
        if any(_matches_any_wildcard_path(ctx, sub) for sub in subpaths(extra)):
            continue
        full_path = ctx.parent_path + tuple(extra)
        errors.add(ctx.reporter.extraneous_path_error(ctx.at(ctx.parent_path), full_path))
    return errors


# -------------------------
# Constraints
# -------------------------

def _constraint_errors(ctx: ValidationContext) -> FrozenSet[Any]:
    return frozenset(
        ctx.reporter.constraint_error(ctx.at(()), constraint)
        for constraint in ctx.schema.constraints
        if not is_valid(constraint, ctx.data)
    )


# -------------------------
# Strategies per (type, strict)
# -------------------------

def _with_map_bindings(ctx: ValidationContext) -> ValidationContext:
    return replace(
        ctx,
        all_wildcard_paths=wildcard_path_set(ctx.schema),
        schema_without_wildcard_paths=schema_without_wildcard_paths(ctx.schema),
    )


def _map_loose_validation_errors(ctx: ValidationContext) -> Set[Any]:
    return _path_content_errors(_with_map_bindings(ctx))


def _map_strict_validation_errors(ctx: ValidationContext) -> Set[Any]:
    ctx = _with_map_bindings(ctx)
    return _path_content_errors(ctx) | _extraneous_path_errors(ctx)


def _seq_validation_errors(ctx: ValidationContext) -> Set[Any]:
    element_schema = ctx.schema.spec
    errors: Set[Any] = set()
    for idx, item in enumerate(ctx.data):
        errors |= _validation_errors(ctx.reporter, ctx.parent_path + (idx,), element_schema, item)
    return errors


def _set_validation_errors(ctx: ValidationContext) -> Set[Any]:
    element_schema = ctx.schema.spec
    errors: Set[Any] = set()
    for item in ctx.data:
        errors |= _validation_errors(ctx.reporter, ctx.parent_path + (SET_POSITION,), element_schema, item)
    return errors


def _seq_layout_validation_errors(ctx: ValidationContext) -> Set[Any]:
    # Only the overlapping prefix of layout and data is checked.
    errors: Set[Any] = set()
    for idx, (item_schema, item) in enumerate(zip(ctx.schema.spec, ctx.data)):
        errors |= _validation_errors(ctx.reporter, ctx.parent_path + (idx,), item_schema, item)
    return errors


def _class_validation_errors(ctx: ValidationContext) -> Set[Any]:
    expected_type = ctx.schema.spec
    if isinstance(ctx.data, expected_type):
        return set()
    return {ctx.reporter.instance_of_fail_error(ctx.at(ctx.parent_path), ctx.data, expected_type)}


def _or_statement_validation_errors(ctx: ValidationContext) -> Set[Any]:
    batches = [_validation_errors(ctx.reporter, ctx.parent_path, sub, ctx.data) for sub in ctx.schema.spec]
    if any(not batch for batch in batches):
        return set()
    # None satisfied: report the first alternative only.
    return set(batches[0]) if batches else set()


def _and_statement_validation_errors(ctx: ValidationContext) -> Set[Any]:
    errors: Set[Any] = set()
    for sub in ctx.schema.spec:
        errors |= _validation_errors(ctx.reporter, ctx.parent_path, sub, ctx.data)
    return errors


def _call_predicate(pred: Callable[[Any], Any], value: Any) -> bool:
    try:
        return bool(pred(value))
    except Exception:
        logger.debug(
            "Predicate '%s' raised on %r; treating it as a failed match",
            describe_predicate(pred), value, exc_info=True,
        )
        return False


def _predicate_validation_errors(ctx: ValidationContext) -> Set[Any]:
    pred = ctx.schema.spec
    if _call_predicate(pred, ctx.data):
        return set()
    return {ctx.reporter.predicate_fail_error(ctx.at(ctx.parent_path), ctx.data, pred)}


_STRATEGIES: Dict[Tuple[SchemaType, bool], Callable[[ValidationContext], Set[Any]]] = {
    (SchemaType.MAP, False): _map_loose_validation_errors,
    (SchemaType.MAP, True): _map_strict_validation_errors,
    (SchemaType.SEQ, False): _seq_validation_errors,
    (SchemaType.SEQ_LAYOUT, False): _seq_layout_validation_errors,
    (SchemaType.SET, False): _set_validation_errors,
    (SchemaType.CLASS, False): _class_validation_errors,
    (SchemaType.OR_STATEMENT, False): _or_statement_validation_errors,
    (SchemaType.AND_STATEMENT, False): _and_statement_validation_errors,
    (SchemaType.PREDICATE, False): _predicate_validation_errors,
}


def validation_fn(schema: Schema) -> Callable[[ValidationContext], Set[Any]]:
    """Return the strategy for ``schema``'s (type, strict) pair."""
    key = (schema.type, bool(schema.strict))
    try:
        return _STRATEGIES[key]
    except KeyError:
        raise UnknownSchemaTypeError(schema.type, schema.strict) from None


# -------------------------
# Public API
# -------------------------

def _validation_errors(reporter: ErrorReporter, parent_path: KeyPath, schema: Any, value: Any) -> FrozenSet[Any]:
    if not is_schema(schema):
        schema = to_simple_schema(schema)
    strategy = validation_fn(schema)

    parent_path = tuple(parent_path)
    ctx = ValidationContext(
        reporter=reporter,
        data=value,
        schema=schema,
        parent_path=parent_path,
        full_path=parent_path,
    )

    constraint_errors = _constraint_errors(ctx)
    if constraint_errors:
        return constraint_errors

    return frozenset(strategy(ctx))


def validation_errors(
    schema: Any,
    value: Any,
    *,
    reporter: Optional[ErrorReporter] = None,
    parent_path: Iterable[Any] = (),
) -> FrozenSet[Any]:
    """Return every validation error found comparing ``value`` against ``schema``.

    Args:
        schema: A :class:`Schema`, or a type / predicate turned into a simple schema
        value: Data to validate
        reporter: Builds one error per failure; defaults to the configured reporter
        parent_path: Path of ``value`` inside a larger structure, prefixed to reported paths

    Returns:
        Frozen set of errors; empty when the value is valid

    Raises:
        InvalidSchemaError: If ``schema`` is not a schema and cannot be coerced
        UnknownSchemaTypeError: If a schema's (type, strict) pair has no strategy
    """
    if reporter is None:
        reporter = validation_config.default_reporter()
    return _validation_errors(reporter, tuple(parent_path), schema, value)


def is_valid(schema: Any, value: Any) -> bool:
    """True if calling :func:`validation_errors` would return no errors."""
    return not _validation_errors(_CHECK_REPORTER, (), schema, value)


def validate_and_handle(
    value: Any,
    schema: Any,
    on_success: Callable[[Any], Any],
    on_failure: Callable[[Any, FrozenSet[Any]], Any],
    *,
    reporter: Optional[ErrorReporter] = None,
) -> Any:
    """Call ``on_success(value)`` if valid, else ``on_failure(value, errors)``; return its result."""
    errors = validation_errors(schema, value, reporter=reporter)
    if errors:
        return on_failure(value, errors)
    return on_success(value)


def validate(schema: Any, value: Any, *, reporter: Optional[ErrorReporter] = None) -> ValidationResult:
    return ValidationResult(value, validation_errors(schema, value, reporter=reporter))


def assert_valid(
    schema: Any,
    value: Any,
    *,
    reporter: Optional[ErrorReporter] = None,
    label: str = "value",
) -> Any:
    """Return ``value`` unchanged, or raise :class:`DataValidationError` listing every error."""
    errors = validation_errors(schema, value, reporter=reporter)
    if errors:
        raise DataValidationError(f"Schema validation failed for {label}:\n{format_errors(errors)}", errors)
    return value

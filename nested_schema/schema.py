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

"""Schema model, constructors and read-only query helpers.

A :class:`Schema` is a tagged, immutable value. Map schemas hold ordered
rows of ``(SchemaPath, Schema)``; a path element is either a literal key or
a :class:`Wildcard` that matches every key accepted by its key schema.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, FrozenSet, Iterable, Tuple, Union

from .exceptions import InvalidSchemaError


class SchemaType(str, Enum):
    MAP = "map"
    SEQ = "seq"
    SEQ_LAYOUT = "seq-layout"
    SET = "set"
    CLASS = "class"
    OR_STATEMENT = "or-statement"
    AND_STATEMENT = "and-statement"
    PREDICATE = "predicate"


@dataclass(frozen=True)
class Wildcard:
    """Path element matching any key that satisfies ``schema``."""

    schema: "Schema"

    def __repr__(self) -> str:
        return f"Wildcard({describe_schema(self.schema)})"


class SchemaPath(tuple):
    """A tuple of path elements carrying an ``optional`` flag.

    The flag is not part of equality or hashing.
    """

    def __new__(cls, elements: Iterable[Any] = (), optional: bool = False):
        path = super().__new__(cls, tuple(elements))
        path.optional = optional
        return path

    def __getnewargs__(self):
        return (tuple(self), self.optional)


@dataclass(frozen=True)
class Schema:
    type: SchemaType
    spec: Any
    strict: bool = False
    constraints: Tuple["Schema", ...] = ()

    def __hash__(self) -> int:
        # spec and constraints may hold unhashable callable objects
        return hash((self.type, self.strict))


Row = Tuple[SchemaPath, Schema]
SchemaLike = Union[Schema, type, Callable[[Any], Any]]


# -------------------------
# Description helpers
# -------------------------

def describe_predicate(pred: Any) -> str:
    """Readable name for a predicate function or callable object."""
    name = getattr(pred, "__qualname__", None) or getattr(pred, "__name__", None)
    if name:
        return name
    return repr(pred)


def type_name(expected: Any) -> str:
    if isinstance(expected, tuple):
        return " | ".join(t.__name__ for t in expected)
    return expected.__name__


def describe_schema(schema: Any) -> str:
    if not isinstance(schema, Schema):
        return describe_predicate(schema)
    if schema.type == SchemaType.PREDICATE:
        return describe_predicate(schema.spec)
    if schema.type == SchemaType.CLASS:
        return type_name(schema.spec)
    return f"<{schema.type.value} schema>"


# -------------------------
# Coercion
# -------------------------

def is_schema(x: Any) -> bool:
    return isinstance(x, Schema)


def _is_type_spec(x: Any) -> bool:
    if isinstance(x, type):
        return True
    return isinstance(x, tuple) and len(x) > 0 and all(isinstance(t, type) for t in x)


def to_simple_schema(x: Any) -> Schema:
    """Turn a type, tuple of types or predicate into a minimal schema."""
    if isinstance(x, Schema):
        return x
    if _is_type_spec(x):
        return Schema(SchemaType.CLASS, x)
    if callable(x):
        return Schema(SchemaType.PREDICATE, x)
    raise InvalidSchemaError(f"Cannot build a schema from {x!r}: expected a Schema, a type or a predicate")


def _constraints(constraints: Iterable[SchemaLike]) -> Tuple[Schema, ...]:
    return tuple(to_simple_schema(c) for c in constraints)


# -------------------------
# Paths
# -------------------------

def wildcard(key_schema: SchemaLike) -> Wildcard:
    return Wildcard(to_simple_schema(key_schema))


def is_wildcard(element: Any) -> bool:
    return isinstance(element, Wildcard)


def wildcard_key_schema(element: Wildcard) -> Schema:
    if not isinstance(element, Wildcard):
        raise InvalidSchemaError(f"Path element {element!r} is not a wildcard")
    return element.schema


def is_wildcard_path(path: Sequence[Any]) -> bool:
    return any(is_wildcard(element) for element in path)


def is_optional_path(path: Any) -> bool:
    return bool(getattr(path, "optional", False))


def to_schema_path(path: Any) -> SchemaPath:
    """Normalize a row path: lists and tuples are paths, anything else is a one-key path."""
    if isinstance(path, SchemaPath):
        return path
    if isinstance(path, (list, tuple)):
        elements = tuple(path)
    else:
        elements = (path,)
    if not elements:
        raise InvalidSchemaError("Schema paths must contain at least one element")
    return SchemaPath(elements)


def optional_path(path: Any) -> SchemaPath:
    """Mark a path optional: absent values are not reported as missing."""
    return SchemaPath(to_schema_path(path), optional=True)


# -------------------------
# Constructors
# -------------------------

def _normalize_rows(rows: Any) -> Tuple[Tuple[Row, ...], Tuple[Schema, ...]]:
    if isinstance(rows, Mapping):
        rows = list(rows.items())

    normalized = []
    included_constraints: Tuple[Schema, ...] = ()
    for item in rows:
        if isinstance(item, Schema):
            if item.type != SchemaType.MAP:
                raise InvalidSchemaError(f"Only map schemas can be included as rows, got {item.type.value}")
            normalized.extend(item.spec)
            included_constraints += item.constraints
            continue
        try:
            path, sub_schema = item
        except (TypeError, ValueError):
            raise InvalidSchemaError(f"Map schema rows must be (path, schema) pairs, got {item!r}") from None
        normalized.append((to_schema_path(path), to_simple_schema(sub_schema)))
    return tuple(normalized), included_constraints


def map_schema(rows: Any = (), *, strict: bool = True, constraints: Iterable[SchemaLike] = ()) -> Schema:
    """Build a map schema.

    ``rows`` is a mapping or a sequence of ``(path, schema)`` pairs. A path is
    a list or tuple of elements; any other key is a one-element path. Map
    schemas found among the rows are included: their rows and constraints are
    added in place.
    """
    normalized, included = _normalize_rows(rows)
    return Schema(
        SchemaType.MAP,
        normalized,
        strict=strict,
        constraints=included + _constraints(constraints),
    )


def loose_map_schema(rows: Any = (), *, constraints: Iterable[SchemaLike] = ()) -> Schema:
    return map_schema(rows, strict=False, constraints=constraints)


def is_sequential(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes, bytearray))


def is_set(x: Any) -> bool:
    return isinstance(x, Set)


def seq_schema(element: SchemaLike, *, constraints: Iterable[SchemaLike] = ()) -> Schema:
    return Schema(
        SchemaType.SEQ,
        to_simple_schema(element),
        constraints=_constraints((is_sequential, *constraints)),
    )


def seq_layout_schema(layout: Iterable[SchemaLike], *, constraints: Iterable[SchemaLike] = ()) -> Schema:
    """Positional sequence schema: element ``i`` is checked against ``layout[i]``."""
    return Schema(
        SchemaType.SEQ_LAYOUT,
        tuple(to_simple_schema(s) for s in layout),
        constraints=_constraints((is_sequential, *constraints)),
    )


def set_schema(element: SchemaLike, *, constraints: Iterable[SchemaLike] = ()) -> Schema:
    return Schema(
        SchemaType.SET,
        to_simple_schema(element),
        constraints=_constraints((is_set, *constraints)),
    )


def class_schema(expected_type: Any, *, constraints: Iterable[SchemaLike] = ()) -> Schema:
    if not _is_type_spec(expected_type):
        raise InvalidSchemaError(f"class_schema expects a type or tuple of types, got {expected_type!r}")
    return Schema(SchemaType.CLASS, expected_type, constraints=_constraints(constraints))


def predicate_schema(pred: Callable[[Any], Any], *, constraints: Iterable[SchemaLike] = ()) -> Schema:
    if not callable(pred):
        raise InvalidSchemaError(f"predicate_schema expects a callable, got {pred!r}")
    return Schema(SchemaType.PREDICATE, pred, constraints=_constraints(constraints))


def or_statement(*schemas: SchemaLike) -> Schema:
    """Satisfied when at least one sub-schema is."""
    return Schema(SchemaType.OR_STATEMENT, tuple(to_simple_schema(s) for s in schemas))


def and_statement(*schemas: SchemaLike) -> Schema:
    """Satisfied only when every sub-schema is."""
    return Schema(SchemaType.AND_STATEMENT, tuple(to_simple_schema(s) for s in schemas))


def _require_map(schema: Schema) -> None:
    if not isinstance(schema, Schema) or schema.type != SchemaType.MAP:
        raise InvalidSchemaError(f"Expected a map schema, got {schema!r}")


def as_strict(schema: Schema) -> Schema:
    _require_map(schema)
    return dataclasses.replace(schema, strict=True)


def as_loose(schema: Schema) -> Schema:
    _require_map(schema)
    return dataclasses.replace(schema, strict=False)


# -------------------------
# Map schema queries
# -------------------------

def schema_rows(schema: Schema) -> Tuple[Row, ...]:
    _require_map(schema)
    return schema.spec


def schema_path_set(schema: Schema) -> FrozenSet[SchemaPath]:
    return frozenset(path for path, _ in schema_rows(schema))


def wildcard_path_set(schema: Schema) -> FrozenSet[SchemaPath]:
    return frozenset(path for path, _ in schema_rows(schema) if is_wildcard_path(path))


def schema_without_wildcard_paths(schema: Schema) -> Schema:
    rows = tuple(row for row in schema_rows(schema) if not is_wildcard_path(row[0]))
    return dataclasses.replace(schema, spec=rows)

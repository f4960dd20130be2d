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

"""Path helpers for nested mapping data.

A path is a tuple of keys. Only ``Mapping`` values are descended into;
sequences and sets are leaves as far as these helpers are concerned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Hashable, List, Sequence, Tuple

KeyPath = Tuple[Hashable, ...]


def subpaths(path: Sequence[Any]) -> List[KeyPath]:
    """Return every non-empty prefix of ``path``, shortest first."""
    return [tuple(path[:n]) for n in range(1, len(path) + 1)]


def is_subpath(candidate: Sequence[Any], path: Sequence[Any]) -> bool:
    """True when ``candidate`` is a prefix of ``path`` (a path is a subpath of itself)."""
    if len(candidate) > len(path):
        return False
    return tuple(path[: len(candidate)]) == tuple(candidate)


def all_paths(value: Any) -> List[KeyPath]:
    """Return the path of every leaf in a nested mapping.

    Non-empty mappings are descended into; any other value (an empty mapping
    included) ends a path. A non-mapping ``value`` has no paths.

    Because ``{}`` is a leaf, ``{"a": {}}`` checked against a strict schema
    declaring only ``("a", "b")`` reports ``("a", "b")`` missing and
    ``("a",)`` extraneous.
    """
    if not isinstance(value, Mapping):
        return []

    result: List[KeyPath] = []
    for key, child in value.items():
        if isinstance(child, Mapping) and child:
            result.extend((key,) + tail for tail in all_paths(child))
        else:
            result.append((key,))
    return result


def get_in(value: Any, path: Sequence[Any], default: Any = None) -> Any:
    """Look up ``path`` in nested mappings, returning ``default`` when any step is absent."""
    current = value
    for key in path:
        if not isinstance(current, Mapping):
            return default
        try:
            if key not in current:
                return default
        except TypeError:
            # unhashable key
            return default
        current = current[key]
    return current


class _SetPosition:
    """Path element standing in for the position of a set member."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "*"

    def __reduce__(self):
        return (_SetPosition, ())


SET_POSITION = _SetPosition()


def format_path(path: Sequence[Any]) -> str:
    """Render a path for messages, e.g. ``['mom', 'name', 'first']``."""
    return "[" + ", ".join(repr(element) for element in path) + "]"

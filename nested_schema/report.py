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

"""Human-readable rendering of validation error sets."""

from typing import Any, Dict, FrozenSet, Iterable, List


def error_message(error: Any) -> str:
    """Message text for an error produced by any reporter."""
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    return str(error)


def format_errors(errors: Iterable[Any]) -> str:
    """Render errors as sorted ``  - message`` lines."""
    return "\n".join(f"  - {message}" for message in sorted(error_message(e) for e in errors))


class ValidationResult:
    """Container for the outcome of validating a single value."""

    def __init__(self, value: Any, errors: Iterable[Any]):
        """Initialize validation result.

        Args:
            value: The value that was validated
            errors: Errors produced by the reporter in use
        """
        self.value = value
        self.errors: FrozenSet[Any] = frozenset(errors)

    @property
    def ok(self) -> bool:
        return not self.errors

    def messages(self) -> List[str]:
        """Sorted message text of every error."""
        return sorted(error_message(e) for e in self.errors)

    def by_kind(self) -> Dict[str, List[Any]]:
        """Group structured errors by their ``kind``; plain strings are grouped under ``"message"``."""
        grouped: Dict[str, List[Any]] = {}
        for error in self.errors:
            grouped.setdefault(getattr(error, "kind", "message"), []).append(error)
        return grouped

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        return f"ValidationResult(ok={self.ok}, errors={len(self.errors)})"

from __future__ import annotations

import pytest

from nested_schema import (
    ConstraintFailure,
    ErrorReporter,
    ExtraneousPath,
    MissingPath,
    PredicateFailure,
    TypeMismatch,
    ValidationIssue,
    map_schema,
    predicate_schema,
    validation_errors,
)
from tests.helpers.schemas import height_schema, schema_with_constraints


def is_even(x):
    return x % 2 == 0


class KindPathReporter(ErrorReporter):
    """Reports (kind, path) pairs."""

    def constraint_error(self, ctx, constraint):
        return ("constraint", ctx.parent_path)

    def extraneous_path_error(self, ctx, path):
        return ("extraneous", path)

    def missing_path_error(self, ctx, path):
        return ("missing", path)

    def predicate_fail_error(self, ctx, value, predicate):
        return ("predicate", ctx.full_path)

    def instance_of_fail_error(self, ctx, value, expected_type):
        return ("instance", ctx.full_path)


def test_string_messages(strings):
    assert validation_errors(map_schema([(["a"], int)]), {"a": 1, "c": 2}, reporter=strings) == {
        "Path ['c'] was not specified in the schema."
    }
    assert validation_errors(height_schema, {}, reporter=strings) == {
        "Map did not contain expected path ['height']."
    }
    assert validation_errors(predicate_schema(is_even), 3, reporter=strings) == {
        "Value 3 did not match predicate 'is_even'."
    }
    assert validation_errors(map_schema([(["n"], is_even)]), {"n": 3}, reporter=strings) == {
        "Value 3, at path ['n'], did not match predicate 'is_even'."
    }
    assert validation_errors(int, "x", reporter=strings) == {
        "Expected value 'x' to be an instance of class int, but was str"
    }
    assert validation_errors(map_schema([(["n"], int)]), {"n": "x"}, reporter=strings) == {
        "Expected value 'x', at path ['n'], to be an instance of class int, but was str"
    }
    assert validation_errors(schema_with_constraints, {"a": "x"}, reporter=strings) == {
        "Constraint failed: '_even_distinct_values'",
        "Constraint failed: '_even_key_count'",
    }


def test_structured_issues_render_the_same_messages(structured, strings):
    schema = map_schema([(["n"], is_even), (["m"], int)])
    value = {"n": 3, "x": 1}
    issues = validation_errors(schema, value, reporter=structured)
    assert {issue.message for issue in issues} == validation_errors(schema, value, reporter=strings)
    assert all(str(issue) == issue.message for issue in issues)


def test_structured_kinds_are_distinct():
    issues = [
        ConstraintFailure((), constraint=None, value_repr="1"),
        ExtraneousPath(("a",)),
        MissingPath(("a",)),
        PredicateFailure((), predicate=None, value_repr="1"),
        TypeMismatch((), expected_type=int, actual_type=str, value_repr="'1'"),
    ]
    assert all(isinstance(i, ValidationIssue) for i in issues)
    assert len({i.kind for i in issues}) == 5
    # same path, different kind
    assert ExtraneousPath(("a",)) != MissingPath(("a",))


def test_unhashable_values_are_kept_but_compared_by_repr(structured):
    value = {"a": [1]}
    (issue,) = validation_errors(int, value, reporter=structured)
    assert issue.value is value
    assert issue.value_repr == "{'a': [1]}"
    assert issue == TypeMismatch((), expected_type=int, actual_type=dict, value_repr="{'a': [1]}")


def test_custom_reporter():
    schema = map_schema([(["a"], is_even), (["b"], int)])
    errors = validation_errors(schema, {"a": 1, "c": 1}, reporter=KindPathReporter())
    assert errors == {("predicate", ("a",)), ("missing", ("b",)), ("extraneous", ("c",))}


def test_reporter_must_implement_every_kind():
    class Partial(ErrorReporter):
        def missing_path_error(self, ctx, path):
            return path

    with pytest.raises(TypeError):
        Partial()


def test_validation_issue_base_is_abstract():
    with pytest.raises(TypeError):
        ValidationIssue(("a",))

"""Example schemas shared across the test suite."""
from __future__ import annotations

from collections import OrderedDict
from collections.abc import Mapping
from numbers import Number

from nested_schema import (
    class_schema,
    loose_map_schema,
    map_schema,
    or_statement,
    seq_layout_schema,
    seq_schema,
    set_schema,
)


def one_of(*choices):
    def _one_of(x):
        return x in choices
    _one_of.__qualname__ = f"one_of{choices!r}"
    return _one_of


name_schema = map_schema([(["name", "first"], str)])
height_schema = map_schema([(["height"], Number)])
product_schema = map_schema([(["quantity"], Number), (["price"], Number)])
loose_height_schema = loose_map_schema([(["height"], Number)])

person_schema = map_schema([name_schema, height_schema])
loose_person_schema = loose_map_schema([(["name", "first"], str), (["height"], Number)])

family_schema = map_schema([(["mom"], person_schema), (["dad"], person_schema)])
mom_strict_dad_loose_family_schema = map_schema(
    [(["mom"], person_schema), (["dad"], loose_person_schema)]
)


def _even_distinct_values(m):
    return len(set(m.values())) % 2 == 0


def _even_key_count(m):
    return len(m) % 2 == 0


schema_with_constraints = loose_map_schema(
    [(["a"], str), (["b"], Number)],
    constraints=[_even_distinct_values, _even_key_count],
)

my_seq_schema = seq_schema(str)
my_set_schema = set_schema(Number)

# checkerboard
black_square = one_of(0)
white_square = one_of(1)
white_row = seq_layout_schema([white_square, black_square] * 4)
black_row = seq_layout_schema([black_square, white_square] * 4)
checkers_board_schema = seq_layout_schema([white_row, black_row] * 4)

string_or_number = or_statement(class_schema(str), class_schema(Number))


def _non_empty(x):
    return len(x) > 0


def _not_ordered_dict(m):
    return not isinstance(m, OrderedDict)


def _even_length(xs):
    return len(xs) % 2 == 0


non_empty_map = loose_map_schema([], constraints=[class_schema(Mapping), _non_empty])

# strict, and inherits both constraints of non_empty_map
unordered_non_empty_map = map_schema(
    [non_empty_map, (["a"], one_of(1))],
    constraints=[_not_ordered_dict],
)

red_list = seq_schema(one_of("red"), constraints=[_even_length, class_schema(list)])
red_set = set_schema(one_of("red", "RED", "Red"), constraints=[_even_length, class_schema(frozenset)])

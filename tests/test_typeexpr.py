import pytest

from tsbind.builtins import (
    NUMBER,
    STRING,
    ArrayType,
    OptionType,
    RangeType,
    RecordType,
    ResultType,
    TupleType,
    Wrapper,
)
from tsbind.core import TypeParam
from tsbind.typeexpr import extract_type_args, format_generics, format_type

T = TypeParam("T")


def test_generic_parameter_is_left_by_name():
    deps = []
    assert format_type(T, deps, [T]) == "T"
    assert deps == []


def test_unknown_parameter_is_a_dependency():
    deps = []
    param = TypeParam("U")
    assert format_type(param, deps, [T]) == "U"
    assert deps == [param]


def test_nested_arrays():
    assert format_type(ArrayType(ArrayType(NUMBER)), []) == "Array<Array<number>>"


def test_option_of_array():
    assert format_type(OptionType(ArrayType(NUMBER)), []) == "Option<Array<number>>"


def test_range_uses_type_args_form():
    deps = []
    ty = RangeType(NUMBER)
    assert format_type(ty, deps) == "{ start: number, end: number, }"
    assert ty in deps


def test_wrapper_is_transparent():
    assert format_type(Wrapper(ArrayType(STRING)), []) == "Array<string>"


def test_generic_tuples():
    assert format_type(TupleType(T, T), [], [T]) == "[T, T]"
    assert format_type(TupleType(T, TupleType(T, T)), [], [T]) == "[T, [T, T]]"


def test_single_element_tuple_is_its_element():
    assert format_type(TupleType(ArrayType(NUMBER)), []) == format_type(ArrayType(NUMBER), [])


def test_tuple_collects_element_dependencies():
    deps = []
    format_type(TupleType(OptionType(STRING), NUMBER), deps)
    assert OptionType(STRING) in deps
    assert STRING in deps
    assert NUMBER in deps


def test_dependencies_in_order():
    deps = []
    record = RecordType(STRING, ArrayType(NUMBER))
    result = format_type(record, deps)
    assert result == record.inline()
    assert deps == [record, STRING, ArrayType(NUMBER), NUMBER]


def test_generic_inside_container_matches_name_with_type_args():
    ty = ResultType(T, ArrayType(T))
    expected = ty.name_with_type_args(["T", format_type(ArrayType(T), [], [T])])
    assert format_type(ty, [], [T]) == expected


def test_format_generics_empty():
    deps = []
    assert format_generics(deps, []) == ""
    assert deps == []


def test_format_generics_plain():
    assert format_generics([], [T]) == "<T>"


def test_format_generics_defaults():
    deps = []
    assert format_generics(deps, [TypeParam("T", default=STRING)]) == "<T = string>"
    assert deps == [STRING]
    assert format_generics([], [T, TypeParam("K", default=NUMBER)]) == "<T, K = number>"


def test_format_generics_default_with_args_adds_dependencies():
    deps = []
    default = OptionType(ArrayType(NUMBER))
    out = format_generics(deps, [TypeParam("U", default=default)])
    assert out.endswith(format_type(default, []) + ">")
    assert default in deps
    assert NUMBER in deps


@pytest.mark.parametrize("ty", [NUMBER, T, TupleType(NUMBER, STRING)])
def test_extract_type_args_none(ty):
    assert extract_type_args(ty) is None


def test_extract_type_args_present():
    assert extract_type_args(ResultType(NUMBER, STRING)) == [NUMBER, STRING]
    assert extract_type_args(Wrapper(T)) == [T]
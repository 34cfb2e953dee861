import pytest

from tsbind.builtins import (
    DATE,
    DATE_TIME,
    NULL,
    NUMBER,
    STRING,
    ArrayType,
    OptionType,
    RangeInclusiveType,
    RangeType,
    RecordType,
    ResultType,
    TupleType,
    Wrapper,
)
from tsbind.core import Dependencies


def test_array_free():
    assert ArrayType(STRING).inline() == "Array<string>"


def test_alias_nested():
    assert ArrayType(ArrayType(STRING)).inline() == "Array<Array<string>>"


def test_newtype_of_wrapped_elements():
    assert ArrayType(Wrapper(NUMBER)).inline() == "Array<number>"


def test_tuple_name():
    tuple_type = TupleType(STRING, NUMBER, TupleType(NUMBER, NUMBER))
    assert tuple_type.name() == "[string, number, [number, number]]"


def test_tuple_has_no_decl():
    assert TupleType(STRING, NUMBER, TupleType(NUMBER, NUMBER)).decl() is None


def test_tuple_with_wrapper_inline():
    assert TupleType(NUMBER, STRING, Wrapper(NUMBER)).inline() == "[number, string, number]"


def test_chrono_dates_are_strings():
    assert TupleType(STRING, DATE, DATE, DATE).inline() == "[string, string, string, string]"
    assert DATE_TIME.name_with_type_args(["anything"]) == "string"


def test_tuple_arity_limits():
    with pytest.raises(ValueError):
        TupleType()
    with pytest.raises(ValueError):
        TupleType(*[NUMBER] * 11)


def test_tuple_dependencies():
    deps = TupleType(OptionType(STRING), NUMBER).dependencies()
    assert set(deps) == {4048293303}


def test_option():
    option = OptionType(ArrayType(NUMBER))
    assert option.name_with_generics() == "Option<Array<number>>"
    assert option.decl() == "type Option<T> = T | null;"
    assert OptionType(STRING).inline() == "string | null"


def test_option_wrong_arity():
    with pytest.raises(ValueError):
        OptionType(STRING).name_with_type_args(["a", "b"])


def test_result():
    result = ResultType(NUMBER, STRING)
    assert result.generics() == "number, string"
    assert result.name_with_generics() == "Result<number, string>"
    assert result.decl() == "type Result<T, E> = { Ok: T } | { Err: E };"
    assert result.id == 4048293304


def test_record():
    assert RecordType(STRING, STRING).inline() == "Record<string, string>"


def test_range_type_args():
    assert RangeType(NUMBER).name_with_type_args(["number"]) == "{ start: number, end: number, }"
    assert RangeInclusiveType(NUMBER).decl() == "type RangeInclusive<T> = { start: T, end: T, };"


def test_range_cannot_be_inlined():
    with pytest.raises(TypeError):
        RangeType(NUMBER).inline()


def test_range_dependencies():
    deps = Dependencies()
    deps.add(RangeType(NULL))
    deps.add(RangeInclusiveType(NULL))
    assert set(deps) == {4048293307, 4048293308}
    assert deps[4048293307].ts_name == "Range"


def test_array_without_declaration_is_not_a_dependency():
    deps = ArrayType(RangeType(NUMBER)).dependencies()
    assert 4048293307 in deps
    assert 4048293305 not in deps


def test_wrapper_delegates():
    wrapper = Wrapper(OptionType(STRING))
    assert wrapper.id == 4048293303
    assert wrapper.decl() == "type Option<T> = T | null;"
    assert wrapper.name_with_type_args(["x"]) == "x"
    assert Wrapper(ArrayType(NUMBER)).transparent() is True
    assert Wrapper(NUMBER).transparent() is False


def test_wrapper_wrong_arity():
    with pytest.raises(ValueError):
        Wrapper(NUMBER).name_with_type_args([])


def test_primitive_rejects_type_args():
    with pytest.raises(ValueError):
        NUMBER.name_with_type_args(["string"])
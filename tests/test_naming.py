import pytest

from tsbind.naming import (
    DeriveError,
    Inflection,
    parse_inflection,
    raw_name_to_ts_field,
    to_ts_ident,
)


def test_screaming_snake_of_variant_name():
    assert Inflection.SCREAMING_SNAKE.apply("MessageOne") == "MESSAGE_ONE"


@pytest.mark.parametrize(
    "source, expected",
    [("sender_id", "senderId"), ("number_of_camels", "numberOfCamels")],
)
def test_camel_case(source, expected):
    assert Inflection.CAMEL.apply(source) == expected


@pytest.mark.parametrize("name", ["MessageOne", "SenderId", "A", "NumberOfSnakes"])
def test_pascal_snake_round_trip(name):
    assert Inflection.PASCAL.apply(Inflection.SNAKE.apply(name)) == name


@pytest.mark.parametrize("name", ["MessageOne", "sender_id", "numberOfCamels"])
def test_screaming_is_upper_snake(name):
    assert Inflection.SCREAMING_SNAKE.apply(name) == Inflection.SNAKE.apply(name).upper()


@pytest.mark.parametrize("name", ["MessageOne", "sender_id", "numberOfCamels"])
def test_kebab_matches_snake_separators(name):
    assert Inflection.KEBAB.apply(name) == Inflection.SNAKE.apply(name).replace("_", "-")


@pytest.mark.parametrize("name", ["MessageOne", "sender_id"])
def test_lower_and_upper(name):
    assert Inflection.LOWER.apply(name) == name.lower()
    assert Inflection.UPPER.apply(name) == name.upper()


def test_snake_case_is_idempotent():
    once = Inflection.SNAKE.apply("numberOfCamels")
    assert Inflection.SNAKE.apply(once) == once


@pytest.mark.parametrize(
    "text, expected",
    [
        ("lowercase", Inflection.LOWER),
        ("UPPERCASE", Inflection.UPPER),
        ("camelCase", Inflection.CAMEL),
        ("snake_case", Inflection.SNAKE),
        ("PascalCase", Inflection.PASCAL),
        ("SCREAMING_SNAKE_CASE", Inflection.SCREAMING_SNAKE),
        ("kebab-case", Inflection.KEBAB),
    ],
)
def test_parse_inflection(text, expected):
    assert parse_inflection(text) is expected


@pytest.mark.parametrize("member", list(Inflection))
def test_parse_inflection_round_trip(member):
    assert parse_inflection(member.value) is member


def test_parse_inflection_rejects_unknown():
    with pytest.raises(DeriveError, match="invalid inflection: 'titlecase'"):
        parse_inflection("titlecase")


def test_to_ts_ident_strips_raw_prefix():
    assert to_ts_ident("r#type") == "type"
    assert to_ts_ident("enum") == "enum"


def test_raw_name_quotes_special_characters():
    assert raw_name_to_ts_field("a/b") == '"a/b"'


@pytest.mark.parametrize("name", ["sender_id", "$value", "_x", ""])
def test_raw_name_keeps_plain_identifiers(name):
    assert raw_name_to_ts_field(name) == name


def test_raw_name_quotes_leading_digit():
    name = "1abc"
    assert raw_name_to_ts_field(name) == f'"{name}"'
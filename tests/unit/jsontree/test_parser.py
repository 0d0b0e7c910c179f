from __future__ import annotations

import pytest

from pxshot_json.domain.enums.value_kind import ValueKind
from pxshot_json.domain.exceptions.json_tree import JsonInvalidArgument, JsonMalformedInput
from pxshot_json.jsontree.parser import parse
from pxshot_json.jsontree.value import lookup


def test_scenario_object_with_four_members() -> None:
    tree = parse(b'{"url":"https://x","width":1280,"height":720,"full_page":true}')

    assert tree.kind is ValueKind.OBJECT
    assert len(tree) == 4

    width = lookup(tree, "width")
    assert width is not None
    assert width.kind is ValueKind.NUMBER
    assert width.number_int == 1280

    full_page = lookup(tree, "full_page")
    assert full_page is not None
    assert full_page.kind is ValueKind.TRUE

    assert lookup(tree, "missing") is None


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("null", ValueKind.NULL),
        ("false", ValueKind.FALSE),
        ("true", ValueKind.TRUE),
        ('"s"', ValueKind.STRING),
        ("-1", ValueKind.NUMBER),
        ("[]", ValueKind.ARRAY),
        ("{}", ValueKind.OBJECT),
    ],
)
def test_parse_value_dispatches_on_lead_character(text: str, kind: ValueKind) -> None:
    assert parse(text).kind is kind


def test_parsed_true_carries_numeric_one() -> None:
    assert parse("true").number_int == 1


def test_empty_containers_have_no_children() -> None:
    assert len(parse("[]")) == 0
    assert len(parse("{}")) == 0
    assert len(parse("[ \n ]")) == 0
    assert len(parse("{\t}")) == 0


def test_whitespace_is_any_byte_up_to_space() -> None:
    tree = parse(b"\x01 [\x1f1 ,\r\n2\x00]\t")
    assert [child.number_int for child in tree] == [1, 2]


def test_array_children_keep_order() -> None:
    tree = parse('[3, "two", null, [1], {"k": false}]')
    kinds = [child.kind for child in tree]
    assert kinds == [
        ValueKind.NUMBER,
        ValueKind.STRING,
        ValueKind.NULL,
        ValueKind.ARRAY,
        ValueKind.OBJECT,
    ]
    assert all(child.key is None for child in tree)


def test_object_keys_become_member_keys_not_children() -> None:
    tree = parse('{"a": {"b": [true]}}')
    inner = lookup(tree, "a")
    assert inner is not None and inner.key == "a"
    b = lookup(inner, "b")
    assert b is not None and b.kind is ValueKind.ARRAY
    assert b.first_child is not None and b.first_child.is_true


def test_duplicate_keys_are_kept_and_first_wins() -> None:
    tree = parse('{"k": 1, "k": 2}')
    assert len(tree) == 2
    first = lookup(tree, "k")
    assert first is not None and first.number_int == 1


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (r'"a\"b"', 'a"b'),
        (r'"a\\b"', "a\\b"),
        (r'"a\/b"', "a/b"),
        (r'"\b\f\n\r\t"', "\b\f\n\r\t"),
        (r'"\q"', "q"),
    ],
)
def test_string_escapes(text: str, expected: str) -> None:
    assert parse(text).string_value == expected


def test_unicode_escapes_are_decoded() -> None:
    esc = "\\u"
    assert parse(f'"caf{esc}00e9"').string_value == "caf" + chr(0xE9)
    assert parse(f'"{esc}d83d{esc}de00"').string_value == chr(0x1F600)
    assert parse(f'"{esc}D83Dx"').string_value == chr(0xFFFD) + "x"
    assert parse(f'"{esc}dc00"').string_value == chr(0xFFFD)


def test_utf8_bytes_are_decoded() -> None:
    assert parse('"日本"'.encode()).string_value == "日本"


@pytest.mark.parametrize(
    ("text", "as_float", "as_int", "exact"),
    [
        ("0", 0.0, 0, True),
        ("-0", 0.0, 0, True),
        ("42", 42.0, 42, True),
        ("-17", -17.0, -17, True),
        ("1.5", 1.5, 1, False),
        ("-2.5e1", -25.0, -25, True),
        ("1E3", 1000.0, 1000, True),
        ("5e-1", 0.5, 0, False),
        ("9007199254740991", 9007199254740991.0, 9007199254740991, True),
    ],
)
def test_numbers(text: str, as_float: float, as_int: int, exact: bool) -> None:
    number = parse(text)
    assert number.number_float == as_float
    assert number.number_int == as_int
    assert number.int_exact is exact


@pytest.mark.parametrize(
    "text",
    [
        '{"a":1,}',
        "[1,2",
        "tru",
        "",
        "   ",
        "[1,]",
        '{"a" 1}',
        '{"a":}',
        "{1:2}",
        '{"a":1',
        '"unterminated',
        '"trailing backslash\\',
        "nul",
        "fals",
        "-",
        "+1",
        ".5",
        "01",
        "1.",
        "1e",
        "[1 2]",
        "@",
        '"\\u12"',
        '"\\uzzzz"',
        "[] []",
        "nullx",
    ],
)
def test_malformed_input_is_rejected(text: str) -> None:
    with pytest.raises(JsonMalformedInput):
        parse(text)


def test_error_reports_position() -> None:
    with pytest.raises(JsonMalformedInput) as info:
        parse('[1, 2, @]')
    assert info.value.details["position"] == 7
    assert info.value.code == "MALFORMED_INPUT"


def test_invalid_utf8_is_malformed() -> None:
    with pytest.raises(JsonMalformedInput):
        parse(b'"\xff"')


def test_nesting_limit() -> None:
    assert parse("[" * 10 + "]" * 10, max_depth=10).is_array
    with pytest.raises(JsonMalformedInput):
        parse("[" * 11 + "]" * 11, max_depth=10)
    with pytest.raises(JsonMalformedInput):
        parse('{"a":' * 11 + "1" + "}" * 11, max_depth=10)


def test_parse_rejects_unsupported_input_types() -> None:
    with pytest.raises(JsonInvalidArgument):
        parse(123)  # type: ignore[arg-type]
    with pytest.raises(JsonInvalidArgument):
        parse("[]", max_depth=0)

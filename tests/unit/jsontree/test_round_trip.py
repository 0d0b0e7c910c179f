from __future__ import annotations

import pytest

from pxshot_json.domain.enums.value_kind import ValueKind
from pxshot_json.jsontree.parser import parse
from pxshot_json.jsontree.printer import print_bytes, print_unformatted
from pxshot_json.jsontree.value import (
    SAFE_INTEGER_MAX,
    Value,
    add_member,
    add_number_member,
    add_string_member,
    append_element,
    create_array,
    create_bool,
    create_number,
    create_object,
    create_string,
)


def _shape(item: Value) -> object:
    """Reduce a tree to kinds, keys and payloads in child order."""
    if item.kind is ValueKind.NUMBER:
        return ("number", item.number_float)
    if item.kind is ValueKind.STRING:
        return ("string", item.string_value)
    if item.kind.is_container:
        return (item.kind.value, [(child.key, _shape(child)) for child in item])
    return item.kind.value


@pytest.mark.parametrize(
    "n",
    [
        0,
        1,
        -1,
        7,
        1280,
        -65536,
        2**31,
        -(2**31) - 1,
        10**15 + 7,
        SAFE_INTEGER_MAX,
        -SAFE_INTEGER_MAX,
    ],
)
def test_safe_integers_print_as_bare_digits_and_round_trip(n: int) -> None:
    printed = print_unformatted(create_number(n))
    assert printed == str(n)

    reparsed = parse(printed)
    assert reparsed.kind is ValueKind.NUMBER
    assert reparsed.number_int == n
    assert reparsed.int_exact
    assert print_unformatted(reparsed) == str(n)


def test_container_round_trip_preserves_shape_and_order() -> None:
    root = create_object()
    add_string_member(root, "url", "https://example.com/a?b=c")
    add_number_member(root, "scale", 2.5)
    add_number_member(root, "width", 1280)
    add_member(root, "full_page", create_bool(True))
    add_member(root, "store", create_bool(False))
    items = add_member(root, "items", create_array())
    for n in (3, 1, 2):
        append_element(items, create_number(n))
    nested = append_element(items, create_object())
    add_string_member(nested, "z", "last")
    add_string_member(nested, "a", "first")
    add_member(root, "empty", create_object())

    reparsed = parse(print_bytes(root))

    assert _shape(reparsed) == _shape(root)
    assert print_unformatted(reparsed) == print_unformatted(root)


def test_strings_needing_escapes_round_trip() -> None:
    text = 'quote " backslash \\ newline \n tab \t bell \x07 slash /'
    assert parse(print_unformatted(create_string(text))).string_value == text


def test_floats_round_trip_exactly() -> None:
    for num in (0.1, -3.14159, 1e-300, 6.02214076e23, 123456.789):
        assert parse(print_unformatted(create_number(num))).number_float == num

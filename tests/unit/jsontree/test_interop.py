from __future__ import annotations

import sys
from collections import OrderedDict

import pytest

from pxshot_json.domain.enums.value_kind import ValueKind
from pxshot_json.domain.exceptions.json_tree import JsonInvalidArgument
from pxshot_json.jsontree.interop import from_python, to_python
from pxshot_json.jsontree.parser import parse
from pxshot_json.jsontree.printer import print_unformatted
from pxshot_json.jsontree.value import append_element, create_array, create_number


def test_from_python_builds_typed_tree() -> None:
    tree = from_python({"url": "https://x", "width": 1280, "scale": 1.5, "store": False, "x": None})

    assert tree.kind is ValueKind.OBJECT
    assert [child.key for child in tree] == ["url", "width", "scale", "store", "x"]
    assert print_unformatted(tree) == (
        '{"url":"https://x","width":1280,"scale":1.5,"store":false,"x":null}'
    )


def test_from_python_skip_none_drops_unset_members() -> None:
    tree = from_python({"a": 1, "b": None, "c": {"d": None, "e": [None]}}, skip_none=True)
    assert print_unformatted(tree) == '{"a":1,"c":{"e":[null]}}'


def test_from_python_keeps_mapping_order() -> None:
    tree = from_python(OrderedDict([("z", 1), ("a", 2)]))
    assert print_unformatted(tree) == '{"z":1,"a":2}'


def test_from_python_accepts_tuples_as_arrays() -> None:
    assert print_unformatted(from_python((1, "two"))) == '[1,"two"]'


@pytest.mark.parametrize("bad", [object(), b"bytes", {1: "non-str key"}, {1.5}])
def test_from_python_rejects_unsupported_data(bad: object) -> None:
    with pytest.raises(JsonInvalidArgument):
        from_python(bad)


def test_to_python_converts_numbers_by_exactness() -> None:
    data = to_python(parse('{"i": 3, "f": 2.5, "big": 1e300, "t": true, "n": null}'))
    assert data == {"i": 3, "f": 2.5, "big": 1e300, "t": True, "n": None}
    assert isinstance(data["i"], int)
    assert isinstance(data["f"], float)


def test_to_python_first_duplicate_wins() -> None:
    assert to_python(parse('{"k": "first", "k": "second"}')) == {"k": "first"}


def test_to_python_nested() -> None:
    assert to_python(parse('[{"a": []}, "s", -1]')) == [{"a": []}, "s", -1]


def test_from_python_rejects_self_referencing_data() -> None:
    data: list[object] = [1]
    data.append(data)
    with pytest.raises(JsonInvalidArgument):
        from_python(data)


def test_to_python_handles_trees_deeper_than_the_recursion_limit() -> None:
    depth = sys.getrecursionlimit() * 3
    root = create_array()
    append_element(root, create_number(7))
    for _ in range(depth - 1):
        outer = create_array()
        append_element(outer, root)
        root = outer

    data = to_python(root)
    for _ in range(depth - 1):
        assert isinstance(data, list) and len(data) == 1
        data = data[0]
    assert data == [7]


def test_to_python_keeps_member_and_element_order() -> None:
    data = to_python(parse('{"z": [3, {"b": 1, "a": 2}], "a": true}'))
    assert list(data) == ["z", "a"]
    assert list(data["z"][1]) == ["b", "a"]

import pytest

from automatonsets.setlist import (
    DuplicateElementError,
    ElementSet,
    format_element,
    format_list,
    parse_list,
    parse_set,
)


def test_parse_set_keeps_order():
    s = parse_set("q0,q1")
    assert list(s) == ["q0", "q1"]


def test_parse_set_with_braces():
    assert list(parse_set("{0,1}")) == ["0", "1"]


def test_parse_set_empty():
    assert len(parse_set("")) == 0


def test_parse_set_trailing_comma_dropped():
    assert list(parse_set("q0,")) == ["q0"]


def test_parse_set_duplicate_raises():
    with pytest.raises(DuplicateElementError):
        parse_set("q0,q0")


def test_set_str_format():
    assert str(parse_set("q0,q1")) == "{q0 q1}"
    assert str(ElementSet()) == "{}"


def test_parse_list_and_format():
    items = parse_list("q0,0,q0")
    assert items == ("q0", "0", "q0")
    assert format_list(items) == "[q0 0 q0 ]"


def test_parse_list_with_brackets():
    assert parse_list("[q1,1,q1]") == ("q1", "1", "q1")


def test_set_of_transitions_str():
    s = ElementSet([("q0", "0", "q0"), ("q0", "1", "q1")])
    assert str(s) == "{[q0 0 q0 ][q0 1 q1 ]}"


def test_lists_become_tuples_in_set():
    s = ElementSet([["a", "b"]])
    assert ("a", "b") in s
    assert ["a", "b"] in s


def test_add_duplicate_raises():
    s = ElementSet(["a"])
    with pytest.raises(DuplicateElementError):
        s.add("a")
    assert len(s) == 1


def test_union():
    a = parse_set("q0,q1")
    b = parse_set("q1,q2")
    u = a.union(b)
    assert list(u) == ["q0", "q1", "q2"]
    assert a.issubset(u) and b.issubset(u)


def test_union_with_empty():
    a = parse_set("x,y")
    assert a.union(ElementSet()) == a
    assert ElementSet().union(a) == a


def test_intersection_and_difference():
    a = parse_set("q0,q1,q2")
    b = parse_set("q2,q1,q5")
    assert list(a.intersection(b)) == ["q1", "q2"]
    assert list(a.difference(b)) == ["q0"]


def test_difference_and_intersection_partition():
    a = parse_set("a,b,c,d")
    b = parse_set("b,d,e")
    inter = a.intersection(b)
    diff = a.difference(b)
    assert len(inter) + len(diff) == len(a)
    assert inter.union(diff) == a


def test_issubset():
    assert ElementSet().issubset(ElementSet())
    assert ElementSet().issubset(parse_set("a"))
    assert parse_set("a").issubset(parse_set("b,a"))
    assert not parse_set("a,b").issubset(parse_set("a"))
    assert not parse_set("c").issubset(parse_set("a,b"))


def test_format_element():
    assert format_element("q0") == "q0"
    assert format_element(("q0", "1", "q1")) == "[q0 1 q1 ]"
    assert format_element(parse_set("0,1")) == "{0 1}"


def test_format_list_with_nested_set():
    assert format_list(["q0", parse_set("q1")]) == "[q0 {q1}]"


def test_unsupported_element_raises():
    with pytest.raises(TypeError):
        ElementSet([3])
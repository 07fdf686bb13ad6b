import datetime
import re

import pytest

from kstoolkit.utils import (
    clear_empty_attrs,
    each,
    extend,
    is_array,
    is_date,
    is_empty_object,
    is_function,
    is_number,
    is_object,
    is_plain_object,
    is_regexp,
    is_string,
    remove_item,
)


# ── 타입 판별 ──


def test_type_checks():
    assert is_string("a") and not is_string(1)
    assert is_function(len) and is_function(lambda: None) and not is_function("f")
    assert is_array([1]) and is_array((1,)) and not is_array("abc")
    assert is_number(1) and is_number(1.5) and not is_number(True) and not is_number("1")
    assert is_regexp(re.compile("a")) and not is_regexp("a")
    assert is_object({}) and not is_object([])
    assert is_date(datetime.date.today()) and is_date(datetime.datetime.now())
    assert not is_date("2024-01-01")


def test_is_plain_object_excludes_subclasses():
    class Sub(dict):
        pass

    assert is_plain_object({"a": 1})
    assert not is_plain_object(Sub())
    assert not is_plain_object([])


@pytest.mark.parametrize("value", [None, {}, [], "", (), set()])
def test_is_empty_object_true(value):
    assert is_empty_object(value)


def test_is_empty_object_false_and_plain_instances():
    class Holder:
        pass

    holder = Holder()
    assert is_empty_object(holder)

    holder.value = 1
    assert not is_empty_object(holder)
    assert not is_empty_object({"key": 1})
    assert not is_empty_object([1])
    assert not is_empty_object("1")


# ── each ──


def test_each_over_list_passes_value_index_and_source():
    seen = []
    data = ["a", "b"]

    assert each(data, lambda v, i, src: seen.append((v, i, src is data))) is None
    assert seen == [("a", 0, True), ("b", 1, True)]


def test_each_over_dict():
    seen = []
    each({"key1": 1, "key2": 2}, lambda v, k, _: seen.append(f"{k}:{v}"))

    assert seen == ["key1:1", "key2:2"]


def test_each_stops_on_false():
    seen = []

    def visit(value, index, _):
        seen.append(value)
        return False if value == 2 else None

    assert each([1, 2, 3], visit) is False
    assert seen == [1, 2]


def test_each_none_is_noop():
    assert each(None, lambda *a: pytest.fail("호출되면 안 됨")) is None


# ── remove_item / clear_empty_attrs ──


def test_remove_item_in_place():
    arr = [4, 5, 7, 1, 3, 4, 6]
    result = remove_item(arr, 4)

    assert result is None
    assert arr == [5, 7, 1, 3, 6]


def test_remove_item_identity():
    marker = object()
    arr = [marker, object(), marker]
    remove_item(arr, marker)

    assert len(arr) == 1 and arr[0] is not marker


def test_clear_empty_attrs():
    obj = {"a": "", "b": 0, "c": None, "d": "x"}

    assert clear_empty_attrs(obj) is obj
    assert obj == {"b": 0, "c": None, "d": "x"}


# ── extend ──


def test_extend_shallow():
    target = {"a": 1, "nested": {"x": 1}}
    result = extend(target, {"b": 2}, {"nested": {"y": 2}})

    assert result is target
    assert result == {"a": 1, "b": 2, "nested": {"y": 2}}


def test_extend_deep_merges_and_clones():
    source = {"nested": {"y": 2, "list": [1, 2]}}
    result = extend({"nested": {"x": 1, "list": [9, 9, 9]}}, source, deep=True)

    assert result == {"nested": {"x": 1, "y": 2, "list": [1, 2, 9]}}
    assert result["nested"] is not source["nested"]


def test_extend_deep_into_empty_target_copies():
    source = {"a": {"b": [1, {"c": 3}]}}
    result = extend({}, source, deep=True)

    assert result == source
    assert result["a"] is not source["a"]
    assert result["a"]["b"][1] is not source["a"]["b"][1]


def test_extend_skips_none_values_and_sources():
    result = extend({"a": 1}, None, {"a": None, "b": 2})

    assert result == {"a": 1, "b": 2}


def test_extend_non_container_target_becomes_dict():
    assert extend(None, {"a": 1}) == {"a": 1}
    assert extend("text", {"a": 1}) == {"a": 1}


def test_extend_skips_self_reference():
    target = {"a": 1}
    extend(target, {"self": target})

    assert "self" not in target


def test_extend_requires_arguments():
    with pytest.raises(TypeError):
        extend()


def test_extend_list_target_with_list_source():
    assert extend([1, 2, 3], [9]) == [9, 2, 3]


def test_extend_list_target_rejects_mapping_keys():
    with pytest.raises(TypeError, match="정수 인덱스"):
        extend([], {"a": 1})

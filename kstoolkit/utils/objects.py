"""
컬렉션/객체 헬퍼 — 순회, 요소 제거, 빈 속성 정리, 병합(extend)
"""

from collections.abc import Mapping
from typing import Any, Callable

from kstoolkit.utils.typecheck import is_plain_object


def each(obj, iterator: Callable[[Any, Any, Any], Any]):
    """
    dict는 iterator(value, key, obj), 그 외 iterable은 iterator(value, index, obj)로 순회한다.
    iterator가 False를 반환하면 즉시 중단하고 False를 반환한다.
    """
    if obj is None:
        return None

    items = obj.items() if isinstance(obj, Mapping) else enumerate(obj)
    for key, value in items:
        if iterator(value, key, obj) is False:
            return False
    return None


def remove_item(array: list, item):
    """array에서 item과 같은 요소를 모두 제거한다 (제자리 수정)."""
    array[:] = [x for x in array if not (x is item or x == item)]


def clear_empty_attrs(obj: dict) -> dict:
    """값이 빈 문자열인 키를 삭제하고 같은 dict를 반환한다."""
    for key in [k for k, v in obj.items() if v == ""]:
        del obj[key]
    return obj


def _items(obj) -> list[tuple[Any, Any]]:
    if isinstance(obj, Mapping):
        return list(obj.items())
    if isinstance(obj, (list, tuple)):
        return list(enumerate(obj))
    return list(getattr(obj, "__dict__", {}).items())


def _check_index(target, key):
    if isinstance(target, list) and not isinstance(key, int):
        raise TypeError(f"list target에는 정수 인덱스만 병합할 수 있습니다: {key!r}")


def _get(target, key):
    _check_index(target, key)
    if isinstance(target, list):
        return target[key] if key < len(target) else None
    return target.get(key)


def _set(target, key, value):
    _check_index(target, key)
    if isinstance(target, list):
        if key < len(target):
            target[key] = value
        else:
            # 비어 있는 인덱스는 None으로 채운다
            target.extend([None] * (key - len(target)))
            target.append(value)
    else:
        target[key] = value


def extend(*objects, deep: bool = False):
    """
    뒤쪽 객체들의 키를 첫 번째 객체(target)에 병합하고 target을 반환한다.

    - target이 None이거나 dict/list가 아니면 새 dict를 target으로 사용
    - target이 list면 source의 키는 정수 인덱스여야 한다 (아니면 TypeError)
    - 값이 None인 키는 복사하지 않는다
    - deep=True면 순수 dict와 list를 재귀 병합한다 (원본 객체를 그대로 옮기지 않고 복제)

        extend({"a": 1}, {"b": 2})                                     # {"a": 1, "b": 2}
        extend({"a": {"x": 1}}, {"a": {"y": 2}}, deep=True)            # {"a": {"x": 1, "y": 2}}
    """
    if not objects:
        raise TypeError("extend()에는 최소 하나의 인자가 필요합니다")

    target = objects[0]
    if not isinstance(target, (dict, list)):
        target = {}

    for source in objects[1:]:
        if source is None:
            continue

        for name, copy in _items(source):
            # 자기 자신을 넣으면 무한 루프
            if copy is target:
                continue

            if deep and (is_plain_object(copy) or isinstance(copy, list)):
                src = _get(target, name)
                if isinstance(copy, list):
                    clone = src if isinstance(src, list) else []
                else:
                    clone = src if is_plain_object(src) else {}
                _set(target, name, extend(clone, copy, deep=True))
            elif copy is not None:
                _set(target, name, copy)

    return target

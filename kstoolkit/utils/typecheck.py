"""
타입 판별 헬퍼
"""

import datetime
import re


def is_string(obj) -> bool:
    return isinstance(obj, str)


def is_function(obj) -> bool:
    return callable(obj)


def is_array(obj) -> bool:
    return isinstance(obj, (list, tuple))


def is_number(obj) -> bool:
    # bool은 int의 서브클래스지만 숫자로 취급하지 않는다
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def is_regexp(obj) -> bool:
    return isinstance(obj, re.Pattern)


def is_object(obj) -> bool:
    return isinstance(obj, dict)


def is_date(obj) -> bool:
    return isinstance(obj, datetime.date)


def is_plain_object(obj) -> bool:
    """{} 또는 dict()로 만든 순수 dict인지 (서브클래스 제외)"""
    return type(obj) is dict


def is_empty_object(obj) -> bool:
    """
    비어 있는지 판별한다.
    - None → True
    - 문자열/리스트/튜플/dict/set → 길이 0이면 True
    - 그 외 객체 → 인스턴스 속성이 하나도 없으면 True
    """
    if obj is None:
        return True
    if isinstance(obj, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(obj) == 0
    return not getattr(obj, "__dict__", None)

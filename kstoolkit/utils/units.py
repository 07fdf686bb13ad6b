"""
단위/색상 변환 헬퍼
"""

import math
import re

# 1cm = 25px, 1pt = 96/72px
_CM_TO_PX = 25
_PT_TO_PX = 96 / 72

_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def fix_color(name: str, value: str) -> str:
    """
    속성명에 color가 들어가고 값이 rgb(...)면 #RRGGBB로 변환한다.
    rgba처럼 성분이 4개 이상이면 빈 문자열.

        fix_color("color", "rgb(255,255,255)")  # "#FFFFFF"
    """
    if not (re.search("color", name, re.IGNORECASE) and re.search("rgba?", value)):
        return value

    parts = value.split(",")
    if len(parts) > 3:
        return ""

    result = "#"
    for part in parts:
        digits = re.sub(r"[^\d]", "", part)
        result += format(int(digits or 0), "02x")
    return result.upper()


def _format_number(num: float) -> str:
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    return str(num)


def _leading_number(text: str) -> float | None:
    """앞쪽의 숫자만 읽는다 ("1.2.3" → 1.2). 숫자가 없으면 None."""
    m = _NUMBER_RE.match(text)
    return float(m.group(0)) if m else None


def trans_unit_to_px(value: str) -> str:
    """
    cm/pt 단위 값을 px로 변환한다. 그 외 값은 그대로 반환.

        trans_unit_to_px("20cm")  # "500px"
        trans_unit_to_px("20pt")  # "27px"
        trans_unit_to_px("a.pt")  # "NaN"
    """
    if not re.search("(pt|cm)", value):
        return value

    m = re.search(r"([\d.]+)(\w+)", value)
    if not m:
        return value
    number, unit = m.group(1), m.group(2)

    if unit not in ("cm", "pt"):
        return f"{number}px"

    # "." 처럼 숫자가 없으면 변환 불가
    parsed = _leading_number(number)
    if parsed is None:
        return "NaN"

    if unit == "cm":
        num = parsed * _CM_TO_PX
    else:
        # 반올림은 .5에서 올림
        num = math.floor(parsed * _PT_TO_PX + 0.5)

    text = _format_number(num)
    return f"{text}px" if num else text

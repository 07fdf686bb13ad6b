"""
범용 헬퍼 패키지
- 타입 판별, 객체 병합/순회, HTML 이스케이프, 단위 변환
"""

from kstoolkit.utils.typecheck import (
    is_array,
    is_date,
    is_empty_object,
    is_function,
    is_number,
    is_object,
    is_plain_object,
    is_regexp,
    is_string,
)
from kstoolkit.utils.objects import clear_empty_attrs, each, extend, remove_item
from kstoolkit.utils.strings import (
    css_style_to_dom_style,
    format_url,
    html,
    trim,
    unhtml,
    unhtml_for_url,
)
from kstoolkit.utils.units import fix_color, trans_unit_to_px

__all__ = [
    "is_array",
    "is_date",
    "is_empty_object",
    "is_function",
    "is_number",
    "is_object",
    "is_plain_object",
    "is_regexp",
    "is_string",
    "clear_empty_attrs",
    "each",
    "extend",
    "remove_item",
    "css_style_to_dom_style",
    "format_url",
    "html",
    "trim",
    "unhtml",
    "unhtml_for_url",
    "fix_color",
    "trans_unit_to_px",
]

"""
문자열 헬퍼 — 공백 제거, HTML 이스케이프/복원, CSS 이름 변환, URL 정리
"""

import functools
import re

_TRIM_RE = re.compile(r"^[ \t\n\r]+|[ \t\n\r]+$")

# 이미 이스케이프된 엔티티(&amp; &#39; &#123; 등)는 그대로 둔다
_UNHTML_RE = re.compile(r"[&<\">'](?:(amp|lt|quot|gt|#39|nbsp|#\d+);)?")
_UNHTML_URL_RE = re.compile(r"[<\">']")
_HTML_RE = re.compile(r"&((g|l|quo)t|amp|#39|nbsp);")

_ESCAPE_MAP = {
    "<": "&lt;",
    "&": "&amp;",
    '"': "&quot;",
    ">": "&gt;",
    "'": "&#39;",
}

_UNESCAPE_MAP = {
    "&lt;": "<",
    "&amp;": "&",
    "&quot;": '"',
    "&gt;": ">",
    "&#39;": "'",
    "&nbsp;": " ",
}


def trim(s: str) -> str:
    """앞뒤의 공백/탭/개행 제거"""
    return _TRIM_RE.sub("", s)


def _escape(match: re.Match) -> str:
    text = match.group(0)
    if match.re.groups and match.group(1):
        return text
    return _ESCAPE_MAP.get(text, text)


def unhtml(s: str | None, pattern: str | re.Pattern | None = None) -> str:
    """
    & < " > ' 다섯 문자를 HTML 엔티티로 이스케이프한다.
    빈 값이면 빈 문자열을 반환한다.

        unhtml("<body>&</body>")  # "&lt;body&gt;&amp;&lt;/body&gt;"
    """
    if not s:
        return ""
    regex = re.compile(pattern) if pattern is not None else _UNHTML_RE
    return regex.sub(_escape, s)


def unhtml_for_url(s: str | None, pattern: str | re.Pattern | None = None) -> str:
    """URL용 — ' " < > 네 문자만 이스케이프한다."""
    if not s:
        return ""
    regex = re.compile(pattern) if pattern is not None else _UNHTML_URL_RE
    return regex.sub(lambda m: _ESCAPE_MAP.get(m.group(0), m.group(0)), s)


def html(s: str | None) -> str:
    """unhtml의 역변환 (&nbsp;는 공백으로)"""
    if not s:
        return ""
    return _HTML_RE.sub(lambda m: _UNESCAPE_MAP[m.group(0)], s)


@functools.lru_cache(maxsize=None)
def css_style_to_dom_style(css_name: str) -> str:
    """border-top → borderTop"""
    return re.sub(r"-.", lambda m: m.group(0)[1].upper(), css_name.lower())


def format_url(url: str) -> str:
    u = url.replace("&&", "&")
    u = u.replace("?&", "?")
    u = re.sub(r"&\Z", "", u)
    u = u.replace("&#", "#")
    u = re.sub(r"&+", "&", u)
    return u

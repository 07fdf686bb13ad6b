"""
이벤트 버스 상태/조회용 스키마
"""

import enum

from pydantic import BaseModel


class NamespaceState(str, enum.Enum):
    BUFFERING = "BUFFERING"  # 첫 listen 이전 — trigger는 오프라인 스택에 쌓인다
    LIVE = "LIVE"            # 첫 listen 이후 — trigger는 즉시 전달된다


class NamespaceSnapshot(BaseModel):
    name: str
    state: NamespaceState
    pending_events: int = 0  # 오프라인 스택에 쌓인 이벤트 수 (LIVE면 0)
    listener_counts: dict[str, int] = {}

"""
이벤트 시스템 패키지
- 네임스페이스별 동기 pub/sub 이벤트 버스
- 오프라인 이벤트 (먼저 발행, 나중에 구독) 지원
"""

from kstoolkit.events.event_bus import (
    MODE_LAST,
    Namespace,
    NamespaceRegistry,
    OfflineEvent,
    event,
)

__all__ = ["MODE_LAST", "Namespace", "NamespaceRegistry", "OfflineEvent", "event"]

"""
kstoolkit — 오프라인 이벤트를 지원하는 네임스페이스 이벤트 버스 + 범용 헬퍼
"""

from kstoolkit.events import MODE_LAST, Namespace, NamespaceRegistry, OfflineEvent, event

__version__ = "1.0.0"

__all__ = ["MODE_LAST", "Namespace", "NamespaceRegistry", "OfflineEvent", "event"]

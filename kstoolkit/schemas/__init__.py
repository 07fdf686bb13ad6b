"""
Pydantic 스키마 패키지
"""

from kstoolkit.schemas.events import NamespaceSnapshot, NamespaceState

__all__ = ["NamespaceSnapshot", "NamespaceState"]

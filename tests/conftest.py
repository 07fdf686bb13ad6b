"""
테스트 공용 fixture
- 테스트마다 새 NamespaceRegistry를 만들어 모듈 전역 레지스트리와 격리한다.
"""

import pytest

from kstoolkit.events import NamespaceRegistry


@pytest.fixture
def registry() -> NamespaceRegistry:
    return NamespaceRegistry()


@pytest.fixture
def calls() -> list:
    """핸들러 호출 기록용 리스트"""
    return []


@pytest.fixture
def recorder(calls):
    """호출 인자를 calls에 기록하는 핸들러 팩토리"""

    def make(tag, ret=None):
        def handler(*args, **kwargs):
            calls.append((tag, args, kwargs))
            return ret

        return handler

    return make

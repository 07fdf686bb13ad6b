"""
네임스페이스 이벤트 버스 — 오프라인 이벤트를 지원하는 동기 pub/sub
- 먼저 발행하고 나중에 구독해도 된다 (오프라인 이벤트)
- 네임스페이스별로 리스너 테이블과 오프라인 스택이 분리된다
- 단일 스레드 동기 실행 — 락 없음, 멀티스레드 환경에서는 호출자가 직렬화해야 한다

사용법:
    registry = NamespaceRegistry()
    registry.trigger("click", 1)
    registry.listen("click", lambda a: print(a))   # 출력: 1

    registry.namespace("namespace1").listen("click", on_click)
    registry.namespace("namespace1").trigger("click", 2)
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from kstoolkit.config import settings
from kstoolkit.schemas.events import NamespaceSnapshot, NamespaceState

logger = logging.getLogger(__name__)

# 핸들러 타입: 임의 인자를 받는 동기 callable
Handler = Callable[..., Any]

# listen(mode=...)에 넘기면 오프라인 이벤트를 재생하지 않고 버린다
MODE_LAST = "last"

# 핸들러 예외 처리 정책
ERROR_POLICIES = ("raise", "log")


@dataclass(frozen=True)
class OfflineEvent:
    """리스너 등록 전에 발생한 trigger 호출 기록"""
    event_name: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


def _check_policy(error_policy: str):
    if error_policy not in ERROR_POLICIES:
        raise ValueError(
            f"error_policy는 {', '.join(ERROR_POLICIES)} 중 하나여야 합니다: {error_policy!r}"
        )


def _same_handler(registered: Handler, handler: Handler) -> bool:
    """같은 객체인지 비교한다. bound method는 접근할 때마다 새로 만들어지므로 self와 함수로 비교."""
    if registered is handler:
        return True
    return (
        inspect.ismethod(registered)
        and inspect.ismethod(handler)
        and registered.__self__ is handler.__self__
        and registered.__func__ is handler.__func__
    )


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class Namespace:
    """
    독립된 이벤트 버킷 — 리스너 테이블 + 오프라인 스택.

    상태 전이: BUFFERING(초기) → LIVE(종료 상태).
    첫 listen 호출에서 오프라인 스택을 재생(mode="last"면 폐기)하고 LIVE로 전환한다.
    한번 LIVE가 되면 다시 BUFFERING으로 돌아가는 방법은 없다.
    """

    def __init__(self, name: str, error_policy: str = "raise"):
        _check_policy(error_policy)
        self.name = name
        self._error_policy = error_policy

        # 이벤트명별 핸들러 목록 (등록 순서 = 전달 순서, 중복 허용)
        self._handlers: dict[str, list[Handler]] = {}

        # 오프라인 스택 — 첫 listen 이후 None으로 고정
        self._offline_stack: list[OfflineEvent] | None = []

    def __repr__(self) -> str:
        return f"<Namespace {self.name!r} {self.state.value}>"

    @property
    def state(self) -> NamespaceState:
        if self._offline_stack is None:
            return NamespaceState.LIVE
        return NamespaceState.BUFFERING

    @property
    def is_live(self) -> bool:
        return self._offline_stack is None

    @property
    def pending_count(self) -> int:
        """재생 대기 중인 오프라인 이벤트 수"""
        return len(self._offline_stack) if self._offline_stack is not None else 0

    @property
    def error_policy(self) -> str:
        return self._error_policy

    def listen(self, event_name: str, handler: Handler, mode: str | None = None):
        """
        이벤트명에 핸들러를 등록한다.

        첫 번째 listen이면 버퍼링을 종료한다:
          - mode != "last": 쌓여 있던 오프라인 이벤트를 FIFO 순서로 즉시 재생
          - mode == "last": 오프라인 이벤트를 버림
        """
        if not callable(handler):
            raise TypeError(f"핸들러는 callable이어야 합니다: {handler!r}")

        self._handlers.setdefault(event_name, []).append(handler)
        logger.debug(f"[{self.name}] 구독 등록: {event_name} → {_handler_name(handler)}")

        if self._offline_stack is None:
            return

        # 재생 전에 LIVE로 전환 — 재생 중 발생한 trigger는 즉시 전달된다
        pending = self._offline_stack
        self._offline_stack = None

        if mode == MODE_LAST:
            logger.info(f"[{self.name}] LIVE 전환 — 오프라인 이벤트 {len(pending)}개 폐기 (mode=last)")
            return

        logger.info(f"[{self.name}] LIVE 전환 — 오프라인 이벤트 {len(pending)}개 재생")
        for offline_event in pending:
            self._deliver(offline_event.event_name, offline_event.args, offline_event.kwargs)

    def one(self, event_name: str, handler: Handler, mode: str | None = None):
        """해당 이벤트명의 기존 핸들러를 모두 지우고 handler만 등록한다."""
        self.remove(event_name)
        self.listen(event_name, handler, mode)

    def remove(self, event_name: str, handler: Handler | None = None):
        """
        handler가 있으면 해당 핸들러만, 없으면 이벤트명의 핸들러 전체를 제거한다.
        등록된 적 없는 이벤트명이면 아무것도 하지 않는다.
        """
        handlers = self._handlers.get(event_name)
        if handlers is None:
            return

        if handler is None:
            handlers.clear()
            logger.debug(f"[{self.name}] 구독 전체 해제: {event_name}")
            return

        handlers[:] = [h for h in handlers if not _same_handler(h, handler)]
        logger.debug(f"[{self.name}] 구독 해제: {event_name} → {_handler_name(handler)}")

    def trigger(self, event_name: str, /, *args, **kwargs) -> Any:
        """
        이벤트를 발행한다.

        BUFFERING 상태면 오프라인 스택에 기록만 하고 None을 반환한다.
        LIVE 상태면 등록된 핸들러를 순서대로 호출하고 마지막 핸들러의 반환값을 돌려준다.
        """
        if self._offline_stack is not None:
            self._offline_stack.append(OfflineEvent(event_name, args, kwargs))
            logger.debug(
                f"[{self.name}] 오프라인 이벤트 저장: {event_name} "
                f"(대기 {len(self._offline_stack)}개)"
            )
            return None

        return self._deliver(event_name, args, kwargs)

    def listeners(self, event_name: str) -> list[Handler]:
        """이벤트명에 등록된 핸들러 목록 (복사본)"""
        return list(self._handlers.get(event_name, []))

    def snapshot(self) -> NamespaceSnapshot:
        return NamespaceSnapshot(
            name=self.name,
            state=self.state,
            pending_events=self.pending_count,
            listener_counts={k: len(v) for k, v in self._handlers.items()},
        )

    def _deliver(self, event_name: str, args: tuple, kwargs: dict) -> Any:
        """핸들러들에게 이벤트를 전달한다. False 반환으로 중단되지 않는다."""
        handlers = self._handlers.get(event_name)
        if not handlers:
            return None

        ret = None
        # 전달 도중 remove/listen이 일어나도 이번 전달 대상은 고정
        for handler in list(handlers):
            if self._error_policy == "raise":
                ret = handler(*args, **kwargs)
                continue
            try:
                ret = handler(*args, **kwargs)
            except Exception as e:
                logger.exception(f"[{self.name}] 핸들러 에러 ({event_name}, {_handler_name(handler)}): {e}")
                ret = None
        return ret


class NamespaceRegistry:
    """
    네임스페이스 레지스트리 — 이름별 Namespace를 지연 생성하고 캐시한다.

    listen / one / remove / trigger는 기본 네임스페이스로 위임하는 편의 메서드다.
    """

    def __init__(self, default_namespace: str | None = None, error_policy: str | None = None):
        self._default_namespace = default_namespace or settings.DEFAULT_NAMESPACE
        self._error_policy = error_policy or settings.HANDLER_ERROR_POLICY
        _check_policy(self._error_policy)

        self._namespaces: dict[str, Namespace] = {}

    @property
    def default_namespace(self) -> str:
        return self._default_namespace

    def namespace(self, name: str | None = None) -> Namespace:
        """name(없거나 빈 문자열이면 기본 네임스페이스)의 Namespace를 반환한다."""
        name = name or self._default_namespace
        ns = self._namespaces.get(name)
        if ns is None:
            ns = Namespace(name, self._error_policy)
            self._namespaces[name] = ns
            logger.debug(f"네임스페이스 생성: {name}")
        return ns

    def names(self) -> list[str]:
        """생성된 네임스페이스 이름 목록 (생성 순서)"""
        return list(self._namespaces)

    def __contains__(self, name: str) -> bool:
        return name in self._namespaces

    def snapshot(self) -> list[NamespaceSnapshot]:
        return [ns.snapshot() for ns in self._namespaces.values()]

    # ── 기본 네임스페이스 위임 ──

    def listen(self, event_name: str, handler: Handler, mode: str | None = None):
        self.namespace().listen(event_name, handler, mode)

    def one(self, event_name: str, handler: Handler, mode: str | None = None):
        self.namespace().one(event_name, handler, mode)

    def remove(self, event_name: str, handler: Handler | None = None):
        self.namespace().remove(event_name, handler)

    def trigger(self, event_name: str, /, *args, **kwargs) -> Any:
        return self.namespace().trigger(event_name, *args, **kwargs)


# 프로세스 공용 레지스트리 (테스트에서는 NamespaceRegistry()를 직접 생성해서 사용)
event = NamespaceRegistry()

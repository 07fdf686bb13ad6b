"""
로깅 설정 헬퍼
- 라이브러리는 import 시점에 로깅을 설정하지 않는다.
- 애플리케이션 엔트리포인트에서 configure_logging()을 한 번 호출한다.
"""

import logging

from kstoolkit.config import settings


def configure_logging(level: str | int | None = None):
    """settings의 포맷으로 루트 로거를 설정한다."""
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
    )
    logging.getLogger("kstoolkit").setLevel(level)

"""
툴킷 설정
- 기본 네임스페이스, 핸들러 에러 정책, 로깅 관련 설정을 관리한다.
- 환경변수 또는 .env 파일로 덮어쓸 수 있다 (예: KS_ 접두어 없이 DEFAULT_NAMESPACE=app).
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 네임스페이스를 지정하지 않았을 때 사용하는 이름
    DEFAULT_NAMESPACE: str = "default"

    # 핸들러 예외 처리 정책
    #   raise: 첫 번째 예외에서 전달 중단, 호출자에게 그대로 전파 (기본)
    #   log:   예외를 로그로 남기고 나머지 핸들러 계속 실행
    HANDLER_ERROR_POLICY: Literal["raise", "log"] = "raise"

    # 로깅
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

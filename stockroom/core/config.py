# stockroom/core/config.py

from typing import Any, Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Stockroom API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Warehouse inventory list-view API"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging")
    LOG_LEVEL: str = Field("INFO", description="Root log level (DEBUG, INFO, WARNING, ...)")

    # --- 뷰 상태 저장소 설정 ---
    VIEW_STATE_BACKEND: Literal["memory", "redis"] = Field(
        "memory", description="Backend for persisted list-view state"
    )
    REDIS_URL: str = Field("redis://localhost:6379/0", description="Redis URL used when VIEW_STATE_BACKEND=redis")
    VIEW_STATE_TTL_SECONDS: Optional[int] = Field(None, ge=1, description="Expire persisted view state after N seconds")
    VIEW_STATE_KEY_PREFIX: str = Field("stockroom:view", description="Prefix of every persisted view-state key")
    VIEW_STATE_MAX_BYTES: Optional[int] = Field(None, ge=1, description="Quota for the in-memory store (bytes)")

    # --- 목록 뷰 설정 ---
    # 'dd/mm/yyyy' 기간 필터의 하루 경계와 시간대 정보가 없는 레코드 시각을 해석할 시간대
    VIEW_TIMEZONE: str = Field("UTC", description="IANA timezone for date-range filters")
    DEFAULT_VIEW_OWNER: str = Field("anonymous", description="Owner used when no X-View-Owner header is sent")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 로그 레벨은 대문자로 정규화
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if self.DEBUG_MODE:
            self.LOG_LEVEL = "DEBUG"


settings = Settings()

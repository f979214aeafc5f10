# stockroom/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 뷰 상태 저장소 (get_view_store): lifespan 에서 app.state 에 생성한 저장소.
- 데이터 허브 (get_data_hub): 엔티티별 레코드 컬렉션.
- 뷰 소유자 (get_view_owner): 저장된 뷰 상태를 구분하는 소유자 이름.

테스트에서는 app.dependency_overrides 로 저장소와 데이터 허브를 교체합니다.
"""

from typing import Optional

from fastapi import Header, Request

from stockroom.core.collection import DataHub
from stockroom.core.config import Settings, settings
from stockroom.core.view_store import ViewStateStore


def get_settings() -> Settings:
    return settings


def get_view_store(request: Request) -> ViewStateStore:
    """lifespan 에서 생성된 뷰 상태 저장소를 반환합니다."""
    return request.app.state.view_store


def get_data_hub(request: Request) -> DataHub:
    """lifespan 에서 생성된 데이터 허브를 반환합니다."""
    return request.app.state.data_hub


def get_view_owner(x_view_owner: Optional[str] = Header(None)) -> str:
    """
    X-View-Owner 헤더로 뷰 상태의 소유자를 구분합니다.
    (인증은 이 서비스의 범위 밖이므로 헤더 값을 그대로 사용합니다.)
    """
    owner = (x_view_owner or "").strip()
    return owner or settings.DEFAULT_VIEW_OWNER

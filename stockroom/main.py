# stockroom/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 의존성 모듈 임포트
from stockroom import API_PREFIX
from stockroom.core import dependencies as deps
from stockroom.core.config import settings
from stockroom.core.view_store import ViewStateStore, ViewStateStoreError, build_view_store

# 각 도메인의 라우터와 레지스트리 임포트
from stockroom.domains.views.registry import build_data_hub
from stockroom.domains.views.routers import router as views_router
from stockroom.domains.records.routers import router as records_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

HEALTH_CHECK_KEY = f"{settings.VIEW_STATE_KEY_PREFIX}:__health__"


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(뷰 상태 저장소, 데이터 허브)를 처리합니다.
    """
    logger.info("%s 시작 중 (env=%s)...", settings.APP_NAME, settings.APP_ENV)
    # 1. 뷰 상태 저장소 생성 및 app.state에 할당
    app.state.view_store = build_view_store(settings)
    # 2. 엔티티별 레코드 컬렉션 생성
    app.state.data_hub = build_data_hub()

    yield  # 애플리케이션 실행

    logger.info("%s 종료 중...", settings.APP_NAME)
    close = getattr(app.state.view_store, "close", None)
    if close is not None:
        close()
        logger.info("뷰 상태 저장소 연결 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# -- CORS 미들웨어 설정 --
# 개발용: 모든 출처 허용. 운영에서는 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(views_router, prefix=f"{API_PREFIX}/views", tags=["List Views (목록 화면)"])
app.include_router(records_router, prefix=f"{API_PREFIX}/records", tags=["Records (레코드 관리)"])


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    Stockroom API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and view-state store.")
def health_check(store: ViewStateStore = Depends(deps.get_view_store)):
    """
    애플리케이션의 헬스 체크 엔드포인트입니다.
    뷰 상태 저장소에 값을 쓰고 다시 읽어 정상 작동 여부를 확인합니다.
    """
    try:
        store.set(HEALTH_CHECK_KEY, "ok")
        value = store.get(HEALTH_CHECK_KEY)
        store.delete(HEALTH_CHECK_KEY)
    except ViewStateStoreError as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"View-state store connection failed: {e}",
        )
    if value != "ok":
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="View-state store returned an unexpected value",
        )
    return {"status": "ok", "view_store": "connected", "backend": settings.VIEW_STATE_BACKEND}


if __name__ == "__main__":
    import uvicorn
    # reload=True는 코드 변경 시 서버를 자동으로 재시작합니다. 운영에서는 사용하지 마세요.
    uvicorn.run("stockroom.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG_MODE, log_level=settings.LOG_LEVEL.lower())

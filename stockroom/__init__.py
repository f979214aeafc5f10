# stockroom/__init__.py

"""
Stockroom FastAPI 애플리케이션의 메인 패키지입니다.

창고/재고 관리 화면(제품, 공급업체, 요청, 발주, 재고 조정, 감사 로그)의
목록 뷰를 서버에서 계산합니다. 검색/필터/정렬/페이지 상태는 화면마다
키-값 저장소에 보존되어 재접속 후에도 그대로 복원됩니다.

- core: 설정, 의존성, 목록 뷰 컨트롤러, 뷰 상태 저장소, 날짜/페이지 계산.
- domains: 화면(엔티티)별 스키마와 화면 설정, 그리고 API 라우터.
"""

APP_NAME = "Stockroom API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Warehouse inventory list-view backend."
__license__ = "MIT"
__all__ = []

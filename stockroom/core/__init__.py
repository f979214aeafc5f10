# stockroom/core/__init__.py

"""
애플리케이션 공통 구성요소 패키지입니다.

- config.py: pydantic-settings 기반 설정.
- dependencies.py: FastAPI 의존성 주입 함수.
- list_controller.py: 목록 뷰 컨트롤러 (검색/필터/정렬/페이지).
- view_state.py: 뷰 상태 모델과 JSON 직렬화.
- view_store.py: 뷰 상태 키-값 저장소 (메모리, Redis).
- collection.py: 메모리 기반 레코드 컬렉션과 변경 알림.
- pagination.py, dates.py: 페이지 계산과 날짜 해석 유틸리티.
"""

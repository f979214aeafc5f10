# tests/domains/__init__.py

"""
FastAPI 애플리케이션의 도메인별 API 테스트 스위트 패키지입니다.

- `test_views_n.py`: 'views' 도메인 (목록 화면 상태/페이지) API 테스트.
- `test_records_n.py`: 'records' 도메인 (레코드 조회/등록/삭제) API 테스트.
"""

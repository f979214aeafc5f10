# stockroom/domains/views/__init__.py

"""
'views' 도메인 패키지입니다. 목록 화면 레지스트리와 목록 뷰 API 를 포함합니다.

- `registry.py`: 화면 키 -> 화면 설정, 엔티티 -> 레코드 스키마, 조회 테이블 출처.
- `schemas.py`: 목록 뷰 API 의 요청/응답 스키마.
- `services.py`: 소유자별 컨트롤러 생성과 응답 구성.
- `routers.py`: 목록 뷰 API 엔드포인트.
"""

__title__ = "Stockroom List Views"
__all__ = []

# tests/__init__.py

"""
Stockroom API 테스트 스위트 패키지입니다.

- `core/`: 목록 뷰 컨트롤러, 뷰 상태 직렬화, 날짜/페이지 계산, 저장소, 컬렉션 단위 테스트.
- `domains/`: 'views', 'records' 도메인 API 통합 테스트 (httpx AsyncClient).
- `conftest.py`: 메모리 저장소, 데이터 허브, 레코드 팩토리, 테스트 클라이언트 픽스처.
"""

__title__ = "Stockroom API Tests"
__all__ = []

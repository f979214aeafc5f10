# stockroom/domains/inv/__init__.py

"""
'inv' 도메인 패키지입니다. 제품(Product) 스키마와 제품 목록 화면 설정을 포함합니다.

- `schemas.py`: 제품 레코드 스키마.
- `screens.py`: 제품 목록 화면의 검색/카테고리/정렬 설정.
"""

__title__ = "Stockroom Inventory Domain"
__all__ = []

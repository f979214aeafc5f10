# stockroom/domains/records/__init__.py

"""
'records' 도메인 패키지입니다. 엔티티 컬렉션의 조회/등록/삭제 API 를 포함합니다.
"""

__all__ = []

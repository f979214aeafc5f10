# stockroom/domains/req/__init__.py

"""
'req' 도메인 패키지입니다. 부서별 품목 요청(ItemRequest) 스키마와 요청 목록 화면 설정을 포함합니다.
"""

__title__ = "Stockroom Item Request Domain"
__all__ = []

# stockroom/domains/ven/__init__.py

"""
'ven' 도메인 패키지입니다. 공급업체(Vendor) 스키마와 공급업체 목록 화면 설정을 포함합니다.
"""

__title__ = "Stockroom Vendor Domain"
__all__ = []

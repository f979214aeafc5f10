# stockroom/domains/pur/__init__.py

"""
'pur' 도메인 패키지입니다. 발주(PurchaseOrder) 스키마와 발주 목록 화면 설정을 포함합니다.
"""

__title__ = "Stockroom Purchase Order Domain"
__all__ = []

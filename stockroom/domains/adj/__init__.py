# stockroom/domains/adj/__init__.py

"""
'adj' 도메인 패키지입니다. 재고 조정(StockAdjustment) 스키마와 재고 조정 목록 화면 설정을 포함합니다.
"""

__title__ = "Stockroom Stock Adjustment Domain"
__all__ = []

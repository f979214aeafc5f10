# stockroom/domains/__init__.py

"""
화면(엔티티)별 도메인 패키지입니다.

- inv: 제품 (Product)
- ven: 공급업체 (Vendor)
- req: 품목 요청 (ItemRequest)
- pur: 발주 (PurchaseOrder)
- adj: 재고 조정 (StockAdjustment)
- aud: 감사 로그 (AuditLogEntry)
- views: 목록 뷰 API (화면 레지스트리, 컨트롤러 구동)
- records: 레코드 조회/등록/삭제 API (데이터 접근 계층)
"""

# stockroom/domains/aud/__init__.py

"""
'aud' 도메인 패키지입니다. 감사 로그(AuditLogEntry) 스키마와 감사 로그 화면 설정을 포함합니다.
"""

__title__ = "Stockroom Audit Log Domain"
__all__ = []

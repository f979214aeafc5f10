# stockroom/core/view_store.py

"""
목록 뷰 상태를 보존하는 키-값 저장소 모듈입니다.

저장소는 문자열 키/값만 다루며 트랜잭션을 보장하지 않습니다.
모든 백엔드 오류는 ViewStateStoreError 로 변환되어 호출자(컨트롤러)가
한 종류의 예외만 처리하면 되도록 합니다.

- MemoryViewStateStore: 프로세스 메모리 저장소 (테스트, 단일 인스턴스 개발 환경).
- RedisViewStateStore: Redis 저장소 (여러 워커가 상태를 공유하는 운영 환경).
"""

import logging
import threading
from typing import Dict, Optional, Protocol

import redis

from stockroom.core.config import Settings

logger = logging.getLogger(__name__)


class ViewStateStoreError(Exception):
    """뷰 상태 저장소 읽기/쓰기 실패"""


class ViewStateStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


def scoped_key(prefix: str, owner: str, screen_key: str) -> str:
    """소유자(사용자/브라우저 프로필)와 화면별로 구분되는 저장 키를 만듭니다."""
    return f"{prefix}:{owner}:{screen_key}"


class MemoryViewStateStore:
    """
    dict 기반 저장소입니다. max_bytes 를 지정하면 전체 값 크기(UTF-8 바이트)가
    한도를 넘는 쓰기를 ViewStateStoreError 로 거부합니다.
    """

    def __init__(self, max_bytes: Optional[int] = None):
        self._data: Dict[str, str] = {}
        self._max_bytes = max_bytes
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            if self._max_bytes is not None:
                used = sum(len(v.encode("utf-8")) for k, v in self._data.items() if k != key)
                if used + len(value.encode("utf-8")) > self._max_bytes:
                    raise ViewStateStoreError(
                        f"Storage quota exceeded ({self._max_bytes} bytes) while writing '{key}'"
                    )
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RedisViewStateStore:
    """redis-py 클라이언트를 감싼 저장소입니다. 클라이언트는 decode_responses=True 로 생성해야 합니다."""

    def __init__(self, client: "redis.Redis", ttl_seconds: Optional[int] = None):
        self._client = client
        self._ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, url: str, ttl_seconds: Optional[int] = None) -> "RedisViewStateStore":
        return cls(redis.Redis.from_url(url, decode_responses=True), ttl_seconds=ttl_seconds)

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(key)
        except redis.RedisError as e:
            raise ViewStateStoreError(f"Redis GET failed for '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value, ex=self._ttl_seconds)
        except redis.RedisError as e:
            raise ViewStateStoreError(f"Redis SET failed for '{key}': {e}") from e

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            raise ViewStateStoreError(f"Redis DEL failed for '{key}': {e}") from e

    def close(self) -> None:
        self._client.close()


def build_view_store(settings: Settings) -> ViewStateStore:
    """설정에 따라 뷰 상태 저장소를 생성합니다."""
    if settings.VIEW_STATE_BACKEND == "redis":
        logger.info("Using Redis view-state store at %s", settings.REDIS_URL)
        return RedisViewStateStore.from_url(settings.REDIS_URL, ttl_seconds=settings.VIEW_STATE_TTL_SECONDS)
    logger.info("Using in-memory view-state store")
    return MemoryViewStateStore(max_bytes=settings.VIEW_STATE_MAX_BYTES)

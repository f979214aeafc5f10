# tests/conftest.py

from typing import AsyncGenerator, Callable, List
from datetime import datetime, timedelta, UTC

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# stockroom.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from stockroom.main import app as main_app
from stockroom.core import dependencies as deps
from stockroom.core.collection import DataHub
from stockroom.core.view_store import MemoryViewStateStore
from stockroom.domains.views.registry import build_data_hub

from stockroom.domains.inv.schemas import Product
from stockroom.domains.ven.schemas import Vendor


# --- 저장소 / 데이터 허브 픽스처 ---
@pytest.fixture(scope="function")
def view_store() -> MemoryViewStateStore:
    """테스트마다 비어 있는 메모리 뷰 상태 저장소를 제공합니다."""
    return MemoryViewStateStore()


@pytest.fixture(scope="function")
def data_hub() -> DataHub:
    """테스트마다 비어 있는 엔티티 컬렉션 허브를 제공합니다."""
    return build_data_hub()


# --- 레코드 팩토리 ---
@pytest.fixture(scope="function")
def product_factory() -> Callable[..., Product]:
    """
    테스트용 Product 를 만드는 팩토리입니다.
    필수 필드는 이름으로부터 채워지며, 나머지는 키워드로 덮어쓸 수 있습니다.
    """
    counter = {"n": 0}

    def _create(name: str, **kwargs) -> Product:
        counter["n"] += 1
        values = {
            "id": f"p{counter['n']}",
            "name": name,
            "sku": f"SKU-{counter['n']:03d}",
            "category": "General",
            "quantity": 1,
            "last_updated": datetime(2024, 1, 1, 12, 0, tzinfo=UTC) + timedelta(days=counter["n"]),
        }
        values.update(kwargs)
        return Product(**values)

    return _create


@pytest.fixture(scope="function")
def fruit_products(product_factory) -> List[Product]:
    """Apple(3), Banana(10), Cherry(3) 순서의 제품 목록"""
    return [
        product_factory("Apple", quantity=3, category="Fruit"),
        product_factory("Banana", quantity=10, category="Fruit"),
        product_factory("Cherry", quantity=3, category="Berry"),
    ]


@pytest.fixture(scope="function")
def vendors() -> List[Vendor]:
    return [
        Vendor(id="v1", name="Zeta Supplies", category="Office"),
        Vendor(id="v2", name="Acme Corp", category="Hardware"),
    ]


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(
    view_store: MemoryViewStateStore, data_hub: DataHub
) -> AsyncGenerator[AsyncClient, None]:
    """
    ASGITransport 는 lifespan 을 실행하지 않으므로, 저장소와 데이터 허브 의존성을
    테스트용 인스턴스로 오버라이드한 AsyncClient 를 생성합니다.
    """
    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[deps.get_view_store] = lambda: view_store
        main_app.dependency_overrides[deps.get_data_hub] = lambda: data_hub

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides = original_overrides

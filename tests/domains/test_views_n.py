# tests/domains/test_views_n.py

"""
'views' 도메인 (목록 화면) API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.
"""

import asyncio
import time
from datetime import datetime, timedelta, UTC

import pytest
from httpx import AsyncClient

from stockroom.core.collection import DataHub
from stockroom.core.view_store import MemoryViewStateStore
from stockroom.domains.aud.schemas import AuditLogEntry
from stockroom.domains.pur.schemas import PurchaseOrder
from stockroom.domains.req.schemas import ItemRequest

VIEWS = "/api/v1/views"


def seed(hub: DataHub, entity: str, records):
    collection = hub.collection(entity)
    for record in records:
        collection.upsert(record)


def item_names(body):
    return [item["name"] for item in body["page"]["items"]]


@pytest.fixture
def seeded_products(data_hub, fruit_products):
    seed(data_hub, "products", fruit_products)
    return fruit_products


@pytest.fixture
def audit_entries(data_hub):
    start = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)
    entries = [
        AuditLogEntry(id=f"a{i:02d}", user="Admin" if i % 2 else "clerk",
                      action=f"Updated Product {i}", timestamp=start + timedelta(hours=i))
        for i in range(20)
    ]
    seed(data_hub, "audit-log", entries)
    return entries


# =============================================================================
# 1. 화면 설정 / 조회
# =============================================================================


@pytest.mark.asyncio
async def test_read_screens(client: AsyncClient):
    print("\n--- Running test_read_screens ---")
    response = await client.get(f"{VIEWS}/screens")

    assert response.status_code == 200
    screens = {s["key"]: s for s in response.json()}
    assert set(screens) == {"products", "vendors", "requests", "purchase-orders", "adjustments", "audit-log"}
    assert screens["audit-log"]["page_size"] == 15
    assert screens["purchase-orders"]["category_field"] == "vendor_id"
    assert "vendor_name" in screens["purchase-orders"]["sortable_fields"]


@pytest.mark.asyncio
async def test_read_view_with_defaults(client: AsyncClient, seeded_products):
    print("\n--- Running test_read_view_with_defaults ---")
    response = await client.get(f"{VIEWS}/products")

    assert response.status_code == 200
    body = response.json()
    assert body["screen"] == "products"
    assert body["state"] == {
        "searchTerm": "",
        "categoryFilter": "all",
        "sortConfig": {"key": "last_updated", "direction": "desc"},
        "currentPage": 1,
        "startDate": "",
        "endDate": "",
    }
    # 기본 정렬: 최근 수정일 내림차순
    assert item_names(body) == ["Cherry", "Banana", "Apple"]
    assert body["page"]["total_items"] == 3
    assert body["page"]["total_pages"] == 1
    assert body["categories"] == ["all", "Fruit", "Berry"]
    assert body["is_filtered"] is False


@pytest.mark.asyncio
async def test_read_unknown_screen(client: AsyncClient):
    response = await client.get(f"{VIEWS}/warehouses")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_read_view_with_scanned_search(client: AsyncClient, seeded_products):
    """?search= 로 전달된 검색어(바코드 스캔)가 저장된 검색어를 대체합니다."""
    await client.put(f"{VIEWS}/products/search", json={"term": "cherry"})

    response = await client.get(f"{VIEWS}/products", params={"search": "SKU-001"})

    body = response.json()
    assert body["state"]["searchTerm"] == "SKU-001"
    assert item_names(body) == ["Apple"]


# =============================================================================
# 2. 검색 / 카테고리 / 기간
# =============================================================================


@pytest.mark.asyncio
async def test_search_is_persisted_per_owner(client: AsyncClient, seeded_products, view_store: MemoryViewStateStore):
    print("\n--- Running test_search_is_persisted_per_owner ---")
    response = await client.put(
        f"{VIEWS}/products/search", json={"term": "an"}, headers={"X-View-Owner": "alice"}
    )
    assert response.status_code == 200
    assert item_names(response.json()) == ["Banana"]
    assert response.json()["is_filtered"] is True

    again = await client.get(f"{VIEWS}/products", headers={"X-View-Owner": "alice"})
    assert again.json()["state"]["searchTerm"] == "an"

    other = await client.get(f"{VIEWS}/products", headers={"X-View-Owner": "bob"})
    assert other.json()["state"]["searchTerm"] == ""
    assert len(item_names(other.json())) == 3

    assert view_store.get("stockroom:view:alice:products") is not None


@pytest.mark.asyncio
async def test_category_filter(client: AsyncClient, seeded_products):
    response = await client.put(f"{VIEWS}/products/category", json={"value": "Berry"})

    body = response.json()
    assert body["state"]["categoryFilter"] == "Berry"
    assert item_names(body) == ["Cherry"]
    # 선택지는 필터와 무관하게 전체 레코드 기준입니다.
    assert body["categories"] == ["all", "Fruit", "Berry"]


@pytest.mark.asyncio
async def test_date_range_filter(client: AsyncClient, data_hub: DataHub):
    seed(data_hub, "requests", [
        ItemRequest(id="r1", requesting_division="IT", product_id="p1", product_name="Mouse",
                    quantity=1, request_date=datetime(2024, 2, 28, 10, 0, tzinfo=UTC)),
        ItemRequest(id="r2", requesting_division="IT", product_id="p2", product_name="Cable",
                    quantity=1, request_date=datetime(2024, 3, 2, 10, 0, tzinfo=UTC)),
    ])

    response = await client.put(
        f"{VIEWS}/requests/date-range", json={"start_date": "01/03/2024", "end_date": "31/03/2024"}
    )
    body = response.json()
    assert [r["id"] for r in body["page"]["items"]] == ["r2"]
    assert body["state"]["startDate"] == "01/03/2024"

    # 존재하지 않는 날짜는 하한이 없는 것으로 취급합니다.
    response = await client.put(
        f"{VIEWS}/requests/date-range", json={"start_date": "31/02/2024", "end_date": ""}
    )
    assert len(response.json()["page"]["items"]) == 2


@pytest.mark.asyncio
async def test_date_range_on_screen_without_dates(client: AsyncClient):
    response = await client.put(f"{VIEWS}/products/date-range", json={"start_date": "01/01/2024"})
    assert response.status_code == 400


# =============================================================================
# 3. 정렬
# =============================================================================


@pytest.mark.asyncio
async def test_sort_toggles_direction(client: AsyncClient, seeded_products):
    first = await client.post(f"{VIEWS}/products/sort", json={"key": "name"})
    assert first.json()["state"]["sortConfig"] == {"key": "name", "direction": "asc"}
    assert item_names(first.json()) == ["Apple", "Banana", "Cherry"]

    second = await client.post(f"{VIEWS}/products/sort", json={"key": "name"})
    assert second.json()["state"]["sortConfig"] == {"key": "name", "direction": "desc"}
    assert item_names(second.json()) == ["Cherry", "Banana", "Apple"]


@pytest.mark.asyncio
async def test_sort_unsortable_field(client: AsyncClient):
    response = await client.post(f"{VIEWS}/products/sort", json={"key": "image_url"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_sort_purchase_orders_by_vendor_name(client: AsyncClient, data_hub: DataHub, vendors):
    seed(data_hub, "vendors", vendors)
    seed(data_hub, "purchase-orders", [
        PurchaseOrder(id="o1", vendor_id="v1", product_id="p1", product_name="Paper", quantity=5, requested_by="kim"),
        PurchaseOrder(id="o2", vendor_id="v2", product_id="p2", product_name="Drill", quantity=1, requested_by="lee"),
    ])

    response = await client.post(f"{VIEWS}/purchase-orders/sort", json={"key": "vendor_name"})

    # v2 = Acme Corp, v1 = Zeta Supplies
    assert [o["id"] for o in response.json()["page"]["items"]] == ["o2", "o1"]


# =============================================================================
# 4. 페이지 이동 / 초기화
# =============================================================================


@pytest.mark.asyncio
async def test_page_step_and_clamp(client: AsyncClient, audit_entries):
    print("\n--- Running test_page_step_and_clamp ---")
    response = await client.put(f"{VIEWS}/audit-log/page", json={"step": 1})
    body = response.json()
    assert body["page"]["current_page"] == 2
    assert body["page"]["total_pages"] == 2
    assert len(body["page"]["items"]) == 5
    assert body["page"]["has_prev"] is True

    response = await client.put(f"{VIEWS}/audit-log/page", json={"page": 9999})
    assert response.json()["page"]["current_page"] == 2
    assert response.json()["state"]["currentPage"] == 2

    response = await client.put(f"{VIEWS}/audit-log/page", json={"step": -10})
    assert response.json()["page"]["current_page"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"page": 1, "step": 1}])
async def test_page_update_requires_exactly_one_field(client: AsyncClient, payload):
    response = await client.put(f"{VIEWS}/audit-log/page", json=payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_audit_user_filter_ignores_case(client: AsyncClient, audit_entries):
    response = await client.put(f"{VIEWS}/audit-log/category", json={"value": "admin"})

    body = response.json()
    assert body["page"]["total_items"] == 10
    assert {e["user"] for e in body["page"]["items"]} == {"Admin"}


@pytest.mark.asyncio
async def test_reset_filters(client: AsyncClient, audit_entries):
    await client.put(f"{VIEWS}/audit-log/search", json={"term": "product 1"})
    await client.post(f"{VIEWS}/audit-log/sort", json={"key": "user"})

    response = await client.post(f"{VIEWS}/audit-log/reset")

    body = response.json()
    assert body["state"]["searchTerm"] == ""
    assert body["state"]["sortConfig"] == {"key": "timestamp", "direction": "desc"}
    assert body["state"]["currentPage"] == 1
    assert body["is_filtered"] is False
    assert body["page"]["items"][0]["id"] == "a19"


@pytest.mark.asyncio
async def test_view_reflects_record_changes(client: AsyncClient, seeded_products, data_hub: DataHub):
    """레코드 변경 후의 다음 조회는 최신 스냅샷으로 다시 계산됩니다."""
    await client.post(f"{VIEWS}/products/sort", json={"key": "name"})
    data_hub.collection("products").delete(seeded_products[0].id)

    response = await client.get(f"{VIEWS}/products")
    assert item_names(response.json()) == ["Banana", "Cherry"]


@pytest.mark.asyncio
async def test_slow_store_does_not_serialize_requests(client: AsyncClient, seeded_products, monkeypatch):
    """저장소 호출이 오래 걸려도 동시 요청이 차례로 대기하지 않는지 테스트합니다."""
    print("\n--- Running test_slow_store_does_not_serialize_requests ---")
    original_get = MemoryViewStateStore.get

    def slow_get(self, key):
        time.sleep(0.3)
        return original_get(self, key)

    monkeypatch.setattr(MemoryViewStateStore, "get", slow_get)

    started = time.perf_counter()
    responses = await asyncio.gather(
        *(client.get(f"{VIEWS}/products", headers={"X-View-Owner": f"user{i}"}) for i in range(4))
    )
    elapsed = time.perf_counter() - started

    assert all(r.status_code == 200 for r in responses)
    assert elapsed < 0.9

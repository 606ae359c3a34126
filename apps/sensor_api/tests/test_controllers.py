"""HTTP Controllers 단위 테스트."""

from __future__ import annotations

from dataclasses import replace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from sensor_api.application.common.exceptions import SensorStoreError
from sensor_api.application.sensors import FindClosestSensorsQuery
from sensor_api.domain.entities import Sensor
from sensor_api.infrastructure.persistence_memory import MemorySensorStore
from sensor_api.main import app
from sensor_api.setup.dependencies import get_find_closest_query, get_sensor_store

SENSOR_BODY = {
    "name": "abc123",
    "lat": 44.916241209323736,
    "lon": -93.21112681214602,
    "tags": ["x", "y", "z"],
}


@pytest.fixture
def client(memory_store: MemorySensorStore) -> TestClient:
    """메모리 저장소를 주입한 TestClient."""
    app.dependency_overrides[get_sensor_store] = lambda: memory_store
    return TestClient(app)


@pytest.fixture
def failing_store() -> AsyncMock:
    """모든 호출이 SensorStoreError를 던지는 저장소."""
    store = AsyncMock()
    store.backend_name = "failing"
    error = SensorStoreError("connection refused")
    store.create.side_effect = error
    store.get_by_name.side_effect = error
    store.update_by_name.side_effect = error
    return store


class TestHealthController:
    """Health Controller 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "sensor-api"}

    def test_ping(self, client: TestClient) -> None:
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == "pong"


class TestCreateSensor:
    """POST /sensors 테스트."""

    def test_create_sensor(self, client: TestClient) -> None:
        response = client.post("/sensors", json=SENSOR_BODY)
        assert response.status_code == 201
        assert response.json() == {"data": {"id": None, **SENSOR_BODY}}

    def test_tags_default_to_empty(self, client: TestClient) -> None:
        response = client.post("/sensors", json={"name": "bare", "lat": 1, "lon": 2})
        assert response.status_code == 201
        assert response.json()["data"]["tags"] == []

    def test_invalid_body(self, client: TestClient) -> None:
        """알 수 없는 필드/필수 필드 누락은 422."""
        response = client.post("/sensors", json={"not": "valid", "sensor": "data"})
        assert response.status_code == 422

    def test_unknown_field_rejected(self, client: TestClient) -> None:
        response = client.post("/sensors", json={**SENSOR_BODY, "color": "red"})
        assert response.status_code == 422

    def test_duplicate_name_conflict(self, client: TestClient) -> None:
        assert client.post("/sensors", json=SENSOR_BODY).status_code == 201
        response = client.post("/sensors", json=SENSOR_BODY)
        assert response.status_code == 409
        assert response.json()["code"] == "SENSOR_ALREADY_EXISTS"

    def test_store_failure(self, client: TestClient, failing_store: AsyncMock) -> None:
        """저장소 오류는 드라이버 메시지 없이 500."""
        app.dependency_overrides[get_sensor_store] = lambda: failing_store
        response = client.post("/sensors", json=SENSOR_BODY)
        assert response.status_code == 500
        assert response.json() == {"detail": "internal server error", "code": "STORE_ERROR"}


class TestGetSensor:
    """GET /sensors/{name} 테스트."""

    def test_get_sensor(self, client: TestClient) -> None:
        client.post("/sensors", json=SENSOR_BODY)
        response = client.get("/sensors/abc123")
        assert response.status_code == 200
        assert response.json() == {"data": {"id": None, **SENSOR_BODY}}

    def test_missing_sensor(self, client: TestClient) -> None:
        response = client.get("/sensors/not-a-sensor")
        assert response.status_code == 404
        assert response.json() == {
            "detail": "no sensor resource exists: not-a-sensor",
            "code": "RESOURCE_NOT_FOUND",
        }

    def test_store_failure(self, client: TestClient, failing_store: AsyncMock) -> None:
        app.dependency_overrides[get_sensor_store] = lambda: failing_store
        response = client.get("/sensors/abc123")
        assert response.status_code == 500


class TestUpdateSensor:
    """PUT /sensors/{name} 테스트."""

    def test_update_sensor(self, client: TestClient) -> None:
        client.post("/sensors", json=SENSOR_BODY)
        new_body = {"name": "abc123", "lat": 5.0, "lon": 7.0, "tags": ["a"]}

        response = client.put("/sensors/abc123", json=new_body)
        assert response.status_code == 200
        assert response.json() == {"data": {"id": None, **new_body}}

        fetched = client.get("/sensors/abc123").json()["data"]
        assert fetched["tags"] == ["a"]
        assert (fetched["lat"], fetched["lon"]) == (5.0, 7.0)

    def test_rename_sensor(self, client: TestClient) -> None:
        """이름 변경 후 새 이름으로만 조회됨."""
        client.post("/sensors", json=SENSOR_BODY)
        response = client.put("/sensors/abc123", json={**SENSOR_BODY, "name": "def456"})
        assert response.status_code == 200

        assert client.get("/sensors/abc123").status_code == 404
        assert client.get("/sensors/def456").status_code == 200

    def test_update_missing(self, client: TestClient) -> None:
        response = client.put("/sensors/abc123", json=SENSOR_BODY)
        assert response.status_code == 404
        assert response.json()["detail"] == "no sensor resource exists: abc123"

    def test_update_invalid_body(self, client: TestClient) -> None:
        client.post("/sensors", json=SENSOR_BODY)
        response = client.put("/sensors/abc123", json={"name": "abc123"})
        assert response.status_code == 422

    def test_store_failure(self, client: TestClient, failing_store: AsyncMock) -> None:
        app.dependency_overrides[get_sensor_store] = lambda: failing_store
        response = client.put("/sensors/abc123", json=SENSOR_BODY)
        assert response.status_code == 500


class TestFindClosest:
    """GET /sensors/closest 테스트."""

    def test_memory_backend_not_supported(self, client: TestClient) -> None:
        """메모리 저장소는 근접 검색 501."""
        response = client.get(
            "/sensors/closest", params={"location": "44.91,-93.22", "radius": "5km"}
        )
        assert response.status_code == 501
        assert response.json()["code"] == "PROXIMITY_SEARCH_UNAVAILABLE"

    @pytest.mark.parametrize(
        "params",
        [
            {"location": "not,coords", "radius": "5km"},
            {"location": "44.91,-93.22", "radius": "5"},
        ],
    )
    def test_memory_backend_still_validates(
        self, client: TestClient, params: dict[str, str]
    ) -> None:
        """미지원 백엔드에서도 파라미터 오류가 먼저 400."""
        response = client.get("/sensors/closest", params=params)
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_QUERY_PARAMETER"

    def test_returns_ordered_sensors(
        self, client: TestClient, mock_finder: AsyncMock, twin_cities_sensors: list[Sensor]
    ) -> None:
        st_paul, minneapolis, _ = twin_cities_sensors
        mock_finder.find_closest.return_value = [
            replace(minneapolis, id=2),
            replace(st_paul, id=1),
        ]
        app.dependency_overrides[get_find_closest_query] = lambda: FindClosestSensorsQuery(
            mock_finder
        )

        response = client.get(
            "/sensors/closest", params={"location": "44.91,-93.22", "radius": "100km"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert [s["name"] for s in data] == ["minneapolis", "st-paul"]
        assert data[0]["id"] == 2
        mock_finder.find_closest.assert_awaited_once_with(44.91, -93.22, 100000)

    def test_empty_result(self, client: TestClient, mock_finder: AsyncMock) -> None:
        app.dependency_overrides[get_find_closest_query] = lambda: FindClosestSensorsQuery(
            mock_finder
        )
        response = client.get(
            "/sensors/closest", params={"location": "44.91,-93.22", "radius": "100km"}
        )
        assert response.status_code == 200
        assert response.json() == {"data": []}

    @pytest.mark.parametrize(
        ("params", "param_name"),
        [
            ({"location": "44.91,-93.22", "radius": "50"}, "radius"),
            ({"location": "44.91,-93.22", "radius": "50xyz"}, "radius"),
            ({"location": "44.91,-93.22", "radius": "99999999999999999999999km"}, "radius"),
            ({"location": "not,coords", "radius": "50km"}, "location"),
        ],
    )
    def test_invalid_params(
        self,
        client: TestClient,
        mock_finder: AsyncMock,
        params: dict[str, str],
        param_name: str,
    ) -> None:
        """잘못된 파라미터는 400, 저장소 미호출."""
        app.dependency_overrides[get_find_closest_query] = lambda: FindClosestSensorsQuery(
            mock_finder
        )
        response = client.get("/sensors/closest", params=params)
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_QUERY_PARAMETER"
        assert f'"{param_name}"' in response.json()["detail"]
        mock_finder.find_closest.assert_not_called()

    def test_missing_params(self, client: TestClient) -> None:
        response = client.get("/sensors/closest", params={"radius": "5km"})
        assert response.status_code == 422

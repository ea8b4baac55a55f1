"""Tests for API routes."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from adhan_core.api.app import create_app
from adhan_core.config import AppConfig

ISTANBUL = {
    "latitude": 41.0082,
    "longitude": 28.9784,
    "date": "2024-06-15",
    "method": "turkey",
    "timezone": "Europe/Istanbul",
}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create test client with a fresh application."""
    app = create_app(AppConfig())
    with TestClient(app) as client:
        yield client


class TestHealthEndpoint:
    """Health check endpoint tests."""

    def test_health_check(self, client: TestClient) -> None:
        """Test health check returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPrayerTimesEndpoints:
    """Prayer time endpoint tests."""

    def test_prayer_times(self, client: TestClient) -> None:
        """Test one day of prayer times."""
        response = client.post("/api/prayer-times", json=ISTANBUL)
        assert response.status_code == 200

        data = response.json()
        assert data["date"] == "2024-06-15"
        assert data["timezone"] == "Europe/Istanbul"
        assert data["method"] == "turkey"
        assert data["date_formatted"] == "15 Haziran 2024, Cumartesi"
        assert data["fajr"] < data["sunrise"] < data["dhuhr"] < data["asr"] < data["maghrib"] < data["isha"]
        assert data["dhuhr"].endswith("+03:00")

    def test_timezone_from_coordinates(self, client: TestClient) -> None:
        """Test timezone is found from coordinates when omitted."""
        body = {k: v for k, v in ISTANBUL.items() if k != "timezone"}
        response = client.post("/api/prayer-times", json=body)
        assert response.status_code == 200
        assert response.json()["timezone"] == "Europe/Istanbul"

    def test_default_method(self, client: TestClient) -> None:
        """Test configured default method is used when omitted."""
        body = {k: v for k, v in ISTANBUL.items() if k != "method"}
        response = client.post("/api/prayer-times", json=body)
        assert response.status_code == 200
        assert response.json()["method"] == "muslimWorldLeague"

    def test_adjustments(self, client: TestClient) -> None:
        """Test manual adjustments shift the time."""
        base = client.post("/api/prayer-times", json=ISTANBUL).json()
        adjusted = client.post(
            "/api/prayer-times", json={**ISTANBUL, "adjustments": {"isha": 60}}
        ).json()
        assert base["isha"] != adjusted["isha"]
        assert base["fajr"] == adjusted["fajr"]

    def test_range(self, client: TestClient) -> None:
        """Test range of days."""
        response = client.post("/api/prayer-times/range", json={**ISTANBUL, "end_date": "2024-06-17"})
        assert response.status_code == 200
        assert [d["date"] for d in response.json()] == ["2024-06-15", "2024-06-16", "2024-06-17"]

    def test_single_prayer(self, client: TestClient) -> None:
        """Test one prayer's time."""
        all_times = client.post("/api/prayer-times", json=ISTANBUL).json()
        response = client.post("/api/prayer-times/asr", json=ISTANBUL)
        assert response.status_code == 200

        data = response.json()
        assert data["prayer"] == "asr"
        assert data["display_name"] == "İkindi"
        assert data["time"] == all_times["asr"]

    def test_sunnah_times(self, client: TestClient) -> None:
        """Test sunnah times."""
        response = client.post("/api/sunnah-times", json=ISTANBUL)
        assert response.status_code == 200
        data = response.json()
        assert data["middle_of_the_night"] < data["last_third_of_the_night"]

    def test_current_prayer(self, client: TestClient) -> None:
        """Test current and next prayer."""
        response = client.post(
            "/api/current-prayer", json={**ISTANBUL, "at": "2024-06-15T15:00:00+03:00"}
        )
        assert response.status_code == 200
        assert response.json() == {"current": "dhuhr", "next": "asr"}

    def test_current_prayer_before_fajr(self, client: TestClient) -> None:
        """Test none before fajr."""
        response = client.post(
            "/api/current-prayer", json={**ISTANBUL, "at": "2024-06-15T01:00:00+03:00"}
        )
        assert response.json() == {"current": "none", "next": "fajr"}


class TestErrors:
    """Structured error response tests."""

    def test_invalid_coordinates(self, client: TestClient) -> None:
        """Test latitude out of range."""
        response = client.post("/api/prayer-times", json={**ISTANBUL, "latitude": 91})
        assert response.status_code == 422
        assert response.json()["kind"] == "InvalidCoordinates"

    def test_invalid_date(self, client: TestClient) -> None:
        """Test impossible date."""
        response = client.post("/api/prayer-times", json={**ISTANBUL, "date": "2024-02-30"})
        assert response.status_code == 422
        assert response.json()["kind"] == "InvalidDate"

    def test_unknown_method(self, client: TestClient) -> None:
        """Test unknown method."""
        response = client.post("/api/prayer-times", json={**ISTANBUL, "method": "lunar"})
        assert response.status_code == 422
        assert response.json()["kind"] == "UnknownMethod"

    def test_invalid_timezone(self, client: TestClient) -> None:
        """Test unknown timezone name."""
        response = client.post("/api/prayer-times", json={**ISTANBUL, "timezone": "Mars/Olympus"})
        assert response.status_code == 422
        assert response.json()["kind"] == "InvalidParameter"

    def test_invalid_prayer(self, client: TestClient) -> None:
        """Test unknown prayer name."""
        response = client.post("/api/prayer-times/lunch", json=ISTANBUL)
        assert response.status_code == 422
        assert response.json()["kind"] == "InvalidPrayer"

    def test_time_unavailable(self, client: TestClient) -> None:
        """Test midnight sun."""
        body = {
            "latitude": 69.6492,
            "longitude": 18.9553,
            "date": "2024-06-21",
            "timezone": "Europe/Oslo",
        }
        response = client.post("/api/prayer-times", json=body)
        assert response.status_code == 422
        data = response.json()
        assert data["kind"] == "TimeUnavailable"
        assert data["message"]

    def test_negative_isha_interval(self, client: TestClient) -> None:
        """Test request validation."""
        response = client.post("/api/prayer-times", json={**ISTANBUL, "isha_interval": -5})
        assert response.status_code == 422

    def test_adjustments_breaking_order(self, client: TestClient) -> None:
        """Test adjustments that reorder prayers are a client error."""
        response = client.post("/api/prayer-times", json={**ISTANBUL, "adjustments": {"fajr": 300}})
        assert response.status_code == 422
        assert response.json()["kind"] == "InvalidParameter"

    def test_error_schema_documented(self, client: TestClient) -> None:
        """Test structured errors appear in the OpenAPI document."""
        spec = client.get("/openapi.json").json()
        assert "ErrorSchema" in spec["components"]["schemas"]
        responses = spec["paths"]["/api/prayer-times"]["post"]["responses"]
        assert responses["500"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorSchema")


class TestInfoEndpoints:
    """Qibla, coordinate, method and info endpoint tests."""

    def test_qibla(self, client: TestClient) -> None:
        """Test qibla bearing."""
        response = client.get("/api/qibla", params={"latitude": 40.7128, "longitude": -74.0059})
        assert response.status_code == 200
        assert response.json()["direction"] == pytest.approx(58.4817, abs=0.01)

    def test_qibla_invalid(self, client: TestClient) -> None:
        """Test qibla with invalid coordinates."""
        response = client.get("/api/qibla", params={"latitude": 95, "longitude": 0})
        assert response.status_code == 422
        assert response.json()["kind"] == "InvalidCoordinates"

    def test_validate_coordinates(self, client: TestClient) -> None:
        """Test coordinate validation never errors."""
        valid = client.get("/api/coordinates/validate", params={"latitude": 41, "longitude": 29})
        invalid = client.get("/api/coordinates/validate", params={"latitude": 91, "longitude": 29})
        assert valid.json() == {"valid": True}
        assert invalid.json() == {"valid": False}

    def test_methods(self, client: TestClient) -> None:
        """Test method catalogue."""
        response = client.get("/api/methods")
        assert response.status_code == 200
        names = [m["name"] for m in response.json()]
        assert "turkey" in names
        assert "ummAlQura" in names

    def test_method(self, client: TestClient) -> None:
        """Test one method's parameters."""
        response = client.get("/api/methods/umm_al_qura")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "ummAlQura"
        assert data["isha_interval"] == 90
        assert data["night_fraction_latitude"] is None

    def test_method_night_fraction(self, client: TestClient) -> None:
        """Test the seventh-of-the-night latitude is reported."""
        data = client.get("/api/methods/moonsightingCommittee").json()
        assert data["night_fraction_latitude"] == 55
        assert data["seasonal_twilight"] is True

    def test_unknown_method(self, client: TestClient) -> None:
        """Test unknown method lookup."""
        response = client.get("/api/methods/lunar")
        assert response.status_code == 422
        assert response.json()["kind"] == "UnknownMethod"

    def test_info(self, client: TestClient) -> None:
        """Test library information."""
        data = client.get("/api/info").json()
        assert data["platform"] == "python"
        assert data["version"]
        assert data["started_at"]

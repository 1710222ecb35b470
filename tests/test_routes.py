import json

from conftest import FakeGenerationClient, fenced
from tripdiary.utils.config import Settings
from tripdiary.utils.exceptions import BackendError, BackendErrorKind

TRIP_BODY = {"fromDestination": "London", "toDestination": "Paris", "duration": 3, "interests": "culture"}


# ============================================================================
# STRICT FLOW
# ============================================================================

def test_plan_returns_validated_plan(make_client, plan_request, valid_plan):
    client = make_client(FakeGenerationClient(response=fenced(valid_plan)))

    response = client.post("/api/ai/plan", json=plan_request)

    assert response.status_code == 200
    body = response.json()
    assert body["dailyPlan"][0]["title"] == "Left Bank classics"
    assert "confidence" not in body


def test_plan_invalid_request_returns_diagnostics(make_client, plan_request):
    client = make_client(FakeGenerationClient(response="{}"))
    plan_request.update(travelers=0, destination="P")

    response = client.post("/api/ai/plan", json=plan_request)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request"
    assert {d["field"] for d in body["details"]} == {"travelers", "destination"}


def test_plan_without_credential_is_500(make_client, plan_request):
    fake = FakeGenerationClient(configured=False)
    client = make_client(fake)

    response = client.post("/api/ai/plan", json=plan_request)

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "API key not configured"
    assert "OPENAI_API_KEY" in body["message"]
    assert fake.calls == []


def test_plan_missing_daily_plan_is_500_with_diagnostics(make_client, plan_request, valid_plan):
    del valid_plan["dailyPlan"]
    client = make_client(FakeGenerationClient(response=json.dumps(valid_plan)))

    response = client.post("/api/ai/plan", json=plan_request)

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to generate plan"
    assert "dailyPlan" in body["message"]
    assert body["details"][0]["path"] == "dailyPlan"


def test_plan_does_not_fall_back_on_backend_error(make_client, plan_request):
    error = BackendError("quota exceeded", kind=BackendErrorKind.QUOTA, http_status=429)
    client = make_client(FakeGenerationClient(error=error))

    response = client.post("/api/ai/plan", json=plan_request)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate plan", "message": "quota exceeded"}


def test_plan_parse_failure_is_500(make_client, plan_request):
    client = make_client(FakeGenerationClient(response="Day 1: see the Eiffel Tower"))

    response = client.post("/api/ai/plan", json=plan_request)

    assert response.status_code == 500
    assert response.json()["message"].startswith("Failed to parse AI response as JSON")


# ============================================================================
# LENIENT FLOW
# ============================================================================

def test_generate_trip_requires_destination_and_duration(make_client):
    client = make_client(FakeGenerationClient(response="{}"))

    for body in ({"duration": 3}, {"toDestination": "Paris"}, {"toDestination": "", "duration": 3}, {"toDestination": "Paris", "duration": 0}):
        response = client.post("/api/generate-trip", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Destination and duration are required"}


def test_generate_trip_without_credential_falls_back(make_client):
    fake = FakeGenerationClient(configured=False)
    client = make_client(fake)

    response = client.post("/api/generate-trip", json=TRIP_BODY)

    assert response.status_code == 200
    body = response.json()
    assert body["fallback"] is True
    assert body["fallbackReason"] == "missing_api_key"
    assert "isQuotaError" not in body
    assert len(body["itinerary"]) == 3
    assert body["itinerary"][1]["activities"][0]["activity"] == "Visit museums and art galleries in Paris"
    assert body["toDestination"] == "Paris"
    assert fake.calls == []


def test_generate_trip_quota_error_is_flagged(make_client):
    error = BackendError("429 Too Many Requests", kind=BackendErrorKind.QUOTA, http_status=429)
    client = make_client(FakeGenerationClient(error=error))

    response = client.post("/api/generate-trip", json=TRIP_BODY)

    assert response.status_code == 200
    body = response.json()
    assert body["fallback"] is True
    assert body["isQuotaError"] is True


def test_generate_trip_invalid_output_falls_back(make_client, valid_trip):
    del valid_trip["itinerary"]
    client = make_client(FakeGenerationClient(response=json.dumps(valid_trip)))

    response = client.post("/api/generate-trip", json=TRIP_BODY)

    assert response.status_code == 200
    assert response.json()["fallbackReason"] == "schema_violation"


def test_generate_trip_uses_generated_plan(make_client, valid_trip):
    client = make_client(FakeGenerationClient(response=fenced(valid_trip)))

    response = client.post("/api/generate-trip", json={**TRIP_BODY, "budget": "Luxury"})

    assert response.status_code == 200
    body = response.json()
    assert "fallback" not in body
    assert body["budget"] == "Luxury"
    assert body["recommendations"]["dining"] == ["Breizh Café"]


def test_generate_trip_accepts_loosely_typed_optional_fields(make_client, valid_trip):
    fake = FakeGenerationClient(response=json.dumps(valid_trip))
    client = make_client(fake)

    response = client.post(
        "/api/generate-trip",
        json={**TRIP_BODY, "budget": 1500, "travelers": 2.0, "travelStyle": {"pace": "slow"}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["budget"] == "1500"
    assert "Number of travelers: 2" in fake.calls[0]
    assert "Travel style" not in fake.calls[0]


def test_generate_trip_drops_unusable_interest_items(make_client):
    fake = FakeGenerationClient(configured=False)
    client = make_client(fake)

    response = client.post(
        "/api/generate-trip",
        json={"toDestination": "Paris", "duration": 3, "interests": ["food", 1, {"x": 1}]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["fallback"] is True
    assert body["itinerary"][1]["activities"][0]["activity"] == "Take a food tour in Paris"


def test_generate_trip_non_text_destination_counts_as_missing(make_client):
    client = make_client(FakeGenerationClient(response="{}"))

    response = client.post("/api/generate-trip", json={"toDestination": {"city": "Paris"}, "duration": 3})

    assert response.status_code == 400
    assert response.json() == {"error": "Destination and duration are required"}


def test_generate_trip_long_duration_is_truncated(make_client):
    client = make_client(FakeGenerationClient(configured=False))

    response = client.post("/api/generate-trip", json={"toDestination": "Tokyo", "duration": "14"})

    body = response.json()
    assert response.status_code == 200
    assert len(body["itinerary"]) == 7
    assert body["daysTruncated"] is True
    assert body["fromDestination"] == ""


def test_fallback_max_days_comes_from_settings(make_client):
    config = Settings(openai_api_key=None, fallback_max_days=10)
    client = make_client(FakeGenerationClient(configured=False), config)

    response = client.post("/api/generate-trip", json={"toDestination": "Tokyo", "duration": 10})

    assert len(response.json()["itinerary"]) == 10
    assert "daysTruncated" not in response.json()


# ============================================================================
# HEALTH
# ============================================================================

def test_health_reports_missing_key(make_client):
    client = make_client(FakeGenerationClient(configured=False), Settings(openai_api_key=None))

    response = client.get("/api/ai/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "missing_api_key"
    assert body["envVars"] == {"OPENAI_API_KEY": "✗ Not set"}


def test_health_reports_configured_key(make_client):
    client = make_client(FakeGenerationClient(), Settings(openai_api_key="sk-test"))

    body = client.get("/api/ai/health").json()

    assert body["status"] == "configured"
    assert body["envVars"]["OPENAI_API_KEY"] == "✓ Set"


def test_service_root(make_client):
    client = make_client(FakeGenerationClient())
    assert client.get("/").json()["status"] == "running"

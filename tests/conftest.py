import json
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from tripdiary.main import app
from tripdiary.planning.llm_config import GenerationClient, get_generation_client
from tripdiary.utils.config import Settings, get_settings
from tripdiary.utils.exceptions import CredentialMissingError


class FakeGenerationClient(GenerationClient):
    """Generation client double: returns a canned response or raises a canned error."""

    def __init__(self, response: Optional[str] = None, error: Exception = None, configured: bool = True):
        super().__init__(model=None, model_name="fake")
        self.response = response
        self.error = error
        self._configured = configured
        self.calls: List[str] = []

    @property
    def configured(self) -> bool:
        return self._configured

    async def generate(self, prompt, system_prompt=None, json_mode=True):
        self.calls.append(prompt)
        if not self._configured:
            raise CredentialMissingError("OPENAI_API_KEY is not configured")
        if self.error is not None:
            raise self.error
        return self.response


VALID_PLAN = {
    "summary": "Three days of art and food in Paris",
    "dailyPlan": [
        {
            "day": 1,
            "title": "Left Bank classics",
            "activities": [
                {
                    "timeOfDay": "morning",
                    "name": "Musée d'Orsay",
                    "description": "Impressionist collection",
                    "estimatedCost": "approx. EUR 16",
                    "rating": 5,
                },
                {
                    "timeOfDay": "evening",
                    "name": "Seine walk",
                    "description": "Sunset along the river",
                },
            ],
        }
    ],
    "packingTips": ["Comfortable shoes"],
    "confidence": "high",
}

VALID_TRIP = {
    "itinerary": [
        {
            "day": 1,
            "title": "Day 1: London → Paris",
            "activities": [
                {"time": "Morning", "activity": "Eurostar to Paris"},
                {"time": "Evening", "activity": "Dinner in Le Marais"},
            ],
        }
    ],
    "recommendations": {
        "accommodation": ["Hotel in Le Marais"],
        "dining": ["Breizh Café"],
        "activities": ["Louvre"],
        "transportation": ["Eurostar"],
    },
    "tips": ["Buy a Navigo pass"],
}

PLAN_REQUEST = {
    "destination": "Paris",
    "startDate": "2026-05-01",
    "endDate": "2026-05-03",
    "interests": ["art", "food"],
}


def fenced(payload: dict) -> str:
    return "```json\n" + json.dumps(payload) + "\n```"


@pytest.fixture
def valid_plan():
    return json.loads(json.dumps(VALID_PLAN))


@pytest.fixture
def valid_trip():
    return json.loads(json.dumps(VALID_TRIP))


@pytest.fixture
def plan_request():
    return dict(PLAN_REQUEST)


@pytest.fixture
def make_client():
    """Build a TestClient whose generation client and settings are overridden."""

    def _make(fake: GenerationClient, config: Settings = None) -> TestClient:
        if config is None:
            config = Settings(openai_api_key="test-key" if fake.configured else None)
        app.dependency_overrides[get_generation_client] = lambda: fake
        app.dependency_overrides[get_settings] = lambda: config
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()

import pytest
from fastapi.testclient import TestClient

from creator_agent.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def plan_payload():
    return {
        "topic": "AI workflow",
        "audience": "creators",
        "tone": "energetic",
        "callToAction": "Subscribe",
        "videoLength": "3 minutes",
        "format": "talking head",
    }


@pytest.fixture
def plan_details():
    return {
        "hook": "Stop scrolling: AI workflow is about to change the way you work.",
        "storyline": [
            "Open on the problem creators hit with AI workflow.",
            "Reveal the one idea that makes AI workflow click.",
            "Walk through the workflow step by step, staged as talking head.",
        ],
        "shots": ["0:00-1:00 Talking head, tight close-up (hook)"],
        "broll": ["Hands-on close-ups of AI workflow in action"],
        "cta": "Subscribe",
        "voiceOver": ["If you're one of the creators wrestling with AI workflow, this one's for you."],
    }


@pytest.fixture
def metadata_payload(plan_details):
    return {
        "plan": {"topic": "AI workflow", "audience": "creators, agencies"},
        "mood": "Bold, tactical",
        "platformGoal": "drive subscribers",
        "planDetails": plan_details,
    }


@pytest.fixture
def chat_payload():
    return {
        "message": "asdkfjh",
        "context": {"uploaded": 0, "hasPlan": False, "hasMetadata": False},
    }

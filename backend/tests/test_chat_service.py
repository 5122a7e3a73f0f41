import pytest

from creator_agent.models import ChatRequest
from creator_agent.services.chat_service import ChatResponder


@pytest.fixture
def responder():
    return ChatResponder()


def _request(message, uploaded=0, has_plan=False, has_metadata=False):
    return ChatRequest.model_validate({
        "message": message,
        "context": {"uploaded": uploaded, "hasPlan": has_plan, "hasMetadata": has_metadata},
    })


class TestIntentDetection:

    @pytest.mark.parametrize("message,intent", [
        ("Can you export this?", "export"),
        ("Publish it tomorrow", "export"),
        ("Please revise the hook", "revise"),
        ("make it shorter", "revise"),
        ("What's the title?", "metadata"),
        ("status?", "status"),
        ("what's next", "status"),
        ("I added new footage", "upload"),
        ("help", "help"),
        ("hey there", "greeting"),
        ("asdkfjh", "fallback"),
    ])
    def test_detects(self, message, intent):
        assert ChatResponder.detect_intent(message) == intent


class TestReplies:

    def test_fallback_reflects_empty_workspace(self, responder):
        reply = responder.respond(_request("asdkfjh"))
        assert reply
        assert "no plan yet" in reply
        assert "no metadata yet" in reply
        assert "plan ready" not in reply
        assert "metadata drafted" not in reply

    def test_fallback_reflects_populated_workspace(self, responder):
        reply = responder.respond(_request("asdkfjh", uploaded=3, has_plan=True, has_metadata=True))
        assert "3 clips uploaded" in reply
        assert "a plan ready" in reply
        assert "metadata drafted" in reply

    def test_export_lists_missing_pieces(self, responder):
        reply = responder.respond(_request("export", has_plan=True))
        assert "a metadata package" in reply
        assert "narrative plan" not in reply

    def test_export_when_ready(self, responder):
        reply = responder.respond(_request("ship it", has_plan=True, has_metadata=True))
        assert reply.startswith("Everything is in place")

    def test_revise_without_plan(self, responder):
        assert responder.respond(_request("revise")).startswith("There's no plan to revise yet")

    def test_revise_with_metadata_mentions_regeneration(self, responder):
        reply = responder.respond(_request("tweak the tone", has_plan=True, has_metadata=True))
        assert "Regenerate the metadata" in reply

    def test_upload_count_singular(self, responder):
        assert "1 clip in the workspace" in responder.respond(_request("any clips?", uploaded=1))

    @pytest.mark.parametrize("message", ["export", "revise", "title", "status", "upload", "help", "hi", "?"])
    @pytest.mark.parametrize("has_plan", [True, False])
    @pytest.mark.parametrize("has_metadata", [True, False])
    def test_never_empty(self, responder, message, has_plan, has_metadata):
        reply = responder.respond(_request(message, has_plan=has_plan, has_metadata=has_metadata))
        assert reply.strip()

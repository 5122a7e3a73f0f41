"""
HTTP contract tests for the /api/agent endpoint.
"""


class TestAgentEndpoint:

    def test_plan_video(self, client, plan_payload):
        response = client.post("/api/agent", json={"action": "planVideo", "payload": plan_payload})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["plan"]["cta"] == "Subscribe"
        assert data["plan"]["storyline"]
        assert data["plan"]["shots"]
        assert data["plan"]["voiceOver"]

    def test_plan_roundtrips_into_metadata(self, client, plan_payload):
        plan = client.post(
            "/api/agent", json={"action": "planVideo", "payload": plan_payload}
        ).json()["plan"]
        payload = {
            "plan": {"topic": "AI automation for creators", "audience": "YouTube creators"},
            "mood": "Bold, tactical, motivating",
            "platformGoal": "drive subscribers, rank for tutorials",
            "planDetails": plan,
        }
        response = client.post("/api/agent", json={"action": "generateMetadata", "payload": payload})
        assert response.status_code == 200
        metadata = response.json()["metadata"]
        assert len(metadata["chapters"]) == len(plan["storyline"])
        assert metadata["chapters"][0]["timestamp"] == "0:00"
        assert len(metadata["keywords"]) == len(set(metadata["keywords"]))

    def test_metadata_empty_storyline(self, client, metadata_payload):
        metadata_payload["planDetails"]["storyline"] = []
        response = client.post(
            "/api/agent", json={"action": "generateMetadata", "payload": metadata_payload}
        )
        assert response.status_code == 200
        assert response.json()["metadata"]["chapters"] == []

    def test_chat_fallback(self, client, chat_payload):
        response = client.post("/api/agent", json={"action": "chat", "payload": chat_payload})
        assert response.status_code == 200
        reply = response.json()["reply"]
        assert reply
        assert "plan ready" not in reply

    def test_unknown_action(self, client, plan_payload):
        response = client.post(
            "/api/agent", json={"action": "deleteEverything", "payload": plan_payload}
        )
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert isinstance(data["error"], list)

    def test_validation_issue_list(self, client):
        response = client.post("/api/agent", json={"action": "planVideo", "payload": {"topic": "x"}})
        assert response.status_code == 400
        paths = [issue["path"] for issue in response.json()["error"]]
        assert ["payload", "audience"] in paths
        assert ["payload", "callToAction"] in paths

    def test_malformed_json(self, client):
        response = client.post(
            "/api/agent", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Request body must be valid JSON"}

    def test_deeply_nested_json(self, client):
        body = b"[" * 100000 + b"]" * 100000
        response = client.post(
            "/api/agent", content=body, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Request body must be valid JSON"}


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

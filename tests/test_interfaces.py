"""
Tests for the CLI and HTTP API.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import json

import pytest
from click.testing import CliRunner


class TestCLI:
    """Test the command-line interface."""

    def _invoke(self, kb_file, *args):
        from cli import cli

        return CliRunner().invoke(cli, ["--kb", str(kb_file), *args])

    def test_analyze_json(self, kb_file):
        result = self._invoke(kb_file, "analyze", "headache, nausea", "--format", "json")

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["results"][0]["conditionName"] == "Migraine"
        assert data["results"][0]["confidence"] == 95

    def test_analyze_with_answers(self, kb_file):
        result = self._invoke(kb_file, "analyze", "fever, chills", "--format", "json",
                              "-a", "q0=1-3 days", "-a", "q2=yes")

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["results"][0]["previousAnswers"] == {"q0": "1-3 days", "q2": "yes"}
        assert len(data["followUpQuestions"]) == 3

    def test_analyze_bad_answer(self, kb_file):
        result = self._invoke(kb_file, "analyze", "fever", "-a", "no-equals-sign")

        assert result.exit_code != 0

    def test_analyze_table(self, kb_file):
        result = self._invoke(kb_file, "analyze", "headache, nausea", "--details")

        assert result.exit_code == 0, result.output
        assert "Migraine" in result.output
        assert "Follow-up questions" in result.output

    def test_analyze_markdown_to_file(self, kb_file, tmp_path):
        out = tmp_path / "report.md"
        result = self._invoke(kb_file, "analyze", "headache", "--format", "markdown", "-o", str(out))

        assert result.exit_code == 0, result.output
        assert "## 1. Migraine (95%)" in out.read_text()

    def test_analyze_empty_input(self, kb_file):
        result = self._invoke(kb_file, "analyze", " , ")

        assert result.exit_code == 1
        assert "at least one symptom" in result.output

    def test_analyze_no_matches(self, kb_file):
        result = self._invoke(kb_file, "analyze", "ringing ears")

        assert result.exit_code == 0
        assert "No matching conditions found" in result.output

    def test_suggest(self, kb_file):
        result = self._invoke(kb_file, "suggest", "naus")

        assert result.exit_code == 0
        assert "nausea" in result.output

    def test_suggest_conditions(self, kb_file):
        result = self._invoke(kb_file, "suggest", "infl", "--conditions")

        assert result.exit_code == 0
        assert "Influenza" in result.output

    def test_condition(self, kb_file):
        result = self._invoke(kb_file, "condition", "migraine")

        assert result.exit_code == 0
        assert "Recurrent headaches." in result.output

    def test_condition_not_found(self, kb_file):
        result = self._invoke(kb_file, "condition", "zzz")

        assert result.exit_code == 1

    def test_conditions(self, kb_file):
        result = self._invoke(kb_file, "conditions")

        assert result.exit_code == 0
        assert "Migraine" in result.output
        assert "Influenza" in result.output

    def test_broken_knowledge_base(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("conditions: [unclosed")

        result = self._invoke(path, "conditions")

        assert result.exit_code == 2
        assert "Knowledge base error" in result.output


class TestServer:
    """Test the HTTP API."""

    @pytest.fixture
    def client(self, analyzer):
        from fastapi.testclient import TestClient
        from server import create_app

        return TestClient(create_app(analyzer))

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["conditions"] == 2

    def test_analyze(self, client):
        response = client.post("/api/analyze", json={"symptoms": "headache, nausea"})

        assert response.status_code == 200
        data = response.json()
        assert data["results"][0]["conditionName"] == "Migraine"
        assert data["results"][0]["matchingSymptoms"] == ["headache", "nausea"]
        assert len(data["follow_up_questions"]) == 2
        assert data["extracted_symptoms"] == ["headache", "nausea"]

    def test_analyze_with_previous_answers(self, client):
        response = client.post("/api/analyze", json={
            "symptoms": "fever, chills",
            "previous_answers": {"q0": "4-7 days"},
        })

        assert response.status_code == 200
        assert response.json()["results"][0]["previousAnswers"] == {"q0": "4-7 days"}

    def test_analyze_empty(self, client):
        response = client.post("/api/analyze", json={"symptoms": "  "})

        assert response.status_code == 400
        assert "at least one symptom" in response.json()["detail"]

    def test_analyze_no_matches(self, client):
        response = client.post("/api/analyze", json={"symptoms": "ringing ears"})

        assert response.status_code == 200
        assert response.json()["results"] == []
        assert response.json()["follow_up_questions"] == []

    def test_suggest(self, client):
        assert client.get("/api/suggest", params={"q": "naus"}).json() == ["nausea"]
        assert client.get("/api/suggest", params={"q": "n"}).json() == []

    def test_list_conditions(self, client):
        data = client.get("/api/conditions").json()

        assert [c["name"] for c in data] == ["Migraine", "Influenza"]

    def test_filter_conditions(self, client):
        data = client.get("/api/conditions", params={"q": "mig"}).json()

        assert [c["name"] for c in data] == ["Migraine"]

    def test_filter_conditions_keeps_case_variants(self):
        from fastapi.testclient import TestClient
        from hygieia.engines import SymptomAnalyzer
        from hygieia.models import ConditionRecord, KnowledgeBase
        from server import create_app

        kb = KnowledgeBase([
            ConditionRecord(name="GERD", category="digestive"),
            ConditionRecord(name="gerd", category="reflux"),
        ])
        client = TestClient(create_app(SymptomAnalyzer(kb)))

        data = client.get("/api/conditions", params={"q": "ge"}).json()

        assert [(c["name"], c["category"]) for c in data] == [
            ("GERD", "digestive"),
            ("gerd", "reflux"),
        ]

    def test_get_condition(self, client):
        response = client.get("/api/conditions/migraine")

        assert response.status_code == 200
        assert response.json()["name"] == "Migraine"
        assert response.json()["treatment"] == "Triptans."

    def test_get_condition_not_found(self, client):
        assert client.get("/api/conditions/zzz").status_code == 404

    def test_broken_knowledge_base_stops_startup(self, tmp_path, monkeypatch):
        from hygieia.errors import KnowledgeBaseError
        from server import create_app

        monkeypatch.setenv("HYGIEIA_KB_PATH", str(tmp_path / "missing.yaml"))

        with pytest.raises(KnowledgeBaseError):
            create_app()

"""Tests for the Typer CLI."""
import json

import pytest
from typer.testing import CliRunner

from gemstudio.cli import app as cli_app
from gemstudio.config import AUTOMATION_TASKS, CHAT_ERROR_TEXT, SAMPLE_PROMPTS
from gemstudio.errors import TransportError

from fakes import FakeGateway

runner = CliRunner()


@pytest.fixture
def use_gateway(monkeypatch):
    """Route CLI commands to the given fake gateway."""
    monkeypatch.setenv("GEMINI_API_KEY", "fake-key")

    def _use(gateway):
        monkeypatch.setattr(cli_app, "get_gateway", lambda config, console=None: gateway)
        return gateway

    return _use


class TestDashboardCommand:
    """Tests for 'gemstudio dashboard'."""

    def test_topic(self, use_gateway, dashboard_json):
        """Test that a generated dashboard is rendered."""
        gateway = use_gateway(FakeGateway(dashboard_json))

        result = runner.invoke(cli_app.app, ["dashboard", "SaaS sales"])

        assert result.exit_code == 0
        assert "SaaS Sales 2024" in result.output
        assert "ARR" in result.output
        assert gateway.closed

    def test_json_output(self, use_gateway, dashboard_json):
        """Test that --json prints the wire-shaped dashboard."""
        use_gateway(FakeGateway(dashboard_json))

        result = runner.invoke(cli_app.app, ["dashboard", "SaaS sales", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["charts"][0]["xAxisKey"] == "name"
        assert payload["metrics"][0]["trend"] == "up"

    def test_file(self, use_gateway, data_dir, dashboard_json):
        """Test generating from a CSV file."""
        gateway = use_gateway(FakeGateway(dashboard_json))

        result = runner.invoke(cli_app.app, ["dashboard", "--file", str(data_dir / "sales.csv")])

        assert result.exit_code == 0
        assert "Jan,310" in gateway.requests[0].contents

    def test_unsupported_file(self, use_gateway, data_dir):
        """Test that an image upload fails before any model call."""
        gateway = use_gateway(FakeGateway())

        result = runner.invoke(cli_app.app, ["dashboard", "--file", str(data_dir / "chart.png")])

        assert result.exit_code == 1
        assert "supported text format" in result.output
        assert gateway.requests == []

    def test_malformed_response(self, use_gateway):
        """Test that a malformed response exits with an error."""
        use_gateway(FakeGateway("{not json"))

        result = runner.invoke(cli_app.app, ["dashboard", "topic"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_requires_input(self, use_gateway):
        """Test that a topic or file is required."""
        use_gateway(FakeGateway())

        result = runner.invoke(cli_app.app, ["dashboard"])

        assert result.exit_code == 1
        assert "TOPIC" in result.output

    def test_topic_and_file_rejected(self, use_gateway, data_dir):
        """Test that giving both a topic and a file is refused before any call."""
        gateway = use_gateway(FakeGateway())

        result = runner.invoke(
            cli_app.app, ["dashboard", "SaaS sales", "--file", str(data_dir / "sales.csv")]
        )

        assert result.exit_code == 1
        assert "not both" in result.output
        assert gateway.requests == []


class TestAutomateCommand:
    """Tests for 'gemstudio automate'."""

    def test_run(self, use_gateway):
        """Test that the markdown result is printed."""
        gateway = use_gateway(FakeGateway("# Action Items\n\n- Ship it"))

        result = runner.invoke(cli_app.app, ["automate", "notes", "--task", AUTOMATION_TASKS[2]])

        assert result.exit_code == 0
        assert "Action Items" in result.output
        assert AUTOMATION_TASKS[2] in gateway.requests[0].system_instruction

    def test_failure(self, use_gateway):
        """Test that a transport failure prints the error text and exits 1."""
        use_gateway(FakeGateway(TransportError("quota exceeded")))

        result = runner.invoke(cli_app.app, ["automate", "notes"])

        assert result.exit_code == 1
        assert "Error executing automation task." in result.output


class TestChatCommand:
    """Tests for 'gemstudio chat'."""

    def test_conversation(self, use_gateway):
        """Test a short conversation ending with /exit."""
        gateway = use_gateway(FakeGateway("Nice to meet you"))

        result = runner.invoke(cli_app.app, ["chat"], input="hello\n/exit\n")

        assert result.exit_code == 0
        assert "Nice to meet you" in result.output
        assert len(gateway.requests) == 1

    def test_end_of_input(self, use_gateway):
        """Test that EOF ends the session cleanly."""
        use_gateway(FakeGateway(TransportError("down")))

        result = runner.invoke(cli_app.app, ["chat"], input="hello\n")

        assert result.exit_code == 0
        assert "error connecting to the API" in result.output
        assert CHAT_ERROR_TEXT.startswith("I encountered an error")


class TestInfoCommands:
    """Tests for 'gemstudio samples' and 'gemstudio health'."""

    def test_samples(self):
        """Test that sample prompts and tasks are listed."""
        result = runner.invoke(cli_app.app, ["samples"])

        assert result.exit_code == 0
        assert "dashboard" in result.output
        assert "task" in result.output
        assert SAMPLE_PROMPTS["dashboard"][0].split()[0] in result.output

    def test_health_with_key(self, monkeypatch):
        """Test health when the key is configured."""
        monkeypatch.setenv("GEMINI_API_KEY", "fake-key")

        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 0
        assert "SET" in result.output

    def test_health_without_key(self, monkeypatch):
        """Test health when the key is missing."""
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)

        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 1
        assert "NOT SET" in result.output

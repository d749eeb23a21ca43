"""Pytest configuration and shared fixtures."""
import json
import os

import pytest

from gemstudio.config import StudioConfig


@pytest.fixture
def config():
    """Configuration with a fake credential."""
    return StudioConfig(api_key="fake-key")


@pytest.fixture
def dashboard_payload():
    """A dashboard dict in the wire shape the model is asked to produce."""
    return {
        "title": "SaaS Sales 2024",
        "summary": "Revenue grew steadily while churn fell.",
        "metrics": [
            {"label": "ARR", "value": "$4.2M", "trend": "up", "percentage": "+18%"},
            {"label": "Churn", "value": "2.1%", "trend": "down", "percentage": "-0.4%"},
            {"label": "Customers", "value": "1,240", "trend": "neutral"},
        ],
        "charts": [
            {
                "title": "Monthly Revenue",
                "type": "bar",
                "xAxisKey": "name",
                "dataKey": "value",
                "data": [
                    {"name": "Jan", "value": 310},
                    {"name": "Feb", "value": 325.5, "secondaryValue": 300},
                ],
            },
            {
                "title": "Active Users",
                "type": "line",
                "xAxisKey": "name",
                "dataKey": "value",
                "data": [{"name": "Q1", "value": 900}, {"name": "Q2", "value": 1100}],
            },
        ],
    }


@pytest.fixture
def dashboard_json(dashboard_payload):
    """The dashboard payload serialized as the model would return it."""
    return json.dumps(dashboard_payload)


@pytest.fixture
def data_dir(tmp_path):
    """Directory with one uploadable dataset per supported extension, plus an image."""
    (tmp_path / "sales.csv").write_text("month,revenue\nJan,310\nFeb,325\n")
    (tmp_path / "sales.json").write_text('[{"month": "Jan", "revenue": 310}]')
    (tmp_path / "notes.txt").write_text("Revenue rose in February.")
    (tmp_path / "report.md").write_text("# Report\n\n| month | revenue |\n")
    (tmp_path / "chart.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (tmp_path / "empty.csv").write_text("   \n")
    return tmp_path


@pytest.fixture(scope="session")
def gemini_api_key():
    """Return the Gemini API key from environment."""
    return os.getenv("GEMINI_API_KEY")

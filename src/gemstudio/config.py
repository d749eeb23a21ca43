"""Studio configuration.

Centralizes the client configuration object and the constants shared by
the prompt composer, the gateway and the panels.
"""

import os

from pydantic import BaseModel, ConfigDict, Field

# Models
GEMINI_FLASH_MODEL = "gemini-2.5-flash"
GEMINI_PRO_MODEL = "gemini-3-pro-preview"

# Dashboard generation
MAX_DATASET_CHARS = 200_000  # ~50k tokens, well inside the Flash context window
TRUNCATION_MARKER = "\n...(truncated)"
DASHBOARD_METRIC_COUNT = 3
DASHBOARD_CHART_COUNT = 2

# Automation
AUTOMATION_TEMPERATURE = 0.7
AUTOMATION_FALLBACK = "No response generated."
AUTOMATION_ERROR_TEXT = "Error executing automation task."
AUTOMATION_TASKS = (
    "Summarize and Extract Action Items",
    "Translate to Spanish and French",
    "Analyze Sentiment and Tone",
    "Convert Unstructured Data to JSON",
    "Proofread and Improve Grammar",
)
DEFAULT_AUTOMATION_TASK = AUTOMATION_TASKS[0]

# Chat
CHAT_GREETING = "Hello! I'm ready to help you experiment with Gemini. What's on your mind?"
CHAT_ERROR_TEXT = (
    "I encountered an error connecting to the API. "
    "Please check your network or API key."
)

SAMPLE_PROMPTS = {
    "dashboard": [
        "Sales performance for a SaaS company in 2024",
        "Website traffic analysis for an e-commerce store",
        "Global renewable energy adoption trends",
        "Social media engagement metrics for a new brand launch",
    ],
    "automation": [
        "Extract actionable tasks from this meeting notes text...",
        "Analyze the sentiment of this customer review and draft a reply...",
        "Convert this raw CSV data string into a clean JSON summary...",
    ],
}


class StudioConfig(BaseModel):
    """Client configuration, built once at process start.

    The gateway receives this object by reference instead of reading
    the environment itself. A missing API key is allowed here and only
    surfaces as ConfigurationError on the first model call.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, description="Gemini API key")
    model: str = Field(default=GEMINI_FLASH_MODEL, description="Default model identifier")
    pro_model: str = Field(default=GEMINI_PRO_MODEL, description="Higher-capability model identifier")
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None = wait for the provider)"
    )
    log_level: str = Field(default="WARNING", description="Log level for the gemstudio logger")

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "StudioConfig":
        """Build configuration from environment variables.

        Environment variables:
            GEMINI_API_KEY: Gemini API key (falls back to API_KEY)
            GEMINI_MODEL: Model identifier (default: gemini-2.5-flash)
            GEMINI_TIMEOUT: Request timeout in seconds (default: none)
            GEMSTUDIO_LOG_LEVEL: Log level (default: WARNING)
        """
        timeout = os.getenv("GEMINI_TIMEOUT")
        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None,
            model=os.getenv("GEMINI_MODEL", GEMINI_FLASH_MODEL),
            timeout=float(timeout) if timeout else None,
            log_level=os.getenv("GEMSTUDIO_LOG_LEVEL", "WARNING"),
        )

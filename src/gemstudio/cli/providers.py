"""Gateway construction for CLI commands.

Centralizes creation of the configuration and gateway from environment
variables so commands never read the environment themselves.
"""

from rich.console import Console

from ..config import StudioConfig
from ..llm import ModelGateway, create_gateway
from ..log import configure_logging

# Default console for output
_console = Console()


def get_config(verbose: bool = False) -> StudioConfig:
    """Read configuration once and set up logging from it."""
    config = StudioConfig.from_env()
    configure_logging("DEBUG" if verbose else config.log_level)
    return config


def get_gateway(config: StudioConfig, console: Console | None = None) -> ModelGateway:
    """Create the Gemini gateway.

    A missing key is reported as a warning here; the first model call
    fails with ConfigurationError.
    """
    con = console or _console
    if not config.has_credentials:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, model calls will fail[/yellow]")
    return create_gateway("gemini", config)

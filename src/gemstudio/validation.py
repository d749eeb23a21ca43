"""Response validation.

Converts raw model text into typed values. Dashboard payloads are either
fully valid or rejected; nothing is repaired or partially returned.
"""

import logging

from pydantic import ValidationError

from .contracts import DashboardSpec
from .errors import MalformedResponseError

logger = logging.getLogger(__name__)


def parse_dashboard(text: str) -> DashboardSpec:
    """Parse a structured-generation response into a DashboardSpec.

    Args:
        text: JSON text returned by the model

    Returns:
        Fully populated DashboardSpec

    Raises:
        MalformedResponseError: If the text is not JSON or misses a required field
    """
    try:
        return DashboardSpec.model_validate_json(text)
    except ValidationError as e:
        errors = e.errors()
        logger.warning("Dashboard response rejected (%d error(s))", len(errors))
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in errors[:3]
        )
        raise MalformedResponseError(f"Model returned an invalid dashboard: {detail}") from e


def coerce_text(text: str | None, fallback: str = "") -> str:
    """Return the model text, or `fallback` when it is missing or empty.

    Whitespace-only text is content and is returned unchanged.
    """
    return text or fallback

"""Error types raised by the studio core.

Every failure the core reports derives from StudioError, so callers can
convert the whole family into a user-visible message at one place.
"""


class StudioError(Exception):
    """Base class for all studio errors."""


class ConfigurationError(StudioError):
    """No API credential is configured."""


class EmptyResponseError(StudioError):
    """The model call succeeded but returned no text."""


class MalformedResponseError(StudioError):
    """The model returned text that does not satisfy the response contract."""


class TransportError(StudioError):
    """The provider call failed (network, quota, rejected request)."""


class UnsupportedFileError(StudioError):
    """An uploaded file has an extension the dashboard generator cannot read."""


class PanelBusyError(StudioError):
    """A request is already in flight on this panel."""

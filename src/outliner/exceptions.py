"""Exception hierarchy for Outliner.

Geometry stages never raise for degenerate input; these exceptions cover the
file and configuration layers around them.
"""


class OutlinerError(Exception):
    """Base exception for all Outliner errors."""

    pass


class OutlineError(OutlinerError):
    """Errors related to outline loading or saving."""

    pass


class OutlineLoadError(OutlineError):
    """Error loading an outline file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load outline '{path}': {reason}")


class OutlineSaveError(OutlineError):
    """Error saving an outline file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save outline '{path}': {reason}")


class OutlineFormatError(OutlineError):
    """Outline file content is not a valid point list."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid outline format '{path}': {details}")


class ConfigError(OutlinerError):
    """Errors in cleanup configuration."""

    pass


class InvalidCleanupModeError(ConfigError):
    """Value does not name a cleanup mode."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid cleanup mode {value!r}: expected none, normal, aggressive or 0-2"
        )

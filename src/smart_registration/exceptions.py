"""Custom exceptions for Smart Registration."""


class RegistrationError(Exception):
    """Base exception for registration planner errors."""

    pass


class InvalidTimeError(RegistrationError):
    """Clock time is not in HH:MM form."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid time: '{value}'. Expected 24-hour HH:MM (e.g. 09:00, 14:30)"
        )


class InvalidTimeRangeError(RegistrationError):
    """Time range is not in 'HH:MM - HH:MM' form."""

    def __init__(self, value: str, reason: str | None = None):
        self.value = value
        self.reason = reason
        message = f"Invalid time range: '{value}'. Expected 'HH:MM - HH:MM'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidFiltersError(RegistrationError):
    """Filter preferences are unusable."""

    def __init__(self, message: str):
        super().__init__(f"Invalid filters: {message}")


class CatalogLoadError(RegistrationError):
    """Scanned catalog could not be read."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Failed to load catalog from '{source}': {message}")


class InvalidTransitionError(RegistrationError):
    """Exclusion workflow was asked to move from a state that does not allow it."""

    def __init__(self, action: str, state: str):
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} while in state '{state}'")


class ConfigError(RegistrationError):
    """Planner configuration file is invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        location = f" in '{path}'" if path else ""
        super().__init__(f"Invalid configuration{location}: {message}")

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised for invalid or missing memory configuration."""


class StructuralError(ConfigurationError):
    """Config is not an object or carries keys outside the allow-list."""


class MissingRequiredFieldError(ConfigurationError):
    """A required field is absent or has the wrong type."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")


class UnsupportedValueError(ConfigurationError):
    """Unknown embedding provider, or a model missing from the dimension table."""


class RangeError(ConfigurationError):
    """A numeric field falls outside its allowed bounds."""


class EnvironmentResolutionError(ConfigurationError):
    """A ``${VAR}`` reference points at an unset or empty environment variable."""

    def __init__(self, variable: str, message: str | None = None) -> None:
        self.variable = variable
        super().__init__(message or f"Environment variable {variable} is not set")

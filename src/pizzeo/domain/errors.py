"""Domain exceptions."""

from typing import Any


class PizzeoError(Exception):
    """Base exception carrying an error code and structured details."""

    def __init__(self, code: str, **details: Any) -> None:
        self.code = code
        self.details = details
        message = f"{code}: {details}" if details else code
        super().__init__(message)

    def as_dict(self) -> dict[str, object]:
        """Return the error as a dictionary for API responses."""
        return {"code": self.code, "details": self.details}


class InvalidConfiguration(PizzeoError):
    """Raised when a recipe configuration cannot be evaluated."""


class AssistantAuthorizationError(PizzeoError):
    """Raised when the assistant provider rejects the configured credentials."""

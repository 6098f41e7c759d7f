"""Exception types raised by designscout operations."""

from __future__ import annotations

from typing import Sequence


class DesignScoutError(RuntimeError):
    """Base class for failures that abort a whole operation."""


class InvalidInputError(DesignScoutError, ValueError):
    """Raised when operation arguments are missing or malformed."""

    def __init__(self, message: str, errors: Sequence[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class OperationNotFoundError(DesignScoutError, KeyError):
    """Raised when an operation name is not registered."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f'Operation "{name}" not found. Available operations: {", ".join(self.available)}'
        )

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = ["DesignScoutError", "InvalidInputError", "OperationNotFoundError"]

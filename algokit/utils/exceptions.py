"""
Exception classes for algokit with helpful error messages.

Two kinds of failure exist in this library:

1. Rejected inputs to a maze generator (bad dimensions, start point outside
   the grid). These are *not* exceptions: generators return ``None``.
2. Programming errors, such as indexing a grid out of bounds or building a
   wall outside a region. These raise the exceptions defined here.
"""

from __future__ import annotations

from typing import Any


class AlgoKitError(Exception):
    """
    Base exception for algokit errors with context and suggestions.

    The formatted message contains:
    - The component that failed
    - Suggested action for resolution (optional)
    - Error code (optional)
    - Diagnostic data (optional)
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "algokit"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class GridIndexError(AlgoKitError, IndexError):
    """Raised when a grid is addressed outside its bounds or with a foreign cell."""

    def __init__(
        self,
        message: str,
        component: str = "Grid",
        diagnostic_data: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            component=component,
            suggested_action="Check coordinates against Grid.width and Grid.height",
            error_code="GRID_INDEX",
            diagnostic_data=diagnostic_data,
        )


class ConfigurationError(AlgoKitError, ValueError):
    """Raised when a parameter value is invalid outside of pydantic validation."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        valid_values: list[Any] | None = None,
        component: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }
        suggested_action = None
        if valid_values:
            choices = ", ".join(str(v) for v in valid_values)
            diagnostic_data["valid_values"] = choices
            suggested_action = f"Use one of: {choices}"

        super().__init__(
            message=f"Invalid value for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )
        self.parameter_name = parameter_name
        self.provided_value = provided_value

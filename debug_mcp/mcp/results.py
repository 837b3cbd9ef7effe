"""Tool result envelope and argument validation.

Every tool returns a ``ToolResult``: either a success payload or an
``{error, details}`` pair. ``validate_choice`` checks a string argument
against a closed set of values before a tool does any work.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional


@dataclass(frozen=True)
class ToolResult:
    """Result of a single tool execution.

    Attributes:
        payload: Result data (only for successful calls).
        error: Short error kind, e.g. "Invalid timezone" (only for failures).
        details: Human-readable explanation of the error.
    """

    payload: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    details: Optional[str] = None

    @classmethod
    def success(cls, payload: Dict[str, Any]) -> "ToolResult":
        """Create a successful result."""
        return cls(payload=dict(payload))

    @classmethod
    def failure(cls, error: str, details: str) -> "ToolResult":
        """Create a failed result."""
        return cls(error=error, details=details)

    @property
    def ok(self) -> bool:
        """Whether the tool call succeeded."""
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire form returned to MCP clients."""
        if self.ok:
            return dict(self.payload)
        return {"error": self.error, "details": self.details}


def validate_choice(
    value: Any,
    allowed: Iterable[str],
    parameter: str,
    hint: Optional[str] = None,
) -> Optional[ToolResult]:
    """Check that ``value`` is one of ``allowed``.

    Args:
        value: Value supplied by the caller.
        allowed: Accepted values. Order is used only in the error message;
            sets are listed in sorted order.
        parameter: Parameter name used in messages (e.g. "section").
        hint: Text shown instead of the full list of accepted values, for
            large sets such as timezone identifiers.

    Returns:
        None when the value is accepted, otherwise a failed ``ToolResult``.
    """
    if not isinstance(allowed, (set, frozenset)):
        allowed = list(allowed)
    if isinstance(value, str) and value in allowed:
        return None

    if hint is None:
        # unordered input is listed alphabetically
        names = sorted(allowed) if isinstance(allowed, (set, frozenset)) else allowed
        hint = f"Use one of: {', '.join(names)}"
    return ToolResult.failure(
        f"Invalid {parameter}",
        f'{parameter.capitalize()} "{value}" is not valid. {hint}',
    )


__all__ = ["ToolResult", "validate_choice"]

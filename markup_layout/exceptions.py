"""Custom exceptions for markup layout."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .engine.geometry import Point


class MarkupLayoutError(Exception):
    """Base exception for markup layout errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(MarkupLayoutError):
    """Exception raised when markup text cannot be turned into a node tree."""

    pass


class ConfigError(MarkupLayoutError):
    """Exception raised for invalid layout configuration."""

    pass


class LayoutError(MarkupLayoutError):
    """
    Exception raised when a layout pass fails.

    ``position`` holds the cursor position at the point of failure. Draw
    calls issued before the failure are not rolled back.
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        position: Optional["Point"] = None,
    ):
        super().__init__(message, details)
        self.position = position


class FontResolutionError(LayoutError):
    """Exception raised when a font name cannot be resolved."""

    def __init__(self, name: str, details: Optional[str] = None):
        super().__init__(f"cannot resolve font '{name}'", details)
        self.name = name


class UnsupportedElementError(LayoutError):
    """Exception raised for a markup element with no layout handler."""

    def __init__(self, tag: str, details: Optional[str] = None):
        super().__init__(f"'{tag}' not implemented", details)
        self.tag = tag


class MalformedInputError(LayoutError):
    """Exception raised when the node tree violates structural assumptions."""

    pass

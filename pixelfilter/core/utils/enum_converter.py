"""
Enum conversion utilities.

Provides standardized methods for converting between enums and strings,
with support for case-insensitive parsing.
"""

from typing import Any, Optional, Type, TypeVar

T = TypeVar("T")


def parse_enum(
    value: Any, enum_class: Type[T], default: Optional[T] = None, normalize: bool = False
) -> Optional[T]:
    """
    Parse value to enum with fallback to default.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Value returned when parsing fails
        normalize: Whether to lowercase string before parsing
            (for case-insensitive matching)

    Returns:
        Parsed enum value or default

    Example:
        >>> parse_enum("SOBEL", FilterOperation, normalize=True)
        >>> # Returns FilterOperation.SOBEL for "sobel", "Sobel", "SOBEL"
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    # None or missing value
    if value is None:
        return default

    # String value - try to parse
    try:
        str_value = value.strip().lower() if normalize else value
        return enum_class(str_value)
    except (ValueError, AttributeError):
        return default


def enum_to_string(value: Any) -> str:
    """
    Convert enum to string value, or pass through if already string.

    Example:
        >>> enum_to_string(FilterOperation.ERODE)
        >>> # Returns "erode"
    """
    return value.value if hasattr(value, "value") else value

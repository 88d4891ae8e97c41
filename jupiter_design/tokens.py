"""Design tokens: semantic colours, sizes and the provider that maps colours to CSS classes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class Color(str, Enum):
    """Semantic colour roles used by the style builders."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    SUCCESS = "Success"
    WARNING = "Warning"
    ERROR = "Error"
    SURFACE = "Surface"
    BACKGROUND = "Background"
    TEXT_PRIMARY = "TextPrimary"
    TEXT_SECONDARY = "TextSecondary"
    TEXT_INVERSE = "TextInverse"
    BORDER = "Border"
    INTERACTIVE = "Interactive"
    INTERACTIVE_HOVER = "InteractiveHover"
    INTERACTIVE_ACTIVE = "InteractiveActive"
    INTERACTIVE_DISABLED = "InteractiveDisabled"


class Size(str, Enum):
    """Component sizes."""

    XSMALL = "XSmall"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    XLARGE = "XLarge"


_DEFAULT_PALETTE: Mapping[Color, str] = MappingProxyType(
    {
        Color.PRIMARY: "jupiter-blue-500",
        Color.SECONDARY: "jupiter-navy-500",
        Color.SUCCESS: "green-500",
        Color.WARNING: "amber-500",
        Color.ERROR: "red-500",
        Color.SURFACE: "white",
        Color.BACKGROUND: "gray-50",
        Color.TEXT_PRIMARY: "gray-900",
        Color.TEXT_SECONDARY: "gray-600",
        Color.TEXT_INVERSE: "white",
        Color.BORDER: "gray-200",
        Color.INTERACTIVE: "jupiter-blue-500",
        Color.INTERACTIVE_HOVER: "jupiter-blue-600",
        Color.INTERACTIVE_ACTIVE: "jupiter-blue-700",
        Color.INTERACTIVE_DISABLED: "gray-300",
    }
)


class ColorProvider:
    """Resolves semantic colours to Tailwind colour names and utility classes.

    ``palette`` overrides entries of the default palette; its keys are
    :class:`Color` members or their string values.
    """

    def __init__(self, palette: Mapping[Color | str, str] | None = None) -> None:
        merged = dict(_DEFAULT_PALETTE)
        for key, value in (palette or {}).items():
            merged[Color(key)] = value
        self._palette: Mapping[Color, str] = MappingProxyType(merged)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._palette)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorProvider):
            return NotImplemented
        return dict(self._palette) == dict(other._palette)

    def __hash__(self) -> int:
        return hash(frozenset(self._palette.items()))

    def resolve_color(self, color: Color | str) -> str:
        """Return the colour name for a semantic colour, e.g. ``gray-900``."""
        return self._palette[Color(color)]

    def bg_class(self, color: Color | str) -> str:
        """Return the background utility class for a colour."""
        return f"bg-{self.resolve_color(color)}"

    def text_class(self, color: Color | str) -> str:
        """Return the text utility class for a colour."""
        return f"text-{self.resolve_color(color)}"

    def border_class(self, color: Color | str) -> str:
        """Return the border utility class for a colour."""
        return f"border-{self.resolve_color(color)}"
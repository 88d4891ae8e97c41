"""Chainable builder for layout CSS classes."""

from __future__ import annotations

from enum import Enum

from .tokens import Color, ColorProvider


class LayoutDivider(str, Enum):
    """Which edge of a layout section carries a divider border."""

    NONE = "None"
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"


class LayoutSpacing(str, Enum):
    """Internal padding of a layout section."""

    NONE = "None"
    XS = "XS"
    SM = "SM"
    MD = "MD"
    LG = "LG"
    XL = "XL"
    XL2 = "XL2"


class LayoutDirection(str, Enum):
    """Flex direction of a layout section."""

    VERTICAL = "Vertical"
    HORIZONTAL = "Horizontal"


class LayoutAlignment(str, Enum):
    """Alignment of items within a layout section."""

    START = "Start"
    CENTER = "Center"
    END = "End"
    BETWEEN = "Between"
    AROUND = "Around"
    EVENLY = "Evenly"


_DIVIDER_EDGES = {
    LayoutDivider.TOP: "border-t",
    LayoutDivider.BOTTOM: "border-b",
    LayoutDivider.LEFT: "border-l",
    LayoutDivider.RIGHT: "border-r",
}

_SPACING_CLASSES = {
    LayoutSpacing.NONE: "",
    LayoutSpacing.XS: "p-1",
    LayoutSpacing.SM: "p-2",
    LayoutSpacing.MD: "p-4",
    LayoutSpacing.LG: "p-6",
    LayoutSpacing.XL: "p-8",
    LayoutSpacing.XL2: "p-12",
}

_DIRECTION_CLASSES = {
    LayoutDirection.VERTICAL: "flex flex-col",
    LayoutDirection.HORIZONTAL: "flex flex-row",
}

_ALIGNMENT_CLASSES = {
    LayoutAlignment.START: "items-start justify-start",
    LayoutAlignment.CENTER: "items-center justify-center",
    LayoutAlignment.END: "items-end justify-end",
    LayoutAlignment.BETWEEN: "items-center justify-between",
    LayoutAlignment.AROUND: "items-center justify-around",
    LayoutAlignment.EVENLY: "items-center justify-evenly",
}


class LayoutStyles:
    """Fluent builder producing a Tailwind class string for a layout section.

    Each setter updates the builder and returns it, so calls chain. The
    resulting classes are sorted and free of duplicates.
    """

    def __init__(self, color_provider: ColorProvider) -> None:
        self._colors = color_provider
        self._divider = LayoutDivider.NONE
        self._spacing = LayoutSpacing.MD
        self._alignment: LayoutAlignment | None = None
        self._direction: LayoutDirection | None = None
        self._custom: list[str] = []

    # Divider

    def _set_divider(self, divider: LayoutDivider) -> LayoutStyles:
        self._divider = divider
        return self

    def divider_none(self) -> LayoutStyles:
        return self._set_divider(LayoutDivider.NONE)

    def divider_top(self) -> LayoutStyles:
        return self._set_divider(LayoutDivider.TOP)

    def divider_bottom(self) -> LayoutStyles:
        return self._set_divider(LayoutDivider.BOTTOM)

    def divider_left(self) -> LayoutStyles:
        return self._set_divider(LayoutDivider.LEFT)

    def divider_right(self) -> LayoutStyles:
        return self._set_divider(LayoutDivider.RIGHT)

    # Spacing

    def _set_spacing(self, spacing: LayoutSpacing) -> LayoutStyles:
        self._spacing = spacing
        return self

    def spacing_none(self) -> LayoutStyles:
        return self._set_spacing(LayoutSpacing.NONE)

    def spacing_xs(self) -> LayoutStyles:
        return self._set_spacing(LayoutSpacing.XS)

    def spacing_sm(self) -> LayoutStyles:
        return self._set_spacing(LayoutSpacing.SM)

    def spacing_md(self) -> LayoutStyles:
        return self._set_spacing(LayoutSpacing.MD)

    def spacing_lg(self) -> LayoutStyles:
        return self._set_spacing(LayoutSpacing.LG)

    def spacing_xl(self) -> LayoutStyles:
        return self._set_spacing(LayoutSpacing.XL)

    def spacing_xl2(self) -> LayoutStyles:
        return self._set_spacing(LayoutSpacing.XL2)

    # Direction

    def direction_vertical(self) -> LayoutStyles:
        self._direction = LayoutDirection.VERTICAL
        return self

    def direction_horizontal(self) -> LayoutStyles:
        self._direction = LayoutDirection.HORIZONTAL
        return self

    # Alignment

    def _set_alignment(self, alignment: LayoutAlignment) -> LayoutStyles:
        self._alignment = alignment
        return self

    def alignment_start(self) -> LayoutStyles:
        return self._set_alignment(LayoutAlignment.START)

    def alignment_center(self) -> LayoutStyles:
        return self._set_alignment(LayoutAlignment.CENTER)

    def alignment_end(self) -> LayoutStyles:
        return self._set_alignment(LayoutAlignment.END)

    def alignment_between(self) -> LayoutStyles:
        return self._set_alignment(LayoutAlignment.BETWEEN)

    def alignment_around(self) -> LayoutStyles:
        return self._set_alignment(LayoutAlignment.AROUND)

    def alignment_evenly(self) -> LayoutStyles:
        return self._set_alignment(LayoutAlignment.EVENLY)

    # Custom classes

    def custom(self, css_class: str) -> LayoutStyles:
        """Append one custom class."""
        self._custom.append(str(css_class))
        return self

    def custom_classes(self, classes: str) -> LayoutStyles:
        """Append the whitespace-separated classes of a string."""
        self._custom.extend(str(classes).split())
        return self

    def copy(self) -> LayoutStyles:
        """Return an independent builder with the same settings."""
        other = LayoutStyles(self._colors)
        other._divider = self._divider
        other._spacing = self._spacing
        other._alignment = self._alignment
        other._direction = self._direction
        other._custom = list(self._custom)
        return other

    # Output

    def classes(self) -> str:
        """Return the final class string."""
        return self.build()

    def build(self) -> str:
        """Return the final class string, sorted and deduplicated."""
        parts: list[str] = []
        edge = _DIVIDER_EDGES.get(self._divider)
        if edge:
            parts.append(f"{edge} {self._colors.border_class(Color.BORDER)}")
        parts.append(_SPACING_CLASSES[self._spacing])
        if self._direction is not None:
            parts.append(_DIRECTION_CLASSES[self._direction])
        if self._alignment is not None:
            parts.append(_ALIGNMENT_CLASSES[self._alignment])
        parts.extend(self._custom)
        return " ".join(sorted(set(" ".join(parts).split())))


def layout_styles(color_provider: ColorProvider) -> LayoutStyles:
    """Create a layout style builder."""
    return LayoutStyles(color_provider)


def card_header_styles(color_provider: ColorProvider) -> LayoutStyles:
    """Layout styles for a card header: bottom divider with medium padding."""
    return LayoutStyles(color_provider).divider_bottom().spacing_md()


def card_content_styles(color_provider: ColorProvider) -> LayoutStyles:
    """Layout styles for card content: medium padding with vertical gaps."""
    return LayoutStyles(color_provider).spacing_md().custom("space-y-4")


def card_footer_styles(color_provider: ColorProvider) -> LayoutStyles:
    """Layout styles for a card footer: top divider, horizontal, space between."""
    return (
        LayoutStyles(color_provider)
        .divider_top()
        .spacing_md()
        .direction_horizontal()
        .alignment_between()
    )
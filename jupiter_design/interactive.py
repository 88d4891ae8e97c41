"""Fluent builders for interactive elements grouped by pseudo-class state."""

from __future__ import annotations

from enum import Enum

from .tokens import Color, ColorProvider


class InteractiveBase:
    """Collects base classes and per-state classes for an interactive element.

    State groups are rendered as ``hover:(...)``, ``focus:(...)``,
    ``active:(...)`` and ``disabled:(...)`` after the base classes.
    """

    def __init__(self, color_provider: ColorProvider) -> None:
        self.color_provider = color_provider
        self.base_classes: list[str] = []
        self.hover_classes: list[str] = []
        self.focus_classes: list[str] = []
        self.active_classes: list[str] = []
        self.disabled_classes: list[str] = []

    def base(self, classes: str) -> InteractiveBase:
        """Add whitespace-separated classes that always apply."""
        self.base_classes.extend(classes.split())
        return self

    def hover(self) -> HoverBuilder:
        return HoverBuilder(self)

    def focus(self) -> FocusBuilder:
        return FocusBuilder(self)

    def active(self) -> ActiveBuilder:
        return ActiveBuilder(self)

    def disabled(self) -> DisabledBuilder:
        return DisabledBuilder(self)

    def build(self) -> str:
        """Return the final class string."""
        parts = list(self.base_classes)
        groups = (
            ("hover", self.hover_classes),
            ("focus", self.focus_classes),
            ("active", self.active_classes),
            ("disabled", self.disabled_classes),
        )
        parts.extend(f"{name}:({' '.join(items)})" for name, items in groups if items)
        return " ".join(parts)


class _StateBuilder:
    """Shared storage for the per-state builders."""

    def __init__(self, base: InteractiveBase, items: list[str]) -> None:
        self._base = base
        self._items = items

    def _add(self, *classes: str):
        self._items.extend(classes)
        return self


class HoverBuilder(_StateBuilder):
    """Adds classes applied on hover."""

    def __init__(self, base: InteractiveBase) -> None:
        super().__init__(base, base.hover_classes)

    def classes(self, classes: str) -> HoverBuilder:
        """Add arbitrary whitespace-separated hover classes."""
        return self._add(*classes.split())

    def border_primary(self) -> HoverBuilder:
        colors = self._base.color_provider
        return self._add(colors.border_class(Color.PRIMARY).replace("border-", ""))

    def bg_primary(self) -> HoverBuilder:
        colors = self._base.color_provider
        return self._add(colors.bg_class(Color.PRIMARY).replace("bg-", ""))

    def darken(self) -> HoverBuilder:
        colors = self._base.color_provider
        return self._add(colors.bg_class(Color.INTERACTIVE_HOVER).replace("bg-", ""))

    def scale_105(self) -> HoverBuilder:
        return self._add("scale-105")

    def shadow_md(self) -> HoverBuilder:
        return self._add("shadow-md")

    def shadow_lg(self) -> HoverBuilder:
        return self._add("shadow-lg")

    def focus(self) -> FocusBuilder:
        return FocusBuilder(self._base)

    def active(self) -> ActiveBuilder:
        return ActiveBuilder(self._base)

    def disabled(self) -> DisabledBuilder:
        return DisabledBuilder(self._base)

    def build(self) -> str:
        """Return the final class string."""
        return self._base.build()


class FocusBuilder(_StateBuilder):
    """Adds classes applied on focus."""

    def __init__(self, base: InteractiveBase) -> None:
        super().__init__(base, base.focus_classes)

    def classes(self, classes: str) -> FocusBuilder:
        """Add arbitrary whitespace-separated focus classes."""
        return self._add(*classes.split())

    def border_primary(self) -> FocusBuilder:
        colors = self._base.color_provider
        return self._add(colors.border_class(Color.PRIMARY).replace("border-", ""))

    def outline_none(self) -> FocusBuilder:
        return self._add("outline-none")

    def ring_primary(self) -> FocusBuilder:
        ring_color = (
            self._base.color_provider.resolve_color(Color.PRIMARY)
            .replace("bg-", "ring-")
            .replace("-500", "-300")
        )
        return self._add("ring-2", "ring-offset-2", ring_color)

    def hover(self) -> HoverBuilder:
        return HoverBuilder(self._base)

    def active(self) -> ActiveBuilder:
        return ActiveBuilder(self._base)

    def disabled(self) -> DisabledBuilder:
        return DisabledBuilder(self._base)

    def build(self) -> str:
        """Return the final class string."""
        return self._base.build()


class ActiveBuilder(_StateBuilder):
    """Adds classes applied while active."""

    def __init__(self, base: InteractiveBase) -> None:
        super().__init__(base, base.active_classes)

    def classes(self, classes: str) -> ActiveBuilder:
        """Add arbitrary whitespace-separated active classes."""
        return self._add(*classes.split())

    def scale_95(self) -> ActiveBuilder:
        return self._add("scale-95")

    def hover(self) -> HoverBuilder:
        return HoverBuilder(self._base)

    def focus(self) -> FocusBuilder:
        return FocusBuilder(self._base)

    def disabled(self) -> DisabledBuilder:
        return DisabledBuilder(self._base)

    def build(self) -> str:
        """Return the final class string."""
        return self._base.build()


class DisabledBuilder(_StateBuilder):
    """Adds classes applied when disabled."""

    def __init__(self, base: InteractiveBase) -> None:
        super().__init__(base, base.disabled_classes)

    def classes(self, classes: str) -> DisabledBuilder:
        """Add arbitrary whitespace-separated disabled classes."""
        return self._add(*classes.split())

    def opacity_50(self) -> DisabledBuilder:
        return self._add("opacity-50")

    def cursor_not_allowed(self) -> DisabledBuilder:
        return self._add("cursor-not-allowed")

    def build(self) -> str:
        """Return the final class string."""
        return self._base.build()


class InputBuilder:
    """Interactive builder specialised for text inputs."""

    def __init__(self, color_provider: ColorProvider) -> None:
        self._base = InteractiveBase(color_provider)

    def base_style(self) -> InputBuilder:
        return self.base_classes(
            "w-full px-4 py-3 border rounded-md transition-colors focus:outline-none"
        )

    def standard_style(self) -> InputBuilder:
        colors = self._base.color_provider
        return self.base_classes(
            "w-full px-4 py-3 rounded-md transition-colors focus:outline-none "
            f"{colors.border_class(Color.BORDER)} {colors.bg_class(Color.SURFACE)}"
        )

    def base_classes(self, classes: str) -> InputBuilder:
        self._base.base(classes)
        return self

    def hover(self) -> HoverBuilder:
        return self._base.hover()

    def focus(self) -> FocusBuilder:
        return self._base.focus()

    def disabled(self) -> DisabledBuilder:
        return self._base.disabled()

    def build(self) -> str:
        return self._base.build()


class ButtonVariant(str, Enum):
    """Variants understood by :class:`ButtonBuilder`."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    GHOST = "Ghost"


_BUTTON_BASE = (
    "inline-flex items-center justify-center px-4 py-2 font-medium rounded-md transition-colors"
)


class ButtonBuilder:
    """Interactive builder specialised for buttons."""

    def __init__(self, color_provider: ColorProvider) -> None:
        self._base = InteractiveBase(color_provider)
        self._variant = ButtonVariant.PRIMARY

    @property
    def variant(self) -> ButtonVariant:
        return self._variant

    def primary(self) -> ButtonBuilder:
        colors = self._base.color_provider
        self._variant = ButtonVariant.PRIMARY
        return self.base_classes(
            f"{_BUTTON_BASE} {colors.bg_class(Color.PRIMARY)} "
            f"{colors.text_class(Color.TEXT_INVERSE)}"
        )

    def secondary(self) -> ButtonBuilder:
        colors = self._base.color_provider
        self._variant = ButtonVariant.SECONDARY
        return self.base_classes(
            f"{_BUTTON_BASE} border {colors.bg_class(Color.SURFACE)} "
            f"{colors.text_class(Color.TEXT_PRIMARY)} {colors.border_class(Color.BORDER)}"
        )

    def ghost(self) -> ButtonBuilder:
        colors = self._base.color_provider
        self._variant = ButtonVariant.GHOST
        return self.base_classes(
            f"{_BUTTON_BASE} bg-transparent {colors.text_class(Color.TEXT_PRIMARY)}"
        )

    def base_classes(self, classes: str) -> ButtonBuilder:
        self._base.base(classes)
        return self

    def hover(self) -> HoverBuilder:
        return self._base.hover()

    def focus(self) -> FocusBuilder:
        return self._base.focus()

    def active(self) -> ActiveBuilder:
        return self._base.active()

    def disabled(self) -> DisabledBuilder:
        return self._base.disabled()

    def build(self) -> str:
        return self._base.build()


def interactive_input(color_provider: ColorProvider) -> InputBuilder:
    """Create an interactive input builder."""
    return InputBuilder(color_provider)


def interactive_button(color_provider: ColorProvider) -> ButtonBuilder:
    """Create an interactive button builder."""
    return ButtonBuilder(color_provider)


def interactive_element(color_provider: ColorProvider) -> InteractiveBase:
    """Create a generic interactive element builder."""
    return InteractiveBase(color_provider)
"""Chainable builder for card CSS classes."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .tokens import Color, ColorProvider


class CardElevation(str, Enum):
    """Shadow depth of a card."""

    FLAT = "Flat"
    SUBTLE = "Subtle"
    RAISED = "Raised"
    FLOATING = "Floating"
    MODAL = "Modal"


class CardSurface(str, Enum):
    """Background treatment of a card."""

    STANDARD = "Standard"
    ELEVATED = "Elevated"
    BRANDED = "Branded"
    GLASS = "Glass"
    DARK = "Dark"
    TRANSPARENT = "Transparent"


class CardSpacing(str, Enum):
    """Internal padding of a card."""

    NONE = "None"
    COMPACT = "Compact"
    STANDARD = "Standard"
    COMFORTABLE = "Comfortable"
    SPACIOUS = "Spacious"


class CardInteraction(str, Enum):
    """How a card responds to the pointer."""

    STATIC = "Static"
    HOVERABLE = "Hoverable"
    CLICKABLE = "Clickable"
    SELECTABLE = "Selectable"
    DRAGGABLE = "Draggable"


_ELEVATION_ALIASES = {
    "flat": CardElevation.FLAT,
    "none": CardElevation.FLAT,
    "subtle": CardElevation.SUBTLE,
    "low": CardElevation.SUBTLE,
    "raised": CardElevation.RAISED,
    "standard": CardElevation.RAISED,
    "floating": CardElevation.FLOATING,
    "high": CardElevation.FLOATING,
    "modal": CardElevation.MODAL,
    "highest": CardElevation.MODAL,
}

_SURFACE_ALIASES = {
    "standard": CardSurface.STANDARD,
    "white": CardSurface.STANDARD,
    "elevated": CardSurface.ELEVATED,
    "branded": CardSurface.BRANDED,
    "theme": CardSurface.BRANDED,
    "glass": CardSurface.GLASS,
    "dark": CardSurface.DARK,
    "transparent": CardSurface.TRANSPARENT,
    "clear": CardSurface.TRANSPARENT,
}

_SPACING_ALIASES = {
    "none": CardSpacing.NONE,
    "compact": CardSpacing.COMPACT,
    "sm": CardSpacing.COMPACT,
    "standard": CardSpacing.STANDARD,
    "md": CardSpacing.STANDARD,
    "comfortable": CardSpacing.COMFORTABLE,
    "lg": CardSpacing.COMFORTABLE,
    "spacious": CardSpacing.SPACIOUS,
    "xl": CardSpacing.SPACIOUS,
}

_INTERACTION_ALIASES = {
    "static": CardInteraction.STATIC,
    "none": CardInteraction.STATIC,
    "hoverable": CardInteraction.HOVERABLE,
    "hover": CardInteraction.HOVERABLE,
    "clickable": CardInteraction.CLICKABLE,
    "click": CardInteraction.CLICKABLE,
    "selectable": CardInteraction.SELECTABLE,
    "select": CardInteraction.SELECTABLE,
    "draggable": CardInteraction.DRAGGABLE,
    "drag": CardInteraction.DRAGGABLE,
}

_BASE_CLASSES = "rounded-lg border transition-all duration-300"

_ELEVATION_CLASSES = {
    CardElevation.FLAT: "shadow-none",
    CardElevation.SUBTLE: "shadow-sm",
    CardElevation.RAISED: "shadow-md",
    CardElevation.FLOATING: "shadow-lg",
    CardElevation.MODAL: "shadow-2xl",
}

_SPACING_CLASSES = {
    CardSpacing.NONE: "p-0",
    CardSpacing.COMPACT: "p-3",
    CardSpacing.STANDARD: "p-5",
    CardSpacing.COMFORTABLE: "p-6",
    CardSpacing.SPACIOUS: "p-8",
}

_INTERACTION_CLASSES = {
    CardInteraction.STATIC: "",
    CardInteraction.HOVERABLE: "hover:scale-101 hover:shadow-sm",
    CardInteraction.CLICKABLE: (
        "cursor-pointer hover:scale-105 active:scale-95 "
        "focus:outline-none focus:ring-2 focus:ring-offset-2"
    ),
    CardInteraction.SELECTABLE: (
        "cursor-pointer hover:scale-101 focus:outline-none focus:ring-2 focus:ring-offset-2"
    ),
    CardInteraction.DRAGGABLE: "cursor-move hover:scale-105 active:scale-95",
}

_FIXED_SURFACE_CLASSES = {
    CardSurface.BRANDED: (
        "bg-gradient-to-br from-jupiter-navy-900/80 to-jupiter-blue-900/80 "
        "border-white/10 text-white"
    ),
    CardSurface.GLASS: "bg-white/10 backdrop-blur-md border-white/20 text-white",
    CardSurface.DARK: "bg-gray-900 border-gray-700 text-white",
    CardSurface.TRANSPARENT: "bg-transparent border-transparent",
}

_HOVER_ELEVATION = {
    CardElevation.SUBTLE: "hover:shadow-md",
    CardElevation.RAISED: "hover:shadow-lg",
    CardElevation.FLOATING: "hover:shadow-xl",
}


class CardStyles:
    """Fluent builder producing a Tailwind class string for a card.

    Each setter updates the builder and returns it, so calls chain. The
    resulting classes are sorted and free of duplicates.
    """

    def __init__(self, color_provider: ColorProvider) -> None:
        self._colors = color_provider
        self._elevation = CardElevation.SUBTLE
        self._surface = CardSurface.STANDARD
        self._spacing = CardSpacing.STANDARD
        self._interaction = CardInteraction.STATIC
        self._selected = False
        self._custom: list[str] = []

    # Elevation

    def _set_elevation(self, elevation: CardElevation) -> CardStyles:
        self._elevation = elevation
        return self

    def flat_elevation(self) -> CardStyles:
        return self._set_elevation(CardElevation.FLAT)

    def subtle_elevation(self) -> CardStyles:
        return self._set_elevation(CardElevation.SUBTLE)

    def raised_elevation(self) -> CardStyles:
        return self._set_elevation(CardElevation.RAISED)

    def floating_elevation(self) -> CardStyles:
        return self._set_elevation(CardElevation.FLOATING)

    def modal_elevation(self) -> CardStyles:
        return self._set_elevation(CardElevation.MODAL)

    def elevation_str(self, elevation: str) -> CardStyles:
        """Set the elevation by name or alias; unknown names give subtle."""
        return self._set_elevation(_ELEVATION_ALIASES.get(elevation, CardElevation.SUBTLE))

    # Surface

    def _set_surface(self, surface: CardSurface) -> CardStyles:
        self._surface = surface
        return self

    def standard_surface(self) -> CardStyles:
        return self._set_surface(CardSurface.STANDARD)

    def elevated_surface(self) -> CardStyles:
        return self._set_surface(CardSurface.ELEVATED)

    def branded_surface(self) -> CardStyles:
        return self._set_surface(CardSurface.BRANDED)

    def glass_surface(self) -> CardStyles:
        return self._set_surface(CardSurface.GLASS)

    def dark_surface(self) -> CardStyles:
        return self._set_surface(CardSurface.DARK)

    def transparent_surface(self) -> CardStyles:
        return self._set_surface(CardSurface.TRANSPARENT)

    def surface_str(self, surface: str) -> CardStyles:
        """Set the surface by name or alias; unknown names give standard."""
        return self._set_surface(_SURFACE_ALIASES.get(surface, CardSurface.STANDARD))

    # Spacing

    def _set_spacing(self, spacing: CardSpacing) -> CardStyles:
        self._spacing = spacing
        return self

    def no_spacing(self) -> CardStyles:
        return self._set_spacing(CardSpacing.NONE)

    def compact_spacing(self) -> CardStyles:
        return self._set_spacing(CardSpacing.COMPACT)

    def standard_spacing(self) -> CardStyles:
        return self._set_spacing(CardSpacing.STANDARD)

    def comfortable_spacing(self) -> CardStyles:
        return self._set_spacing(CardSpacing.COMFORTABLE)

    def spacious_spacing(self) -> CardStyles:
        return self._set_spacing(CardSpacing.SPACIOUS)

    def spacing_str(self, spacing: str) -> CardStyles:
        """Set the spacing by name or alias; unknown names give standard."""
        return self._set_spacing(_SPACING_ALIASES.get(spacing, CardSpacing.STANDARD))

    # Interaction

    def _set_interaction(self, interaction: CardInteraction) -> CardStyles:
        self._interaction = interaction
        return self

    def static_interaction(self) -> CardStyles:
        return self._set_interaction(CardInteraction.STATIC)

    def hoverable_interaction(self) -> CardStyles:
        return self._set_interaction(CardInteraction.HOVERABLE)

    def clickable_interaction(self) -> CardStyles:
        return self._set_interaction(CardInteraction.CLICKABLE)

    def selectable_interaction(self) -> CardStyles:
        return self._set_interaction(CardInteraction.SELECTABLE)

    def draggable_interaction(self) -> CardStyles:
        return self._set_interaction(CardInteraction.DRAGGABLE)

    def interaction_str(self, interaction: str) -> CardStyles:
        """Set the interaction by name or alias; unknown names give static."""
        return self._set_interaction(
            _INTERACTION_ALIASES.get(interaction, CardInteraction.STATIC)
        )

    # State

    def selected(self, selected: bool) -> CardStyles:
        self._selected = bool(selected)
        return self

    def is_selected(self) -> CardStyles:
        return self.selected(True)

    # Custom classes

    def custom(self, css_class: str) -> CardStyles:
        """Append one custom class."""
        self._custom.append(str(css_class))
        return self

    def custom_classes(self, classes: str) -> CardStyles:
        """Append the whitespace-separated classes of a string."""
        self._custom.extend(str(classes).split())
        return self

    def custom_vec(self, classes: Iterable[str]) -> CardStyles:
        """Append each class of an iterable."""
        self._custom.extend(str(css_class) for css_class in classes)
        return self

    # Output

    def classes(self) -> str:
        """Return the final class string."""
        return self.build()

    def build(self) -> str:
        """Return the final class string, sorted and deduplicated."""
        parts = [
            _BASE_CLASSES,
            _ELEVATION_CLASSES[self._elevation],
            self._surface_classes(),
            _SPACING_CLASSES[self._spacing],
            _INTERACTION_CLASSES[self._interaction],
        ]
        if self._selected:
            ring = self._colors.resolve_color(Color.PRIMARY)
            ring = ring.replace("bg-", "").replace("-500", "-300")
            parts.append("ring-2 ring-offset-2")
            parts.append(f"ring-{ring}")
        if self._interaction in (CardInteraction.HOVERABLE, CardInteraction.CLICKABLE):
            parts.append(_HOVER_ELEVATION.get(self._elevation, ""))
        parts.extend(self._custom)
        return " ".join(sorted(set(" ".join(parts).split())))

    def _surface_classes(self) -> str:
        colors = self._colors
        if self._surface is CardSurface.STANDARD:
            background = Color.SURFACE
        elif self._surface is CardSurface.ELEVATED:
            background = Color.BACKGROUND
        else:
            return _FIXED_SURFACE_CLASSES[self._surface]
        return " ".join(
            (
                colors.bg_class(background),
                colors.text_class(Color.TEXT_PRIMARY),
                colors.border_class(Color.BORDER),
            )
        )


def card_styles(color_provider: ColorProvider) -> CardStyles:
    """Create a card style builder."""
    return CardStyles(color_provider)


def card_classes_from_strings(
    color_provider: ColorProvider,
    surface: str,
    elevation: str,
    spacing: str,
    interaction: str,
    selected: bool,
) -> str:
    """Build card classes from string props."""
    builder = (
        CardStyles(color_provider)
        .surface_str(surface)
        .elevation_str(elevation)
        .spacing_str(spacing)
        .interaction_str(interaction)
    )
    if selected:
        builder.selected(True)
    return builder.classes()
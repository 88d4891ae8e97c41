"""Chainable builder for button CSS classes."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .tokens import Color, ColorProvider, Size


class ButtonVariant(str, Enum):
    """Visual variants of a button."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    SUCCESS = "Success"
    WARNING = "Warning"
    ERROR = "Error"
    GHOST = "Ghost"
    LINK = "Link"


class ButtonState(str, Enum):
    """Interaction states of a button."""

    DEFAULT = "Default"
    HOVER = "Hover"
    ACTIVE = "Active"
    DISABLED = "Disabled"
    LOADING = "Loading"


_VARIANT_ALIASES = {
    "primary": ButtonVariant.PRIMARY,
    "secondary": ButtonVariant.SECONDARY,
    "outline": ButtonVariant.SECONDARY,
    "success": ButtonVariant.SUCCESS,
    "warning": ButtonVariant.WARNING,
    "error": ButtonVariant.ERROR,
    "danger": ButtonVariant.ERROR,
    "link": ButtonVariant.LINK,
}

_SIZE_ALIASES = {
    "xs": Size.XSMALL,
    "extra_small": Size.XSMALL,
    "sm": Size.SMALL,
    "small": Size.SMALL,
    "md": Size.MEDIUM,
    "medium": Size.MEDIUM,
    "lg": Size.LARGE,
    "large": Size.LARGE,
    "xl": Size.XLARGE,
    "extra_large": Size.XLARGE,
}

_STATE_ALIASES = {
    "default": ButtonState.DEFAULT,
    "hover": ButtonState.HOVER,
    "active": ButtonState.ACTIVE,
    "disabled": ButtonState.DISABLED,
    "loading": ButtonState.LOADING,
}

_BASE_CLASSES = (
    "inline-flex items-center justify-center font-medium transition-colors "
    "duration-200 disabled:opacity-50 disabled:cursor-not-allowed"
)

_SIZE_CLASSES = {
    Size.XSMALL: "px-2 py-1 text-xs rounded",
    Size.SMALL: "px-3 py-1.5 text-sm rounded",
    Size.MEDIUM: "px-4 py-2 text-sm rounded-md",
    Size.LARGE: "px-6 py-3 text-base rounded-md",
    Size.XLARGE: "px-8 py-4 text-lg rounded-lg",
}

_STATE_CLASSES = {
    ButtonState.DEFAULT: "",
    ButtonState.HOVER: "hover:scale-105",
    ButtonState.ACTIVE: "active:scale-95",
    ButtonState.DISABLED: "opacity-50 cursor-not-allowed",
    ButtonState.LOADING: "cursor-wait",
}


class ButtonStyles:
    """Fluent builder producing a Tailwind class string for a button.

    Each setter updates the builder and returns it, so calls chain.
    """

    def __init__(self, color_provider: ColorProvider) -> None:
        self._colors = color_provider
        self._variant = ButtonVariant.PRIMARY
        self._size = Size.MEDIUM
        self._state = ButtonState.DEFAULT
        self._full_width = False
        self._with_icon = False
        self._custom: list[str] = []

    # Variants

    def primary(self) -> ButtonStyles:
        return self.variant(ButtonVariant.PRIMARY)

    def secondary(self) -> ButtonStyles:
        return self.variant(ButtonVariant.SECONDARY)

    def success(self) -> ButtonStyles:
        return self.variant(ButtonVariant.SUCCESS)

    def warning(self) -> ButtonStyles:
        return self.variant(ButtonVariant.WARNING)

    def error(self) -> ButtonStyles:
        return self.variant(ButtonVariant.ERROR)

    def ghost(self) -> ButtonStyles:
        return self.variant(ButtonVariant.GHOST)

    def link(self) -> ButtonStyles:
        return self.variant(ButtonVariant.LINK)

    def variant(self, variant: ButtonVariant) -> ButtonStyles:
        self._variant = ButtonVariant(variant)
        return self

    def variant_str(self, variant: str) -> ButtonStyles:
        """Set the variant by name; aliases "outline" and "danger" are accepted, unknown names give primary."""
        self._variant = _VARIANT_ALIASES.get(variant, ButtonVariant.PRIMARY)
        return self

    # Sizes

    def extra_small(self) -> ButtonStyles:
        return self.size(Size.XSMALL)

    def small(self) -> ButtonStyles:
        return self.size(Size.SMALL)

    def medium(self) -> ButtonStyles:
        return self.size(Size.MEDIUM)

    def large(self) -> ButtonStyles:
        return self.size(Size.LARGE)

    def extra_large(self) -> ButtonStyles:
        return self.size(Size.XLARGE)

    def size(self, size: Size) -> ButtonStyles:
        self._size = Size(size)
        return self

    def size_str(self, size: str) -> ButtonStyles:
        """Set the size by name ("xs".."xl" or long forms); unknown names give medium."""
        self._size = _SIZE_ALIASES.get(size, Size.MEDIUM)
        return self

    # States

    def disabled(self) -> ButtonStyles:
        return self.state(ButtonState.DISABLED)

    def loading(self) -> ButtonStyles:
        return self.state(ButtonState.LOADING)

    def hover(self) -> ButtonStyles:
        return self.state(ButtonState.HOVER)

    def active(self) -> ButtonStyles:
        return self.state(ButtonState.ACTIVE)

    def state(self, state: ButtonState) -> ButtonStyles:
        self._state = ButtonState(state)
        return self

    def state_str(self, state: str) -> ButtonStyles:
        """Set the state by name; unknown names give the default state."""
        self._state = _STATE_ALIASES.get(state, ButtonState.DEFAULT)
        return self

    # Modifiers

    def full_width(self) -> ButtonStyles:
        self._full_width = True
        return self

    def with_icon(self) -> ButtonStyles:
        self._with_icon = True
        return self

    def custom(self, css_class: str) -> ButtonStyles:
        """Append one custom class."""
        self._custom.append(str(css_class))
        return self

    def custom_classes(self, classes: str) -> ButtonStyles:
        """Append the whitespace-separated classes of a string."""
        self._custom.extend(str(classes).split())
        return self

    def custom_vec(self, classes: Iterable[str]) -> ButtonStyles:
        """Append each class of an iterable."""
        self._custom.extend(str(css_class) for css_class in classes)
        return self

    # Output

    def classes(self) -> str:
        """Return the final class string."""
        return self.build()

    def build(self) -> str:
        """Return the final class string."""
        parts = [
            _BASE_CLASSES,
            _SIZE_CLASSES[self._size],
            self._variant_classes(),
            _STATE_CLASSES[self._state],
            "w-full" if self._full_width else "",
            "space-x-2" if self._with_icon else "",
            " ".join(self._custom),
        ]
        return " ".join(" ".join(parts).split())

    def _variant_classes(self) -> str:
        colors = self._colors
        inverse = colors.text_class(Color.TEXT_INVERSE)
        match self._variant:
            case ButtonVariant.PRIMARY:
                return " ".join(
                    (
                        colors.bg_class(Color.PRIMARY),
                        inverse,
                        f"hover:{colors.bg_class(Color.INTERACTIVE_HOVER)}",
                    )
                )
            case ButtonVariant.SECONDARY:
                return " ".join(
                    (
                        colors.bg_class(Color.SURFACE),
                        colors.text_class(Color.TEXT_PRIMARY),
                        colors.border_class(Color.BORDER),
                        "border",
                    )
                )
            case ButtonVariant.SUCCESS:
                return f"{colors.bg_class(Color.SUCCESS)} {inverse} hover:bg-green-600"
            case ButtonVariant.WARNING:
                return f"{colors.bg_class(Color.WARNING)} {inverse} hover:bg-amber-600"
            case ButtonVariant.ERROR:
                return f"{colors.bg_class(Color.ERROR)} {inverse} hover:bg-red-600"
            case ButtonVariant.GHOST:
                return " ".join(
                    (
                        "bg-transparent",
                        colors.text_class(Color.TEXT_PRIMARY),
                        f"hover:{colors.bg_class(Color.BACKGROUND)}",
                    )
                )
            case ButtonVariant.LINK:
                return f"bg-transparent {colors.text_class(Color.PRIMARY)} hover:underline"
        raise ValueError(f"unknown button variant: {self._variant!r}")


def button_styles(color_provider: ColorProvider) -> ButtonStyles:
    """Create a button style builder."""
    return ButtonStyles(color_provider)


def button_classes_from_strings(
    color_provider: ColorProvider,
    variant: str,
    size: str,
    disabled: bool,
    loading: bool,
    full_width: bool,
) -> str:
    """Build button classes from string props; loading takes precedence over disabled."""
    builder = ButtonStyles(color_provider).variant_str(variant).size_str(size)
    if loading:
        builder.loading()
    elif disabled:
        builder.disabled()
    if full_width:
        builder.full_width()
    return builder.classes()
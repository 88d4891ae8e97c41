import pytest

from jupiter_design.interactive import (
    ButtonBuilder,
    ButtonVariant,
    InputBuilder,
    interactive_button,
    interactive_element,
    interactive_input,
)
from jupiter_design.tokens import Color, ColorProvider


@pytest.fixture
def colors():
    return ColorProvider()


def test_interactive_input(colors):
    classes = (
        interactive_input(colors)
        .base_style()
        .hover()
        .border_primary()
        .shadow_md()
        .focus()
        .border_primary()
        .ring_primary()
        .outline_none()
        .disabled()
        .opacity_50()
        .build()
    )
    assert "w-full" in classes
    assert "hover:" in classes
    assert "focus:" in classes
    assert "disabled:" in classes


def test_interactive_button(colors):
    classes = (
        interactive_button(colors)
        .primary()
        .hover()
        .darken()
        .scale_105()
        .focus()
        .ring_primary()
        .active()
        .scale_95()
        .build()
    )
    assert "inline-flex" in classes
    assert "hover:" in classes
    assert "focus:" in classes
    assert "active:" in classes


def test_chaining_order_independence(colors):
    first = (
        interactive_input(colors)
        .base_style()
        .hover()
        .border_primary()
        .focus()
        .ring_primary()
        .build()
    )
    second = (
        interactive_input(colors)
        .base_style()
        .focus()
        .ring_primary()
        .hover()
        .border_primary()
        .build()
    )
    assert "hover:" in first and "focus:" in first
    assert first == second


def test_empty_element_builds_empty_string(colors):
    assert interactive_element(colors).build() == ""


def test_base_splits_whitespace(colors):
    assert interactive_element(colors).base("  a   b ").build() == "a b"


def test_groups_render_in_fixed_order(colors):
    classes = (
        interactive_element(colors)
        .base("x")
        .disabled()
        .opacity_50()
        .build()
    )
    element = interactive_element(colors).base("x")
    element.active().scale_95()
    element.focus().outline_none()
    element.hover().shadow_lg()
    element.disabled().cursor_not_allowed()
    full = element.build()
    positions = [full.index(f"{name}:(") for name in ("hover", "focus", "active", "disabled")]
    assert positions == sorted(positions)
    assert full.split()[0] == "x"
    assert classes.startswith("x disabled:(")


def test_hover_border_primary_strips_prefix(colors):
    classes = interactive_element(colors).hover().border_primary().shadow_md().build()
    assert classes == "hover:(jupiter-blue-500 shadow-md)"


def test_ring_primary_uses_lighter_shade(colors):
    classes = interactive_element(colors).focus().ring_primary().build()
    assert classes == "focus:(ring-2 ring-offset-2 jupiter-blue-300)"


def test_darken_and_bg_primary_follow_palette():
    custom = ColorProvider({Color.INTERACTIVE_HOVER: "brand-dark", Color.PRIMARY: "brand"})
    assert interactive_element(custom).hover().darken().build() == "hover:(brand-dark)"
    assert interactive_element(custom).hover().bg_primary().build() == "hover:(brand)"


def test_arbitrary_state_classes(colors):
    element = interactive_element(colors)
    element.hover().classes("u1 u2")
    element.focus().classes("f1")
    element.active().classes("a1")
    element.disabled().classes("d1")
    assert element.build() == "hover:(u1 u2) focus:(f1) active:(a1) disabled:(d1)"


def test_disabled_helpers(colors):
    classes = interactive_element(colors).disabled().opacity_50().cursor_not_allowed().build()
    assert classes == "disabled:(opacity-50 cursor-not-allowed)"


def test_input_standard_style_uses_theme(colors):
    classes = interactive_input(colors).standard_style().build().split()
    assert colors.border_class(Color.BORDER) in classes
    assert colors.bg_class(Color.SURFACE) in classes
    assert "w-full" in classes
    assert "border" not in classes


def test_input_base_style_and_extra_classes(colors):
    classes = InputBuilder(colors).base_style().base_classes("extra").build().split()
    assert classes[-1] == "extra"
    assert "border" in classes


def test_button_variants(colors):
    primary = ButtonBuilder(colors).primary()
    assert primary.variant is ButtonVariant.PRIMARY
    assert colors.bg_class(Color.PRIMARY) in primary.build().split()

    secondary = interactive_button(colors).secondary()
    tokens = secondary.build().split()
    assert secondary.variant is ButtonVariant.SECONDARY
    assert "border" in tokens
    assert "bg-white" in tokens
    assert "text-gray-900" in tokens

    ghost = interactive_button(colors).ghost()
    assert ghost.variant is ButtonVariant.GHOST
    assert "bg-transparent" in ghost.build().split()


def test_button_default_variant_has_no_classes(colors):
    builder = interactive_button(colors)
    assert builder.variant is ButtonVariant.PRIMARY
    assert builder.build() == ""


def test_button_disabled_state(colors):
    classes = interactive_button(colors).ghost().disabled().opacity_50().build()
    assert classes.endswith("disabled:(opacity-50)")
    assert classes.startswith("inline-flex")
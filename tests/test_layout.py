import pytest

from jupiter_design.layout import (
    LayoutStyles,
    card_content_styles,
    card_footer_styles,
    card_header_styles,
    layout_styles,
)
from jupiter_design.tokens import Color, ColorProvider


@pytest.fixture
def colors():
    return ColorProvider()


def test_layout_styles_new(colors):
    classes = LayoutStyles(colors).classes()
    assert "p-4" in classes
    assert "border" not in classes
    assert classes == "p-4"


def test_divider_none(colors):
    classes = LayoutStyles(colors).divider_none().spacing_none().classes()
    assert "border" not in classes


@pytest.mark.parametrize(
    "method, edge",
    [
        ("divider_top", "border-t"),
        ("divider_bottom", "border-b"),
        ("divider_left", "border-l"),
        ("divider_right", "border-r"),
    ],
)
def test_divider_methods(colors, method, edge):
    builder = getattr(LayoutStyles(colors), method)()
    classes = builder.spacing_none().classes()
    assert edge in classes.split()
    assert "border-gray-200" in classes.split()


def test_divider_uses_palette():
    provider = ColorProvider({Color.BORDER: "slate-300"})
    classes = LayoutStyles(provider).divider_top().spacing_none().classes()
    assert classes == "border-slate-300 border-t"


def test_spacing_none_has_no_padding(colors):
    classes = LayoutStyles(colors).spacing_none().classes()
    assert "p-" not in classes


@pytest.mark.parametrize(
    "method, expected",
    [
        ("spacing_xs", "p-1"),
        ("spacing_sm", "p-2"),
        ("spacing_md", "p-4"),
        ("spacing_lg", "p-6"),
        ("spacing_xl", "p-8"),
        ("spacing_xl2", "p-12"),
    ],
)
def test_spacing_methods(colors, method, expected):
    classes = getattr(LayoutStyles(colors), method)().classes()
    assert classes == expected


def test_direction_vertical(colors):
    classes = LayoutStyles(colors).direction_vertical().spacing_none().classes()
    assert classes.split() == ["flex", "flex-col"]


def test_direction_horizontal(colors):
    classes = LayoutStyles(colors).direction_horizontal().spacing_none().classes()
    assert classes.split() == ["flex", "flex-row"]


@pytest.mark.parametrize(
    "method, items, justify",
    [
        ("alignment_start", "items-start", "justify-start"),
        ("alignment_center", "items-center", "justify-center"),
        ("alignment_end", "items-end", "justify-end"),
        ("alignment_between", "items-center", "justify-between"),
        ("alignment_around", "items-center", "justify-around"),
        ("alignment_evenly", "items-center", "justify-evenly"),
    ],
)
def test_alignment_methods(colors, method, items, justify):
    classes = getattr(LayoutStyles(colors), method)().spacing_none().classes()
    assert items in classes.split()
    assert justify in classes.split()


def test_custom_single(colors):
    classes = LayoutStyles(colors).custom("custom-class").spacing_none().classes()
    assert "custom-class" in classes


def test_custom_classes_string(colors):
    classes = LayoutStyles(colors).custom_classes("class1 class2 class3").spacing_none().classes()
    assert classes.split() == ["class1", "class2", "class3"]


def test_custom_chained(colors):
    classes = LayoutStyles(colors).custom("first").custom("second").spacing_none().classes()
    assert "first" in classes
    assert "second" in classes


def test_card_header_styles(colors):
    classes = card_header_styles(colors).classes()
    assert "border-b" in classes
    assert "border-gray-200" in classes
    assert "p-4" in classes
    assert classes == "border-b border-gray-200 p-4"


def test_card_content_styles(colors):
    classes = card_content_styles(colors).classes()
    assert "p-4" in classes
    assert "space-y-4" in classes
    assert "border" not in classes


def test_card_footer_styles(colors):
    classes = card_footer_styles(colors).classes()
    assert classes == (
        "border-gray-200 border-t flex flex-row items-center justify-between p-4"
    )


def test_layout_styles_function(colors):
    assert "p-4" in layout_styles(colors).classes()


def test_complex_layout_composition(colors):
    classes = (
        LayoutStyles(colors)
        .divider_bottom()
        .spacing_lg()
        .direction_horizontal()
        .alignment_between()
        .custom("rounded-lg")
        .custom_classes("shadow-sm bg-white")
        .classes()
    )
    tokens = classes.split()
    for expected in (
        "border-b",
        "border-gray-200",
        "p-6",
        "flex",
        "flex-row",
        "items-center",
        "justify-between",
        "rounded-lg",
        "shadow-sm",
        "bg-white",
    ):
        assert expected in tokens


def test_class_deduplication(colors):
    classes = LayoutStyles(colors).custom("p-4").spacing_md().classes()
    assert classes.split().count("p-4") == 1


def test_classes_are_sorted(colors):
    classes = card_footer_styles(colors).custom("aaa").classes()
    tokens = classes.split()
    assert tokens == sorted(tokens)
    assert tokens[0] == "aaa"


def test_alignment_without_direction(colors):
    classes = LayoutStyles(colors).alignment_center().spacing_none().classes()
    assert "items-center" in classes
    assert "justify-center" in classes
    assert "flex" not in classes


def test_direction_with_alignment(colors):
    classes = (
        LayoutStyles(colors)
        .direction_horizontal()
        .alignment_between()
        .spacing_none()
        .classes()
    )
    assert classes == "flex flex-row items-center justify-between"


def test_empty_custom_classes(colors):
    classes = (
        LayoutStyles(colors)
        .custom("")
        .custom_classes("")
        .custom_classes("  ")
        .spacing_none()
        .classes()
    )
    assert '""' not in classes
    assert classes == ""


def test_build_alias(colors):
    styles = LayoutStyles(colors).divider_top().spacing_sm()
    classes1 = styles.copy().classes()
    classes2 = styles.build()
    assert classes1 == classes2


def test_copy_is_independent(colors):
    original = LayoutStyles(colors).spacing_sm()
    duplicate = original.copy().custom("extra").spacing_xl()
    assert original.classes() == "p-2"
    assert duplicate.classes() == "extra p-8"
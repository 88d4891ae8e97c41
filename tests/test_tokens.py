import pytest

from jupiter_design.tokens import Color, ColorProvider, Size


def test_default_primary_classes():
    colors = ColorProvider()
    assert colors.bg_class(Color.PRIMARY) == "bg-jupiter-blue-500"
    assert colors.text_class(Color.PRIMARY) == "text-jupiter-blue-500"


def test_default_semantic_classes():
    colors = ColorProvider()
    assert colors.text_class(Color.TEXT_PRIMARY) == "text-gray-900"
    assert colors.border_class(Color.BORDER) == "border-gray-200"
    assert colors.bg_class(Color.SURFACE) == "bg-white"
    assert colors.bg_class(Color.BACKGROUND) == "bg-gray-50"
    assert colors.text_class(Color.TEXT_INVERSE) == "text-white"


def test_status_colours():
    colors = ColorProvider()
    assert colors.bg_class(Color.SUCCESS) == "bg-green-500"
    assert colors.bg_class(Color.WARNING) == "bg-amber-500"
    assert colors.bg_class(Color.ERROR) == "bg-red-500"


@pytest.mark.parametrize("color", list(Color))
def test_class_prefixes_wrap_resolved_name(color):
    colors = ColorProvider()
    name = colors.resolve_color(color)
    assert name
    assert colors.bg_class(color).removeprefix("bg-") == name
    assert colors.text_class(color).removeprefix("text-") == name
    assert colors.border_class(color).removeprefix("border-") == name


def test_overrides_replace_only_given_colours():
    custom = ColorProvider({Color.PRIMARY: "custom-blue-600", "Secondary": "custom-green-600"})
    default = ColorProvider()
    assert custom.resolve_color(Color.PRIMARY) == "custom-blue-600"
    assert custom.resolve_color(Color.SECONDARY) == "custom-green-600"
    assert custom.resolve_color(Color.SUCCESS) == default.resolve_color(Color.SUCCESS)


def test_string_colour_values_accepted():
    colors = ColorProvider()
    assert colors.resolve_color("Primary") == colors.resolve_color(Color.PRIMARY)


def test_unknown_colour_raises():
    with pytest.raises(ValueError):
        ColorProvider().resolve_color("NoSuchColour")


def test_unknown_override_key_raises():
    with pytest.raises(ValueError):
        ColorProvider({"NoSuchColour": "red-100"})


def test_equality_follows_palette():
    assert ColorProvider() == ColorProvider()
    assert ColorProvider({Color.PRIMARY: "purple-600"}) != ColorProvider()
    assert hash(ColorProvider()) == hash(ColorProvider())


def test_size_round_trip():
    for size in Size:
        assert Size(size.value) is size
# jupiter-design

Chainable builders that turn design intent (variant, size, state, elevation,
spacing and so on) into Tailwind CSS class strings. The output is a plain
string, so you can use it in any template engine or front-end framework.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Colours

Every builder takes a `ColorProvider` from `jupiter_design.tokens`. The
provider maps the semantic colours in `Color` to Tailwind colour names. It
has a default palette, and you can replace entries of it with a mapping
whose keys are `Color` members or their string values (for example
`"Primary"`):

```python
from jupiter_design.tokens import Color, ColorProvider

colors = ColorProvider()
colors.resolve_color(Color.PRIMARY)   # "jupiter-blue-500"
colors.bg_class(Color.PRIMARY)        # "bg-jupiter-blue-500"
colors.text_class(Color.TEXT_PRIMARY) # "text-gray-900"
colors.border_class(Color.BORDER)     # "border-gray-200"

custom = ColorProvider({Color.PRIMARY: "purple-600"})
custom.bg_class(Color.PRIMARY)        # "bg-purple-600"
```

A key or colour that is not a `Color` value raises `ValueError`. The module
also defines `Size`, the sizes used by buttons.

## Buttons

`jupiter_design.button` provides `ButtonStyles`, `button_styles` and
`button_classes_from_strings`:

```python
from jupiter_design.button import ButtonStyles, button_classes_from_strings

classes = (
    ButtonStyles(colors)
    .success()
    .large()
    .full_width()
    .with_icon()
    .custom("shadow-xl")
    .classes()
)

# variant, size, disabled, loading, full_width
classes = button_classes_from_strings(colors, "outline", "lg", False, True, False)
```

- Variants: `primary` (the default), `secondary`, `success`, `warning`,
  `error`, `ghost`, `link`, or `variant(ButtonVariant...)`.
- `variant_str` accepts "primary", "secondary", "outline" (secondary),
  "success", "warning", "error", "danger" (error) and "link"; anything else,
  "ghost" included, gives primary.
- Sizes: `extra_small`, `small`, `medium` (the default), `large`,
  `extra_large`, or `size_str` with "xs"/"sm"/"md"/"lg"/"xl" or their long
  names; unknown strings give medium.
- States: `hover`, `active`, `disabled`, `loading`, or `state_str`;
  unknown strings give the default state. In `button_classes_from_strings`,
  loading wins over disabled.
- Extra classes: `custom` (one class), `custom_classes` (a
  whitespace-separated string) and `custom_vec` (an iterable).

`classes()` and `build()` return the same string, with surplus whitespace
removed.

## Cards

`jupiter_design.card` provides `CardStyles`, `card_styles` and
`card_classes_from_strings`, with the enums `CardElevation`, `CardSurface`,
`CardSpacing` and `CardInteraction`:

```python
from jupiter_design.card import CardStyles, card_classes_from_strings

classes = (
    CardStyles(colors)
    .elevated_surface()
    .raised_elevation()
    .comfortable_spacing()
    .clickable_interaction()
    .is_selected()
    .classes()
)

# surface, elevation, spacing, interaction, selected
classes = card_classes_from_strings(colors, "elevated", "raised", "comfortable", "clickable", False)
```

The `*_str` setters accept names and aliases (for example "none", "high",
"white", "theme", "sm", "lg", "hover", "click") and fall back to subtle
elevation, standard surface, standard spacing and static interaction.
Hoverable and clickable cards get a stronger hover shadow for subtle,
raised and floating elevations. Card output is sorted and free of duplicate
classes.

## Interactive elements

`jupiter_design.interactive` groups pseudo-class states as `hover:(...)`,
`focus:(...)`, `active:(...)` and `disabled:(...)` after the base classes.
`interactive_input`, `interactive_button` and `interactive_element` return
an `InputBuilder`, a `ButtonBuilder` and an `InteractiveBase`:

```python
from jupiter_design.interactive import interactive_input, interactive_button

interactive_input(colors).base_style() \
    .hover().border_primary().shadow_md() \
    .focus().ring_primary().outline_none() \
    .disabled().opacity_50() \
    .build()

interactive_button(colors).primary() \
    .hover().darken().scale_105() \
    .active().scale_95() \
    .build()
```

Each state builder also has `classes(...)` for arbitrary classes and can
move on to the other states; the disabled builder can only `build()`.

## Layout

`jupiter_design.layout` provides `LayoutStyles` and `layout_styles`, plus
ready-made card sections `card_header_styles`, `card_content_styles` and
`card_footer_styles`:

```python
from jupiter_design.layout import LayoutStyles, card_footer_styles

LayoutStyles(colors).divider_bottom().spacing_lg() \
    .direction_horizontal().alignment_between().classes()

card_footer_styles(colors).classes()
```

Spacing defaults to `spacing_md` (`p-4`); there is no divider, direction or
alignment unless you set one. `copy()` returns an independent builder.
Layout output is sorted and free of duplicate classes.

## What it does not do

The package only produces class strings. It renders no components, ships
no CSS or Tailwind configuration, and has no command-line interface.
"""Basic LumaGradient usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from lumagradient import (
    GradientType,
    add_stop,
    config_from_palette,
    css_declaration,
    default_config,
    render_image,
    set_noise,
    set_type,
    to_style_string,
)


def demonstrate_editing() -> None:
    # Start from the session default and tweak it the way the controls would.
    config = default_config()
    config = add_stop(config, color="#FFDBCA")
    config = set_noise(config, 0.25)
    print("Stops:", [(s.color, s.position) for s in config.stops])
    print("CSS:", css_declaration(config))

    palette = config_from_palette(["#0B132B", "#1C2541", "#3A506B", "#5BC0BE", "#6FFFE9"])
    print("Palette stops:", [(s.id, s.position) for s in palette.stops])


def demonstrate_rendering() -> None:
    # Render every algorithm to a PNG at 2x device pixel ratio.
    config = config_from_palette(["#FF5A19", "#FFDBCA", "#111111", "#7B7B7B", "#EEEEEE"])
    for gradient_type in GradientType:
        typed = set_type(config, gradient_type)
        image = render_image(typed, 320, 200, scale=2.0)
        image.save(f"gradient_{gradient_type.value}.png")
        print(gradient_type.value, image.size, to_style_string(typed) or "(image export only)")


if __name__ == "__main__":
    demonstrate_editing()
    demonstrate_rendering()

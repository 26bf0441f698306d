"""Drive the anchor drag controller with synthetic pointer events.

Run directly with:
    python examples/drag_anchors.py
"""
from lumagradient import (
    AnchorDragController,
    config_from_palette,
    render_image,
    resolve_anchors,
    set_type,
)

WIDTH, HEIGHT = 480, 320


def main() -> None:
    config = set_type(config_from_palette(["#FF5A19", "#FFDBCA", "#3A506B", "#6FFFE9"]), "mesh")
    controller = AnchorDragController()

    # Grab the third anchor and sweep it toward the center in a few steps.
    x, y = resolve_anchors(config, WIDTH, HEIGHT)[2]
    controller.pointer_down(config, x, y, WIDTH, HEIGHT)
    for step in range(1, 6):
        px = x + (WIDTH / 2 - x) * step / 5
        py = y + (HEIGHT / 2 - y) * step / 5
        config = controller.pointer_move(config, px, py, WIDTH, HEIGHT) or config
        print(f"move {step}: state={controller.state.value}",
              [(s.id, s.x, s.y) for s in config.stops if s.has_anchor])
    controller.pointer_up()

    render_image(config, WIDTH, HEIGHT).save("mesh_dragged.png")


if __name__ == "__main__":
    main()

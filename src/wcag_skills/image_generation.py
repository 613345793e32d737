"""Swatch image generation for color blindness simulations."""

import click
import matplotlib

matplotlib.use("Agg")

import matplotlib.patches as patches  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402

from .color_utils import Color, format_hex  # noqa: E402


def create_swatch_png(
    swatches: list[tuple[str, Color]],
    output_file: str,
    tile_size: int = 64,
    tile_margin: int = 8,
    label_height: int = 18,
) -> None:
    """Create a PNG with one labelled tile per color, laid out in a row.

    Args:
        swatches: ``(label, color)`` pairs; the first is usually the original
            color, followed by its simulations.
        output_file: Destination path of the PNG.
    """
    n_swatches = len(swatches)
    if n_swatches == 0:
        raise ValueError("No colors provided")

    w = n_swatches * (tile_size + tile_margin) + tile_margin
    h = tile_size + label_height + 2 * tile_margin

    fig, ax = plt.subplots(figsize=(w / 100, h / 100), dpi=100)  # type: ignore[misc]

    fig.patch.set_facecolor("white")
    ax.set_facecolor("white")

    ax.set_xlim(0, w)
    ax.set_ylim(0, h)
    ax.axis("off")

    for i, (label, color) in enumerate(swatches):
        x = tile_margin + i * (tile_size + tile_margin)
        y = tile_margin + label_height

        rect = patches.Rectangle(
            (x, y), tile_size, tile_size, linewidth=0, facecolor=color.normalized()
        )
        ax.add_patch(rect)
        ax.text(
            x + tile_size / 2,
            tile_margin + label_height / 2,
            f"{label}\n{format_hex(color)}",
            ha="center",
            va="center",
            fontsize=5,
        )

    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"Swatch PNG saved to: {output_file}", err=True)

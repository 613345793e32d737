"""Tests for swatch image generation."""

from unittest.mock import MagicMock, patch

import pytest

from wcag_skills.color_utils import Color
from wcag_skills.image_generation import create_swatch_png


class TestCreateSwatchPng:
    """Test the create_swatch_png function."""

    def test_empty_swatches_raises_error(self):
        with pytest.raises(ValueError, match="No colors provided"):
            create_swatch_png([], "test.png")

    def test_layout_and_save(self, tmp_path):
        """Test one tile per swatch and the figure geometry."""
        swatches = [
            ("original", Color(255, 0, 0)),
            ("protanopia", Color(0, 103, 139)),
        ]
        output = str(tmp_path / "swatch.png")

        with patch("matplotlib.pyplot.subplots") as mock_subplots, \
             patch("matplotlib.pyplot.tight_layout") as mock_tight_layout, \
             patch("matplotlib.pyplot.savefig") as mock_savefig, \
             patch("matplotlib.pyplot.close") as mock_close, \
             patch("click.echo") as mock_echo:

            mock_fig = MagicMock()
            mock_ax = MagicMock()
            mock_subplots.return_value = (mock_fig, mock_ax)

            create_swatch_png(swatches, output, tile_size=64, tile_margin=8, label_height=18)

            # w = 2 * (64 + 8) + 8, h = 64 + 18 + 2 * 8
            mock_subplots.assert_called_once_with(figsize=(152 / 100, 98 / 100), dpi=100)
            mock_ax.set_xlim.assert_called_once_with(0, 152)
            mock_ax.set_ylim.assert_called_once_with(0, 98)
            mock_ax.axis.assert_called_once_with("off")
            assert mock_ax.add_patch.call_count == 2
            assert mock_ax.text.call_count == 2
            mock_tight_layout.assert_called_once()
            mock_savefig.assert_called_once_with(output, bbox_inches="tight", pad_inches=0, dpi=100)
            mock_close.assert_called_once()
            mock_echo.assert_called_once_with(f"Swatch PNG saved to: {output}", err=True)

    def test_tile_colors_are_normalized(self):
        swatches = [("original", Color(255, 0, 51))]

        with patch("matplotlib.pyplot.subplots") as mock_subplots, \
             patch("matplotlib.pyplot.tight_layout"), \
             patch("matplotlib.pyplot.savefig"), \
             patch("matplotlib.pyplot.close"), \
             patch("click.echo"), \
             patch("matplotlib.patches.Rectangle") as mock_rectangle:

            mock_subplots.return_value = (MagicMock(), MagicMock())
            create_swatch_png(swatches, "out.png")

            _, kwargs = mock_rectangle.call_args
            assert kwargs["facecolor"] == (1.0, 0.0, 0.2)

    def test_writes_real_png(self, tmp_path):
        output = tmp_path / "real.png"
        with patch("click.echo"):
            create_swatch_png([("original", Color(0, 0, 0))], str(output))

        assert output.exists()
        assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

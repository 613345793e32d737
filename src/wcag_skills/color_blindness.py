"""Color vision deficiency simulation.

Colors are projected into LMS cone-response space, transformed with a
deficiency-specific matrix and projected back to sRGB. The matrices follow
the simulation constants published by Viénot et al. and Machado et al.; they
are used as given, not derived.
"""

import enum
from types import MappingProxyType
from typing import TypedDict

import numpy as np

from .color_utils import Color, format_hex

__all__ = [
    "Deficiency",
    "RGB_TO_LMS",
    "LMS_TO_RGB",
    "TRANSFORMATION_MATRICES",
    "DESCRIPTIONS",
    "parse_deficiency",
    "rgb_to_lms",
    "lms_to_rgb",
    "simulate_color_blindness",
    "simulation_result",
    "simulate_all",
]


class Deficiency(enum.Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


def _frozen(rows: list[list[float]]) -> np.ndarray:
    matrix = np.array(rows, dtype=float)
    matrix.setflags(write=False)
    return matrix


RGB_TO_LMS = _frozen(
    [
        [17.8824, 43.5161, 4.11935],
        [3.45565, 27.1554, 3.86714],
        [0.0299566, 0.184309, 1.46709],
    ]
)

LMS_TO_RGB = _frozen(
    [
        [0.0809444479, -0.130504409, 0.116721066],
        [-0.0102485335, 0.0540193266, -0.113614708],
        [-0.000365296938, -0.00412161469, 0.693511405],
    ]
)

TRANSFORMATION_MATRICES = MappingProxyType(
    {
        Deficiency.PROTANOPIA: _frozen(
            [
                [0.567, 0.433, 0.000],
                [0.558, 0.442, 0.000],
                [0.000, 0.242, 0.758],
            ]
        ),
        Deficiency.DEUTERANOPIA: _frozen(
            [
                [0.625, 0.375, 0.000],
                [0.700, 0.300, 0.000],
                [0.000, 0.300, 0.700],
            ]
        ),
        Deficiency.TRITANOPIA: _frozen(
            [
                [0.950, 0.050, 0.000],
                [0.000, 0.433, 0.567],
                [0.000, 0.475, 0.525],
            ]
        ),
    }
)

DESCRIPTIONS = MappingProxyType(
    {
        Deficiency.PROTANOPIA: "Red-blind (missing red cones) - affects ~2% of males",
        Deficiency.DEUTERANOPIA: "Green-blind (missing green cones) - affects ~6% of males",
        Deficiency.TRITANOPIA: "Blue-blind (missing blue cones) - affects ~0.003% of population",
    }
)


class SimulationResult(TypedDict):
    original: str
    simulated: str
    type: str
    description: str


def parse_deficiency(value: str | None) -> Deficiency:
    """Look up a deficiency by name; unknown names are an error."""
    supported = ", ".join(d.value for d in Deficiency)
    if not value:
        raise ValueError(f"Missing color blindness type. Supported: {supported}")
    try:
        return Deficiency(value.strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown color blindness type: '{value}'. Supported: {supported}"
        ) from None


def rgb_to_lms(color: Color) -> np.ndarray:
    """Project an 8-bit color into LMS space."""
    return RGB_TO_LMS @ np.array(color.normalized())


def lms_to_rgb(lms: np.ndarray) -> Color:
    """Project LMS back to sRGB, clamping each channel to the gamut."""
    rgb = np.clip(LMS_TO_RGB @ lms, 0.0, 1.0)
    r, g, b = (int(round(float(c) * 255)) for c in rgb)
    return Color(r, g, b)


def simulate_color_blindness(color: Color, deficiency: Deficiency) -> Color:
    """Return how ``color`` appears to someone with ``deficiency``."""
    matrix = TRANSFORMATION_MATRICES[deficiency]
    return lms_to_rgb(matrix @ rgb_to_lms(color))


def simulation_result(color: Color, deficiency: Deficiency) -> SimulationResult:
    simulated = simulate_color_blindness(color, deficiency)
    return SimulationResult(
        original=format_hex(color),
        simulated=format_hex(simulated),
        type=deficiency.value,
        description=DESCRIPTIONS[deficiency],
    )


def simulate_all(color: Color) -> dict[Deficiency, Color]:
    """Simulate every supported deficiency, in enumeration order."""
    return {d: simulate_color_blindness(color, d) for d in Deficiency}

"""
Point layout generation.

Each game is played on one of ten fixed geometric patterns. The pattern is
the only random choice: once it is picked, point positions follow closed-form
grid or trigonometric offsets from the centre of the plane. Offsets are
multiplied by the layout scale so that a board drawn at a different size keeps
the same proportions (and the same edge legality outcomes, since the legality
thresholds are scaled by the same factor).

The order in which a pattern emits its points defines the point indices used
by the board and the engine.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional, Union

import numpy as np
import structlog

from ..utils.random import RandomSource, random_choice, resolve_prng

logger = structlog.get_logger()

# Plane used when the caller has no size yet, and the smallest plane allowed
DEFAULT_WIDTH = 900.0
DEFAULT_HEIGHT = 520.0
MIN_WIDTH = 300.0
MIN_HEIGHT = 200.0

PointList = List[List[float]]


class LayoutPattern(str, Enum):
    """Available point arrangements."""

    HEXAGONAL_GRID = "hexagonal_grid"
    CONCENTRIC_RINGS = "concentric_rings"
    TRIANGULAR_GRID = "triangular_grid"
    SQUARE_GRID = "square_grid"
    STAR = "star"
    DIAMOND = "diamond"
    SPIRAL = "spiral"
    FLOWER = "flower"
    DOUBLE_HEXAGON = "double_hexagon"
    OCTAGON = "octagon"


class LayoutConfig(NamedTuple):
    """Plane size and scale for layout generation."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    scale: float = 1.0


@dataclass(frozen=True, eq=False)
class Layout:
    """A generated point set."""

    pattern: LayoutPattern
    points: np.ndarray  # (n, 2) array of [x, y]
    center: tuple

    def __len__(self):
        return len(self.points)


def plane_size(width: float, height: float) -> tuple:
    """Apply the default-size fallback and the minimum plane size."""
    w = max(MIN_WIDTH, DEFAULT_WIDTH if width == 0 else width)
    h = max(MIN_HEIGHT, DEFAULT_HEIGHT if height == 0 else height)
    return w, h


def _ring(cx, cy, radius, count, phase=0.0) -> PointList:
    """``count`` evenly spaced points on a circle, starting at ``phase``."""
    return [
        [
            cx + radius * math.cos(phase + 2 * math.pi * i / count),
            cy + radius * math.sin(phase + 2 * math.pi * i / count),
        ]
        for i in range(count)
    ]


def create_hexagonal_grid(cx: float, cy: float, scale: float = 1.0) -> PointList:
    """Five staggered rows, widest in the middle."""
    spacing = 60 * scale
    points = []
    for row in range(-2, 3):
        cols = 4 - abs(row)
        # Odd rows shift towards the sign of the row
        shift = math.copysign(abs(row) % 2, row) * spacing / 2
        for col in range(-cols, cols + 1):
            points.append([cx + col * spacing + shift, cy + row * spacing * 0.866])
    return points


def create_concentric_rings(cx: float, cy: float, scale: float = 1.0) -> PointList:
    """Centre dot plus rings of 6, 8 and 10 dots."""
    points = [[cx, cy]]
    for count, radius in zip((6, 8, 10), (60, 110, 160)):
        points.extend(_ring(cx, cy, radius * scale, count))
    return points


def create_triangular_grid(cx: float, cy: float, scale: float = 1.0) -> PointList:
    """Rows of 5, 4, 3, 2 and 1 dots forming a triangle."""
    spacing = 65 * scale
    points = []
    for row in range(5):
        dots_in_row = 5 - row
        for col in range(dots_in_row):
            x = cx + (col - dots_in_row / 2.0) * spacing + row * spacing / 2
            y = cy - 100 * scale + row * spacing * 0.866
            points.append([x, y])
    return points


def create_square_grid(cx: float, cy: float, scale: float = 1.0) -> PointList:
    spacing = 70 * scale
    return [
        [cx + col * spacing, cy + row * spacing]
        for row in range(-2, 3)
        for col in range(-2, 3)
    ]


def create_star(cx: float, cy: float, scale: float = 1.0) -> PointList:
    """Centre plus three five-point rings; the middle ring is rotated."""
    top = -math.pi / 2
    points = [[cx, cy]]
    points.extend(_ring(cx, cy, 60 * scale, 5, top))
    points.extend(_ring(cx, cy, 120 * scale, 5, top + math.pi / 5))
    points.extend(_ring(cx, cy, 170 * scale, 5, top))
    return points


DIAMOND_OFFSETS = (
    (0, -60), (60, 0), (0, 60), (-60, 0),
    (0, -120), (80, -60), (120, 0), (80, 60),
    (0, 120), (-80, 60), (-120, 0), (-80, -60),
)


def create_diamond(cx: float, cy: float, scale: float = 1.0) -> PointList:
    points = [[cx, cy]]
    points.extend([cx + dx * scale, cy + dy * scale] for dx, dy in DIAMOND_OFFSETS)
    return points


def create_spiral(cx: float, cy: float, scale: float = 1.0) -> PointList:
    """Centre plus 20 points on an Archimedean-style spiral."""
    points = [[cx, cy]]
    angle = 0.0
    radius = 0.0
    for _ in range(20):
        angle += 0.8
        radius += 8 * scale
        points.append([cx + radius * math.cos(angle), cy + radius * math.sin(angle)])
    return points


def create_flower(cx: float, cy: float, scale: float = 1.0) -> PointList:
    """Centre plus six petals of three dots each."""
    points = [[cx, cy]]
    for petal in range(6):
        base_angle = math.pi * petal / 3
        for i in range(1, 4):
            radius = i * 50 * scale
            points.append(
                [cx + radius * math.cos(base_angle), cy + radius * math.sin(base_angle)]
            )
    return points


def create_double_hexagon(cx: float, cy: float, scale: float = 1.0) -> PointList:
    """Inner and outer hexagon with a rotated hexagon between them."""
    points = _ring(cx, cy, 60 * scale, 6)
    points.extend(_ring(cx, cy, 140 * scale, 6))
    points.extend(_ring(cx, cy, 100 * scale, 6, math.pi / 6))
    return points


def create_octagon(cx: float, cy: float, scale: float = 1.0) -> PointList:
    points = [[cx, cy]]
    points.extend(_ring(cx, cy, 70 * scale, 8))
    points.extend(_ring(cx, cy, 140 * scale, 8))
    return points


LAYOUTS: Dict[LayoutPattern, Callable[..., PointList]] = {
    LayoutPattern.HEXAGONAL_GRID: create_hexagonal_grid,
    LayoutPattern.CONCENTRIC_RINGS: create_concentric_rings,
    LayoutPattern.TRIANGULAR_GRID: create_triangular_grid,
    LayoutPattern.SQUARE_GRID: create_square_grid,
    LayoutPattern.STAR: create_star,
    LayoutPattern.DIAMOND: create_diamond,
    LayoutPattern.SPIRAL: create_spiral,
    LayoutPattern.FLOWER: create_flower,
    LayoutPattern.DOUBLE_HEXAGON: create_double_hexagon,
    LayoutPattern.OCTAGON: create_octagon,
}


def list_layouts() -> List[str]:
    """Names of all layout patterns, in selection order."""
    return [pattern.value for pattern in LAYOUTS]


def get_layout(name: Union[str, LayoutPattern]) -> Callable[..., PointList]:
    """
    Look up a layout function by pattern or pattern name.

    Raises:
        ValueError: If the name is not a known pattern
    """
    return LAYOUTS[LayoutPattern(name)]


def generate_layout(
    config: Optional[LayoutConfig] = None,
    prng: Optional[RandomSource] = None,
    pattern: Optional[Union[str, LayoutPattern]] = None,
) -> Layout:
    """
    Generate the point set for a new game.

    Args:
        config: Plane size and scale; defaults to a 900x520 plane at scale 1
        prng: Random source for pattern selection; defaults to the shared PRNG
        pattern: Force a specific pattern instead of drawing one

    Returns:
        Layout with the chosen pattern and an (n, 2) read-only point array
    """
    config = config or LayoutConfig()
    if config.scale <= 0:
        raise ValueError(f"Layout scale must be positive, got {config.scale}")

    if pattern is None:
        pattern = random_choice(resolve_prng(prng), list(LAYOUTS))
    else:
        pattern = LayoutPattern(pattern)

    width, height = plane_size(config.width, config.height)
    cx, cy = width / 2, height / 2

    points = np.array(LAYOUTS[pattern](cx, cy, config.scale), dtype=np.float64)
    points.setflags(write=False)

    logger.debug("Layout generated", pattern=pattern.value, points=len(points))
    return Layout(pattern=pattern, points=points, center=(cx, cy))

# layout.py

import logging
from collections import namedtuple

import constants

logger = logging.getLogger("four_worlds")

# Per-canvas-size geometry. Replaced wholesale on init and on every resize.
GeometrySnapshot = namedtuple('GeometrySnapshot', [
    'canvas_width', 'canvas_height',
    'center_x', 'center_y',
    'responsive_scale',
    'max_radius', 'dot_radius', 'layer_thickness', 'gap_size',
    'base_radii',
])


def compute_dimensions(viewport_width: float, viewport_height: float):
    """
    Fits the fixed base canvas inside the viewport minus padding.

    Data Contract:
    - Inputs: viewport_width, viewport_height (float) - Positive viewport size in pixels.
    - Outputs: (canvas_width, canvas_height, responsive_scale).
    - Invariants: responsive_scale lies in [MIN_RESPONSIVE_SCALE, MAX_RESPONSIVE_SCALE].
      The canvas keeps the base aspect ratio and is never upscaled past the base size.
    """
    fit = min(
        (viewport_width - constants.VIEWPORT_PADDING) / constants.BASE_WIDTH,
        (viewport_height - constants.VIEWPORT_PADDING) / constants.BASE_HEIGHT,
        1.0,
    )
    canvas_width = max(1.0, constants.BASE_WIDTH * fit)
    canvas_height = max(1.0, constants.BASE_HEIGHT * fit)

    responsive_scale = max(constants.MIN_RESPONSIVE_SCALE, min(constants.MAX_RESPONSIVE_SCALE, fit))
    return canvas_width, canvas_height, responsive_scale


def layer_radii(dot_radius: float, gap_size: float, layer_thickness: float):
    """
    Lays out one base radius per layer: a gap after the dot, then a gap after
    each layer, plus one layer thickness after every inner layer.
    """
    radii = []
    current_r = dot_radius
    for i in range(constants.NUM_LAYERS):
        current_r += gap_size
        radii.append(current_r)
        if i < constants.NUM_INNER_LAYERS:
            current_r += layer_thickness
    return tuple(radii)


def initialize_radii(responsive_scale: float, canvas_width: float = constants.BASE_WIDTH,
                     canvas_height: float = constants.BASE_HEIGHT) -> GeometrySnapshot:
    """
    Derives the static radii for equal gaps between the dot and the outer ring.

    gap_size = (max_radius - dot_radius - NUM_INNER_LAYERS * layer_thickness) / NUM_GAPS
    """
    max_radius = constants.MAX_RADIUS * responsive_scale
    dot_radius = constants.DOT_RADIUS * responsive_scale
    layer_thickness = constants.LAYER_THICKNESS * responsive_scale

    total_thickness = constants.NUM_INNER_LAYERS * layer_thickness
    gap_size = (max_radius - dot_radius - total_thickness) / constants.NUM_GAPS

    return GeometrySnapshot(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        center_x=canvas_width / 2,
        center_y=canvas_height / 2,
        responsive_scale=responsive_scale,
        max_radius=max_radius,
        dot_radius=dot_radius,
        layer_thickness=layer_thickness,
        gap_size=gap_size,
        base_radii=layer_radii(dot_radius, gap_size, layer_thickness),
    )


def layout_for_viewport(viewport_width: float, viewport_height: float) -> GeometrySnapshot:
    """Computes canvas size and a fresh GeometrySnapshot for a viewport."""
    canvas_width, canvas_height, responsive_scale = compute_dimensions(viewport_width, viewport_height)
    geometry = initialize_radii(responsive_scale, canvas_width, canvas_height)
    logger.debug(
        f"Layout for viewport {viewport_width}x{viewport_height}: "
        f"canvas={canvas_width:.1f}x{canvas_height:.1f}, scale={responsive_scale:.3f}, "
        f"gap_size={geometry.gap_size:.2f}"
    )
    return geometry

# sequencer.py

import math
import logging
from collections import namedtuple

import numba
import numpy as np

import constants
from color import BLACK, WHITE, Color, from_rgb, lerp_color, scale_rgb, with_alpha
from layout import layer_radii

logger = logging.getLogger("four_worlds")

# Presentation mode, selected once at init.
# - monochrome: every stroke and fill is black.
# - fade_to_white: colors blend towards white as contraction deepens.
# - layer_fade_out: inner layers fade back out late in the contraction.
# - reveal_span / reveal_ramp: layer i reveals from i/(NUM_LAYERS-1)*reveal_span
#   over a window of reveal_ramp contraction progress.
RenderStyle = namedtuple('RenderStyle', [
    'name', 'monochrome', 'fade_to_white', 'layer_fade_out', 'reveal_span', 'reveal_ramp',
])

STYLES = {
    'colored': RenderStyle('colored', monochrome=False, fade_to_white=True, layer_fade_out=True,
                           reveal_span=0.3, reveal_ramp=0.15),
    'monochrome': RenderStyle('monochrome', monochrome=True, fade_to_white=False, layer_fade_out=False,
                              reveal_span=0.8, reveal_ramp=0.2),
}

RingVisual = namedtuple('RingVisual', ['radius', 'color'])
LayerVisual = namedtuple('LayerVisual', ['index', 'alpha', 'rings', 'label'])
GapVisual = namedtuple('GapVisual', ['index', 'alpha', 'inner_radius', 'outer_radius', 'rings', 'fallback'])
Label = namedtuple('Label', ['text', 'x', 'y', 'color'])
DotVisual = namedtuple('DotVisual', ['radius', 'color'])

# Everything the renderer needs for one frame.
FrameLayout = namedtuple('FrameLayout', [
    'animation', 'stroke_weight', 'thin_weight', 'text_size',
    'center_label', 'gaps', 'layers', 'dot',
])


def get_style(name: str) -> RenderStyle:
    """Looks up a presentation preset by name."""
    try:
        return STYLES[name]
    except KeyError:
        raise ValueError(f"Unknown style '{name}'. Known styles: {sorted(STYLES)}") from None


# --- JIT-Compiled Filler Layout ---
# Numba freezes these module globals at compile time.
_THIN_PULSE = constants.THIN_PULSE
_THIN_GAP_PHASE_STEP = constants.THIN_GAP_PHASE_STEP
_THIN_PHASE_STEP = constants.THIN_PHASE_STEP


@numba.jit(nopython=True)
def _filler_radii_jit(inner_r, outer_r, end_gap, num_thins, time, gap, out):
    """
    Fills `out` with the pulsed radii of the thin circles of one gap.
    Returns True when the end margins did not fit and the circles were
    spaced evenly across the full gap instead.
    """
    total_gap_dist = outer_r - inner_r
    middle_space = total_gap_dist - 2 * end_gap
    fallback = not (middle_space > 0 and num_thins > 1)

    for j in range(num_thins):
        if fallback:
            base_r = inner_r + (j + 1) * total_gap_dist / (num_thins + 1)
        else:
            base_r = inner_r + end_gap + j * middle_space / (num_thins - 1)
        pulse = math.sin(time + gap * _THIN_GAP_PHASE_STEP + j * _THIN_PHASE_STEP) * _THIN_PULSE
        out[j] = base_r + pulse
    return fallback


def filler_radii(inner_r: float, outer_r: float, end_gap: float, time: float, gap: int):
    """
    Returns (radii, fallback) for the NUM_THINS filler circles of a gap.
    The fallback spacing applies exactly when the middle space is non-positive.
    """
    out = np.empty(constants.NUM_THINS, dtype=np.float64)
    fallback = _filler_radii_jit(float(inner_r), float(outer_r), float(end_gap),
                                 constants.NUM_THINS, float(time), gap, out)
    return out, bool(fallback)


def scaled_radii(geometry, scale_factor: float):
    """
    The snapshot layout recomputed with every measurement multiplied by
    scale_factor, so the whole structure breathes uniformly.
    """
    return np.array(layer_radii(
        geometry.dot_radius * scale_factor,
        geometry.gap_size * scale_factor,
        geometry.layer_thickness * scale_factor,
    ))


def layer_alphas(contract_progress: float, style: RenderStyle) -> np.ndarray:
    """
    Visibility alpha (0-255) of every layer.

    Inner layers reveal progressively from the centre outwards; in the
    fading style they also fade back out past a later threshold. The
    outermost layer is always fully visible.
    """
    idx = np.arange(constants.NUM_LAYERS, dtype=float)
    frac = idx / (constants.NUM_LAYERS - 1)
    outer = idx == constants.NUM_LAYERS - 1

    progress_threshold = np.where(outer, constants.OUTER_LAYER_THRESHOLD, frac * style.reveal_span)
    appear = np.clip((contract_progress - progress_threshold) / style.reveal_ramp, 0.0, 1.0)

    if style.layer_fade_out:
        fade_threshold = np.where(
            outer,
            constants.OUTER_LAYER_FADE_OUT,
            constants.LAYER_FADE_OUT_START + frac * constants.LAYER_FADE_OUT_SPAN,
        )
        fade = np.clip((contract_progress - fade_threshold) / constants.LAYER_FADE_OUT_RAMP, 0.0, 1.0)
        vis = appear * (1 - fade)
    else:
        vis = appear

    return vis * 255


def gap_alpha(gap: int, contract_progress: float) -> float:
    """Inner gaps appear first; the last gap reveals at GAP_REVEAL_SPAN."""
    threshold = (gap / (constants.NUM_GAPS - 1)) * constants.GAP_REVEAL_SPAN
    vis = max(0.0, (contract_progress - threshold) / constants.GAP_REVEAL_RAMP)
    return min(1.0, vis) * 255


def _base_color(layer: int, style: RenderStyle) -> Color:
    """Layer color; layer -1 is the central dot."""
    if style.monochrome:
        return BLACK
    if layer < 0:
        return from_rgb(constants.DOT_COLOR)
    return from_rgb(constants.LAYER_COLORS[layer])


def _faded(color: Color, amount: float, style: RenderStyle) -> Color:
    if not style.fade_to_white:
        return color
    return lerp_color(color, WHITE, amount)


def _sequence_gaps(geometry, animation, style, radii):
    scale = geometry.responsive_scale
    cp = animation.contract_progress
    end_gap = constants.THIN_END_GAP * scale
    gaps = []

    for gap in range(constants.NUM_GAPS):
        if gap == 0:
            inner_r = geometry.dot_radius * animation.scale_factor
        else:
            prev = gap - 1
            inner_r = radii[prev]
            if prev < constants.NUM_INNER_LAYERS:
                inner_r += geometry.layer_thickness * animation.scale_factor
        outer_r = radii[gap]

        alpha = gap_alpha(gap, cp)
        thin_radii, fallback = filler_radii(inner_r, outer_r, end_gap, animation.time, gap)

        inner_color = _base_color(gap - 1, style)
        outer_color = _base_color(gap, style)
        rings = []
        for j, r in enumerate(thin_radii):
            frac = j / (constants.NUM_THINS - 1)
            thin_color = _faded(lerp_color(inner_color, outer_color, frac), cp * constants.THIN_WHITE_FADE, style)
            rings.append(RingVisual(float(r), with_alpha(thin_color, alpha)))

        gaps.append(GapVisual(gap, alpha, float(inner_r), float(outer_r), tuple(rings), fallback))
    return gaps


def _sequence_layers(geometry, animation, style, radii, labels):
    scale = geometry.responsive_scale
    cp = animation.contract_progress
    time = animation.time
    alphas = layer_alphas(cp, style)
    layers = []

    for i in range(constants.NUM_LAYERS):
        alpha = float(alphas[i])
        base = _base_color(i, style)
        is_inner = i < constants.NUM_INNER_LAYERS

        # Second ring of a pair pulses in opposite phase.
        ring_specs = [(radii[i], 0.0)]
        if is_inner:
            ring_specs.append((radii[i] + geometry.layer_thickness * animation.scale_factor, math.pi))

        rings = []
        for base_radius, phase_offset in ring_specs:
            phase_sin = math.sin(time + i * constants.RING_PHASE_STEP + phase_offset)
            radius = base_radius + phase_sin * constants.RING_PULSE
            if style.monochrome:
                ring_color = base
            else:
                bright = constants.BRIGHTNESS_BASE + phase_sin * constants.BRIGHTNESS_SWING
                ring_color = _faded(scale_rgb(base, bright), cp, style)
            rings.append(RingVisual(float(radius), with_alpha(ring_color, alpha)))

        mid_r = radii[i] + (geometry.layer_thickness * animation.scale_factor / 2 if is_inner else 0)
        hebrew, english = labels[i + 1]
        label = Label(
            text=f"{hebrew} [{english}]",
            x=geometry.center_x + mid_r + constants.LAYER_LABEL_X_OFFSET * scale,
            y=geometry.center_y + (i * constants.LAYER_LABEL_Y_STEP + constants.LAYER_LABEL_Y_ORIGIN) * scale,
            color=Color(0, 0, 0, alpha),
        )
        layers.append(LayerVisual(i, alpha, tuple(rings), label))
    return layers


def sequence_frame(geometry, animation, style: RenderStyle, labels=constants.LABELS) -> FrameLayout:
    """
    Computes radius, alpha and color of every element for one frame.

    Data Contract:
    - Inputs:
        - geometry (GeometrySnapshot): Current per-canvas-size layout.
        - animation (AnimationState): Output of animation_clock.tick for this frame.
        - style (RenderStyle): Presentation preset.
        - labels (list): (hebrew, english) pairs, dot first then layers.
    - Outputs: FrameLayout. Pure; nothing is cached between frames.
    - Invariants: Each gap always carries exactly NUM_THINS filler rings.
      Pulses move radii only and never change alpha.
    """
    scale = geometry.responsive_scale
    radii = scaled_radii(geometry, animation.scale_factor)

    hebrew, english = labels[0]
    center_label = Label(
        text=f"{hebrew} [{english}]",
        x=geometry.center_x + constants.CENTER_LABEL_OFFSET[0] * scale,
        y=geometry.center_y + constants.CENTER_LABEL_OFFSET[1] * scale,
        color=Color(0, 0, 0, 255),
    )

    dot_radius = geometry.dot_radius * animation.scale_factor + math.sin(animation.time) * constants.DOT_PULSE
    dot_color = _faded(_base_color(-1, style), animation.contract_progress * constants.DOT_WHITE_FADE, style)

    stroke_weight = constants.STROKE_WEIGHT * scale
    return FrameLayout(
        animation=animation,
        stroke_weight=stroke_weight,
        thin_weight=stroke_weight / constants.THIN_WEIGHT_DIVISOR,
        text_size=constants.TEXT_SIZE * scale,
        center_label=center_label,
        gaps=_sequence_gaps(geometry, animation, style, radii),
        layers=_sequence_layers(geometry, animation, style, radii, labels),
        dot=DotVisual(dot_radius, with_alpha(dot_color, 255)),
    )

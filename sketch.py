# sketch.py

"""
Sketch Entry Points

The host owns the window and the loop; it hands the sketch a Canvas and
pumps these four functions:
- init(canvas) once, when the surface is ready.
- render_frame(state, frame_index) once per frame.
- resize(state, width, height) between frames, on viewport changes.
- teardown(state) once, on shutdown.

All mutable state lives on the SketchState returned by init.
"""

import logging

import constants
import animation_clock
import layout
import renderer
import sequencer

logger = logging.getLogger("four_worlds")


class SketchState:
    """
    State owned by one running sketch.

    Data Contract:
    - Inputs:
        - canvas (Canvas): The drawing surface provided by the host.
        - style (RenderStyle): Presentation preset, fixed for the sketch lifetime.
        - frame_rate (int): Target frames per second the host should pump at.
    - Invariants: `geometry` is only ever replaced as a whole. Once `active`
      is False the canvas has been released and no frames are drawn.
    """
    def __init__(self, canvas, style, frame_rate: int, geometry, labels=constants.LABELS):
        self.canvas = canvas
        self.style = style
        self.frame_rate = frame_rate
        self.geometry = geometry
        self.labels = labels
        self.active = True
        self.frames_rendered = 0


def init(canvas, style='colored', frame_rate: int = constants.FPS):
    """
    Allocates the canvas at the computed size and builds the initial geometry.

    Returns None, without raising, when the canvas is missing or not ready:
    the host may call this before its surface is mounted.
    Raises ValueError for an unknown style name.
    """
    if isinstance(style, str):
        style = sequencer.get_style(style)

    if canvas is None or not canvas.is_ready():
        logger.debug("Drawing surface not ready. Skipping sketch initialization.")
        return None

    viewport_width, viewport_height = canvas.viewport_size()
    geometry = layout.layout_for_viewport(viewport_width, viewport_height)
    canvas.allocate(geometry.canvas_width, geometry.canvas_height)

    state = SketchState(canvas, style, frame_rate, geometry)
    logger.info(
        f"Sketch initialized: style={style.name}, frame_rate={frame_rate}, "
        f"canvas={geometry.canvas_width:.0f}x{geometry.canvas_height:.0f}, "
        f"scale={geometry.responsive_scale:.3f}"
    )
    return state


def resize(state: SketchState, viewport_width: float, viewport_height: float):
    """Recomputes canvas size and geometry for a new viewport. No-op after teardown."""
    if state is None or not state.active:
        return
    geometry = layout.layout_for_viewport(viewport_width, viewport_height)
    state.canvas.allocate(geometry.canvas_width, geometry.canvas_height)
    state.geometry = geometry
    logger.info(
        f"Sketch resized to viewport {viewport_width}x{viewport_height} "
        f"(scale={geometry.responsive_scale:.3f})."
    )


def compose_frame(state: SketchState, frame_index: int):
    """Clock -> Sequencer for one frame, without drawing anything."""
    animation = animation_clock.tick(frame_index)
    return sequencer.sequence_frame(state.geometry, animation, state.style, state.labels)


def render_frame(state: SketchState, frame_index: int):
    """Draws one frame. Frames requested after teardown are ignored."""
    if state is None or not state.active:
        return
    frame = compose_frame(state, frame_index)
    renderer.draw_frame(state.canvas, state.geometry, frame)
    state.frames_rendered += 1


def teardown(state: SketchState):
    """Releases the canvas and stops any further drawing. Safe to call twice."""
    if state is None or not state.active:
        return
    state.active = False
    state.canvas.close()
    state.canvas = None
    logger.info(f"Sketch torn down after {state.frames_rendered} frames.")

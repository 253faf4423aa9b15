# renderer.py

import logging

import constants

logger = logging.getLogger("four_worlds")

# Gaps below this alpha are skipped entirely.
MIN_GAP_ALPHA = 1


def draw_frame(canvas, geometry, frame):
    """
    Issues the draw calls of one frame in a fixed order:
    background, centre label, filler circles gap by gap (inner to outer),
    main rings and label layer by layer (inner to outer), and the central
    pie wedge last so it sits on top.

    Data Contract:
    - Inputs:
        - canvas (Canvas): Allocated drawing surface.
        - geometry (GeometrySnapshot): Supplies the centre point.
        - frame (FrameLayout): Output of sequencer.sequence_frame.
    - Side Effects: Draws on and presents the canvas.
    - Invariants: Arcs always run from arc_start to arc_end, never as a
      separately closed circle, so the rotating gap is visible.
    """
    cx, cy = geometry.center_x, geometry.center_y
    start = frame.animation.arc_start
    end = frame.animation.arc_end

    canvas.background(constants.BACKGROUND_GRAY)

    label = frame.center_label
    canvas.text(label.text, label.x, label.y, frame.text_size, label.color)

    for gap in frame.gaps:
        if gap.alpha <= MIN_GAP_ALPHA:
            continue
        for ring in gap.rings:
            canvas.arc(cx, cy, ring.radius, start, end, ring.color, frame.thin_weight)

    for layer in frame.layers:
        if layer.alpha <= 0:
            continue
        for ring in layer.rings:
            canvas.arc(cx, cy, ring.radius, start, end, ring.color, frame.stroke_weight)
        canvas.text(layer.label.text, layer.label.x, layer.label.y, frame.text_size, layer.label.color)

    canvas.pie(cx, cy, frame.dot.radius, start, end, frame.dot.color)
    canvas.present()

# canvas.py

"""
Drawing Surfaces

The renderer only talks to a Canvas. Two implementations exist:
- PygameCanvas draws into an off-screen surface centred in a pygame window.
- RecordingCanvas records every call, for headless runs and tests.

Conventions (shared by both):
- Angles are radians measured clockwise on screen from the positive x axis,
  and an arc runs clockwise from `start` to `end`.
- Colors are color.Color values; alpha 0-255.
- Text is left-aligned and vertically centred on `y`.
"""

import math
import re
import logging
from collections import namedtuple

import pygame

import constants
from color import to_int_tuple

logger = logging.getLogger("four_worlds")

DrawCall = namedtuple('DrawCall', ['op', 'args'])

_HEBREW_RUN = re.compile(r'[\u0590-\u05FF]+(?:\s+[\u0590-\u05FF]+)*')


class Canvas:
    """Interface of a drawing surface handed to the sketch by its host."""

    def is_ready(self) -> bool:
        raise NotImplementedError

    def viewport_size(self):
        raise NotImplementedError

    def allocate(self, width: float, height: float):
        raise NotImplementedError

    def background(self, gray: int):
        raise NotImplementedError

    def arc(self, cx, cy, radius, start, end, color, weight):
        raise NotImplementedError

    def pie(self, cx, cy, radius, start, end, color):
        raise NotImplementedError

    def text(self, text, x, y, size, color):
        raise NotImplementedError

    def present(self):
        raise NotImplementedError

    def close(self):
        raise NotImplementedError


class RecordingCanvas(Canvas):
    """
    Records draw calls instead of rasterizing them.

    Data Contract:
    - Inputs: viewport (tuple) - (width, height) reported to the sketch.
              ready (bool) - What is_ready() reports.
    - Side Effects: Appends a DrawCall per operation to `calls`.
    """
    def __init__(self, viewport=(constants.BASE_WIDTH + constants.VIEWPORT_PADDING,
                                 constants.BASE_HEIGHT + constants.VIEWPORT_PADDING), ready=True):
        self.viewport = viewport
        self.ready = ready
        self.size = None
        self.calls = []
        self.frames_presented = 0
        self.closed = False

    def is_ready(self):
        return self.ready and not self.closed

    def viewport_size(self):
        return self.viewport

    def allocate(self, width, height):
        self.size = (width, height)
        self.calls.append(DrawCall('allocate', (width, height)))

    def background(self, gray):
        self.calls.append(DrawCall('background', (gray,)))

    def arc(self, cx, cy, radius, start, end, color, weight):
        self.calls.append(DrawCall('arc', (cx, cy, radius, start, end, color, weight)))

    def pie(self, cx, cy, radius, start, end, color):
        self.calls.append(DrawCall('pie', (cx, cy, radius, start, end, color)))

    def text(self, text, x, y, size, color):
        self.calls.append(DrawCall('text', (text, x, y, size, color)))

    def present(self):
        self.frames_presented += 1
        self.calls.append(DrawCall('present', ()))

    def close(self):
        self.closed = True

    def ops(self):
        """The sequence of operation names recorded so far."""
        return [call.op for call in self.calls]

    def clear(self):
        self.calls = []


def visual_order(text: str) -> str:
    """
    pygame lays text out left to right, so runs of Hebrew are reversed into
    visual order. Latin text is left untouched.
    """
    return _HEBREW_RUN.sub(lambda m: m.group(0)[::-1], text)


class PygameCanvas(Canvas):
    """
    Draws into an off-screen surface that is centred in the pygame window
    on present(). The window is the viewport; the canvas is sized by the
    layout engine to fit inside it.
    """
    def __init__(self, window: pygame.Surface, font_names=None):
        self.window = window
        self.font_names = font_names
        self.surface = None
        self._fonts = {}

    def is_ready(self):
        return self.window is not None and pygame.display.get_init()

    def viewport_size(self):
        return self.window.get_size()

    def allocate(self, width, height):
        size = (max(1, int(round(width))), max(1, int(round(height))))
        self.surface = pygame.Surface(size)
        logger.debug(f"Canvas allocated at {size[0]}x{size[1]}.")

    def background(self, gray):
        self.surface.fill((gray, gray, gray))

    def _blit_alpha(self, draw, cx, cy, extent):
        """
        pygame.draw writes pixels without blending, so translucent shapes
        are drawn onto a scratch SRCALPHA surface and blitted.
        """
        size = 2 * int(math.ceil(extent)) + 2
        scratch = pygame.Surface((size, size), pygame.SRCALPHA)
        draw(scratch, size / 2, size / 2)
        self.surface.blit(scratch, (int(round(cx - size / 2)), int(round(cy - size / 2))))

    def arc(self, cx, cy, radius, start, end, color, weight):
        rgba = to_int_tuple(color)
        if radius <= 0 or rgba[3] == 0:
            return
        width = max(1, int(round(weight)))
        # pygame strokes inward from the rect edge; p5 strokes centred on the path.
        outer = radius + width / 2

        def draw(target, x, y):
            rect = pygame.Rect(0, 0, int(round(2 * outer)), int(round(2 * outer)))
            rect.center = (int(round(x)), int(round(y)))
            # pygame angles run counterclockwise on screen.
            pygame.draw.arc(target, rgba, rect, -end, -start, width)

        self._blit_alpha(draw, cx, cy, outer)

    def pie(self, cx, cy, radius, start, end, color):
        rgba = to_int_tuple(color)
        if radius <= 0 or rgba[3] == 0:
            return
        steps = max(12, int(radius))

        def draw(target, x, y):
            points = [(x, y)]
            for k in range(steps + 1):
                theta = start + (end - start) * k / steps
                points.append((x + radius * math.cos(theta), y + radius * math.sin(theta)))
            pygame.draw.polygon(target, rgba, points)

        self._blit_alpha(draw, cx, cy, radius)

    def _font(self, size):
        px = max(1, int(round(size)))
        if px not in self._fonts:
            self._fonts[px] = pygame.font.SysFont(self.font_names, px)
        return self._fonts[px]

    def text(self, text, x, y, size, color):
        rgba = to_int_tuple(color)
        if rgba[3] == 0:
            return
        rendered = self._font(size).render(visual_order(text), True, rgba[:3])
        rendered.set_alpha(rgba[3])
        self.surface.blit(rendered, (int(round(x)), int(round(y - rendered.get_height() / 2))))

    def present(self):
        self.window.fill(constants.WHITE)
        win_w, win_h = self.window.get_size()
        can_w, can_h = self.surface.get_size()
        self.window.blit(self.surface, ((win_w - can_w) // 2, (win_h - can_h) // 2))
        pygame.display.flip()

    def close(self):
        self._fonts.clear()
        self.surface = None
        self.window = None

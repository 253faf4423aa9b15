# constants.py

"""
Sketch Constants

This module defines the fixed design values of the Four Worlds composition.
Run-level settings (style, frame rate, logging) live in config.json instead.

Data Contract:
- All values are immutable constants.
- Linear measurements are in pixels at a responsive scale of 1.0.
"""

import math

# Layout: fixed base canvas, scaled uniformly to fit the viewport
BASE_WIDTH = 800  # Pixels
BASE_HEIGHT = 600  # Pixels
VIEWPORT_PADDING = 40  # Pixels, subtracted from each viewport dimension
MIN_RESPONSIVE_SCALE = 0.4
MAX_RESPONSIVE_SCALE = 1.5

# Base measurements (multiplied by the responsive scale)
MAX_RADIUS = 300
DOT_RADIUS = 4
LAYER_THICKNESS = 8
STROKE_WEIGHT = 4
THIN_WEIGHT_DIVISOR = 5  # Filler strokes are STROKE_WEIGHT / 5
THIN_END_GAP = 10  # Empty margin at both ends of a gap
TEXT_SIZE = 12

# Label offsets (multiplied by the responsive scale)
CENTER_LABEL_OFFSET = (10, -20)
LAYER_LABEL_X_OFFSET = 5
LAYER_LABEL_Y_STEP = 15
LAYER_LABEL_Y_ORIGIN = -30

# Structure
NUM_LAYERS = 5  # Inner 4 layers have 2 rings, the outermost has 1
NUM_INNER_LAYERS = NUM_LAYERS - 1
NUM_GAPS = NUM_LAYERS
NUM_THINS = 10  # Filler circles per gap

# Animation clock
FPS = 30  # Frames per second
TIME_STEP = 0.0167  # Time units per frame
CYCLE_SPEED = 1.0  # Multiplier on time inside the contraction sine
ROTATION_SPEED = 1.0
MAX_CONTRACTION = 0.3  # Radii shrink to 70% at full contraction
MAX_GAP_ANGLE = math.pi / 18  # About 10 degrees

# Visibility sequencing
GAP_REVEAL_SPAN = 0.8  # Last gap reveals at this contraction progress
GAP_REVEAL_RAMP = 0.2
LAYER_FADE_OUT_START = 0.7
LAYER_FADE_OUT_SPAN = 0.3
LAYER_FADE_OUT_RAMP = 0.2
OUTER_LAYER_THRESHOLD = -1.0
OUTER_LAYER_FADE_OUT = 1.2  # Beyond the [0, 1] range: never fades

# Pulses
RING_PULSE = 3.0
THIN_PULSE = 2.0
DOT_PULSE = 1.0
RING_PHASE_STEP = 0.1
THIN_GAP_PHASE_STEP = 0.1
THIN_PHASE_STEP = 0.05
BRIGHTNESS_BASE = 0.8
BRIGHTNESS_SWING = 0.2
THIN_WHITE_FADE = 0.5
DOT_WHITE_FADE = 0.5

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BACKGROUND_GRAY = 255  # White background

DOT_COLOR = BLACK
LAYER_COLORS = [
    (255, 100, 100),  # Atzilut: Fire (bright red)
    (100, 100, 255),  # Beriah: Water (blue)
    (100, 255, 255),  # Yetzirah: Air (cyan)
    (100, 255, 100),  # Asiyah: Earth (green)
    (200, 100, 200),  # Boundary (purple)
]

# Labels: Hebrew with English translation including element.
# Index 0 is the central dot, 1..5 are layers 0..4.
LABELS = [
    ('אין סוף', 'Ein Sof [Infinite]'),
    ('אצילות', 'Atzilut [Emanation - Fire]'),
    ('בריאה', 'Beriah [Creation - Water]'),
    ('יצירה', 'Yetzirah [Formation - Air]'),
    ('עשיה', 'Asiyah [Action - Earth]'),
    ('גבול', 'Boundary [Cosmic Limit]'),
]

# Window Title
TITLE = "Four Worlds"

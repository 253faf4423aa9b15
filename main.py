# main.py

import json
import logging

import pygame

import constants
import logger_setup
import sketch
from canvas import PygameCanvas

# Get the application's dedicated logger
logger = logging.getLogger("four_worlds")

LOG_EVERY_FRAMES = 100


def run_loop(state, clock):
    """
    Pumps the sketch: events first, pending resize applied between frames,
    then one frame, throttled to the sketch frame rate.
    """
    running = True
    frame_index = 0

    while running:
        pending_size = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                # Only the latest size matters.
                pending_size = (event.w, event.h)

        if not running:
            break

        if pending_size is not None:
            sketch.resize(state, *pending_size)

        sketch.render_frame(state, frame_index)

        if frame_index % LOG_EVERY_FRAMES == 0:
            frame = sketch.compose_frame(state, frame_index)
            visible = sum(1 for layer in frame.layers if layer.alpha > 0)
            logger.debug(
                f"Frame={frame_index}, "
                f"ContractProgress={frame.animation.contract_progress:.3f}, "
                f"ScaleFactor={frame.animation.scale_factor:.3f}, "
                f"VisibleLayers={visible}, "
                f"FPS={clock.get_fps():.1f}"
            )

        clock.tick(state.frame_rate)
        frame_index += 1


def main():
    """
    Opens a resizable window, hands it to the sketch and runs until closed.
    """
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)
    sketch_config = config['sketch']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    pygame.init()
    window = pygame.display.set_mode(tuple(sketch_config['window_size']), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    canvas = PygameCanvas(window, font_names=sketch_config.get('font_names'))
    state = sketch.init(canvas, style=sketch_config['style'],
                        frame_rate=sketch_config.get('frame_rate', constants.FPS))
    if state is None:
        logger.error("Display surface was not ready. Nothing to draw.")
        pygame.quit()
        return

    try:
        run_loop(state, clock)
    finally:
        sketch.teardown(state)
        logger.info("Application shutting down.")
        pygame.quit()


if __name__ == "__main__":
    main()

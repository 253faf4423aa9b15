# logger_setup.py

import logging
import os
import json

LOGGER_NAME = "four_worlds"


def setup_logging(config_path='config.json'):
    """
    Sets up logging for the sketch.

    Reads the logging configuration, creates a run-specific log directory, and
    configures a dedicated application logger (not the root logger) to output
    to both the console and a log file. This keeps pygame and Numba chatter
    out of the sketch log.

    Data Contract:
    - Inputs: config_path (str) - Path to the configuration file.
    - Outputs: The configured logging.Logger.
    - Side Effects:
        - Configures the "four_worlds" logger.
        - Creates runs/<run_id>/ for the log file.
    - Invariants: Assumes the config file contains 'run_id' and a 'logging' dictionary
      with 'level' and 'format'.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = config['run_id']
    log_config = config['logging']

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config['level'])
    logger.propagate = False

    log_dir = os.path.join('runs', run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'sketch.log')

    formatter = logging.Formatter(log_config['format'])

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger

# logging_config.py

import os
import logging
import sys
from logging.handlers import RotatingFileHandler

def setup_logging(logs_dir=None):
    # Default to lads/logs - one level up from this file
    if logs_dir is None:
        root_dir = os.path.dirname(os.path.dirname(__file__))
        logs_dir = os.getenv("LOG_DIR") or os.path.join(root_dir, "logs")

    try:
        os.makedirs(logs_dir, exist_ok=True)
    except OSError as e:
        print(f"Failed to create log directory {logs_dir}: {e}", file=sys.stderr)
        logs_dir = None

    # Reset root logger handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s [%(name)s] [%(levelname)s] [%(process)d] %(message)s')

    # Console handler for stdout logging
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.setLevel(logging.INFO)
    root_logger.addHandler(console)

    if logs_dir is not None:
        app_handler = RotatingFileHandler(
            os.path.join(logs_dir, "lads_app.log"),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        app_handler.setFormatter(formatter)
        app_handler.setLevel(logging.INFO)
        root_logger.addHandler(app_handler)

        # Error-specific log file (WARNING and ERROR)
        error_handler = RotatingFileHandler(
            os.path.join(logs_dir, "lads_errors.log"),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        error_handler.setFormatter(formatter)
        error_handler.setLevel(logging.WARNING)
        root_logger.addHandler(error_handler)

    root_logger.setLevel(logging.INFO)

# deprecation_watch/log_setup.py
import logging
import os
from typing import Optional


def setup_logger(level_name: str = "INFO", log_path: Optional[str] = None) -> None:
    """Log to console, and to a file when ``log_path`` is set.

    The job runs inside a scheduled CI workflow, so the console handler carries
    every decision line at the configured level. The optional file handler is
    kept for runs outside CI where the console output is not retained.
    """
    root_level = getattr(logging, level_name.upper(), logging.INFO)
    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    root = logging.getLogger()
    # Avoid duplicate handlers when re-running in the same interpreter.
    root.handlers.clear()
    root.setLevel(root_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)

    if log_path:
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    # PyGithub and urllib3 are chatty at DEBUG
    for noisy in ("github", "urllib3"):
        logging.getLogger(noisy).setLevel(max(root_level, logging.INFO))

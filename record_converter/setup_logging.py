import logging, sys
from typing import TextIO

from record_converter.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


def setup_logging(level: str | None = None, stream: TextIO | None = None):
    """
    Attach a single stream handler to the root logger.
    Safe to call from both the HTTP app and the CLI; a second call only
    adjusts the level.
    """
    lvl = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(lvl)
    if root.handlers:  # don’t double add during reload
        return
    # CLI writes the document to stdout, so it passes stderr here
    h = logging.StreamHandler(stream or sys.stdout)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(h)

import logging
import sys


def setup_logging(level: int = logging.INFO, stream=None):
    # phase lines go to stdout, keep log records on stderr
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=stream or sys.stderr,
    )


logger = logging.getLogger("adaptive_lights")

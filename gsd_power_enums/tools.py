import logging
import sys


def setup_logger(debug: bool = False) -> None:
    """Set up global logging on stderr
    """
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("[%(levelname)s] [%(module)s] %(message)s"))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        handlers=[stream_handler],
        force=True,
    )

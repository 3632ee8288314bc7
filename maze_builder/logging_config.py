import logging
import sys

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(message)s"
LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int | str = logging.INFO) -> None:
    """configure the root logger, which all loggers in the logging module inherit

    `level` may be a level number or a name such as `"DEBUG"`. The level is
    applied even if the root logger already has handlers.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    logging.getLogger().setLevel(level)

import logging
from typing import Iterable


def setup_logging(
    level: int = logging.INFO,
    loggers: Iterable[str] = ("merkle_core", "merkle_sdk", "merkle_cli"),
) -> None:
    logging.basicConfig(level=level)
    for name in loggers:
        logging.getLogger(name).setLevel(level)

from __future__ import annotations
import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="<level>{level: <8}</level> {name} - {message}")
    logger.enable("pipecheck")

"""Defaults for the CLI and library, overridable from the environment."""
import logging
import os

COURSES_PER_STUDENT = int(os.getenv("EXAMSLOTS_COURSES_PER_STUDENT", "4"))
DEFAULT_ALGO = os.getenv("EXAMSLOTS_ALGO", "greedy")
LOG_LEVEL = os.getenv("EXAMSLOTS_LOG_LEVEL", "WARNING")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

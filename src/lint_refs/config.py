import logging
from typing import Literal

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    GITHUB_EVENT_NAME: str = ""
    GITHUB_EVENT_PATH: str = ""

    GITHUB_REF: str = ""
    GITHUB_REF_NAME: str = ""
    # "branch" or "tag", set on workflow_dispatch
    GITHUB_REF_TYPE: str = ""

    GITHUB_SHA: str = ""
    GITHUB_REPOSITORY: str = ""

    GITHUB_ENV: str = ""
    GITHUB_OUTPUT: str = ""

    OVERRIDE_LOGGING: Literal[
        "CRITICAL",
        "FATAL",
        "ERROR",
        "WARNING",
        "WARN",
        "INFO",
        "DEBUG",
        "NOTSET",
    ] = "INFO"

    def print_config(self):
        """Log the effective configuration at debug level"""
        logger.debug("=== lint-refs configuration ===")
        for field_name, field_value in self.model_dump().items():
            logger.debug("%s: %r", field_name, field_value)
        logger.debug("===============================")

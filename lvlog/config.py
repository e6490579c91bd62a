""" This module defines the Config used to build the default logger from the environment """
import os
from typing import NamedTuple, Optional

from lvlog.logger.level import Severity
from lvlog.logger.logger import Logger
from lvlog.sink import ConsoleSink, FileSink

DEFAULT_LOG_LEVEL = "info"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """
    Parses a boolean environment value. Returns None when the value is unset, empty or not
    recognized, meaning the caller should decide
    """
    value = (value or "").strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


class Config(NamedTuple):
    """ Config defines the parameters used to construct a logger """

    level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    color: Optional[bool] = None

    def with_mutations(self, **kwargs) -> "Config":
        """ Returns a new Config object with the modified properties """
        return Config(
            level=kwargs.get("level", self.level),
            log_file=kwargs.get("log_file", self.log_file),
            color=kwargs.get("color", self.color),
        )


def get_config() -> Config:
    """
    get_config returns the logging configuration, taking values from environment variables
    when available to override the defaults
    """
    return Config(
        level=os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        log_file=os.environ.get("LOG_FILE") or None,
        color=parse_bool(os.environ.get("LOG_COLOR")),
    )


def new_logger(config: Config) -> Logger:
    """
    Creates a Logger writing to standard error and, if configured, to a log file. Raises
    InvalidLevelError if the configured level is not recognized
    """
    level = Severity.from_string(config.level)
    sinks = [ConsoleSink(color=config.color)]
    if config.log_file:
        sinks.append(FileSink(config.log_file))
    return Logger(level, *sinks)

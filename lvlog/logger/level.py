""" This module defines the log severities and corresponding utilities """
import enum

from colorama import Fore, Style


class InvalidLevelError(ValueError):
    """ Raised when a level string does not name a known severity """

    def __init__(self, level):
        super().__init__("invalid log level: {!r}".format(level))
        self.level = level


@enum.unique
class Severity(enum.IntEnum):
    """ Severity defines the different log levels, ordered from least to most severe """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    def __str__(self):
        return self.name

    @property
    def tag(self) -> str:
        """ Returns the bracketed tag that prefixes every line at this severity """
        return "[" + self.name + "]"

    @property
    def color(self) -> str:
        """ Returns the corresponding text color for each severity """
        return [Fore.LIGHTWHITE_EX, Fore.LIGHTBLUE_EX, Fore.YELLOW, Fore.LIGHTRED_EX, Style.BRIGHT + Fore.RED][
            int(self.value)
        ]

    @staticmethod
    def from_string(level_str: str) -> "Severity":
        """
        Returns the Severity named by the given level string. Matching ignores case and
        surrounding whitespace, and "warning" is accepted as an alias for "warn". Raises
        InvalidLevelError if the string names no severity
        """
        name = (level_str or "").strip().lower() if isinstance(level_str, str) else None
        if name == "warning":
            name = "warn"
        for level in Severity:
            if level.name.lower() == name:
                return level
        raise InvalidLevelError(level_str)

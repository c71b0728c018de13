"""
Envy Errors
===========

Exception hierarchy raised by the envy bootstrap.

Every error derives from `EnvyError`, so embedding code can abort
startup with a single `except EnvyError` clause. I/O and parsing
failures are translated at the loader boundary and keep the original
exception both as an attribute and as `__cause__`.
"""

from pathlib import Path
from typing import Optional, Union


class EnvyError(Exception):
    """Base class for all envy errors."""


class FileNotFound(EnvyError):
    """
    A requirement store or override file could not be opened.

    Attributes
    ----------
    path : Path
        File that was being read.
    error : OSError
        Underlying I/O error.
    """

    def __init__(self, path: Union[str, Path], error: OSError):
        self.path = Path(path)
        self.error = error
        super().__init__(f"Unable to read {self.path}: {error.strerror or error}")


class UnknownEnvironment(EnvyError):
    """The requirement store has no section for the active environment."""

    def __init__(self, environment: str):
        self.environment = environment
        super().__init__(f"No configuration found for environment {environment}")


class MissingVariable(EnvyError, NameError):
    """
    A required environment variable is not set.

    The message is the requirement's custom message when one is
    configured, otherwise a generated one naming the variable.
    """

    def __init__(self, name: str, message: Optional[str] = None):
        self.variable = name
        if message is None:
            message = f"Required environment variable {name} is undefined"
        self.message = message
        super().__init__(self.message)


class InvalidConfiguration(EnvyError):
    """A requirement store or override file cannot be parsed."""

    def __init__(self, path: Union[str, Path], detail: str):
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Invalid configuration file {self.path}: {detail}")

"""
Active environment resolution.
"""

import os

from .defaults import DEFAULT_ENVIRONMENT, ENVIRONMENT_VARIABLES


def environment() -> str:
    """
    Return the name of the active deployment environment.

    The variables in `ENVIRONMENT_VARIABLES` are checked in order and
    the first non-empty value is returned. Falls back to
    `DEFAULT_ENVIRONMENT` when none is set.
    """
    for variable in ENVIRONMENT_VARIABLES:
        value = os.environ.get(variable)
        if value:
            return value
    return DEFAULT_ENVIRONMENT

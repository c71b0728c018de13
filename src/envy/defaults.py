"""
Envy Defaults
=============

Centralizes the fixed names and locations used by the envy bootstrap.

This module is the single source of truth for:

- The default requirement store location
- The default environment name
- The process environment variables consulted when resolving
  the active environment
"""

import os
from pathlib import Path


# =============================================================================
# Requirement Store
# =============================================================================

# Relative to the current working directory of the process.
DEFAULT_CONFIG_FILE = Path("config") / "envars.yml"

# Overrides DEFAULT_CONFIG_FILE when `init` receives no explicit `config`.
CONFIG_FILE_VARIABLE = "ENVY_CONFIG"


# =============================================================================
# Environment Resolution
# =============================================================================

DEFAULT_ENVIRONMENT = "production"

# Consulted in priority order; the first non-empty value wins.
ENVIRONMENT_VARIABLES = ("RACK_ENV", "RAILS_ENV")


def default_config_file() -> Path:
    """
    Return the requirement store path used when none is given explicitly.
    """
    configured = os.environ.get(CONFIG_FILE_VARIABLE)
    if configured:
        return Path(configured)
    return DEFAULT_CONFIG_FILE

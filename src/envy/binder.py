"""
Validator / Binder
==================

Startup entry point of envy.

`init` validates that every environment variable declared for the
active environment is set and publishes the values as bindings.

Pipeline:
clear old bindings → override file → environment → requirements → bind

Failure policy
--------------
- Every error propagates to the caller; nothing is retried.
- Validation stops at the first missing variable. Bindings published
  earlier in the same pass are kept.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from .defaults import default_config_file
from .env_loader import load_overrides
from .environment import environment as resolve_environment
from .errors import MissingVariable
from .registry import BindingRegistry, registry as default_registry
from .requirements import Requirement, load_requirements
from .sinks import PropertySink

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def init(
    parse: Optional[PathLike] = None,
    use: Optional[PropertySink] = None,
    config: Optional[PathLike] = None,
    environment: Optional[str] = None,
    registry: Optional[BindingRegistry] = None,
) -> List[Requirement]:
    """
    Validate the required environment variables and publish them.

    Parameters
    ----------
    parse : str or Path, optional
        Override file loaded into `os.environ` before validation.
    use : PropertySink, optional
        Receives `set_property(name.lower(), value)` for each
        validated variable.
    config : str or Path, optional
        Requirement store location. Defaults to `default_config_file()`.
    environment : str, optional
        Active environment name. Resolved from the process environment
        when omitted.
    registry : BindingRegistry, optional
        Registry to publish into. Defaults to the process-wide one.

    Returns
    -------
    List[Requirement]
        The requirements validated for the active environment.

    Raises
    ------
    FileNotFound
        If the override file or the requirement store cannot be read.
    InvalidConfiguration
        If the requirement store cannot be parsed.
    UnknownEnvironment
        If the store has no section for the active environment.
    MissingVariable
        If a required variable is not set.
    """
    registry = default_registry if registry is None else registry
    registry.clear()

    if parse is not None:
        load_overrides(parse)

    env = environment if environment is not None else resolve_environment()
    location = config if config is not None else default_config_file()
    requirements = load_requirements(location, env)

    for requirement in requirements:
        _bind(requirement, registry, use)

    logger.info(
        "Validated %d environment variable(s) for %s", len(requirements), env
    )
    return requirements


def _bind(
    requirement: Requirement,
    registry: BindingRegistry,
    use: Optional[PropertySink],
) -> None:
    name = requirement.name
    value = os.environ.get(name)
    if value is None:
        raise MissingVariable(name, requirement.message)

    logger.debug("Publishing %s", name)
    registry.publish(name, value)
    if use is not None:
        use.set_property(name.lower(), value)

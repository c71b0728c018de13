"""
Requirement Store
=================

Models and loader for the declarative list of required environment
variables.

The store is a YAML mapping from environment name to an ordered list
of requirement records:

    production:
      - name: AWS_ACCESS_KEY
        message: Please provide AWS credentials.
      - name: HASHING_SALT
    development:
      - name: HASHING_SALT

Parsing is delegated to PyYAML; the result is validated into typed
`Requirement` models right away so the rest of the package never
handles raw mappings.

Dependencies
------------
- pyyaml
- pydantic
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import FileNotFound, InvalidConfiguration, UnknownEnvironment

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Requirement model
# --------------------------------------------------

class Requirement(BaseModel):
    """
    A declared need for one environment variable.

    Attributes
    ----------
    name : str
        Environment variable that must be set.
    message : Optional[str]
        Error text used instead of the generated one when the
        variable is missing.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    message: Optional[str] = None


RequirementStore = Dict[str, List[Requirement]]

_STORE_ADAPTER = TypeAdapter(Dict[str, Optional[List[Requirement]]])


# --------------------------------------------------
# Store loading
# --------------------------------------------------

def load_store(path: Union[str, Path]) -> RequirementStore:
    """
    Load every environment section of a requirement store.

    Parameters
    ----------
    path : str or Path
        Location of the YAML file.

    Returns
    -------
    RequirementStore
        Environment name mapped to its ordered requirements. An empty
        document yields an empty store and a `null` section yields an
        empty list.

    Raises
    ------
    FileNotFound
        If the file cannot be opened or read.
    InvalidConfiguration
        If the file is not valid YAML or does not match the store layout.
    """
    path = Path(path)

    try:
        with path.open("r", encoding="utf-8") as file:
            raw = yaml.safe_load(file)
    except OSError as exc:
        raise FileNotFound(path, exc) from exc
    except UnicodeDecodeError as exc:
        raise InvalidConfiguration(path, f"not valid UTF-8: {exc.reason}") from exc
    except yaml.YAMLError as exc:
        raise InvalidConfiguration(path, str(exc)) from exc

    if raw is None:
        return {}

    try:
        sections = _STORE_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise InvalidConfiguration(path, str(exc)) from exc

    return {env: list(requirements or []) for env, requirements in sections.items()}


def load_requirements(path: Union[str, Path], environment_name: str) -> List[Requirement]:
    """
    Load the requirements declared for one environment.

    Raises
    ------
    FileNotFound
        If the file cannot be opened or read.
    InvalidConfiguration
        If the store cannot be parsed.
    UnknownEnvironment
        If the store has no section named `environment_name`.
    """
    store = load_store(path)

    if environment_name not in store:
        raise UnknownEnvironment(environment_name)

    requirements = store[environment_name]
    logger.debug(
        "Loaded %d requirement(s) for %s from %s",
        len(requirements),
        environment_name,
        path,
    )
    return requirements

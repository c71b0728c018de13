"""
Override File Loader
====================

This module loads `NAME=value` pairs from a `.env`-style file into the
process environment.

It runs as an explicit step of `envy.init` before any requirement is
validated, so values from the file take part in that validation pass.

Dependencies
------------
- python-dotenv

Example
-------
>>> from envy.env_loader import load_overrides
>>> load_overrides(".env")
{'FOO': 'qux'}

Notes
-----
The file follows the python-dotenv grammar:

- Each line is split on the first `=`; existing variables are overwritten.
- Whitespace around the name and an unquoted value is trimmed, and a
  leading `export ` is ignored.
- In an unquoted value, a `#` preceded by whitespace starts a comment.
  Quote the value (`SALT="abc #def"`) to keep it.
- Single-quoted values are literal; double-quoted values decode
  backslash escapes.
- Lines without `=` carry no value and are skipped.
- Blank lines and `#` comments are ignored; `${VAR}` is kept literally.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Union

from dotenv import dotenv_values

from .errors import FileNotFound, InvalidConfiguration

logger = logging.getLogger(__name__)


# ==================================================
# Override loading
# ==================================================

def load_overrides(path: Union[str, Path]) -> Dict[str, str]:
    """
    Merge the pairs of an override file into `os.environ`.

    Parameters
    ----------
    path : str or Path
        Location of the override file.

    Returns
    -------
    Dict[str, str]
        Pairs written into the environment, in file order.

    Raises
    ------
    FileNotFound
        If the file cannot be opened or read.
    InvalidConfiguration
        If the file is not valid UTF-8.
    """
    path = Path(path)

    try:
        with path.open("r", encoding="utf-8") as stream:
            parsed = dotenv_values(stream=stream, interpolate=False)
    except OSError as exc:
        raise FileNotFound(path, exc) from exc
    except UnicodeDecodeError as exc:
        raise InvalidConfiguration(path, f"not valid UTF-8: {exc.reason}") from exc

    applied: Dict[str, str] = {}
    for name, value in parsed.items():
        if value is None:
            logger.debug("Skipping %s in %s: no '=' separator", name, path)
            continue
        os.environ[name] = value
        applied[name] = value

    logger.info("Loaded %d override(s) from %s", len(applied), path)
    return applied

"""easy_envar.utils.paths

Resolving where the dotfile lives.

All functions return absolute Paths.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv

DEFAULT_DOTENV_NAME = ".env"


def find_dotenv_path(filename: str = DEFAULT_DOTENV_NAME) -> Path:
    """Search the working directory, then each parent, for `filename`.

    Raises:
        IOError: no such file in the working directory or any parent.
    """
    found = find_dotenv(filename, raise_error_if_not_found=True, usecwd=True)
    return Path(found).resolve()


def resolve_dotenv_path(dotenv_path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve a dotfile path.

    - If `dotenv_path` is None/empty: search from the working directory upward.
    - If `dotenv_path` is relative: resolve it against the working directory.
    - If absolute: use it as-is.
    """
    if not dotenv_path:
        return find_dotenv_path()

    p = Path(dotenv_path)
    if p.is_absolute():
        return p

    return (Path.cwd() / p).resolve()

"""easy_envar.bootstrap

Loads the project's `.env` file into the process environment.

Call once, before loading any declared variable:

    from easy_envar.bootstrap import init
    init()

"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from dotenv.parser import parse_stream

from easy_envar.errors import DotfileError
from easy_envar.utils.logger import get_logger
from easy_envar.utils.paths import DEFAULT_DOTENV_NAME, resolve_dotenv_path

logger = get_logger(__name__)


def _check_dotfile(path: Path) -> None:
    """Raise DotfileError if the file cannot be read or has a malformed statement."""
    try:
        with path.open("r", encoding="utf-8") as f:
            bindings = list(parse_stream(f))
    except (OSError, UnicodeDecodeError) as exc:
        raise DotfileError(f"Could not read {path}: {exc}", path) from exc

    for binding in bindings:
        if binding.error:
            raise DotfileError(
                f"Could not parse statement starting at line {binding.original.line} of {path}",
                path,
            )


def init(dotenv_path: Optional[Union[str, Path]] = None, *, override: bool = False) -> Path:
    """Load a dotfile into `os.environ` and return its resolved path.

    Without `dotenv_path`, `.env` is searched for in the working directory and
    then its parents. Variables already set in the environment are kept unless
    `override` is True. A malformed file is rejected before any variable is set.

    Raises:
        DotfileError: the file is missing, unreadable or malformed.
    """
    try:
        path = resolve_dotenv_path(dotenv_path)
    except IOError as exc:
        raise DotfileError(f"{exc}: no {DEFAULT_DOTENV_NAME} in {Path.cwd()} or its parents") from exc

    _check_dotfile(path)

    load_dotenv(dotenv_path=path, override=override, encoding="utf-8")
    logger.debug("Loaded environment from %s", path)
    return path

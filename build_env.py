"""Build-script entrypoint.

Run:
    python build_env.py

Loads `.env`, reads the declared variables and prints one
`cargo:rustc-env=NAME=VALUE` directive per variable for the enclosing build.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

# Ensure repo root is on sys.path (helps when running the script from elsewhere).
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from easy_envar.bootstrap import init
from easy_envar.envar import Envar, export_all, load_all
from easy_envar.errors import EnvarError
from easy_envar.utils.logger import get_logger

logger = get_logger("easy_envar.build")

DECLARED: List[Envar] = [
    Envar.string("HOST"),
    Envar.u16("PORT"),
    Envar.u32("DATA"),
    Envar.boolean("SECURE"),
]


def main(envars: Optional[List[Envar]] = None) -> int:
    try:
        init()
        loaded = load_all(DECLARED if envars is None else envars)
    except EnvarError as exc:
        logger.error("%s", exc)
        return 1

    export_all(loaded)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Entry point for tools that load ttempdir dynamically.

A host imports this module and calls ``get_analyzers``. Flags are
passed the way they would be typed on the command line, e.g.
``get_analyzers("--all --max-recursion-level 10")``.
"""

import shlex
from typing import List

from .analyzer import TempDirAnalyzer
from .cli.flags import parse_flags


def get_analyzers(flags: str = "", flag_prefix: str = "") -> List[TempDirAnalyzer]:
    """Return the configured analyzers.

    Raises:
        ConfigError: If ``flags`` cannot be parsed
    """
    config = parse_flags(shlex.split(flags), prefix=flag_prefix)
    return [TempDirAnalyzer(config)]

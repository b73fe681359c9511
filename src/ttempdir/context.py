"""Context for passing state between CLI commands."""

from pathlib import Path
from typing import Optional

import click

from .config import AnalyzerConfig


class TTempdirContext:
    def __init__(self):
        self.config_path: Optional[Path] = None
        self.config: AnalyzerConfig = AnalyzerConfig()


pass_context = click.make_pass_decorator(TTempdirContext, ensure=True)
